# termstats/vocabulary.py
from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Tuple

from termstats.errors import TokenNotFound


class Vocabulary:
    """
    Vocabulaire construit à partir d'un ou plusieurs documents :
      - counts: mot -> nb d'occurrences cumulées
      - words:  mots uniques dans l'ordre de première apparition
      - total:  nb total de tokens ajoutés (répétitions comprises)
    L'itération suit toujours `words`, donc la sortie est reproductible d'une exécution à l'autre.
    """
    def __init__(self, tokens: Iterable[str] = ()):
        self.counts: Dict[str, int] = {}
        self.words: List[str] = []
        self.total: int = 0
        self.extend(tokens)

    @classmethod
    def from_documents(cls, documents) -> "Vocabulary":
        ## les documents sont ajoutés dans l'ordre du corpus (ordre de première apparition stable)
        vocab = cls()
        for doc in documents:
            vocab.extend(doc.tokens)
        return vocab

    def extend(self, tokens: Iterable[str]) -> None:
        for t in tokens:
            c = self.counts.get(t)
            if c is None:
                self.counts[t] = 1
                self.words.append(t)
            else:
                self.counts[t] = c + 1
            self.total += 1

    def frequency(self, token: str) -> int:
        try:
            return self.counts[token]
        except KeyError:
            raise TokenNotFound(token) from None

    def total_count(self) -> int:
        return self.total

    def most_common(self, n: int | None = None) -> List[Tuple[str, int]]:
        # tri stable : à égalité, l'ordre de première apparition est conservé
        ranked = sorted(((w, self.counts[w]) for w in self.words), key=lambda x: x[1], reverse=True)
        return ranked if n is None else ranked[:n]

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, token: object) -> bool:
        return token in self.counts

    def __repr__(self) -> str:
        return f"Vocabulary(unique={len(self.words)}, total={self.total})"
