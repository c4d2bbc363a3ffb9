# termstats/config.py
from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np


@dataclass
class CorpusConfig:
    """
    Description du corpus thématique :
      - theme_names:        nom de chaque thème
      - theme_text_counts:  nb de textes par thème
      - membership:         matrice thème x document (0/1), optionnelle
      - text_dir:           dossier des fichiers "{thème}_{texte}.txt"
    Sans matrice explicite, les documents sont rangés par blocs contigus dans l'ordre des thèmes.
    """
    theme_names: List[str]
    theme_text_counts: List[int]
    membership: Optional[List[List[int]]] = None
    text_dir: str = "text"
    _matrix: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.theme_names = list(self.theme_names)
        self.theme_text_counts = [int(c) for c in self.theme_text_counts]
        if len(self.theme_names) != len(self.theme_text_counts):
            raise ValueError(
                f"{len(self.theme_names)} thèmes mais {len(self.theme_text_counts)} nombres de textes."
            )
        if any(c < 0 for c in self.theme_text_counts):
            raise ValueError("Un nombre de textes par thème ne peut pas être négatif.")

        if self.membership is None:
            self._matrix = self._block_matrix()
        else:
            self._matrix = np.asarray(self.membership, dtype=np.int32)
            self._check_membership()

    # ---------- matrice thème x document ----------
    def _block_matrix(self) -> np.ndarray:
        m = np.zeros((len(self.theme_names), self.text_count), dtype=np.int32)
        start = 0
        for theme, count in enumerate(self.theme_text_counts):
            m[theme, start:start + count] = 1
            start += count
        return m

    def _check_membership(self) -> None:
        m = self._matrix
        if m.ndim != 2 or m.shape != (len(self.theme_names), self.text_count):
            raise ValueError(
                f"Matrice thème x document de forme {m.shape}, "
                f"attendu {(len(self.theme_names), self.text_count)}."
            )
        if not np.isin(m, (0, 1)).all():
            raise ValueError("La matrice thème x document ne doit contenir que des 0 et des 1.")
        # chaque document appartient à exactement un thème
        per_doc = m.sum(axis=0)
        bad = np.flatnonzero(per_doc != 1)
        if bad.size:
            raise ValueError(f"Document {int(bad[0])} rattaché à {int(per_doc[bad[0]])} thèmes (attendu 1).")
        if m.sum(axis=1).tolist() != self.theme_text_counts:
            raise ValueError("La matrice thème x document ne correspond pas aux nombres de textes par thème.")

    @property
    def theme_count(self) -> int:
        return len(self.theme_names)

    @property
    def text_count(self) -> int:
        return sum(self.theme_text_counts)

    def membership_matrix(self) -> np.ndarray:
        return self._matrix.copy()

    def document_themes(self) -> List[int]:
        ## thème de chaque document, dans l'ordre du corpus
        if not self.text_count:
            return []
        return [int(t) for t in self._matrix.argmax(axis=0)]

    def theme_documents(self, theme: int) -> List[int]:
        return [int(d) for d in np.flatnonzero(self._matrix[theme])]

    def document_names(self) -> List[str]:
        """
        Nom de fichier de chaque document, dans l'ordre du corpus.
        Ex: le 2e texte du 1er thème -> "1_2.txt"
        """
        names = []
        seen = [0] * self.theme_count
        for theme in self.document_themes():
            seen[theme] += 1
            names.append(f"{theme + 1}_{seen[theme]}.txt")
        return names


## corpus de démonstration : documentation Rust, wiki sur les lexers, le Hobbit
DEFAULT_CONFIG = CorpusConfig(
    theme_names=["rust_docs", "lex_wiki", "hobbit_book"],
    theme_text_counts=[3, 4, 3],
)


def load_config(path: str | Path, text_dir: Optional[str] = None) -> CorpusConfig:
    """
    Lit un fichier JSON de la forme :
      {"themes": ["a", "b"], "text_counts": [2, 3], "membership": [[...], [...]], "text_dir": "text"}
    "membership" et "text_dir" sont optionnels.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    try:
        names: Sequence[str] = data["themes"]
        counts: Sequence[int] = data["text_counts"]
    except KeyError as e:
        raise ValueError(f"Clé manquante dans {path}: {e.args[0]}") from e
    return CorpusConfig(
        theme_names=list(names),
        theme_text_counts=list(counts),
        membership=data.get("membership"),
        text_dir=text_dir or data.get("text_dir", "text"),
    )
