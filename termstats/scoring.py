# termstats/scoring.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np
from scipy.sparse import csr_matrix

from termstats.corpus import Document
from termstats.errors import InvariantViolation
from termstats.vocabulary import Vocabulary

logger = logging.getLogger(__name__)


@dataclass
class WordDocumentMatrix:
    """
    Matrice mot x document :
      - words:     lignes, dans l'ordre du vocabulaire du corpus
      - documents: colonnes, dans l'ordre du corpus
      - counts:    counts[i, j] = nb d'occurrences de words[i] dans le document j
    """
    words: List[str]
    documents: List[str]
    counts: np.ndarray

    @property
    def shape(self) -> Tuple[int, int]:
        return self.counts.shape

    def row(self, word: str) -> np.ndarray:
        return self.counts[self.words.index(word)]

    def presence(self) -> np.ndarray:
        ## forme booléenne : le mot apparaît-il au moins une fois dans le document ?
        return self.counts > 0

    def document_frequency(self) -> np.ndarray:
        # df: nombre de documents contenant chaque mot
        return self.presence().sum(axis=1)

    def to_csr(self) -> csr_matrix:
        return csr_matrix(self.counts)


# ---------- Construction de la matrice mot x document ----------
def word_document_matrix(vocabulary: Vocabulary, documents: Sequence[Document]) -> WordDocumentMatrix:
    counts = np.zeros((len(vocabulary), len(documents)), dtype=np.int64)
    for i, word in enumerate(vocabulary):
        for j, doc in enumerate(documents):
            # parcours linéaire des tokens du document pour chaque couple (mot, document)
            counts[i, j] = doc.tokens.count(word)
    logger.debug("Matrice mot x document: %d mots x %d documents", *counts.shape)
    return WordDocumentMatrix(
        words=list(vocabulary),
        documents=[d.name for d in documents],
        counts=counts,
    )


# ---------- IDF ----------
def inverse_document_frequency(matrix: WordDocumentMatrix) -> Dict[str, float]:
    """
    idf(t) = N / df(t) : simple rapport, pas de logarithme.
    Vaut N pour un mot présent dans un seul document, 1 pour un mot présent partout.
    """
    n_docs = len(matrix.documents)
    df = matrix.document_frequency()
    idf: Dict[str, float] = {}
    for word, d in zip(matrix.words, df):
        if d == 0:
            # vocabulaire et matrice construits sur des documents différents
            raise InvariantViolation(
                f"Le mot {word!r} n'apparaît dans aucun des {n_docs} documents de la matrice.",
                token=word,
            )
        idf[word] = n_docs / int(d)
    return idf


# ---------- TF ----------
def term_frequency(vocabulary: Vocabulary) -> Dict[str, float]:
    ## tf(t, d) = occurrences de t dans d / nb total de tokens de d
    total = vocabulary.total_count()
    return {w: vocabulary.frequency(w) / total for w in vocabulary}


# ---------- TF-IDF ----------
def tf_idf(tf_scores: Dict[str, float], idf_scores: Dict[str, float]) -> Dict[str, float]:
    # alignement par mot, pas par position : l'ordre du document n'est pas celui du corpus
    out: Dict[str, float] = {}
    for word, tf in tf_scores.items():
        idf = idf_scores.get(word)
        if idf is None:
            raise InvariantViolation(f"Pas d'IDF pour le mot {word!r} : document hors du corpus ?", token=word)
        out[word] = tf * idf
    return out


def top_terms(scores: Dict[str, float], n: int = 10) -> List[Tuple[str, float]]:
    ## scores décroissants ; à égalité, l'ordre d'insertion (première apparition) est gardé
    return sorted(scores.items(), key=lambda x: x[1], reverse=True)[:n]
