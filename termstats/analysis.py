# termstats/analysis.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from tqdm import tqdm

from termstats.config import DEFAULT_CONFIG, CorpusConfig
from termstats.corpus import CorpusReader, Document
from termstats.preprocess import TextPreprocessor
from termstats.scoring import (
    WordDocumentMatrix,
    inverse_document_frequency,
    term_frequency,
    tf_idf,
    top_terms,
    word_document_matrix,
)
from termstats.vocabulary import Vocabulary

logger = logging.getLogger(__name__)


@dataclass
class DocumentScores:
    document: Document
    vocabulary: Vocabulary
    tf: Dict[str, float]
    tf_idf: Dict[str, float]


@dataclass
class CorpusAnalysis:
    """
    Résultat d'une exécution :
      - documents:  documents tokenisés, dans l'ordre du corpus
      - vocabulary: vocabulaire de tout le corpus
      - matrix:     matrice mot x document
      - idf:        mot -> idf
      - scores:     tf et tf-idf de chaque document (même ordre que documents)
    """
    config: CorpusConfig
    documents: List[Document]
    vocabulary: Vocabulary
    matrix: WordDocumentMatrix
    idf: Dict[str, float]
    scores: List[DocumentScores]

    def documents_for_theme(self, theme: int) -> List[Document]:
        return [d for d in self.documents if d.theme == theme]

    def distinctive_terms(self, document_index: int, n: int = 10) -> List[Tuple[str, float]]:
        return top_terms(self.scores[document_index].tf_idf, n)


class ThemeAnalyzer:
    def __init__(self, config: CorpusConfig = DEFAULT_CONFIG, preproc: Optional[TextPreprocessor] = None):
        self.config = config
        self.preproc = preproc or TextPreprocessor(use_stemming=True)

    def load_documents(self, texts: Optional[Iterable[Tuple[str, int, str]]] = None) -> List[Document]:
        ## sans textes fournis, on lit les fichiers du corpus
        if texts is None:
            texts = CorpusReader(self.config).iter_texts()
        docs = []
        for name, theme, text in tqdm(list(texts), desc="Tokenisation", disable=None):
            if not 0 <= theme < self.config.theme_count:
                raise ValueError(
                    f"Document {name}: thème {theme} hors de la configuration ({self.config.theme_count} thèmes)."
                )
            doc = Document.from_text(name, theme, text, self.preproc)
            logger.debug("%s (thème %d): %d tokens", name, theme, len(doc))
            docs.append(doc)
        return docs

    def analyze(self, documents: List[Document]) -> CorpusAnalysis:
        # 1) vocabulaire du corpus, documents ajoutés dans l'ordre du corpus
        vocab = Vocabulary.from_documents(documents)
        logger.info("Vocabulaire: %d mots uniques, %d tokens", len(vocab), vocab.total_count())

        # 2) matrice mot x document -> idf
        matrix = word_document_matrix(vocab, documents)
        idf = inverse_document_frequency(matrix)

        # 3) tf puis tf-idf par document
        scores = []
        for doc in documents:
            doc_vocab = Vocabulary(doc.tokens)
            tf = term_frequency(doc_vocab)
            scores.append(DocumentScores(doc, doc_vocab, tf, tf_idf(tf, idf)))

        return CorpusAnalysis(
            config=self.config,
            documents=list(documents),
            vocabulary=vocab,
            matrix=matrix,
            idf=idf,
            scores=scores,
        )

    def run(self) -> CorpusAnalysis:
        logger.info("Analyse de %d documents (%d thèmes)", self.config.text_count, self.config.theme_count)
        return self.analyze(self.load_documents())
