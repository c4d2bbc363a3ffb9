# termstats/corpus.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from termstats.config import CorpusConfig
from termstats.errors import InputUnavailable
from termstats.preprocess import TextPreprocessor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """Un texte du corpus : ses tokens (répétitions comprises) et l'index de son thème."""
    name: str
    theme: int
    tokens: Tuple[str, ...]

    @classmethod
    def from_text(cls, name: str, theme: int, text: str, preproc: TextPreprocessor) -> "Document":
        return cls(name=name, theme=theme, tokens=tuple(preproc.process(text)))

    def __len__(self) -> int:
        return len(self.tokens)


class CorpusReader:
    """
    Lit les fichiers texte du corpus décrit par un CorpusConfig.
    Les fichiers sont nommés "{thème}_{texte}.txt" (numérotés à partir de 1).
    """
    def __init__(self, config: CorpusConfig, text_dir: str | Path | None = None):
        self.config = config
        self.text_dir = Path(text_dir if text_dir is not None else config.text_dir)
        self.files = config.document_names()

    ## len() retourne ici le nombre de documents attendus
    def __len__(self) -> int:
        return len(self.files)

    def path(self, name: str) -> Path:
        return self.text_dir / name

    def read(self, name: str) -> str:
        path = self.path(name)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise InputUnavailable(path, "fichier absent") from e
        except UnicodeDecodeError as e:
            raise InputUnavailable(path, "encodage non UTF-8") from e
        except OSError as e:
            raise InputUnavailable(path, e.strerror or str(e)) from e

    def iter_texts(self) -> List[Tuple[str, int, str]]:
        ## triplets (nom, thème, texte) dans l'ordre du corpus
        triples = []
        for name, theme in zip(self.files, self.config.document_themes()):
            logger.debug("Lecture de %s", self.path(name))
            triples.append((name, theme, self.read(name)))
        return triples
