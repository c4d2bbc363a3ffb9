# termstats/preprocess.py
from __future__ import annotations
import unicodedata
from itertools import groupby ## découpe le texte en suites de caractères alphabétiques / non alphabétiques
from typing import Callable, Iterable, List, Optional

from nltk.stem import PorterStemmer
from unidecode import unidecode ## translittération ASCII (é -> e)

## un stemmer est n'importe quelle fonction mot -> racine
Stemmer = Callable[[str], str]

## mots outils anglais très fréquents mais peu informatifs
DEFAULT_STOP_WORDS = frozenset(
    """ a an as are and the via for is or in of it to on by """.split()
)


def porter_stemmer() -> Stemmer:
    # algorithme de Porter d'origine (sans les extensions NLTK)
    porter = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)

    def stem(word: str) -> str:
        ## comme le Porter de référence : les mots de 1 ou 2 lettres ne sont pas touchés (ex: "s", "us")
        return word if len(word) <= 2 else porter.stem(word)

    return stem


def _lower(c: str) -> str:
    low = c.lower()
    if len(low) == 1:
        return low
    ## minuscule sur plusieurs caractères (ex: "İ" -> "i" + point combinant) : on garde les lettres
    letters = "".join(x for x in unicodedata.normalize("NFKD", low) if x.isalpha())
    return letters or low


class TextPreprocessor:
    """
    Transforme un texte brut en une suite ordonnée de mots normalisés :
      - lettres uniquement (str.isalpha), en minuscules
      - stop words retirés (avant le stemming)
      - stemming optionnel
    """
    ## options : stemming activé/désactivé, liste de stop words, stemmer injecté, suppression des accents
    def __init__(
        self,
        use_stemming: bool = True,
        stop_words: Optional[Iterable[str]] = None,
        stemmer: Optional[Stemmer] = None,
        strip_accents: bool = False,
    ):
        self.use_stemming = use_stemming
        self.strip_accents = strip_accents
        ## None -> liste par défaut ; liste vide -> pas de filtrage
        if stop_words is None:
            stop_words = DEFAULT_STOP_WORDS
        self.stop_words = frozenset(w.lower() for w in stop_words)
        if stemmer is None and use_stemming:
            stemmer = porter_stemmer()
        self.stemmer = stemmer

    def normalize(self, text: str) -> str:
        return unidecode(text) if self.strip_accents else text

    def tokenize(self, text: str) -> List[str]:
        ## un seul passage de gauche à droite : on saute les suites non alphabétiques,
        ## chaque suite alphabétique maximale devient un mot en minuscules
        return [
            "".join(_lower(c) for c in run)
            for is_alpha, run in groupby(text, key=str.isalpha)
            if is_alpha
        ]

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def filter_tokens(self, tokens: List[str]) -> List[str]:
        return [t for t in tokens if not self.is_stop_word(t)]

    def stem(self, tokens: List[str]) -> List[str]:
        # Si le stemming est désactivé, on renvoie tel quel
        if not self.use_stemming:
            return tokens
        out: List[str] = []
        for t in tokens:
            # un token n'est jamais perdu : racine vide -> mot non racinisé
            out.append(self.stemmer(t) or t)
        return out

    def process(self, text: str) -> List[str]:
        # Stratégie : normaliser -> tokeniser -> filtrer -> stem
        # le filtre passe avant le stem : les stop words sont des mots non racinisés
        text = self.normalize(text)
        tokens = self.tokenize(text)
        tokens = self.filter_tokens(tokens)
        tokens = self.stem(tokens)
        return tokens
