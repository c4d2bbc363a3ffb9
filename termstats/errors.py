# termstats/errors.py
from __future__ import annotations


class TermStatsError(Exception):
    """Erreur de base du pipeline (tokenisation -> vocabulaire -> scores)."""


class InputUnavailable(TermStatsError, OSError):
    ## le texte d'un document n'a pas pu être lu
    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        msg = f"Texte illisible: {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class TokenNotFound(TermStatsError, KeyError):
    ## frequency() sur un mot jamais ajouté au vocabulaire : erreur d'appel, pas un 0
    def __init__(self, token: str):
        self.token = token
        super().__init__(token)

    def __str__(self) -> str:
        return f"Mot absent du vocabulaire: {self.token!r}"


class InvariantViolation(TermStatsError):
    """
    Vocabulaire et matrice construits sur des ensembles de documents différents
    (ex: un mot du vocabulaire présent dans aucun document).
    """
    def __init__(self, message: str, token: str | None = None):
        self.token = token
        super().__init__(message)
