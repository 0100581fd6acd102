"""
Normalisation des titres de releases.

Remplace les separateurs "." et "_" par des espaces et compacte les
espaces. C'est la seule transformation structurelle: le titre original
reste disponible pour les conditions sensibles a la ponctuation (DD+).
"""

import re

_SEPARATORS = re.compile(r"[._]")
_WHITESPACE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """
    Normalise un titre de release.

    Args:
        title: Titre brut (ex: "The.Matrix.1999.1080p")

    Returns:
        Titre avec des espaces comme separateurs (ex: "The Matrix 1999 1080p").
    """
    return _WHITESPACE.sub(" ", _SEPARATORS.sub(" ", title)).strip()
