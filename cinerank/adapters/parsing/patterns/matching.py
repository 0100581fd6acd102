"""
Outils communs aux extracteurs de motifs.

Chaque extracteur est une liste ordonnee de regles (motif compile, valeur).
La premiere regle qui correspond gagne: l'ordre encode la precedence.
"""

import re
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

PatternRule = tuple[re.Pattern[str], T]


@dataclass(frozen=True)
class PatternMatch(Generic[T]):
    """
    Resultat d'un extracteur.

    Attributs:
        value: Valeur canonique detectee
        matched_text: Texte ayant correspondu
        index: Position de la correspondance dans le titre normalise
    """

    value: T
    matched_text: str
    index: int


def rules(value: T, *patterns: str) -> list[PatternRule]:
    """Compile plusieurs motifs (insensibles a la casse) pour une meme valeur."""
    return [(re.compile(pattern, re.IGNORECASE), value) for pattern in patterns]


def first_match(pattern_rules: list[PatternRule], text: str) -> Optional[PatternMatch]:
    """Retourne la premiere regle qui correspond, dans l'ordre de la liste."""
    for pattern, value in pattern_rules:
        match = pattern.search(text)
        if match:
            return PatternMatch(value=value, matched_text=match.group(0), index=match.start())
    return None
