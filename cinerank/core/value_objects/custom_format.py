"""
Objets valeur des formats personnalises (custom formats).

Un CustomFormat est une regle declarative: un ensemble de conditions
evaluees contre une release parsee et son titre brut. Les conditions
obligatoires forment une porte commune, les conditions optionnelles
forment un groupe d'alternatives (ex: les groupes d'un meme tier).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cinerank.core.value_objects.release import Codec, HdrFormat, Resolution, Source


class ConditionType(Enum):
    """Type de condition evaluee par le moteur de formats."""

    RELEASE_TITLE = "release_title"
    RELEASE_GROUP = "release_group"
    RESOLUTION = "resolution"
    SOURCE = "source"
    CODEC = "codec"
    HDR = "hdr"
    LANGUAGE = "language"


class FormatCategory(Enum):
    """Categorie d'un format, utilisee pour le detail des scores."""

    RESOLUTION = "resolution"
    RELEASE_GROUP_TIER = "release_group_tier"
    AUDIO = "audio"
    HDR = "hdr"
    STREAMING = "streaming"
    MICRO = "micro"
    LOW_QUALITY = "low_quality"
    BANNED = "banned"
    ENHANCEMENT = "enhancement"
    CODEC = "codec"
    OTHER = "other"


@dataclass(frozen=True)
class FormatCondition:
    """
    Condition elementaire d'un format.

    Seul le champ cible correspondant au type est renseigne:
    pattern pour release_title/release_group, resolution, source,
    codec, hdr ou language (code ISO) pour les autres.

    Attributs:
        name: Nom affichable
        type: Type de condition
        required: True = doit correspondre (ET), False = alternative (OU)
        negate: Inverse le resultat avant combinaison
    """

    name: str
    type: ConditionType
    required: bool = True
    negate: bool = False
    pattern: Optional[str] = None
    resolution: Optional[Resolution] = None
    source: Optional[Source] = None
    codec: Optional[Codec] = None
    hdr: Optional[HdrFormat] = None
    language: Optional[str] = None


@dataclass(frozen=True)
class CustomFormat:
    """
    Format personnalise nomme.

    Attributs:
        id: Identifiant unique (cle des surcharges de score des profils)
        name: Nom affichable
        category: Categorie du format
        default_score: Score applique si le profil ne le surcharge pas
        conditions: Conditions a evaluer
        tags: Etiquettes libres pour le filtrage
        description: Description optionnelle
    """

    id: str
    name: str
    category: FormatCategory
    default_score: int = 0
    conditions: tuple[FormatCondition, ...] = ()
    tags: tuple[str, ...] = ()
    description: Optional[str] = None


@dataclass(frozen=True)
class ConditionMatchResult:
    """Resultat d'une condition: brut (avant negate) et final."""

    condition: FormatCondition
    raw_match: bool
    matches: bool


@dataclass(frozen=True)
class MatchedFormat:
    """Format ayant correspondu, avec le detail de ses conditions."""

    format: CustomFormat
    condition_results: tuple[ConditionMatchResult, ...] = ()
