"""
Registre des formats personnalises integres.

L'ordre du registre est stable: c'est l'ordre dans lequel les formats
correspondants apparaissent dans un resultat de scoring.
"""

from typing import Optional

from cinerank.core.value_objects.custom_format import CustomFormat, FormatCategory
from cinerank.services.formats.audio import AUDIO_FORMATS
from cinerank.services.formats.banned import ALL_BANNED_FORMATS
from cinerank.services.formats.enhancement import ALL_ENHANCEMENT_FORMATS
from cinerank.services.formats.groups import ALL_GROUP_TIER_FORMATS
from cinerank.services.formats.hdr import HDR_FORMATS
from cinerank.services.formats.low_quality import LOW_QUALITY_FORMATS
from cinerank.services.formats.micro import MICRO_FORMATS
from cinerank.services.formats.resolution import ALL_RESOLUTION_FORMATS
from cinerank.services.formats.streaming import ALL_STREAMING_FORMATS

ALL_FORMATS: list[CustomFormat] = [
    *ALL_RESOLUTION_FORMATS,
    *ALL_GROUP_TIER_FORMATS,
    *AUDIO_FORMATS,
    *HDR_FORMATS,
    *ALL_STREAMING_FORMATS,
    *MICRO_FORMATS,
    *LOW_QUALITY_FORMATS,
    *ALL_BANNED_FORMATS,
    *ALL_ENHANCEMENT_FORMATS,
]

FORMAT_BY_ID: dict[str, CustomFormat] = {fmt.id: fmt for fmt in ALL_FORMATS}


def get_format(format_id: str) -> Optional[CustomFormat]:
    """Retourne un format integre par son identifiant."""
    return FORMAT_BY_ID.get(format_id)


def get_formats_by_category(category: FormatCategory) -> list[CustomFormat]:
    """Retourne les formats integres d'une categorie, dans l'ordre du registre."""
    return [fmt for fmt in ALL_FORMATS if fmt.category is category]


def get_formats_by_tag(tag: str) -> list[CustomFormat]:
    """Retourne les formats portant une etiquette (comparaison insensible a la casse)."""
    wanted = tag.lower()
    return [fmt for fmt in ALL_FORMATS if any(t.lower() == wanted for t in fmt.tags)]


__all__ = [
    "ALL_FORMATS",
    "FORMAT_BY_ID",
    "get_format",
    "get_formats_by_category",
    "get_formats_by_tag",
]
