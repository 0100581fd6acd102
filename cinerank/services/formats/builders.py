"""
Constructeurs de conditions et de formats pour le registre integre.

Les formats integres sont des donnees: ces helpers evitent de repeter
les memes champs pour chaque condition.
"""

from typing import Iterable, Optional

from cinerank.core.value_objects.custom_format import (
    ConditionType,
    CustomFormat,
    FormatCategory,
    FormatCondition,
)
from cinerank.core.value_objects.release import Resolution, Source

REMUX_PATTERN = r"\bRemux\b"
HEVC_PATTERN = r"\b(?:x265|HEVC|H\.?265)\b"


def resolution_is(resolution: Resolution) -> FormatCondition:
    """Condition obligatoire sur la resolution parsee."""
    return FormatCondition(
        name=resolution.value, type=ConditionType.RESOLUTION, resolution=resolution
    )


def source_is(source: Source) -> FormatCondition:
    """Condition obligatoire sur la source parsee."""
    return FormatCondition(name=source.value, type=ConditionType.SOURCE, source=source)


def title_matches(name: str, pattern: str, required: bool = True) -> FormatCondition:
    """Condition sur le titre brut."""
    return FormatCondition(
        name=name, type=ConditionType.RELEASE_TITLE, pattern=pattern, required=required
    )


def title_excludes(name: str, pattern: str) -> FormatCondition:
    """Condition obligatoire: le titre brut ne doit PAS contenir le motif."""
    return FormatCondition(
        name=name, type=ConditionType.RELEASE_TITLE, pattern=pattern, negate=True
    )


def group_is(name: str, pattern: Optional[str] = None, required: bool = False) -> FormatCondition:
    """Condition sur le groupe (correspondance exacte du nom par defaut)."""
    return FormatCondition(
        name=name,
        type=ConditionType.RELEASE_GROUP,
        pattern=pattern or f"^{name}$",
        required=required,
    )


NOT_REMUX = title_excludes("Not Remux", REMUX_PATTERN)


def group_tier(
    format_id: str,
    name: str,
    gate: Iterable[FormatCondition],
    groups: Iterable[str],
    tags: Iterable[str] = (),
    description: Optional[str] = None,
) -> CustomFormat:
    """
    Construit un tier de groupes de release.

    Args:
        format_id: Identifiant du format
        name: Nom affichable
        gate: Conditions obligatoires communes (resolution, source...)
        groups: Noms de groupes alternatifs du tier
        tags: Etiquettes
        description: Description optionnelle
    """
    return CustomFormat(
        id=format_id,
        name=name,
        category=FormatCategory.RELEASE_GROUP_TIER,
        conditions=(*gate, *(group_is(group) for group in groups)),
        tags=tuple(tags),
        description=description,
    )


def named_group(
    format_id: str,
    group: str,
    category: FormatCategory,
    title_pattern: Optional[str] = None,
    default_score: int = 0,
) -> CustomFormat:
    """
    Format identifiant un groupe precis.

    Si title_pattern est fourni, le groupe OU le motif dans le titre
    suffit (utile pour les suffixes d'indexeurs comme "YTS.MX").
    """
    if title_pattern is None:
        conditions: tuple[FormatCondition, ...] = (group_is(group, required=True),)
    else:
        conditions = (group_is(group), title_matches(group, title_pattern, required=False))
    return CustomFormat(
        id=format_id,
        name=group,
        category=category,
        default_score=default_score,
        conditions=conditions,
        tags=(category.value, group),
    )
