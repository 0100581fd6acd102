"""
Moteur d'evaluation des formats personnalises.

Un format correspond a une release quand:
- TOUTES les conditions obligatoires correspondent (apres negate)
- et, s'il existe des conditions optionnelles, AU MOINS UNE correspond

Les motifs sont compiles une seule fois puis mis en cache. Un motif
invalide ou dangereux ne correspond jamais et n'est journalise qu'une fois.
"""

import re
from typing import Optional, Union

from cinerank.core.value_objects.custom_format import (
    ConditionMatchResult,
    ConditionType,
    CustomFormat,
    FormatCondition,
    MatchedFormat,
)
from cinerank.core.value_objects.release import ParsedRelease
from cinerank.core.value_objects.scoring import ReleaseAttributes
from cinerank.services.safe_regex import compile_pattern, truncate_input

# Les deux vues exposent resolution, source, codec, hdr, languages et release_group
Release = Union[ParsedRelease, ReleaseAttributes]


# ====================
# Cache des motifs
# ====================

_PATTERN_CACHE: dict[str, Optional[re.Pattern[str]]] = {}


def _get_pattern(pattern: str) -> Optional[re.Pattern[str]]:
    if pattern not in _PATTERN_CACHE:
        _PATTERN_CACHE[pattern] = compile_pattern(pattern)
    return _PATTERN_CACHE[pattern]


def _search(pattern: Optional[str], text: Optional[str]) -> bool:
    if not pattern or text is None:
        return False
    compiled = _get_pattern(pattern)
    if compiled is None:
        return False
    return compiled.search(truncate_input(text)) is not None


def clear_pattern_cache() -> None:
    """Vide le cache des motifs compiles."""
    _PATTERN_CACHE.clear()


def _raw_title_of(release: Release) -> str:
    if isinstance(release, ReleaseAttributes):
        return release.title
    return release.original_title


# ====================
# Evaluation
# ====================

def evaluate_condition(
    condition: FormatCondition, release: Release, raw_title: Optional[str] = None
) -> ConditionMatchResult:
    """
    Evalue une condition contre une release.

    Args:
        condition: Condition a evaluer
        release: Release parsee (ou ses attributs de scoring)
        raw_title: Titre brut (par defaut celui de la release)

    Returns:
        Resultat brut et resultat final (apres negate).
    """
    title = raw_title if raw_title is not None else _raw_title_of(release)

    if condition.type is ConditionType.RELEASE_TITLE:
        raw_match = _search(condition.pattern, title)
    elif condition.type is ConditionType.RELEASE_GROUP:
        # Sans groupe detecte, un motif de groupe ne correspond jamais
        raw_match = _search(condition.pattern, release.release_group)
    elif condition.type is ConditionType.RESOLUTION:
        raw_match = condition.resolution is not None and condition.resolution == release.resolution
    elif condition.type is ConditionType.SOURCE:
        raw_match = condition.source is not None and condition.source == release.source
    elif condition.type is ConditionType.CODEC:
        raw_match = condition.codec is not None and condition.codec == release.codec
    elif condition.type is ConditionType.HDR:
        raw_match = condition.hdr is not None and condition.hdr == release.hdr
    elif condition.type is ConditionType.LANGUAGE:
        raw_match = condition.language is not None and condition.language in release.languages
    else:
        raw_match = False

    matches = not raw_match if condition.negate else raw_match
    return ConditionMatchResult(condition=condition, raw_match=raw_match, matches=matches)


def evaluate_format(
    custom_format: CustomFormat, release: Release, raw_title: Optional[str] = None
) -> tuple[bool, tuple[ConditionMatchResult, ...]]:
    """
    Evalue toutes les conditions d'un format.

    Returns:
        (correspondance, resultats par condition dans l'ordre du format)
    """
    results = tuple(
        evaluate_condition(condition, release, raw_title)
        for condition in custom_format.conditions
    )
    required = [result for result in results if result.condition.required]
    optional = [result for result in results if not result.condition.required]

    if not all(result.matches for result in required):
        return False, results
    if optional:
        return any(result.matches for result in optional), results
    return True, results


def match_format(
    custom_format: CustomFormat, release: Release, raw_title: Optional[str] = None
) -> bool:
    """Indique si un format correspond a une release et son titre brut."""
    matches, _ = evaluate_format(custom_format, release, raw_title)
    return matches


def match_formats(
    release: Release,
    formats: list[CustomFormat],
    raw_title: Optional[str] = None,
) -> list[MatchedFormat]:
    """Retourne tous les formats qui correspondent, dans l'ordre du registre."""
    matched = []
    for custom_format in formats:
        matches, results = evaluate_format(custom_format, release, raw_title)
        if matches:
            matched.append(MatchedFormat(format=custom_format, condition_results=results))
    return matched


# ====================
# Attributs de scoring
# ====================

STREAMING_SERVICE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("AMZN", re.compile(r"\b(?:AMZN|Amazon)\b", re.IGNORECASE)),
    ("NF", re.compile(r"\b(?:NF|Netflix)\b", re.IGNORECASE)),
    ("ATVP", re.compile(r"\b(?:ATVP|AppleTV\+?)", re.IGNORECASE)),
    ("DSNP", re.compile(r"\b(?:DSNP|Disney\+?)", re.IGNORECASE)),
    ("HMAX", re.compile(r"\b(?:HMAX|HBOMax)\b", re.IGNORECASE)),
    ("MAX", re.compile(r"\bMAX\b")),
    ("PCOK", re.compile(r"\b(?:PCOK|Peacock)\b", re.IGNORECASE)),
    ("PMTP", re.compile(r"\b(?:PMTP|Paramount\+?)", re.IGNORECASE)),
    ("HULU", re.compile(r"\bHULU\b", re.IGNORECASE)),
    ("iT", re.compile(r"\b(?:iT|iTunes)\b")),
    ("STAN", re.compile(r"\bSTAN\b", re.IGNORECASE)),
    ("CRAV", re.compile(r"\b(?:CRAV|Crave)\b", re.IGNORECASE)),
    ("NOW", re.compile(r"\bNOW\b")),
    ("SHO", re.compile(r"\b(?:SHO|Showtime)\b", re.IGNORECASE)),
    ("ROKU", re.compile(r"\bROKU\b", re.IGNORECASE)),
]


def detect_streaming_service(title: str) -> Optional[str]:
    """Detecte le service de streaming d'origine (premier trouve)."""
    for service, pattern in STREAMING_SERVICE_PATTERNS:
        if pattern.search(title):
            return service
    return None


def extract_attributes(parsed: ParsedRelease) -> ReleaseAttributes:
    """Construit la vue de scoring d'une release parsee."""
    return ReleaseAttributes.from_parsed(
        parsed, streaming_service=detect_streaming_service(parsed.original_title)
    )
