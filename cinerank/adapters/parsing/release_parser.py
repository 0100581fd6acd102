"""
Parser de titres de releases par expressions regulieres.

Orchestre les extracteurs de motifs, puis derive l'annee, l'edition,
les drapeaux speciaux, le titre propre et un score de confiance.
Implementation sans etat de IReleaseParser: une instance peut etre
partagee entre threads.
"""

import re
from datetime import date
from typing import Optional

from loguru import logger

from cinerank.adapters.parsing.normalizer import normalize_title
from cinerank.adapters.parsing.patterns import (
    EpisodeMatch,
    PatternMatch,
    extract_audio_channels,
    extract_audio_codec,
    extract_codec,
    extract_episode,
    extract_hdr,
    extract_languages,
    extract_release_group,
    extract_resolution,
    extract_source,
    has_atmos,
    has_dolby_vision_without_fallback,
)
from cinerank.core.ports.parser import IReleaseParser
from cinerank.core.value_objects.release import (
    AudioCodec,
    Codec,
    ParsedRelease,
    Resolution,
    Source,
)


# ====================
# Annee
# ====================

YEAR_PATTERN = re.compile(r"\b(19\d{2}|20\d{2})\b")
MIN_YEAR = 1900
# Tolerance pour les annonces de sorties futures
MAX_YEARS_AHEAD = 2


# ====================
# Editions (premiere correspondance gagnante)
# ====================

EDITION_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    (name, re.compile(pattern, re.IGNORECASE))
    for name, pattern in (
        ("Director's Cut", r"\bdirector'?s?[ ._-]?cut\b"),
        ("Extended", r"\bextended\b"),
        ("Unrated", r"\bunrated\b"),
        ("Theatrical", r"\btheatrical\b"),
        ("Remastered", r"\bremastered\b"),
        ("IMAX", r"\bimax\b"),
        ("Criterion", r"\bcriterion\b"),
        ("Special Edition", r"\bspecial[ ._-]?edition\b"),
        ("Anniversary Edition", r"\banniversary[ ._-]?edition\b"),
        ("Collector's Edition", r"\bcollector'?s?[ ._-]?edition\b"),
        ("Ultimate Edition", r"\bultimate[ ._-]?edition\b"),
        ("Open Matte", r"\bopen[ ._-]?matte\b"),
    )
]


# ====================
# Drapeaux speciaux
# ====================

PROPER_PATTERN = re.compile(r"\bproper\b", re.IGNORECASE)
REPACK_PATTERN = re.compile(r"\brepack\d?\b", re.IGNORECASE)
REMUX_PATTERN = re.compile(r"\bremux\b", re.IGNORECASE)
THREE_D_PATTERN = re.compile(r"\b3d\b", re.IGNORECASE)
HARDCODED_SUBS_PATTERN = re.compile(r"\b(?:hc|hardcoded|korsub)\b", re.IGNORECASE)


# ====================
# Titre propre
# ====================

SMALL_WORDS = frozenset(
    {
        "a", "an", "and", "as", "at", "but", "by", "for", "in", "nor",
        "of", "on", "or", "so", "the", "to", "up", "yet",
    }
)

_EDGE_SEPARATORS = re.compile(r"^[\s\-._]+|[\s\-._]+$")
_BRACKET_PREFIX = re.compile(r"^\[.*?\]\s*")
_WHITESPACE = re.compile(r"\s+")


# ====================
# Confiance
# ====================

CONFIDENCE_BASE = 0.1
CONFIDENCE_WEIGHTS: dict[str, float] = {
    "resolution": 0.2,
    "source": 0.2,
    "codec": 0.15,
    "year": 0.15,
    "release_group": 0.1,
    "title": 0.1,
}
TITLE_LENGTH_RANGE = (2, 100)


def _find_year(title: str) -> Optional[re.Match[str]]:
    """
    Recherche l'annee de sortie.

    Une annee en tout debut de titre ("2001 A Space Odyssey 1968") fait
    partie du nom: on lui prefere une annee valide plus loin.
    """
    max_year = date.today().year + MAX_YEARS_AHEAD
    candidates = [
        match
        for match in YEAR_PATTERN.finditer(title)
        if MIN_YEAR <= int(match.group(1)) <= max_year
    ]
    if not candidates:
        return None
    for match in candidates:
        if match.start() > 0:
            return match
    return candidates[0]


def _extract_edition(title: str) -> Optional[str]:
    for name, pattern in EDITION_PATTERNS:
        if pattern.search(title):
            return name
    return None


def to_title_case(text: str) -> str:
    """Casse titre avec les petits mots en minuscule (sauf le premier)."""
    words = text.lower().split(" ")
    result = []
    for position, word in enumerate(words):
        if position > 0 and word in SMALL_WORDS:
            result.append(word)
        else:
            result.append(word[:1].upper() + word[1:])
    return " ".join(result)


def _extract_clean_title(
    normalized: str,
    resolution: Optional[PatternMatch],
    source: Optional[PatternMatch],
    year: Optional[re.Match[str]],
    episode: Optional[EpisodeMatch],
) -> str:
    """
    Calcule le titre affichable.

    Pour une serie on part du texte avant le jeton d'episode. La coupure
    est la plus petite position parmi la resolution, la source et (pour
    un film seulement) l'annee, parenthese ouvrante comprise.
    """
    title = normalized[: episode.index] if episode else normalized

    cutoff = len(title)
    if resolution is not None:
        cutoff = min(cutoff, resolution.index)
    if source is not None:
        cutoff = min(cutoff, source.index)
    if episode is None and year is not None:
        year_index = year.start()
        if year_index > 0 and title[year_index - 1] == "(":
            year_index -= 1
        cutoff = min(cutoff, year_index)

    title = _EDGE_SEPARATORS.sub("", title[:cutoff])
    title = _BRACKET_PREFIX.sub("", title)
    title = _WHITESPACE.sub(" ", title).strip(" -._")
    return to_title_case(title)


def _compute_confidence(
    resolution: Resolution,
    source: Source,
    codec: Codec,
    year: Optional[int],
    release_group: Optional[str],
    clean_title: str,
) -> float:
    confidence = CONFIDENCE_BASE
    if resolution is not Resolution.UNKNOWN:
        confidence += CONFIDENCE_WEIGHTS["resolution"]
    if source is not Source.UNKNOWN:
        confidence += CONFIDENCE_WEIGHTS["source"]
    if codec is not Codec.UNKNOWN:
        confidence += CONFIDENCE_WEIGHTS["codec"]
    if year is not None:
        confidence += CONFIDENCE_WEIGHTS["year"]
    if release_group:
        confidence += CONFIDENCE_WEIGHTS["release_group"]
    min_length, max_length = TITLE_LENGTH_RANGE
    if min_length <= len(clean_title) <= max_length:
        confidence += CONFIDENCE_WEIGHTS["title"]
    return round(min(1.0, max(0.0, confidence)), 4)


def parse_release(title: str) -> ParsedRelease:
    """
    Analyse un titre de release.

    Fonction totale: un titre vide ou sans information connue produit
    un ParsedRelease aux champs UNKNOWN et a la confiance minimale.

    Args:
        title: Titre brut

    Returns:
        ParsedRelease immutable.
    """
    normalized = normalize_title(title)

    resolution_match = extract_resolution(normalized)
    source_match = extract_source(normalized)
    codec_match = extract_codec(normalized)
    audio_match = extract_audio_codec(normalized)
    hdr_match = extract_hdr(normalized)
    episode_match = extract_episode(normalized)
    group_match = extract_release_group(normalized)
    year_match = _find_year(normalized)

    resolution = resolution_match.value if resolution_match else Resolution.UNKNOWN
    source = source_match.value if source_match else Source.UNKNOWN
    codec = codec_match.value if codec_match else Codec.UNKNOWN
    year = int(year_match.group(1)) if year_match else None
    release_group = group_match.group if group_match else None

    clean_title = _extract_clean_title(
        normalized, resolution_match, source_match, year_match, episode_match
    )

    parsed = ParsedRelease(
        original_title=title,
        clean_title=clean_title,
        year=year,
        resolution=resolution,
        source=source,
        codec=codec,
        hdr=hdr_match.value if hdr_match else None,
        audio_codec=audio_match.value if audio_match else AudioCodec.UNKNOWN,
        audio_channels=extract_audio_channels(normalized),
        has_atmos=has_atmos(normalized),
        episode=episode_match.info if episode_match else None,
        languages=extract_languages(normalized),
        release_group=release_group,
        edition=_extract_edition(normalized),
        is_proper=bool(PROPER_PATTERN.search(normalized)),
        is_repack=bool(REPACK_PATTERN.search(normalized)),
        is_remux=source is Source.REMUX or bool(REMUX_PATTERN.search(normalized)),
        is_3d=bool(THREE_D_PATTERN.search(normalized)),
        has_hardcoded_subs=bool(HARDCODED_SUBS_PATTERN.search(normalized)),
        dv_without_fallback=has_dolby_vision_without_fallback(normalized),
        confidence=_compute_confidence(
            resolution, source, codec, year, release_group, clean_title
        ),
    )
    logger.debug(
        "Release parsee",
        title=title,
        clean_title=parsed.clean_title,
        resolution=parsed.resolution.value,
        source=parsed.source.value,
        confidence=parsed.confidence,
    )
    return parsed


class RegexReleaseParser(IReleaseParser):
    """
    Implementation de IReleaseParser par listes ordonnees de motifs.

    Sans etat: peut etre utilise comme singleton.
    """

    def parse(self, title: str) -> ParsedRelease:
        """
        Analyse un titre de release.

        Voir parse_release() pour les details.
        """
        return parse_release(title)
