"""
Extraction de la structure episodique (series, emissions, anime).

Les formes sont essayees dans cet ordre de priorite:
1. Plages de saisons (S01-S10, Seasons 1-9), completes si elles partent de 1
2. Marqueur "Complete Series" sans plage
3. Packs d'une saison (S01, Season 4)
4. Episodes standard (S01E01, S08E01E02, S01E01-E03, 1x05, Season 1 Episode 5)
5. Emissions quotidiennes (2024.01.15)
6. Numerotation absolue anime (" - 1089 ")

La premiere forme reconnue gagne, sans retour arriere entre categories.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from cinerank.adapters.parsing.normalizer import normalize_title
from cinerank.core.value_objects.release import EpisodeInfo


@dataclass(frozen=True)
class EpisodeMatch:
    """Structure episodique detectee et position du jeton dans le titre."""

    info: EpisodeInfo
    matched_text: str
    index: int


# ====================
# Motifs
# ====================

SEASON_RANGE_PATTERNS = [
    re.compile(r"\bS(\d{1,2})[ ._]?-[ ._]?S?(\d{1,2})\b(?![ ._]?E\d)", re.IGNORECASE),
    re.compile(
        r"\bSeasons?[ ._]?(\d{1,2})[ ._]?(?:-|to)[ ._]?(\d{1,2})\b", re.IGNORECASE
    ),
]

COMPLETE_SERIES_PATTERN = re.compile(
    r"\b(?:complete|full)[ ._-]?series\b", re.IGNORECASE
)

SINGLE_SEASON_PATTERNS = [
    re.compile(r"\bS(\d{1,2})\b(?![ ._]?E\d)", re.IGNORECASE),
    re.compile(
        r"\bSeason[ ._]?(\d{1,2})\b(?![ ._]?(?:Episode|Ep|E)[ ._]?\d)", re.IGNORECASE
    ),
]

STANDARD_EPISODE_PATTERN = re.compile(
    r"\bS(\d{1,2})[ ._]?E(\d{1,3})((?:[ -]?E\d{1,3}|-\d{1,3})*)\b", re.IGNORECASE
)
EPISODE_CONTINUATION = re.compile(r"([ -]?)E?(\d{1,3})", re.IGNORECASE)
CROSS_PATTERN = re.compile(r"\b(\d{1,2})x(\d{2,3})\b", re.IGNORECASE)
VERBOSE_PATTERN = re.compile(
    r"\bSeason[ ._]?(\d{1,2})[ ._]?(?:Episode|Ep)[ ._]?(\d{1,3})\b", re.IGNORECASE
)

DAILY_PATTERN = re.compile(
    r"\b((?:19|20)\d{2})[ ._-](0[1-9]|1[0-2])[ ._-](0[1-9]|[12]\d|3[01])\b"
)

ABSOLUTE_PATTERN = re.compile(r"(?:^|\s)-\s(\d{1,4})(?:v\d)?(?=\s|$|\[)")


# ====================
# Extraction par categorie
# ====================

def _match_season_range(title: str) -> Optional[EpisodeMatch]:
    for pattern in SEASON_RANGE_PATTERNS:
        match = pattern.search(title)
        if not match:
            continue
        start, end = int(match.group(1)), int(match.group(2))
        if end <= start:
            continue
        seasons = tuple(range(start, end + 1))
        info = EpisodeInfo(
            season=start,
            seasons=seasons,
            is_season_pack=True,
            is_complete_series=start == 1,
        )
        return EpisodeMatch(info=info, matched_text=match.group(0), index=match.start())
    return None


def _match_complete_series(title: str) -> Optional[EpisodeMatch]:
    match = COMPLETE_SERIES_PATTERN.search(title)
    if not match:
        return None
    info = EpisodeInfo(is_season_pack=True, is_complete_series=True)
    return EpisodeMatch(info=info, matched_text=match.group(0), index=match.start())


def _match_single_season(title: str) -> Optional[EpisodeMatch]:
    for pattern in SINGLE_SEASON_PATTERNS:
        match = pattern.search(title)
        if match:
            season = int(match.group(1))
            info = EpisodeInfo(season=season, seasons=(season,), is_season_pack=True)
            return EpisodeMatch(info=info, matched_text=match.group(0), index=match.start())
    return None


def _parse_episode_list(first: int, continuation: str) -> tuple[int, ...]:
    """Developpe "E01E02" en (1, 2) et "E01-E03" en (1, 2, 3)."""
    episodes = [first]
    for token in EPISODE_CONTINUATION.finditer(continuation):
        number = int(token.group(2))
        last = episodes[-1]
        if token.group(1) == "-" and number > last:
            episodes.extend(range(last + 1, number + 1))
        elif number not in episodes:
            episodes.append(number)
    return tuple(episodes)


def _match_standard(title: str) -> Optional[EpisodeMatch]:
    match = STANDARD_EPISODE_PATTERN.search(title)
    if match:
        season = int(match.group(1))
        episodes = _parse_episode_list(int(match.group(2)), match.group(3) or "")
        info = EpisodeInfo(season=season, seasons=(season,), episodes=episodes)
        return EpisodeMatch(info=info, matched_text=match.group(0), index=match.start())

    for pattern in (CROSS_PATTERN, VERBOSE_PATTERN):
        match = pattern.search(title)
        if match:
            season = int(match.group(1))
            info = EpisodeInfo(
                season=season, seasons=(season,), episodes=(int(match.group(2)),)
            )
            return EpisodeMatch(info=info, matched_text=match.group(0), index=match.start())
    return None


def _match_daily(title: str) -> Optional[EpisodeMatch]:
    for match in DAILY_PATTERN.finditer(title):
        year, month, day = (int(part) for part in match.groups())
        try:
            air_date = date(year, month, day)
        except ValueError:
            # 2023.02.30 par exemple: pas une date, on continue
            continue
        info = EpisodeInfo(is_daily=True, air_date=air_date.isoformat())
        return EpisodeMatch(info=info, matched_text=match.group(0), index=match.start())
    return None


def _match_absolute(title: str) -> Optional[EpisodeMatch]:
    for match in ABSOLUTE_PATTERN.finditer(title):
        number = match.group(1)
        # " - 2019 " est une annee, pas un episode
        if len(number) == 4 and number[:2] in ("19", "20"):
            continue
        info = EpisodeInfo(absolute_episode=int(number))
        return EpisodeMatch(info=info, matched_text=match.group(0), index=match.start())
    return None


_EXTRACTORS = (
    _match_season_range,
    _match_complete_series,
    _match_single_season,
    _match_standard,
    _match_daily,
    _match_absolute,
)


def extract_episode(title: str) -> Optional[EpisodeMatch]:
    """
    Detecte la structure episodique d'un titre normalise.

    Returns:
        EpisodeMatch de la premiere forme reconnue, ou None pour un film.
    """
    for extractor in _EXTRACTORS:
        match = extractor(title)
        if match is not None:
            return match
    return None


def is_tv_release(title: str) -> bool:
    """Indique si un titre brut correspond a une serie (episode ou pack)."""
    return extract_episode(normalize_title(title)) is not None


def extract_title_before_episode(title: str) -> Optional[str]:
    """
    Retourne la partie du titre situee avant le jeton d'episode.

    Args:
        title: Titre brut

    Returns:
        Prefixe normalise sans separateurs de bord, ou None si le titre
        ne contient pas de structure episodique.
    """
    normalized = normalize_title(title)
    match = extract_episode(normalized)
    if match is None:
        return None
    return normalized[: match.index].strip(" -._")
