"""
Extraction du groupe de release.

Le groupe apparait en fin de titre: "-GROUP", "[GROUP]" ou "@GROUP",
avec en dernier recours le dernier segment separe par un tiret ou un
point. Une liste noire ecarte les faux positifs (qualite, codecs,
extensions, suffixes d'indexeurs, annees, mots d'edition).
"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ReleaseGroupMatch:
    """Groupe detecte avec sa position dans le titre."""

    group: str
    matched_text: str
    index: int


GROUP_BLACKLIST = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        # Qualite
        r"^(?:720p?|1080p?|2160p?|4k|uhd|hd|sd|hdr|dv|hdr10|hlg)$",
        # Codecs
        r"^(?:x264|x265|h264|h265|hevc|avc|av1|xvid|divx)$",
        # Sources
        r"^(?:bluray|bdrip|brrip|webrip|webdl|hdtv|dvdrip|remux|web|dl|rip)$",
        # Audio
        r"^(?:aac|ac3|dts|truehd|atmos|flac|mp3|opus|dd|ddp)$",
        # Extensions et marqueurs de release
        r"^(?:mkv|mp4|avi|proper|repack|internal|real|rerip)$",
        # Langues
        r"^(?:english|german|french|spanish|multi|dual|audio)$",
        # Tailles
        r"^\d+(?:\.\d+)?\s*(?:gb|mb|tb)$",
        # Annees
        r"^\d{4}$",
        # Editions
        r"^(?:extended|directors|cut|edition|unrated|theatrical|imax)$",
        # Suffixes d'indexeurs
        r"^(?:eztv|yify|yts|rarbg|ettv|ethd|tgx)$",
    )
]

_FILE_EXTENSION = re.compile(r"[ .](?:mkv|mp4|avi|m4v|webm)$", re.IGNORECASE)

INDEXER_SUFFIXES = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"\s+EZTV$",
        r"\s+YIFY$",
        r"\s+YTS(?:[ .][A-Z]{2,3})?$",
        r"\s+RARBG$",
        r"\s+\[?ettv\]?$",
        r"\s+\[?eztvx?[ .][a-z]+\]?$",
    )
]

GROUP_EXTRACTION_PATTERNS = [
    # "Movie 2024 1080p WEB-DL-GROUP"
    re.compile(r"-([A-Za-z0-9]+)$"),
    # "Movie (2024) [GROUP]"
    re.compile(r"\[([A-Za-z0-9]+)\]$"),
    # "Movie 2024@GROUP"
    re.compile(r"@([A-Za-z0-9]+)$"),
]

_VALID_GROUP = re.compile(r"^[A-Za-z0-9]+$")
_LAST_SEGMENT_SPLIT = re.compile(r"[-._]")


def is_valid_group_name(name: str) -> bool:
    """Un groupe fait 2 a 20 caracteres alphanumeriques, pas tous des chiffres."""
    if not 2 <= len(name) <= 20:
        return False
    if any(pattern.search(name) for pattern in GROUP_BLACKLIST):
        return False
    if not _VALID_GROUP.match(name):
        return False
    return not name.isdigit()


def _strip_suffixes(title: str) -> str:
    cleaned = _FILE_EXTENSION.sub("", title)
    for pattern in INDEXER_SUFFIXES:
        cleaned = pattern.sub("", cleaned)
    return cleaned


def extract_release_group(title: str) -> Optional[ReleaseGroupMatch]:
    """
    Detecte le groupe de release en fin de titre.

    Args:
        title: Titre (brut ou normalise)

    Returns:
        ReleaseGroupMatch ou None si aucun candidat valide.
    """
    cleaned = _strip_suffixes(title)

    for pattern in GROUP_EXTRACTION_PATTERNS:
        match = pattern.search(cleaned)
        if match and is_valid_group_name(match.group(1)):
            return ReleaseGroupMatch(
                group=match.group(1), matched_text=match.group(0), index=match.start()
            )

    # Dernier recours: dernier segment separe par - . ou _
    last_part = _LAST_SEGMENT_SPLIT.split(cleaned)[-1]
    if is_valid_group_name(last_part):
        return ReleaseGroupMatch(
            group=last_part, matched_text=last_part, index=cleaned.rfind(last_part)
        )

    return None
