"""
Extraction de la resolution video.
"""

from typing import Optional

from cinerank.adapters.parsing.patterns.matching import PatternMatch, first_match, rules
from cinerank.core.value_objects.release import Resolution

RESOLUTION_PATTERNS = [
    *rules(
        Resolution.UHD_2160P,
        r"\b4k\b",
        r"\buhd\b",
        r"\b2160p?\b",
        r"\b3840x2160\b",
    ),
    *rules(
        Resolution.FHD_1080P,
        r"\b1080[pi]?\b",
        r"\b1920x1080\b",
        r"\bfhd\b",
        r"\bfull[\s._-]?hd\b",
    ),
    *rules(
        Resolution.HD_720P,
        r"\b720p?\b",
        r"\b1280x720\b",
        r"\bhd720\b",
    ),
    *rules(
        Resolution.SD_480P,
        r"\b480p?\b",
        r"\b640x480\b",
        r"\b576p?\b",
        r"\b480i\b",
        r"\bsd\b",
        r"\bdvdrip\b",
    ),
]


def extract_resolution(title: str) -> Optional[PatternMatch[Resolution]]:
    """Detecte la resolution dans un titre normalise (premiere regle gagnante)."""
    return first_match(RESOLUTION_PATTERNS, title)
