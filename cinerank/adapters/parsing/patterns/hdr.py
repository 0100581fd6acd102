"""
Extraction du format HDR.

Ordre: combinaisons Dolby Vision + couche de repli, puis Dolby Vision
seul, puis HDR10+ avant HDR10 avant HDR generique, puis HLG, PQ et SDR.
Un DV accompagne d'un simple "HDR" est traite comme un repli HDR10.
"""

import re
from typing import Optional

from cinerank.adapters.parsing.patterns.matching import PatternMatch, first_match, rules
from cinerank.core.value_objects.release import HdrFormat

_DV = r"\b(?:DV|DoVi|Dolby[ ._-]?Vision)\b"
_HDR10_PLUS = r"\bHDR10[ ._-]?(?:\+|Plus\b|P\b)"

HDR_PATTERNS = [
    # Combinaisons DV + repli (dans les deux ordres)
    *rules(
        HdrFormat.DOLBY_VISION_HDR10_PLUS,
        rf"{_DV}.*{_HDR10_PLUS}",
        rf"{_HDR10_PLUS}.*{_DV}",
    ),
    *rules(
        HdrFormat.DOLBY_VISION_HDR10,
        rf"{_DV}.*\bHDR[ ._-]?10\b",
        rf"\bHDR[ ._-]?10\b.*{_DV}",
        rf"{_DV}.*\bHDR\b",
        rf"\bHDR\b.*{_DV}",
    ),
    *rules(
        HdrFormat.DOLBY_VISION_HLG,
        rf"{_DV}.*\bHLG\b",
        rf"\bHLG\b.*{_DV}",
    ),
    *rules(
        HdrFormat.DOLBY_VISION_SDR,
        rf"{_DV}.*\bSDR\b",
        rf"\bSDR\b.*{_DV}",
    ),
    # Dolby Vision seul
    *rules(HdrFormat.DOLBY_VISION, _DV),
    # HDR10+ avant HDR10 avant HDR generique
    *rules(HdrFormat.HDR10_PLUS, _HDR10_PLUS),
    *rules(
        HdrFormat.HDR10,
        r"\bHDR10\b(?![ ._-]?(?:\+|Plus))",
        r"\bHDR[ ._-]10\b",
    ),
    *rules(HdrFormat.HDR, r"\bHDR\b"),
    *rules(HdrFormat.HLG, r"\bHLG\b"),
    *rules(HdrFormat.PQ, r"\bPQ(?:10)?\b"),
    *rules(HdrFormat.SDR, r"\bSDR\b"),
]

_DV_TOKEN = re.compile(_DV, re.IGNORECASE)
# HDRip est une source, pas une couche HDR
_FALLBACK_TOKEN = re.compile(
    r"\b(?:HDR(?:10)?(?:[ ._-]?(?:\+|Plus|P))?|HLG|SDR)(?![a-z0-9])", re.IGNORECASE
)


def extract_hdr(title: str) -> Optional[PatternMatch[HdrFormat]]:
    """Detecte le format HDR dans un titre normalise (None si absent)."""
    return first_match(HDR_PATTERNS, title)


def has_dolby_vision_without_fallback(title: str) -> bool:
    """
    Indique si le titre annonce du Dolby Vision sans couche de repli.

    Un DV sans jeton HDR, HLG ou SDR dans le titre est illisible sur
    les ecrans non compatibles DV: c'est un risque de compatibilite.
    """
    return bool(_DV_TOKEN.search(title)) and not _FALLBACK_TOKEN.search(title)
