"""
Extraction du codec video.

HEVC, x265 et H.265 sont regroupes sous h265; AVC, x264 et H.264 sous h264.
Les codecs modernes sont testes avant les anciens.
"""

from typing import Optional

from cinerank.adapters.parsing.patterns.matching import PatternMatch, first_match, rules
from cinerank.core.value_objects.release import Codec

CODEC_PATTERNS = [
    *rules(Codec.AV1, r"\bav1\b"),
    *rules(Codec.VVC, r"\bvvc\b", r"\bh[\s._-]?266\b", r"\bx266\b"),
    *rules(Codec.H265, r"\bhevc\b", r"\bh[\s._-]?265\b", r"\bx[\s._-]?265\b"),
    *rules(Codec.H264, r"\bavc\b", r"\bh[\s._-]?264\b", r"\bx[\s._-]?264\b"),
    *rules(Codec.VP9, r"\bvp[\s._-]?9\b"),
    *rules(Codec.VC1, r"\bvc[\s._-]?1\b"),
    *rules(Codec.MPEG2, r"\bmpeg[\s._-]?2\b", r"\bm2v\b"),
    *rules(Codec.XVID, r"\bxvid\b"),
    *rules(Codec.DIVX, r"\bdivx\b"),
]


def extract_codec(title: str) -> Optional[PatternMatch[Codec]]:
    """Detecte le codec video dans un titre normalise."""
    return first_match(CODEC_PATTERNS, title)
