"""
Extracteurs de motifs sans etat.

Chaque module expose une fonction extract_* qui analyse un titre
normalise et retourne la premiere correspondance (ou None).
"""

from cinerank.adapters.parsing.patterns.audio import (
    extract_audio_channels,
    extract_audio_codec,
    has_atmos,
)
from cinerank.adapters.parsing.patterns.codec import extract_codec
from cinerank.adapters.parsing.patterns.episode import (
    EpisodeMatch,
    extract_episode,
    extract_title_before_episode,
    is_tv_release,
)
from cinerank.adapters.parsing.patterns.hdr import (
    extract_hdr,
    has_dolby_vision_without_fallback,
)
from cinerank.adapters.parsing.patterns.language import extract_languages
from cinerank.adapters.parsing.patterns.matching import PatternMatch
from cinerank.adapters.parsing.patterns.release_group import (
    ReleaseGroupMatch,
    extract_release_group,
)
from cinerank.adapters.parsing.patterns.resolution import extract_resolution
from cinerank.adapters.parsing.patterns.source import extract_source

__all__ = [
    "EpisodeMatch",
    "PatternMatch",
    "ReleaseGroupMatch",
    "extract_audio_channels",
    "extract_audio_codec",
    "extract_codec",
    "extract_episode",
    "extract_hdr",
    "extract_languages",
    "extract_release_group",
    "extract_resolution",
    "extract_source",
    "extract_title_before_episode",
    "has_atmos",
    "has_dolby_vision_without_fallback",
    "is_tv_release",
]
