"""
Extraction des informations audio.

Trois jeux de motifs independants:
- le codec de base (lossless avant lossy, le plus specifique gagne)
- le modificateur Atmos (cumulable avec n'importe quel codec)
- la configuration des canaux (7.1, 5.1, 2.0, 1.0)

Les motifs s'appliquent au titre normalise: "DD5.1" y devient "DD5 1",
d'ou les separateurs optionnels entre les chiffres des canaux.
"""

import re
from typing import Optional

from cinerank.adapters.parsing.patterns.matching import PatternMatch, first_match, rules
from cinerank.core.value_objects.release import AudioChannels, AudioCodec

# ====================
# Codecs (ordre = precedence)
# ====================

AUDIO_CODEC_PATTERNS = [
    # Lossless
    *rules(AudioCodec.TRUEHD, r"\bTrue[ ._-]?HD"),
    *rules(AudioCodec.DTS_X, r"\bDTS[ ._-]?X\b"),
    *rules(
        AudioCodec.DTS_HDMA,
        r"\bDTS[ ._-]?HD[ ._-]?MA\b",
        r"\bDTS[ ._-]?MA\b",
        r"\bDTS[ ._-]?XLL\b",
    ),
    *rules(AudioCodec.PCM, r"\bL?PCM\b"),
    *rules(AudioCodec.FLAC, r"\bFLAC"),
    # Lossy haute qualite (HRA avant DTS-HD generique, ES avant DTS)
    *rules(
        AudioCodec.DTS_HD_HRA,
        r"\bDTS[ ._-]?HD[ ._-]?HRA?\b",
        r"\bDTS[ ._-]?HD[ ._-]?Hi\b",
        r"\bDTS[ ._-]?HRA\b",
    ),
    *rules(AudioCodec.DTS_HD, r"\bDTS[ ._-]?HD\b"),
    *rules(AudioCodec.DTS_ES, r"\bDTS[ ._-]?ES\b"),
    *rules(
        AudioCodec.DTS,
        r"\bDTS[ ._]?[1-9]",
        r"\bDTS\b(?![ ._-]?(?:HD|MA|X|ES|HRA))",
    ),
    # DD+ / E-AC3 avant DD / AC3
    *rules(
        AudioCodec.DD_PLUS,
        r"\bDD[P+]",
        r"\bE[ ._-]?AC[ ._-]?3\b",
        r"\bEAC3",
        r"\bDolby[ ._-]?Digital[ ._-]?Plus\b",
    ),
    *rules(
        AudioCodec.DD,
        r"\bDD[ ._]?[0-9]",
        r"\bAC[ ._-]?3",
        r"\bDolby[ ._-]?Digital\b(?![ ._-]?Plus)",
    ),
    *rules(AudioCodec.OPUS, r"\bOpus[ ._]?[0-9]", r"\bOpus\b(?!.*\d{3,4}p)"),
    # Lossy standard
    *rules(AudioCodec.AAC, r"\bAAC"),
    *rules(AudioCodec.MP3, r"\bMP3\b"),
]

# ====================
# Atmos (modificateur independant)
# ====================

ATMOS_PATTERNS = [
    re.compile(r"\bAtmos\b", re.IGNORECASE),
    re.compile(r"\bDolby[ ._-]?Atmos", re.IGNORECASE),
    re.compile(r"\bDDPA", re.IGNORECASE),
    re.compile(r"\bTrue[ ._-]?HDA[ ._-]?[57][ ._]1", re.IGNORECASE),
]

# ====================
# Canaux
# ====================

CHANNEL_PATTERNS = [
    *rules(AudioChannels.SURROUND_7_1, r"(?<!\d)7[ ._]1(?!\d)"),
    *rules(AudioChannels.SURROUND_5_1, r"(?<!\d)5[ ._]1(?!\d)"),
    *rules(AudioChannels.STEREO, r"(?<!\d)2[ ._]0(?!\d)", r"\bstereo\b"),
    *rules(AudioChannels.MONO, r"(?<!\d)1[ ._]0(?!\d)", r"\bmono\b"),
]


def extract_audio_codec(title: str) -> Optional[PatternMatch[AudioCodec]]:
    """Detecte le codec audio de base dans un titre normalise."""
    return first_match(AUDIO_CODEC_PATTERNS, title)


def has_atmos(title: str) -> bool:
    """Indique si le titre porte le modificateur Dolby Atmos."""
    return any(pattern.search(title) for pattern in ATMOS_PATTERNS)


def extract_audio_channels(title: str) -> AudioChannels:
    """Detecte la configuration des canaux (UNKNOWN si absente)."""
    match = first_match(CHANNEL_PATTERNS, title)
    return match.value if match else AudioChannels.UNKNOWN
