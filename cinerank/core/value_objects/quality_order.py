"""
Tables d'ordre total pour les attributs de qualite.

Chaque attribut (resolution, source, codec, audio, HDR, canaux) possede
un rang numerique: plus le rang est eleve, meilleure est la qualite.
Les fonctions compare_* retournent une valeur negative, nulle ou positive
comme une fonction de comparaison classique.
"""

from typing import Optional

from cinerank.core.value_objects.release import (
    AudioChannels,
    AudioCodec,
    Codec,
    HdrFormat,
    Resolution,
    Source,
)


# ====================
# Rangs par attribut
# ====================

RESOLUTION_ORDER: dict[Resolution, int] = {
    Resolution.UHD_2160P: 4,
    Resolution.FHD_1080P: 3,
    Resolution.HD_720P: 2,
    Resolution.SD_480P: 1,
    Resolution.UNKNOWN: 0,
}

SOURCE_ORDER: dict[Source, int] = {
    Source.REMUX: 10,
    Source.BLURAY: 9,
    Source.WEBDL: 8,
    Source.WEBRIP: 7,
    Source.HDTV: 6,
    Source.DVD: 5,
    Source.SCREENER: 3,
    Source.TELECINE: 2,
    Source.TELESYNC: 1,
    Source.CAM: 0,
    Source.UNKNOWN: -1,
}

CODEC_ORDER: dict[Codec, int] = {
    Codec.VVC: 7,
    Codec.AV1: 6,
    Codec.H265: 5,
    Codec.H264: 4,
    Codec.VP9: 3,
    Codec.VC1: 2,
    Codec.MPEG2: 1,
    Codec.XVID: 0,
    Codec.DIVX: 0,
    Codec.UNKNOWN: -1,
}

AUDIO_CODEC_ORDER: dict[AudioCodec, int] = {
    # Lossless
    AudioCodec.TRUEHD: 10,
    AudioCodec.DTS_X: 9,
    AudioCodec.DTS_HDMA: 8,
    AudioCodec.PCM: 7,
    AudioCodec.FLAC: 6,
    # Lossy haute qualite
    AudioCodec.DTS_HD_HRA: 5,
    AudioCodec.DTS_HD: 4,
    AudioCodec.DTS_ES: 3,
    AudioCodec.DTS: 2,
    AudioCodec.DD_PLUS: 2,
    AudioCodec.OPUS: 2,
    # Lossy standard
    AudioCodec.DD: 1,
    AudioCodec.AAC: 1,
    AudioCodec.MP3: 0,
    AudioCodec.UNKNOWN: -1,
}

HDR_ORDER: dict[HdrFormat, int] = {
    HdrFormat.DOLBY_VISION_HDR10_PLUS: 11,
    HdrFormat.DOLBY_VISION_HDR10: 10,
    HdrFormat.DOLBY_VISION: 9,
    HdrFormat.DOLBY_VISION_HLG: 8,
    HdrFormat.HDR10_PLUS: 7,
    HdrFormat.HDR10: 6,
    HdrFormat.HDR: 5,
    HdrFormat.DOLBY_VISION_SDR: 5,
    HdrFormat.HLG: 4,
    HdrFormat.PQ: 3,
    HdrFormat.SDR: 0,
}

# Absence de HDR: equivalent a SDR pour les comparaisons
NO_HDR_RANK = 0

CHANNELS_ORDER: dict[AudioChannels, int] = {
    AudioChannels.SURROUND_7_1: 4,
    AudioChannels.SURROUND_5_1: 3,
    AudioChannels.STEREO: 2,
    AudioChannels.MONO: 1,
    AudioChannels.UNKNOWN: 0,
}


def compare_resolution(a: Resolution, b: Resolution) -> int:
    """Compare deux resolutions (positif si a est meilleure)."""
    return RESOLUTION_ORDER[a] - RESOLUTION_ORDER[b]


def compare_source(a: Source, b: Source) -> int:
    """Compare deux sources (positif si a est meilleure)."""
    return SOURCE_ORDER[a] - SOURCE_ORDER[b]


def compare_codec(a: Codec, b: Codec) -> int:
    """Compare deux codecs video (positif si a est meilleur)."""
    return CODEC_ORDER[a] - CODEC_ORDER[b]


def compare_audio(a: AudioCodec, b: AudioCodec) -> int:
    """Compare deux codecs audio (positif si a est meilleur)."""
    return AUDIO_CODEC_ORDER[a] - AUDIO_CODEC_ORDER[b]


def compare_channels(a: AudioChannels, b: AudioChannels) -> int:
    """Compare deux configurations de canaux (positif si a est meilleure)."""
    return CHANNELS_ORDER[a] - CHANNELS_ORDER[b]


def hdr_rank(hdr: Optional[HdrFormat]) -> int:
    """Rang d'un format HDR, None etant traite comme SDR."""
    if hdr is None:
        return NO_HDR_RANK
    return HDR_ORDER[hdr]


def compare_hdr(a: Optional[HdrFormat], b: Optional[HdrFormat]) -> int:
    """Compare deux formats HDR (positif si a est meilleur)."""
    return hdr_rank(a) - hdr_rank(b)
