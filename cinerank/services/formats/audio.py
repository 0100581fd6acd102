"""
Formats audio.

Les motifs s'appliquent au titre brut. Chaque codec exclut les codecs
concurrents pour qu'une release ne compte qu'une piste principale.
"""

from cinerank.core.value_objects.custom_format import CustomFormat, FormatCategory
from cinerank.core.value_objects.release import Resolution
from cinerank.services.formats.builders import resolution_is, title_excludes, title_matches

TRUEHD = r"\bTrue[ ._-]?HD"
DTS_X = r"\bDTS[ ._-]?X\b"
DTS_HDMA = r"\bDTS[ ._-]?(?:HD[ ._-]?)?MA\b|\bDTS[ ._-]?XLL\b"
DTS_HD_HRA = r"\bDTS[ ._-]?HD[ ._-]?HRA\b"
DTS_HD = r"\bDTS[ ._-]?HD\b"
DTS_ES = r"\bDTS[ ._-]?ES\b"
DTS = r"\bDTS(?=\b|\d)"
PCM = r"\bL?PCM(?=\b|\d)"
FLAC = r"\bFLAC(?=\b|\d)"
DDPLUS = r"\bDD(?:P|\+)|\bE[ ._-]?AC[ ._-]?3\b|\bDolby[ ._-]?Digital[ ._-]?Plus\b"
DD = r"\bDD[ ._]?[0-9]|\bAC[ ._-]?3\b|\bDolby[ ._-]?Digital\b"
AAC = r"\bAAC(?=\b|\d)"
OPUS = r"\bOpus(?=\b|\d)"
MP3 = r"\bMP3\b"
ATMOS = r"\bAtmos\b"
BTN_ATMOS = r"\bTrue[ ._-]?HDA[ ._-]?[57]\.1"


def _audio(format_id: str, name: str, pattern: str, *excluded: tuple[str, str]) -> CustomFormat:
    return CustomFormat(
        id=format_id,
        name=name,
        category=FormatCategory.AUDIO,
        conditions=(
            title_matches(name, pattern),
            *(title_excludes(f"Not {label}", excluded_pattern) for label, excluded_pattern in excluded),
        ),
        tags=("Audio", name),
    )


AUDIO_FORMATS = [
    _audio(
        "audio-truehd",
        "TrueHD",
        TRUEHD,
        ("Dolby Digital", DD),
        ("DD+", DDPLUS),
        ("DTS", DTS),
        ("FLAC", FLAC),
    ),
    _audio(
        "audio-dts-x",
        "DTS-X",
        DTS_X,
        ("AAC", AAC),
        ("DD+", DDPLUS),
        ("FLAC", FLAC),
        ("PCM", PCM),
        ("TrueHD", TRUEHD),
    ),
    _audio(
        "audio-dts-hdma",
        "DTS-HD MA",
        DTS_HDMA,
        ("AAC", AAC),
        ("DD+", DDPLUS),
        ("DTS-HD HRA", DTS_HD_HRA),
        ("DTS-X", DTS_X),
        ("FLAC", FLAC),
        ("PCM", PCM),
        ("TrueHD", TRUEHD),
    ),
    _audio("audio-pcm", "PCM", PCM),
    _audio(
        "audio-flac",
        "FLAC",
        FLAC,
        ("AAC", AAC),
        ("DD+", DDPLUS),
        ("DTS", DTS),
        ("PCM", PCM),
        ("TrueHD", TRUEHD),
    ),
    CustomFormat(
        id="audio-atmos",
        name="Atmos",
        category=FormatCategory.AUDIO,
        conditions=(
            title_matches("Atmos", ATMOS, required=False),
            title_matches("BTN Atmos", BTN_ATMOS, required=False),
            title_matches("DDPA", r"\bDDPA", required=False),
        ),
        tags=("Audio", "Atmos", "Object"),
    ),
    CustomFormat(
        id="audio-atmos-missing",
        name="Atmos (Missing)",
        category=FormatCategory.AUDIO,
        conditions=(
            resolution_is(Resolution.UHD_2160P),
            title_matches("BTN Atmos", BTN_ATMOS),
            title_excludes("Not Standard Atmos", ATMOS),
        ),
        tags=("Audio", "Atmos"),
        description="TrueHD Atmos note selon la convention TrueHDA7.1",
    ),
    _audio("audio-dts-hd-hra", "DTS-HD HRA", DTS_HD_HRA),
    _audio("audio-dts-es", "DTS-ES", DTS_ES),
    _audio("audio-opus", "Opus", OPUS),
    _audio(
        "audio-ddplus",
        "DD+",
        DDPLUS,
        ("AAC", AAC),
        ("DTS", DTS),
        ("FLAC", FLAC),
        ("PCM", PCM),
        ("TrueHD", TRUEHD),
    ),
    _audio(
        "audio-dts",
        "DTS",
        DTS,
        ("DTS-HD", DTS_HD),
        ("DTS-X", DTS_X),
        ("DTS-ES", DTS_ES),
        ("DTS-MA", DTS_HDMA),
    ),
    _audio("audio-dd", "Dolby Digital", DD, ("DD+", DDPLUS)),
    _audio("audio-aac", "AAC", AAC),
    _audio("audio-mp3", "MP3", MP3),
]
