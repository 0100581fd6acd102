"""
Formats bannis.

Tous les profils integres leur donnent le score de bannissement: une
release qui en declenche un est rejetee quel que soit le reste.
"""

from cinerank.core.value_objects.custom_format import CustomFormat, FormatCategory
from cinerank.services.formats.builders import named_group, title_excludes, title_matches

_BANNED = FormatCategory.BANNED


def _banned_title(format_id: str, name: str, pattern: str, description: str) -> CustomFormat:
    return CustomFormat(
        id=format_id,
        name=name,
        category=_BANNED,
        conditions=(title_matches(name, pattern),),
        tags=("Banned", name),
        description=description,
    )

BANNED_GROUP_FORMATS = [
    named_group("banned-aroma", "AROMA", _BANNED),
    named_group("banned-lama", "LAMA", _BANNED),
    named_group("banned-telly", "Telly", _BANNED),
    named_group("banned-bitor", "BiTOR", _BANNED),
    named_group("banned-visionxpert", "VisionXpert", _BANNED),
    named_group("banned-sasukeduck", "SasukeducK", _BANNED),
    named_group("banned-jennaortegauhd", "jennaortegaUHD", _BANNED),
]

BANNED_CONTENT_FORMATS = [
    _banned_title(
        "banned-extras",
        "Extras",
        r"\b(?:Extras|Bonus|Behind[. ]The[. ]Scenes|Deleted[. ]Scenes|Featurettes?)\b",
        "Bonus et contenus annexes",
    ),
    _banned_title("banned-sample", "Sample", r"\bSample\b", "Extrait de fichier"),
    _banned_title(
        "banned-upscaled",
        "Upscaled",
        r"\b(?:Up[-. ]?scaled?|Re[-. ]?Grade|AIUS|AI[-. ]?(?:enhanced|Upscale))\b",
        "Upscale artificiel",
    ),
    _banned_title(
        "banned-3d",
        "3D",
        r"\b(?:(?:bluray|bd)?3d|sbs|half[ .-]ou|half[ .-]sbs)\b",
        "Release 3D",
    ),
]

BANNED_SOURCE_FORMATS = [
    _banned_title("banned-cam", "CAM", r"\b(?:CAM|HDCAM|CAMRip)\b", "Filme en salle"),
    _banned_title(
        "banned-telesync",
        "Telesync",
        r"\b(?:TS|Telesync|HDTS|PDVD)\b",
        "Filme en salle avec son direct",
    ),
    _banned_title("banned-telecine", "Telecine", r"\b(?:TC|Telecine|HDTC)\b", "Copie de bobine"),
    _banned_title(
        "banned-screener",
        "Screener",
        r"\b(?:SCR|SCREENER|DVDSCR|BDSCR)\b",
        "Copie promotionnelle",
    ),
]

BANNED_ENCODE_FORMATS = [
    CustomFormat(
        id="banned-full-disc",
        name="Full Disc",
        category=_BANNED,
        conditions=(
            title_matches(
                "Full Disc",
                r"\b(?:ISO|BDMV|COMPLETE[-. ]?(?:UHD[-. ]?)?BLU[-. ]?RAY|BR[-. ]?DIS[KC]|DVD[59]|VOB|IFO)\b",
            ),
            title_excludes("Not Remux", r"\bREMUX\b"),
            title_excludes("Not x264", r"\b(?:x264|h\.?264|AVC)\b"),
            title_excludes("Not x265", r"\b(?:x265|h\.?265|HEVC)\b"),
        ),
        tags=("Banned", "Full Disc"),
        description="Disque complet non encode",
    ),
    CustomFormat(
        id="banned-x264-2160p",
        name="x264 2160p",
        category=_BANNED,
        conditions=(
            title_matches("2160p", r"\b(?:2160p|4K|UHD)\b"),
            title_matches("x264", r"\b(?:x264|h\.?264|AVC)\b"),
            title_excludes("Not Remux", r"\bREMUX\b"),
        ),
        tags=("Banned", "x264", "2160p"),
        description="Encode AVC en 4K (souvent un transcodage)",
    ),
    _banned_title("banned-xvid", "Xvid", r"[-. ]Xvid\b", "Codec obsolete"),
]

ALL_BANNED_FORMATS = [
    *BANNED_GROUP_FORMATS,
    *BANNED_CONTENT_FORMATS,
    *BANNED_SOURCE_FORMATS,
    *BANNED_ENCODE_FORMATS,
]
