"""
Formats resolution + source.

Ce sont les formats de base qui determinent l'essentiel du score.
Leurs valeurs viennent des profils (score par defaut nul).
"""

from cinerank.core.value_objects.custom_format import CustomFormat, FormatCategory
from cinerank.core.value_objects.release import Resolution, Source
from cinerank.services.formats.builders import (
    HEVC_PATTERN,
    NOT_REMUX,
    REMUX_PATTERN,
    resolution_is,
    source_is,
    title_excludes,
    title_matches,
)

_DVD_PATTERN = r"\bDVD(?:[ ._-]?(?:Rip|R|9|5))?\b"


def _format(format_id: str, name: str, *conditions, tags=()) -> CustomFormat:
    return CustomFormat(
        id=format_id,
        name=name,
        category=FormatCategory.RESOLUTION,
        conditions=tuple(conditions),
        tags=tuple(tags),
    )


def _remux(resolution: Resolution) -> CustomFormat:
    return _format(
        f"{resolution.value}-remux",
        f"{resolution.value} Remux",
        resolution_is(resolution),
        title_matches("Remux", REMUX_PATTERN),
        tags=(resolution.value, "Remux", "Lossless"),
    )


def _bluray(resolution: Resolution) -> CustomFormat:
    return _format(
        f"{resolution.value}-bluray",
        f"{resolution.value} Bluray",
        resolution_is(resolution),
        source_is(Source.BLURAY),
        NOT_REMUX,
        tags=(resolution.value, "Bluray", "Encode"),
    )


def _web(resolution: Resolution, source: Source, label: str, *extra) -> CustomFormat:
    return _format(
        f"{resolution.value}-{source.value}",
        f"{resolution.value} {label}",
        resolution_is(resolution),
        source_is(source),
        *extra,
        tags=(resolution.value, label),
    )


RESOLUTION_2160P_FORMATS = [
    _remux(Resolution.UHD_2160P),
    _bluray(Resolution.UHD_2160P),
    _web(Resolution.UHD_2160P, Source.WEBDL, "WEB-DL"),
    _web(Resolution.UHD_2160P, Source.WEBRIP, "WEBRip"),
]

RESOLUTION_1080P_FORMATS = [
    _remux(Resolution.FHD_1080P),
    _bluray(Resolution.FHD_1080P),
    # Le WEB-DL HEVC a son propre format: on ne cumule pas les deux
    _web(
        Resolution.FHD_1080P,
        Source.WEBDL,
        "WEB-DL",
        title_excludes("Not HEVC", HEVC_PATTERN),
    ),
    _format(
        "1080p-webdl-hevc",
        "1080p WEB-DL HEVC",
        resolution_is(Resolution.FHD_1080P),
        source_is(Source.WEBDL),
        title_matches("HEVC", HEVC_PATTERN),
        tags=("1080p", "WEB-DL", "HEVC"),
    ),
    _web(Resolution.FHD_1080P, Source.WEBRIP, "WEBRip"),
    _web(Resolution.FHD_1080P, Source.HDTV, "HDTV"),
]

RESOLUTION_720P_FORMATS = [
    _bluray(Resolution.HD_720P),
    _web(Resolution.HD_720P, Source.WEBDL, "WEB-DL"),
    _web(Resolution.HD_720P, Source.WEBRIP, "WEBRip"),
    _web(Resolution.HD_720P, Source.HDTV, "HDTV"),
]

RESOLUTION_SD_FORMATS = [
    _web(Resolution.SD_480P, Source.WEBDL, "WEB-DL"),
    _format(
        "dvd",
        "DVD",
        source_is(Source.DVD),
        NOT_REMUX,
        tags=("SD", "DVD"),
    ),
    _format(
        "dvd-remux",
        "DVD Remux",
        title_matches("DVD", _DVD_PATTERN),
        title_matches("Remux", REMUX_PATTERN),
        tags=("SD", "DVD", "Remux"),
    ),
]

ALL_RESOLUTION_FORMATS = [
    *RESOLUTION_2160P_FORMATS,
    *RESOLUTION_1080P_FORMATS,
    *RESOLUTION_720P_FORMATS,
    *RESOLUTION_SD_FORMATS,
]
