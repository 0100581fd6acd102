"""
Tiers de groupes de release.

Chaque tier combine des conditions obligatoires (resolution, source,
encodage) avec une liste de groupes alternatifs: un seul groupe
suffit pour que le tier corresponde.
"""

from cinerank.core.value_objects.custom_format import ConditionType, FormatCondition
from cinerank.core.value_objects.release import Resolution, Source
from cinerank.services.formats.builders import (
    HEVC_PATTERN,
    NOT_REMUX,
    REMUX_PATTERN,
    group_is,
    group_tier,
    resolution_is,
    source_is,
    title_matches,
)

_UHD_ENCODE = (resolution_is(Resolution.UHD_2160P), source_is(Source.BLURAY), NOT_REMUX)
_FHD_ENCODE = (resolution_is(Resolution.FHD_1080P), NOT_REMUX)
_FHD_HEVC = (resolution_is(Resolution.FHD_1080P), title_matches("x265/HEVC", HEVC_PATTERN))
_REMUX = (
    title_matches("Remux", REMUX_PATTERN),
    FormatCondition(name="Not DVD", type=ConditionType.SOURCE, source=Source.DVD, negate=True),
)
_WEBDL = (source_is(Source.WEBDL),)
_HD_ENCODE = (resolution_is(Resolution.HD_720P), NOT_REMUX)


QUALITY_2160P_TIERS = [
    group_tier(
        "2160p-quality-tier-1",
        "2160p Quality Tier 1",
        _UHD_ENCODE,
        ["DON", "SA89", "REBORN", "SoLaR"],
        tags=("2160p", "Quality", "Tier 1"),
        description="Top tier 4K encode groups",
    ),
    group_tier(
        "2160p-quality-tier-2",
        "2160p Quality Tier 2",
        _UHD_ENCODE,
        ["FLUX", "W4NK3R", "playBD"],
        tags=("2160p", "Quality", "Tier 2"),
    ),
    group_tier(
        "2160p-quality-tier-3",
        "2160p Quality Tier 3",
        _UHD_ENCODE,
        ["iFT", "HQMUX", "ZQ"],
        tags=("2160p", "Quality", "Tier 3"),
    ),
]

QUALITY_1080P_TIERS = [
    group_tier(
        "1080p-quality-tier-1",
        "1080p Quality Tier 1",
        _FHD_ENCODE,
        ["DON", "D-Z0N3", "EbP", "CtrlHD", "ZoroSenpai"],
        tags=("1080p", "Quality", "Tier 1"),
        description="Top tier 1080p encode groups",
    ),
    group_tier(
        "1080p-quality-tier-2",
        "1080p Quality Tier 2",
        _FHD_ENCODE,
        ["EA", "HiFi", "NTb", "SbR"],
        tags=("1080p", "Quality", "Tier 2"),
    ),
    group_tier(
        "1080p-quality-tier-3",
        "1080p Quality Tier 3",
        _FHD_ENCODE,
        ["decibeL", "PTer", "VietHD"],
        tags=("1080p", "Quality", "Tier 3"),
    ),
    group_tier(
        "1080p-quality-tier-4",
        "1080p Quality Tier 4",
        _FHD_ENCODE,
        ["hallowed", "SPARKS", "AMIABLE"],
        tags=("1080p", "Quality", "Tier 4"),
    ),
    group_tier(
        "1080p-quality-tier-5",
        "1080p Quality Tier 5",
        _FHD_ENCODE,
        ["GECKOS", "DRONES"],
        tags=("1080p", "Quality", "Tier 5"),
    ),
    group_tier(
        "1080p-quality-tier-6",
        "1080p Quality Tier 6",
        _FHD_ENCODE,
        ["SECTOR7"],
        tags=("1080p", "Quality", "Tier 6"),
    ),
]

EFFICIENT_1080P_TIERS = [
    group_tier(
        "1080p-efficient-tier-1",
        "1080p Efficient Tier 1",
        (*_FHD_HEVC, group_is("QxR", r"^(?:QxR|Tigole|RCVR|SAMPA|Silence)$")),
        ["TAoE", "NAN0"],
        tags=("1080p", "Efficient", "x265", "Tier 1"),
        description="Top tier x265 encode groups",
    ),
    group_tier(
        "1080p-efficient-tier-2",
        "1080p Efficient Tier 2",
        _FHD_HEVC,
        ["DarQ", "dkore", "Vialle"],
        tags=("1080p", "Efficient", "x265", "Tier 2"),
    ),
    group_tier(
        "1080p-efficient-tier-3",
        "1080p Efficient Tier 3",
        _FHD_HEVC,
        ["GRiMM", "LSt", "ToNaTo"],
        tags=("1080p", "Efficient", "x265", "Tier 3"),
    ),
    group_tier(
        "1080p-efficient-tier-4",
        "1080p Efficient Tier 4",
        _FHD_HEVC,
        ["edge2020", "Ralphy", "YELLO"],
        tags=("1080p", "Efficient", "x265", "Tier 4"),
    ),
    group_tier(
        "1080p-efficient-tier-5",
        "1080p Efficient Tier 5",
        _FHD_HEVC,
        ["Vyndros", "iVy"],
        tags=("1080p", "Efficient", "x265", "Tier 5"),
    ),
]

REMUX_TIERS = [
    group_tier(
        "remux-tier-1",
        "Remux Tier 1",
        _REMUX,
        ["3L", "BiZKiT", "BLURANiUM", "CiNEPHiLES", "FraMeSToR", "WiLDCAT"],
        tags=("Remux", "Tier 1"),
        description="Top tier remux groups",
    ),
    group_tier(
        "remux-tier-2",
        "Remux Tier 2",
        _REMUX,
        ["EPSiLON", "decibeL", "SiCFoI"],
        tags=("Remux", "Tier 2"),
    ),
    group_tier(
        "remux-tier-3",
        "Remux Tier 3",
        _REMUX,
        ["playBD", "FLUX"],
        tags=("Remux", "Tier 3"),
    ),
]

WEBDL_TIERS = [
    group_tier(
        "webdl-tier-1",
        "WEB-DL Tier 1",
        _WEBDL,
        ["NTb", "FLUX", "NTG"],
        tags=("WEB-DL", "Tier 1"),
        description="Top tier WEB-DL groups",
    ),
    group_tier(
        "webdl-tier-2",
        "WEB-DL Tier 2",
        _WEBDL,
        ["TEPES", "CMRG", "SiGMA"],
        tags=("WEB-DL", "Tier 2"),
    ),
    group_tier(
        "webdl-tier-3",
        "WEB-DL Tier 3",
        _WEBDL,
        ["PECULATE", "SMURF"],
        tags=("WEB-DL", "Tier 3"),
    ),
]

QUALITY_720P_TIERS = [
    group_tier(
        "720p-quality-tier-1",
        "720p Quality Tier 1",
        _HD_ENCODE,
        ["DON", "CtrlHD", "EbP"],
        tags=("720p", "Quality", "Tier 1"),
    ),
    group_tier(
        "720p-quality-tier-2",
        "720p Quality Tier 2",
        _HD_ENCODE,
        ["HiFi", "NTb"],
        tags=("720p", "Quality", "Tier 2"),
    ),
]

ALL_GROUP_TIER_FORMATS = [
    *QUALITY_2160P_TIERS,
    *QUALITY_1080P_TIERS,
    *EFFICIENT_1080P_TIERS,
    *REMUX_TIERS,
    *WEBDL_TIERS,
    *QUALITY_720P_TIERS,
]
