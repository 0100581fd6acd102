"""
Formats d'amelioration: repacks, editions, codecs, packs TV et langues.

Ils ajoutent de petits bonus (ou departagent des releases proches).
"""

from cinerank.core.value_objects.custom_format import CustomFormat, FormatCategory
from cinerank.services.formats.builders import title_excludes, title_matches

_NOT_NON_IMAX = r"(?<!NON)(?<!NON[-. ])IMAX"


def _title_format(
    format_id: str,
    name: str,
    pattern: str,
    score: int = 0,
    category: FormatCategory = FormatCategory.ENHANCEMENT,
    *extra,
) -> CustomFormat:
    return CustomFormat(
        id=format_id,
        name=name,
        category=category,
        default_score=score,
        conditions=(title_matches(name, pattern), *extra),
        tags=(category.value, name),
    )


REPACK_FORMATS = [
    _title_format("repack-3", "Repack v3", r"\bREPACK3\b", 6),
    _title_format("repack-2", "Repack v2", r"\bREPACK2\b", 4),
    _title_format(
        "repack-1",
        "Repack v1",
        r"\bREPACK\b",
        2,
        FormatCategory.ENHANCEMENT,
        title_excludes("Not Repack 2/3", r"\bREPACK[23]\b"),
    ),
    _title_format("proper", "Proper", r"\bPROPER\b", 2),
]

IMAX_FORMATS = [
    CustomFormat(
        id="edition-imax-enhanced",
        name="IMAX Enhanced",
        category=FormatCategory.ENHANCEMENT,
        default_score=800,
        conditions=(
            title_matches("Disney+ or Bravia Core", r"\b(?:DSNP|Disney\+|BC|B?CORE)\b"),
            title_matches("WEB", r"\bWEB[-. ]?(?:DL|Rip)\b"),
            title_matches("IMAX", rf"\b{_NOT_NON_IMAX}(?:[-. ]?Enhanced)?\b"),
        ),
        tags=("Edition", "IMAX", "Enhanced"),
        description="IMAX Enhanced Disney+ ou Bravia Core",
    ),
    CustomFormat(
        id="edition-imax",
        name="IMAX",
        category=FormatCategory.ENHANCEMENT,
        default_score=400,
        conditions=(
            title_matches("IMAX", rf"\b{_NOT_NON_IMAX}\b"),
            title_excludes("Not IMAX Enhanced", r"\bIMAX[-. ]?Enhanced\b"),
        ),
        tags=("Edition", "IMAX"),
    ),
]

EDITION_FORMATS = [
    _title_format(
        "edition-directors-cut",
        "Director's Cut",
        r"\bDirector'?s?[-. ]?Cut\b|(?-i:\bDC\b)",
        200,
    ),
    _title_format("edition-extended", "Extended", r"\bExtended\b", 100),
    _title_format("edition-unrated", "Unrated", r"\bUnrated\b", 100),
    _title_format("edition-theatrical", "Theatrical", r"\bTheatrical\b", 50),
    _title_format("edition-remastered", "Remastered", r"\bRemastered\b", 150),
    _title_format(
        "edition-special",
        "Special Edition",
        r"\bSpecial[-. ]?Edition\b|(?-i:\bSE\b)",
        50,
    ),
    _title_format("edition-criterion", "Criterion", r"\bCriterion\b|(?-i:\bCC\b)", 250),
    _title_format("edition-open-matte", "Open Matte", r"\bOpen[-. ]?Matte\b", 100),
]

CODEC_FORMATS = [
    _title_format("codec-av1", "AV1", r"\bAV1\b", 100, FormatCategory.CODEC),
    _title_format("codec-vp9", "VP9", r"\bVP9\b", 0, FormatCategory.CODEC),
    _title_format("codec-x265", "x265", r"\b(?:x265|HEVC|H\.?265)\b", 0, FormatCategory.CODEC),
    _title_format(
        "codec-x264",
        "x264",
        r"\b(?:x264|AVC|H\.?264)\b",
        0,
        FormatCategory.CODEC,
        title_excludes("Not 2160p", r"\b(?:2160p|4K|UHD)\b"),
    ),
]

TV_FORMATS = [
    _title_format("tv-season-pack", "Season Pack", r"\bS\d{2}(?!E)\b", 50, FormatCategory.OTHER),
    _title_format(
        "tv-complete-series",
        "Complete Series",
        r"\b(?:Complete|Full)[-. ]?Series\b",
        100,
        FormatCategory.OTHER,
    ),
]

LANGUAGE_FORMATS = [
    _title_format("lang-multi", "Multi-Audio", r"\bMulti\b", 50, FormatCategory.OTHER),
    _title_format(
        "lang-dual-audio",
        "Dual Audio",
        r"\bDual[-. ]?Audio\b|\bDUAL\b",
        50,
        FormatCategory.OTHER,
    ),
]

ALL_ENHANCEMENT_FORMATS = [
    *REPACK_FORMATS,
    *IMAX_FORMATS,
    *EDITION_FORMATS,
    *CODEC_FORMATS,
    *TV_FORMATS,
    *LANGUAGE_FORMATS,
]
