"""
Formats HDR.

Une release ne garde qu'un seul format HDR au scoring (le plus
prioritaire). Les formats Dolby Vision distinguent les releases avec
une couche de repli (HDR10, HLG...) de celles sans repli, illisibles
sur un ecran non compatible.
"""

from cinerank.core.value_objects.custom_format import CustomFormat, FormatCategory
from cinerank.services.formats.builders import title_excludes, title_matches

DOLBY_VISION = r"\b(?:dv(?![ .](?:HLG|SDR))|dovi|dolby[ .]?vision)\b"
HDR_GENERIC = r"\bHDR\b(?!10)"
HDR_ANY = r"\bHDR\b"
HDR10 = r"\bHDR10(?!\+|Plus)\b"
HDR10_PLAIN = r"\bHDR10\b"
HDR10_PLUS = r"\bHDR10.?(?:\+|P(?:lus)?\b)"
HLG = r"\bHLG\b"
PQ = r"\b(?:PQ|PQ10)\b"
SDR = r"\bSDR\b"
REMUX = r"\bREMUX\b"
BLURAY = r"\b(?:BluRay|Blu-Ray|BDREMUX|BD)\b"
HULU = r"\bHULU\b"
HEVC = r"\b(?:x265|HEVC|h\.?265)\b"


def _hdr(format_id: str, name: str, score: int, *conditions, description=None) -> CustomFormat:
    return CustomFormat(
        id=format_id,
        name=name,
        category=FormatCategory.HDR,
        default_score=score,
        conditions=tuple(conditions),
        tags=("HDR", name),
        description=description,
    )


def _excluding(*labels: str):
    patterns = {
        "SDR": SDR,
        "PQ": PQ,
        "HLG": HLG,
        "HDR": HDR_GENERIC,
        "HDR10": HDR10_PLAIN,
        "HDR10+": HDR10_PLUS,
        "DV": DOLBY_VISION,
    }
    return tuple(title_excludes(f"Not {label}", patterns[label]) for label in labels)


HDR_FORMATS = [
    _hdr(
        "hdr-dolby-vision",
        "Dolby Vision",
        3500,
        title_matches("Dolby Vision", DOLBY_VISION),
        # Au moins une couche de repli (ou une source qui en a toujours une)
        title_matches("HDR", HDR_ANY, required=False),
        title_matches("HDR10", HDR10_PLAIN, required=False),
        title_matches("HDR10+", HDR10_PLUS, required=False),
        title_matches("HLG", HLG, required=False),
        title_matches("Remux", REMUX, required=False),
        title_matches("BluRay", BLURAY, required=False),
        title_matches("Hulu", HULU, required=False),
        description="Dolby Vision avec couche de repli",
    ),
    _hdr(
        "hdr-dolby-vision-no-fallback",
        "Dolby Vision (No Fallback)",
        1000,
        title_matches("Dolby Vision", DOLBY_VISION),
        *_excluding("HDR", "HDR10", "HDR10+"),
        title_excludes("Not Remux", REMUX),
        title_excludes("Not BluRay", BLURAY),
        title_excludes("Not Hulu", HULU),
        description="Dolby Vision sans couche HDR10 (profil 5)",
    ),
    _hdr(
        "hdr-hdr10plus",
        "HDR10+",
        2500,
        title_matches("HDR10+", HDR10_PLUS),
        *_excluding("SDR", "PQ", "HLG"),
    ),
    _hdr(
        "hdr-hdr10",
        "HDR10",
        2000,
        title_matches("HDR10", HDR10),
        *_excluding("SDR", "PQ", "HLG", "HDR10+"),
    ),
    _hdr(
        "hdr-generic",
        "HDR",
        1500,
        title_matches("HDR", HDR_GENERIC),
        *_excluding("SDR", "PQ", "HLG", "HDR10", "HDR10+"),
    ),
    _hdr(
        "hdr-hlg",
        "HLG",
        800,
        title_matches("HLG", HLG),
        *_excluding("SDR", "PQ", "HDR", "HDR10", "HDR10+"),
    ),
    _hdr(
        "hdr-pq",
        "PQ",
        500,
        title_matches("PQ", PQ),
        *_excluding("SDR", "HLG", "HDR", "HDR10", "HDR10+"),
    ),
    _hdr(
        "hdr-sdr",
        "SDR",
        0,
        title_matches("SDR", SDR),
        title_excludes("Not HDR", HDR_ANY),
        *_excluding("DV", "HLG", "PQ"),
    ),
    _hdr(
        "hdr-missing",
        "HDR (Missing)",
        1500,
        title_matches("Dolby Vision", DOLBY_VISION),
        title_matches("HEVC", HEVC),
        title_matches("1080p", r"\b1080p\b"),
        title_matches("BluRay", r"\b(?:BluRay|Blu-Ray|BDRip)\b"),
        *_excluding("SDR", "PQ", "HLG"),
        title_excludes("Not HDR", HDR_ANY),
        description="Encode 1080p DV sans etiquette HDR explicite",
    ),
    _hdr(
        "hdr10-missing",
        "HDR10 (Missing)",
        2000,
        title_matches("2160p", r"\b(?:2160p|4K|UHD)\b"),
        title_matches("BluRay", r"\b(?:BluRay|Blu-Ray|BDREMUX)\b"),
        title_matches("HEVC", HEVC),
        title_excludes("Not Remux", REMUX),
        title_excludes("Not WEB", r"\b(?:WEB[-.]?DL|WEB[-.]?Rip|WEB)\b"),
        *_excluding("SDR", "PQ", "HLG", "HDR10", "HDR10+", "DV"),
        title_excludes("Not HDR", HDR_ANY),
        description="Encode UHD BluRay ou l'etiquette HDR10 est omise",
    ),
]
