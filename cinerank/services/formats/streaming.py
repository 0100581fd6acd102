"""
Formats des services de streaming (WEB-DL/WEBRip).

Les abreviations courtes (iT, MAX, NOW, MA) sont sensibles a la casse
pour ne pas correspondre a des mots du titre du film.
"""

from cinerank.core.value_objects.custom_format import CustomFormat, FormatCategory
from cinerank.services.formats.builders import title_excludes, title_matches


def _service(format_id: str, name: str, pattern: str, *conditions) -> CustomFormat:
    return CustomFormat(
        id=format_id,
        name=name,
        category=FormatCategory.STREAMING,
        conditions=(title_matches(name, pattern), *conditions),
        tags=("Streaming", name),
    )


STREAMING_SERVICE_FORMATS = [
    _service("streaming-atvp", "Apple TV+", r"\b(?:ATVP|AppleTV\+?|Apple[. ]?TV)\b"),
    _service("streaming-amzn", "Amazon", r"\b(?:AMZN|Amazon)\b"),
    _service("streaming-nf", "Netflix", r"\b(?:NF|Netflix)\b"),
    _service("streaming-dsnp", "Disney+", r"\b(?:DSNP|Disney\+?|DisneyPlus)\b"),
    _service("streaming-hmax", "HBO Max", r"\b(?:HMAX|HBO[. ]?Max)\b"),
    _service(
        "streaming-max",
        "Max",
        r"(?-i:\bMAX\b)",
        title_excludes("Not HMAX", r"\bHMAX\b"),
    ),
    _service("streaming-pcok", "Peacock", r"\b(?:PCOK|Peacock)\b"),
    _service("streaming-pmtp", "Paramount+", r"\b(?:PMTP|Paramount\+?)\b"),
    _service("streaming-hulu", "Hulu", r"\bHULU\b"),
    _service("streaming-it", "iTunes", r"(?-i:\biT\b)|\biTunes\b"),
    _service("streaming-stan", "Stan", r"(?-i:\bSTAN\b)"),
    _service("streaming-crav", "Crave", r"\b(?:CRAV|Crave)\b"),
    _service("streaming-now", "NOW", r"(?-i:\bNOW\b)"),
    _service("streaming-sho", "Showtime", r"\b(?:SHO|Showtime)\b"),
    _service("streaming-roku", "Roku", r"\bROKU\b"),
    _service("streaming-bcore", "Bravia Core", r"\b(?:BCORE|Bravia[. ]?Core)\b"),
    # "MA" apparait aussi dans DTS-HD.MA
    _service("streaming-ma", "Movies Anywhere", r"(?<!HD[ .-])(?-i:\bMA\b)(?![ .]?[0-9])"),
]

STREAMING_PROTOCOL_FORMAT = CustomFormat(
    id="streaming-protocol",
    name="Streaming Release",
    category=FormatCategory.STREAMING,
    conditions=(title_matches("Streaming Tag", r"\[Streaming\]"),),
    tags=("Streaming", "Protocol", "Instant"),
    description="Release issue d'un indexeur de streaming (lecture immediate)",
)

ALL_STREAMING_FORMATS = [*STREAMING_SERVICE_FORMATS, STREAMING_PROTOCOL_FORMAT]
