"""Formats des groupes micro (fichiers tres compresses)."""

from cinerank.core.value_objects.custom_format import FormatCategory
from cinerank.services.formats.builders import named_group

MICRO_FORMATS = [
    named_group("micro-yts", "YTS", FormatCategory.MICRO, r"\bYTS(?:\.MX|\.LT|\.AG)?\b"),
    named_group("micro-yify", "YIFY", FormatCategory.MICRO, r"\bYIFY\b"),
    named_group("micro-rarbg", "RARBG", FormatCategory.MICRO, r"\bRARBG\b"),
    named_group("micro-psa", "PSA", FormatCategory.MICRO),
    named_group("micro-megusta", "MeGusta", FormatCategory.MICRO),
    named_group("micro-galaxyrg", "GalaxyRG", FormatCategory.MICRO),
    named_group("micro-tgx", "TGx", FormatCategory.MICRO),
    named_group("micro-etrg", "ETRG", FormatCategory.MICRO),
    named_group("micro-ettv", "ETTV", FormatCategory.MICRO),
    named_group("micro-eztv", "EZTV", FormatCategory.MICRO),
    named_group("micro-x0r", "x0r", FormatCategory.MICRO),
    named_group("micro-fgt", "FGT", FormatCategory.MICRO),
    named_group("micro-ion10", "ION10", FormatCategory.MICRO),
]
