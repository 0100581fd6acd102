"""
Formats des groupes de faible qualite.

Ces groupes produisent des encodes mediocres (ou des upscales): les
profils de qualite les penalisent, le profil micro les tolere.
"""

from cinerank.core.value_objects.custom_format import CustomFormat, FormatCategory
from cinerank.services.formats.builders import NOT_REMUX, group_is, named_group

_LQ = FormatCategory.LOW_QUALITY

LOW_QUALITY_FORMATS = [
    named_group("lq-nahom", "NAHOM", _LQ),
    named_group("lq-oeplus", "OEPlus", _LQ),
    named_group("lq-4k4u", "4K4U", _LQ),
    named_group("lq-aoc", "AOC", _LQ),
    # Les remux BeyondHD sont corrects, seuls leurs encodes sont penalises
    CustomFormat(
        id="lq-beyondhd-encode",
        name="BeyondHD Encode",
        category=_LQ,
        conditions=(group_is("BeyondHD", required=True), NOT_REMUX),
        tags=(_LQ.value, "BeyondHD"),
    ),
    named_group("lq-hds", "HDS", _LQ),
    named_group("lq-d3g", "d3g", _LQ),
    named_group("lq-flights", "Flights", _LQ),
    named_group("lq-classicalhd", "CLASSiCALHD", _LQ),
    named_group("lq-creative24", "CREATiVE24", _LQ),
    named_group("lq-depraved", "DepraveD", _LQ),
    named_group("lq-devisive", "DeViSiVE", _LQ),
    named_group("lq-drx", "DRX", _LQ),
    named_group("lq-blasphemy", "BLASPHEMY", _LQ),
    named_group("lq-bols", "BOLS", _LQ),
    named_group("lq-btm", "BTM", _LQ),
    named_group("lq-fgt", "FGT", _LQ),
    named_group("lq-ivy", "iVy", _LQ),
    named_group("lq-kc", "KC", _LQ),
]
