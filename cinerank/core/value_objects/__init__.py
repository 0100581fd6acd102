"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ParsedRelease, EpisodeInfo : Informations extraites d'un titre de release
- Resolution, Source, Codec, AudioCodec, AudioChannels, HdrFormat : Valeurs canoniques
- CustomFormat, FormatCondition, ConditionType, FormatCategory : Formats personnalises
- ScoringProfile, SizeContext, ReleaseAttributes, ScoringResult : Scoring
- compare_resolution, compare_source, compare_codec... : Ordres de qualite
"""

from cinerank.core.value_objects.custom_format import (
    ConditionMatchResult,
    ConditionType,
    CustomFormat,
    FormatCategory,
    FormatCondition,
    MatchedFormat,
)
from cinerank.core.value_objects.quality_order import (
    compare_audio,
    compare_channels,
    compare_codec,
    compare_hdr,
    compare_resolution,
    compare_source,
)
from cinerank.core.value_objects.release import (
    AudioChannels,
    AudioCodec,
    Codec,
    EpisodeInfo,
    HdrFormat,
    ParsedRelease,
    Resolution,
    Source,
)
from cinerank.core.value_objects.scoring import (
    BANNED_SCORE,
    DEFAULT_RESOLUTION_ORDER,
    CategoryBreakdown,
    MediaKind,
    PackPreference,
    Protocol,
    RankedRelease,
    ReleaseCandidate,
    ReleaseAttributes,
    ReleaseComparison,
    ScoredFormat,
    ScoringProfile,
    ScoringResult,
    SizeContext,
    UpgradeDecision,
)

__all__ = [
    "AudioChannels",
    "AudioCodec",
    "BANNED_SCORE",
    "CategoryBreakdown",
    "Codec",
    "ConditionMatchResult",
    "ConditionType",
    "CustomFormat",
    "DEFAULT_RESOLUTION_ORDER",
    "EpisodeInfo",
    "FormatCategory",
    "FormatCondition",
    "HdrFormat",
    "MatchedFormat",
    "MediaKind",
    "PackPreference",
    "ParsedRelease",
    "Protocol",
    "RankedRelease",
    "ReleaseCandidate",
    "ReleaseAttributes",
    "ReleaseComparison",
    "Resolution",
    "ScoredFormat",
    "ScoringProfile",
    "ScoringResult",
    "SizeContext",
    "Source",
    "UpgradeDecision",
    "compare_audio",
    "compare_channels",
    "compare_codec",
    "compare_hdr",
    "compare_resolution",
    "compare_source",
]
