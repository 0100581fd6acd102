"""
Parsing des titres de releases.

- normalizer : Canonicalisation des separateurs
- patterns/ : Extracteurs de motifs ordonnes
- release_parser : Orchestration (RegexReleaseParser)
"""

from cinerank.adapters.parsing.normalizer import normalize_title
from cinerank.adapters.parsing.release_parser import RegexReleaseParser, parse_release

__all__ = [
    "RegexReleaseParser",
    "normalize_title",
    "parse_release",
]
