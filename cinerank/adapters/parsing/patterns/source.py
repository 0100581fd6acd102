"""
Extraction de la source (Remux, BluRay, WEB-DL, HDTV, CAM...).

Precedence: REMUX avant BluRay (un remux vient d'un BluRay mais doit
gagner), WEB-DL avant le "WEB" generique, les variantes screener avant
le "SCR" isole.
"""

from typing import Optional

from cinerank.adapters.parsing.patterns.matching import PatternMatch, first_match, rules
from cinerank.core.value_objects.release import Source

SOURCE_PATTERNS = [
    *rules(Source.REMUX, r"\bremux\b", r"\bbdremux\b"),
    *rules(
        Source.BLURAY,
        r"\bblu[\s._-]?ray\b",
        r"\bbdrip\b",
        r"\bbrrip\b",
        r"\bbd[\s._-]?rip\b",
        r"\bbdmv\b",
    ),
    *rules(
        Source.WEBDL,
        r"\bweb[\s._-]?dl\b",
        r"\bwebdl\b",
        r"\bamazon[\s._-]?web[\s._-]?dl\b",
        r"\bnetflix[\s._-]?web[\s._-]?dl\b",
        r"\bitunes\b",
    ),
    *rules(
        Source.WEBRIP,
        r"\bweb[\s._-]?rip\b",
        r"\bwebrip\b",
        r"\bweb[\s._-]?cap\b",
        r"\bweb\b",
    ),
    *rules(
        Source.HDTV,
        r"\bhdtv\b",
        r"\bpdtv\b",
        r"\bdsr\b",
        r"\bdthrip\b",
        r"\bdvb\b",
        r"\btvrip\b",
        r"\bsatellite[\s._-]?rip\b",
    ),
    *rules(Source.DVD, r"\bdvd[\s._-]?rip\b", r"\bdvdr\b", r"\bdvd[\s._-]?r\b"),
    *rules(Source.SCREENER, r"\bdvd[\s._-]?scr\b"),
    *rules(Source.DVD, r"\bdvd9\b", r"\bdvd5\b", r"\bdvd\b"),
    *rules(
        Source.SCREENER,
        r"\bscreener\b",
        r"\bdvdscr\b",
        r"\bbdscr\b",
        r"\bweb[\s._-]?scr\b",
        r"\bscr\b",
    ),
    *rules(Source.TELECINE, r"\btelecine\b", r"\bhdtc\b", r"\btc\b"),
    *rules(
        Source.TELESYNC,
        r"\btelesync\b",
        r"\bhdts\b",
        r"\bts\b(?!\w)",
        r"\bpre[\s._-]?dvd\b",
        r"\bpdvd\b",
    ),
    *rules(Source.CAM, r"\bcam[\s._-]?rip\b", r"\bhdcam\b", r"\bcam\b"),
]


def extract_source(title: str) -> Optional[PatternMatch[Source]]:
    """Detecte la source dans un titre normalise (premiere regle gagnante)."""
    return first_match(SOURCE_PATTERNS, title)
