"""
Extraction des langues audio.

Chaque famille de langue est associee a un code ISO 639-1. Un marqueur
multi/dual-audio force la presence de l'anglais. Sans aucun marqueur,
la langue par defaut est l'anglais.
"""

import re

DEFAULT_LANGUAGE = "en"
MULTI_MARKER = "multi"

LANGUAGE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(pattern, re.IGNORECASE), code)
    for pattern, code in (
        (r"\bmulti(?:[\s._-]?(?:lang|language|audio|sub)?)?\b", MULTI_MARKER),
        (r"\bdual[\s._-]?audio\b", MULTI_MARKER),
        (r"\b(?:english|eng)\b", "en"),
        (r"\b(?:german|deutsch|ger)\b", "de"),
        (r"\b(?:french|francais|fre|vff|vostfr|truefrench)\b", "fr"),
        (r"\b(?:spanish|espanol|spa|castellano|latino)\b", "es"),
        (r"\b(?:italian|italiano|ita)\b", "it"),
        (r"\b(?:portuguese|portugues|por|brazilian)\b", "pt"),
        (r"\b(?:russian|rus)\b", "ru"),
        (r"\b(?:japanese|jpn|jap)\b", "ja"),
        (r"\b(?:korean|kor)\b", "ko"),
        (r"\b(?:chinese|mandarin|cantonese|chi|chn)\b", "zh"),
        (r"\b(?:hindi|hin)\b", "hi"),
        (r"\b(?:arabic|ara)\b", "ar"),
        (r"\b(?:dutch|nederlands|nld)\b", "nl"),
        (r"\b(?:polish|polski|pol)\b", "pl"),
        (r"\b(?:swedish|svenska|swe)\b", "sv"),
        (r"\b(?:norwegian|norsk|nor)\b", "no"),
        (r"\b(?:danish|dansk|dan)\b", "da"),
        (r"\b(?:finnish|suomi|fin)\b", "fi"),
        (r"\b(?:turkish|turkce|tur)\b", "tr"),
        (r"\b(?:greek|gre)\b", "el"),
        (r"\b(?:czech|cze)\b", "cs"),
        (r"\b(?:hungarian|magyar|hun)\b", "hu"),
        (r"\b(?:thai|tha)\b", "th"),
        (r"\b(?:vietnamese|vie)\b", "vi"),
        (r"\b(?:hebrew|heb)\b", "he"),
    )
]


def extract_languages(title: str) -> tuple[str, ...]:
    """
    Detecte les langues d'un titre normalise.

    Args:
        title: Titre normalise

    Returns:
        Codes detectes, sans doublon, dans l'ordre de la table.
        ("en",) si aucun marqueur; "en" ajoute apres un marqueur multi.
    """
    found: list[str] = []
    for pattern, code in LANGUAGE_PATTERNS:
        if code not in found and pattern.search(title):
            found.append(code)

    if not found:
        return (DEFAULT_LANGUAGE,)

    if MULTI_MARKER in found and DEFAULT_LANGUAGE not in found:
        found.append(DEFAULT_LANGUAGE)

    return tuple(found)
