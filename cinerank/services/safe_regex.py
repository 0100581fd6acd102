"""
Garde-fous pour les expressions regulieres configurables.

Les motifs des formats personnalises viennent de la configuration
utilisateur: ils sont valides au chargement pour rejeter les
constructions sujettes au backtracking catastrophique, et les entrees
sont tronquees avant toute recherche.
"""

import re
from dataclasses import dataclass
from typing import Optional

from loguru import logger

MAX_INPUT_LENGTH = 100_000
MAX_PATTERN_LENGTH = 500

NESTED_QUANTIFIERS = "quantificateurs imbriques"
QUANTIFIED_ALTERNATION = "alternance quantifiee"
QUANTIFIED_BACKREFERENCE = "reference arriere quantifiee"
QUANTIFIED_LONG_CLASS = "longue classe de caracteres quantifiee"

LONG_CLASS_LENGTH = 50

# Prefixes de groupe: (?: (?= (?! (?> (?<= (?<! (?P<nom> (?i: (?-i:
_GROUP_PREFIX = re.compile(r"\?(?:[:=!>]|<[=!]|P<\w+>|[aiLmsux]*(?:-[imsx]+)?:)")
# Constructions sans contenu: drapeaux globaux (?i) et commentaires (?#...)
_INLINE_DIRECTIVE = re.compile(r"\?(?:[aiLmsux]+\)|#[^)]*\))")
_BRACE_QUANTIFIER = re.compile(r"\{(\d*)(?:(,)(\d*))?\}")


@dataclass
class _GroupState:
    """Etat d'un groupe ouvert pendant l'analyse d'un motif."""

    has_quantifier: bool = False
    has_alternation: bool = False


def _read_quantifier(pattern: str, index: int) -> Optional[tuple[int, bool]]:
    """Retourne (fin, non borne) si un quantificateur commence a index."""
    if index >= len(pattern):
        return None
    char = pattern[index]
    if char in "+*":
        end, unbounded = index + 1, True
    elif char == "?":
        end, unbounded = index + 1, False
    elif char == "{":
        match = _BRACE_QUANTIFIER.match(pattern, index)
        if match is None or not (match.group(1) or match.group(3)):
            return None
        end, unbounded = match.end(), bool(match.group(2)) and not match.group(3)
    else:
        return None
    # Suffixe paresseux ou possessif
    if end < len(pattern) and pattern[end] in "?+":
        end += 1
    return end, unbounded


def _class_end(pattern: str, index: int) -> int:
    """Position qui suit le ] fermant la classe ouverte a index."""
    position = index + 1
    if pattern.startswith("^", position):
        position += 1
    if pattern.startswith("]", position):
        position += 1
    while position < len(pattern):
        char = pattern[position]
        if char == "\\":
            position += 2
        elif char == "]":
            return position + 1
        else:
            position += 1
    return len(pattern)


def find_dangerous_construct(pattern: str) -> Optional[str]:
    """
    Analyse un motif en suivant l'imbrication des groupes.

    Un groupe repete sans borne (+, * ou {n,}) est dangereux si son
    contenu, groupes imbriques compris, contient deja un quantificateur,
    ou s'il contient une alternance a son propre niveau. Une reference
    arriere ou une longue classe de caracteres repetee sans borne est
    aussi rejetee.

    Returns:
        La raison du rejet, ou None.
    """
    stack = [_GroupState()]
    index = 0

    while index < len(pattern):
        char = pattern[index]
        atom: object = None

        if char == "\\":
            escaped = pattern[index + 1 : index + 2]
            index += 2
            if escaped and escaped in "123456789":
                atom = QUANTIFIED_BACKREFERENCE
        elif char == "[":
            end = _class_end(pattern, index)
            if end - index - 2 >= LONG_CLASS_LENGTH:
                atom = QUANTIFIED_LONG_CLASS
            index = end
        elif char == "(":
            directive = _INLINE_DIRECTIVE.match(pattern, index + 1)
            if directive is not None:
                index = directive.end()
                continue
            prefix = _GROUP_PREFIX.match(pattern, index + 1)
            index = prefix.end() if prefix is not None else index + 1
            stack.append(_GroupState())
            continue
        elif char == ")" and len(stack) > 1:
            group = stack.pop()
            stack[-1].has_quantifier |= group.has_quantifier
            atom = group
            index += 1
        elif char == "|":
            stack[-1].has_alternation = True
            index += 1
            continue
        else:
            index += 1

        quantifier = _read_quantifier(pattern, index)
        if quantifier is None:
            continue
        index, unbounded = quantifier
        stack[-1].has_quantifier = True
        if not unbounded:
            continue
        if isinstance(atom, _GroupState):
            if atom.has_quantifier:
                return NESTED_QUANTIFIERS
            if atom.has_alternation:
                return QUANTIFIED_ALTERNATION
        elif isinstance(atom, str):
            return atom

    return None


class UnsafePatternError(ValueError):
    """
    Exception levee quand un motif est invalide ou juge dangereux.

    Attributes:
        pattern: Motif rejete
        reason: Raison du rejet
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Motif rejete ({reason}): {pattern[:80]}")
        self.pattern = pattern
        self.reason = reason


def validate_pattern(
    pattern: str, max_pattern_length: int = MAX_PATTERN_LENGTH
) -> Optional[str]:
    """
    Valide un motif configurable.

    Args:
        pattern: Motif a valider
        max_pattern_length: Longueur maximale acceptee

    Returns:
        La raison du rejet, ou None si le motif est sur et compilable.
    """
    if len(pattern) > max_pattern_length:
        return f"motif trop long ({len(pattern)} > {max_pattern_length})"

    reason = find_dangerous_construct(pattern)
    if reason is not None:
        return reason

    try:
        re.compile(pattern)
    except re.error as e:
        return f"expression invalide: {e}"

    return None


def is_safe_pattern(pattern: str, max_pattern_length: int = MAX_PATTERN_LENGTH) -> bool:
    """Indique si un motif passe la validation."""
    return validate_pattern(pattern, max_pattern_length) is None


def ensure_safe_pattern(pattern: str, max_pattern_length: int = MAX_PATTERN_LENGTH) -> str:
    """
    Valide un motif et le retourne inchange.

    Raises:
        UnsafePatternError: Si le motif est invalide ou dangereux.
    """
    reason = validate_pattern(pattern, max_pattern_length)
    if reason is not None:
        raise UnsafePatternError(pattern, reason)
    return pattern


def compile_pattern(
    pattern: str, max_pattern_length: int = MAX_PATTERN_LENGTH
) -> Optional[re.Pattern[str]]:
    """
    Compile un motif (insensible a la casse) s'il est sur.

    Returns:
        Le motif compile, ou None (le motif ne doit alors jamais correspondre).
    """
    reason = validate_pattern(pattern, max_pattern_length)
    if reason is not None:
        logger.warning(f"Motif ignore ({reason}): {pattern[:80]}")
        return None
    return re.compile(pattern, re.IGNORECASE)


def truncate_input(text: str, max_length: int = MAX_INPUT_LENGTH) -> str:
    """Tronque une entree avant une recherche par expression reguliere."""
    if len(text) > max_length:
        return text[:max_length]
    return text


def safe_search(pattern: str, text: str, max_length: int = MAX_INPUT_LENGTH) -> bool:
    """Recherche un motif valide dans une entree tronquee (False si motif rejete)."""
    compiled = compile_pattern(pattern)
    if compiled is None:
        return False
    return compiled.search(truncate_input(text, max_length)) is not None
