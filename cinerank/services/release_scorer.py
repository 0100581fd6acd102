"""
Moteur de scoring des releases.

Calcule le score d'une release pour un profil:
1. Evaluation de tous les formats du registre
2. Exclusivite HDR (un seul format HDR retenu)
3. Score de chaque format (surcharge du profil, sinon score par defaut)
4. Detail par categorie, bannissements, bonus de pack
5. Controles de resolution et de taille, seuil minimal

Fournit aussi la comparaison, le classement, le filtrage et la
decision d'upgrade entre releases.
"""

from dataclasses import replace
from functools import cmp_to_key
from typing import Iterable, Optional, Sequence, Union

from loguru import logger

from cinerank.adapters.parsing.release_parser import parse_release
from cinerank.config import Settings
from cinerank.core.ports.parser import IReleaseParser
from cinerank.core.ports.profile_store import IProfileStore
from cinerank.core.value_objects.custom_format import (
    CustomFormat,
    FormatCategory,
    MatchedFormat,
)
from cinerank.core.value_objects.quality_order import (
    compare_codec,
    compare_resolution,
    compare_source,
)
from cinerank.core.value_objects.release import EpisodeInfo, Resolution
from cinerank.core.value_objects.scoring import (
    BANNED_SCORE,
    CategoryBreakdown,
    MediaKind,
    PackPreference,
    RankedRelease,
    ReleaseAttributes,
    ReleaseCandidate,
    ReleaseComparison,
    ScoredFormat,
    ScoringProfile,
    ScoringResult,
    SizeContext,
    UpgradeDecision,
)
from cinerank.services.format_matcher import extract_attributes, match_formats
from cinerank.services.formats import ALL_FORMATS
from cinerank.services.safe_regex import truncate_input


# Priorite des formats HDR (le plus specifique d'abord)
HDR_PRIORITY: tuple[str, ...] = (
    "hdr-dolby-vision",
    "hdr-dolby-vision-no-fallback",
    "hdr-hdr10plus",
    "hdr-hdr10",
    "hdr10-missing",
    "hdr-generic",
    "hdr-hlg",
    "hdr-pq",
    "hdr-missing",
    "hdr-sdr",
)
_UNLISTED_HDR_PRIORITY = len(HDR_PRIORITY)

BYTES_PER_GB = 1024 * 1024 * 1024
BYTES_PER_MB = 1024 * 1024

ReleaseInput = Union[str, ReleaseCandidate]


def parse_release_attributes(title: str) -> ReleaseAttributes:
    """Parse un titre et construit ses attributs de scoring."""
    return extract_attributes(parse_release(title))


# ====================
# Etapes du calcul
# ====================

def apply_hdr_exclusivity(matched: list[MatchedFormat]) -> list[MatchedFormat]:
    """
    Ne conserve que le format HDR le plus prioritaire.

    Les autres formats gardent leur ordre; le format HDR retenu est
    place apres eux.
    """
    hdr_formats = [m for m in matched if m.format.category is FormatCategory.HDR]
    if len(hdr_formats) <= 1:
        return matched

    def priority(m: MatchedFormat) -> int:
        if m.format.id in HDR_PRIORITY:
            return HDR_PRIORITY.index(m.format.id)
        return _UNLISTED_HDR_PRIORITY

    best = min(hdr_formats, key=priority)
    others = [m for m in matched if m.format.category is not FormatCategory.HDR]
    return [*others, best]


def _score_formats(matched: list[MatchedFormat], profile: ScoringProfile) -> list[ScoredFormat]:
    return [
        ScoredFormat(
            format=m.format,
            score=profile.format_scores.get(m.format.id, m.format.default_score),
            condition_results=m.condition_results,
        )
        for m in matched
    ]


def build_breakdown(scored: Sequence[ScoredFormat]) -> dict[str, CategoryBreakdown]:
    """Somme des scores et noms des formats par categorie."""
    sums: dict[str, int] = {}
    names: dict[str, list[str]] = {}
    for scored_format in scored:
        category = scored_format.format.category.value
        sums[category] = sums.get(category, 0) + scored_format.score
        names.setdefault(category, []).append(scored_format.format.name)
    return {
        category: CategoryBreakdown(score=sums[category], formats=tuple(names[category]))
        for category in sums
    }


def calculate_pack_bonus(
    episode: Optional[EpisodeInfo], pack_preference: Optional[PackPreference] = None
) -> int:
    """
    Bonus de pack d'une release TV.

    Serie complete > multi-saisons (2+) > saison unique > episode isole (0).
    """
    preference = pack_preference or PackPreference()
    if not preference.enabled or episode is None:
        return 0
    if episode.is_complete_series:
        return preference.complete_series_bonus
    if episode.is_season_pack and episode.season_count >= 2:
        return preference.multi_season_bonus
    if episode.is_season_pack:
        return preference.single_season_bonus
    return 0


def check_resolution(profile: ScoringProfile, resolution: Resolution) -> Optional[str]:
    """Retourne la raison du rejet si la resolution n'est pas acceptee par le profil."""
    if resolution in profile.resolution_order:
        return None
    return f"Resolution {resolution.value} is not accepted by profile {profile.id}"


def check_size(
    profile: ScoringProfile,
    file_size_bytes: Optional[int],
    size_context: Optional[SizeContext],
) -> Optional[str]:
    """
    Valide la taille d'un fichier contre les bornes du profil.

    Les films sont controles en Go, les episodes en Mo par episode.
    Un pack de saison est moyenne sur son nombre d'episodes; si ce
    nombre est inconnu, la taille n'est pas controlee.

    Returns:
        La raison du rejet, ou None si la taille est acceptee.
    """
    if not file_size_bytes or file_size_bytes <= 0 or size_context is None:
        return None

    if size_context.media_kind is MediaKind.MOVIE:
        size_gb = file_size_bytes / BYTES_PER_GB
        if profile.movie_min_size_gb is not None and size_gb < profile.movie_min_size_gb:
            return (
                f"Movie size {size_gb:.2f} GB is below minimum "
                f"{profile.movie_min_size_gb:g} GB"
            )
        if profile.movie_max_size_gb is not None and size_gb > profile.movie_max_size_gb:
            return (
                f"Movie size {size_gb:.2f} GB exceeds maximum "
                f"{profile.movie_max_size_gb:g} GB"
            )
        return None

    size_mb = file_size_bytes / BYTES_PER_MB
    suffix = ""
    if size_context.is_season_pack:
        if not size_context.episode_count or size_context.episode_count <= 0:
            return None
        size_mb = size_mb / size_context.episode_count
        suffix = " per episode (avg)"

    if profile.episode_min_size_mb is not None and size_mb < profile.episode_min_size_mb:
        return (
            f"Episode size {size_mb:.0f} MB{suffix} is below minimum "
            f"{profile.episode_min_size_mb:g} MB"
        )
    if profile.episode_max_size_mb is not None and size_mb > profile.episode_max_size_mb:
        return (
            f"Episode size {size_mb:.0f} MB{suffix} exceeds maximum "
            f"{profile.episode_max_size_mb:g} MB"
        )
    return None


# ====================
# Scoring
# ====================

def score_release(
    title: str,
    profile: ScoringProfile,
    attributes: Optional[ReleaseAttributes] = None,
    file_size_bytes: Optional[int] = None,
    size_context: Optional[SizeContext] = None,
    formats: Optional[Sequence[CustomFormat]] = None,
) -> ScoringResult:
    """
    Calcule le score d'une release pour un profil.

    Args:
        title: Titre brut de la release
        profile: Profil de scoring
        attributes: Attributs deja extraits (sinon le titre est parse)
        file_size_bytes: Taille du fichier pour la validation de taille
        size_context: Contexte film/serie de la validation de taille
        formats: Registre de formats (par defaut les formats integres)

    Returns:
        ScoringResult complet. Les rejets sont des champs du resultat,
        jamais des exceptions.
    """
    attrs = attributes or parse_release_attributes(title)
    registry = list(formats) if formats is not None else ALL_FORMATS

    matched = apply_hdr_exclusivity(match_formats(attrs, registry, raw_title=title))
    scored = _score_formats(matched, profile)

    banned_reasons = tuple(s.format.name for s in scored if s.score <= BANNED_SCORE)
    is_banned = bool(banned_reasons)

    pack_bonus = calculate_pack_bonus(attrs.episode, profile.pack_preference)
    total = sum(s.score for s in scored) + pack_bonus

    resolution_reason = check_resolution(profile, attrs.resolution)
    size_reason = check_size(profile, file_size_bytes, size_context)

    meets_minimum = (
        not is_banned
        and size_reason is None
        and resolution_reason is None
        and total >= profile.min_score
    )

    logger.debug(
        "Release scoree",
        release=title,
        profile=profile.id,
        score=total,
        formats=len(scored),
        banned=is_banned,
    )

    return ScoringResult(
        release_name=title,
        profile_id=profile.id,
        total_score=float("-inf") if is_banned else total,
        matched_formats=tuple(scored),
        breakdown=build_breakdown(scored),
        meets_minimum=meets_minimum,
        is_banned=is_banned,
        banned_reasons=banned_reasons,
        size_rejected=size_reason is not None,
        size_rejection_reason=size_reason,
        resolution_rejected=resolution_reason is not None,
        resolution_rejection_reason=resolution_reason,
        pack_bonus=pack_bonus,
    )


def _as_candidate(release: ReleaseInput) -> ReleaseCandidate:
    if isinstance(release, ReleaseCandidate):
        return release
    return ReleaseCandidate(name=release)


def _score_candidate(
    candidate: ReleaseCandidate,
    profile: ScoringProfile,
    formats: Optional[Sequence[CustomFormat]],
) -> ScoringResult:
    return score_release(
        candidate.name,
        profile,
        attributes=candidate.attributes,
        file_size_bytes=candidate.size_bytes,
        size_context=candidate.size_context,
        formats=formats,
    )


def compare_releases(
    first: ReleaseInput,
    second: ReleaseInput,
    profile: ScoringProfile,
    formats: Optional[Sequence[CustomFormat]] = None,
) -> ReleaseComparison:
    """Compare deux releases; le gagnant est "first", "second" ou "tie"."""
    first_result = _score_candidate(_as_candidate(first), profile, formats)
    second_result = _score_candidate(_as_candidate(second), profile, formats)

    if first_result.total_score == second_result.total_score:
        return ReleaseComparison("tie", first_result, second_result, 0)

    difference = first_result.total_score - second_result.total_score
    winner = "first" if difference > 0 else "second"
    return ReleaseComparison(winner, first_result, second_result, abs(difference))


def compare_quality(first: ReleaseAttributes, second: ReleaseAttributes) -> int:
    """Compare la resolution, puis la source, puis le codec (positif si first est meilleure)."""
    return (
        compare_resolution(first.resolution, second.resolution)
        or compare_source(first.source, second.source)
        or compare_codec(first.codec, second.codec)
    )


def _rank_order(
    first: tuple[ReleaseAttributes, ScoringResult],
    second: tuple[ReleaseAttributes, ScoringResult],
) -> int:
    first_attrs, first_result = first
    second_attrs, second_result = second
    if first_result.is_rejected != second_result.is_rejected:
        return 1 if first_result.is_rejected else -1
    if first_result.total_score != second_result.total_score:
        return -1 if first_result.total_score > second_result.total_score else 1
    return -compare_quality(first_attrs, second_attrs)


def rank_releases(
    releases: Iterable[ReleaseInput],
    profile: ScoringProfile,
    formats: Optional[Sequence[CustomFormat]] = None,
) -> list[RankedRelease]:
    """
    Classe des releases par score decroissant.

    Les releases rejetees (bannies, taille, resolution) sont placees en
    fin de liste. A score egal, la meilleure resolution passe devant,
    puis la meilleure source, puis le meilleur codec; a qualite egale,
    l'ordre d'entree est conserve.
    """
    scored = []
    for release in releases:
        candidate = _as_candidate(release)
        attrs = candidate.attributes or parse_release_attributes(candidate.name)
        result = _score_candidate(replace(candidate, attributes=attrs), profile, formats)
        scored.append((attrs, result))

    ordered = sorted(scored, key=cmp_to_key(_rank_order))
    return [
        RankedRelease(rank=index, result=result)
        for index, (_, result) in enumerate(ordered, 1)
    ]


def filter_quality_releases(
    releases: Iterable[ReleaseInput],
    profile: ScoringProfile,
    formats: Optional[Sequence[CustomFormat]] = None,
) -> list[ScoringResult]:
    """Ne garde que les releases acceptees par le profil."""
    results = [_score_candidate(_as_candidate(r), profile, formats) for r in releases]
    return [result for result in results if result.meets_minimum]


def is_upgrade(
    existing_title: str,
    candidate_title: str,
    profile: ScoringProfile,
    existing_attributes: Optional[ReleaseAttributes] = None,
    candidate_attributes: Optional[ReleaseAttributes] = None,
    existing_size_bytes: Optional[int] = None,
    candidate_size_bytes: Optional[int] = None,
    size_context: Optional[SizeContext] = None,
    formats: Optional[Sequence[CustomFormat]] = None,
) -> UpgradeDecision:
    """
    Decide si une release candidate remplace une release existante.

    La candidate est un upgrade si:
    - elle n'est ni bannie ni rejetee (taille, resolution)
    - le profil autorise les upgrades
    - le score existant est sous upgrade_until_score (-1 = illimite)
    - candidate - existante >= min_score_increment
    """
    existing = score_release(
        existing_title,
        profile,
        attributes=existing_attributes,
        file_size_bytes=existing_size_bytes,
        size_context=size_context,
        formats=formats,
    )
    candidate = score_release(
        candidate_title,
        profile,
        attributes=candidate_attributes,
        file_size_bytes=candidate_size_bytes,
        size_context=size_context,
        formats=formats,
    )

    if candidate.is_rejected:
        return UpgradeDecision(False, 0, existing, candidate)

    improvement = candidate.total_score - existing.total_score

    if not profile.upgrades_allowed:
        upgrade = False
    elif profile.upgrade_until_score != -1 and existing.total_score >= profile.upgrade_until_score:
        upgrade = False
    else:
        upgrade = improvement >= profile.min_score_increment

    return UpgradeDecision(upgrade, improvement, existing, candidate)


# ====================
# Explication et debug
# ====================

def _format_total(total: float) -> str:
    if total == float("-inf"):
        return "-inf"
    return f"{total:g}"


def explain_score(result: ScoringResult) -> str:
    """Explication textuelle d'un resultat de scoring."""
    lines = [
        f"Release: {result.release_name}",
        f"Profile: {result.profile_id}",
        f"Total Score: {_format_total(result.total_score)}",
        "",
    ]

    if result.is_banned:
        lines += ["BANNED", f"Reasons: {', '.join(result.banned_reasons)}", ""]
    if result.size_rejected:
        lines += ["SIZE REJECTED", f"Reason: {result.size_rejection_reason}", ""]
    if result.resolution_rejected:
        lines += ["RESOLUTION REJECTED", f"Reason: {result.resolution_rejection_reason}", ""]

    lines.append("Score Breakdown:")
    for category, detail in result.breakdown.items():
        sign = "+" if detail.score >= 0 else ""
        lines.append(f"  {category}: {sign}{detail.score} ({', '.join(detail.formats)})")
    if result.pack_bonus:
        lines.append(f"  pack: +{result.pack_bonus}")

    lines += ["", f"Meets Minimum: {'Yes' if result.meets_minimum else 'No'}"]
    return "\n".join(lines)


def get_matched_format_ids(
    title: str,
    attributes: Optional[ReleaseAttributes] = None,
    formats: Optional[Sequence[CustomFormat]] = None,
) -> list[str]:
    """Identifiants des formats qui correspondent (avant exclusivite HDR)."""
    attrs = attributes or parse_release_attributes(title)
    registry = list(formats) if formats is not None else ALL_FORMATS
    return [m.format.id for m in match_formats(attrs, registry, raw_title=title)]


def debug_release(
    title: str,
    attributes: Optional[ReleaseAttributes] = None,
    formats: Optional[Sequence[CustomFormat]] = None,
) -> dict:
    """Formats correspondants avec le resultat de chaque condition."""
    attrs = attributes or parse_release_attributes(title)
    registry = list(formats) if formats is not None else ALL_FORMATS
    matched = match_formats(attrs, registry, raw_title=title)
    return {
        "release_name": title,
        "matched_formats": [
            {
                "id": m.format.id,
                "name": m.format.name,
                "category": m.format.category.value,
                "conditions": [
                    {
                        "name": r.condition.name,
                        "type": r.condition.type.value,
                        "matched": r.matches,
                        "required": r.condition.required,
                        "negate": r.condition.negate,
                    }
                    for r in m.condition_results
                ],
            }
            for m in matched
        ],
    }


# ====================
# Service
# ====================

class ReleaseScorerService:
    """
    Service de scoring branche sur un parser et un store de profils.

    Les titres sont tronques a max_regex_input_length avant parsing, et
    les formats du store completent le registre integre.
    """

    def __init__(
        self,
        parser: IReleaseParser,
        profile_store: IProfileStore,
        settings: Optional[Settings] = None,
    ) -> None:
        self._parser = parser
        self._profile_store = profile_store
        self._settings = settings or Settings()

    @property
    def formats(self) -> list[CustomFormat]:
        """Registre integre complete par les formats du store."""
        return [*ALL_FORMATS, *self._profile_store.list_custom_formats()]

    def get_profile(self, profile_id: Optional[str] = None) -> ScoringProfile:
        """Profil demande, ou le profil par defaut de la configuration."""
        return self._profile_store.get_profile(profile_id or self._settings.default_profile)

    def attributes_for(self, title: str) -> ReleaseAttributes:
        """Parse un titre (tronque) et construit ses attributs."""
        bounded = truncate_input(title, self._settings.max_regex_input_length)
        return extract_attributes(self._parser.parse(bounded))

    def _candidate(self, release: ReleaseInput) -> ReleaseCandidate:
        candidate = _as_candidate(release)
        if candidate.attributes is not None:
            return candidate
        return ReleaseCandidate(
            name=candidate.name,
            attributes=self.attributes_for(candidate.name),
            size_bytes=candidate.size_bytes,
            size_context=candidate.size_context,
        )

    def score(
        self,
        title: str,
        profile_id: Optional[str] = None,
        file_size_bytes: Optional[int] = None,
        size_context: Optional[SizeContext] = None,
    ) -> ScoringResult:
        """Voir score_release() pour les details."""
        return score_release(
            title,
            self.get_profile(profile_id),
            attributes=self.attributes_for(title),
            file_size_bytes=file_size_bytes,
            size_context=size_context,
            formats=self.formats,
        )

    def compare(
        self, first: ReleaseInput, second: ReleaseInput, profile_id: Optional[str] = None
    ) -> ReleaseComparison:
        """Voir compare_releases() pour les details."""
        return compare_releases(
            self._candidate(first),
            self._candidate(second),
            self.get_profile(profile_id),
            formats=self.formats,
        )

    def rank(
        self, releases: Iterable[ReleaseInput], profile_id: Optional[str] = None
    ) -> list[RankedRelease]:
        """Voir rank_releases() pour les details."""
        profile = self.get_profile(profile_id)
        candidates = [self._candidate(r) for r in releases]
        logger.info("Classement des releases", profile=profile.id, count=len(candidates))
        return rank_releases(candidates, profile, formats=self.formats)

    def filter_quality(
        self, releases: Iterable[ReleaseInput], profile_id: Optional[str] = None
    ) -> list[ScoringResult]:
        """Voir filter_quality_releases() pour les details."""
        candidates = [self._candidate(r) for r in releases]
        return filter_quality_releases(candidates, self.get_profile(profile_id), self.formats)

    def is_upgrade(
        self,
        existing_title: str,
        candidate_title: str,
        profile_id: Optional[str] = None,
        existing_size_bytes: Optional[int] = None,
        candidate_size_bytes: Optional[int] = None,
        size_context: Optional[SizeContext] = None,
    ) -> UpgradeDecision:
        """Voir is_upgrade() pour les details."""
        return is_upgrade(
            existing_title,
            candidate_title,
            self.get_profile(profile_id),
            existing_attributes=self.attributes_for(existing_title),
            candidate_attributes=self.attributes_for(candidate_title),
            existing_size_bytes=existing_size_bytes,
            candidate_size_bytes=candidate_size_bytes,
            size_context=size_context,
            formats=self.formats,
        )

    def debug(self, title: str) -> dict:
        """Voir debug_release() pour les details."""
        return debug_release(title, self.attributes_for(title), self.formats)
