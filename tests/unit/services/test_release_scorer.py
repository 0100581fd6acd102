"""
Tests unitaires pour le moteur de scoring des releases.

Les calculs exacts utilisent un registre de formats controle
(fixtures simple_formats / simple_profile); les comportements du
registre integre sont verifies de facon relative.
"""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from cinerank.adapters.parsing.release_parser import RegexReleaseParser
from cinerank.config import Settings
from cinerank.core.ports.profile_store import ProfileNotFoundError
from cinerank.core.value_objects import (
    BANNED_SCORE,
    ConditionType,
    CustomFormat,
    EpisodeInfo,
    FormatCategory,
    FormatCondition,
    MatchedFormat,
    MediaKind,
    PackPreference,
    ReleaseCandidate,
    Resolution,
    SizeContext,
)
from cinerank.services.formats import get_format
from cinerank.services.profiles import BEST_PROFILE
from cinerank.services.release_scorer import (
    BYTES_PER_GB,
    BYTES_PER_MB,
    ReleaseScorerService,
    apply_hdr_exclusivity,
    calculate_pack_bonus,
    check_resolution,
    check_size,
    compare_quality,
    compare_releases,
    debug_release,
    explain_score,
    filter_quality_releases,
    is_upgrade,
    parse_release_attributes,
    rank_releases,
    score_release,
)

FOO = "Movie.2020.1080p.BluRay.FOO-GRP"
PLAIN = "Movie.2020.1080p.BluRay-GRP"
BANNED = "Movie.2020.1080p.BluRay.BAD-GRP"
NOTHING = "Movie.2020.1080p.BluRay-OTHER"


# ====================
# score_release
# ====================

class TestScoreRelease:
    """Tests pour score_release avec un registre controle."""

    def test_profile_override_and_default_score(self, simple_formats, simple_profile) -> None:
        """Test surcharge du profil puis score par defaut du format."""
        result = score_release(FOO, simple_profile, formats=simple_formats)

        assert result.total_score == 350
        assert result.matched_format_ids == ("tag-foo", "group-grp")
        assert result.meets_minimum is True
        assert result.is_banned is False
        assert result.profile_id == "simple"
        assert result.release_name == FOO

    def test_breakdown_by_category(self, simple_formats, simple_profile) -> None:
        """Test detail par categorie."""
        result = score_release(FOO, simple_profile, formats=simple_formats)

        assert result.breakdown["enhancement"].score == 300
        assert result.breakdown["enhancement"].formats == ("Foo",)
        assert result.breakdown["release_group_tier"].score == 50

    def test_no_match_scores_zero(self, simple_formats, simple_profile) -> None:
        """Test release sans format: score nul, acceptee au minimum 0."""
        result = score_release(NOTHING, simple_profile, formats=simple_formats)

        assert result.total_score == 0
        assert result.matched_formats == ()
        assert result.meets_minimum is True

    def test_banned_release(self, simple_formats, simple_profile) -> None:
        """Test bannissement: total -inf et raison renseignee."""
        result = score_release(BANNED, simple_profile, formats=simple_formats)

        assert result.is_banned is True
        assert result.total_score == float("-inf")
        assert result.banned_reasons == ("Bad",)
        assert result.meets_minimum is False
        assert result.is_rejected is True

    def test_score_below_ban_threshold_also_bans(self, simple_formats, simple_profile) -> None:
        """Test qu'un score inferieur au seuil bannit aussi."""
        profile = replace(
            simple_profile, format_scores={"banned-bad": BANNED_SCORE - 1}
        )

        assert score_release(BANNED, profile, formats=simple_formats).is_banned is True

    def test_ban_is_profile_driven(self, simple_formats, simple_profile) -> None:
        """Test qu'un format banni score normalement si le profil le neutralise."""
        profile = replace(simple_profile, format_scores={"banned-bad": 0})
        result = score_release(BANNED, profile, formats=simple_formats)

        assert result.is_banned is False
        assert result.total_score == 50

    def test_below_minimum(self, simple_formats, simple_profile) -> None:
        """Test score sous le minimum: non accepte mais pas rejete."""
        profile = replace(simple_profile, min_score=100)
        result = score_release(PLAIN, profile, formats=simple_formats)

        assert result.total_score == 50
        assert result.meets_minimum is False
        assert result.is_rejected is False

    def test_resolution_rejected(self, simple_formats, simple_profile) -> None:
        """Test resolution hors de l'ordre du profil."""
        profile = replace(simple_profile, resolution_order=(Resolution.FHD_1080P,))
        result = score_release(
            "Movie.2020.2160p.BluRay.FOO-GRP", profile, formats=simple_formats
        )

        assert result.resolution_rejected is True
        assert result.resolution_rejection_reason == (
            "Resolution 2160p is not accepted by profile simple"
        )
        assert result.total_score == 350
        assert result.meets_minimum is False

    def test_size_rejected(self, simple_formats, simple_profile) -> None:
        """Test taille de film hors bornes."""
        profile = replace(simple_profile, movie_max_size_gb=10)
        result = score_release(
            FOO,
            profile,
            file_size_bytes=20 * BYTES_PER_GB,
            size_context=SizeContext(media_kind=MediaKind.MOVIE),
            formats=simple_formats,
        )

        assert result.size_rejected is True
        assert result.size_rejection_reason == "Movie size 20.00 GB exceeds maximum 10 GB"
        assert result.meets_minimum is False

    def test_pack_bonus_included_in_total(self, simple_formats, simple_profile) -> None:
        """Test bonus de pack ajoute au total."""
        result = score_release(
            "Show.S01.1080p.WEB-DL-GRP", simple_profile, formats=simple_formats
        )

        assert result.pack_bonus == 50
        assert result.total_score == 100


class TestBuiltinRegistry:
    """Tests du scoring avec le registre integre et le profil best."""

    def test_hdr_exclusivity(self) -> None:
        """Test qu'un seul format HDR est retenu (le plus prioritaire)."""
        result = score_release(
            "Movie.2023.2160p.WEB-DL.DV.HDR10.DDP5.1.Atmos.H.265-GRP", BEST_PROFILE
        )
        hdr_ids = [
            scored.format.id
            for scored in result.matched_formats
            if scored.format.category is FormatCategory.HDR
        ]

        assert hdr_ids == ["hdr-dolby-vision"]

    def test_remux_beats_webdl(self) -> None:
        """Test hierarchie remux 4K > WEB-DL 1080p."""
        comparison = compare_releases(
            "Movie.2020.2160p.UHD.BluRay.REMUX.HDR.HEVC.TrueHD.Atmos.7.1-FraMeSToR",
            "Movie.2020.1080p.WEB-DL.DDP5.1.H.264-GRP",
            BEST_PROFILE,
        )

        assert comparison.winner == "first"
        assert comparison.score_difference > 0

    def test_cam_is_banned(self) -> None:
        """Test CAM banni par le profil best."""
        result = score_release("Movie.2023.CAM.x264-GRP", BEST_PROFILE)

        assert result.is_banned is True
        assert "CAM" in result.banned_reasons

    def test_accepts_precomputed_attributes(self, parser: RegexReleaseParser) -> None:
        """Test scoring avec des attributs deja extraits."""
        from cinerank.services.format_matcher import extract_attributes

        title = "Movie.2020.1080p.BluRay.x264-CtrlHD"
        attributes = extract_attributes(parser.parse(title))

        with_attrs = score_release(title, BEST_PROFILE, attributes=attributes)
        without = score_release(title, BEST_PROFILE)

        assert with_attrs.total_score == without.total_score


# ====================
# Determinisme
# ====================

class TestDeterminism:
    """Tests de reproductibilite du scoring et des decisions d'upgrade."""

    TITLES = [
        "Movie.2023.2160p.WEB-DL.DV.HDR10.DDP5.1.Atmos.H.265-GRP",
        "Show.S01-S03.1080p.BluRay.x264-NTb",
        "Movie.2023.CAM.x264-GRP",
        "Movie.2020.1080p.BluRay.REPACK2.x264-CtrlHD",
    ]

    @pytest.mark.parametrize("title", TITLES)
    def test_score_release_twice(self, title: str) -> None:
        """Test deux scorings du meme titre: resultats egaux."""
        attributes = parse_release_attributes(title)

        first = score_release(title, BEST_PROFILE, attributes=attributes)
        second = score_release(title, BEST_PROFILE, attributes=attributes)
        reparsed = score_release(title, BEST_PROFILE)

        assert first == second
        assert first == reparsed

    def test_is_upgrade_twice(self) -> None:
        """Test deux decisions d'upgrade identiques."""
        existing, candidate = self.TITLES[3], self.TITLES[0]

        first = is_upgrade(existing, candidate, BEST_PROFILE)
        second = is_upgrade(existing, candidate, BEST_PROFILE)

        assert first == second

    def test_rank_is_reproducible(self) -> None:
        """Test classement identique d'un appel a l'autre."""
        first = rank_releases(self.TITLES, BEST_PROFILE)
        second = rank_releases(self.TITLES, BEST_PROFILE)

        assert first == second


class TestCompareQuality:
    """Tests pour compare_quality (departage a score egal)."""

    def test_resolution_first(self) -> None:
        """Test resolution prioritaire sur la source."""
        uhd_web = parse_release_attributes("Movie.2020.2160p.WEB-DL.x265-GRP")
        fhd_remux = parse_release_attributes("Movie.2020.1080p.BluRay.REMUX.AVC-GRP")

        assert compare_quality(uhd_web, fhd_remux) > 0
        assert compare_quality(fhd_remux, uhd_web) < 0

    def test_then_source_then_codec(self) -> None:
        """Test source puis codec a resolution egale."""
        bluray = parse_release_attributes("Movie.2020.1080p.BluRay.x264-GRP")
        webdl = parse_release_attributes("Movie.2020.1080p.WEB-DL.x264-GRP")
        bluray_x265 = parse_release_attributes("Movie.2020.1080p.BluRay.x265-GRP")

        assert compare_quality(bluray, webdl) > 0
        assert compare_quality(bluray_x265, bluray) > 0
        assert compare_quality(bluray, bluray) == 0


# ====================
# Etapes unitaires
# ====================

class TestHdrExclusivity:
    """Tests pour apply_hdr_exclusivity."""

    def test_keeps_highest_priority(self) -> None:
        """Test conservation du format prioritaire, place apres les autres."""
        matched = [
            MatchedFormat(format=get_format("hdr-hdr10")),
            MatchedFormat(format=get_format("1080p-bluray")),
            MatchedFormat(format=get_format("hdr-dolby-vision")),
        ]

        result = apply_hdr_exclusivity(matched)

        assert [m.format.id for m in result] == ["1080p-bluray", "hdr-dolby-vision"]

    def test_single_hdr_untouched(self) -> None:
        """Test liste inchangee avec un seul format HDR."""
        matched = [
            MatchedFormat(format=get_format("hdr-hdr10")),
            MatchedFormat(format=get_format("1080p-bluray")),
        ]

        assert apply_hdr_exclusivity(matched) == matched


class TestPackBonus:
    """Tests pour calculate_pack_bonus."""

    @pytest.mark.parametrize(
        "episode,expected",
        [
            (EpisodeInfo(is_season_pack=True, is_complete_series=True), 100),
            (EpisodeInfo(season=2, seasons=(2, 3, 4), is_season_pack=True), 75),
            (EpisodeInfo(season=2, seasons=(2,), is_season_pack=True), 50),
            (EpisodeInfo(season=2, seasons=(2,), episodes=(1,)), 0),
            (None, 0),
        ],
    )
    def test_bonus_by_pack_kind(self, episode, expected: int) -> None:
        """Test serie complete > multi-saisons > saison > episode."""
        assert calculate_pack_bonus(episode) == expected

    def test_disabled_preference(self) -> None:
        """Test bonus desactive."""
        episode = EpisodeInfo(is_season_pack=True, is_complete_series=True)

        assert calculate_pack_bonus(episode, PackPreference(enabled=False)) == 0


class TestCheckResolution:
    """Tests pour check_resolution."""

    def test_default_order_accepts_unknown(self) -> None:
        """Test ordre par defaut: toutes les resolutions acceptees."""
        assert check_resolution(BEST_PROFILE, Resolution.UNKNOWN) is None


class TestCheckSize:
    """Tests pour check_size."""

    def test_movie_below_minimum(self, simple_profile) -> None:
        """Test film trop petit."""
        profile = replace(simple_profile, movie_min_size_gb=2)
        reason = check_size(profile, BYTES_PER_GB, SizeContext(media_kind=MediaKind.MOVIE))

        assert reason == "Movie size 1.00 GB is below minimum 2 GB"

    def test_movie_within_bounds(self, simple_profile) -> None:
        """Test film dans les bornes."""
        profile = replace(simple_profile, movie_min_size_gb=1, movie_max_size_gb=10)

        assert check_size(profile, 5 * BYTES_PER_GB, SizeContext(MediaKind.MOVIE)) is None

    def test_episode_below_minimum(self, simple_profile) -> None:
        """Test episode isole trop petit."""
        profile = replace(simple_profile, episode_min_size_mb=100)
        reason = check_size(profile, 50 * BYTES_PER_MB, SizeContext(MediaKind.TV))

        assert reason == "Episode size 50 MB is below minimum 100 MB"

    def test_season_pack_averaged(self, simple_profile) -> None:
        """Test pack de saison moyenne par episode."""
        profile = replace(simple_profile, episode_max_size_mb=1000)
        context = SizeContext(MediaKind.TV, is_season_pack=True, episode_count=10)
        reason = check_size(profile, 20000 * BYTES_PER_MB, context)

        assert reason == "Episode size 2000 MB per episode (avg) exceeds maximum 1000 MB"

    def test_season_pack_unknown_count_skipped(self, simple_profile) -> None:
        """Test pack sans nombre d'episodes: pas de controle."""
        profile = replace(simple_profile, episode_max_size_mb=1000)
        context = SizeContext(MediaKind.TV, is_season_pack=True)

        assert check_size(profile, 20000 * BYTES_PER_MB, context) is None

    def test_missing_size_or_context(self, simple_profile) -> None:
        """Test taille ou contexte absents: pas de controle."""
        profile = replace(simple_profile, movie_max_size_gb=1)

        assert check_size(profile, None, SizeContext(MediaKind.MOVIE)) is None
        assert check_size(profile, 0, SizeContext(MediaKind.MOVIE)) is None
        assert check_size(profile, 5 * BYTES_PER_GB, None) is None


# ====================
# Comparaison, classement, filtrage
# ====================

class TestCompareReleases:
    """Tests pour compare_releases."""

    def test_first_wins(self, simple_formats, simple_profile) -> None:
        """Test gagnant et ecart."""
        comparison = compare_releases(FOO, PLAIN, simple_profile, simple_formats)

        assert comparison.winner == "first"
        assert comparison.score_difference == 300

    def test_second_wins(self, simple_formats, simple_profile) -> None:
        """Test gagnant en seconde position."""
        comparison = compare_releases(PLAIN, FOO, simple_profile, simple_formats)

        assert comparison.winner == "second"
        assert comparison.score_difference == 300

    def test_tie(self, simple_formats, simple_profile) -> None:
        """Test egalite."""
        comparison = compare_releases(
            PLAIN, "Other.Movie.2021.720p-GRP", simple_profile, simple_formats
        )

        assert comparison.winner == "tie"
        assert comparison.score_difference == 0


class TestRankReleases:
    """Tests pour rank_releases."""

    def test_descending_with_rejected_last(self, simple_formats, simple_profile) -> None:
        """Test ordre decroissant, releases rejetees en fin de liste."""
        ranked = rank_releases([NOTHING, BANNED, FOO, PLAIN], simple_profile, simple_formats)

        assert [r.result.release_name for r in ranked] == [FOO, PLAIN, NOTHING, BANNED]
        assert [r.rank for r in ranked] == [1, 2, 3, 4]

    def test_resolution_breaks_score_ties(self, simple_formats, simple_profile) -> None:
        """Test a score egal, la meilleure resolution passe devant."""
        other = "Other.Movie.2021.720p-GRP"

        ranked = rank_releases([other, PLAIN], simple_profile, simple_formats)

        assert [r.result.release_name for r in ranked] == [PLAIN, other]

    def test_source_breaks_score_ties(self, simple_formats, simple_profile) -> None:
        """Test a resolution egale, la meilleure source passe devant."""
        webdl = "Movie.2020.1080p.WEB-DL-GRP"

        ranked = rank_releases([webdl, PLAIN], simple_profile, simple_formats)

        assert [r.result.release_name for r in ranked] == [PLAIN, webdl]

    def test_full_ties_keep_input_order(self, simple_formats, simple_profile) -> None:
        """Test classement stable a score et qualite egaux."""
        other = "Other.Movie.2021.1080p.BluRay-GRP"

        forward = rank_releases([other, PLAIN], simple_profile, simple_formats)
        backward = rank_releases([PLAIN, other], simple_profile, simple_formats)

        assert [r.result.release_name for r in forward] == [other, PLAIN]
        assert [r.result.release_name for r in backward] == [PLAIN, other]

    def test_size_rejected_ranked_last(self, simple_formats, simple_profile) -> None:
        """Test release rejetee pour la taille malgre un bon score."""
        profile = replace(simple_profile, movie_max_size_gb=1)
        big = ReleaseCandidate(
            name=FOO,
            size_bytes=5 * BYTES_PER_GB,
            size_context=SizeContext(MediaKind.MOVIE),
        )

        ranked = rank_releases([big, NOTHING], profile, simple_formats)

        assert ranked[0].result.release_name == NOTHING
        assert ranked[1].result.size_rejected is True

    def test_empty_input(self, simple_formats, simple_profile) -> None:
        """Test liste vide."""
        assert rank_releases([], simple_profile, simple_formats) == []


class TestFilterQuality:
    """Tests pour filter_quality_releases."""

    def test_keeps_accepted_only(self, simple_formats, simple_profile) -> None:
        """Test filtrage des releases bannies et sous le minimum."""
        profile = replace(simple_profile, min_score=50)

        kept = filter_quality_releases([FOO, PLAIN, NOTHING, BANNED], profile, simple_formats)

        assert [r.release_name for r in kept] == [FOO, PLAIN]


# ====================
# Upgrade
# ====================

class TestIsUpgrade:
    """Tests pour is_upgrade."""

    def test_better_candidate(self, simple_formats, simple_profile) -> None:
        """Test upgrade quand le gain atteint l'increment minimal."""
        decision = is_upgrade(PLAIN, FOO, simple_profile, formats=simple_formats)

        assert decision.is_upgrade is True
        assert decision.improvement == 300

    def test_increment_is_inclusive(self, simple_formats, simple_profile) -> None:
        """Test gain egal a l'increment: upgrade."""
        profile = replace(simple_profile, min_score_increment=300)

        assert is_upgrade(PLAIN, FOO, profile, formats=simple_formats).is_upgrade is True

    def test_insufficient_increment(self, simple_formats, simple_profile) -> None:
        """Test gain insuffisant."""
        profile = replace(simple_profile, min_score_increment=301)

        assert is_upgrade(PLAIN, FOO, profile, formats=simple_formats).is_upgrade is False

    def test_worse_candidate(self, simple_formats, simple_profile) -> None:
        """Test candidate moins bonne."""
        decision = is_upgrade(FOO, PLAIN, simple_profile, formats=simple_formats)

        assert decision.is_upgrade is False
        assert decision.improvement == -300

    def test_banned_candidate_never_upgrades(self, simple_formats, simple_profile) -> None:
        """Test candidate bannie: jamais un upgrade, gain nul."""
        decision = is_upgrade(PLAIN, BANNED, simple_profile, formats=simple_formats)

        assert decision.is_upgrade is False
        assert decision.improvement == 0
        assert decision.candidate_result.is_banned is True

    def test_banned_existing_is_replaced(self, simple_formats, simple_profile) -> None:
        """Test existante bannie: toute candidate acceptee est un upgrade."""
        decision = is_upgrade(BANNED, PLAIN, simple_profile, formats=simple_formats)

        assert decision.is_upgrade is True
        assert decision.improvement == float("inf")

    def test_upgrades_disabled(self, simple_formats, simple_profile) -> None:
        """Test profil sans upgrades."""
        profile = replace(simple_profile, upgrades_allowed=False)

        assert is_upgrade(PLAIN, FOO, profile, formats=simple_formats).is_upgrade is False

    def test_cutoff_reached(self, simple_formats, simple_profile) -> None:
        """Test plafond d'upgrade atteint par la release existante."""
        profile = replace(simple_profile, upgrade_until_score=50)

        assert is_upgrade(PLAIN, FOO, profile, formats=simple_formats).is_upgrade is False

    def test_size_rejected_candidate(self, simple_formats, simple_profile) -> None:
        """Test candidate rejetee pour la taille."""
        profile = replace(simple_profile, movie_max_size_gb=1)

        decision = is_upgrade(
            PLAIN,
            FOO,
            profile,
            candidate_size_bytes=5 * BYTES_PER_GB,
            size_context=SizeContext(MediaKind.MOVIE),
            formats=simple_formats,
        )

        assert decision.is_upgrade is False
        assert decision.improvement == 0


# ====================
# Explication et debug
# ====================

class TestExplainScore:
    """Tests pour explain_score et debug_release."""

    def test_accepted_release(self, simple_formats, simple_profile) -> None:
        """Test explication d'une release acceptee."""
        text = explain_score(score_release(FOO, simple_profile, formats=simple_formats))

        assert text.splitlines() == [
            f"Release: {FOO}",
            "Profile: simple",
            "Total Score: 350",
            "",
            "Score Breakdown:",
            "  enhancement: +300 (Foo)",
            "  release_group_tier: +50 (GRP)",
            "",
            "Meets Minimum: Yes",
        ]

    def test_banned_release(self, simple_formats, simple_profile) -> None:
        """Test explication d'une release bannie."""
        text = explain_score(score_release(BANNED, simple_profile, formats=simple_formats))

        assert "Total Score: -inf" in text
        assert "BANNED" in text
        assert "Reasons: Bad" in text
        assert "Meets Minimum: No" in text

    def test_pack_line(self, simple_formats, simple_profile) -> None:
        """Test ligne du bonus de pack."""
        result = score_release("Show.S01.1080p.WEB-DL-GRP", simple_profile, formats=simple_formats)

        assert "  pack: +50" in explain_score(result)

    def test_debug_release(self, simple_formats) -> None:
        """Test detail des conditions par format."""
        debug = debug_release(FOO, formats=simple_formats)

        assert debug["release_name"] == FOO
        assert [f["id"] for f in debug["matched_formats"]] == ["tag-foo", "group-grp"]
        condition = debug["matched_formats"][0]["conditions"][0]
        assert condition == {
            "name": "FOO",
            "type": "release_title",
            "matched": True,
            "required": True,
            "negate": False,
        }


# ====================
# Service
# ====================

class TestReleaseScorerService:
    """Tests pour ReleaseScorerService (parser reel, store mocke)."""

    @pytest.fixture
    def service(self, parser, mock_profile_store, test_settings) -> ReleaseScorerService:
        """Service branche sur le store mocke."""
        return ReleaseScorerService(parser, mock_profile_store, test_settings)

    def test_default_profile_from_settings(self, service) -> None:
        """Test profil par defaut lu dans la configuration."""
        result = service.score("Movie.2020.1080p.BluRay.x264-GRP")

        assert result.profile_id == "best"

    def test_explicit_profile(self, service) -> None:
        """Test profil explicite."""
        assert service.score("Movie.2020.1080p.BluRay.x264-GRP", "micro").profile_id == "micro"

    def test_unknown_profile_raises(self, service) -> None:
        """Test profil inconnu: erreur du store propagee."""
        with pytest.raises(ProfileNotFoundError):
            service.score("Movie.2020.1080p.BluRay.x264-GRP", "nope")

    def test_store_formats_extend_registry(self, parser, mock_profile_store, test_settings) -> None:
        """Test formats personnalises du store ajoutes au registre."""
        custom = CustomFormat(
            id="my-group",
            name="My Group",
            category=FormatCategory.RELEASE_GROUP_TIER,
            default_score=777,
            conditions=(
                FormatCondition(
                    name="MYGRP", type=ConditionType.RELEASE_GROUP, pattern="^MYGRP$"
                ),
            ),
        )
        mock_profile_store.list_custom_formats.return_value = [custom]
        service = ReleaseScorerService(parser, mock_profile_store, test_settings)

        result = service.score("Movie.2020.1080p.BluRay.x264-MYGRP")

        assert "my-group" in result.matched_format_ids

    def test_input_truncated_before_parsing(self, mock_profile_store) -> None:
        """Test troncature du titre avant le parser."""
        parser = MagicMock(wraps=RegexReleaseParser())
        settings = Settings(max_regex_input_length=1000, _env_file=None)
        service = ReleaseScorerService(parser, mock_profile_store, settings)

        service.attributes_for("x" * 5000)

        assert len(parser.parse.call_args[0][0]) == 1000

    def test_rank_and_filter(self, service) -> None:
        """Test classement et filtrage via le service."""
        titles = ["Movie.2023.CAM.x264-GRP", "Movie.2020.1080p.BluRay.x264-CtrlHD"]

        ranked = service.rank(titles)
        kept = service.filter_quality(titles)

        assert ranked[0].result.release_name == titles[1]
        assert ranked[1].result.is_banned is True
        assert [r.release_name for r in kept] == [titles[1]]

    def test_compare_and_upgrade(self, service) -> None:
        """Test comparaison et upgrade via le service."""
        low = "Movie.2020.720p.HDTV.x264-GRP"
        high = "Movie.2020.2160p.UHD.BluRay.REMUX.HDR.HEVC.TrueHD.Atmos.7.1-FraMeSToR"

        assert service.compare(high, low).winner == "first"
        assert service.is_upgrade(low, high).is_upgrade is True
        assert service.is_upgrade(high, low).is_upgrade is False

    def test_debug(self, service) -> None:
        """Test debug via le service."""
        debug = service.debug("Movie.2020.1080p.BluRay.x264-CtrlHD")

        ids = [f["id"] for f in debug["matched_formats"]]
        assert "1080p-bluray" in ids
        assert "1080p-quality-tier-1" in ids
