"""
Tests unitaires pour les profils de scoring integres.
"""

import pytest

from cinerank.core.ports.profile_store import ProfileNotFoundError
from cinerank.core.value_objects import (
    BANNED_SCORE,
    CustomFormat,
    FormatCategory,
    Protocol,
    ScoringProfile,
)
from cinerank.services.formats import FORMAT_BY_ID, get_formats_by_category
from cinerank.services.profiles import (
    BEST_PROFILE,
    DEFAULT_PROFILES,
    STREAMING_PROFILE,
    apply_bans,
    create_custom_profile,
    get_profile,
    is_protocol_allowed,
)


class TestDefaultProfiles:
    """Tests pour les quatre profils integres."""

    def test_profile_ids(self) -> None:
        """Test identifiants des profils integres."""
        assert [p.id for p in DEFAULT_PROFILES] == ["best", "efficient", "micro", "streaming"]

    @pytest.mark.parametrize("profile", DEFAULT_PROFILES, ids=lambda p: p.id)
    def test_every_banned_format_is_banned(self, profile) -> None:
        """Test que chaque profil bannit tous les formats bannis."""
        for banned in get_formats_by_category(FormatCategory.BANNED):
            assert profile.format_scores[banned.id] == BANNED_SCORE

    @pytest.mark.parametrize("profile", DEFAULT_PROFILES, ids=lambda p: p.id)
    def test_scores_reference_known_formats(self, profile) -> None:
        """Test que chaque surcharge de score vise un format du registre."""
        unknown = [fid for fid in profile.format_scores if fid not in FORMAT_BY_ID]

        assert unknown == []

    def test_best_prefers_remux(self) -> None:
        """Test hierarchie du profil best."""
        scores = BEST_PROFILE.format_scores

        assert scores["2160p-remux"] > scores["2160p-bluray"] > scores["1080p-webdl"]
        assert BEST_PROFILE.upgrade_until_score == 100000
        assert BEST_PROFILE.min_score_increment == 500

    def test_streaming_profile(self) -> None:
        """Test profil streaming: protocole streaming uniquement."""
        assert STREAMING_PROFILE.allowed_protocols == (Protocol.STREAMING,)
        assert STREAMING_PROFILE.format_scores["streaming-protocol"] == 50000
        assert STREAMING_PROFILE.min_score_increment == 1


class TestGetProfile:
    """Tests pour get_profile."""

    def test_known_profile(self) -> None:
        """Test acces a un profil integre."""
        assert get_profile("micro").name == "Micro"

    def test_unknown_profile_raises(self) -> None:
        """Test profil inconnu: ProfileNotFoundError (KeyError)."""
        with pytest.raises(ProfileNotFoundError) as exc_info:
            get_profile("nope")

        assert exc_info.value.profile_id == "nope"
        assert isinstance(exc_info.value, KeyError)
        assert "nope" in str(exc_info.value)


class TestCreateCustomProfile:
    """Tests pour create_custom_profile."""

    def test_derived_id_and_name(self) -> None:
        """Test id et nom derives du profil de base."""
        custom = create_custom_profile(BEST_PROFILE, min_score=1000)

        assert custom.id == "best-custom"
        assert custom.name == "Best (Custom)"
        assert custom.min_score == 1000

    def test_format_scores_merged(self) -> None:
        """Test fusion des scores avec ceux de la base."""
        custom = create_custom_profile(
            BEST_PROFILE, id="mine", format_scores={"2160p-remux": 1, "extra": 5}
        )

        assert custom.id == "mine"
        assert custom.format_scores["2160p-remux"] == 1
        assert custom.format_scores["extra"] == 5
        assert custom.format_scores["1080p-remux"] == BEST_PROFILE.format_scores["1080p-remux"]

    def test_base_not_modified(self) -> None:
        """Test que le profil de base reste intact."""
        create_custom_profile(BEST_PROFILE, format_scores={"2160p-remux": 1})

        assert BEST_PROFILE.format_scores["2160p-remux"] == 20000


class TestProtocols:
    """Tests pour is_protocol_allowed."""

    def test_enum_and_string(self) -> None:
        """Test protocole en enum ou en texte."""
        assert is_protocol_allowed(BEST_PROFILE, Protocol.TORRENT) is True
        assert is_protocol_allowed(BEST_PROFILE, "usenet") is True
        assert is_protocol_allowed(BEST_PROFILE, "streaming") is False
        assert is_protocol_allowed(STREAMING_PROFILE, Protocol.STREAMING) is True

    def test_invalid_protocol(self) -> None:
        """Test protocole inconnu: refuse sans exception."""
        assert is_protocol_allowed(BEST_PROFILE, "ftp") is False


class TestApplyBans:
    """Tests pour apply_bans."""

    def test_bans_builtin_formats(self) -> None:
        """Test profil vide complete par les formats bannis integres."""
        profile = apply_bans(ScoringProfile(id="bare", name="Bare"))

        for banned in get_formats_by_category(FormatCategory.BANNED):
            assert profile.format_scores[banned.id] == BANNED_SCORE

    def test_overrides_kept_but_bans_forced(self) -> None:
        """Test surcharges conservees, sauf sur les formats bannis."""
        bare = ScoringProfile(
            id="bare", name="Bare", format_scores={"2160p-remux": 5, "banned-cam": 10}
        )

        profile = apply_bans(bare)

        assert profile.format_scores["2160p-remux"] == 5
        assert profile.format_scores["banned-cam"] == BANNED_SCORE
        assert bare.format_scores["banned-cam"] == 10

    def test_custom_registry(self) -> None:
        """Test registre explicite: seuls ses formats bannis sont pris en compte."""
        extra = CustomFormat(id="banned-extra", name="Extra", category=FormatCategory.BANNED)

        profile = apply_bans(ScoringProfile(id="bare", name="Bare"), [extra])

        assert profile.format_scores == {"banned-extra": BANNED_SCORE}
