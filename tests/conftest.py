"""
Fixtures pytest partagees pour les tests cinerank.

Ce module contient les fixtures communes utilisees dans les tests:
- Parser de releases et attributs de scoring
- Profils de scoring minimaux et registres de formats controles
- Mock du store de profils (IProfileStore)
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cinerank.adapters.parsing.release_parser import RegexReleaseParser
from cinerank.config import Settings
from cinerank.core.ports.profile_store import IProfileStore, ProfileNotFoundError
from cinerank.core.value_objects import (
    BANNED_SCORE,
    ConditionType,
    CustomFormat,
    FormatCategory,
    FormatCondition,
    ScoringProfile,
)
from cinerank.services.formats import ALL_FORMATS
from cinerank.services.format_matcher import clear_pattern_cache
from cinerank.services.profiles import DEFAULT_PROFILES


@pytest.fixture(autouse=True)
def _reset_pattern_cache():
    """Isole le cache des motifs compiles entre les tests."""
    clear_pattern_cache()
    yield
    clear_pattern_cache()


@pytest.fixture
def parser() -> RegexReleaseParser:
    """Parser de releases reel (sans etat)."""
    return RegexReleaseParser()


@pytest.fixture
def simple_formats() -> list[CustomFormat]:
    """
    Registre de formats controle pour des calculs de score exacts.

    - tag-foo: titre contenant FOO (100 par defaut)
    - group-grp: groupe GRP (50 par defaut)
    - banned-bad: titre contenant BAD (categorie bannie)
    """
    return [
        CustomFormat(
            id="tag-foo",
            name="Foo",
            category=FormatCategory.ENHANCEMENT,
            default_score=100,
            conditions=(
                FormatCondition(name="FOO", type=ConditionType.RELEASE_TITLE, pattern=r"\bFOO\b"),
            ),
        ),
        CustomFormat(
            id="group-grp",
            name="GRP",
            category=FormatCategory.RELEASE_GROUP_TIER,
            default_score=50,
            conditions=(
                FormatCondition(name="GRP", type=ConditionType.RELEASE_GROUP, pattern="^GRP$"),
            ),
        ),
        CustomFormat(
            id="banned-bad",
            name="Bad",
            category=FormatCategory.BANNED,
            conditions=(
                FormatCondition(name="BAD", type=ConditionType.RELEASE_TITLE, pattern=r"\bBAD\b"),
            ),
        ),
    ]


@pytest.fixture
def simple_profile() -> ScoringProfile:
    """Profil minimal associe a simple_formats."""
    return ScoringProfile(
        id="simple",
        name="Simple",
        format_scores={"tag-foo": 300, "banned-bad": BANNED_SCORE},
        min_score=0,
        min_score_increment=100,
    )


@pytest.fixture
def mock_profile_store() -> MagicMock:
    """
    Mock de IProfileStore pour les tests.

    Sert les profils integres et aucun format personnalise par defaut.
    """
    mock = MagicMock(spec=IProfileStore)
    profiles = {profile.id: profile for profile in DEFAULT_PROFILES}

    def get_profile(profile_id: str) -> ScoringProfile:
        if profile_id not in profiles:
            raise ProfileNotFoundError(profile_id)
        return profiles[profile_id]

    mock.get_profile.side_effect = get_profile
    mock.list_profiles.return_value = list(DEFAULT_PROFILES)
    mock.list_custom_formats.return_value = []
    return mock


@pytest.fixture
def builtin_formats() -> list[CustomFormat]:
    """Registre integre complet."""
    return list(ALL_FORMATS)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler les fichiers de log.
    """
    return Settings(
        default_profile="best",
        log_file=tmp_path / "logs" / "cinerank.log",
        log_level="DEBUG",
        _env_file=None,
    )
