"""
Store de profils et formats personnalises dans un fichier JSON.

Format du fichier:

    {
        "profiles": [
            {"base": "best", "id": "best-1080p", "resolution_order": ["1080p"]},
            {"id": "mine", "name": "Mine", "format_scores": {"2160p-remux": 100}}
        ],
        "formats": [
            {
                "id": "my-group",
                "name": "My Group",
                "category": "release_group_tier",
                "default_score": 500,
                "conditions": [
                    {"name": "MYGRP", "type": "release_group", "pattern": "^MYGRP$"}
                ]
            }
        ]
    }

Tout profil charge bannit les formats de categorie "banned", integres
ou definis dans le fichier. Chaque entree est validee (pydantic) et
chaque motif passe la porte de securite des expressions regulieres.
Une entree invalide est ignoree avec un avertissement, elle
n'empeche pas le chargement des autres.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from cinerank.core.ports.profile_store import IProfileStore, ProfileNotFoundError
from cinerank.core.value_objects.custom_format import CustomFormat
from cinerank.core.value_objects.scoring import ScoringProfile
from cinerank.services.formats import ALL_FORMATS
from cinerank.services.profiles import DEFAULT_PROFILES, apply_bans
from cinerank.services.safe_regex import (
    MAX_PATTERN_LENGTH,
    UnsafePatternError,
    ensure_safe_pattern,
)

_PROFILE_ADAPTER = TypeAdapter(ScoringProfile)
_FORMAT_ADAPTER = TypeAdapter(CustomFormat)


class JsonProfileStore(IProfileStore):
    """
    Implementation de IProfileStore sur un fichier JSON local.

    Les profils integres sont toujours disponibles; un profil du
    fichier portant le meme id les remplace. Sans fichier (path=None
    ou fichier absent), seuls les profils integres sont fournis.
    """

    def __init__(
        self, path: Optional[Path] = None, max_pattern_length: int = MAX_PATTERN_LENGTH
    ) -> None:
        self._path = path
        self._max_pattern_length = max_pattern_length
        self._profiles: dict[str, ScoringProfile] = {p.id: p for p in DEFAULT_PROFILES}
        self._formats: list[CustomFormat] = []
        self._load()

    # ====================
    # Chargement
    # ====================

    def _read(self) -> dict[str, Any]:
        if self._path is None:
            return {}
        if not self._path.exists():
            logger.warning(f"Fichier de profils introuvable: {self._path}")
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Fichier de profils illisible ({self._path}): {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Fichier de profils ignore (objet JSON attendu): {self._path}")
            return {}
        return data

    def _load(self) -> None:
        data = self._read()

        for entry in data.get("formats", []):
            custom_format = self._load_format(entry)
            if custom_format is not None:
                self._formats.append(custom_format)

        for entry in data.get("profiles", []):
            profile = self._load_profile(entry)
            if profile is not None:
                self._profiles[profile.id] = profile

        # Les formats bannis du fichier sont bannis par tous les profils
        registry = [*ALL_FORMATS, *self._formats]
        self._profiles = {
            profile_id: apply_bans(profile, registry)
            for profile_id, profile in self._profiles.items()
        }

        if data:
            logger.info(
                "Profils personnalises charges",
                path=str(self._path),
                profiles=len(self._profiles),
                formats=len(self._formats),
            )

    def _load_format(self, entry: dict[str, Any]) -> Optional[CustomFormat]:
        try:
            custom_format = _FORMAT_ADAPTER.validate_python(entry)
            for condition in custom_format.conditions:
                if condition.pattern is not None:
                    ensure_safe_pattern(condition.pattern, self._max_pattern_length)
        except (ValidationError, UnsafePatternError) as e:
            logger.warning(f"Format ignore ({entry.get('id', '?')}): {e}")
            return None
        return custom_format

    def _load_profile(self, entry: dict[str, Any]) -> Optional[ScoringProfile]:
        fields = dict(entry)
        base_id = fields.pop("base", None)
        try:
            if base_id is not None:
                fields = self._extend(base_id, fields)
            return _PROFILE_ADAPTER.validate_python(fields)
        except (ValidationError, ProfileNotFoundError) as e:
            logger.warning(f"Profil ignore ({entry.get('id', '?')}): {e}")
            return None

    def _extend(self, base_id: str, overrides: dict[str, Any]) -> dict[str, Any]:
        """Fusionne les champs d'un profil avec ceux de son profil de base."""
        base = self.get_profile(base_id)
        merged = {**asdict(base), **overrides}
        merged["format_scores"] = {**base.format_scores, **overrides.get("format_scores", {})}
        if "id" not in overrides:
            merged["id"] = f"{base.id}-custom"
        if "name" not in overrides:
            merged["name"] = f"{base.name} (Custom)"
        return merged

    # ====================
    # IProfileStore
    # ====================

    def get_profile(self, profile_id: str) -> ScoringProfile:
        try:
            return self._profiles[profile_id]
        except KeyError:
            raise ProfileNotFoundError(profile_id) from None

    def list_profiles(self) -> list[ScoringProfile]:
        return list(self._profiles.values())

    def list_custom_formats(self) -> list[CustomFormat]:
        return list(self._formats)
