"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINERANK_,
et peut optionnellement être fournie via un fichier .env.

Le fichier de profils personnalisés est optionnel - seuls les profils intégrés sont
disponibles s'il n'est pas fourni.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de cinerank/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINERANK_.
    Exemple : CINERANK_DEFAULT_PROFILE=efficient

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINERANK_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Scoring
    default_profile: str = Field(default="best", min_length=1)
    profiles_file: Optional[Path] = Field(default=None)
    normalize_scores: bool = Field(default=True)

    # Garde-fous des expressions régulières
    max_regex_input_length: int = Field(default=100000, ge=1000)
    max_pattern_length: int = Field(default=500, ge=10)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinerank.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("profiles_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules (DEBUG, INFO...)."""
        return v.upper()

    @property
    def custom_profiles_enabled(self) -> bool:
        """Vérifie si un fichier de profils personnalisés est configuré."""
        return self.profiles_file is not None
