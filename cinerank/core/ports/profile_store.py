"""
Interface port pour la fourniture des profils et formats personnalises.

La source peut etre les valeurs par defaut du code ou un stockage
persistant de surcharges. Les objets retournes sont traites en lecture
seule pendant toute la duree d'un lot de scoring.
"""

from abc import ABC, abstractmethod

from cinerank.core.value_objects.custom_format import CustomFormat
from cinerank.core.value_objects.scoring import ScoringProfile


class ProfileNotFoundError(KeyError):
    """Exception levee quand un identifiant de profil est inconnu."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(profile_id)
        self.profile_id = profile_id

    def __str__(self) -> str:
        return f"Profil inconnu: {self.profile_id}"


class IProfileStore(ABC):
    """Interface pour l'acces aux profils de scoring et formats personnalises."""

    @abstractmethod
    def get_profile(self, profile_id: str) -> ScoringProfile:
        """
        Recupere un profil par son identifiant.

        Raises:
            ProfileNotFoundError: Si l'identifiant est inconnu.
        """
        ...

    @abstractmethod
    def list_profiles(self) -> list[ScoringProfile]:
        """Retourne tous les profils disponibles (integres puis personnalises)."""
        ...

    @abstractmethod
    def list_custom_formats(self) -> list[CustomFormat]:
        """Retourne les formats personnalises qui completent le registre integre."""
        ...
