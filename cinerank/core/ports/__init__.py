"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

- IReleaseParser : Extraction des metadonnees d'un titre de release
- IProfileStore : Fourniture des profils de scoring et formats personnalises
"""

from cinerank.core.ports.parser import IReleaseParser
from cinerank.core.ports.profile_store import IProfileStore, ProfileNotFoundError

__all__ = [
    "IReleaseParser",
    "IProfileStore",
    "ProfileNotFoundError",
]
