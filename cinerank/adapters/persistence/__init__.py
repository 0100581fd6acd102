"""
Stockage des profils et formats personnalises.

- json_profile_store : Fichier JSON local (JsonProfileStore)
"""

from cinerank.adapters.persistence.json_profile_store import JsonProfileStore

__all__ = ["JsonProfileStore"]
