"""
CineRank - analyse et classement des titres de releases video.

Extrait les metadonnees de qualite depuis un titre de release libre
et evalue les releases candidates selon un profil de scoring.
"""

__version__ = "0.1.0"
