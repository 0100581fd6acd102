"""
Interface port pour le parsing de titres de releases.

Le parsing est une fonction totale: tout titre, meme mal forme,
produit un ParsedRelease (champs UNKNOWN et confiance basse au pire).
"""

from abc import ABC, abstractmethod

from cinerank.core.value_objects.release import ParsedRelease


class IReleaseParser(ABC):
    """
    Interface pour l'extraction des metadonnees d'un titre de release.

    L'implementation doit etre sans etat et reentrante: elle peut etre
    appelee en parallele depuis plusieurs threads.
    """

    @abstractmethod
    def parse(self, title: str) -> ParsedRelease:
        """
        Analyse un titre de release.

        Args:
            title: Titre brut (ex: "The.Matrix.1999.1080p.BluRay.x264-GROUP")

        Retourne:
            ParsedRelease avec les informations extraites. Ne leve jamais
            d'exception pour un titre mal forme.
        """
        ...
