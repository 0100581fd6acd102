"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI: configuration,
parser de releases, store de profils et service de scoring.
"""

from dependency_injector import containers, providers

from .adapters.parsing.release_parser import RegexReleaseParser
from .adapters.persistence.json_profile_store import JsonProfileStore
from .config import Settings
from .services.release_scorer import ReleaseScorerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        scorer = container.scorer_service()
        result = scorer.score("Movie.2020.1080p.BluRay.x264-GRP")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    release_parser = providers.Singleton(RegexReleaseParser)
    profile_store = providers.Singleton(
        JsonProfileStore,
        path=config.provided.profiles_file,
        max_pattern_length=config.provided.max_pattern_length,
    )

    # Services
    scorer_service = providers.Factory(
        ReleaseScorerService,
        parser=release_parser,
        profile_store=profile_store,
        settings=config,
    )
