"""
Point d'entrée CLI de cinerank.

Fournit les commandes CLI ; le logging est configuré par le callback
principal, une fois les options -v / -q connues.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    formats,
    parse,
    profiles,
    rank,
    score,
    state,
    upgrade,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="cinerank",
    help="Analyse et scoring de titres de releases",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """cinerank - Analyse et scoring de releases."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose

    configure_logging(get_config(), verbose=verbose, quiet=quiet)
    logger.debug("Démarrage de cinerank", version=__version__)


app.command()(parse)
app.command()(score)
app.command()(rank)
app.command()(upgrade)
app.command()(profiles)
app.command()(formats)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration cinerank")
    typer.echo(f"Profil par défaut : {config.default_profile}")
    typer.echo(f"Fichier de profils : {config.profiles_file or 'aucun'}")
    typer.echo(f"Scores normalisés : {'oui' if config.normalize_scores else 'non'}")
    typer.echo(f"Longueur max des entrées : {config.max_regex_input_length}")
    typer.echo(f"Longueur max des motifs : {config.max_pattern_length}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"cinerank v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
