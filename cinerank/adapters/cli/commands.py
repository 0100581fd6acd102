"""
Commandes Typer pour l'analyse et le scoring des releases.

Ce module fournit les commandes CLI:
- parse: Analyse d'un titre de release
- score: Score d'une release pour un profil
- rank: Classement de plusieurs releases
- upgrade: Decision d'upgrade entre deux releases
- profiles: Liste des profils disponibles
- formats: Liste des formats personnalises integres
"""

from typing import Annotated, NoReturn, Optional

import typer
from pydantic import TypeAdapter
from rich.console import Console
from rich.table import Table

from cinerank.container import Container
from cinerank.core.ports.profile_store import ProfileNotFoundError
from cinerank.core.value_objects.custom_format import FormatCategory
from cinerank.core.value_objects.release import ParsedRelease
from cinerank.core.value_objects.scoring import MediaKind, ScoringResult, SizeContext
from cinerank.services.release_scorer import explain_score
from cinerank.services.score_normalizer import normalize_score

console = Console()

_PARSED_ADAPTER = TypeAdapter(ParsedRelease)

# Etat global pour les options de verbosite (renseigne par main.py)
state = {"verbose": 0, "quiet": False}


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Erreur:[/red] {message}")
    raise typer.Exit(code=1)


def _format_total(total: float) -> str:
    return "BANNI" if total == float("-inf") else f"{total:g}"


def _status(result: ScoringResult) -> str:
    if result.is_banned:
        return "[red]banni[/red]"
    if result.size_rejected:
        return "[red]taille[/red]"
    if result.resolution_rejected:
        return "[red]resolution[/red]"
    if not result.meets_minimum:
        return "[yellow]sous le minimum[/yellow]"
    return "[green]accepte[/green]"


# ====================
# parse
# ====================

def parse(
    title: Annotated[str, typer.Argument(help="Titre de la release")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON"),
    ] = False,
) -> None:
    """Analyse un titre de release."""
    container = Container()
    parsed = container.release_parser().parse(title)

    if as_json:
        typer.echo(_PARSED_ADAPTER.dump_json(parsed, indent=2).decode())
        return

    table = Table(title=parsed.original_title, show_header=False)
    table.add_column("Champ", style="cyan")
    table.add_column("Valeur")
    table.add_row("Titre", parsed.clean_title)
    table.add_row("Annee", str(parsed.year or "-"))
    table.add_row("Resolution", parsed.resolution.value)
    table.add_row("Source", parsed.source.value)
    table.add_row("Codec", parsed.codec.value)
    table.add_row("HDR", parsed.hdr.value if parsed.hdr else "-")
    table.add_row(
        "Audio",
        f"{parsed.audio_codec.value} {parsed.audio_channels.value}"
        + (" Atmos" if parsed.has_atmos else ""),
    )
    table.add_row("Langues", ", ".join(parsed.languages))
    table.add_row("Groupe", parsed.release_group or "-")
    table.add_row("Edition", parsed.edition or "-")
    if parsed.episode is not None:
        episode = parsed.episode
        seasons = ", ".join(str(s) for s in episode.seasons) or "-"
        episodes = ", ".join(str(e) for e in episode.episodes) or "-"
        table.add_row("Saisons", seasons)
        table.add_row("Episodes", episodes)
        if episode.is_complete_series:
            table.add_row("Pack", "serie complete")
        elif episode.is_season_pack:
            table.add_row("Pack", "saison")
        if episode.air_date:
            table.add_row("Diffusion", episode.air_date)
    table.add_row("Confiance", f"{parsed.confidence:.2f}")
    console.print(table)


# ====================
# score
# ====================

def score(
    title: Annotated[str, typer.Argument(help="Titre de la release")],
    profile: Annotated[
        Optional[str],
        typer.Option("--profile", "-p", help="Profil de scoring (defaut: config)"),
    ] = None,
    size_bytes: Annotated[
        Optional[int],
        typer.Option("--size-bytes", min=0, help="Taille du fichier en octets"),
    ] = None,
    media: Annotated[
        Optional[MediaKind],
        typer.Option("--media", help="Type de media pour la validation de taille"),
    ] = None,
    episodes: Annotated[
        Optional[int],
        typer.Option("--episodes", min=1, help="Nombre d'episodes d'un pack de saison"),
    ] = None,
    explain: Annotated[
        bool,
        typer.Option("--explain", help="Affiche le detail du calcul"),
    ] = False,
) -> None:
    """Calcule le score d'une release pour un profil."""
    container = Container()
    config = container.config()
    scorer = container.scorer_service()

    size_context = None
    if media is not None:
        attributes = scorer.attributes_for(title)
        size_context = SizeContext(
            media_kind=media,
            is_season_pack=attributes.is_season_pack,
            episode_count=episodes,
        )

    try:
        result = scorer.score(
            title, profile, file_size_bytes=size_bytes, size_context=size_context
        )
    except ProfileNotFoundError as e:
        _fail(str(e))

    console.print(f"[bold]{result.release_name}[/bold]")
    console.print(f"Profil: {result.profile_id}")
    line = f"Score: {_format_total(result.total_score)}"
    if config.normalize_scores:
        line += f" (normalise: {normalize_score(result.total_score):.0f}/1000)"
    console.print(line)
    console.print(f"Statut: {_status(result)}")

    if state["verbose"] and not state["quiet"]:
        table = Table(title="Formats retenus")
        table.add_column("Format", style="cyan")
        table.add_column("Categorie")
        table.add_column("Score", justify="right")
        for scored in result.matched_formats:
            table.add_row(scored.format.name, scored.format.category.value, str(scored.score))
        console.print(table)

    if explain:
        typer.echo("")
        typer.echo(explain_score(result))


# ====================
# rank
# ====================

def rank(
    titles: Annotated[list[str], typer.Argument(help="Titres des releases a classer")],
    profile: Annotated[
        Optional[str],
        typer.Option("--profile", "-p", help="Profil de scoring (defaut: config)"),
    ] = None,
) -> None:
    """Classe plusieurs releases par score decroissant."""
    container = Container()
    config = container.config()
    scorer = container.scorer_service()

    try:
        ranked = scorer.rank(titles, profile)
    except ProfileNotFoundError as e:
        _fail(str(e))

    table = Table(title="Classement")
    table.add_column("#", justify="right")
    table.add_column("Release", style="cyan")
    table.add_column("Score", justify="right")
    if config.normalize_scores:
        table.add_column("Normalise", justify="right")
    table.add_column("Statut")

    for entry in ranked:
        result = entry.result
        row = [str(entry.rank), result.release_name, _format_total(result.total_score)]
        if config.normalize_scores:
            row.append(f"{normalize_score(result.total_score):.0f}")
        row.append(_status(result))
        table.add_row(*row)

    console.print(table)


# ====================
# upgrade
# ====================

def upgrade(
    existing: Annotated[str, typer.Argument(help="Release existante")],
    candidate: Annotated[str, typer.Argument(help="Release candidate")],
    profile: Annotated[
        Optional[str],
        typer.Option("--profile", "-p", help="Profil de scoring (defaut: config)"),
    ] = None,
) -> None:
    """Indique si la candidate remplace la release existante (code 0 si oui)."""
    scorer = Container().scorer_service()

    try:
        decision = scorer.is_upgrade(existing, candidate, profile)
    except ProfileNotFoundError as e:
        _fail(str(e))

    console.print(f"Existante: {_format_total(decision.existing_result.total_score)}")
    console.print(f"Candidate: {_format_total(decision.candidate_result.total_score)}")
    console.print(f"Amelioration: {decision.improvement:g}")

    if decision.is_upgrade:
        console.print("[green]Upgrade[/green]")
        return
    console.print("[yellow]Pas d'upgrade[/yellow]")
    raise typer.Exit(code=1)


# ====================
# profiles / formats
# ====================

def profiles() -> None:
    """Liste les profils de scoring disponibles."""
    store = Container().profile_store()

    table = Table(title="Profils")
    table.add_column("Id", style="cyan")
    table.add_column("Nom")
    table.add_column("Min", justify="right")
    table.add_column("Upgrade jusqu'a", justify="right")
    table.add_column("Increment", justify="right")
    table.add_column("Protocoles")

    for scoring_profile in store.list_profiles():
        until = scoring_profile.upgrade_until_score
        table.add_row(
            scoring_profile.id,
            scoring_profile.name,
            str(scoring_profile.min_score),
            "illimite" if until == -1 else str(until),
            str(scoring_profile.min_score_increment),
            ", ".join(p.value for p in scoring_profile.allowed_protocols),
        )

    console.print(table)


def formats(
    category: Annotated[
        Optional[FormatCategory],
        typer.Option("--category", "-c", help="Filtrer par categorie"),
    ] = None,
) -> None:
    """Liste les formats personnalises (integres et fichier de profils)."""
    available = Container().scorer_service().formats
    selected = [f for f in available if f.category is category] if category else available

    table = Table(title=f"Formats ({len(selected)})")
    table.add_column("Id", style="cyan")
    table.add_column("Nom")
    table.add_column("Categorie")
    table.add_column("Defaut", justify="right")
    table.add_column("Conditions", justify="right")

    for custom_format in selected:
        table.add_row(
            custom_format.id,
            custom_format.name,
            custom_format.category.value,
            str(custom_format.default_score),
            str(len(custom_format.conditions)),
        )

    console.print(table)
