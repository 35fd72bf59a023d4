"""
Commande CLI principale : creation des liens d'une variante (films, series, animes).
"""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from medialinker.adapters.cli.helpers import console, with_container
from medialinker.adapters.parsing.release_parser import ReleaseFilenameParser
from medialinker.core.value_objects.naming_policy import (
    ANIME_POLICY,
    MOVIE_POLICY,
    SERIES_POLICY,
    NamingPolicy,
)
from medialinker.infrastructure.persistence.json_cache import JsonFileCache
from medialinker.services.context import RunContext
from medialinker.services.materializer import LinkMaterializer
from medialinker.services.orchestrator import (
    BatchOrchestrator,
    BatchReport,
    SourceUnreadableError,
)
from medialinker.services.resolver import MetadataResolver


class Variant(str, Enum):
    """Variante de bibliotheque a traiter."""

    MOVIES = "movies"
    SERIES = "series"
    ANIME = "anime"


VARIANT_POLICIES: dict[Variant, NamingPolicy] = {
    Variant.MOVIES: MOVIE_POLICY,
    Variant.SERIES: SERIES_POLICY,
    Variant.ANIME: ANIME_POLICY,
}


def link(
    variant: Annotated[
        Variant,
        typer.Argument(help="Type de bibliotheque: movies, series ou anime"),
    ],
    source: Annotated[
        Optional[Path],
        typer.Option("--source", "-s", help="Repertoire source (torrents)"),
    ] = None,
    dest: Annotated[
        Optional[Path],
        typer.Option("--dest", "-d", help="Repertoire de destination (bibliotheque)"),
    ] = None,
    delay: Annotated[
        Optional[int],
        typer.Option("--delay", help="Delai entre deux appels API (ms)", min=0),
    ] = None,
    jitter: Annotated[
        Optional[int],
        typer.Option("--jitter", help="Fenetre aleatoire ajoutee au delai (ms)", min=0),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Simule sans creer de liens"),
    ] = False,
    lang: Annotated[
        Optional[str],
        typer.Option("--lang", help="Langue des titres TMDB (ex: fr-FR)"),
    ] = None,
    clear_cache: Annotated[
        bool,
        typer.Option("--clear-cache", help="Supprime le cache de liens avant l'execution"),
    ] = False,
) -> None:
    """Cree les liens symboliques canoniques d'une arborescence source."""
    asyncio.run(
        _link_async(variant, source, dest, delay, jitter, dry_run, lang, clear_cache)
    )


@with_container()
async def _link_async(
    container,
    variant: Variant,
    source: Optional[Path],
    dest: Optional[Path],
    delay: Optional[int],
    jitter: Optional[int],
    dry_run: bool,
    lang: Optional[str],
    clear_cache: bool,
) -> None:
    """Implementation async de la commande link."""
    settings = container.config()

    if not settings.tmdb_enabled:
        console.print("[red]Cle API TMDB manquante (MEDIALINKER_TMDB_API_KEY).[/red]")
        raise typer.Exit(1)

    policy = VARIANT_POLICIES[variant]
    source_root = (source or settings.source_dir_for(policy.name)).expanduser()
    dest_root = (dest or settings.dest_dir_for(policy.name)).expanduser()

    if delay is None:
        delay = settings.request_delay_ms
    if jitter is None:
        jitter = settings.jitter_ms

    link_cache = JsonFileCache(settings.link_cache_path(policy.name))
    if clear_cache and dry_run:
        console.print("[yellow]Simulation : le cache de liens n'est pas supprime.[/yellow]")
    elif clear_cache:
        link_cache.clear()

    context = RunContext(
        policy=policy,
        source_root=source_root,
        dest_root=dest_root,
        metadata_cache=JsonFileCache(settings.metadata_cache_path(policy.name)),
        link_cache=link_cache,
        dry_run=dry_run,
        base_delay=delay / 1000,
        jitter=jitter / 1000,
    )

    file_system = container.file_system()
    tmdb_client = container.tmdb_client(language=lang) if lang else container.tmdb_client()
    omdb_client = container.omdb_client()

    resolver = MetadataResolver(
        context,
        tmdb_client,
        omdb_client if omdb_client.enabled else None,
    )
    orchestrator = BatchOrchestrator(
        context,
        file_system,
        ReleaseFilenameParser(policy),
        resolver,
        LinkMaterializer(file_system, file_system, context),
    )

    mode = " [yellow](simulation)[/yellow]" if dry_run else ""
    console.print(f"[bold cyan]Liens {policy.name}[/bold cyan]: {source_root} -> {dest_root}{mode}\n")

    try:
        report = await orchestrator.run()
    except SourceUnreadableError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    finally:
        await tmdb_client.close()
        await omdb_client.close()

    console.print(_render_report(report))


def _render_report(report: BatchReport) -> Table:
    """Tableau Rich des compteurs d'un lot."""
    table = Table(title="Resume", show_header=True, header_style="bold")
    table.add_column("Issue")
    table.add_column("Fichiers", justify="right")

    rows = [
        ("[green]Liens crees[/green]", report.created),
        ("Deja presents", report.exists),
        ("En cache", report.cached),
        ("[yellow]Simules[/yellow]", report.dry_run),
        ("Speciaux ignores", report.skipped_special),
        ("[yellow]Non reconnus[/yellow]", report.unparsable),
        ("[red]Introuvables[/red]", report.not_found),
        ("[red]Rate limit[/red]", report.rate_limited),
        ("[red]Echecs[/red]", report.failed),
    ]
    for label, count in rows:
        if count:
            table.add_row(label, str(count))
    table.add_row("[bold]Total[/bold]", f"[bold]{report.total}[/bold]")
    return table
