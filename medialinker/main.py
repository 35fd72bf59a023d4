"""
Point d'entrée CLI de MediaLinker.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import fix_names, link
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_for_verbosity, set_console_level

app = typer.Typer(
    name="medialinker",
    help="Bibliothèque de films, séries et animes par liens symboliques",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """MediaLinker - Liens symboliques canoniques pour une vidéothèque."""
    if verbose or quiet:
        set_console_level(level_for_verbosity(verbose, quiet))


app.command()(link)
app.command(name="fix-names")(fix_names)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Films : {config.movies_source_dir} -> {config.movies_dest_dir}")
    typer.echo(f"Séries : {config.series_source_dir} -> {config.series_dest_dir}")
    typer.echo(f"Animes : {config.anime_source_dir} -> {config.anime_dest_dir}")
    typer.echo(f"Caches : {config.cache_dir}")
    typer.echo(f"Langue : {config.language}")
    typer.echo(f"Délai : {config.request_delay_ms} ms (+ jitter : {config.jitter_ms} ms)")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"API OMDb : {'activée' if config.omdb_enabled else 'désactivée'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MediaLinker v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de MediaLinker", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
