"""
Commande CLI fix-names : supprime les deux-points des noms d'une bibliotheque.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from medialinker.adapters.cli.helpers import console
from medialinker.container import Container


def fix_names(
    directory: Annotated[
        Optional[Path],
        typer.Argument(help="Repertoire a corriger (defaut: bibliotheque de films)"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Affiche les renommages sans les appliquer"),
    ] = False,
) -> None:
    """Renomme les entrees dont le nom contient ':' (regle Radarr)."""
    container = Container()
    target = (directory or container.config().movies_dest_dir).expanduser()

    if not target.is_dir():
        console.print(f"[red]Repertoire introuvable: {target}[/red]")
        raise typer.Exit(1)

    report = container.name_fixer().fix(target, dry_run=dry_run)

    prefix = "[yellow][DRY RUN][/yellow] " if dry_run else ""
    for old, new in report.renamed:
        console.print(f"  {prefix}[green]✓[/green] {old.name} → {new.name}")
    for path in report.skipped:
        console.print(f"  [dim]-[/dim] {path.name} - cible deja existante")
    for path, error in report.failed:
        console.print(f"  [red]✗[/red] {path.name} - {error}")

    if not (report.renamed or report.skipped or report.failed):
        console.print("[yellow]Aucun nom a corriger.[/yellow]")
        return

    console.print(
        f"\n[bold]Resume:[/bold] {len(report.renamed)} renomme(s), "
        f"{len(report.skipped)} ignore(s), {len(report.failed)} echec(s)"
    )
    if report.failed:
        raise typer.Exit(1)
