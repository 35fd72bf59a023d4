"""
Orchestration sequentielle d'un lot de fichiers video.

BatchOrchestrator parcourt l'arborescence source et enchaine, pour chaque
fichier: court-circuit par le cache de liens, parsing du nom, resolution
des metadonnees, materialisation des liens.

Toute erreur est limitee au fichier courant, sauf une racine source
illisible qui interrompt le lot (SourceUnreadableError).
"""

import asyncio
import itertools
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Optional

from loguru import logger

from medialinker.adapters.api.retry import RateLimitExceeded
from medialinker.core.ports.file_system import IFileSystem
from medialinker.core.ports.parser import IFilenameParser
from medialinker.core.value_objects.parsed_info import SkippedSpecial, Unparsable
from medialinker.core.value_objects.provider_record import NotFound
from medialinker.services.context import RunContext
from medialinker.services.materializer import LinkMaterializer, LinkStatus
from medialinker.services.resolver import MetadataResolver


class SourceUnreadableError(Exception):
    """La racine source ne peut pas etre listee."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Repertoire source illisible: {path} ({reason})")


@dataclass
class BatchReport:
    """Compteurs d'un lot.

    Attributes:
        created: Fichiers pour lesquels au moins un lien a ete cree
        exists: Fichiers dont toutes les destinations existaient deja
        cached: Fichiers court-circuites par le cache de liens
        dry_run: Fichiers simules
        skipped_special: Episodes de saison 0 ignores
        unparsable: Noms de fichiers non reconnus
        not_found: Titres introuvables chez les fournisseurs
        rate_limited: Fichiers abandonnes apres epuisement des tentatives
        failed: Echecs du systeme de fichiers ou erreurs inattendues
    """

    created: int = 0
    exists: int = 0
    cached: int = 0
    dry_run: int = 0
    skipped_special: int = 0
    unparsable: int = 0
    not_found: int = 0
    rate_limited: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        """Nombre total de fichiers traites."""
        return (
            self.created
            + self.exists
            + self.cached
            + self.dry_run
            + self.skipped_special
            + self.unparsable
            + self.not_found
            + self.rate_limited
            + self.failed
        )

    @property
    def errors(self) -> int:
        return self.not_found + self.rate_limited + self.failed


class BatchOrchestrator:
    """
    Traitement sequentiel d'une arborescence source.

    Apres chaque fichier ayant provoque au moins un appel reseau, attend
    `base_delay + uniform(0, jitter)` secondes. Un fichier resolu depuis le
    cache n'entraine aucune attente.

    Example:
        orchestrator = BatchOrchestrator(context, file_system, parser, resolver, materializer)
        report = await orchestrator.run()
        print(f"Crees: {report.created}, Erreurs: {report.errors}")
    """

    def __init__(
        self,
        context: RunContext,
        file_system: IFileSystem,
        parser: IFilenameParser,
        resolver: MetadataResolver,
        materializer: LinkMaterializer,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        uniform: Callable[[float, float], float] = random.uniform,
    ) -> None:
        self._context = context
        self._fs = file_system
        self._parser = parser
        self._resolver = resolver
        self._materializer = materializer
        self._sleep = sleep
        self._uniform = uniform

    async def run(
        self, progress_callback: Optional[Callable[[str], None]] = None
    ) -> BatchReport:
        """
        Traite tous les fichiers video de la racine source.

        Args:
            progress_callback: Appele avec le nom de chaque fichier (optionnel)

        Returns:
            BatchReport avec les compteurs par issue

        Raises:
            SourceUnreadableError: Si la racine source est illisible
        """
        report = BatchReport()
        root = self._context.source_root

        try:
            files = iter(self._fs.list_video_files(root))
            first = next(files, None)
        except OSError as e:
            raise SourceUnreadableError(root, str(e)) from e

        if first is None:
            logger.warning(f"Aucun fichier video dans {root}")
            return report

        for source in itertools.chain([first], files):
            if progress_callback:
                progress_callback(source.name)

            calls_before = self._resolver.network_calls
            try:
                await self._process_file(source, report)
            except Exception:
                # Toute erreur imprevue reste limitee au fichier courant
                logger.exception(f"Erreur inattendue pour {source.name}")
                report.failed += 1

            if self._resolver.network_calls > calls_before:
                await self._throttle()

        logger.info(
            f"Lot termine ({self._context.policy.name}): {report.total} fichiers, "
            f"{report.created} crees, {report.errors} erreurs"
        )
        return report

    async def _process_file(self, source: Path, report: BatchReport) -> None:
        """Traite un fichier ; les erreurs attendues sont comptees par issue."""
        if self._materializer.is_linked(source):
            logger.debug(f"[Cache] Deja lie: {source.name}")
            report.cached += 1
            return

        parsed = self._parser.parse(source)
        if isinstance(parsed, SkippedSpecial):
            logger.info(f"Ignore ({parsed.reason}): {source.name}")
            report.skipped_special += 1
            return
        if isinstance(parsed, Unparsable):
            logger.warning(f"Nom non reconnu ({parsed.reason}): {source.name}")
            report.unparsable += 1
            return

        try:
            record = await self._resolver.resolve(parsed.raw_title, parsed.year)
        except RateLimitExceeded as e:
            logger.error(f"{source.name}: {e}")
            report.rate_limited += 1
            return

        if isinstance(record, NotFound):
            logger.warning(f"Introuvable: {record.title!r} ({record.year or '?'}) <- {source.name}")
            report.not_found += 1
            return

        result = self._materializer.materialize(parsed, record, source)
        if result.status is LinkStatus.CREATED:
            report.created += 1
        elif result.status is LinkStatus.EXISTS:
            report.exists += 1
        elif result.status is LinkStatus.CACHED:
            report.cached += 1
        elif result.status is LinkStatus.DRY_RUN:
            report.dry_run += 1
        else:
            report.failed += 1

    async def _throttle(self) -> None:
        context = self._context
        delay = context.base_delay + self._uniform(0, context.jitter)
        if delay > 0:
            await self._sleep(delay)
