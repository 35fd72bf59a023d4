"""
Service de creation idempotente des liens symboliques.

Ce module calcule les chemins canoniques d'un fichier source et cree les
liens correspondants dans la bibliotheque de destination:
- Court-circuit via le cache de liens (entree dont la destination existe)
- Aucun ecrasement : une destination deja presente est un succes
- Liens vers le chemin absolu du fichier source
- Mode simulation sans aucune mutation
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger

from medialinker.core.ports.file_system import IFileSystem, ISymlinkManager
from medialinker.core.value_objects.parsed_info import ParsedRelease
from medialinker.core.value_objects.provider_record import ProviderRecord
from medialinker.services.context import RunContext
from medialinker.services.naming import destination_paths


class LinkStatus(Enum):
    """
    Issue de la materialisation d'un fichier source.

    CACHED: Le cache de liens indique un lien encore present
    EXISTS: Toutes les destinations existent deja (aucune mutation)
    CREATED: Au moins un lien a ete cree
    DRY_RUN: Simulation, destinations calculees seulement
    FAILED: Erreur du systeme de fichiers
    """

    CACHED = "cached"
    EXISTS = "exists"
    CREATED = "created"
    DRY_RUN = "dry_run"
    FAILED = "failed"


@dataclass
class LinkResult:
    """
    Resultat d'une materialisation.

    Attributs:
        status: Issue de l'operation
        destinations: Chemins de destination calcules (ou lien en cache)
        created: Liens effectivement crees par cet appel
        error: Message d'erreur (si FAILED)
    """

    status: LinkStatus
    destinations: list[Path] = field(default_factory=list)
    created: list[Path] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status is not LinkStatus.FAILED


class LinkMaterializer:
    """
    Cree les liens canoniques d'un fichier source de maniere idempotente.

    Utilisation:
        materializer = LinkMaterializer(file_system, file_system, context)
        result = materializer.materialize(parsed, record, source)
        if result.status is LinkStatus.CREATED:
            print(f"Liens crees: {result.created}")
    """

    def __init__(self, file_system: IFileSystem, symlink_manager: ISymlinkManager, context: RunContext):
        """
        Initialise le service.

        Args:
            file_system: Adaptateur systeme de fichiers
            symlink_manager: Gestionnaire de symlinks
            context: Contexte d'execution (destination, cache de liens, simulation)
        """
        self._fs = file_system
        self._symlinks = symlink_manager
        self._context = context

    def cached_link(self, source: Path) -> Optional[Path]:
        """
        Retourne le lien en cache pour ce fichier s'il existe encore.

        Une entree dont la destination a disparu est ignoree.
        """
        value = self._context.link_cache.get(source.name)
        if value is None:
            return None
        link = Path(value)
        if not self._fs.exists(link):
            logger.debug(f"Entree de cache perimee: {source.name} -> {link}")
            return None
        return link

    def is_linked(self, source: Path) -> bool:
        return self.cached_link(source) is not None

    def materialize(
        self, parsed: ParsedRelease, record: ProviderRecord, source: Path
    ) -> LinkResult:
        """
        Materialise les liens d'un fichier source.

        Ordre des verifications:
        1. Cache de liens -> CACHED
        2. Toutes les destinations existent -> EXISTS (cache complete)
        3. Simulation -> DRY_RUN
        4. Creation des repertoires et des liens manquants -> CREATED

        Args:
            parsed: Informations extraites du nom de fichier
            record: Enregistrement canonique du fournisseur
            source: Chemin du fichier source

        Returns:
            LinkResult decrivant l'issue de l'operation.
        """
        source = Path(source)
        context = self._context

        cached = self.cached_link(source)
        if cached is not None:
            return LinkResult(status=LinkStatus.CACHED, destinations=[cached])

        destinations = destination_paths(
            parsed, record, source.suffix, context.dest_root, context.policy
        )
        missing = [d for d in destinations if not self._fs.exists(d)]

        if not missing:
            logger.info(f"Deja present: {destinations[0]}")
            if not context.dry_run:
                error = self._remember(source, destinations[0])
                if error is not None:
                    return LinkResult(
                        status=LinkStatus.FAILED, destinations=destinations, error=error
                    )
            return LinkResult(status=LinkStatus.EXISTS, destinations=destinations)

        if context.dry_run:
            for destination in missing:
                logger.info(f"[DRY RUN] {source.name} -> {destination}")
            return LinkResult(status=LinkStatus.DRY_RUN, destinations=destinations)

        target = source.absolute()
        created: list[Path] = []
        try:
            for destination in missing:
                self._fs.make_dirs(destination.parent)
                self._symlinks.create_symlink(target, destination)
                created.append(destination)
                logger.info(f"Lien cree: {destination}")
        except OSError as e:
            logger.error(f"Echec de creation du lien pour {source.name}: {e}")
            return LinkResult(
                status=LinkStatus.FAILED,
                destinations=destinations,
                created=created,
                error=str(e),
            )

        error = self._remember(source, destinations[0])
        if error is not None:
            return LinkResult(
                status=LinkStatus.FAILED,
                destinations=destinations,
                created=created,
                error=error,
            )
        return LinkResult(
            status=LinkStatus.CREATED, destinations=destinations, created=created
        )

    def _remember(self, source: Path, link: Path) -> Optional[str]:
        """Enregistre le lien dans le cache ; retourne le message d'erreur eventuel."""
        try:
            self._context.link_cache.set(source.name, str(link))
        except OSError as e:
            logger.error(f"Ecriture du cache de liens impossible pour {source.name}: {e}")
            return str(e)
        return None
