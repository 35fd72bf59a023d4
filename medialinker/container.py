"""
Container d'injection de dependances via dependency-injector.

Fournit les adaptateurs partages par les commandes CLI. Les services
d'un lot (resolver, materializer, orchestrateur) dependent du RunContext
de l'execution et sont construits par la commande elle-meme.
"""

from dependency_injector import containers, providers

from .adapters.api.omdb_client import OMDbClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.file_system import FileSystemAdapter
from .config import Settings
from .services.name_fixer import NameFixer


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        settings = container.config()
        tmdb = container.tmdb_client(language="fr-FR")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - FileSystemAdapter implemente IFileSystem et ISymlinkManager
    file_system = providers.Singleton(FileSystemAdapter)

    # Clients API - Factory : la langue peut etre surchargee par --lang
    tmdb_client = providers.Factory(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        language=config.provided.language,
        max_attempts=config.provided.rate_limit_max_attempts,
        backoff=config.provided.rate_limit_backoff_seconds,
    )

    omdb_client = providers.Factory(
        OMDbClient,
        api_key=config.provided.omdb_api_key,
        max_attempts=config.provided.rate_limit_max_attempts,
        backoff=config.provided.rate_limit_backoff_seconds,
    )

    # Services sans etat d'execution
    name_fixer = providers.Factory(NameFixer, file_system=file_system)
