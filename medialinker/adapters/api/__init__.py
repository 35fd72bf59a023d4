"""
Clients API externes pour la resolution des metadonnees.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDB: The Movie Database, fournisseur principal (films et series)
- OMDb: Open Movie Database, fournisseur de repli

Infrastructure partagee:
- RateLimitError: Exception pour les erreurs 429
- RateLimitExceeded: Rate limiting persistant apres toutes les tentatives
- with_retry: Decorateur avec backoff exponentiel borne
"""

from medialinker.adapters.api.omdb_client import OMDbClient
from medialinker.adapters.api.retry import (
    RateLimitError,
    RateLimitExceeded,
    request_with_retry,
    with_retry,
)
from medialinker.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "TMDBClient",
    "OMDbClient",
    "RateLimitError",
    "RateLimitExceeded",
    "with_retry",
    "request_with_retry",
]
