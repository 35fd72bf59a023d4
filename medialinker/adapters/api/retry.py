"""
Mecanisme de retry avec backoff exponentiel pour les API externes.

Gere automatiquement les erreurs 429 (rate limiting) en relancant
les requetes avec un delai croissant, dans la limite d'un nombre
de tentatives. Au-dela, RateLimitExceeded est levee.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=5, backoff=2.0)
    async def my_api_call():
        ...

    # Avec la fonction helper
    response = await request_with_retry(client, "GET", url)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        """
        Initialise l'erreur avec la valeur Retry-After optionnelle.

        Args:
            retry_after: Secondes a attendre avant de relancer (optionnel)
        """
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


class RateLimitExceeded(RateLimitError):
    """
    Exception levee quand le rate limiting persiste apres toutes les tentatives.

    Attributes:
        attempts: Nombre de tentatives effectuees
    """

    def __init__(self, attempts: int, retry_after: Optional[int] = None) -> None:
        super().__init__(retry_after)
        self.attempts = attempts
        self.args = (f"Rate limit toujours actif apres {attempts} tentative(s)",)


def _raise_exceeded(retry_state: RetryCallState) -> None:
    """Convertit l'epuisement des tentatives en RateLimitExceeded."""
    error = retry_state.outcome.exception() if retry_state.outcome else None
    retry_after = getattr(error, "retry_after", None)
    raise RateLimitExceeded(retry_state.attempt_number, retry_after) from error


def _log_retry(retry_state: RetryCallState) -> None:
    sleep = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.warning(
        f"Rate limit atteint, tentative {retry_state.attempt_number} "
        f"(nouvel essai dans {sleep:.1f}s)"
    )


def with_retry(max_attempts: int = 5, backoff: float = 2.0, max_wait: float = 60):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    Le delai double a chaque tentative a partir de `backoff` secondes,
    plafonne a `max_wait`. Apres `max_attempts` tentatives, leve
    RateLimitExceeded au lieu de relancer indefiniment.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        backoff: Delai de base en secondes (defaut: 2.0)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)

    Returns:
        Decorateur a appliquer sur une fonction async

    Example:
        @with_retry(max_attempts=3, backoff=0.5)
        async def fetch_data():
            # Sera relance jusqu'a 3 fois si RateLimitError est levee
            ...
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_exponential(multiplier=backoff, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        retry_error_callback=_raise_exceeded,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    backoff: float = 2.0,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur 429.

    Convertit les reponses 429 en RateLimitError et relance avec
    backoff exponentiel. Les autres erreurs HTTP (4xx, 5xx) sont
    propagees immediatement sans retry.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        backoff: Delai de base du backoff en secondes (defaut: 2.0)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitExceeded: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP

    Example:
        async with httpx.AsyncClient() as client:
            response = await request_with_retry(
                client, "GET", "https://api.themoviedb.org/3/search/movie",
                params={"query": "Dune"},
            )
    """

    @with_retry(max_attempts=max_attempts, backoff=backoff)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            retry_after_header = response.headers.get("Retry-After")
            retry_after = (
                int(retry_after_header)
                if retry_after_header and retry_after_header.isdigit()
                else None
            )
            raise RateLimitError(retry_after)
        response.raise_for_status()
        return response

    return await _do_request()
