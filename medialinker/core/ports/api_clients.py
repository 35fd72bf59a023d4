"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) définissant les contrats pour les fournisseurs
de métadonnées externes. Les implémentations (adaptateurs) fournissent les
clients concrets (TMDB en fournisseur principal, OMDb en repli).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from medialinker.core.value_objects.provider_record import ProviderRecord


@dataclass
class SecondaryMatch:
    """
    Meilleure correspondance unique retournée par le fournisseur de repli.

    Attributs :
        title : Titre canonique (souvent le titre original)
        year : Année de sortie, si connue
        external_id : Identifiant externe (ID IMDb pour OMDb)
    """

    title: str
    year: Optional[int] = None
    external_id: Optional[str] = None


class IMetadataProvider(ABC):
    """
    Interface du fournisseur principal (recherche classée par pertinence).

    Les résultats sont retournés dans l'ordre du fournisseur : la sélection
    (année exacte, préférences de genre) est faite par le resolver.
    """

    @abstractmethod
    async def search(
        self,
        query: str,
        year: Optional[int] = None,
        kind: str = "movie",
    ) -> list[ProviderRecord]:
        """
        Recherche des médias par titre.

        Args :
            query : Titre à rechercher
            year : Année optionnelle pour affiner la recherche
            kind : "movie" ou "tv"

        Retourne :
            Liste ordonnée de ProviderRecord (vide si aucun résultat)

        Lève :
            RateLimitExceeded : si le rate limiting persiste après les tentatives
            httpx.HTTPError : pour les autres erreurs réseau/HTTP
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb')."""
        ...


class ISecondaryProvider(ABC):
    """
    Interface du fournisseur de repli (une seule meilleure correspondance).

    Utilisé uniquement pour obtenir un titre canonique permettant de
    réinterroger le fournisseur principal (titres alternatifs/localisés).
    """

    @abstractmethod
    async def lookup(
        self,
        title: str,
        year: Optional[int] = None,
        kind: str = "movie",
    ) -> Optional[SecondaryMatch]:
        """
        Recherche la meilleure correspondance pour un titre libre.

        Retourne :
            SecondaryMatch ou None si le fournisseur ne trouve rien
        """
        ...
