"""
Interface port pour les caches cle/valeur persistants.

Les deux caches de l'application (metadonnees et liens) sont des tables
plates chargees une fois au demarrage puis ecrites de maniere incrementale.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IKeyValueCache(ABC):
    """
    Cache cle/valeur persistant, sans expiration.

    Chaque ecriture est persistee avant de rendre la main : un arret brutal
    ne perd au plus que le fichier en cours de traitement.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Retourne la valeur associee a la cle, ou None si absente."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Stocke une valeur et persiste immediatement le cache."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Vide le cache et supprime son stockage persistant."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
