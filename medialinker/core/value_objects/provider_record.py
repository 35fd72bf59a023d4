"""
Objets valeur pour les enregistrements canoniques des fournisseurs.

Un ProviderRecord est le couple titre/annee retenu pour representer un media
dans la bibliotheque de destination. Il est immutable une fois recupere et
serialisable en JSON pour le cache de metadonnees.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from medialinker.utils.constants import UNKNOWN_YEAR


@dataclass(frozen=True)
class ProviderRecord:
    """
    Enregistrement canonique retourne par un fournisseur de metadonnees.

    Attributs:
        title: Titre canonique (localise selon la langue demandee)
        year: Annee canonique en chaine, "0000" si inconnue
        provider_id: Identifiant attribue par le fournisseur
        source: Identifiant du fournisseur ("tmdb")
        payload: Reponse brute du fournisseur pour ce resultat
    """

    title: str
    year: str = UNKNOWN_YEAR
    provider_id: str = ""
    source: str = ""
    payload: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialise l'enregistrement pour le cache JSON."""
        return {
            "title": self.title,
            "year": self.year,
            "provider_id": self.provider_id,
            "source": self.source,
            "payload": dict(self.payload),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProviderRecord":
        """Reconstruit un enregistrement depuis une entree du cache JSON."""
        return cls(
            title=data["title"],
            year=str(data.get("year") or UNKNOWN_YEAR),
            provider_id=str(data.get("provider_id", "")),
            source=data.get("source", ""),
            payload=data.get("payload") or {},
        )


@dataclass(frozen=True)
class NotFound:
    """Aucun fournisseur n'a reconnu le titre. Jamais mis en cache."""

    title: str
    year: Optional[int] = None


def year_from_date(date: Optional[str]) -> Optional[int]:
    """Extrait l'annee d'une date fournisseur (format YYYY-MM-DD)."""
    if date and len(date) >= 4 and date[:4].isdigit():
        return int(date[:4])
    return None
