"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- MediaType : Type de contenu (MOVIE, SERIES, ANIME)
- ParsedRelease : Informations extraites du nom d'une release
- SkippedSpecial, Unparsable : Rejets types du parser
- ProviderRecord : Enregistrement canonique d'un fournisseur
- NotFound : Resolution infructueuse
- NamingPolicy : Politique de nommage par type de contenu
"""

from medialinker.core.value_objects.naming_policy import (
    ANIME_POLICY,
    MOVIE_POLICY,
    SERIES_POLICY,
    NamingPolicy,
    policy_for,
)
from medialinker.core.value_objects.parsed_info import (
    MediaType,
    ParsedRelease,
    ParseOutcome,
    SkippedSpecial,
    Unparsable,
)
from medialinker.core.value_objects.provider_record import (
    NotFound,
    ProviderRecord,
)

__all__ = [
    "MediaType",
    "ParsedRelease",
    "ParseOutcome",
    "SkippedSpecial",
    "Unparsable",
    "ProviderRecord",
    "NotFound",
    "NamingPolicy",
    "MOVIE_POLICY",
    "SERIES_POLICY",
    "ANIME_POLICY",
    "policy_for",
]
