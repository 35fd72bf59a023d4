"""
Politiques de nommage par type de contenu.

Une politique parametre le moteur commun (parser, resolver, materializer)
au lieu de dupliquer la logique pour chaque variante:
- films : titre + annee
- series : titre + saison + fenetre d'episodes
- animes : titre du dossier + episodes en numerotation absolue
"""

from dataclasses import dataclass
from typing import Optional

from medialinker.core.value_objects.parsed_info import MediaType
from medialinker.utils.constants import ANIME_ORIGIN_COUNTRY, TMDB_ANIMATION_GENRE_ID


@dataclass(frozen=True)
class NamingPolicy:
    """
    Capacite de nommage selectionnee pour une execution.

    Attributs:
        media_type: Type de contenu traite
        episodic: True si la politique exige saison/episodes
        search_kind: Type de recherche fournisseur ("movie" ou "tv")
        episode_width: Largeur du zero-padding des episodes dans les noms
        absolute_episodes: Numerotation absolue sur 3 chiffres (animes)
        title_from_folder: Le titre vient d'abord du dossier parent
        preferred_genre_id: Genre TMDB a privilegier parmi les candidats
        preferred_origin_country: Pays d'origine a privilegier
    """

    media_type: MediaType
    episodic: bool
    search_kind: str
    episode_width: int = 2
    absolute_episodes: bool = False
    title_from_folder: bool = False
    preferred_genre_id: Optional[int] = None
    preferred_origin_country: Optional[str] = None

    @property
    def name(self) -> str:
        """Nom court de la variante, utilise pour les fichiers de cache."""
        return {
            MediaType.MOVIE: "movies",
            MediaType.SERIES: "series",
            MediaType.ANIME: "anime",
        }[self.media_type]


MOVIE_POLICY = NamingPolicy(
    media_type=MediaType.MOVIE,
    episodic=False,
    search_kind="movie",
)

SERIES_POLICY = NamingPolicy(
    media_type=MediaType.SERIES,
    episodic=True,
    search_kind="tv",
)

ANIME_POLICY = NamingPolicy(
    media_type=MediaType.ANIME,
    episodic=True,
    search_kind="tv",
    episode_width=3,
    absolute_episodes=True,
    title_from_folder=True,
    preferred_genre_id=TMDB_ANIMATION_GENRE_ID,
    preferred_origin_country=ANIME_ORIGIN_COUNTRY,
)


def policy_for(media_type: MediaType) -> NamingPolicy:
    """Retourne la politique de nommage d'un type de contenu."""
    return {
        MediaType.MOVIE: MOVIE_POLICY,
        MediaType.SERIES: SERIES_POLICY,
        MediaType.ANIME: ANIME_POLICY,
    }[media_type]
