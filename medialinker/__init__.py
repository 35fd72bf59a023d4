"""
MediaLinker - Organisation d'une bibliothèque de films, séries et animes par liens symboliques.

Ce package analyse les noms de release téléchargés, les identifie via TMDB
(avec OMDb en repli) et crée des liens symboliques vers une arborescence
canonique, sans jamais déplacer ni copier les fichiers sources.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports, objets valeur)
- services/ : Couche application (résolution, création des liens, orchestration)
- adapters/ : Couche infrastructure (CLI, clients API, parsing, système de fichiers)
- infrastructure/ : Persistance des caches JSON
"""

__version__ = "0.1.0"
