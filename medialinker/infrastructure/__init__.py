"""
Couche infrastructure de MediaLinker.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) pour les preoccupations techniques :

- persistence/ : Caches cle/valeur persistants en JSON (metadonnees, liens)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation du stockage sans modifier la logique metier.
"""
