"""
Clients API externes du pipeline de vérification.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDB: The Movie Database pour la normalisation des titres
- Jellyfin: index de la vidéothèque
- UPCitemdb: base de codes-barres produits

Infrastructure partagee:
- request_json: requete unique (sans retry) convertissant les erreurs
  reseau et les reponses invalides en erreurs typees du domaine
"""

from shelfcheck.adapters.api.jellyfin_client import JellyfinClient
from shelfcheck.adapters.api.request import request_json
from shelfcheck.adapters.api.tmdb_client import TMDBClient
from shelfcheck.adapters.api.upc_client import UPCItemDBClient

__all__ = [
    "JellyfinClient",
    "TMDBClient",
    "UPCItemDBClient",
    "request_json",
]
