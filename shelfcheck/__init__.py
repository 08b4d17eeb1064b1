"""
ShelfCheck - Vérifie si un film est déjà présent dans la vidéothèque.

Ce package rapproche un code-barres (ou un titre saisi librement) des films
déjà indexés par Jellyfin, en normalisant le titre via TMDB avant la recherche.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, erreurs typées)
- services/ : Couche application (nettoyage, normalisation, rapprochement)
- adapters/ : Couche infrastructure (clients API TMDB, Jellyfin, UPCitemdb)
- web/ : Routes HTTP FastAPI
"""

__version__ = "0.1.0"
