"""
Ports (interfaces abstraites) vers les services externes.

Ports client API :
- IMetadataClient : recherche et titre localisé (TMDB)
- ILibraryIndex : recherche dans la vidéothèque (Jellyfin)
- IBarcodeLookup : code-barres vers titres bruts (UPCitemdb)
- MetadataCandidate : candidat renvoyé par la recherche de métadonnées
"""

from shelfcheck.core.ports.api_clients import (
    IBarcodeLookup,
    ILibraryIndex,
    IMetadataClient,
    MetadataCandidate,
)

__all__ = [
    "IBarcodeLookup",
    "ILibraryIndex",
    "IMetadataClient",
    "MetadataCandidate",
]
