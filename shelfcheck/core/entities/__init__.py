"""
Entités du domaine.

- LibraryItem : film présent dans la vidéothèque
- SearchResult : verdict renvoyé à l'appelant (trouvé / en collection)
- NormalizedTitle : titre canonique avec le chemin de repli explicite
"""

from shelfcheck.core.entities.library import LibraryItem, SearchResult
from shelfcheck.core.entities.title import NormalizationStatus, NormalizedTitle

__all__ = [
    "LibraryItem",
    "SearchResult",
    "NormalizationStatus",
    "NormalizedTitle",
]
