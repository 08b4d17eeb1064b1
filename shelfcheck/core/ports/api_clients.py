"""
Interfaces ports pour les clients API.

Contrats minimaux des trois collaborateurs externes, tels qu'utilisés par le
pipeline. Les adaptateurs concrets vivent dans adapters/api/.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shelfcheck.core.entities.library import LibraryItem


@dataclass(frozen=True)
class MetadataCandidate:
    """
    Candidat renvoyé par la recherche du service de métadonnées.

    L'ordre d'une liste de candidats est celui du classement du service
    (le premier est le plus pertinent).

    Attributs :
        id : Identifiant dans le service (ID TMDB)
        title : Titre tel que renvoyé par la recherche
    """

    id: str
    title: str


class IMetadataClient(ABC):
    """Service de métadonnées : recherche par texte et titre localisé par ID."""

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Vrai si le client dispose d'une clé d'API."""
        ...

    @abstractmethod
    async def search(self, query: str) -> list[MetadataCandidate]:
        """
        Recherche des films par texte libre.

        Raises:
            MetadataServiceError: service injoignable ou réponse invalide
        """
        ...

    @abstractmethod
    async def get_title(self, media_id: str, language: str) -> str:
        """
        Récupère le titre d'un film dans la langue demandée.

        Raises:
            MetadataServiceError: service injoignable ou réponse invalide
        """
        ...


class ILibraryIndex(ABC):
    """Index de la vidéothèque."""

    @abstractmethod
    async def search_items(self, term: str, item_type: str = "Movie") -> list[LibraryItem]:
        """
        Recherche récursive dans toute la vidéothèque, restreinte à un type de média.

        Retourne les items dans l'ordre de pertinence de l'index.

        Raises:
            LibraryIndexError: index injoignable ou en erreur
        """
        ...


class IBarcodeLookup(ABC):
    """Base de codes-barres produits."""

    @abstractmethod
    async def lookup(self, barcode: str) -> list[str]:
        """
        Retourne les titres bruts associés au code-barres (liste vide si inconnu).

        Raises:
            BarcodeLookupError: base injoignable ou en erreur
        """
        ...
