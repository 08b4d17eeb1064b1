"""
Taxonomie des erreurs de ShelfCheck.

Deux niveaux de gravité coexistent dans le pipeline :
- DEGRADED : échec d'une étape d'enrichissement optionnelle (TMDB). L'erreur est
  absorbée et le pipeline continue avec le titre d'origine.
- HARD : échec d'une étape obligatoire (Jellyfin, UPCitemdb). La requête est
  abandonnée et signalée comme erreur serveur.

Chaque exception porte sa gravité dans l'attribut `kind`, ce qui permet à la
couche HTTP (et aux tests) de décider sans inspecter les messages.
"""

from enum import Enum


class FailureKind(Enum):
    """Gravité d'un échec dans le pipeline."""

    DEGRADED = "degraded"
    HARD = "hard"


class ShelfCheckError(Exception):
    """Erreur de base du package."""

    kind: FailureKind = FailureKind.HARD


class MetadataServiceError(ShelfCheckError):
    """Le service de métadonnées (TMDB) est injoignable ou a répondu n'importe quoi."""

    kind = FailureKind.DEGRADED


class LibraryIndexError(ShelfCheckError):
    """L'index de la vidéothèque (Jellyfin) est injoignable ou en erreur."""

    kind = FailureKind.HARD


class BarcodeLookupError(ShelfCheckError):
    """La base de codes-barres est injoignable ou en erreur."""

    kind = FailureKind.HARD


class SearchFailedError(ShelfCheckError):
    """
    La recherche dans la vidéothèque a échoué.

    Levée à la frontière de l'orchestrateur ; aucun SearchResult partiel
    n'est produit dans ce cas.
    """

    kind = FailureKind.HARD
