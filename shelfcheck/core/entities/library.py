"""
Entités liées à la vidéothèque.

LibraryItem représente un film déjà indexé par Jellyfin. SearchResult est le
verdict produit pour une requête : l'identifiant a-t-il été résolu, et le film
est-il déjà dans la collection.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class LibraryItem:
    """
    Film présent dans la vidéothèque, tel que rapporté par l'index.

    Attributs :
        title : Nom du film dans la vidéothèque
        year : Année de production (absente pour certains items)
        id : Identifiant de l'item dans l'index
    """

    title: str
    year: Optional[int] = None
    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Sérialise l'item pour la réponse JSON de recherche directe."""
        return {"title": self.title, "year": self.year, "id": self.id}


@dataclass(frozen=True)
class SearchResult:
    """
    Verdict d'une recherche dans la vidéothèque.

    Invariants :
    - in_collection n'a de sens que si found est vrai
    - match et year sont renseignés si et seulement si in_collection est vrai

    Utiliser les constructeurs not_found(), missing() et owned() plutôt que
    le constructeur brut pour garantir ces invariants.

    Attributs :
        found : L'identifiant (code-barres ou titre) a été résolu
        in_collection : Le film est déjà dans la vidéothèque
        title : Titre canonique utilisé pour la décision
        match : Titre de l'item trouvé dans la vidéothèque
        year : Année de l'item trouvé
    """

    found: bool
    in_collection: Optional[bool] = None
    title: Optional[str] = None
    match: Optional[str] = None
    year: Optional[int] = None

    @classmethod
    def not_found(cls) -> "SearchResult":
        """L'identifiant n'a mené à aucun titre (code-barres inconnu)."""
        return cls(found=False)

    @classmethod
    def missing(cls, title: str) -> "SearchResult":
        """Titre résolu mais absent de la vidéothèque."""
        return cls(found=True, in_collection=False, title=title)

    @classmethod
    def owned(cls, title: str, item: LibraryItem) -> "SearchResult":
        """Titre résolu et présent dans la vidéothèque."""
        return cls(
            found=True,
            in_collection=True,
            title=title,
            match=item.title,
            year=item.year,
        )

    def to_response(self) -> dict[str, Any]:
        """
        Construit le corps JSON de la réponse HTTP.

        Les clés sans objet sont omises : {"found": false} pour un code-barres
        inconnu, pas de match/year quand le film manque à la collection.
        """
        if not self.found:
            return {"found": False}

        body: dict[str, Any] = {
            "found": True,
            "inCollection": bool(self.in_collection),
            "title": self.title,
        }
        if self.in_collection:
            body["match"] = self.match
            body["year"] = self.year
        return body
