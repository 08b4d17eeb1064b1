"""
Corps JSON des requêtes de l'API web.
"""

from pydantic import BaseModel


class BarcodeCheckRequest(BaseModel):
    """Requête POST /check-barcode."""

    barcode: str


class TitleCheckRequest(BaseModel):
    """Requête POST /check-title."""

    title: str


class CollectionSearchRequest(BaseModel):
    """Requête POST /search-collection."""

    term: str = ""
