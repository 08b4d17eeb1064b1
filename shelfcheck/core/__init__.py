"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et la taxonomie
d'erreurs. Cette couche n'a AUCUNE dépendance vers l'infrastructure.

Sous-packages :
- entities/ : Entités métier (LibraryItem, SearchResult, NormalizedTitle)
- ports/ : Interfaces abstraites pour les services externes
- errors : Erreurs typées (dégradée vs bloquante)
"""
