"""
Couche application (cas d'utilisation).

Pipeline de vérification d'un film :
    code-barres -> UPCitemdb -> TitleCleaner -> SearchOrchestrator
    titre libre ----------------------------> SearchOrchestrator
    SearchOrchestrator = TitleNormalizer (TMDB) puis CollectionMatcher (Jellyfin)

Les services dépendent des ports de core/, jamais des adaptateurs concrets.
"""
