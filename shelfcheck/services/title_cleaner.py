"""
Nettoyage des titres bruts issus des bases de codes-barres.

Les titres produits ressemblent à "Inception (2010) [Blu-ray] - Steelbook Edition".
TitleCleaner en retire le bruit marketing pour obtenir un terme de recherche :
1. Coupe au premier " [" ou " (" (suffixe entre crochets/parenthèses)
2. Supprime les mots-clés parasites configurables (insensible à la casse)
3. Retire les espaces et un tiret final laissé orphelin
"""

import re

_TRAILING_DASH = re.compile(r"\s*-\s*$")


class TitleCleaner:
    """
    Transformation pure d'un titre brut en terme de recherche.

    Déterministe, sans effet de bord, et idempotente : la transformation est
    répétée jusqu'à stabilisation, car un retrait peut faire apparaître un
    nouveau suffixe (ex: "Film dvd(2010)" -> "Film (2010)").
    """

    def __init__(self, junk_pattern: str = "edition|bluray|dvd") -> None:
        """
        Args:
            junk_pattern: Expression régulière des mots-clés à supprimer
                (vide = aucune suppression)
        """
        self._junk = re.compile(junk_pattern, re.IGNORECASE) if junk_pattern else None

    def _clean_once(self, title: str) -> str:
        title = title.split(" [", 1)[0].split(" (", 1)[0]
        if self._junk is not None:
            title = self._junk.sub("", title)
        return _TRAILING_DASH.sub("", title.strip(), count=1).strip()

    def clean(self, raw: str) -> str:
        """
        Nettoie un titre brut.

        Args:
            raw: Titre tel que fourni par la source externe

        Returns:
            Titre nettoyé (éventuellement vide)
        """
        previous = None
        title = raw
        # Chaque passe effective raccourcit la chaîne : la boucle termine
        while title != previous:
            previous = title
            title = self._clean_once(title)
        return title
