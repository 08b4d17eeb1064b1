"""
Résultat de la normalisation d'un titre.

La normalisation TMDB est une chaîne de repli : soit un titre canonique est
obtenu, soit le titre candidat est conservé tel quel. NormalizedTitle rend ce
repli visible dans le type de retour au lieu de le cacher derrière une
exception absorbée.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NormalizationStatus(Enum):
    """Issue de la normalisation d'un titre."""

    NORMALIZED = "normalized"  # Titre canonique obtenu depuis TMDB
    NO_MATCH = "no_match"  # TMDB n'a renvoyé aucun candidat
    SKIPPED = "skipped"  # Pas de clé TMDB configurée
    FAILED = "failed"  # Échec dégradé (réseau, timeout, réponse invalide)


@dataclass(frozen=True)
class NormalizedTitle:
    """
    Titre retenu pour la recherche dans la vidéothèque.

    Attributs :
        title : Titre canonique, ou titre candidat si la normalisation n'a pas abouti
        status : Issue de la normalisation
        error : Message de l'échec dégradé (status FAILED uniquement)
    """

    title: str
    status: NormalizationStatus
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        """Vrai si le titre candidat a été conservé sans normalisation."""
        return self.status is not NormalizationStatus.NORMALIZED
