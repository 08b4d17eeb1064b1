"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
SHELFCHECK_, et peut optionnellement être fournie via un fichier .env.

La clé TMDB est optionnelle : sans elle, la normalisation des titres est désactivée
et la recherche Jellyfin utilise le titre tel quel.
"""

import re
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de shelfcheck/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SHELFCHECK_.
    Exemple : SHELFCHECK_TMDB_LANGUAGE=de-DE

    Les paramètres sont figés après chargement (lecture seule pour tout le processus).
    """

    model_config = SettingsConfigDict(
        env_prefix="SHELFCHECK_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Serveur web
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Jellyfin (index de la vidéothèque)
    jellyfin_url: str = Field(default="http://localhost:8096")
    jellyfin_api_key: Optional[str] = Field(default=None)

    # TMDB (OPTIONNEL - normalisation désactivée si non défini)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_language: str = Field(default="en-US")

    # Nettoyage des titres issus des codes-barres
    junk_keywords: str = Field(default="edition|bluray|dvd")

    # Réseau
    http_timeout: float = Field(default=10.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/shelfcheck.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("jellyfin_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Retire le / final pour construire les URLs de l'API."""
        return v.rstrip("/")

    @field_validator("junk_keywords")
    @classmethod
    def validate_junk_pattern(cls, v: str) -> str:
        """Vérifie au chargement que le motif est une expression régulière valide."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Motif de mots-clés invalide : {e}") from e
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)
