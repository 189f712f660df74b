"""
➡️ But : Centraliser tous les paramètres configurables (nom d'app, chemin DB, préfixe API, logs...)

Utilise pydantic-settings pour charger automatiquement les variables d'environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)
"""

from typing import List, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Checkmate"
    ENV: str = "dev"  # dev | prod | test
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]  # en prod, remplacer par l'URL du front

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "checkmate.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @model_validator(mode="after")
    def _default_database_url(self) -> "Settings":
        # Pas de DATABASE_URL explicite : base SQLite locale sur SQLITE_PATH
        if not self.DATABASE_URL:
            self.DATABASE_URL = f"sqlite:///{self.SQLITE_PATH}"
        return self


# Instance globale importable partout
settings = Settings()
