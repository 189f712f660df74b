"""
➡️ But : Configurer la base et gérer les sessions de base de données.

engine : connexion à la base (sqlite:///checkmate.db par défaut).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes,
annule la transaction en cours si la requête échoue, puis la ferme proprement.
"""

from typing import Any, Dict, Iterator

from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from app.db.models.habits import Habit, HabitLog  # noqa: F401

from app.core.config import settings


def build_engine(url: str, *, echo: bool = False, **kwargs: Any) -> Engine:
    """
    Engine SQLModel pour `url`.
    SQLite : accès multi-threads autorisé (serveur, TestClient) ;
    autres bases : ping des connexions du pool avant usage.
    """
    is_sqlite = url.startswith("sqlite:")
    connect_args: Dict[str, Any] = {"check_same_thread": False} if is_sqlite else {}
    return create_engine(
        url,
        echo=echo,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,
        **kwargs,
    )


assert settings.DATABASE_URL, "DATABASE_URL must be set"
# echo seulement en dev pour ne pas polluer les logs en prod
engine: Engine = build_engine(settings.DATABASE_URL, echo=(settings.ENV == "dev"))

def init_db(bind: Engine = engine) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod, préfère des migrations.
    """
    SQLModel.metadata.create_all(bind)


def get_session() -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    Les repositories commitent eux-mêmes ; ici on rollback ce qui reste ouvert en cas d'erreur.
    """
    with Session(engine) as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise
