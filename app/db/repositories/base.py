from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlmodel import SQLModel, Session, select

# Type générique pour le modèle (Habit, HabitLog)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les habitudes et leurs logs.

    👉 Ne contient aucune logique métier.
    👉 Deux modes d'écriture : commit immédiat (create/update par défaut),
       ou flush seul (commit=False) pour que le service décide du commit,
       par ex. pour rattraper une violation de contrainte avant de valider.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def list_all(self) -> Sequence[ModelT]:
        """Retourne tous les enregistrements, dans l'ordre de la base."""
        return self.session.exec(select(self.model)).all()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- WRITE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        """Ajoute un nouvel enregistrement ; l'ID est disponible même sans commit."""
        return self._write(self.model(**fields), commit=commit)

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """Applique `changes` sur un enregistrement existant."""
        for key, value in changes.items():
            setattr(entity, key, value)
        return self._write(entity, commit=commit)

    def _write(self, entity: ModelT, *, commit: bool) -> ModelT:
        self.session.add(entity)
        # flush d'abord : les erreurs d'intégrité remontent ici, avant tout commit
        self.session.flush()
        if commit:
            self.commit(entity)
        return entity

    # ---------- TRANSACTION ----------

    def commit(self, entity: Optional[ModelT] = None) -> None:
        """Valide la transaction en cours et recharge `entity` si fourni."""
        self.session.commit()
        if entity is not None:
            self.session.refresh(entity)

    def rollback(self) -> None:
        """Annule la transaction en cours (ex: violation de contrainte)."""
        self.session.rollback()
