from typing import Optional

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.habits import Habit


class HabitRepository(BaseRepository[Habit]):
    """CRUD Habits."""
    model = Habit

    def get_by_name(self, name: str) -> Optional[Habit]:
        """Premier habit portant ce nom (pas d'unicité en base)."""
        stmt = select(self.model).where(self.model.name == name).order_by(self.model.id)
        return self.session.exec(stmt).first()
