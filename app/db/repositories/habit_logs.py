from typing import Optional, Sequence

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.habits import HabitLog


class HabitLogRepository(BaseRepository[HabitLog]):
    """CRUD HabitLogs + requêtes par égalité (habit, date) et par préfixe de date."""
    model = HabitLog

    # ---------- GETTERS SPÉCIFIQUES ----------

    def find_by_habit_and_date(self, habit_id: int, date: str) -> Sequence[HabitLog]:
        """Logs d'un habit pour une date exacte (normalement 0 ou 1)."""
        stmt = (
            select(self.model)
            .where(self.model.habit_id == habit_id, self.model.date == date)
            .order_by(self.model.id)
        )
        return self.session.exec(stmt).all()

    def first_by_habit_and_date(self, habit_id: int, date: str) -> Optional[HabitLog]:
        logs = self.find_by_habit_and_date(habit_id, date)
        return logs[0] if logs else None

    # ---------- LISTES / RECHERCHE ----------

    def list_by_habit(self, habit_id: int, *, date_prefix: Optional[str] = None) -> Sequence[HabitLog]:
        """
        Logs d'un habit, triés par date.
        - date_prefix : si fourni, ne garde que les dates qui commencent par ce préfixe
          (ex: "2024-06"). Les caractères % et _ sont échappés.
        """
        stmt = select(self.model).where(self.model.habit_id == habit_id)
        if date_prefix:
            stmt = stmt.where(self.model.date.startswith(date_prefix, autoescape=True))
        stmt = stmt.order_by(self.model.date, self.model.id)
        return self.session.exec(stmt).all()
