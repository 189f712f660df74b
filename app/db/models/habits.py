from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from .base import BaseModelDB


class Habit(BaseModelDB, table=True):
    """Habitude à suivre au quotidien (ex: 'Lire 20 minutes')."""

    __tablename__ = "habit"

    name: str = Field(description="Nom de l'habitude")


class HabitLog(BaseModelDB, table=True):
    """
    Statut d'une habitude pour une date donnée.
    Une seule ligne par (habit_id, date) : contrainte d'unicité en base.
    """

    __tablename__ = "habit_log"
    __table_args__ = (
        UniqueConstraint("habit_id", "date", name="uq_habit_log_habit_date"),
    )

    # Clé étrangère explicite (pas de relation ORM)
    habit_id: int = Field(foreign_key="habit.id", index=True)

    date: str = Field(index=True, description="Date au format YYYY-MM-DD")
    status: int = Field(default=0, description="Code de statut (0/1/2...), non interprété")
