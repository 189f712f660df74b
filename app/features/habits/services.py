"""
➡️ But : Contenir la logique métier des habitudes : valider les entrées,
orchestrer les repositories, lever des erreurs métier que les routes traduisent en HTTP.

HabitService : liste / création d'habitudes.

HabitLogService : liste par mois et "toggle" (upsert) d'un log pour une date.
"""

import logging
from numbers import Number
from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError

from app.db.models.base import INT64_MAX, INT64_MIN, utcnow
from app.db.models.habits import Habit, HabitLog
from app.db.repositories.habits import HabitRepository
from app.db.repositories.habit_logs import HabitLogRepository
from app.features.habits.schemas import HabitOut, HabitLogOut, HabitLogToggleIn

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    pass


class NotFoundError(LookupError):
    pass


class HabitService:
    def __init__(self, repo: HabitRepository):
        self.repo = repo

    def list(self) -> List[HabitOut]:
        return [HabitOut.model_validate(h) for h in self.repo.list_all()]

    def get(self, habit_id: Any) -> Habit:
        """
        Habit par id. Un id illisible ("abc") ou hors des bornes d'un entier
        64 bits ne peut désigner aucune ligne : même réponse qu'un id inconnu.
        """
        try:
            id_ = int(habit_id)
        except (TypeError, ValueError):
            raise NotFoundError("Habit not found")
        if not INT64_MIN <= id_ <= INT64_MAX:
            raise NotFoundError("Habit not found")
        habit = self.repo.get(id_)
        if not habit:
            raise NotFoundError("Habit not found")
        return habit

    def create(self, name: Optional[str]) -> HabitOut:
        if name is None or not name.strip():
            raise ValidationError("Habit name is required")
        habit = self.repo.create(name=name)
        logger.info("Habit created id=%s name=%r", habit.id, habit.name)
        return HabitOut.model_validate(habit)


class HabitLogService:
    def __init__(self, *, repo: HabitLogRepository, habit_svc: HabitService):
        self.repo = repo
        self.habits = habit_svc

    # --------------- Helpers ---------------
    @staticmethod
    def _to_out(log: HabitLog, habit: Habit) -> HabitLogOut:
        return HabitLogOut(
            id=log.id,
            habit=HabitOut.model_validate(habit),
            date=log.date,
            status=log.status,
        )

    @staticmethod
    def _parse_body(payload: Any) -> HabitLogToggleIn:
        # corps absent ou autre chose qu'un objet JSON : aucun champ exploitable
        if not isinstance(payload, dict):
            return HabitLogToggleIn()
        return HabitLogToggleIn.model_validate(payload)

    @staticmethod
    def _parse_date(value) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("Date is required")
        return value

    @staticmethod
    def _parse_status(value) -> int:
        # bool est un int en Python : on le refuse explicitement
        if isinstance(value, bool) or not isinstance(value, Number):
            raise ValidationError("Status must be a number")
        try:
            status = int(value)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError("Status must be a number")
        if not INT64_MIN <= status <= INT64_MAX:
            raise ValidationError("Status must be a number")
        return status

    # --------------- Queries ---------------
    def list_for_month(self, habit_id: Any, month: Optional[str]) -> List[HabitLogOut]:
        """
        Logs d'un habit dont la date commence par `month` (YYYY-MM).
        month absent ou vide → tous les logs de l'habit.
        """
        habit = self.habits.get(habit_id)
        logs = self.repo.list_by_habit(habit.id, date_prefix=month or None)
        return [self._to_out(log, habit) for log in logs]

    # --------------- Commands ---------------
    def toggle(self, habit_id: Any, payload: Any) -> HabitLogOut:
        """
        Crée ou met à jour le log (habit, date) à partir du corps brut
        {"date": ..., "status": ...}. L'habit est vérifié avant le corps.

        Une seule écriture commitée par appel ; si un insert concurrent a gagné
        la course (contrainte unique), on relit la ligne et on la met à jour.
        """
        habit = self.habits.get(habit_id)
        data = self._parse_body(payload)
        date = self._parse_date(data.date)
        status = self._parse_status(data.status)

        existing = self.repo.first_by_habit_and_date(habit.id, date)
        if existing:
            log = self._update_status(existing, status)
        else:
            try:
                log = self.repo.create(habit_id=habit.id, date=date, status=status, commit=False)
            except IntegrityError:
                self.repo.rollback()
                logger.warning("HabitLog insert conflict habit_id=%s date=%s, retrying as update",
                               habit.id, date)
                existing = self.repo.first_by_habit_and_date(habit.id, date)
                if existing is None:
                    raise
                log = self._update_status(existing, status)
            else:
                self.repo.commit(log)
                logger.info("HabitLog created id=%s habit_id=%s date=%s status=%s",
                            log.id, habit.id, date, status)
        return self._to_out(log, habit)

    def _update_status(self, log: HabitLog, status: int) -> HabitLog:
        log = self.repo.update(log, status=status, updated_at=utcnow())
        logger.info("HabitLog updated id=%s habit_id=%s date=%s status=%s",
                    log.id, log.habit_id, log.date, status)
        return log
