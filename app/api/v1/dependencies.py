"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Chaque service est construit à partir de la session DB de la requête
(Depends(get_session)) : une session par requête, partagée par les repositories.
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_session

from app.db.repositories.habits import HabitRepository
from app.db.repositories.habit_logs import HabitLogRepository
from app.features.habits.services import HabitService, HabitLogService


# -----------------------------
# Repositories
# -----------------------------
def get_habit_repository(session: Session = Depends(get_session)) -> HabitRepository:
    return HabitRepository(session)

def get_habit_log_repository(session: Session = Depends(get_session)) -> HabitLogRepository:
    return HabitLogRepository(session)


# -----------------------------
# Services
# -----------------------------
def get_habit_service(
    habit_repo: HabitRepository = Depends(get_habit_repository),
) -> HabitService:
    return HabitService(repo=habit_repo)

def get_habit_log_service(
    log_repo: HabitLogRepository = Depends(get_habit_log_repository),
    habit_svc: HabitService = Depends(get_habit_service),
) -> HabitLogService:
    return HabitLogService(repo=log_repo, habit_svc=habit_svc)
