import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from sqlmodel import Session

from app.db.repositories.habits import HabitRepository
from app.db.repositories.habit_logs import HabitLogRepository
from app.features.habits.services import HabitService, HabitLogService

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seed
# -----------------------------
def seed_habits(session: Session, data: Dict[str, Any]) -> Dict[str, int]:
    """
    Crée les habits (réutilisés par nom si déjà présents) puis toggle leurs logs.
    Rejouable : les logs existants sont mis à jour, pas dupliqués.
    """
    habit_repo = HabitRepository(session)
    habit_svc = HabitService(repo=habit_repo)
    log_svc = HabitLogService(repo=HabitLogRepository(session), habit_svc=habit_svc)

    counts = {"habits": 0, "logs": 0}
    for item in data.get("habits") or []:
        name = item.get("name")
        habit = habit_repo.get_by_name(name) if name else None
        if habit is None:
            habit = habit_svc.create(name)
            counts["habits"] += 1
        for entry in item.get("logs") or []:
            log_svc.toggle(habit.id, entry)
            counts["logs"] += 1

    logger.info("Seed done: %s new habits, %s logs toggled", counts["habits"], counts["logs"])
    return counts


def seed_all(session: Session, seed_path: str | Path) -> Dict[str, int]:
    return seed_habits(session, load_seed_yaml(seed_path))
