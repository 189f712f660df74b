"""
➡️ But : Définir les endpoints de l'API des habitudes.

Réceptionne les requêtes HTTP, appelle le service correspondant,
traduit les erreurs métier en HTTPException et retourne les schémas de sortie.

Les routes ne contiennent ni SQL ni logique métier.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status

from app.api.v1.dependencies import get_habit_service, get_habit_log_service
from app.features.habits.schemas import HabitCreateIn, HabitOut, HabitLogOut
from app.features.habits.services import (
    HabitService,
    HabitLogService,
    NotFoundError,
    ValidationError,
)

router = APIRouter(
    prefix="/habits",
    tags=["habits"],
    responses={404: {"description": "Habit not found"}},
)

# -----------------------------
# Habits
# -----------------------------
@router.get(
    "",
    summary="Lister les habitudes",
    response_model=List[HabitOut],
)
def list_habits(svc: HabitService = Depends(get_habit_service)):
    return svc.list()

@router.post(
    "",
    summary="Créer une habitude",
    status_code=status.HTTP_201_CREATED,
    response_model=HabitOut,
    responses={
        400: {
            "description": "Nom manquant",
            "content": {"application/json": {"example": {"error": "Habit name is required"}}},
        }
    },
)
def create_habit(
    payload: Optional[HabitCreateIn] = None,
    svc: HabitService = Depends(get_habit_service),
):
    try:
        return svc.create(name=payload.name if payload is not None else None)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

# -----------------------------
# Logs
# -----------------------------
@router.get(
    "/{habit_id}/logs",
    summary="Lister les logs d'une habitude pour un mois",
    description="`month` au format YYYY-MM ; absent → tous les logs de l'habitude.",
    response_model=List[HabitLogOut],
)
def list_habit_logs(
    habit_id: str = Path(..., description="Identifiant de l'habitude"),
    month: Optional[str] = Query(None, description="Mois au format YYYY-MM", examples=["2024-06"]),
    svc: HabitLogService = Depends(get_habit_log_service),
):
    try:
        return svc.list_for_month(habit_id, month)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.post(
    "/{habit_id}/logs",
    summary="Créer ou mettre à jour le log d'une date (toggle)",
    response_model=HabitLogOut,
    responses={400: {"description": "Date ou statut invalide"}},
)
def toggle_habit_log(
    habit_id: str = Path(..., description="Identifiant de l'habitude"),
    payload: Any = Body(None, examples=[{"date": "2024-06-01", "status": 1}]),
    svc: HabitLogService = Depends(get_habit_log_service),
):
    try:
        return svc.toggle(habit_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
