"""
➡️ But : Définir les formats d'entrée/sortie de l'API (couche validation).

HabitCreateIn → corps POST /habits

HabitLogToggleIn → corps POST /habits/{id}/logs

HabitOut / HabitLogOut → réponses de l'API

Les champs d'entrée sont volontairement permissifs : les règles métier
(nom requis, date requise, statut numérique) sont vérifiées par le service,
qui renvoie des messages d'erreur précis.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field as PydField


# ---------- IN ----------

class HabitCreateIn(BaseModel):
    name: Optional[str] = PydField(None, description="Nom de l'habitude", examples=["Lire 20 minutes"])


class HabitLogToggleIn(BaseModel):
    date: Any = PydField(None, description="Date au format YYYY-MM-DD", examples=["2024-06-01"])
    status: Any = PydField(None, description="Code de statut (0/1/2...)", examples=[1])


# ---------- OUT ----------

class HabitOut(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class HabitLogOut(BaseModel):
    id: int
    habit: HabitOut
    date: str
    status: int
