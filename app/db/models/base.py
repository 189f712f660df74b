"""
➡️ But : Définir la structure des tables de la base (ORM).

Ici on représente les propriétés communes de toutes les tables :
identifiant généré par la base et horodatages techniques (UTC, avec fuseau).
"""

from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional

# Bornes d'un INTEGER SQL 64 bits (ids, codes de statut)
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
