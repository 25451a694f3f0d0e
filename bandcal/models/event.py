"""
NewEvent - datos de entrada para programar eventos nuevos
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from ..constants.availability import REHEARSAL, EventType, RehearsalStatus


class NewEvent(BaseModel):
    """
    Evento aún sin ID, tal como llega del flujo de programación.
    El estado de ensayo solo es válido cuando el tipo es 'rehearsal'.
    """

    date: datetime.date = Field(..., description="Fecha del evento")
    event_type: EventType = Field(..., description="Tipo de evento")
    rehearsal_status: Optional[RehearsalStatus] = Field(
        None, description="Estado del ensayo (solo para ensayos)"
    )
    notes: Optional[str] = Field(None, description="Notas libres")

    @model_validator(mode="after")
    def check_rehearsal_status(self) -> "NewEvent":
        if self.rehearsal_status is not None and self.event_type != REHEARSAL:
            raise ValueError(
                f"rehearsal_status is only valid for rehearsals, got event_type={self.event_type!r}"
            )
        return self
