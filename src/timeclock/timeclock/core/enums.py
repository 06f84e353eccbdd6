from __future__ import annotations

from enum import Enum


class PunchStatus(str, Enum):
    """Classificação de uma batida frente ao horário contratual."""

    ON_TIME = "on_time"
    LATE = "late"
    EARLY = "early"
    ADJUSTED = "adjusted"


STATUS_LABELS = {
    PunchStatus.ON_TIME: "No horário",
    PunchStatus.LATE: "Atrasado",
    PunchStatus.EARLY: "Antecipado",
    PunchStatus.ADJUSTED: "Ajustado",
}

UNKNOWN_STATUS_LABEL = "Desconhecido"


def status_label(status: PunchStatus | None) -> str:
    if status is None:
        return UNKNOWN_STATUS_LABEL
    return STATUS_LABELS.get(status, UNKNOWN_STATUS_LABEL)
