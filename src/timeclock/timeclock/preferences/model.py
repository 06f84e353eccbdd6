from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..core.constants import DEFAULT_STATUS_COLORS, DEFAULT_TOLERANCE_MINUTES
from ..core.enums import PunchStatus

# Per-status tolerance keys kept alongside the general one.
TOLERANCE_STATUSES = (PunchStatus.ON_TIME, PunchStatus.LATE, PunchStatus.EARLY)


def _default_by_status() -> dict[PunchStatus, int]:
    return {s: DEFAULT_TOLERANCE_MINUTES for s in TOLERANCE_STATUSES}


def _default_colors() -> dict[PunchStatus, str]:
    return {PunchStatus(k): v for k, v in DEFAULT_STATUS_COLORS.items()}


@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerância em minutos; só a geral entra na classificação."""

    general: int = DEFAULT_TOLERANCE_MINUTES
    by_status: dict[PunchStatus, int] = field(default_factory=_default_by_status)

    def to_document(self) -> dict:
        doc: dict[str, int] = {"toleranceMinutes": int(self.general)}
        for status, minutes in self.by_status.items():
            doc[status.value] = int(minutes)
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any] | None) -> "ToleranceConfig":
        doc = doc or {}
        by_status = _default_by_status()
        for status in TOLERANCE_STATUSES:
            if doc.get(status.value) is not None:
                by_status[status] = int(doc[status.value])
        general = doc.get("toleranceMinutes")
        return cls(
            general=int(general) if general is not None else DEFAULT_TOLERANCE_MINUTES,
            by_status=by_status,
        )


@dataclass(frozen=True)
class Preferences:
    """Configuração do usuário: tolerâncias e cores de status."""

    tolerances: ToleranceConfig = field(default_factory=ToleranceConfig)
    colors: dict[PunchStatus, str] = field(default_factory=_default_colors)

    def color_for(self, status: PunchStatus | None) -> str | None:
        if status is None:
            return None
        return self.colors.get(status)

    def to_document(self) -> dict:
        return {
            "tolerances": self.tolerances.to_document(),
            "colors": {s.value: c for s, c in self.colors.items()},
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any] | None) -> "Preferences":
        doc = doc or {}
        colors = _default_colors()
        for key, value in (doc.get("colors") or {}).items():
            colors[PunchStatus(key)] = str(value)
        return cls(tolerances=ToleranceConfig.from_document(doc.get("tolerances")), colors=colors)


DEFAULT_PREFERENCES = Preferences()
