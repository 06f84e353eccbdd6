from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import require_hex_color, require_int_range
from ..core.constants import MAX_TOLERANCE_MINUTES
from ..core.enums import PunchStatus
from ..core.exceptions import ValidationError
from .model import DEFAULT_PREFERENCES, TOLERANCE_STATUSES, Preferences, ToleranceConfig
from .repository import PreferencesRepository

logger = logging.getLogger(__name__)


class PreferencesService:
    def __init__(self, preferences: PreferencesRepository):
        self._preferences = preferences

    def get_config(self, owner_id: str) -> Preferences:
        return self._preferences.get(owner_id) or DEFAULT_PREFERENCES

    def save_config(self, owner_id: str, payload: Mapping[str, Any]) -> Preferences:
        """Validate a {tolerances, colors} payload over the current config and store it."""
        if not isinstance(payload, Mapping):
            raise ValidationError("Configuração inválida")

        current = self.get_config(owner_id)
        tolerances = self._merge_tolerances(current.tolerances, payload.get("tolerances") or {})
        colors = self._merge_colors(current.colors, payload.get("colors") or {})

        prefs = Preferences(tolerances=tolerances, colors=colors)
        self._preferences.save(owner_id, prefs)
        logger.info("Saved preferences for owner %s (tolerance=%d)", owner_id, tolerances.general)
        return prefs

    def reset_config(self, owner_id: str) -> Preferences:
        self._preferences.delete(owner_id)
        return DEFAULT_PREFERENCES

    @staticmethod
    def _merge_tolerances(current: ToleranceConfig, raw: Mapping[str, Any]) -> ToleranceConfig:
        if not isinstance(raw, Mapping):
            raise ValidationError("Tolerâncias inválidas")

        allowed = {"toleranceMinutes"} | {s.value for s in TOLERANCE_STATUSES}
        unknown = set(raw) - allowed
        if unknown:
            raise ValidationError(f"Tolerância desconhecida: {', '.join(sorted(unknown))}")

        general = current.general
        if "toleranceMinutes" in raw:
            general = require_int_range(raw["toleranceMinutes"], "Tolerância", 0, MAX_TOLERANCE_MINUTES)

        by_status = dict(current.by_status)
        for status in TOLERANCE_STATUSES:
            if status.value in raw:
                by_status[status] = require_int_range(raw[status.value], f"Tolerância ({status.value})", 0, MAX_TOLERANCE_MINUTES)

        return ToleranceConfig(general=general, by_status=by_status)

    @staticmethod
    def _merge_colors(current: Mapping[PunchStatus, str], raw: Mapping[str, Any]) -> dict[PunchStatus, str]:
        if not isinstance(raw, Mapping):
            raise ValidationError("Cores inválidas")

        colors = dict(current)
        for key, value in raw.items():
            try:
                status = PunchStatus(key)
            except ValueError:
                raise ValidationError(f"Status desconhecido: {key}")
            colors[status] = require_hex_color(value, f"Cor ({key})")
        return colors
