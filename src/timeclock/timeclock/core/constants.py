"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOLERANCE_MINUTES = 5
MAX_TOLERANCE_MINUTES = 60

ADJUSTMENT_MARKER = "*"

PUNCH_DATE_FORMAT = "%d/%m/%Y"
PUNCH_FIELD_COUNT = 5

# Column labels of the punch-clock export (case and accent sensitive).
COL_NAME = "Nome"
COL_DEPARTMENT = "Departamento"
COL_LOCATION = "Localização"
COL_EQUIPMENT = "Equipamento da Última Batida"
COL_CONTRACTUAL = "Horário contratual"
COL_PUNCH_TEMPLATE = "Data e Hora da Batida {n}"

DEFAULT_STATUS_COLORS = {
    "on_time": "#22c55e",
    "late": "#ef4444",
    "early": "#3b82f6",
    "adjusted": "#f59e0b",
}

RECENT_ACTIVITY_LIMIT = 5
