from __future__ import annotations

import io
from typing import Mapping, Optional, Sequence

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..attendance.model import AttendanceRecord
from ..core.enums import PunchStatus, status_label

EXPORT_SHEET = "Registros"
EXPORT_HEADERS = [
    "Nome",
    "Departamento",
    "Localização",
    "Equipamento",
    "Entrada Contratual",
    "Saida Contratual",
    "Data da batida",
    "Entrada",
    "Saída",
    "STATUS ENTRADA",
    "STATUS SAIDA",
]

# 1-based column positions of coloured cells
COL_ENTRY, COL_EXIT, COL_ENTRY_STATUS, COL_EXIT_STATUS = 8, 9, 10, 11

HEADER_FILL = PatternFill(fill_type="solid", fgColor="FFE0E0E0")
WHITE_TEXT_COLORS = {"#ef4444", "#f59e0b"}
WHITE = "#ffffff"
_THIN_BLACK = Side(style="thin", color="FF000000")

TEMPLATE_SHEET = "Novo Modelo"
TEMPLATE_ROW = {
    "Nome": "Exemplo Usuário",
    "Matrícula": "12345",
    "Pis": "12345678901",
    "CPF": "123.456.789-00",
    "Código Interno": "INT001",
    "Data de Admissão": "01/01/2023",
    "Data de Nascimento": "15/05/1990",
    "Cargo": "Analista",
    "Departamento": "TI",
    "Filial": "Matriz",
    "Regime de trabalho": "CLT",
    "Centro de Custo": "001",
    "Localização": "Sede",
    "Equipamento da Última Batida": "REP001",
    "centro_custo_desc": "Tecnologia da Informação",
    "Data de Demissão": "",
    "Data Lógica": "21/07/2025",
    "Data da Batida": "21/07/2025",
    "Tipo da Batida": "Normal",
    "Latitude": "-23.550520",
    "Longitude": "-46.633308",
    "Precisão": "10",
    "Escala/Jornala": "Padrão",
    "Horário contratual": "08:00 - 12:00 - 13:00 - 17:00",
    "Data e Hora da Batida 1": "21/07/2025 08:02",
    "Data e Hora da Batida 2": "21/07/2025 12:00",
    "Data e Hora da Batida 3": "21/07/2025 13:00",
    "Data e Hora da Batida 4": "21/07/2025 17:05",
    "Data e Hora da Batida 5": "",
}


def record_to_row(record: AttendanceRecord) -> list[Optional[str]]:
    return [
        record.name,
        record.department,
        record.location,
        record.equipment,
        record.contractual_entry,
        record.contractual_exit,
        record.punch_date.strftime("%Y-%m-%d"),
        record.entry_display,
        record.exit_display,
        status_label(record.entry_status),
        status_label(record.exit_status),
    ]


def _argb(color: str) -> str:
    return "FF" + color.lstrip("#").upper()


def _paint(cell, color: Optional[str]) -> None:
    if not color:
        return
    color = color.lower()
    cell.fill = PatternFill(fill_type="solid", fgColor=_argb(color))
    if color in WHITE_TEXT_COLORS:
        cell.font = Font(color="FFFFFFFF")
    if color == WHITE:
        cell.font = Font(color="FF000000")
        cell.border = Border(left=_THIN_BLACK, right=_THIN_BLACK, top=_THIN_BLACK, bottom=_THIN_BLACK)


def _autofit(ws) -> None:
    for idx, column in enumerate(ws.iter_cols(), start=1):
        longest = max((len(str(c.value)) if c.value is not None else 10) for c in column)
        ws.column_dimensions[get_column_letter(idx)].width = 10 if longest < 10 else longest + 2


def build_records_workbook(
    records: Sequence[AttendanceRecord],
    colors: Mapping[PunchStatus, str],
) -> io.BytesIO:
    """Export records to xlsx with status colours on time and status cells."""
    wb = Workbook()
    ws = wb.active
    ws.title = EXPORT_SHEET

    ws.append(EXPORT_HEADERS)
    for cell in ws[1]:
        cell.font = Font(bold=True)
        cell.fill = HEADER_FILL

    for row_idx, record in enumerate(records, start=2):
        ws.append(record_to_row(record))

        entry_color = colors.get(record.entry_status) if record.entry_status else None
        exit_color = colors.get(record.exit_status) if record.exit_status else None

        if entry_color and record.actual_entry:
            _paint(ws.cell(row=row_idx, column=COL_ENTRY), entry_color)
        if exit_color and record.actual_exit:
            _paint(ws.cell(row=row_idx, column=COL_EXIT), exit_color)
        _paint(ws.cell(row=row_idx, column=COL_ENTRY_STATUS), entry_color)
        _paint(ws.cell(row=row_idx, column=COL_EXIT_STATUS), exit_color)

    _autofit(ws)

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)
    return output


def build_template_workbook() -> io.BytesIO:
    """Sample upload file with every column the device export carries."""
    df = pd.DataFrame([TEMPLATE_ROW])

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=TEMPLATE_SHEET)
    output.seek(0)
    return output
