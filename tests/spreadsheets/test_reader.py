import io

import pytest

from conftest import punch_row, xlsx_bytes
from src.timeclock.timeclock.core.exceptions import ImportFormatError
from src.timeclock.timeclock.spreadsheets.reader import read_rows


def test_reads_xlsx_first_sheet():
    data = xlsx_bytes([punch_row(p1="21/07/2025 08:02"), punch_row("Bruno Lima", p1="21/07/2025 08:10")])

    rows = read_rows(io.BytesIO(data), "ponto.xlsx")

    assert len(rows) == 2
    assert rows[0]["Nome"] == "Ana Souza"
    assert rows[0]["Data e Hora da Batida 1"] == "21/07/2025 08:02"
    assert rows[1]["Nome"] == "Bruno Lima"


def test_blank_cells_are_left_out():
    data = xlsx_bytes([punch_row(p1="21/07/2025 08:02"), punch_row("Bruno", p1="21/07/2025 08:00", p4="21/07/2025 17:00")])

    rows = read_rows(io.BytesIO(data), "ponto.xlsx")

    assert "Data e Hora da Batida 4" not in rows[0]
    assert rows[1]["Data e Hora da Batida 4"] == "21/07/2025 17:00"


def test_reads_csv_with_bom():
    text = "\ufeffNome,x\nAna,1\n"
    rows = read_rows(io.BytesIO(text.encode("utf-8")), "ponto.CSV")

    assert rows == [{"Nome": "Ana", "x": "1"}]


def test_unsupported_extension():
    with pytest.raises(ImportFormatError):
        read_rows(io.BytesIO(b"whatever"), "ponto.pdf")


def test_corrupt_workbook():
    with pytest.raises(ImportFormatError):
        read_rows(io.BytesIO(b"not a zip file"), "ponto.xlsx")
