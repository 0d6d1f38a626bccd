"""Tests for the results spreadsheet parser."""

import io
from datetime import date, datetime

import pandas as pd
import pytest

from loto_analytics.ingest.sheet_parser import (
    NoDrawsFound,
    SheetParseError,
    excel_serial_to_date,
    load_draws,
    parse_sheet_rows,
    read_sheet,
)

HEADER = ["Concurso", "Data Sorteio"] + [f"Bola{i}" for i in range(1, 16)] + ["Rateio"]


def _row(concurso, when, balls, *extra):
    return [concurso, when] + list(balls) + list(extra)


class TestExcelSerialToDate:

    def test_serial_numbers(self):
        assert excel_serial_to_date(44927) == "01/01/2023"
        assert excel_serial_to_date(45000.0) == "15/03/2023"

    def test_datetimes(self):
        assert excel_serial_to_date(date(2024, 2, 29)) == "29/02/2024"
        assert excel_serial_to_date(pd.Timestamp("2023-06-01")) == "01/06/2023"
        assert excel_serial_to_date(datetime(2020, 12, 31, 20, 0)) == "31/12/2020"

    def test_serial_out_of_datetime_range(self):
        assert excel_serial_to_date(99999999) == "99999999"
        assert excel_serial_to_date(float("inf")) == "inf"

    def test_passthrough(self):
        assert excel_serial_to_date("02/01/2023") == "02/01/2023"
        assert excel_serial_to_date(None) == ""


class TestParseSheetRows:

    def test_skips_header_and_sorts_balls(self):
        balls = list(range(15, 0, -1))
        rows = [HEADER, _row(1, 44927, balls, 1500000.5)]
        draws = parse_sheet_rows(rows)

        assert draws == [{
            "sequence_id": 1,
            "date": "01/01/2023",
            "numbers": list(range(1, 16)),
        }]

    def test_float_cells(self):
        rows = [_row(2.0, "02/01/2023", [float(n) for n in range(11, 26)])]
        draws = parse_sheet_rows(rows)
        assert draws[0]["sequence_id"] == 2
        assert draws[0]["numbers"] == list(range(11, 26))

    def test_ignores_out_of_range_cells(self):
        rows = [_row(3, "x", [26, 0] + list(range(1, 16)), 99)]
        assert parse_sheet_rows(rows)[0]["numbers"] == list(range(1, 16))

    def test_takes_first_fifteen_balls(self):
        rows = [_row(4, "x", list(range(1, 16)), 20, 21)]
        assert parse_sheet_rows(rows)[0]["numbers"] == list(range(1, 16))

    def test_short_rows_are_ignored(self):
        short = _row(5, "x", range(1, 15)) + [None, None, None]
        rows = [short, _row(6, "x", range(1, 16))]
        draws = parse_sheet_rows(rows)
        assert [d["sequence_id"] for d in draws] == [6]

    def test_huge_date_serial_keeps_raw_value(self):
        draws = parse_sheet_rows([_row(7, 99999999, range(1, 16))])
        assert draws[0]["date"] == "99999999"
        assert draws[0]["numbers"] == list(range(1, 16))

    def test_non_numeric_contest_is_ignored(self):
        rows = [_row("abc", "x", range(1, 16)), _row(True, "x", range(1, 16))]
        with pytest.raises(NoDrawsFound):
            parse_sheet_rows(rows)

    def test_no_draws(self):
        with pytest.raises(NoDrawsFound):
            parse_sheet_rows([HEADER])


class TestReadSheet:

    def test_csv_bytes(self):
        lines = [",".join(HEADER[:17])]
        lines.append(",".join(["1", "01/03/2023"] + [str(n) for n in range(1, 16)]))
        lines.append(",".join(["2", "02/03/2023"] + [str(n) for n in range(11, 26)]))
        content = "\n".join(lines).encode("utf-8")

        draws = load_draws(content, "lotofacil.csv")

        assert [d["sequence_id"] for d in draws] == [1, 2]
        assert draws[0]["date"] == "01/03/2023"
        assert draws[1]["numbers"] == list(range(11, 26))

    def test_xlsx_bytes(self):
        rows = [HEADER, _row(10, 44927, range(1, 16), 10.5), _row(11, 44930, range(11, 26), 7.25)]
        buffer = io.BytesIO()
        pd.DataFrame(rows).to_excel(buffer, header=False, index=False)

        draws = load_draws(buffer.getvalue(), "lotofacil.xlsx")

        assert [d["sequence_id"] for d in draws] == [10, 11]
        assert draws[0]["date"] == "01/01/2023"
        assert draws[1]["numbers"] == list(range(11, 26))

    def test_unreadable_excel(self):
        with pytest.raises(SheetParseError):
            read_sheet(b"not a workbook", "lotofacil.xlsx")

    def test_missing_cells_become_none(self):
        rows = read_sheet(b"1,2,3\n4,,6\n", "data.csv")
        assert rows == [[1, 2, 3], [4, None, 6]]
