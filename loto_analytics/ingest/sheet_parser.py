"""Parser for the official Lotofácil results spreadsheet (lotofacil.xlsx).

Expected layout (CAIXA export), one draw per row:
    Concurso | Data Sorteio | Bola1 ... Bola15 | (prize columns ...)

Header and prize rows are skipped heuristically; the parser only extracts
candidate records and leaves invariant checks to the engine validator.
"""

import io
import math
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta
from numbers import Integral, Real
from pathlib import Path

import pandas as pd
from loguru import logger

from loto_analytics.engine.constants import NUMBER_MAX, NUMBER_MIN, PICK_COUNT

EXCEL_EPOCH_OFFSET = 25569  # serial day number of 1970-01-01
MIN_ROW_CELLS = PICK_COUNT + 2  # contest id + date + 15 balls
EXCEL_SUFFIXES = {".xlsx", ".xls"}


class SheetParseError(Exception):
    """The uploaded file could not be read as a results sheet."""


class NoDrawsFound(SheetParseError):
    """No row in the sheet looks like a draw."""


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def _as_int(value) -> int | None:
    """Return value as int when it is an integral number, else None."""
    if not _is_number(value):
        return None
    if isinstance(value, Integral):
        return int(value)
    return int(value) if float(value).is_integer() else None


def excel_serial_to_date(value) -> str:
    """Format a sheet date cell as dd/mm/yyyy.

    Numeric cells are Excel serial day numbers; datetime cells come from
    sheets whose date column pandas already parsed.
    """
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return value.strftime("%d/%m/%Y")
    if _is_number(value):
        epoch = datetime(1970, 1, 1)
        try:
            moment = epoch + timedelta(days=float(value) - EXCEL_EPOCH_OFFSET)
        except (OverflowError, ValueError):
            # serial outside the datetime range; keep the raw cell
            return str(value)
        return moment.strftime("%d/%m/%Y")
    return str(value)


def _trim(row: Sequence) -> list:
    cells = list(row)
    while cells and cells[-1] is None:
        cells.pop()
    return cells


def _parse_row(row: list) -> dict | None:
    """Parse a single sheet row into a raw draw dict, or None if it is not a draw."""
    if len(row) < MIN_ROW_CELLS:
        return None

    concurso = _as_int(row[0])
    if concurso is None:
        return None

    balls = []
    for cell in row[2:]:
        num = _as_int(cell)
        if num is not None and NUMBER_MIN <= num <= NUMBER_MAX:
            balls.append(num)
        if len(balls) == PICK_COUNT:
            break

    if len(balls) < PICK_COUNT:
        return None

    return {
        "sequence_id": concurso,
        "date": excel_serial_to_date(row[1]),
        "numbers": sorted(balls),
    }


def parse_sheet_rows(rows: Iterable[Sequence]) -> list[dict]:
    """Extract raw draw records from sheet rows.

    Raises:
        NoDrawsFound: when no row qualifies as a draw.
    """
    draws = []
    skipped = 0
    for row in rows:
        parsed = _parse_row(_trim(row))
        if parsed is None:
            skipped += 1
            continue
        draws.append(parsed)

    if not draws:
        raise NoDrawsFound(
            "Não foi possível identificar sorteios válidos. Verifique se o "
            "arquivo é o padrão da CAIXA (lotofacil.xlsx)."
        )

    logger.info("Parsed {} draws from sheet ({} rows ignored)", len(draws), skipped)
    return draws


def _coerce_text(value):
    """CSV cells arrive as text when a column mixes headers and numbers."""
    if not isinstance(value, str):
        return value
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return value


def read_sheet(source, filename: str | None = None) -> list[list]:
    """Read the first sheet of an Excel file, or a CSV file, as raw rows.

    Args:
        source: Path, file-like object, or raw bytes.
        filename: Used to pick the reader when source carries no suffix.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    name = filename or (str(source) if isinstance(source, (str, Path)) else "")
    suffix = Path(name).suffix.lower()

    try:
        if suffix in EXCEL_SUFFIXES:
            df = pd.read_excel(source, header=None, sheet_name=0)
            coerce = None
        else:
            df = pd.read_csv(source, header=None, dtype=str, keep_default_na=False)
            coerce = _coerce_text
    except Exception as e:
        logger.warning("Failed to read sheet {}: {}", name or "<stream>", e)
        raise SheetParseError(f"Erro ao processar arquivo: {e}") from e

    df = df.astype(object).where(df.notna(), None)
    rows = []
    for values in df.values.tolist():
        if coerce:
            values = [None if v == "" else coerce(v) for v in values]
        rows.append(values)
    return rows


def load_draws(source, filename: str | None = None) -> list[dict]:
    """Read a results sheet and return raw draw records."""
    return parse_sheet_rows(read_sheet(source, filename))
