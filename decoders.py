#!/usr/bin/env python3
"""
Raw table decoding
Reads an input file into rows of cells without interpreting them.

- .xlsx / .xls: first sheet only, through pandas.read_excel
- anything else: text split on newlines, then on commas (no quoting support,
  a cell that contains a comma is split in two)
"""

import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

import pandas as pd

from errors import DecodeError, MissingDependencyError, PayrollError
from logger_config import data_logger
from models import Cell
from validators import import_validator

TEXT_ENCODINGS = ['utf-8-sig', 'cp1252', 'latin-1']


@dataclass
class DecodeResult:
    """Outcome of reading one file: rows on success, error otherwise"""
    file_name: str
    rows: List[List[Cell]] = field(default_factory=list)
    error: Optional[PayrollError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _trim_trailing_empty(row: List[Cell]) -> List[Cell]:
    """Drop empty cells at the end of a row so ragged rows keep their real length"""
    end = len(row)
    while end > 0 and row[end - 1] is None:
        end -= 1
    return row[:end]


def _start_at_used_range(rows: List[List[Cell]]) -> List[List[Cell]]:
    """Drop leading empty rows and columns so row 0 is the first used row of the sheet"""
    first_row = 0
    while first_row < len(rows) and not rows[first_row]:
        first_row += 1
    rows = rows[first_row:]

    offsets = [
        next(index for index, cell in enumerate(row) if cell is not None)
        for row in rows if row
    ]
    first_col = min(offsets, default=0)
    if first_col:
        rows = [row[first_col:] for row in rows]
    return rows


def read_spreadsheet_rows(file_path: str) -> List[List[Cell]]:
    """
    Read the first sheet of a workbook as rows of cells.

    Only blank cells become None; text such as "NA" or "NULL" is kept as is.
    Row 0 of the result is the first non-empty row of the sheet.
    """
    engine = 'xlrd' if Path(file_path).suffix.lower() == '.xls' else 'openpyxl'
    try:
        df = pd.read_excel(file_path, sheet_name=0, header=None,
                           keep_default_na=False, na_values=[''])
    except ImportError as e:
        data_logger.error("Spreadsheet engine unavailable", exception=e)
        raise MissingDependencyError(engine, "reading spreadsheets") from e
    except Exception as e:
        raise DecodeError(Path(file_path).name, str(e)) from e

    df = df.astype(object)
    df = df.where(pd.notna(df) & (df != ''), None)
    return _start_at_used_range([_trim_trailing_empty(row) for row in df.values.tolist()])


def decode_text(data: bytes) -> str:
    """Decode raw bytes trying a few common encodings"""
    for encoding in TEXT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise UnicodeDecodeError('latin-1', data, 0, len(data), 'no supported encoding')


def split_delimited_text(text: str) -> List[List[Cell]]:
    """Split on newline then comma"""
    return [line.split(',') for line in text.split('\n')]


def read_text_rows(file_path: str) -> List[List[Cell]]:
    try:
        with open(file_path, 'rb') as f:
            data = f.read()
        text = decode_text(data)
    except (OSError, UnicodeDecodeError) as e:
        raise DecodeError(Path(file_path).name, str(e)) from e
    return split_delimited_text(text)


def decode_file(file_path: str) -> DecodeResult:
    """
    Read a file into rows, choosing the decoder from the extension.

    Never raises for expected failures: the error is returned in the result.
    """
    file_name = Path(file_path).name
    start = time.time()

    valid, message = import_validator.validate_file_path(file_path)
    if not valid:
        return DecodeResult(file_name=file_name, error=DecodeError(file_name, message))

    try:
        if import_validator.is_spreadsheet(file_name):
            rows = read_spreadsheet_rows(file_path)
        else:
            rows = read_text_rows(file_path)
    except PayrollError as e:
        data_logger.warning(f"Decoding failed: {e.user_message()}", detail=e.detail)
        return DecodeResult(file_name=file_name, error=e)

    data_logger.log_performance(f"Decoding {file_name}", time.time() - start, len(rows))
    return DecodeResult(file_name=file_name, rows=rows)


def decode_file_async(file_path: str, on_complete: Callable[[DecodeResult], None]) -> threading.Thread:
    """
    Decode on a background thread and hand the result to on_complete.

    on_complete runs on the worker thread; GUI callers must marshal it back to
    their event loop. There is no cancellation: when two reads overlap, the one
    that completes last is applied last.
    """
    def worker():
        on_complete(decode_file(file_path))

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    return thread
