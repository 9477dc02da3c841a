#!/usr/bin/env python3
"""
Export Formatter
Builds the payroll summary document and writes it as an Excel workbook
"""

import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from config import payroll_config
from errors import MissingDependencyError
from logger_config import main_logger
from models import DriverStat
from payroll_calculator import calculate_payroll

# Gross, penalty and net columns (0-based)
CURRENCY_COLUMNS = [2, 3, 4]


@dataclass
class ExportDocument:
    """
    Spreadsheet-like document: rows[0] is the header, rows[-1] the TOTAL row.
    number_formats maps (row, column), both 0-based, to an Excel number format.
    """
    file_name: str
    sheet_name: str
    rows: List[List[Any]]
    column_widths: List[int]
    number_formats: Dict[Tuple[int, int], str] = field(default_factory=dict)

    @property
    def header(self) -> List[Any]:
        return self.rows[0]

    @property
    def total_row(self) -> List[Any]:
        return self.rows[-1]

    @property
    def data_rows(self) -> List[List[Any]]:
        return self.rows[1:-1]


def export_filename(today: Optional[date] = None) -> str:
    """Payroll_Summary_YYYY-MM-DD.xlsx for the given (default: current) day"""
    today = today or date.today()
    prefix = payroll_config.get('formatting.export_prefix', 'Payroll_Summary_')
    return f"{prefix}{today.isoformat()}.xlsx"


def build_export_document(stats: Sequence[DriverStat], price_per_tour: float,
                          penalties: Mapping[str, float], today: Optional[date] = None) -> ExportDocument:
    """
    Lay out the payroll summary for export.

    Args:
        stats: Driver statistics in display order
        price_per_tour: Amount paid per tour
        penalties: Driver name -> penalty amount
        today: Date used in the file name (defaults to today)

    Returns:
        ExportDocument with header, one row per driver and a TOTAL row
    """
    summary = calculate_payroll(stats, price_per_tour, penalties)

    header = list(payroll_config.get('formatting.headers'))
    rows: List[List[Any]] = [header]
    for row in summary.rows:
        rows.append([row.name, row.tour_count, row.gross_pay, row.penalty, row.net_pay])
    rows.append([
        payroll_config.get('formatting.total_label', 'TOTAL'),
        summary.total_tours,
        summary.total_gross,
        summary.total_penalties,
        summary.total_payout
    ])

    currency_format = payroll_config.get('formatting.currency_format')
    number_formats = {
        (row_idx, col_idx): currency_format
        for row_idx in range(1, len(rows))
        for col_idx in CURRENCY_COLUMNS
    }

    return ExportDocument(
        file_name=export_filename(today),
        sheet_name=payroll_config.get('formatting.sheet_name', 'Payroll Summary'),
        rows=rows,
        column_widths=list(payroll_config.get('formatting.column_widths')),
        number_formats=number_formats
    )


def write_workbook(document: ExportDocument, output_dir: str = '.') -> Path:
    """
    Write the document to output_dir/document.file_name with openpyxl.

    The workbook is saved to a temporary name first so a failed save never
    leaves a partial file under the final name.
    """
    try:
        import openpyxl
        from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
        from openpyxl.utils import get_column_letter
    except ImportError as e:
        main_logger.error("openpyxl is not available for export", exception=e)
        raise MissingDependencyError('openpyxl', 'export') from e

    output_path = Path(output_dir) / document.file_name
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = document.sheet_name

    thin_border = Border(
        left=Side(style='thin', color='D0D0D0'),
        right=Side(style='thin', color='D0D0D0'),
        top=Side(style='thin', color='D0D0D0'),
        bottom=Side(style='thin', color='D0D0D0')
    )
    last_row = len(document.rows) - 1

    for row_idx, values in enumerate(document.rows):
        for col_idx, value in enumerate(values):
            cell = ws.cell(row=row_idx + 1, column=col_idx + 1, value=value)
            cell.border = thin_border

            number_format = document.number_formats.get((row_idx, col_idx))
            if number_format:
                cell.number_format = number_format

            if row_idx == 0:
                cell.font = Font(size=11, bold=True, color="FFFFFF")
                cell.fill = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")
                cell.alignment = Alignment(horizontal="center", vertical="center")
            elif row_idx == last_row:
                cell.font = Font(size=11, bold=True, color="FFFFFF")
                cell.fill = PatternFill(start_color="2C3E50", end_color="2C3E50", fill_type="solid")

    for col_idx, width in enumerate(document.column_widths, 1):
        ws.column_dimensions[get_column_letter(col_idx)].width = width

    temp_path = output_path.with_name(output_path.name + '.part')
    try:
        wb.save(temp_path)
        os.replace(temp_path, output_path)
    except OSError as e:
        main_logger.error("Failed to write payroll export", exception=e, file=str(output_path))
        if temp_path.exists():
            temp_path.unlink()
        raise
    finally:
        wb.close()

    main_logger.log_file_operation("export", str(output_path), True, output_path.stat().st_size)
    return output_path
