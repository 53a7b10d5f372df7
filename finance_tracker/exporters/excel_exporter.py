"""
Excel exporter for tracker data.

Generates an Excel workbook with 2 sheets:
1. Transactions - All records with signed amounts
2. Dashboard - Derived figures and the 7-day expense trend
"""
import logging
from pathlib import Path
from typing import List, Optional

import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter

from ..config.settings import DEFAULT_CURRENCY
from ..models import DashboardStats, ForecastStatus, Transaction

logger = logging.getLogger(__name__)


class ExcelExporter:
    """Export transactions and dashboard figures to a formatted workbook."""

    # Colors
    HEADER_COLOR = "366092"  # Dark blue
    WARNING_COLOR = "FFC7CE"  # Light red
    SUCCESS_COLOR = "C6EFCE"  # Light green
    INFO_COLOR = "FFEB9C"  # Light yellow

    CURRENCY_FORMATS = {
        'GBP': '£#,##0.00',
        'EUR': '€#,##0.00',
        'USD': '$#,##0.00',
        'JPY': '¥#,##0',
        'INR': '₹#,##0.00',
    }

    def __init__(self, currency: Optional[str] = None):
        """Initialize Excel exporter."""
        code = (currency or DEFAULT_CURRENCY).upper()
        self.currency_format = self.CURRENCY_FORMATS.get(code, f'"{code}" #,##0.00')

    def export(
        self,
        transactions: List[Transaction],
        stats: DashboardStats,
        output_path: Path
    ) -> Path:
        """
        Export records and dashboard to Excel.

        Args:
            transactions: Records to list
            stats: Dashboard figures for the same records
            output_path: Path for output Excel file

        Returns:
            Path to created Excel file
        """
        logger.info(f"Exporting to Excel: {output_path}")

        wb = openpyxl.Workbook()

        # Remove default sheet
        if "Sheet" in wb.sheetnames:
            wb.remove(wb["Sheet"])

        self._create_transactions_sheet(wb, transactions)
        self._create_dashboard_sheet(wb, stats)

        wb.save(output_path)
        logger.info(f"Excel export complete: {output_path}")

        return Path(output_path)

    def _write_header(self, ws, headers: List[str]) -> None:
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = PatternFill(start_color=self.HEADER_COLOR, fill_type="solid")
            cell.alignment = Alignment(horizontal="center", vertical="center")

    def _create_transactions_sheet(
        self,
        wb: openpyxl.Workbook,
        transactions: List[Transaction]
    ) -> None:
        """Create transactions sheet with formatted data."""
        ws = wb.create_sheet("Transactions", 0)

        headers = ["Date", "Description", "Category", "Type", "Amount"]
        self._write_header(ws, headers)

        for row, txn in enumerate(transactions, 2):
            ws.cell(row=row, column=1, value=txn.date)
            ws.cell(row=row, column=2, value=txn.description)
            ws.cell(row=row, column=3, value=txn.category)
            ws.cell(row=row, column=4, value=txn.type.value if txn.type else "")

            amount_cell = ws.cell(row=row, column=5, value=float(txn.signed_amount))
            amount_cell.number_format = self.currency_format

            if txn.is_expense:
                amount_cell.fill = PatternFill(start_color=self.WARNING_COLOR, fill_type="solid")
            else:
                amount_cell.fill = PatternFill(start_color=self.SUCCESS_COLOR, fill_type="solid")

        for col in range(1, len(headers) + 1):
            ws.column_dimensions[get_column_letter(col)].width = 15
        ws.column_dimensions['B'].width = 40

        # Freeze header row
        ws.freeze_panes = "A2"

    def _create_dashboard_sheet(
        self,
        wb: openpyxl.Workbook,
        stats: DashboardStats
    ) -> None:
        """Create dashboard sheet with derived figures and trend."""
        ws = wb.create_sheet("Dashboard", 1)

        rows = [
            ("Net Balance", float(stats.net_balance), True),
            ("Gross Volume", float(stats.gross_volume), True),
            ("Records", stats.record_count, False),
            ("Top Category", stats.top_category, False),
            ("Spent This Month", float(stats.monthly_expense), True),
            ("Budget", float(stats.budget), True),
            ("Budget Remaining", float(stats.budget_remaining), True),
            ("Budget Used %", float(stats.budget_percent) if stats.budget_percent is not None else "-", False),
            ("Forecast", stats.forecast.message, False),
        ]

        for row, (label, value, is_money) in enumerate(rows, 1):
            ws.cell(row=row, column=1, value=label).font = Font(bold=True)
            cell = ws.cell(row=row, column=2, value=value)
            if is_money:
                cell.number_format = self.currency_format

        forecast_cell = ws.cell(row=len(rows), column=2)
        if stats.forecast.status is ForecastStatus.EXCEEDED:
            forecast_cell.fill = PatternFill(start_color=self.WARNING_COLOR, fill_type="solid")
        else:
            forecast_cell.fill = PatternFill(start_color=self.INFO_COLOR, fill_type="solid")

        trend_row = len(rows) + 2
        ws.cell(row=trend_row, column=1, value="Last 7 Days").font = Font(bold=True)
        for offset, point in enumerate(stats.daily_trend, 1):
            ws.cell(row=trend_row + offset, column=1, value=f"{point.label} {point.day.isoformat()}")
            cell = ws.cell(row=trend_row + offset, column=2, value=float(point.total))
            cell.number_format = self.currency_format

        ws.column_dimensions['A'].width = 22
        ws.column_dimensions['B'].width = 22
