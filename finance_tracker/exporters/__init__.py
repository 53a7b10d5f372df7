"""Export formats."""
from .excel_exporter import ExcelExporter

__all__ = ['ExcelExporter']
