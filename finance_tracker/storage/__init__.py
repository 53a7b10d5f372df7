"""Persistence and import/export."""
from .json_store import JsonStore
from .transfer import export_json, import_json

__all__ = ['JsonStore', 'export_json', 'import_json']
