"""Configuration management."""
from .settings import *
from .seed_loader import load_seed_records

__all__ = ['load_seed_records']
