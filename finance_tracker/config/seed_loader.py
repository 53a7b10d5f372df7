"""Load first-run seed records."""
import logging
from pathlib import Path
from typing import List, Dict
import yaml

from .settings import SEED_FILE

logger = logging.getLogger(__name__)


def load_seed_records(seed_file: Path = SEED_FILE) -> List[Dict]:
    """
    Load example records shown when no data has been saved yet.

    The YAML file holds a top-level ``transactions`` list whose items use
    the same shape as an exported JSON document.

    Args:
        seed_file: Path to seed YAML file

    Returns:
        List of raw record dictionaries (empty if the file is missing)
    """
    if not seed_file.exists():
        logger.warning(f"Seed file not found: {seed_file}")
        return []

    with open(seed_file, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    records = data.get('transactions', [])
    if not isinstance(records, list):
        logger.error(f"Seed file {seed_file} has no transactions list")
        return []

    logger.debug(f"Loaded {len(records)} seed records from {seed_file}")
    return [dict(record) for record in records if isinstance(record, dict)]
