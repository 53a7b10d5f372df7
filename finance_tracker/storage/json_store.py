"""
Local JSON file persistence.

Records and the budget live in two small JSON files. Every save writes the
whole list (last write wins); there is no locking or merging.
"""
import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional

from ..config import load_seed_records
from ..config.settings import STORAGE_FILE, BUDGET_FILE, SEED_FILE
from ..errors import StorageError
from ..models import Transaction

logger = logging.getLogger(__name__)


class JsonStore:
    """Load and save transactions and the budget scalar."""

    def __init__(
        self,
        path: Path = STORAGE_FILE,
        budget_path: Path = BUDGET_FILE,
        seed_file: Optional[Path] = SEED_FILE
    ):
        """
        Initialize store.

        Args:
            path: JSON file holding the record list
            budget_path: JSON file holding the budget
            seed_file: YAML seed records used when ``path`` does not exist
                (None disables seeding)
        """
        self.path = Path(path)
        self.budget_path = Path(budget_path)
        self.seed_file = seed_file

    def load(self) -> List[Transaction]:
        """
        Load all transactions.

        Returns seed records when nothing has been saved yet, and an empty
        list when the file cannot be read.
        """
        if not self.path.exists():
            if self.seed_file is None:
                return []
            logger.info(f"No saved data at {self.path}, using seed records")
            return [Transaction.from_dict(r) for r in load_seed_records(self.seed_file)]

        try:
            data = json.loads(self.path.read_text(encoding='utf-8'), parse_float=Decimal)
            if not isinstance(data, list):
                raise ValueError("root is not an array")
            return [Transaction.from_dict(item) for item in data]
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Error loading data from {self.path}: {e}")
            return []

    def save(self, transactions: List[Transaction]) -> None:
        """
        Save the complete transaction list.

        Raises:
            StorageError: If the file cannot be written
        """
        payload = json.dumps([t.to_dict() for t in transactions], indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding='utf-8')
        except OSError as e:
            logger.error(f"Error saving data to {self.path}: {e}")
            raise StorageError(f"Could not save transactions: {e}") from e

        logger.debug(f"Saved {len(transactions)} transactions to {self.path}")

    def get_budget(self) -> Decimal:
        """Get the saved budget, 0 when unset or unreadable."""
        if not self.budget_path.exists():
            return Decimal("0")

        try:
            data = json.loads(self.budget_path.read_text(encoding='utf-8'))
            budget = Decimal(str(data.get('budget', 0)))
        except (OSError, ValueError, AttributeError, InvalidOperation) as e:
            logger.error(f"Error loading budget from {self.budget_path}: {e}")
            return Decimal("0")

        if not budget.is_finite() or budget < 0:
            logger.warning(f"Ignoring invalid stored budget: {budget}")
            return Decimal("0")
        return budget

    def set_budget(self, budget: Decimal) -> None:
        """
        Replace the saved budget.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            self.budget_path.parent.mkdir(parents=True, exist_ok=True)
            self.budget_path.write_text(json.dumps({'budget': str(budget)}), encoding='utf-8')
        except OSError as e:
            logger.error(f"Error saving budget to {self.budget_path}: {e}")
            raise StorageError(f"Could not save budget: {e}") from e
