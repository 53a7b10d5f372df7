"""Global settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Directories
DATA_DIR = Path(os.getenv("FINANCE_DATA_DIR", str(PROJECT_ROOT / "data")))
LOGS_DIR = PROJECT_ROOT / "logs"

# Storage
STORAGE_FILE = Path(os.getenv("FINANCE_STORAGE_FILE", str(DATA_DIR / "finance_tracker_data.json")))
BUDGET_FILE = Path(os.getenv("FINANCE_BUDGET_FILE", str(DATA_DIR / "finance_tracker_budget.json")))
SEED_FILE = Path(__file__).parent.parent / "data" / "seed_transactions.yaml"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = LOGS_DIR / "finance_tracker.log"

# Currency settings
DEFAULT_CURRENCY = os.getenv("FINANCE_CURRENCY", "USD")
CURRENCY_SYMBOLS = {
    "USD": "$",
    "GBP": "£",
    "EUR": "€",
    "INR": "₹",
    "JPY": "¥",
}

# Dashboard
TREND_DAYS = 7
NO_CATEGORY = "-"
