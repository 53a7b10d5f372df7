"""Identifier generation for new records."""
import random
import time


def generate_id(prefix: str = "txn") -> str:
    """Generate an id such as ``txn_1727382000000_412``."""
    return f"{prefix}_{int(time.time() * 1000)}_{random.randint(0, 999)}"
