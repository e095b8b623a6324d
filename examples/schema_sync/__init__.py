"""
Schema synchronization sample for a GBase customer dimension.
"""

from .columns import EXISTING_COLUMNS, NEW_COLUMNS, WIDENED_COLUMNS
from .demo import build_sync_script, run_demo

__all__ = [
    "EXISTING_COLUMNS",
    "NEW_COLUMNS",
    "WIDENED_COLUMNS",
    "build_sync_script",
    "run_demo",
]
