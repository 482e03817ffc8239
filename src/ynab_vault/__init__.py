"""YNAB Vault - save every YNAB budget to disk as JSON."""

from __future__ import annotations

from .ynab_client import YNABClient
from .cli import main
from .models import BudgetSummary, decode_budgets
from .naming import build_filename, sanitize_filename
from .vault import VaultConfig, download_and_save, run
from .exceptions import (
    YNABError,
    YNABAPIError,
    YNABValidationError,
    YNABConnectionError,
    YNABDecodeError,
    YNABMultipleErrors,
    BudgetSaveError,
)

__version__ = "0.1.0"
__all__ = [
    "YNABClient",
    "main",
    "BudgetSummary",
    "decode_budgets",
    "build_filename",
    "sanitize_filename",
    "VaultConfig",
    "download_and_save",
    "run",
    "YNABError",
    "YNABAPIError",
    "YNABValidationError",
    "YNABConnectionError",
    "YNABDecodeError",
    "YNABMultipleErrors",
    "BudgetSaveError",
]
