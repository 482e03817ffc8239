"""Download every budget and save it to disk."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .exceptions import BudgetSaveError, YNABError
from .models import BudgetSummary
from .naming import build_filename
from .ynab_client import YNABClient

FILE_MODE = 0o644
DIR_MODE = 0o755


@dataclass(frozen=True)
class VaultConfig:
    """Settings shared by every step of a run."""

    client: YNABClient
    output_dir: Path
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))


def write_file(path: Union[str, Path], data: bytes) -> None:
    """Create or truncate ``path`` and write ``data`` with mode 0644."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as f:
        f.write(data)


async def download_and_save(config: VaultConfig, budget: BudgetSummary) -> Path:
    """Fetch one budget's JSON and write it under the output directory.

    Args:
        config: Run settings
        budget: Budget to download

    Returns:
        Path of the written file

    Raises:
        BudgetSaveError: With stage "download" or "write"
    """
    try:
        data = await config.client.get_budget(budget.id)
    except YNABError as e:
        raise BudgetSaveError(BudgetSaveError.DOWNLOAD, budget.id, e) from e

    path = Path(config.output_dir) / build_filename(budget)
    try:
        write_file(path, data)
    except OSError as e:
        raise BudgetSaveError(BudgetSaveError.WRITE, budget.id, e) from e
    return path


async def run(config: VaultConfig) -> int:
    """Save every budget and return how many were attempted.

    Creating the output directory and listing budgets are fatal on failure.
    A failure on a single budget is logged as a warning and the run moves on.

    Returns:
        Number of budgets attempted, successful or not
    """
    log = config.logger
    output_dir = Path(config.output_dir)

    log.info("Creating output directory %s", output_dir)
    output_dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)

    log.info("Fetching budgets list from %s", config.client.base_url)
    budgets = await config.client.get_budgets()

    count = 0
    failed = 0
    for budget in budgets:
        log.info("Processing budget %s (%s)", budget.name, budget.id)
        try:
            path = await download_and_save(config, budget)
        except BudgetSaveError as e:
            failed += 1
            log.warning("Warning: %s", e)
        else:
            log.info("Saved to %s", path)
        count += 1

    log.info("Attempted %d budgets: %d saved, %d failed", count, count - failed, failed)
    return count
