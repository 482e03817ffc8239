"""Filesystem-safe file names for saved budgets."""

import re
import unicodedata
from datetime import timezone

from .models import BudgetSummary

TIME_FORMAT = "%Y%m%dT%H%M%SZ"

_SEPARATORS = str.maketrans({" ": "_", "/": "_"})
_UNSAFE = re.compile(r"[^A-Za-z0-9_.+()\-]")


def sanitize_filename(name: str) -> str:
    """Make a budget name safe for use in a file name.

    Spaces and slashes become underscores, accented letters lose their
    accents, and anything else outside ``[A-Za-z0-9_.+()-]`` is dropped.
    Letters from non-Latin scripts are dropped too, so ``"Бюджет 2025"``
    becomes ``"_2025"``; the budget ID in the file name keeps it unique.

    Args:
        name: Budget display name

    Returns:
        Sanitized name (possibly empty)
    """
    # NFKD splits "é" into "e" + combining accent, which the filter then drops
    decomposed = unicodedata.normalize("NFKD", name)
    return _UNSAFE.sub("", decomposed.translate(_SEPARATORS))


def build_filename(budget: BudgetSummary) -> str:
    """Build ``<name>_<id>_<YYYYMMDDThhmmssZ>.json`` for a budget."""
    safe = sanitize_filename(budget.name)
    ts = budget.last_modified_on.astimezone(timezone.utc).strftime(TIME_FORMAT)
    return f"{safe}_{budget.id}_{ts}.json"
