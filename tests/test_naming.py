"""Tests for file naming."""

import re
from datetime import datetime, timedelta, timezone

import pytest

from ynab_vault.models import BudgetSummary
from ynab_vault.naming import build_filename, sanitize_filename

SAFE = re.compile(r"^[A-Za-z0-9_.+()\-]*$")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("My Budget/Name", "My_Budget_Name"),
        ("Budget:Special*Chars?", "BudgetSpecialChars"),
        ("  Leading and Trailing  ", "__Leading_and_Trailing__"),
        ("Complex-Name_123+()", "Complex-Name_123+()"),
        ("Café Crème", "Cafe_Creme"),
        ("../etc/passwd", ".._etc_passwd"),
        ("", ""),
    ],
)
def test_sanitize_filename(name, expected):
    """Test name cleaning matches expectations."""
    assert sanitize_filename(name) == expected


@pytest.mark.parametrize(
    "name",
    [
        "Бюджет 2025",
        "家計簿",
        "emoji 💸 budget",
        "tab\tnew\nline\x00null",
        "ﬁnance ①②",
        "back\\slash|pipe<>\"quote'",
    ],
)
def test_sanitize_filename_is_safe_and_idempotent(name):
    """Test output only has safe characters and sanitizing twice changes nothing."""
    once = sanitize_filename(name)
    assert SAFE.match(once)
    assert sanitize_filename(once) == once


def test_build_filename():
    """Test timestamp formatting and filename structure."""
    budget = BudgetSummary(
        id="abc123",
        name="My Budget",
        last_modified_on=datetime(2025, 5, 14, 15, 30, 45, tzinfo=timezone.utc),
    )

    assert build_filename(budget) == "My_Budget_abc123_20250514T153045Z.json"


def test_build_filename_converts_to_utc():
    """Test non-UTC timestamps are rendered in UTC."""
    budget = BudgetSummary(
        id="abc123",
        name="My Budget",
        last_modified_on=datetime(
            2025, 5, 14, 17, 30, 45, 999000, tzinfo=timezone(timedelta(hours=2))
        ),
    )

    assert build_filename(budget) == "My_Budget_abc123_20250514T153045Z.json"


def test_sanitize_filename_drops_non_latin_letters():
    """Test letters outside the Latin script are removed, digits kept."""
    assert sanitize_filename("Бюджет 2025") == "_2025"
    assert sanitize_filename("家計簿") == ""
