"""Exceptions raised by the YNAB vault."""

from typing import List, Optional


class YNABError(Exception):
    """Base class for all YNAB vault errors."""


class YNABValidationError(YNABError):
    """Raised when required configuration (such as the access token) is missing."""


class YNABConnectionError(YNABError):
    """Raised when the API cannot be reached or the response stream fails."""


class YNABAPIError(YNABError):
    """Raised when the API answers with a non-200 status."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"bad status: {status_code}")


class YNABDecodeError(YNABError):
    """Raised when a response body does not match the expected JSON shape."""


class YNABMultipleErrors(YNABError):
    """Several failures from one request, e.g. a read error plus a close error."""

    def __init__(self, errors: List[BaseException]):
        self.errors = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))


class BudgetSaveError(YNABError):
    """Raised when a single budget could not be downloaded or written.

    Attributes:
        stage: ``"download"`` or ``"write"``
        budget_id: ID of the budget being processed
    """

    DOWNLOAD = "download"
    WRITE = "write"

    def __init__(self, stage: str, budget_id: str, cause: BaseException):
        self.stage = stage
        self.budget_id = budget_id
        label = "download budget" if stage == self.DOWNLOAD else "write file"
        super().__init__(f"{label} {budget_id}: {cause}")
