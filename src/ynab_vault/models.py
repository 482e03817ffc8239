"""Budget list models and envelope decoding."""

from typing import List

from pydantic import AwareDatetime, BaseModel, ConfigDict, StrictStr, ValidationError

from .exceptions import YNABDecodeError


class BudgetSummary(BaseModel):
    """A budget as it appears in the list endpoint."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    name: StrictStr
    last_modified_on: AwareDatetime


class _BudgetList(BaseModel):
    budgets: List[BudgetSummary]


class BudgetListResponse(BaseModel):
    """Envelope returned by ``GET /budgets``: ``{"data": {"budgets": [...]}}``."""

    data: _BudgetList


def decode_budgets(data: bytes) -> List[BudgetSummary]:
    """Decode a budgets list response body.

    Args:
        data: Raw JSON body from the list endpoint

    Returns:
        Budget summaries in the order the server returned them

    Raises:
        YNABDecodeError: If the body is not valid JSON or has the wrong shape
    """
    try:
        envelope = BudgetListResponse.model_validate_json(data)
    except ValidationError as e:
        raise YNABDecodeError(f"decode budgets: {e}") from e
    return envelope.data.budgets
