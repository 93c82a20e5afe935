# family_budget/domains/transactions/models.py

import datetime
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_core import PydanticCustomError

from family_budget.shared.clock import local_today
from family_budget.shared.money import MAX_SAFE_INTEGER

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _amount_too_large():
    return PydanticCustomError(
        "amount_too_large",
        "Amount must be {limit} yen or less",
        {"limit": f"{MAX_SAFE_INTEGER:,}"},
    )


def _round_amount(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("amount_type", "Enter a valid number")
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        raise PydanticCustomError("amount_type", "Enter a valid number")
    if value > MAX_SAFE_INTEGER:
        raise _amount_too_large()
    if value <= 0:
        raise PydanticCustomError("amount_positive", "Amount must be a positive number")
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _check_amount_range(value: int) -> int:
    if value <= 0:
        raise PydanticCustomError("amount_positive", "Amount must be a positive number")
    if value > MAX_SAFE_INTEGER:
        raise _amount_too_large()
    return value


def _check_date(value):
    if not isinstance(value, str):
        raise PydanticCustomError("date_type", "Select a date")
    if not DATE_PATTERN.fullmatch(value):
        raise PydanticCustomError("date_format", "Date must be in YYYY-MM-DD format")
    try:
        parsed = datetime.date.fromisoformat(value)
    except ValueError:
        raise PydanticCustomError("date_invalid", "Enter a valid date")
    if parsed.isoformat() != value:
        raise PydanticCustomError("date_invalid", "Enter a valid date")
    return value


Amount = Annotated[int, BeforeValidator(_round_amount), AfterValidator(_check_amount_range)]
DateString = Annotated[str, BeforeValidator(_check_date)]


class AmountInput(BaseModel):
    amount: Amount


class DatePickerInput(BaseModel):
    date: DateString


class TransactionForm(BaseModel):
    """Shared input for the expense and income forms."""

    model_config = ConfigDict(populate_by_name=True)

    amount: Amount
    date: DateString
    use_custom_date: bool = Field(alias="useCustomDate", strict=True)

    def effective_date(self, today: Optional[datetime.date] = None) -> str:
        """The picked date, or today in the ledger timezone when no custom date is used."""
        if self.use_custom_date:
            return self.date
        return (today or local_today()).isoformat()


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    amount: int
    timestamp: str
