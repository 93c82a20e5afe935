from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from family_budget.domains.transactions.models import TransactionForm

FORM_ERROR_KEY = "form"


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    data: Optional[BaseModel] = None
    errors: Dict[str, str] = field(default_factory=dict)


def collect_errors(exc: ValidationError) -> Dict[str, str]:
    """Map each failing field to its first message."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        key = str(loc[0]) if loc else FORM_ERROR_KEY
        errors.setdefault(key, error["msg"])
    return errors


def validate_form(schema: Type[BaseModel], data: Any) -> ValidationResult:
    try:
        return ValidationResult(ok=True, data=schema.model_validate(data))
    except ValidationError as e:
        return ValidationResult(ok=False, errors=collect_errors(e))


def validate_transaction_form(data: Any) -> ValidationResult:
    """
    Validate ``{amount, date, useCustomDate}`` for the expense and income forms.

    Returns a successful result holding a TransactionForm, or a failed one with
    ``errors`` keyed by field name. Nothing is partially accepted.
    """
    return validate_form(TransactionForm, data)
