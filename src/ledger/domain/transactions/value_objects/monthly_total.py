"""Monthly income/expense aggregate."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


class MonthlyTotal(BaseModel):
    """Income and expense for one calendar month.

    ``month`` is always the first day of the month. ``expense`` is stored as
    a positive number (absolute value of the negative amounts).
    """

    month: date
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")

    model_config = ConfigDict(frozen=True)

    @field_validator("month")
    @classmethod
    def validate_month(cls, v: date) -> date:
        if v.day != 1:
            msg = f"month must be the first day of a month, got {v.isoformat()}"
            raise ValueError(msg)
        return v
