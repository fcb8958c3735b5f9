"""Lease models for payment schedule generation."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

DEFAULT_PAYMENT_DUE_DAY = 5


def to_amount(value: Any) -> Any:
    """Convert a numeric amount to ``Decimal``.

    Values that do not convert (``None``, booleans, non-numeric strings) are
    returned unchanged so that validation can report them.
    """
    if value is None or isinstance(value, (bool, Decimal)):
        return value
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        return value


@dataclass(frozen=True)
class LeaseDetails:
    """Lease terms a payment schedule is generated from.

    Dates may be given as ``date`` objects or ISO ``YYYY-MM-DD`` strings.
    Amounts may be given as any number or numeric string and are stored as
    ``Decimal``. Every field is optional at construction so that incomplete
    leases can reach validation and be reported rather than rejected up front.
    """

    tenant_id: str | None
    property_id: str | None
    monthly_rent: Decimal | None
    lease_start: date | str | None
    lease_end: date | str | None
    payment_due_day: int | None = None  # Day of month (1-31)
    include_utilities: bool = False
    utility_amount: Decimal | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "monthly_rent", to_amount(self.monthly_rent))
        object.__setattr__(self, "utility_amount", to_amount(self.utility_amount))

    @property
    def resolved_due_day(self) -> int:
        """Payment due day with the default applied."""
        return self.payment_due_day or DEFAULT_PAYMENT_DUE_DAY


@dataclass
class ValidationResult:
    """Outcome of lease validation."""

    valid: bool
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class LeaseTotals:
    """Totals derived from a generated payment schedule."""

    total_months: int
    total_rent: Decimal
    total_utilities: Decimal
    grand_total: Decimal
    payments_count: int
