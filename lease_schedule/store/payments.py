"""In-memory payment store with tenant and property indexes."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable

from lease_schedule.exceptions import EntityNotFoundError, InvalidPaymentStateError
from lease_schedule.models import GeneratedPayment, PaymentRecord, PaymentStatus, PaymentType


@dataclass
class PaymentStore:
    """In-memory persistence for generated payments.

    The store assigns identities to generated payments and keeps them
    retrievable by tenant and property.
    """

    payments: dict[str, PaymentRecord] = field(default_factory=dict)

    # Relationship indexes
    _tenant_payments: dict[str, list[str]] = field(default_factory=dict)
    _property_payments: dict[str, list[str]] = field(default_factory=dict)
    _obligation_keys: set[tuple[str, str, PaymentType, date]] = field(default_factory=set)

    def save_batch(
        self,
        payments: Iterable[GeneratedPayment],
        created_by: str | None = None,
    ) -> list[str]:
        """Store payments and return their new IDs in input order."""
        created_at = datetime.now()
        payment_ids = []
        for payment in payments:
            payment_id = uuid.uuid4().hex
            record = PaymentRecord.from_generated(
                payment,
                payment_id=payment_id,
                created_by=created_by,
                created_at=created_at,
            )
            self._add(record)
            payment_ids.append(payment_id)
        return payment_ids

    def _add(self, record: PaymentRecord) -> None:
        self.payments[record.payment_id] = record
        self._tenant_payments.setdefault(record.tenant_id, []).append(record.payment_id)
        self._property_payments.setdefault(record.property_id, []).append(record.payment_id)
        self._obligation_keys.add(_obligation_key(record))

    def get(self, payment_id: str) -> PaymentRecord:
        """Get a payment by ID."""
        try:
            return self.payments[payment_id]
        except KeyError:
            raise EntityNotFoundError(f"Payment {payment_id} not found") from None

    def for_tenant(self, tenant_id: str) -> list[PaymentRecord]:
        """Get all payments for a tenant."""
        return [self.payments[pid] for pid in self._tenant_payments.get(tenant_id, [])]

    def for_property(self, property_id: str) -> list[PaymentRecord]:
        """Get all payments for a property."""
        return [self.payments[pid] for pid in self._property_payments.get(property_id, [])]

    def exists(self, payment: GeneratedPayment | PaymentRecord) -> bool:
        """Check whether the same obligation is already stored."""
        return _obligation_key(payment) in self._obligation_keys

    def update_status(self, payment_id: str, status: PaymentStatus) -> PaymentRecord:
        """Move a payment to a new lifecycle status.

        Raises
        ------
        EntityNotFoundError
            If the payment does not exist.
        InvalidPaymentStateError
            If a settled or cancelled payment would return to pending.
        """
        record = self.get(payment_id)
        if status == PaymentStatus.PENDING and record.payment_status != PaymentStatus.PENDING:
            raise InvalidPaymentStateError(
                f"Payment {payment_id} is {record.payment_status.value} and cannot return to pending"
            )
        record.payment_status = status
        return record

    @property
    def records(self) -> list[PaymentRecord]:
        """All stored payments in insertion order."""
        return list(self.payments.values())

    def __len__(self) -> int:
        return len(self.payments)


def _obligation_key(
    payment: GeneratedPayment | PaymentRecord,
) -> tuple[str, str, PaymentType, date]:
    return (payment.tenant_id, payment.property_id, payment.payment_type, payment.due_date)
