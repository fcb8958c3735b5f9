"""In-memory stores for generated payments."""

from lease_schedule.store.payments import PaymentStore

__all__ = ["PaymentStore"]
