"""Custom exception hierarchy for lease-schedule."""


class LeaseScheduleError(Exception):
    """Base exception for all lease-schedule errors."""


class EntityNotFoundError(LeaseScheduleError):
    """Raised when a referenced entity does not exist."""


class InvalidLeaseError(LeaseScheduleError):
    """Raised when a lease fails validation before payment generation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid lease")


class InvalidPaymentStateError(LeaseScheduleError):
    """Raised when a payment is in an invalid state for the operation."""


class ConfigurationError(LeaseScheduleError):
    """Raised when configuration is invalid or missing."""


class SinkError(LeaseScheduleError):
    """Raised when a sink operation fails."""
