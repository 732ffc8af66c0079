"""
Reservation error kinds

Each failure of the reservation coordinator is its own type so callers
(HTTP handlers, tests) can tell them apart without parsing messages.
"""

from src.platform.exception.exceptions import (
    ConflictError,
    NotFoundError,
    ServiceUnavailableError,
)


class SlotUnavailableError(ConflictError):
    def __init__(self, message: str = 'Time slot is no longer available') -> None:
        super().__init__(message)


class BookingNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Booking not found') -> None:
        super().__init__(message)


class AlreadyCancelledError(ConflictError):
    def __init__(self, message: str = 'Booking is already cancelled') -> None:
        super().__init__(message)


class StoreUnavailableError(ServiceUnavailableError):
    def __init__(self, message: str = 'Booking store is unavailable, please retry') -> None:
        super().__init__(message)
