from collections.abc import AsyncGenerator

import pytest

from src.platform.config.di import container
from src.platform.event.in_memory_broadcaster import InMemoryEventBroadcasterImpl
from src.service.slot_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.slot_booking.app.command.reserve_slot_use_case import ReserveSlotUseCase
from src.service.slot_booking.driven_adapter.broadcaster.booking_event_broadcaster_impl import (
    BookingEventBroadcasterImpl,
)
from test.shared.utils import SeededService, seed_service


@pytest.fixture
def in_memory_broadcaster() -> InMemoryEventBroadcasterImpl:
    return InMemoryEventBroadcasterImpl()


@pytest.fixture
def booking_event_broadcaster(in_memory_broadcaster) -> BookingEventBroadcasterImpl:
    return BookingEventBroadcasterImpl(broadcaster=in_memory_broadcaster)


@pytest.fixture
def reserve_use_case(booking_event_broadcaster) -> ReserveSlotUseCase:
    return ReserveSlotUseCase(
        uow_factory=container.unit_of_work,
        broadcaster=booking_event_broadcaster,
        timeout_seconds=10.0,
    )


@pytest.fixture
def cancel_use_case(booking_event_broadcaster) -> CancelBookingUseCase:
    return CancelBookingUseCase(
        uow_factory=container.unit_of_work,
        broadcaster=booking_event_broadcaster,
        timeout_seconds=10.0,
    )


@pytest.fixture
async def haircut(clean_database) -> AsyncGenerator[SeededService, None]:
    yield await seed_service(name='Haircut', price=30, duration_minutes=30)
