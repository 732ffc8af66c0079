"""
Unit tests for ReserveSlotUseCase

Test Coverage:
1. Successful claim: booking created, slot marked unavailable, committed, published
2. Slot already taken / missing: SlotUnavailableError, nothing written or published
3. Validation: blank customer fields rejected before the store is touched
4. Store failures and timeouts: StoreUnavailableError, unit rolled back
"""

from datetime import date, time
from unittest.mock import AsyncMock

import anyio
import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.platform.exception.exceptions import DomainError
from src.service.slot_booking.app.command.reserve_slot_use_case import ReserveSlotUseCase
from src.service.slot_booking.domain.booking_errors import (
    SlotUnavailableError,
    StoreUnavailableError,
)
from src.service.slot_booking.domain.entity.booking_entity import Booking
from src.service.slot_booking.domain.entity.slot_entity import SlotEntity
from src.service.slot_booking.domain.enum.booking_event_type import BookingEventType
from src.service.slot_booking.domain.enum.booking_status import BookingStatus
from test.service.slot_booking.unit.fake_unit_of_work import FakeUnitOfWork
from test.shared.utils import make_booking_view


pytestmark = pytest.mark.unit


SLOT_ID = 10


def _slot(*, available: bool = True) -> SlotEntity:
    return SlotEntity(
        id=SLOT_ID, service_id=1, slot_date=date(2024, 6, 1), slot_time=time(10, 0), available=available
    )


class TestReserveSlot:
    def setup_method(self):
        self.calls: list[str] = []
        self.uow = FakeUnitOfWork(calls=self.calls)
        self.uow.slot_command_repo.get_by_id_for_update.return_value = _slot()
        self.uow.booking_command_repo.create.side_effect = lambda *, booking: Booking(
            id=1,
            slot_id=booking.slot_id,
            customer_name=booking.customer_name,
            customer_email=booking.customer_email,
        )
        self.view = make_booking_view(id=1, slot_id=SLOT_ID)
        self.uow.booking_query_repo.get_view.return_value = self.view

        self.broadcaster = AsyncMock()
        self.broadcaster.publish.side_effect = lambda **kwargs: self.calls.append('publish')

        self.use_case = ReserveSlotUseCase(
            uow_factory=lambda: self.uow,
            broadcaster=self.broadcaster,
            timeout_seconds=1.0,
        )

    async def test_claim_commits_and_publishes_booking_created(self):
        # When
        view = await self.use_case.execute(
            slot_id=SLOT_ID, customer_name='Alice', customer_email='a@x.com'
        )

        # Then: the returned view is the joined record
        assert view == self.view
        assert self.uow.committed is True

        # And: the booking was created confirmed for the requested slot
        created: Booking = self.uow.booking_command_repo.create.call_args.kwargs['booking']
        assert created.slot_id == SLOT_ID
        assert created.status == BookingStatus.CONFIRMED

        # And: the slot was marked unavailable
        claimed: SlotEntity = self.uow.slot_command_repo.update_availability.call_args.kwargs[
            'slot'
        ]
        assert claimed.available is False

        # And: exactly one booking_created publish carrying the same booking
        self.broadcaster.publish.assert_awaited_once_with(
            event_type=BookingEventType.BOOKING_CREATED, booking=self.view
        )

    async def test_publish_happens_after_commit(self):
        await self.use_case.execute(slot_id=SLOT_ID, customer_name='Alice', customer_email='a@x.com')

        assert self.calls.index('commit') < self.calls.index('publish')

    async def test_publish_happens_before_the_unit_is_released(self):
        await self.use_case.execute(slot_id=SLOT_ID, customer_name='Alice', customer_email='a@x.com')

        # commit, then publish, then the exit rollback (a no-op after commit)
        assert self.calls == ['commit', 'publish', 'rollback']

    async def test_unavailable_slot_raises_and_writes_nothing(self):
        self.uow.slot_command_repo.get_by_id_for_update.return_value = _slot(available=False)

        with pytest.raises(SlotUnavailableError):
            await self.use_case.execute(
                slot_id=SLOT_ID, customer_name='Bob', customer_email='b@x.com'
            )

        assert self.uow.committed is False
        assert 'rollback' in self.calls
        self.uow.booking_command_repo.create.assert_not_awaited()
        self.uow.slot_command_repo.update_availability.assert_not_awaited()
        self.broadcaster.publish.assert_not_awaited()

    async def test_missing_slot_is_reported_as_unavailable(self):
        self.uow.slot_command_repo.get_by_id_for_update.return_value = None

        with pytest.raises(SlotUnavailableError):
            await self.use_case.execute(slot_id=999, customer_name='Bob', customer_email='b@x.com')

        self.uow.booking_command_repo.create.assert_not_awaited()
        self.broadcaster.publish.assert_not_awaited()

    @pytest.mark.parametrize(
        'customer_name,customer_email',
        [('', 'a@x.com'), ('   ', 'a@x.com'), ('Alice', ''), ('Alice', '  ')],
    )
    async def test_blank_customer_fields_are_rejected_before_store(
        self, customer_name, customer_email
    ):
        factory_calls = []
        use_case = ReserveSlotUseCase(
            uow_factory=lambda: factory_calls.append(1) or self.uow,
            broadcaster=self.broadcaster,
            timeout_seconds=1.0,
        )

        with pytest.raises(DomainError):
            await use_case.execute(
                slot_id=SLOT_ID, customer_name=customer_name, customer_email=customer_email
            )

        assert factory_calls == []
        self.broadcaster.publish.assert_not_awaited()

    async def test_optional_fields_are_normalized(self):
        await self.use_case.execute(
            slot_id=SLOT_ID,
            customer_name='  Alice ',
            customer_email=' a@x.com ',
            customer_phone='  ',
            notes='window seat',
        )

        created: Booking = self.uow.booking_command_repo.create.call_args.kwargs['booking']
        assert created.customer_name == 'Alice'
        assert created.customer_email == 'a@x.com'
        assert created.customer_phone is None
        assert created.notes == 'window seat'

    async def test_unique_violation_maps_to_slot_unavailable(self):
        self.uow.booking_command_repo.create.side_effect = IntegrityError(
            'INSERT INTO booking', {}, Exception('uq_booking_confirmed_slot')
        )

        with pytest.raises(SlotUnavailableError):
            await self.use_case.execute(
                slot_id=SLOT_ID, customer_name='Bob', customer_email='b@x.com'
            )

        assert self.uow.committed is False
        self.broadcaster.publish.assert_not_awaited()

    async def test_store_failure_maps_to_store_unavailable(self):
        self.uow.slot_command_repo.get_by_id_for_update.side_effect = OperationalError(
            'SELECT', {}, Exception('connection refused')
        )

        with pytest.raises(StoreUnavailableError):
            await self.use_case.execute(
                slot_id=SLOT_ID, customer_name='Alice', customer_email='a@x.com'
            )

        assert self.uow.committed is False
        assert self.uow.closed is True
        self.broadcaster.publish.assert_not_awaited()

    async def test_commit_failure_maps_to_store_unavailable(self):
        async def failing_commit() -> None:
            raise OperationalError('COMMIT', {}, Exception('disk I/O error'))

        self.uow._commit = failing_commit

        with pytest.raises(StoreUnavailableError):
            await self.use_case.execute(
                slot_id=SLOT_ID, customer_name='Alice', customer_email='a@x.com'
            )

        assert 'rollback' in self.calls
        self.broadcaster.publish.assert_not_awaited()

    async def test_slow_store_times_out_and_rolls_back(self):
        async def slow_lock(**kwargs):
            await anyio.sleep(5)

        self.uow.slot_command_repo.get_by_id_for_update.side_effect = slow_lock
        use_case = ReserveSlotUseCase(
            uow_factory=lambda: self.uow, broadcaster=self.broadcaster, timeout_seconds=0.05
        )

        with anyio.fail_after(2):
            with pytest.raises(StoreUnavailableError):
                await use_case.execute(
                    slot_id=SLOT_ID, customer_name='Alice', customer_email='a@x.com'
                )

        assert 'rollback' in self.calls
        assert self.uow.closed is True
        self.broadcaster.publish.assert_not_awaited()
