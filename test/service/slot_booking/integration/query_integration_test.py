"""
Integration tests for the read side: statistics, catalog and booking views
"""

from datetime import date, time, timedelta

import pytest

from src.platform.config.di import container
from src.service.slot_booking.app.query.get_booking_statistics_use_case import (
    GetBookingStatisticsUseCase,
)
from src.service.slot_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.slot_booking.app.query.list_slots_use_case import ListSlotsUseCase
from src.service.slot_booking.domain.booking_errors import BookingNotFoundError
from test.shared.utils import seed_service


pytestmark = pytest.mark.integration


TODAY = date(2030, 1, 15)


@pytest.fixture
async def catalog(clean_database):
    yesterday = TODAY - timedelta(days=1)
    tomorrow = TODAY + timedelta(days=1)
    haircut = await seed_service(
        name='Haircut',
        price=30,
        slots=[
            (yesterday, time(10, 0), True),  # past, never counted as available
            (TODAY, time(10, 0), True),
            (TODAY, time(11, 0), True),
            (tomorrow, time(9, 0), True),
        ],
    )
    massage = await seed_service(
        name='Massage',
        price=80,
        duration_minutes=60,
        slots=[(tomorrow, time(14, 0), True), (tomorrow, time(15, 0), False)],
    )
    return haircut, massage


@pytest.fixture
def statistics_use_case() -> GetBookingStatisticsUseCase:
    return GetBookingStatisticsUseCase(
        statistics_query_repo=container.statistics_query_repo(), today=lambda: TODAY
    )


class TestStatistics:
    async def test_empty_ledger(self, catalog, statistics_use_case):
        stats = await statistics_use_case.execute()

        assert stats.total_bookings == 0
        assert stats.confirmed_bookings + stats.cancelled_bookings + stats.completed_bookings == 0
        # Present and future open slots only
        assert stats.available_slots == 4
        assert [(s.name, s.booking_count, s.total_revenue) for s in stats.by_service] == [
            ('Haircut', 0, 0),
            ('Massage', 0, 0),
        ]

    async def test_counts_and_revenue_follow_the_ledger(
        self, catalog, statistics_use_case, reserve_use_case, cancel_use_case
    ):
        haircut, massage = catalog

        first = await reserve_use_case.execute(
            slot_id=haircut.slot_ids[1], customer_name='Alice', customer_email='a@x.com'
        )
        await reserve_use_case.execute(
            slot_id=haircut.slot_ids[2], customer_name='Bob', customer_email='b@x.com'
        )
        await reserve_use_case.execute(
            slot_id=massage.slot_ids[0], customer_name='Carol', customer_email='c@x.com'
        )
        await cancel_use_case.execute(booking_id=first.id)

        stats = await statistics_use_case.execute()

        assert stats.confirmed_bookings == 2
        assert stats.cancelled_bookings == 1
        assert stats.completed_bookings == 0
        assert (
            stats.confirmed_bookings + stats.cancelled_bookings + stats.completed_bookings
            == stats.total_bookings
        )
        # 4 open - 3 reserved + 1 reopened
        assert stats.available_slots == 2

        by_name = {s.name: s for s in stats.by_service}
        assert by_name['Haircut'].booking_count == 1
        assert by_name['Haircut'].total_revenue == 30
        assert by_name['Massage'].booking_count == 1
        assert by_name['Massage'].total_revenue == 80


class TestCatalogQueries:
    async def test_available_slots_are_present_or_future_and_open(self, catalog):
        haircut, massage = catalog
        use_case = ListSlotsUseCase(
            catalog_query_repo=container.catalog_query_repo(), today=lambda: TODAY
        )

        slots = await use_case.list_available_slots()

        assert [slot.id for slot in slots] == [
            haircut.slot_ids[1],
            haircut.slot_ids[2],
            haircut.slot_ids[3],
            massage.slot_ids[0],
        ]
        assert all(slot.available for slot in slots)

    async def test_service_slots_show_who_holds_them(self, catalog, reserve_use_case):
        haircut, _ = catalog
        await reserve_use_case.execute(
            slot_id=haircut.slot_ids[1], customer_name='Alice', customer_email='a@x.com'
        )
        use_case = ListSlotsUseCase(catalog_query_repo=container.catalog_query_repo())

        slots = await use_case.list_service_slots(service_id=haircut.service_id)

        assert len(slots) == 4
        held = {slot.id: slot for slot in slots}[haircut.slot_ids[1]]
        assert held.available is False
        assert held.customer_name == 'Alice'
        assert held.booking_status == 'confirmed'
        assert all(slot.customer_name is None for slot in slots if slot.id != held.id)


class TestBookingViews:
    async def test_list_and_get_joined_views(self, catalog, reserve_use_case):
        haircut, massage = catalog
        alice = await reserve_use_case.execute(
            slot_id=haircut.slot_ids[1], customer_name='Alice', customer_email='a@x.com'
        )
        carol = await reserve_use_case.execute(
            slot_id=massage.slot_ids[0], customer_name='Carol', customer_email='c@x.com'
        )
        use_case = ListBookingsUseCase(booking_query_repo=container.booking_query_repo())

        views = await use_case.list_bookings()

        # Latest slot first
        assert [view.id for view in views] == [carol.id, alice.id]

        view = await use_case.get_booking(booking_id=alice.id)
        assert view.service_name == 'Haircut'
        assert view.slot_date == TODAY
        assert view.slot_time == time(10, 0)

    async def test_get_unknown_booking(self, catalog):
        use_case = ListBookingsUseCase(booking_query_repo=container.booking_query_repo())

        with pytest.raises(BookingNotFoundError):
            await use_case.get_booking(booking_id=999)
