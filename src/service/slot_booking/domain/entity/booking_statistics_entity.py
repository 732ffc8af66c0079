from typing import List

import attrs


@attrs.define(frozen=True)
class ServiceStatistics:
    service_id: int
    name: str
    booking_count: int  # confirmed bookings only
    total_revenue: int  # sum of the service price over confirmed bookings


@attrs.define(frozen=True)
class BookingStatistics:
    confirmed_bookings: int
    cancelled_bookings: int
    completed_bookings: int
    total_bookings: int
    available_slots: int
    by_service: List[ServiceStatistics] = attrs.field(factory=list)
