from datetime import date, datetime, time
from typing import Any, List, Optional

import attrs
from sqlalchemy import select

from src.platform.database.db_setting import get_session_maker
from src.service.slot_booking.domain.entity.booking_view_entity import BookingView
from src.service.slot_booking.driven_adapter.model import BookingModel, ServiceModel, SlotModel


@attrs.define
class SeededService:
    service_id: int
    slot_ids: List[int]
    price: int


def make_booking_view(**overrides: Any) -> BookingView:
    fields: dict[str, Any] = {
        'id': 1,
        'slot_id': 10,
        'customer_name': 'Alice',
        'customer_email': 'a@x.com',
        'customer_phone': None,
        'notes': None,
        'status': 'confirmed',
        'created_at': datetime(2024, 5, 30, 9, 0),
        'updated_at': datetime(2024, 5, 30, 9, 0),
        'slot_date': date(2024, 6, 1),
        'slot_time': time(10, 0),
        'service_id': 1,
        'service_name': 'Haircut',
        'duration_minutes': 30,
        'price': 30,
    }
    fields.update(overrides)
    return BookingView(**fields)


async def seed_service(
    *,
    name: str = 'Haircut',
    price: int = 30,
    duration_minutes: int = 30,
    slots: Optional[List[tuple[date, time, bool]]] = None,
) -> SeededService:
    """Insert one service and its slots, committed."""
    slots = slots if slots is not None else [(date(2024, 6, 1), time(10, 0), True)]

    async with get_session_maker()() as session:
        async with session.begin():
            service = ServiceModel(name=name, duration_minutes=duration_minutes, price=price)
            session.add(service)
            await session.flush()

            slot_models = [
                SlotModel(
                    service_id=service.id, slot_date=slot_date, slot_time=slot_time, available=available
                )
                for slot_date, slot_time, available in slots
            ]
            session.add_all(slot_models)
            await session.flush()
            seeded = SeededService(
                service_id=service.id, slot_ids=[slot.id for slot in slot_models], price=price
            )

    return seeded


async def get_slot_available(slot_id: int) -> bool:
    async with get_session_maker()() as session:
        slot = await session.get(SlotModel, slot_id)
        assert slot is not None
        return slot.available


async def list_booking_statuses(slot_id: int) -> List[str]:
    async with get_session_maker()() as session:
        result = await session.execute(
            select(BookingModel.status)
            .where(BookingModel.slot_id == slot_id)
            .order_by(BookingModel.id)
        )
        return list(result.scalars().all())
