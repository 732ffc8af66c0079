from datetime import date, time
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ServiceResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'name': 'Haircut',
                'description': 'Wash, cut and style',
                'duration_minutes': 30,
                'price': 500,
            }
        },
    )

    id: int
    name: str
    description: Optional[str] = None
    duration_minutes: int
    price: int


class SlotDetailResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    service_id: int
    slot_date: date
    slot_time: time
    available: bool
    service_name: str
    duration_minutes: int
    price: int
    # Present only when a confirmed booking holds the slot
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    booking_status: Optional[str] = None
