from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingCreateRequest(BaseModel):
    slot_id: int
    customer_name: str = Field(min_length=1, max_length=100)
    customer_email: str = Field(min_length=1, max_length=255)
    customer_phone: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'slot_id': 1,
                'customer_name': 'Alice',
                'customer_email': 'alice@example.com',
                'customer_phone': '0912345678',
                'notes': 'First visit',
            }
        }
    )


class BookingViewResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'slot_id': 1,
                'customer_name': 'Alice',
                'customer_email': 'alice@example.com',
                'customer_phone': None,
                'notes': None,
                'status': 'confirmed',
                'created_at': '2026-01-10T10:30:00',
                'updated_at': '2026-01-10T10:30:00',
                'slot_date': '2026-01-12',
                'slot_time': '10:00:00',
                'service_id': 1,
                'service_name': 'Haircut',
                'duration_minutes': 30,
                'price': 500,
            }
        },
    )

    id: int
    slot_id: int
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    notes: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    slot_date: date
    slot_time: time
    service_id: int
    service_name: str
    duration_minutes: int
    price: int
