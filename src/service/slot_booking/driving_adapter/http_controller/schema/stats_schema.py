from typing import List

from pydantic import BaseModel, ConfigDict


class ServiceStatisticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    service_id: int
    name: str
    booking_count: int
    total_revenue: int


class StatisticsResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'confirmed_bookings': 3,
                'cancelled_bookings': 1,
                'completed_bookings': 0,
                'total_bookings': 4,
                'available_slots': 12,
                'by_service': [
                    {'service_id': 1, 'name': 'Haircut', 'booking_count': 3, 'total_revenue': 1500}
                ],
            }
        },
    )

    confirmed_bookings: int
    cancelled_bookings: int
    completed_bookings: int
    total_bookings: int
    available_slots: int
    by_service: List[ServiceStatisticsResponse]
