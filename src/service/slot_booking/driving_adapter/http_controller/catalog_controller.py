from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.query.list_services_use_case import ListServicesUseCase
from src.service.slot_booking.app.query.list_slots_use_case import ListSlotsUseCase
from src.service.slot_booking.driving_adapter.http_controller.schema.catalog_schema import (
    ServiceResponse,
    SlotDetailResponse,
)


service_router = APIRouter()
slot_router = APIRouter()


@service_router.get('', response_model=List[ServiceResponse])
@Logger.io
async def list_services(
    use_case: ListServicesUseCase = Depends(ListServicesUseCase.depends),
) -> List[ServiceResponse]:
    services = await use_case.list_services()
    return [ServiceResponse.model_validate(service) for service in services]


@service_router.get('/{service_id}')
@Logger.io
async def get_service(
    service_id: int,
    use_case: ListServicesUseCase = Depends(ListServicesUseCase.depends),
) -> ServiceResponse:
    service = await use_case.get_service(service_id=service_id)
    return ServiceResponse.model_validate(service)


@service_router.get('/{service_id}/slots', response_model=List[SlotDetailResponse])
@Logger.io
async def list_service_slots(
    service_id: int,
    use_case: ListSlotsUseCase = Depends(ListSlotsUseCase.depends),
) -> List[SlotDetailResponse]:
    slots = await use_case.list_service_slots(service_id=service_id)
    return [SlotDetailResponse.model_validate(slot) for slot in slots]


@slot_router.get('/available', response_model=List[SlotDetailResponse])
@Logger.io
async def list_available_slots(
    use_case: ListSlotsUseCase = Depends(ListSlotsUseCase.depends),
) -> List[SlotDetailResponse]:
    """Open slots from today onwards, earliest first."""
    slots = await use_case.list_available_slots()
    return [SlotDetailResponse.model_validate(slot) for slot in slots]
