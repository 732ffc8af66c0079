from typing import Callable, Self

import anyio
from dependency_injector.wiring import Provide, Provider, inject
from fastapi import Depends
from opentelemetry import trace
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.slot_booking.app.interface.i_booking_event_broadcaster import (
    IBookingEventBroadcaster,
)
from src.service.slot_booking.domain.booking_errors import (
    AlreadyCancelledError,
    BookingNotFoundError,
    StoreUnavailableError,
)
from src.service.slot_booking.domain.entity.booking_view_entity import BookingView
from src.service.slot_booking.domain.enum.booking_event_type import BookingEventType


tracer = trace.get_tracer(__name__)


class CancelBookingUseCase:
    """
    Cancel a booking and reopen its slot in one unit of work.

    A cancelled booking cannot be cancelled again (AlreadyCancelledError,
    nothing written, nothing published). Completed bookings can be
    cancelled; the slot is reopened even if its date has passed.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        broadcaster: IBookingEventBroadcaster,
        timeout_seconds: float,
    ) -> None:
        self.uow_factory = uow_factory
        self.broadcaster = broadcaster
        self.timeout_seconds = timeout_seconds

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(Provider[Container.unit_of_work]),
        broadcaster: IBookingEventBroadcaster = Depends(
            Provide[Container.booking_event_broadcaster]
        ),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            uow_factory=uow_factory,
            broadcaster=broadcaster,
            timeout_seconds=config.UNIT_OF_WORK_TIMEOUT_SECONDS,
        )

    @Logger.io
    async def execute(self, *, booking_id: int) -> BookingView:
        with tracer.start_as_current_span(
            'use_case.cancel_booking', attributes={'booking.id': booking_id}
        ):
            try:
                view = await self._cancel(booking_id=booking_id)
            except BookingNotFoundError:
                metrics.record_cancellation(result='not_found')
                raise
            except AlreadyCancelledError:
                metrics.record_cancellation(result='already_cancelled')
                raise
            except StoreUnavailableError:
                metrics.record_cancellation(result='store_unavailable')
                raise
            metrics.record_cancellation(result='success')

        Logger.base.info(f'🔓 [CANCEL] booking {booking_id} cancelled, slot {view.slot_id} reopened')
        return view

    async def _cancel(self, *, booking_id: int) -> BookingView:
        try:
            with anyio.fail_after(self.timeout_seconds):
                async with self.uow_factory() as uow:
                    booking = await uow.booking_command_repo.get_by_id_for_update(
                        booking_id=booking_id
                    )
                    if booking is None:
                        raise BookingNotFoundError()

                    cancelled = booking.cancel()
                    await uow.booking_command_repo.update_status(booking=cancelled)

                    slot = await uow.slot_command_repo.get_by_id_for_update(
                        slot_id=booking.slot_id
                    )
                    if slot is not None:
                        await uow.slot_command_repo.update_availability(slot=slot.release())

                    view = await uow.booking_query_repo.get_view(booking_id=booking_id)
                    if view is None:
                        raise StoreUnavailableError('Booking vanished before commit')

                    await uow.commit()

                    # Published before the unit closes, so events keep commit order
                    await self.broadcaster.publish(
                        event_type=BookingEventType.BOOKING_CANCELLED, booking=view
                    )
                    return view
        except TimeoutError as e:
            Logger.base.error(f'⏰ [CANCEL] unit of work exceeded {self.timeout_seconds}s')
            raise StoreUnavailableError() from e
        except (SQLAlchemyError, OSError) as e:
            Logger.base.error(f'❌ [CANCEL] store failure: {type(e).__name__}: {e}')
            raise StoreUnavailableError() from e
