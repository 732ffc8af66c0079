import time
from typing import Callable, Optional, Self

import anyio
from dependency_injector.wiring import Provide, Provider, inject
from fastapi import Depends
from opentelemetry import trace
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.slot_booking.app.interface.i_booking_event_broadcaster import (
    IBookingEventBroadcaster,
)
from src.service.slot_booking.domain.booking_errors import (
    SlotUnavailableError,
    StoreUnavailableError,
)
from src.service.slot_booking.domain.entity.booking_entity import Booking
from src.service.slot_booking.domain.entity.booking_view_entity import BookingView
from src.service.slot_booking.domain.enum.booking_event_type import BookingEventType


class ReserveSlotUseCase:
    """
    Grant a slot to exactly one customer.

    Flow:
    1. Validate customer fields (before touching the store)
    2. In one unit of work: lock the slot row, check availability,
       insert a confirmed booking, mark the slot unavailable, commit
    3. After commit: publish booking_created with the joined view

    Of N concurrent calls on one slot exactly one succeeds; the rest get
    SlotUnavailableError. Any failure leaves no booking and no slot change.
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
        self.tracer = trace.get_tracer(__name__)

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
    async def execute(
        self,
        *,
        slot_id: int,
        customer_name: str,
        customer_email: str,
        customer_phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> BookingView:
        start = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.reserve_slot', attributes={'slot.id': slot_id}
        ) as span:
            try:
                booking = Booking.create(
                    slot_id=slot_id,
                    customer_name=customer_name,
                    customer_email=customer_email,
                    customer_phone=customer_phone,
                    notes=notes,
                )
                view = await self._claim(booking=booking)
            except DomainError:
                metrics.record_reservation(result='invalid', duration=time.perf_counter() - start)
                raise
            except SlotUnavailableError:
                span.set_attribute('reservation.result', 'slot_unavailable')
                metrics.record_reservation(
                    result='slot_unavailable', duration=time.perf_counter() - start
                )
                raise
            except StoreUnavailableError:
                span.set_attribute('reservation.result', 'store_unavailable')
                metrics.record_reservation(
                    result='store_unavailable', duration=time.perf_counter() - start
                )
                raise

            span.set_attribute('booking.id', view.id)
            span.set_attribute('reservation.result', 'success')
            metrics.record_reservation(result='success', duration=time.perf_counter() - start)

        Logger.base.info(f'✅ [RESERVE] slot {slot_id} booked as booking {view.id}')
        return view

    async def _claim(self, *, booking: Booking) -> BookingView:
        try:
            with anyio.fail_after(self.timeout_seconds):
                async with self.uow_factory() as uow:
                    slot = await uow.slot_command_repo.get_by_id_for_update(
                        slot_id=booking.slot_id
                    )
                    if slot is None:
                        raise SlotUnavailableError()

                    claimed_slot = slot.claim()
                    created = await uow.booking_command_repo.create(booking=booking)
                    await uow.slot_command_repo.update_availability(slot=claimed_slot)

                    # Read inside the transaction: identical to the committed state
                    assert created.id is not None
                    view = await uow.booking_query_repo.get_view(booking_id=created.id)
                    if view is None:
                        raise StoreUnavailableError('Booking vanished before commit')

                    await uow.commit()

                    # Published before the unit closes, so events keep commit order
                    await self.broadcaster.publish(
                        event_type=BookingEventType.BOOKING_CREATED, booking=view
                    )
                    return view
        except IntegrityError as e:
            # Store-level uniqueness caught a competing confirmed booking
            raise SlotUnavailableError() from e
        except TimeoutError as e:
            Logger.base.error(f'⏰ [RESERVE] unit of work exceeded {self.timeout_seconds}s')
            raise StoreUnavailableError() from e
        except (SQLAlchemyError, OSError) as e:
            Logger.base.error(f'❌ [RESERVE] store failure: {type(e).__name__}: {e}')
            raise StoreUnavailableError() from e
