"""
Unit of Work Pattern - one database session and transaction per unit

Architecture:
- UoW owns the session lifecycle: opened on enter, closed on exit
- UoW owns commit/rollback; leaving the block without commit rolls back
- Repositories get the shared session from the UoW
- Use cases coordinate several repositories through one UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Callable

import anyio
from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.slot_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.slot_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.slot_booking.app.interface.i_slot_command_repo import ISlotCommandRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the slot booking service

    Responsibilities:
    - Manage database session lifecycle
    - Coordinate one transaction across slot and booking repositories
    - Provide commit/rollback interface

    Usage:
        async with uow:
            slot = await uow.slot_command_repo.get_by_id_for_update(slot_id=...)
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.commit()
    """

    slot_command_repo: ISlotCommandRepo
    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        # Runs on success, domain error, timeout and caller cancellation alike;
        # rollback after a successful commit is a no-op
        with anyio.CancelScope(shield=True):
            await self.rollback()
            await self._close()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError

    async def _close(self) -> None:
        return None


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh AsyncSession is taken from `session_factory` on every enter, so
    concurrent units never share a connection.
    """

    def __init__(self, *, session_factory: Callable[[], AsyncSession]) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.slot_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.slot_booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.slot_booking.driven_adapter.repo.slot_command_repo_impl import (
            SlotCommandRepoImpl,
        )

        self.session = self.session_factory()

        # Repositories share the unit's session
        self.slot_command_repo = SlotCommandRepoImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session_factory=None)
        self.booking_query_repo.session = self.session

        await super().__aenter__()
        return self

    async def _commit(self) -> None:
        assert self.session is not None
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()

    async def _close(self) -> None:
        if self.session is not None:
            await self.session.close()
            self.session = None
