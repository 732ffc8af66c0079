from unittest.mock import AsyncMock

from src.platform.database.unit_of_work import AbstractUnitOfWork


class FakeUnitOfWork(AbstractUnitOfWork):
    """Unit of work over AsyncMock repositories; records commit/rollback."""

    def __init__(self, *, calls: list[str] | None = None) -> None:
        self.slot_command_repo = AsyncMock()
        self.booking_command_repo = AsyncMock()
        self.booking_query_repo = AsyncMock()
        self.calls = calls if calls is not None else []
        self.committed = False
        self.closed = False

    async def _commit(self) -> None:
        self.committed = True
        self.calls.append('commit')

    async def rollback(self) -> None:
        self.calls.append('rollback')

    async def _close(self) -> None:
        self.closed = True
