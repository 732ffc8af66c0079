"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.event.in_memory_broadcaster import InMemoryEventBroadcasterImpl
from src.service.slot_booking.driven_adapter.broadcaster.booking_event_broadcaster_impl import (
    BookingEventBroadcasterImpl,
)
from src.service.slot_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.slot_booking.driven_adapter.repo.catalog_query_repo_impl import (
    CatalogQueryRepoImpl,
)
from src.service.slot_booking.driven_adapter.repo.statistics_query_repo_impl import (
    StatisticsQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager, event-loop aware)
    database = providers.Singleton(Database)

    # One session per unit of work
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session_factory
    )

    # Real-time fan-out (process-wide singleton)
    in_memory_broadcaster = providers.Singleton(
        InMemoryEventBroadcasterImpl,
        max_buffer_size=config_service.provided.BROADCAST_BUFFER_SIZE,
    )
    booking_event_broadcaster = providers.Singleton(
        BookingEventBroadcasterImpl, broadcaster=in_memory_broadcaster
    )

    # Read repositories (stateless - open a session per call)
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    catalog_query_repo = providers.Singleton(
        CatalogQueryRepoImpl, session_factory=database.provided.session
    )
    statistics_query_repo = providers.Singleton(
        StatisticsQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
