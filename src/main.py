"""
Production FastAPI Application

Slot booking API with the real-time booking event stream.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Slot Booking] Starting up...')

    # Setup OpenTelemetry tracing
    tracing = TracingConfig(service_name='slot-booking-service')
    tracing.setup()
    Logger.base.info('📊 [Slot Booking] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Slot Booking] Dependency injection wired')

    # Initialize database
    engine = get_engine()
    tracing.instrument_sqlalchemy(engine=engine)
    Logger.base.info('🗄️  [Slot Booking] Database engine ready + instrumented')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Slot Booking] Database tables ensured')

    Logger.base.info('✅ [Slot Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Slot Booking] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Slot Booking] Database engine disposed')

    # Shutdown tracing (flush remaining spans)
    tracing.shutdown()
    Logger.base.info('📊 [Slot Booking] Tracing shutdown complete')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Slot Booking] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='Slot Booking System - service catalog, slot reservation, cancellation, '
    'statistics and a live booking event stream',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
