"""
Unit tests for the HTTP error mapping

A throwaway FastAPI app raises each error kind; the registered handlers
decide status code, body and headers.
"""

from fastapi import FastAPI, status
from fastapi.testclient import TestClient
from pydantic import BaseModel
import pytest

from src.platform.exception.exception_handlers import (
    RETRY_AFTER_SECONDS,
    register_exception_handlers,
)
from src.platform.exception.exceptions import DomainError
from src.service.slot_booking.domain.booking_errors import (
    AlreadyCancelledError,
    BookingNotFoundError,
    SlotUnavailableError,
    StoreUnavailableError,
)


pytestmark = pytest.mark.unit


class _Body(BaseModel):
    slot_id: int
    customer_name: str


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/invalid')
    async def invalid():
        raise DomainError('Customer name is required')

    @app.get('/missing')
    async def missing():
        raise BookingNotFoundError()

    @app.get('/taken')
    async def taken():
        raise SlotUnavailableError()

    @app.get('/cancelled')
    async def cancelled():
        raise AlreadyCancelledError()

    @app.get('/down')
    async def down():
        raise StoreUnavailableError()

    @app.get('/boom')
    async def boom():
        raise RuntimeError('unexpected')

    @app.post('/body')
    async def body(payload: _Body):
        return payload

    return app


@pytest.fixture
def client():
    with TestClient(_build_app(), raise_server_exceptions=False) as test_client:
        yield test_client


class TestExceptionHandlers:
    def test_domain_error_is_bad_request(self, client):
        response = client.get('/invalid')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'detail': 'Customer name is required'}

    def test_not_found(self, client):
        response = client.get('/missing')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'detail': 'Booking not found'}

    @pytest.mark.parametrize(
        'path,detail',
        [
            ('/taken', 'Time slot is no longer available'),
            ('/cancelled', 'Booking is already cancelled'),
        ],
    )
    def test_conflicts(self, client, path, detail):
        response = client.get(path)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {'detail': detail}

    def test_store_unavailable_asks_client_to_retry(self, client):
        response = client.get('/down')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.headers['Retry-After'] == str(RETRY_AFTER_SECONDS)
        assert response.json() == {'detail': 'Booking store is unavailable, please retry'}

    def test_request_validation_lists_each_field(self, client):
        response = client.post('/body', json={'slot_id': 'abc'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        detail = response.json()['detail']
        assert len(detail) == 2
        assert any(line.startswith('slot_id: ') for line in detail)
        assert any(line.startswith('customer_name: ') for line in detail)

    def test_unhandled_error_is_opaque_500(self, client):
        response = client.get('/boom')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {'detail': 'Internal server error'}
