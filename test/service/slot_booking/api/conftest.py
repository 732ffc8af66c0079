from datetime import date, time, timedelta

import pytest

from test.shared.utils import SeededService, seed_service


@pytest.fixture
async def haircut(clean_database) -> SeededService:
    tomorrow = date.today() + timedelta(days=1)
    return await seed_service(
        name='Haircut',
        price=30,
        slots=[(tomorrow, time(10, 0), True), (tomorrow, time(11, 0), True)],
    )
