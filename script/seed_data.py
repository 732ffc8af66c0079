#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Reset Tables - drop and recreate every table (skip with --keep)
2. Create Services - a small catalog of bookable services
3. Create Slots - open slots for each service over the next SLOT_DAYS days

Notes:
- Works against PostgreSQL or the DATABASE_URL override (e.g. sqlite+aiosqlite)
- Run with `python -m script.seed_data` from the project root
"""

import argparse
import asyncio
from dataclasses import dataclass
from datetime import date, time, timedelta
import os
import sys

from sqlalchemy import func, select

from src.platform.database.db_setting import (
    Base,
    create_db_and_tables,
    dispose_engine,
    get_engine,
    get_session_maker,
)
from src.service.slot_booking.driven_adapter.model import BookingModel, ServiceModel, SlotModel


SLOT_DAYS = int(os.getenv('SLOT_DAYS', '7'))
SLOT_TIMES = [time(9, 0), time(10, 0), time(11, 0), time(14, 0), time(15, 0), time(16, 0)]


@dataclass
class ServiceConfig:
    """Service seed configuration"""

    name: str
    description: str
    duration_minutes: int
    price: int


SERVICES = [
    ServiceConfig(name='Haircut', description='Wash, cut and style', duration_minutes=30, price=500),
    ServiceConfig(name='Beard Trim', description='Shape and line-up', duration_minutes=15, price=250),
    ServiceConfig(name='Hair Coloring', description='Full color', duration_minutes=90, price=1800),
]


async def reset_tables() -> None:
    print('🗑️  Dropping tables...')
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    print('   ✅ Tables dropped')

    await create_db_and_tables()
    print('   ✅ Tables created')


async def _seed_data() -> None:
    """Seed services and slots in a single transaction"""
    start = date.today()

    async with get_session_maker()() as session:
        async with session.begin():
            for config in SERVICES:
                service = ServiceModel(
                    name=config.name,
                    description=config.description,
                    duration_minutes=config.duration_minutes,
                    price=config.price,
                )
                session.add(service)
                await session.flush()

                session.add_all(
                    SlotModel(
                        service_id=service.id,
                        slot_date=start + timedelta(days=offset),
                        slot_time=slot_time,
                        available=True,
                    )
                    for offset in range(SLOT_DAYS)
                    for slot_time in SLOT_TIMES
                )
                print(
                    f'   ✅ Created service: ID={service.id}, Name={service.name}, '
                    f'slots={SLOT_DAYS * len(SLOT_TIMES)}'
                )

    print('✅ All data committed successfully!')


async def verify_data() -> None:
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    async with get_session_maker()() as session:
        for label, model in (
            ('Service', ServiceModel),
            ('Slot', SlotModel),
            ('Booking', BookingModel),
        ):
            count = (await session.execute(select(func.count(model.id)))).scalar_one()
            print(f'   {label} count: {count}')

    print('   ✅ Data verification completed!')


async def main(*, keep: bool) -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        if keep:
            await create_db_and_tables()
        else:
            await reset_tables()
        print()

        await _seed_data()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        sys.exit(1)
    finally:
        await dispose_engine()


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Seed the slot booking database')
    parser.add_argument('--keep', action='store_true', help='keep existing tables and rows')
    args = parser.parse_args()
    asyncio.run(main(keep=args.keep))
