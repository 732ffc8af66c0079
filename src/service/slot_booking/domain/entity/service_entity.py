from typing import Optional

import attrs


@attrs.define
class ServiceEntity:
    """Catalog entry: a bookable service (read-only for reservations)."""

    id: int
    name: str
    duration_minutes: int
    price: int
    description: Optional[str] = None
