"""Customer entity. Only read by the core; registration lives elsewhere."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Customer:
    id: int
    name: str
    email: str
    phone: str = ""
    registered_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
