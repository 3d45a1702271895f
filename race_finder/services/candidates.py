"""Candidate race records produced by the extraction adapters.

Every field is optional; nothing here is validated. The row builder decides
what gets stored.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional, Union


@dataclass
class Candidate:
    name: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    distance: Optional[str] = None
    participants: Union[int, float, str, None] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    image_url: Optional[str] = None
    website_url: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Candidate":
        """Build from a loosely-shaped dict, ignoring unknown keys."""
        known = {k: data.get(k) for k in cls.__dataclass_fields__ if k in data}
        return cls(**known)

    def to_dict(self) -> dict:
        return asdict(self)
