"""Referenced-only entities: listing sections (categories) and cities."""

from dataclasses import dataclass


@dataclass
class Section:
    name: str
    id: int | None = None


@dataclass
class City:
    name: str
    id: int | None = None
