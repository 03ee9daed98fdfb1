"""Domain entity for an API user."""

from dataclasses import dataclass, field


@dataclass
class User:
    """A registered user. ``password_hash`` is never exposed to clients."""

    email: str
    password_hash: str = field(repr=False)
    id: int | None = None
