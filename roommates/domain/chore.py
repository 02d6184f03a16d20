from __future__ import annotations

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Chore:
    """A household task. `id` is assigned by the store on insert."""

    name: str
    id: int | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ChoreConflict:
    """Returned instead of raising when the store refuses to delete a chore
    that is still referenced by an assignment row."""

    chore_id: int
    message: str

    def to_dict(self) -> dict:
        return asdict(self)
