"""Owner identifier value type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OwnerID:
    """Identifies the user who owns a task.

    Owner-scoped store queries take an ``OwnerID`` rather than a raw string.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("owner id must be a non-empty string")

    def __str__(self) -> str:
        return self.value


def require_owner(owner: object) -> OwnerID:
    """Return ``owner`` unchanged, rejecting anything that is not an ``OwnerID``."""
    if not isinstance(owner, OwnerID):
        raise TypeError(f"expected OwnerID, got {type(owner).__name__}")
    return owner
