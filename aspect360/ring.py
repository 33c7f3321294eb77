"""Circular degree arithmetic on the 0-360 ring."""
from __future__ import annotations

from dataclasses import dataclass

FULL_TURN = 360.0
HALF_TURN = 180.0


def to_360(value: float) -> float:
    """Normalize any degree measure into the canonical ``[0, 360)`` range."""
    if 0.0 <= value < FULL_TURN:
        return value
    normalized = value % FULL_TURN
    # -1e-17 % 360 rounds up to 360.0
    if normalized == FULL_TURN:
        return 0.0
    return normalized


def angle_360(value: float, other: float) -> float:
    """Return the shortest signed distance from ``value`` to ``other``.

    Both inputs are normalized first. A positive result means ``other`` lies
    clockwise (in increasing longitude) from ``value``. The result lies in
    ``[-180, 180]``.
    """
    diff = to_360(other) - to_360(value)
    if diff < -HALF_TURN:
        diff += FULL_TURN
    elif diff > HALF_TURN:
        diff -= FULL_TURN
    return diff


@dataclass(frozen=True)
class Ring360:
    """A degree value held in canonical circular form."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_360(float(self.value)))

    @classmethod
    def from_degrees(cls, degrees: float) -> "Ring360":
        return cls(degrees)

    @property
    def degrees(self) -> float:
        return self.value

    def angle(self, other: "Ring360") -> float:
        """Signed shortest distance from this value to ``other``."""
        return angle_360(self.value, other.value)

    def angle_f64(self, other: float) -> float:
        return angle_360(self.value, other)

    def __float__(self) -> float:
        return self.value

    def __add__(self, degrees: float) -> "Ring360":
        return type(self)(self.value + float(degrees))

    def __sub__(self, degrees: float) -> "Ring360":
        return type(self)(self.value - float(degrees))


def signed_difference(a: Ring360, b: Ring360) -> float:
    """Signed difference between two canonical values, from ``a`` to ``b``."""
    return a.angle(b)
