from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

from .ring import FULL_TURN, HALF_TURN, angle_360


@dataclass(frozen=True)
class AspectResult:
    """Outcome of testing one angle against a target aspect.

    Every pair of angles has an aspect, but only some match the target within
    the orb (± tolerance).
    """
    aspect: float  # raw signed separation between the two angles
    target: float
    distance: float  # signed, relative to the nearer reading of the target
    matched: bool
    orb: float

    @classmethod
    def calculate(cls, target: float, angle: float, orb: float) -> "AspectResult":
        """Resolve ``angle`` against ``target`` and its complement.

        A target strictly between 0 and 180 is symmetrical, so 120 also
        matches 240 (or -120). Whichever reading lies closer wins.
        """
        distance = angle_360(target, angle)
        if 0.0 < target < HALF_TURN:
            distance_2 = angle_360(FULL_TURN - target, angle)
            if abs(distance_2) < abs(distance):
                distance = distance_2
        neg_orb = 0.0 - orb
        distance_abs = abs(distance)
        in_range = distance_abs >= neg_orb and distance_abs <= orb
        return cls(angle, target, distance, in_range, orb)

    @property
    def divergence(self) -> float:
        """Absolute distance from the exact target, never negative."""
        return abs(self.distance)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "aspect": self.aspect,
            "target": self.target,
            "distance": self.distance,
            "divergence": self.divergence,
            "matched": self.matched,
            "orb": self.orb,
        }


@dataclass(frozen=True)
class AspectOrb:
    """A target aspect with its orb (± tolerance)."""
    target: float
    orb: float


@dataclass(frozen=True)
class AspectDefinition:
    """Named aspect loaded from an aspect pack."""
    key: str
    name: str
    target: float
    orb: float

    def as_orb(self) -> AspectOrb:
        return AspectOrb(self.target, self.orb)


OrbLike = Union[AspectOrb, AspectDefinition, Tuple[float, float], Sequence[float]]


def as_aspect_orb(item: OrbLike) -> AspectOrb:
    """Coerce a single candidate into an ``AspectOrb``."""
    if isinstance(item, AspectOrb):
        return item
    if isinstance(item, AspectDefinition):
        return item.as_orb()
    target, orb = item
    return AspectOrb(float(target), float(orb))


def to_aspect_orbs(pairs: Iterable[OrbLike]) -> List[AspectOrb]:
    """Convert ``(target, orb)`` pairs into ``AspectOrb`` values.

    ``AspectOrb`` members pass through unchanged and ``AspectDefinition``
    members are reduced to their target and orb.
    """
    return [as_aspect_orb(item) for item in pairs]
