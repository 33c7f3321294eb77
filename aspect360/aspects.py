"""Aspect matching between two positions on the 360 degree ring."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .models import AspectResult, OrbLike, as_aspect_orb
from .ring import Ring360

logger = logging.getLogger(__name__)


class Aspect360:
    """Aspect methods derived from a single ``calc_aspect`` implementation.

    All targets are symmetrical, e.g. 120 will also match 240 or -120.
    """

    def calc_aspect(self, other: Ring360, target: float, orb: float) -> AspectResult:
        """Raw aspect to ``other``; implementers must supply this."""
        raise NotImplementedError

    def find_aspect(
        self, other: Ring360, targets: Iterable[OrbLike]
    ) -> Optional[AspectResult]:
        """Return the first matched aspect in candidate order.

        Candidates after the first match are not evaluated, so this is
        cheaper than ``find_best_aspect`` where the order of ``targets``
        already expresses a preference.
        """
        for item in targets:
            aspect_orb = as_aspect_orb(item)
            aspect = self.calc_aspect(other, aspect_orb.target, aspect_orb.orb)
            if aspect.matched:
                logger.debug(f"First aspect match at target {aspect.target}")
                return aspect
        return None

    def find_aspects(
        self, other: Ring360, targets: Iterable[OrbLike]
    ) -> List[AspectResult]:
        """Return every matched aspect, including overlapping targets."""
        matched_aspects: List[AspectResult] = []
        for item in targets:
            aspect_orb = as_aspect_orb(item)
            aspect = self.calc_aspect(other, aspect_orb.target, aspect_orb.orb)
            if aspect.matched:
                matched_aspects.append(aspect)
        logger.debug(f"Matched {len(matched_aspects)} aspect target(s)")
        return matched_aspects

    def find_best_aspect(
        self, other: Ring360, targets: Iterable[OrbLike]
    ) -> Optional[AspectResult]:
        """Return the matched aspect nearest its exact target.

        Ties on divergence go to the earliest candidate.
        """
        matched_aspects = self.find_aspects(other, targets)
        if not matched_aspects:
            return None
        return min(matched_aspects, key=lambda ar: ar.divergence)

    def calc_aspect_f64(self, other: float, target: float, orb: float) -> AspectResult:
        """Calculate an aspect against a plain degree value."""
        return self.calc_aspect(Ring360.from_degrees(other), target, orb)

    def is_aspected(self, other: Ring360, target: float, orb: float) -> bool:
        return self.calc_aspect(other, target, orb).matched

    def is_aspected_f64(self, other: float, target: float, orb: float) -> bool:
        return self.calc_aspect_f64(other, target, orb).matched


class AspectAngle(Ring360, Aspect360):
    """Canonical ring value able to calculate aspects to other ring values."""

    def calc_aspect(self, other: Ring360, target: float, orb: float) -> AspectResult:
        angle = self.angle(other)
        return AspectResult.calculate(target, angle, orb)


def to_aspect_angle(degrees: float) -> AspectAngle:
    return AspectAngle(degrees)


# Plain longitude helpers. Each delegates to ``AspectAngle`` so results are
# identical to the method calls.

def calc_aspect(lng_1: float, lng_2: float, target: float, orb: float) -> AspectResult:
    return AspectAngle(lng_1).calc_aspect_f64(lng_2, target, orb)


def is_aspected(lng_1: float, lng_2: float, target: float, orb: float) -> bool:
    return AspectAngle(lng_1).is_aspected_f64(lng_2, target, orb)


def find_aspect(
    lng_1: float, lng_2: float, targets: Iterable[OrbLike]
) -> Optional[AspectResult]:
    return AspectAngle(lng_1).find_aspect(Ring360(lng_2), targets)


def find_aspects(
    lng_1: float, lng_2: float, targets: Iterable[OrbLike]
) -> List[AspectResult]:
    return AspectAngle(lng_1).find_aspects(Ring360(lng_2), targets)


def find_best_aspect(
    lng_1: float, lng_2: float, targets: Iterable[OrbLike]
) -> Optional[AspectResult]:
    return AspectAngle(lng_1).find_best_aspect(Ring360(lng_2), targets)
