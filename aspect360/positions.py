"""Body longitudes from Swiss Ephemeris as aspect-ready ring values."""
from __future__ import annotations

import datetime
import logging
from enum import Enum
from typing import Iterable, Optional

import swisseph as swe

from .aspects import AspectAngle
from .config import AspectConfigError, cfg
from .models import AspectResult, OrbLike

logger = logging.getLogger(__name__)


class EphemerisError(RuntimeError):
    """Raised when Swiss Ephemeris cannot compute a position."""


class Body(Enum):
    """Bodies with their Swiss Ephemeris identifiers."""
    SUN = ("Sun", swe.SUN)
    MOON = ("Moon", swe.MOON)
    MERCURY = ("Mercury", swe.MERCURY)
    VENUS = ("Venus", swe.VENUS)
    MARS = ("Mars", swe.MARS)
    JUPITER = ("Jupiter", swe.JUPITER)
    SATURN = ("Saturn", swe.SATURN)
    URANUS = ("Uranus", swe.URANUS)
    NEPTUNE = ("Neptune", swe.NEPTUNE)
    PLUTO = ("Pluto", swe.PLUTO)
    MEAN_NODE = ("North Node", swe.MEAN_NODE)

    def __init__(self, display_name, swe_id):
        self.display_name = display_name
        self.swe_id = swe_id


_ephe_path: Optional[str] = None


def _calc_flags() -> int:
    ephemeris = getattr(cfg(), "ephemeris", None)
    mode = getattr(ephemeris, "mode", "moshier")
    if mode == "moshier":
        return swe.FLG_MOSEPH
    if mode == "swiss":
        global _ephe_path
        path = getattr(ephemeris, "path", "") or ""
        if path != _ephe_path:
            swe.set_ephe_path(path)
            _ephe_path = path
        return swe.FLG_SWIEPH
    raise AspectConfigError(f"Unknown ephemeris mode: {mode}")


def julian_day(dt: datetime.datetime) -> float:
    """UT Julian day for ``dt``; naive datetimes are taken as UTC."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(datetime.timezone.utc)
    hour = dt.hour + dt.minute / 60.0 + (dt.second + dt.microsecond / 1e6) / 3600.0
    return swe.julday(dt.year, dt.month, dt.day, hour)


def body_longitude(body: Body, jd_ut: float) -> AspectAngle:
    """Ecliptic longitude of ``body`` at ``jd_ut``."""
    try:
        data, _ret_flag = swe.calc_ut(jd_ut, body.swe_id, _calc_flags())
    except swe.Error as e:
        logger.error(f"Error calculating {body.display_name}: {e}")
        raise EphemerisError(f"Cannot calculate {body.display_name}: {e}") from e
    return AspectAngle(data[0])


def aspect_between(
    body_1: Body,
    body_2: Body,
    jd_ut: float,
    targets: Iterable[OrbLike],
) -> Optional[AspectResult]:
    """Best matched aspect from ``body_1`` to ``body_2`` at ``jd_ut``."""
    lng_1 = body_longitude(body_1, jd_ut)
    lng_2 = body_longitude(body_2, jd_ut)
    return lng_1.find_best_aspect(lng_2, targets)
