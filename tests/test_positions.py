import datetime
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from aspect360 import positions
from aspect360.aspects import AspectAngle
from aspect360.config import AspectConfigError, reset_config
from aspect360.models import AspectOrb
from aspect360.positions import Body, aspect_between, body_longitude, julian_day

J2000 = 2451545.0


@pytest.fixture(autouse=True)
def moshier_config(monkeypatch):
    monkeypatch.delenv("ASPECT360_CONFIG", raising=False)
    reset_config()
    yield
    reset_config()


def test_julian_day_naive_is_utc():
    assert julian_day(datetime.datetime(2000, 1, 1, 12, 0)) == J2000


def test_julian_day_converts_aware_datetimes():
    tz = datetime.timezone(datetime.timedelta(hours=1))
    assert julian_day(datetime.datetime(2000, 1, 1, 13, 0, tzinfo=tz)) == J2000


def test_sun_longitude_at_j2000():
    sun = body_longitude(Body.SUN, J2000)
    assert isinstance(sun, AspectAngle)
    assert abs(sun.value - 280.37) < 0.2


def test_body_is_conjunct_itself():
    result = aspect_between(Body.MARS, Body.MARS, J2000, [AspectOrb(0.0, 1.0)])
    assert result is not None
    assert result.distance == 0.0


def test_aspect_between_uses_best_match():
    sun = body_longitude(Body.SUN, J2000)
    moon = body_longitude(Body.MOON, J2000)
    targets = [(t, 10.0) for t in (0.0, 60.0, 90.0, 120.0, 180.0)]
    assert aspect_between(Body.SUN, Body.MOON, J2000, targets) == sun.find_best_aspect(moon, targets)


def test_unknown_ephemeris_mode(tmp_path, monkeypatch):
    override = tmp_path / "override.yaml"
    override.write_text("ephemeris:\n  mode: jpl\n", encoding="utf-8")
    monkeypatch.setenv("ASPECT360_CONFIG", str(override))
    reset_config()
    with pytest.raises(AspectConfigError):
        body_longitude(Body.SUN, J2000)


def test_ephemeris_failure_is_wrapped(monkeypatch, caplog):
    def failing_calc_ut(jd, body, flags):
        raise positions.swe.Error("no ephemeris")

    monkeypatch.setattr(positions.swe, "calc_ut", failing_calc_ut)
    with pytest.raises(positions.EphemerisError):
        body_longitude(Body.SUN, J2000)
    assert "Error calculating Sun" in caplog.text


def test_swiss_mode_follows_configured_path(tmp_path, monkeypatch):
    paths = []
    monkeypatch.setattr(positions, "_ephe_path", None)
    monkeypatch.setattr(positions.swe, "set_ephe_path", paths.append)
    monkeypatch.setattr(positions.swe, "calc_ut", lambda jd, body, flags: ((10.0, 0, 1, 1, 0, 0), flags))
    override = tmp_path / "override.yaml"
    override.write_text("ephemeris:\n  mode: swiss\n  path: /ephe/a\n", encoding="utf-8")
    monkeypatch.setenv("ASPECT360_CONFIG", str(override))
    reset_config()
    body_longitude(Body.SUN, J2000)
    body_longitude(Body.MOON, J2000)
    override.write_text("ephemeris:\n  mode: swiss\n  path: /ephe/b\n", encoding="utf-8")
    reset_config()
    assert body_longitude(Body.SUN, J2000).value == 10.0
    assert paths == ["/ephe/a", "/ephe/b"]
