# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the solar ephemeris, refraction and sunrise/sunset."""
import math
from datetime import date, datetime, timedelta, timezone

import pytest

from planet_time.domain.planets import J2000
from planet_time.domain.solar import (
    DayTimes,
    SolarConstants,
    SolarSnapshot,
    apparent_altitude_deg,
    equation_of_time_and_declination,
    format_time,
    from_julian,
    julian_centuries_j2000,
    refraction_deg,
    solar_position,
    sun_times,
    to_julian,
)

UTC = timezone.utc
CEST = timezone(timedelta(hours=2))
WARSAW = (52.23, 21.01)


class TestJulianDates:

    def test_j2000_julian_date(self):
        assert to_julian(J2000) == pytest.approx(2451545.0, abs=1e-9)

    def test_from_julian_j2000(self):
        assert from_julian(2451545.0) == J2000

    def test_round_trip_arbitrary_instant(self):
        instant = datetime(2024, 6, 21, 10, 30, tzinfo=UTC)
        assert abs((from_julian(to_julian(instant)) - instant).total_seconds()) < 1e-3

    def test_centuries_at_epoch(self):
        assert julian_centuries_j2000(J2000) == 0.0

    def test_centuries_one_century(self):
        later = J2000 + timedelta(days=36525)
        assert julian_centuries_j2000(later) == pytest.approx(1.0)


# ── Geometric position ────────────────────────────────────────────

class TestSolarPosition:

    def test_snapshot_frozen(self):
        snap = solar_position(J2000, 0.0, 0.0)
        assert isinstance(snap, SolarSnapshot)
        with pytest.raises(AttributeError):
            snap.altitude_rad = 0.0

    def test_equinox_noon_near_zenith_at_equator(self):
        snap = solar_position(datetime(2024, 3, 20, 12, tzinfo=UTC), 0.0, 0.0)
        assert math.degrees(snap.altitude_rad) > 85.0

    def test_equinox_midnight_below_horizon(self):
        snap = solar_position(datetime(2024, 3, 20, 0, tzinfo=UTC), 0.0, 0.0)
        assert math.degrees(snap.altitude_rad) < -80.0

    def test_solstice_declination(self):
        snap = solar_position(datetime(2024, 6, 21, 12, tzinfo=UTC), 0.0, 0.0)
        assert math.degrees(snap.declination_rad) == pytest.approx(SolarConstants.OBLIQUITY, abs=0.5)

    def test_azimuth_east_in_morning_west_in_afternoon(self):
        """Azimuth is measured from south, positive westward."""
        morning = solar_position(datetime(2024, 6, 21, 8, tzinfo=UTC), 45.0, 0.0)
        afternoon = solar_position(datetime(2024, 6, 21, 16, tzinfo=UTC), 45.0, 0.0)
        assert morning.azimuth_rad < 0.0
        assert afternoon.azimuth_rad > 0.0

    def test_altitude_in_range(self):
        for hour in range(24):
            snap = solar_position(datetime(2024, 1, 15, hour, tzinfo=UTC), -33.9, 151.2)
            assert -math.pi / 2 <= snap.altitude_rad <= math.pi / 2


# ── NOAA series + refraction ──────────────────────────────────────

class TestEquationOfTime:

    def test_early_november_maximum(self):
        eot, _ = equation_of_time_and_declination(datetime(2024, 11, 3, 12, tzinfo=UTC))
        assert eot == pytest.approx(16.4, abs=1.0)

    def test_mid_february_minimum(self):
        eot, _ = equation_of_time_and_declination(datetime(2024, 2, 12, 12, tzinfo=UTC))
        assert eot == pytest.approx(-14.2, abs=1.0)

    def test_solstice_declination(self):
        _, decl = equation_of_time_and_declination(datetime(2023, 6, 21, 12, tzinfo=UTC))
        assert math.degrees(decl) == pytest.approx(23.44, abs=0.3)


class TestRefraction:

    def test_zero_near_zenith(self):
        assert refraction_deg(90.0) == 0.0
        assert refraction_deg(86.0) == 0.0

    def test_at_horizon(self):
        """1735 arcsec at 0°."""
        assert refraction_deg(0.0) == pytest.approx(1735.0 / 3600.0)

    def test_tangent_branch(self):
        assert refraction_deg(10.0) == pytest.approx(0.088, abs=0.002)

    def test_branches_meet_at_five_degrees(self):
        assert refraction_deg(5.0) == pytest.approx(refraction_deg(5.0001), abs=0.001)

    def test_cotangent_tail(self):
        """Below -0.575° the tail is -20.774 / tan(h) arcsec."""
        expected = -20.774 / math.tan(math.radians(-1.0)) / 3600.0
        assert refraction_deg(-1.0) == pytest.approx(expected)

    def test_positive_above_horizon(self):
        for h in (-0.5, 0.0, 1.0, 3.0, 10.0, 30.0, 60.0, 85.0):
            assert refraction_deg(h) > 0.0

    def test_decreasing_with_altitude(self):
        values = [refraction_deg(h) for h in (0.0, 2.0, 5.0, 10.0, 30.0, 60.0)]
        assert values == sorted(values, reverse=True)


class TestApparentAltitude:

    @pytest.mark.parametrize("instant, lat, lon", [
        (datetime(2024, 6, 21, 10, tzinfo=UTC), *WARSAW),
        (datetime(2024, 3, 20, 9, tzinfo=UTC), 0.0, 0.0),
        (datetime(2023, 12, 1, 15, tzinfo=UTC), -33.9, 18.4),
    ])
    def test_agrees_with_geometric_in_daytime(self, instant, lat, lon):
        """Both models agree to well under a degree away from the horizon."""
        geometric = math.degrees(solar_position(instant, lat, lon).altitude_rad)
        assert apparent_altitude_deg(instant, lat, lon) == pytest.approx(geometric, abs=0.75)

    def test_never_exceeds_ninety(self):
        for minute in range(0, 24 * 60, 15):
            instant = datetime(2024, 3, 20, tzinfo=UTC) + timedelta(minutes=minute)
            assert apparent_altitude_deg(instant, 0.0, 0.0) <= 90.0

    def test_offset_aware_instant_equivalent(self):
        utc = datetime(2024, 6, 21, 10, tzinfo=UTC)
        local = utc.astimezone(CEST)
        assert apparent_altitude_deg(local, *WARSAW) == apparent_altitude_deg(utc, *WARSAW)


# ── Rise / transit / set ─────────────────────────────────────────

class TestSunTimes:

    def test_day_times_frozen(self):
        times = sun_times(date(2024, 3, 20), 0.0, 0.0, tz=UTC)
        assert isinstance(times, DayTimes)
        with pytest.raises(AttributeError):
            times.daylight_hours = 0.0

    def test_equinox_at_equator(self):
        """Slightly over 12 h: the -0.833° horizon adds ~7 minutes."""
        times = sun_times(date(2024, 3, 20), 0.0, 0.0, tz=UTC)
        assert not times.always_up and not times.always_down
        assert 12.0 < times.daylight_hours < 12.2

    def test_noon_centred_between_rise_and_set(self):
        times = sun_times(date(2024, 3, 20), 0.0, 0.0, tz=UTC)
        morning = (times.solar_noon - times.sunrise).total_seconds()
        afternoon = (times.sunset - times.solar_noon).total_seconds()
        assert abs(morning - afternoon) < 60.0

    def test_equinox_transit_includes_equation_of_time(self):
        """Solar noon at Greenwich falls a few minutes after 12:00 UTC in March."""
        noon = sun_times(date(2024, 3, 20), 0.0, 0.0, tz=UTC).solar_noon
        assert datetime(2024, 3, 20, 12, tzinfo=UTC) < noon < datetime(2024, 3, 20, 12, 15, tzinfo=UTC)

    def test_transit_follows_longitude(self):
        """90° east transits about six hours earlier."""
        greenwich = sun_times(date(2024, 3, 20), 0.0, 0.0, tz=UTC).solar_noon
        east = sun_times(date(2024, 3, 20), 0.0, 90.0, tz=UTC).solar_noon
        assert (greenwich - east).total_seconds() / 3600.0 == pytest.approx(6.0, abs=0.05)

    def test_warsaw_summer_solstice(self):
        times = sun_times(date(2024, 6, 21), *WARSAW, tz=CEST)
        assert times.daylight_hours == pytest.approx(16.8, abs=0.15)
        assert times.sunrise.astimezone(CEST).hour == 4
        sunset = times.sunset.astimezone(CEST)
        assert datetime(2024, 6, 21, 20, 45, tzinfo=CEST) < sunset < datetime(2024, 6, 21, 21, 15, tzinfo=CEST)

    def test_instants_are_utc(self):
        times = sun_times(date(2024, 6, 21), *WARSAW, tz=CEST)
        assert times.sunrise.tzinfo == UTC

    def test_polar_day(self):
        times = sun_times(date(2024, 6, 21), 75.0, 0.0, tz=UTC)
        assert times.always_up and not times.always_down
        assert times.sunrise is None and times.solar_noon is None and times.sunset is None
        assert times.daylight_hours == 0.0

    def test_polar_night(self):
        times = sun_times(date(2024, 12, 21), 75.0, 0.0, tz=UTC)
        assert times.always_down and not times.always_up
        assert times.sunrise is None and times.sunset is None
        assert times.daylight_hours == 0.0

    def test_southern_polar_night_in_june(self):
        times = sun_times(date(2024, 6, 21), -75.0, 0.0, tz=UTC)
        assert times.always_down


class TestFormatTime:

    def test_none(self):
        assert format_time(None) == "--"

    def test_in_zone(self):
        instant = datetime(2024, 6, 21, 2, 14, 40, tzinfo=UTC)
        assert format_time(instant, CEST) == "04:14"

    def test_utc(self):
        assert format_time(datetime(2024, 1, 1, 23, 5, tzinfo=UTC), UTC) == "23:05"
