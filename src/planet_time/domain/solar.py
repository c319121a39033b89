# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical solar ephemeris for a ground observer.

Two paths:
- geometric (airless) position from a low-precision mean-anomaly /
  ecliptic-longitude model, used for sunrise/sunset and azimuth;
- apparent altitude from the NOAA fractional-year series for equation
  of time and declination, plus a piecewise refraction correction.
  This is the path planet-time crossings are searched on.

Out-of-range latitude/longitude are not checked; NaN propagates.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo

import numpy as np

from planet_time.domain.observer import local_instant
from planet_time.domain.planets import SECONDS_PER_DAY, days_since_j2000

JD_UNIX_EPOCH: float = 2440587.5
JD_J2000: float = 2451545.0

_TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class _SolarConstants:
    """Low-precision solar model coefficients (degrees)."""
    MEAN_ANOMALY_0: float = 357.5291
    MEAN_ANOMALY_RATE: float = 0.98560028      # deg/day
    PERIHELION: float = 102.9372               # Earth's longitude of perihelion
    OBLIQUITY: float = 23.4397
    SIDEREAL_0: float = 280.16
    SIDEREAL_RATE: float = 360.9856235         # deg/day
    SUNRISE_ALTITUDE: float = -0.833           # refraction + solar semi-diameter


SolarConstants: _SolarConstants = _SolarConstants()


@dataclass(frozen=True)
class SolarSnapshot:
    """Geometric sun position for an observer at one instant."""
    azimuth_rad: float  # from south, positive westward
    altitude_rad: float
    declination_rad: float
    right_ascension_rad: float


@dataclass(frozen=True)
class DayTimes:
    """Sunrise, solar noon and sunset for one civil day and location."""
    sunrise: datetime | None
    solar_noon: datetime | None
    sunset: datetime | None
    daylight_hours: float
    always_up: bool
    always_down: bool


def to_julian(instant: datetime) -> float:
    """Julian date of a timezone-aware instant."""
    return instant.timestamp() / SECONDS_PER_DAY + JD_UNIX_EPOCH


def from_julian(jd: float) -> datetime:
    """UTC datetime for a Julian date."""
    return datetime.fromtimestamp((jd - JD_UNIX_EPOCH) * SECONDS_PER_DAY, tz=timezone.utc)


def julian_centuries_j2000(instant: datetime) -> float:
    """Julian centuries since J2000.0 (2000-01-01 12:00:00 UTC)."""
    return days_since_j2000(instant) / 36525.0


# ── Geometric position ────────────────────────────────────────────

def _solar_mean_anomaly(d: float) -> float:
    c = SolarConstants
    return math.radians(c.MEAN_ANOMALY_0 + c.MEAN_ANOMALY_RATE * d)


def _ecliptic_longitude(mean_anomaly: float) -> float:
    m = mean_anomaly
    center = math.radians(
        1.9148 * float(np.sin(m)) + 0.02 * float(np.sin(2 * m)) + 0.0003 * float(np.sin(3 * m))
    )
    return m + center + math.radians(SolarConstants.PERIHELION) + math.pi


def _declination(ecliptic_lon: float) -> float:
    eps = math.radians(SolarConstants.OBLIQUITY)
    return float(np.arcsin(np.sin(eps) * np.sin(ecliptic_lon)))


def _right_ascension(ecliptic_lon: float) -> float:
    eps = math.radians(SolarConstants.OBLIQUITY)
    return float(np.arctan2(np.sin(ecliptic_lon) * np.cos(eps), np.cos(ecliptic_lon)))


def _sidereal_time(d: float, lw: float) -> float:
    c = SolarConstants
    return math.radians(c.SIDEREAL_0 + c.SIDEREAL_RATE * d) - lw


def solar_position(instant: datetime, lat_deg: float, lon_deg: float) -> SolarSnapshot:
    """
    Geometric (airless) solar altitude and azimuth.

    Args:
        instant: Timezone-aware datetime.
        lat_deg: Observer latitude (degrees).
        lon_deg: Observer longitude, east positive (degrees).

    Returns:
        SolarSnapshot with altitude and azimuth in radians.
    """
    d = days_since_j2000(instant)
    lw = math.radians(-lon_deg)
    phi = math.radians(lat_deg)

    ecliptic_lon = _ecliptic_longitude(_solar_mean_anomaly(d))
    dec = _declination(ecliptic_lon)
    ra = _right_ascension(ecliptic_lon)
    h = _sidereal_time(d, lw) - ra

    sin_phi, cos_phi = float(np.sin(phi)), float(np.cos(phi))
    altitude = float(np.arcsin(
        sin_phi * np.sin(dec) + cos_phi * np.cos(dec) * np.cos(h)
    ))
    azimuth = float(np.arctan2(
        np.sin(h),
        np.cos(h) * sin_phi - np.tan(dec) * cos_phi,
    ))
    return SolarSnapshot(
        azimuth_rad=azimuth,
        altitude_rad=altitude,
        declination_rad=dec,
        right_ascension_rad=ra,
    )


# ── Apparent altitude (NOAA series + refraction) ─────────────────

def fractional_year_rad(instant: datetime) -> float:
    """NOAA fractional-year angle gamma for a UTC instant."""
    utc = instant.astimezone(timezone.utc)
    doy = utc.timetuple().tm_yday
    hours = utc.hour + utc.minute / 60.0 + (utc.second + utc.microsecond / 1e6) / 3600.0
    # 365-day year in leap years too; the series is fitted that way
    return (_TWO_PI / 365.0) * (doy - 1 + (hours - 12.0) / 24.0)


def equation_of_time_and_declination(instant: datetime) -> tuple[float, float]:
    """
    Equation of time and solar declination from the NOAA series.

    Returns:
        (equation_of_time_minutes, declination_rad)
    """
    g = fractional_year_rad(instant)
    sin_g, cos_g = math.sin(g), math.cos(g)
    sin_2g, cos_2g = math.sin(2 * g), math.cos(2 * g)
    sin_3g, cos_3g = math.sin(3 * g), math.cos(3 * g)
    eot = 229.18 * (
        0.000075
        + 0.001868 * cos_g
        - 0.032077 * sin_g
        - 0.014615 * cos_2g
        - 0.040849 * sin_2g
    )
    decl = (
        0.006918
        - 0.399912 * cos_g
        + 0.070257 * sin_g
        - 0.006758 * cos_2g
        + 0.000907 * sin_2g
        - 0.002697 * cos_3g
        + 0.00148 * sin_3g
    )
    return eot, decl


def refraction_deg(altitude_deg: float) -> float:
    """
    Atmospheric refraction correction R(h), degrees in and out.

    Piecewise NOAA approximation: zero above 85°, tangent series down to
    5°, quartic down to -0.575°, cotangent tail below.
    """
    h = altitude_deg
    if h > 85.0:
        return 0.0
    if h > 5.0:
        inv_t = 1.0 / float(np.tan(np.radians(h)))
        return (58.1 * inv_t - 0.07 * inv_t**3 + 0.000086 * inv_t**5) / 3600.0
    if h > -0.575:
        return (1735.0 - 518.2 * h + 103.4 * h**2 - 12.79 * h**3 + 0.711 * h**4) / 3600.0
    return (-20.774 / float(np.tan(np.radians(h)))) / 3600.0


def apparent_altitude_deg(instant: datetime, lat_deg: float, lon_deg: float) -> float:
    """
    Apparent solar altitude including refraction.

    True solar time = UTC minutes + EoT + 4·longitude; the hour angle is
    TST/4 - 180°.

    Args:
        instant: Timezone-aware datetime.
        lat_deg: Observer latitude (degrees).
        lon_deg: Observer longitude, east positive (degrees).

    Returns:
        Apparent altitude in degrees.
    """
    utc = instant.astimezone(timezone.utc)
    utc_minutes = utc.hour * 60 + utc.minute + (utc.second + utc.microsecond / 1e6) / 60.0
    eot, decl = equation_of_time_and_declination(utc)
    true_solar_minutes = utc_minutes + eot + 4.0 * lon_deg
    omega = math.radians(true_solar_minutes / 4.0 - 180.0)
    phi = math.radians(lat_deg)

    cos_z = math.sin(phi) * math.sin(decl) + math.cos(phi) * math.cos(decl) * math.cos(omega)
    zenith = float(np.arccos(np.clip(cos_z, -1.0, 1.0)))
    true_alt_deg = 90.0 - math.degrees(zenith)
    return true_alt_deg + refraction_deg(true_alt_deg)


# ── Rise / transit / set ─────────────────────────────────────────

def _wrap_pi(angle: float) -> float:
    return (angle + math.pi) % _TWO_PI - math.pi


def _hour_angle_cos(h0: float, phi: float, dec: float) -> float:
    return (math.sin(h0) - math.sin(phi) * math.sin(dec)) / (math.cos(phi) * math.cos(dec))


def sun_times(
    day: date,
    lat_deg: float,
    lon_deg: float,
    tz: tzinfo | None = None,
) -> DayTimes:
    """
    Sunrise, solar noon, sunset and day length for a civil day.

    Evaluates the sun at local noon of the day, then derives transit,
    rise and set in closed form from the hour angle at -0.833°. If that
    hour angle does not exist the day is classified as polar day
    (always_up) or polar night (always_down), with no instants and
    zero daylight hours.

    Args:
        day: Calendar day.
        lat_deg: Observer latitude (degrees).
        lon_deg: Observer longitude, east positive (degrees).
        tz: Zone of the civil day; None means the system local zone.

    Returns:
        DayTimes for the day.
    """
    noon = local_instant(day, 12, tz)
    d = days_since_j2000(noon)
    lw = math.radians(-lon_deg)
    phi = math.radians(lat_deg)

    ecliptic_lon = _ecliptic_longitude(_solar_mean_anomaly(d))
    dec = _declination(ecliptic_lon)
    ra = _right_ascension(ecliptic_lon)

    h0 = math.radians(SolarConstants.SUNRISE_ALTITUDE)
    cos_h = _hour_angle_cos(h0, phi, dec)
    if not -1.0 <= cos_h <= 1.0:
        # below -1: even lower culmination clears h0
        always_up = cos_h < -1.0
        return DayTimes(
            sunrise=None,
            solar_noon=None,
            sunset=None,
            daylight_hours=0.0,
            always_up=always_up,
            always_down=not always_up,
        )

    half_day = float(np.arccos(cos_h))
    hour_angle_at_noon = _wrap_pi(_sidereal_time(d, lw) - ra)
    j_transit = JD_J2000 + d - hour_angle_at_noon / _TWO_PI
    j_rise = j_transit - half_day / _TWO_PI
    j_set = j_transit + half_day / _TWO_PI

    sunrise = from_julian(j_rise)
    sunset = from_julian(j_set)
    return DayTimes(
        sunrise=sunrise,
        solar_noon=from_julian(j_transit),
        sunset=sunset,
        daylight_hours=(sunset - sunrise) / timedelta(hours=1),
        always_up=False,
        always_down=False,
    )


def format_time(instant: datetime | None, tz: tzinfo | None = None) -> str:
    """Short wall-clock time (HH:MM) in tz, or the system zone; '--' for None."""
    if instant is None:
        return "--"
    return instant.astimezone(tz).strftime("%H:%M")
