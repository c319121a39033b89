# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Clear-sky illuminance model and planet brightness equivalence.

Maps solar altitude to horizontal illuminance on Earth (and back), and
maps a planet's inverse-square noon brightness to the Earth solar
altitude with the same brightness. Pluto's mean-distance noon is
anchored at -1.5° ("Pluto time").
"""
import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from planet_time.domain.planets import distance_or_mean_au, heliocentric_distance_au


@dataclass(frozen=True)
class _IlluminanceConstants:
    """Empirical clear-sky illuminance and brightness-mapping constants."""
    EARTH_NOON_LUX: float = 120_000.0      # lux, clear-sky horizontal, sun high
    DAYTIME_EXPONENT: float = 1.25         # softens sin(h) falloff
    TWILIGHT_HORIZON_LUX: float = 400.0    # lux at altitude 0° (twilight branch)
    TWILIGHT_DECAY_DEG: float = 1.257      # e-fold; ~3.4 lux at -6°
    PLUTO_REFERENCE_AU: float = 39.48      # Pluto mean distance
    PLUTO_ANCHOR_DEG: float = -1.5         # "Pluto time" altitude
    DEG_PER_DECADE: float = 1.5            # target shift per 10× brightness
    MIN_TARGET_DEG: float = -18.0
    MAX_TARGET_DEG: float = 30.0
    # Application timeline mapping (slope derived from the model itself)
    PLANET_TIME_MIN_DEG: float = -18.0
    PLANET_TIME_MAX_DEG: float = 85.0
    CIVIL_TWILIGHT_END_DEG: float = -6.0
    CIVIL_TWILIGHT_END_LUX: float = 400.0


IlluminanceConstants: _IlluminanceConstants = _IlluminanceConstants()


def irradiance_scale(distance_au: float) -> float:
    """Irradiance relative to 1 AU (inverse-square law). 0 AU gives inf."""
    if distance_au == 0:
        return math.inf
    return 1.0 / (distance_au * distance_au)


def earth_illuminance_lux(altitude_rad: float) -> float:
    """
    Approximate global horizontal illuminance for a solar altitude.

    Daytime (h >= 0°): E = 120000 · sin(h)^1.25.
    Twilight (h < 0°): E = 400 · exp(h_deg / 1.257).

    The branches do not meet at 0° (0 lux from above, 400 lux from below).

    Args:
        altitude_rad: Solar altitude (radians).

    Returns:
        Illuminance in lux.
    """
    c = IlluminanceConstants
    alt_deg = float(np.degrees(altitude_rad))
    if alt_deg >= 0:
        s = max(0.0, float(np.sin(altitude_rad)))
        return c.EARTH_NOON_LUX * s ** c.DAYTIME_EXPONENT
    return c.TWILIGHT_HORIZON_LUX * math.exp(alt_deg / c.TWILIGHT_DECAY_DEG)


def altitude_for_illuminance(target_lux: float | None) -> float | None:
    """
    Invert the illuminance model to a solar altitude in degrees.

    Below the horizon value (400 lux) the twilight branch is used,
    otherwise the daytime branch. Returns -90 for non-positive lux and
    None for missing or non-finite input.
    """
    c = IlluminanceConstants
    if target_lux is None or not math.isfinite(target_lux):
        return None
    if target_lux <= 0:
        return -90.0
    if target_lux < c.TWILIGHT_HORIZON_LUX:
        return c.TWILIGHT_DECAY_DEG * math.log(target_lux / c.TWILIGHT_HORIZON_LUX)
    ratio = min(1.0, target_lux / c.EARTH_NOON_LUX)
    s = ratio ** (1.0 / c.DAYTIME_EXPONENT)
    return float(np.degrees(np.arcsin(max(0.0, min(1.0, s)))))


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def target_altitude_for_relative_brightness(relative_illuminance: float) -> float:
    """
    Earth solar altitude matching a brightness relative to Earth noon.

    alpha = -1.5 + 1.5 · log10(S / S_pluto), clamped to [-18°, 30°],
    where S_pluto is Pluto's mean-distance noon brightness.
    """
    c = IlluminanceConstants
    s_pluto = irradiance_scale(c.PLUTO_REFERENCE_AU)
    ratio = max(1e-9, relative_illuminance / s_pluto)
    alpha = c.PLUTO_ANCHOR_DEG + c.DEG_PER_DECADE * math.log10(ratio)
    return _clamp(alpha, c.MIN_TARGET_DEG, c.MAX_TARGET_DEG)


def target_altitude_for_planet(distance_au: float) -> float:
    """Target Earth solar altitude (degrees) for a planet at distance_au."""
    return target_altitude_for_relative_brightness(irradiance_scale(distance_au))


def target_altitude_for_planet_key(
    planet_key: str,
    instant: datetime | None = None,
) -> float:
    """
    Target altitude for a planet at its current heliocentric distance.

    Unknown keys fall back to the catalog mean distance, then 1 AU.
    """
    return target_altitude_for_planet(distance_or_mean_au(planet_key, instant))


def planet_time_slope_deg_per_decade() -> float:
    """Altitude change per decade of illuminance, from the model's 0° → -6° span."""
    c = IlluminanceConstants
    return (c.CIVIL_TWILIGHT_END_DEG - 0.0) / (
        math.log10(c.CIVIL_TWILIGHT_END_LUX) - math.log10(c.EARTH_NOON_LUX)
    )


def planet_time_altitude_deg(
    planet_key: str,
    instant: datetime | None = None,
) -> float | None:
    """
    Target apparent altitude used for the daily planet timeline.

    Pluto at its current distance is pinned to -1.5°. Other planets are
    offset from it by the log10 ratio of their noon illuminance, using
    the slope of the illuminance model between 0° and -6°. Clamped to
    [-18°, 85°]. Earth has no planet time and yields None.

    Args:
        planet_key: Catalog key (case-insensitive).
        instant: UTC datetime for the orbital positions; defaults to now.

    Returns:
        Target altitude in degrees, or None for Earth.
    """
    c = IlluminanceConstants
    key = planet_key.strip().lower()
    if key == "earth":
        return None
    r = heliocentric_distance_au(key, instant) or 1.0
    r_pluto = heliocentric_distance_au("pluto", instant) or c.PLUTO_REFERENCE_AU
    lux_planet = c.EARTH_NOON_LUX * irradiance_scale(r)
    lux_pluto = c.EARTH_NOON_LUX * irradiance_scale(r_pluto)
    delta = planet_time_slope_deg_per_decade() * (
        math.log10(lux_planet) - math.log10(lux_pluto)
    )
    return _clamp(c.PLUTO_ANCHOR_DEG + delta, c.PLANET_TIME_MIN_DEG, c.PLANET_TIME_MAX_DEG)
