# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Planet catalog and heliocentric distances.

Simplified orbital elements (base value + linear rate around J2000) and a
Newton-Raphson Kepler solver. Precision is adequate for brightness
modelling, not for navigation.
"""
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone

import numpy as np

logger = logging.getLogger(__name__)

# J2000.0 reference epoch (TT approximated by UTC)
J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

SECONDS_PER_DAY: float = 86400.0

KEPLER_MAX_ITERATIONS: int = 12
KEPLER_TOLERANCE_RAD: float = 1e-10


@dataclass(frozen=True)
class Planet:
    """A body of the fixed nine-planet catalog."""
    key: str
    name: str
    mean_distance_au: float


@dataclass(frozen=True)
class OrbitalElements:
    """Linearised heliocentric elements at J2000."""
    semi_major_axis_au: float
    base_eccentricity: float
    eccentricity_rate_per_day: float
    base_mean_anomaly_deg: float
    mean_motion_deg_per_day: float


PLANETS: tuple[Planet, ...] = (
    Planet("mercury", "Mercury", 0.387),
    Planet("venus", "Venus", 0.723),
    Planet("earth", "Earth", 1.0),
    Planet("mars", "Mars", 1.524),
    Planet("jupiter", "Jupiter", 5.203),
    Planet("saturn", "Saturn", 9.537),
    Planet("uranus", "Uranus", 19.191),
    Planet("neptune", "Neptune", 30.07),
    Planet("pluto", "Pluto", 39.48),  # dwarf, kept as the brightness anchor
)

_PLANETS_BY_KEY: dict[str, Planet] = {p.key: p for p in PLANETS}

ORBITAL_ELEMENTS: dict[str, OrbitalElements] = {
    "mercury": OrbitalElements(0.387098, 0.205635, 5.59e-10, 168.6562, 4.0923344368),
    "venus": OrbitalElements(0.72333, 0.006773, -1.302e-9, 48.0052, 1.6021302244),
    "earth": OrbitalElements(1.0, 0.016709, -1.151e-9, 356.047, 0.9856002585),
    "mars": OrbitalElements(1.523688, 0.093405, 2.516e-9, 18.6021, 0.5240207766),
    "jupiter": OrbitalElements(5.20256, 0.048498, 4.469e-9, 19.895, 0.0830853001),
    "saturn": OrbitalElements(9.55475, 0.055546, -9.499e-9, 316.967, 0.0334442282),
    "uranus": OrbitalElements(19.18171, 0.047318, 7.45e-9, 142.5905, 0.011725806),
    "neptune": OrbitalElements(30.05826, 0.008606, 2.15e-9, 260.2471, 0.005995147),
    # coarse, sufficient for distance modulation
    "pluto": OrbitalElements(39.48168677, 0.24880766, 0.0, 14.53, 0.00396),
}


def _normalize_key(planet_key: str) -> str:
    return planet_key.strip().lower()


def get_planet(planet_key: str) -> Planet:
    """
    Look up a planet by key (case-insensitive).

    Raises:
        ValueError: If the key is not in the catalog.
    """
    planet = _PLANETS_BY_KEY.get(_normalize_key(planet_key))
    if planet is None:
        known = ", ".join(_PLANETS_BY_KEY)
        raise ValueError(f"Unknown planet {planet_key!r}; expected one of: {known}")
    return planet


def mean_distance_au(planet_key: str) -> float | None:
    """Catalog mean distance in AU, or None for an unknown key."""
    planet = _PLANETS_BY_KEY.get(_normalize_key(planet_key))
    return planet.mean_distance_au if planet is not None else None


def days_since_j2000(instant: datetime) -> float:
    """Signed days since J2000.0 (negative before the epoch)."""
    return (instant - J2000).total_seconds() / SECONDS_PER_DAY


def solve_kepler(
    mean_anomaly_rad: float,
    eccentricity: float,
    initial_guess: float | None = None,
) -> float:
    """
    Solve Kepler's equation E - e·sin(E) = M by Newton-Raphson.

    Seeds with E0 = M unless an initial guess is given. Stops after
    KEPLER_MAX_ITERATIONS or once the correction drops below
    KEPLER_TOLERANCE_RAD. M is not normalised; wraparound is left to
    sin/cos.

    Args:
        mean_anomaly_rad: Mean anomaly (radians).
        eccentricity: Orbital eccentricity, 0 <= e < 1.
        initial_guess: Optional starting eccentric anomaly (radians).

    Returns:
        Eccentric anomaly E in radians.
    """
    e = eccentricity
    ecc_anomaly = mean_anomaly_rad if initial_guess is None else initial_guess
    for _ in range(KEPLER_MAX_ITERATIONS):
        correction = (mean_anomaly_rad - ecc_anomaly + e * float(np.sin(ecc_anomaly))) / (
            1.0 - e * float(np.cos(ecc_anomaly))
        )
        ecc_anomaly += correction
        if abs(correction) < KEPLER_TOLERANCE_RAD:
            break
    return ecc_anomaly


def heliocentric_distance_au(
    planet_key: str,
    instant: datetime | None = None,
) -> float | None:
    """
    Heliocentric distance of a planet at an instant.

    r = a·(1 - e·cos E), with e and M extrapolated linearly from J2000.

    Args:
        planet_key: Catalog key (case-insensitive).
        instant: UTC datetime; defaults to now.

    Returns:
        Distance in AU, or None if the key is unknown.
    """
    elements = ORBITAL_ELEMENTS.get(_normalize_key(planet_key))
    if elements is None:
        return None
    if instant is None:
        instant = datetime.now(tz=timezone.utc)

    d = days_since_j2000(instant)
    e = elements.base_eccentricity + elements.eccentricity_rate_per_day * d
    mean_anomaly_deg = elements.base_mean_anomaly_deg + elements.mean_motion_deg_per_day * d
    ecc_anomaly = solve_kepler(math.radians(mean_anomaly_deg), e)
    return elements.semi_major_axis_au * (1.0 - e * float(np.cos(ecc_anomaly)))


def distance_or_mean_au(planet_key: str, instant: datetime | None = None) -> float:
    """
    Heliocentric distance, falling back to the catalog mean, then 1 AU.

    Fallbacks are logged; callers get a usable distance either way.
    """
    r = heliocentric_distance_au(planet_key, instant)
    if r:
        return r
    fallback = mean_distance_au(planet_key) or 1.0
    logger.warning(
        "No orbital elements for planet %r, using fallback distance %.3f AU",
        planet_key, fallback,
    )
    return fallback
