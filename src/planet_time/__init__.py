"""
Planet Time

When is daylight on Earth as dim as noon on another planet? Computes
heliocentric planet distances (Kepler's equation), an inverse-square
brightness to solar-altitude mapping anchored at "Pluto time", the
apparent solar altitude with refraction, sunrise/solar noon/sunset, and
the morning and evening instants a planet's target altitude is crossed.
"""

from planet_time.domain.planets import (
    J2000,
    Planet,
    OrbitalElements,
    PLANETS,
    ORBITAL_ELEMENTS,
    get_planet,
    mean_distance_au,
    days_since_j2000,
    solve_kepler,
    heliocentric_distance_au,
    distance_or_mean_au,
)
from planet_time.domain.illuminance import (
    IlluminanceConstants,
    irradiance_scale,
    earth_illuminance_lux,
    altitude_for_illuminance,
    target_altitude_for_relative_brightness,
    target_altitude_for_planet,
    target_altitude_for_planet_key,
    planet_time_altitude_deg,
)
from planet_time.domain.observer import (
    GeoCoordinate,
    local_instant,
    civil_day_start,
)
from planet_time.domain.solar import (
    SolarConstants,
    SolarSnapshot,
    DayTimes,
    to_julian,
    from_julian,
    julian_centuries_j2000,
    solar_position,
    equation_of_time_and_declination,
    refraction_deg,
    apparent_altitude_deg,
    sun_times,
    format_time,
)
from planet_time.domain.crossings import (
    find_crossings,
    find_apparent_altitude_crossings,
    find_elevation_crossings,
    find_illuminance_crossings,
)
from planet_time.domain.planet_time import (
    PlanetTimeline,
    planet_timeline,
    next_planet_time,
    format_duration,
    format_duration_long,
    seconds_until,
)

__all__ = [
    "J2000",
    "Planet",
    "OrbitalElements",
    "PLANETS",
    "ORBITAL_ELEMENTS",
    "get_planet",
    "mean_distance_au",
    "days_since_j2000",
    "solve_kepler",
    "heliocentric_distance_au",
    "distance_or_mean_au",
    "IlluminanceConstants",
    "irradiance_scale",
    "earth_illuminance_lux",
    "altitude_for_illuminance",
    "target_altitude_for_relative_brightness",
    "target_altitude_for_planet",
    "target_altitude_for_planet_key",
    "planet_time_altitude_deg",
    "GeoCoordinate",
    "local_instant",
    "civil_day_start",
    "SolarConstants",
    "SolarSnapshot",
    "DayTimes",
    "to_julian",
    "from_julian",
    "julian_centuries_j2000",
    "solar_position",
    "equation_of_time_and_declination",
    "refraction_deg",
    "apparent_altitude_deg",
    "sun_times",
    "format_time",
    "find_crossings",
    "find_apparent_altitude_crossings",
    "find_elevation_crossings",
    "find_illuminance_crossings",
    "PlanetTimeline",
    "planet_timeline",
    "next_planet_time",
    "format_duration",
    "format_duration_long",
    "seconds_until",
]
