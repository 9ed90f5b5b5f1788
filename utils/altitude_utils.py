"""
Altitude rounding rules for VFR and IFR traffic
"""
import math

from models.aircraft_type import FlightRule
from utils.constants import (
    VFR_MIN_ALTITUDE, VFR_MAX_ALTITUDE, IFR_MIN_ALTITUDE, IFR_MAX_ALTITUDE, TRANSITION_LEVEL
)


def _round_to(value: float, step: int, offset: int = 0) -> int:
    """Round to the nearest value of the form offset + k * step (halves round up)"""
    return int(math.floor((value - offset) / step + 0.5)) * step + offset


def round_vfr_altitude(altitude: float, minimum: int = VFR_MIN_ALTITUDE,
                       maximum: int = VFR_MAX_ALTITUDE) -> int:
    """
    Round to the nearest VFR cruising altitude (thousands + 500 ft)

    The result stays inside [minimum, maximum] when that range holds a VFR altitude,
    and always inside the global VFR band.
    """
    low = max(minimum, VFR_MIN_ALTITUDE)
    high = min(maximum, VFR_MAX_ALTITUDE)
    grid_low = int(math.ceil((low - 500) / 1000)) * 1000 + 500
    grid_high = int(math.floor((high - 500) / 1000)) * 1000 + 500

    if grid_low > grid_high:
        # Envelope too narrow to hold a VFR level, use the closest one in the global band
        grid_low, grid_high = VFR_MIN_ALTITUDE, VFR_MAX_ALTITUDE

    value = _round_to(altitude, 1000, 500)
    return min(max(value, grid_low), grid_high)


def round_ifr_altitude(altitude: float, minimum: int = IFR_MIN_ALTITUDE,
                       maximum: int = IFR_MAX_ALTITUDE) -> int:
    """
    Round to the nearest IFR level

    Below the transition level altitudes are whole thousands, at or above it
    they are flight levels in hundreds of feet.
    """
    altitude = min(max(altitude, minimum), maximum)

    value = _round_to(altitude, 1000)
    if value >= TRANSITION_LEVEL:
        value = max(_round_to(altitude, 100), TRANSITION_LEVEL)
        step = 100
    else:
        step = 1000

    if value > maximum:
        value -= step
    elif value < minimum:
        value += step
    return value


def round_altitude(altitude: float, flight_rule: FlightRule, minimum: int = None, maximum: int = None) -> int:
    """Round an altitude with the rule that applies to the given flight rules"""
    if flight_rule == FlightRule.VFR:
        return round_vfr_altitude(
            altitude,
            VFR_MIN_ALTITUDE if minimum is None else minimum,
            VFR_MAX_ALTITUDE if maximum is None else maximum
        )
    return round_ifr_altitude(
        altitude,
        IFR_MIN_ALTITUDE if minimum is None else minimum,
        IFR_MAX_ALTITUDE if maximum is None else maximum
    )


def is_valid_altitude(altitude: int, flight_rule: FlightRule) -> bool:
    """Check an altitude against the rounding rule of the given flight rules"""
    if flight_rule == FlightRule.VFR:
        return VFR_MIN_ALTITUDE <= altitude <= VFR_MAX_ALTITUDE and altitude % 1000 == 500
    if altitude < TRANSITION_LEVEL:
        return altitude > 0 and altitude % 1000 == 0
    return altitude % 100 == 0
