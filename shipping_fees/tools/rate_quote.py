# shipping_fees/tools/rate_quote.py
from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Tuple

from shipping_fees.errors import InvalidWeight, UnknownZone, ZoneNotImplemented

# Fixed legacy rate table: (base fee, per kg).
ZONE_BASE: Dict[str, Tuple[float, float]] = {
    "Domestic": (5.0, 1.0),
    "Express":  (30.0, 5.0),
}

MAX_WEIGHT_KG = 50.0

def validate_weight(weight: float) -> float:
    """Accept 0 < weight <= 50 kg. NaN fails the comparison and is rejected too."""
    if not (0 < weight <= MAX_WEIGHT_KG):
        raise InvalidWeight(weight)
    return weight

def round_money(amount: float) -> float:
    """
    Round to cents, half away from zero, on amount * 100.
    Decimal(float) is exact, so ties are decided on the true binary value.
    """
    scaled = amount * 100
    # at 2**52 and above every float is already whole; inf and NaN pass through
    if not math.isfinite(scaled) or abs(scaled) >= 2**52:
        return scaled / 100
    cents = Decimal(scaled).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents) / 100

def compute_fee(weight: float, zone: str) -> float:
    """
    Legacy fixed-rate fee. No rounding, raw float result.
    Zones are matched exactly (case-sensitive).
    """
    validate_weight(weight)

    if zone == "International":
        raise ZoneNotImplemented(zone)
    if zone not in ZONE_BASE:
        raise UnknownZone(zone)

    base, per_kg = ZONE_BASE[zone]
    return base + (weight * per_kg)
