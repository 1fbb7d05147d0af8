# shipping_fees/tools/rate_quote_v2.py
from __future__ import annotations

from shipping_fees.errors import RateUnavailable, UnknownDiscountCode, UnknownZone
from shipping_fees.tools.rate_config import RateConfiguration
from shipping_fees.tools.rate_quote import round_money, validate_weight

INTERNATIONAL = "International"

def _base_fee(config: RateConfiguration, weight: float, zone: str) -> float:
    if zone == "Domestic":
        return config.domestic_base_rate + (weight * config.domestic_per_kg_rate)
    if zone == "Express":
        return config.express_base_rate + (weight * config.express_per_kg_rate)
    if zone == INTERNATIONAL:
        # Only a rate registered under the literal "International" key is reachable;
        # rates registered under country names are never looked up.
        rate = config.international_rates.get(zone)
        if rate is None:
            raise RateUnavailable(zone)
        return rate * weight
    raise UnknownZone(zone)

def compute_fee_v2(
    config: RateConfiguration,
    weight: float,
    zone: str,
    discount_code: str = "",
) -> float:
    """
    Configurable fee: base fee by zone, then insurance surcharge
    (weight strictly above the threshold), then discount, then rounding
    to cents. Insurance before discount; the order is part of the contract.
    """
    validate_weight(weight)
    fee = _base_fee(config, weight, zone)

    if weight > config.insurance_threshold:
        fee += fee * config.insurance_rate

    if discount_code:
        discount = config.volume_discounts.get(discount_code)
        if discount is None:
            raise UnknownDiscountCode(discount_code)
        fee = fee * (1 - discount)

    return round_money(fee)
