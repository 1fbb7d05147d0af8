# shipping_fees/tools/rate_config.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from shipping_fees.errors import InvalidDiscountPercentage
from shipping_fees.settings import Settings, settings as default_settings

log = logging.getLogger(__name__)

@dataclass
class RateConfiguration:
    """
    Tunable parameters for compute_fee_v2.
    Plain mutable struct: share it read-only across computations, and
    serialize mutation externally if several threads touch it.
    Default values live in Settings; build instances with new_rate_configuration().
    """
    domestic_base_rate: float
    domestic_per_kg_rate: float
    express_base_rate: float
    express_per_kg_rate: float
    volume_discounts: Dict[str, float]
    insurance_threshold: float
    insurance_rate: float
    international_rates: Dict[str, float] = field(default_factory=dict)


def new_rate_configuration(settings: Optional[Settings] = None) -> RateConfiguration:
    """Fresh configuration seeded from settings; dicts are copied, never shared."""
    s = settings or default_settings
    return RateConfiguration(
        domestic_base_rate=s.domestic_base_rate,
        domestic_per_kg_rate=s.domestic_per_kg_rate,
        express_base_rate=s.express_base_rate,
        express_per_kg_rate=s.express_per_kg_rate,
        international_rates={},
        volume_discounts=dict(s.volume_discounts),
        insurance_threshold=s.insurance_threshold,
        insurance_rate=s.insurance_rate,
    )


def register_international_rate(config: RateConfiguration, zone: str, rate_per_kg: float) -> None:
    # unconditional insert/overwrite, last write wins
    config.international_rates[zone] = rate_per_kg
    log.info(f"International rate set: zone={zone} rate_per_kg={rate_per_kg}")


def add_discount_code(config: RateConfiguration, code: str, percentage: float) -> None:
    """Insert or overwrite a discount code. percentage must lie strictly in (0, 1)."""
    if not (0 < percentage < 1):
        raise InvalidDiscountPercentage(percentage)
    config.volume_discounts[code] = percentage
    log.info(f"Discount code set: code={code} percentage={percentage}")
