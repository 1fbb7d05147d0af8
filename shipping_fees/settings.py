# shipping_fees/settings.py
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # rate defaults for new RateConfiguration instances
    domestic_base_rate: float = Field(5.0, ge=0)
    domestic_per_kg_rate: float = Field(1.0, ge=0)
    express_base_rate: float = Field(30.0, ge=0)
    express_per_kg_rate: float = Field(5.0, ge=0)
    volume_discounts: Dict[str, float] = {"SUMMER10": 0.10, "BULK20": 0.20}
    insurance_threshold: float = Field(20.0, ge=0)
    insurance_rate: float = Field(0.05, ge=0)

    # user repository
    database_url: str = "sqlite+pysqlite:///:memory:"
    database_echo: bool = False

    # NOTE: extra="ignore" avoids validation errors if stray keys appear in .env
    model_config = SettingsConfigDict(
        env_prefix="SHIPPING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("volume_discounts")
    @classmethod
    def _discounts_in_open_interval(cls, v: Dict[str, float]) -> Dict[str, float]:
        for code, pct in v.items():
            if not (0 < pct < 1):
                raise ValueError(f"discount {code!r} must be between 0 and 1 (exclusive), got {pct}")
        return v

settings = Settings()
