"""Policy settings shared by every page, and the JSON store behind them.

Settings objects are never mutated in place: each helper returns a new
``PolicySettings`` so a computation always sees one consistent snapshot.
The stored blob carries ``SETTINGS_VERSION``; an older blob is thrown away
and defaults are used instead of trying to merge it.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, Field, ValidationError

from faculty_pay.baseline import HraConfig
from faculty_pay.benefits import Benefits
from faculty_pay.enforcement import PositionPremiumRange, PositionSalaryCap
from faculty_pay.pay_data import CityType, EnforcementMode, FinancialStrategy, MultiplierMethod

logger = logging.getLogger(__name__)

SETTINGS_VERSION = 7
SETTINGS_PATH_ENV = "FACULTY_PAY_SETTINGS_PATH"
DEFAULT_SETTINGS_PATH = Path.home() / ".faculty_pay" / "settings.json"

BENEFITS_SOURCES = ("position", "level", "global")

# widget bounds on the settings and calculator pages; the model enforces the same
BASE_MULTIPLIER_RANGE = (1.0, 3.0)
DA_PERCENT_RANGE = (0.0, 200.0)
FITMENT_FACTOR_RANGE = (1.0, 4.0)
EIGHTH_DA_PERCENT_RANGE = (0.0, 100.0)


def _benefits(housing):
    return Benefits(housing=housing, professional_dev=8333, ppf_percent=12, gratuity_percent=4.81,
                    health_insurance=1250)


def default_level_benefits():
    return {
        "10": _benefits(36250),
        "11": _benefits(36250),
        "12": _benefits(36250),
        "13A": _benefits(40417),
        "14": _benefits(54167),
        "15": _benefits(54167),
    }


def default_salary_caps():
    junior = dict(min_wpu_salary_annual=1500000, max_wpu_salary_annual=2300000)
    senior = dict(min_wpu_salary_annual=3200000, max_wpu_salary_annual=4200000)
    return {
        1: PositionSalaryCap(**junior),
        2: PositionSalaryCap(**junior),
        3: PositionSalaryCap(**junior),
        4: PositionSalaryCap(min_wpu_salary_annual=2200000, max_wpu_salary_annual=3200000),
        5: PositionSalaryCap(**senior),
        6: PositionSalaryCap(**senior),
    }


class PolicySettings(BaseModel):
    multiplier_method: MultiplierMethod = MultiplierMethod.METHOD_A
    base_multiplier: float = Field(default=1.3, ge=BASE_MULTIPLIER_RANGE[0], le=BASE_MULTIPLIER_RANGE[1])
    da_percentage: float = Field(default=58, ge=DA_PERCENT_RANGE[0], le=DA_PERCENT_RANGE[1])
    city_type: CityType = CityType.Y
    is_tpta_city: bool = False
    financial_strategy: FinancialStrategy = FinancialStrategy.MULTIPLIER
    annual_premium: int = Field(default=300000, ge=0)
    global_benefits: Benefits = Field(default_factory=lambda: _benefits(36250))
    level_benefits: Dict[str, Benefits] = Field(default_factory=default_level_benefits)
    position_benefits: Dict[int, Benefits] = Field(default_factory=dict)
    enforcement_mode: EnforcementMode = EnforcementMode.SOFT
    position_premium_ranges: Dict[int, PositionPremiumRange] = Field(default_factory=dict)
    position_salary_caps: Dict[int, PositionSalaryCap] = Field(default_factory=default_salary_caps)
    hra_config: HraConfig = Field(default_factory=HraConfig)
    eighth_cpc_fitment_factor: float = Field(
        default=2.28, ge=FITMENT_FACTOR_RANGE[0], le=FITMENT_FACTOR_RANGE[1]
    )
    eighth_cpc_da_percent: float = Field(
        default=0, ge=EIGHTH_DA_PERCENT_RANGE[0], le=EIGHTH_DA_PERCENT_RANGE[1]
    )


def update_settings(settings: PolicySettings, **changes) -> PolicySettings:
    # validate the merged result, model_copy(update=...) would skip validation
    merged = settings.model_dump()
    merged.update(changes)
    return PolicySettings.model_validate(merged)


def get_benefits_for_position(settings: PolicySettings, position_id, level) -> Benefits:
    if position_id in settings.position_benefits:
        return settings.position_benefits[position_id]
    if level in settings.level_benefits:
        return settings.level_benefits[level]
    return settings.global_benefits


def get_benefits_source(settings: PolicySettings, position_id, level):
    if position_id in settings.position_benefits:
        return "position"
    if level in settings.level_benefits:
        return "level"
    return "global"


def set_benefits_for_position(settings: PolicySettings, position_id, benefits: Benefits) -> PolicySettings:
    position_benefits = dict(settings.position_benefits)
    position_benefits[position_id] = benefits
    return settings.model_copy(update={"position_benefits": position_benefits})


def clear_position_benefits(settings: PolicySettings, position_id) -> PolicySettings:
    position_benefits = {k: v for k, v in settings.position_benefits.items() if k != position_id}
    return settings.model_copy(update={"position_benefits": position_benefits})


def set_premium_range(settings: PolicySettings, position_id, premium_range: PositionPremiumRange) -> PolicySettings:
    ranges = dict(settings.position_premium_ranges)
    ranges[position_id] = premium_range
    return settings.model_copy(update={"position_premium_ranges": ranges})


def set_salary_cap(settings: PolicySettings, position_id, salary_cap: PositionSalaryCap) -> PolicySettings:
    caps = dict(settings.position_salary_caps)
    caps[position_id] = salary_cap
    return settings.model_copy(update={"position_salary_caps": caps})


def settings_path_from_env():
    return Path(os.environ.get(SETTINGS_PATH_ENV, DEFAULT_SETTINGS_PATH))


class SettingsStore:
    """Version-gated JSON file holding one ``PolicySettings`` blob."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else settings_path_from_env()

    def load(self) -> PolicySettings:
        if not self.path.exists():
            return PolicySettings()
        try:
            blob = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable settings at %s (%s), using defaults", self.path, exc)
            return PolicySettings()

        version = blob.get("version", 0) if isinstance(blob, dict) else 0
        if not isinstance(version, int) or version < SETTINGS_VERSION:
            logger.warning(
                "Discarding settings version %s at %s, current version is %s",
                version, self.path, SETTINGS_VERSION,
            )
            self.path.unlink(missing_ok=True)
            return PolicySettings()

        try:
            return PolicySettings.model_validate(blob.get("settings") or {})
        except ValidationError as exc:
            logger.warning("Invalid settings at %s, using defaults: %s", self.path, exc)
            return PolicySettings()

    def save(self, settings: PolicySettings):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        blob = {"version": SETTINGS_VERSION, "settings": settings.model_dump(mode="json")}
        self.path.write_text(json.dumps(blob, indent=2), encoding="utf-8")
        logger.debug("Saved settings to %s", self.path)

    def reset(self) -> PolicySettings:
        self.path.unlink(missing_ok=True)
        return PolicySettings()
