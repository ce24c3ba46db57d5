"""Metric and imperial unit conversions.

Weights are stored in kilograms; imperial input is converted on the way in.
"""

from health_tracker.domain.enums import UnitSystem

KG_TO_LBS = 2.20462


def to_kg(weight: float, unit_system: UnitSystem) -> float:
    if unit_system is UnitSystem.IMPERIAL:
        return weight / KG_TO_LBS
    return weight
