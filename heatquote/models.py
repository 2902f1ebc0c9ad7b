"""Records passed between catalog, quote engine and formatter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class House:
    submission_id: str
    floor_area: float
    heating_factor: float
    insulation_factor: float
    design_region: str
    age: str | None = None


@dataclass(frozen=True)
class CostItem:
    label: str
    cost: float


@dataclass(frozen=True)
class HeatPump:
    label: str
    output_capacity: float
    costs: tuple[CostItem, ...] = ()


@dataclass(frozen=True)
class Quote:
    """
    One quote per house. With a warning set only `estimated_heat_loss` (the
    fallback value) accompanies it; the pump fields are either all set or all None.
    """

    submission_id: str
    estimated_heat_loss: float
    design_region: str | None = None
    power_heat_loss: float | None = None
    recommended_heat_pump: str | None = None
    cost_breakdown: tuple[CostItem, ...] | None = None
    total_cost_with_vat: float | None = None
    warning: str | None = None
