"""Turn houses into heat pump quotes: heat loss, pump sizing and VAT-inclusive cost."""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, Sequence

from heatquote.config import DEFAULT_HEAT_LOSS, DEFAULT_VAT_RATE
from heatquote.models import CostItem, HeatPump, House, Quote

logger = logging.getLogger(__name__)

# location -> degree-days, or None when weather data is unavailable
DegreeDaysLookup = Callable[[str], float | None]


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero, using the decimal text of `value`."""
    return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def heat_loss(house: House) -> float:
    return round2(house.floor_area * house.heating_factor * house.insulation_factor)


def select_heat_pump(pumps: Iterable[HeatPump], power_heat_loss: float) -> HeatPump | None:
    """Smallest-capacity pump that covers `power_heat_loss`; catalog order breaks ties."""
    for pump in sorted(pumps, key=lambda p: p.output_capacity):
        if pump.output_capacity >= power_heat_loss:
            return pump
    return None


def total_cost_with_vat(costs: Iterable[CostItem], vat_rate: float = DEFAULT_VAT_RATE) -> float:
    return round2(sum(item.cost for item in costs) * (1 + vat_rate))


def quote_house(
    house: House,
    pumps: Sequence[HeatPump],
    degree_days: float | None,
    *,
    vat_rate: float = DEFAULT_VAT_RATE,
) -> Quote:
    loss = heat_loss(house)
    if degree_days is not None and not math.isfinite(loss / degree_days):
        logger.warning(
            "Degree-days %r for %s give a non-finite power heat loss", degree_days, house.design_region
        )
        degree_days = None

    if degree_days is None:
        return Quote(
            submission_id=house.submission_id,
            estimated_heat_loss=DEFAULT_HEAT_LOSS,
            warning=f"Could not fetch weather data for {house.design_region}",
        )

    power_heat_loss = round2(loss / degree_days)
    pump = select_heat_pump(pumps, power_heat_loss)
    if pump is None:
        logger.info(
            "No heat pump covers %s (power heat loss %s)", house.submission_id, power_heat_loss
        )
        return Quote(
            submission_id=house.submission_id,
            estimated_heat_loss=loss,
            design_region=house.design_region,
            power_heat_loss=power_heat_loss,
        )

    return Quote(
        submission_id=house.submission_id,
        estimated_heat_loss=loss,
        design_region=house.design_region,
        power_heat_loss=power_heat_loss,
        recommended_heat_pump=pump.label,
        cost_breakdown=tuple(pump.costs),
        total_cost_with_vat=total_cost_with_vat(pump.costs, vat_rate),
    )


def generate_quotes(
    houses: Iterable[House],
    pumps: Sequence[HeatPump],
    fetch_degree_days: DegreeDaysLookup,
    *,
    vat_rate: float = DEFAULT_VAT_RATE,
) -> list[Quote]:
    """One quote per house, in input order. Houses are fetched one at a time."""
    quotes = []
    for house in houses:
        degree_days = fetch_degree_days(house.design_region)
        quotes.append(quote_house(house, pumps, degree_days, vat_rate=vat_rate))
    logger.info("Generated %s quotes", len(quotes))
    return quotes
