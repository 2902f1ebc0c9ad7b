"""Load the static house and heat pump tables from JSON files."""

import json
import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from heatquote.models import CostItem, HeatPump, House

logger = logging.getLogger(__name__)

Number = Annotated[float, Field(strict=True, allow_inf_nan=False)]
Text = Annotated[str, Field(strict=True, min_length=1)]


class CatalogError(ValueError):
    """Reference data is missing a field or holds a value of the wrong type."""


class _Row(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class HouseRow(_Row):
    """One entry of houses.json."""

    submission_id: Text = Field(alias="submissionId")
    floor_area: Number = Field(alias="floorArea")
    heating_factor: Number = Field(alias="heatingFactor")
    insulation_factor: Number = Field(alias="insulationFactor")
    design_region: Text = Field(alias="designRegion")
    age: str | None = None

    def to_house(self) -> House:
        return House(
            submission_id=self.submission_id,
            floor_area=self.floor_area,
            heating_factor=self.heating_factor,
            insulation_factor=self.insulation_factor,
            design_region=self.design_region,
            age=self.age,
        )


class CostRow(_Row):
    label: Text
    cost: Number


class HeatPumpRow(_Row):
    """One entry of heat-pumps.json; `costs` keeps file order."""

    label: Text
    output_capacity: Number = Field(alias="outputCapacity")
    costs: list[CostRow] = []

    def to_heat_pump(self) -> HeatPump:
        return HeatPump(
            label=self.label,
            output_capacity=self.output_capacity,
            costs=tuple(CostItem(label=c.label, cost=c.cost) for c in self.costs),
        )


_houses_adapter = TypeAdapter(list[HouseRow])
_heat_pumps_adapter = TypeAdapter(list[HeatPumpRow])


def parse_houses(data: Any) -> list[House]:
    try:
        rows = _houses_adapter.validate_python(data)
    except ValidationError as e:
        raise CatalogError(f"houses: {e}") from e

    seen = set()
    for i, row in enumerate(rows):
        if row.submission_id in seen:
            raise CatalogError(f"houses[{i}]: duplicate submissionId {row.submission_id!r}")
        seen.add(row.submission_id)
    return [row.to_house() for row in rows]


def parse_heat_pumps(data: Any) -> list[HeatPump]:
    try:
        rows = _heat_pumps_adapter.validate_python(data)
    except ValidationError as e:
        raise CatalogError(f"heat pumps: {e}") from e
    return [row.to_heat_pump() for row in rows]


def _read_json(path: Path) -> Any:
    try:
        with Path(path).open(encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as e:
        raise CatalogError(f"{path}: invalid JSON ({e})") from e


def load_houses(path: Path) -> list[House]:
    houses = parse_houses(_read_json(path))
    logger.info("Loaded %s houses from %s", len(houses), path)
    return houses


def load_heat_pumps(path: Path) -> list[HeatPump]:
    pumps = parse_heat_pumps(_read_json(path))
    logger.info("Loaded %s heat pumps from %s", len(pumps), path)
    return pumps
