# equipment_service/decoder.py
"""
Decoding of joined equipment rows into Module / Inverter entities.

A single `equipment` table holds both kinds of equipment. Which one a row
represents is decided here and nowhere else, from the discriminator name and
the pattern of null columns.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple, Optional, Sequence, Union

from .domain import EquipmentIdentity, Inverter, Module

MODULE_TYPE = "module"
INVERTER_TYPE = "inverter"

class RawEquipmentRow(NamedTuple):
    id: int
    equipment_type_name: str
    model: str
    manufacturer_name: str
    description: Optional[str]
    modified_date: datetime
    panel_kw_stc: Optional[float]
    panel_kw_ptc: Optional[float]
    panel_height_mm: Optional[float]
    panel_width_mm: Optional[float]
    panel_is_bipv_rated: Optional[bool]
    power_temp_coefficient: Optional[float]
    normal_operating_cell_temperature: Optional[float]
    rating: Optional[float]
    inverter_efficiency: Optional[float]
    inverter_output_voltage: Optional[float]
    inverter_is_three_phase: Optional[bool]

@dataclass(frozen=True)
class UnrecognizedShape:
    """The row matched neither the module nor the inverter column pattern."""
    raw: tuple

    def __str__(self):
        return f"Unable to map result: {self.raw!r}"

DecodeResult = Union[Module, Inverter, UnrecognizedShape]

_MODULE_REQUIRED = (
    "panel_kw_stc",
    "panel_kw_ptc",
    "panel_height_mm",
    "panel_width_mm",
    "power_temp_coefficient",
    "normal_operating_cell_temperature",
)
_MODULE_EXCLUDED = ("rating", "inverter_efficiency", "inverter_output_voltage")

# panel_is_bipv_rated, power_temp_coefficient and normal_operating_cell_temperature
# are sometimes stuffed with marker values (false, 0) on inverter rows instead of
# null, so only the panel dimension/power columns must be null.
_INVERTER_EXCLUDED = ("panel_kw_stc", "panel_kw_ptc", "panel_height_mm", "panel_width_mm")

def _all_present(row: RawEquipmentRow, names) -> bool:
    return all(getattr(row, n) is not None for n in names)

def _all_absent(row: RawEquipmentRow, names) -> bool:
    return all(getattr(row, n) is None for n in names)

def decode(raw: Sequence) -> DecodeResult:
    """
    Map a raw 17-column result tuple to a Module or Inverter.

    Never raises for a malformed row: anything that is not exactly one of the
    two known shapes comes back as UnrecognizedShape carrying the raw tuple.
    """
    raw = tuple(raw)
    if len(raw) != len(RawEquipmentRow._fields):
        return UnrecognizedShape(raw)
    row = RawEquipmentRow._make(raw)

    try:
        identity = EquipmentIdentity(row.id)
    except ValueError:
        return UnrecognizedShape(raw)

    if (row.equipment_type_name == MODULE_TYPE
            and _all_present(row, _MODULE_REQUIRED)
            and _all_absent(row, _MODULE_EXCLUDED)):
        return Module(
            identity=identity,
            model=row.model,
            manufacturer=row.manufacturer_name,
            description=row.description,
            modified_date=row.modified_date,
            panel_kw_stc=row.panel_kw_stc,
            panel_kw_ptc=row.panel_kw_ptc,
            panel_height_mm=row.panel_height_mm,
            panel_width_mm=row.panel_width_mm,
            panel_is_bipv_rated=row.panel_is_bipv_rated,
            power_temp_coefficient=row.power_temp_coefficient,
            normal_operating_cell_temperature=row.normal_operating_cell_temperature,
        )

    if (row.equipment_type_name == INVERTER_TYPE
            and _all_absent(row, _INVERTER_EXCLUDED)
            and row.inverter_efficiency is not None):
        # TODO: rating/output voltage/three phase can hold marker 0/false instead of
        # null; passed through untouched until product decides how to tell them apart.
        return Inverter(
            identity=identity,
            model=row.model,
            manufacturer=row.manufacturer_name,
            description=row.description,
            modified_date=row.modified_date,
            rating=row.rating,
            inverter_efficiency=row.inverter_efficiency,
            inverter_output_voltage=row.inverter_output_voltage,
            inverter_is_three_phase=row.inverter_is_three_phase,
        )

    return UnrecognizedShape(raw)

def is_failure(result: DecodeResult) -> bool:
    return isinstance(result, UnrecognizedShape)
