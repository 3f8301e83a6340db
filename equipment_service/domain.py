# equipment_service/domain.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

@dataclass(frozen=True)
class EquipmentIdentity:
    """Primary key of an equipment row. Only positive integers are valid."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValueError(f"Equipment identity must be a positive integer, got {self.value!r}")

    def __str__(self):
        return f"EquipmentIdentity({self.value})"

@dataclass(frozen=True)
class Module:
    identity: EquipmentIdentity
    model: str
    manufacturer: str
    description: Optional[str]
    modified_date: datetime
    panel_kw_stc: float
    panel_kw_ptc: float
    panel_height_mm: float
    panel_width_mm: float
    panel_is_bipv_rated: Optional[bool]   # None = unknown
    power_temp_coefficient: float
    normal_operating_cell_temperature: float

@dataclass(frozen=True)
class Inverter:
    identity: EquipmentIdentity
    model: str
    manufacturer: str
    description: Optional[str]
    modified_date: datetime
    rating: Optional[float]
    inverter_efficiency: float
    inverter_output_voltage: Optional[float]
    inverter_is_three_phase: Optional[bool]

Equipment = Union[Module, Inverter]
