# equipment_service/serialize.py
"""
Siren hypermedia representation of equipment entities.
"""
from .domain import Inverter, Module

def _common_properties(entity) -> dict:
    return {
        "id": entity.identity.value,
        "model": entity.model,
        "manufacturer": entity.manufacturer,
        "description": entity.description,
        "modifiedDate": entity.modified_date.isoformat(),
    }

def module_properties(module: Module) -> dict:
    props = _common_properties(module)
    props.update({
        "panelKwStc": module.panel_kw_stc,
        "panelKwPtc": module.panel_kw_ptc,
        "panelHeightMm": module.panel_height_mm,
        "panelWidthMm": module.panel_width_mm,
        "panelIsBipvRated": module.panel_is_bipv_rated,
        "powerTempCoefficient": module.power_temp_coefficient,
        "normalOperatingCellTemperature": module.normal_operating_cell_temperature,
    })
    return props

def inverter_properties(inverter: Inverter) -> dict:
    props = _common_properties(inverter)
    props.update({
        "rating": inverter.rating,
        "inverterEfficiency": inverter.inverter_efficiency,
        "inverterOutputVoltage": inverter.inverter_output_voltage,
        "inverterIsThreePhase": inverter.inverter_is_three_phase,
    })
    return props

def to_siren(entity) -> dict:
    if isinstance(entity, Module):
        kind, props = "module", module_properties(entity)
    elif isinstance(entity, Inverter):
        kind, props = "inverter", inverter_properties(entity)
    else:
        raise TypeError(f"Not an equipment entity: {entity!r}")
    return {
        "class": [kind, "equipment"],
        "properties": props,
        "links": [{"rel": ["self"], "href": f"/equipment/{entity.identity.value}"}],
    }
