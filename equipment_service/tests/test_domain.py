import dataclasses

import pytest

from equipment_service.domain import EquipmentIdentity


def test_identity_equality_by_value():
    assert EquipmentIdentity(7) == EquipmentIdentity(7)
    assert EquipmentIdentity(7) != EquipmentIdentity(8)
    assert len({EquipmentIdentity(7), EquipmentIdentity(7)}) == 1


@pytest.mark.parametrize("value", [0, -1, "1", 1.0, True, None])
def test_identity_rejects_invalid_values(value):
    with pytest.raises(ValueError):
        EquipmentIdentity(value)


def test_identity_is_immutable():
    identity = EquipmentIdentity(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.value = 4
