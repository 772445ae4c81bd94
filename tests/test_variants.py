import dataclasses

import pytest

from runedrakraft.model.catalog import DUSKWHISPER, FROSTSHRIEK, QUANTUM, CryoProtocol, FrostMatrix
from runedrakraft.model.parameters import ParameterSet
from runedrakraft.model.variants import Bounds, Intensity, get_variant, list_keys, register_variant


def test_builtin_variants_are_registered():
    assert list_keys() == ["frostshriek", "duskwhisper", "quantum"]
    assert get_variant("quantum") is QUANTUM


def test_unknown_variant():
    with pytest.raises(KeyError):
        get_variant("jewelcrest")


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError):
        register_variant(FROSTSHRIEK)


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        register_variant(dataclasses.replace(FROSTSHRIEK, key=""))


@pytest.mark.parametrize("variant, multipliers", [
    (FROSTSHRIEK, (0.7, 1.0, 1.5)),
    (DUSKWHISPER, (0.7, 1.0, 1.8)),
    (QUANTUM, (0.7, 1.0, 1.8)),
])
def test_intensity_multipliers(variant, multipliers):
    levels = (Intensity.LOW, Intensity.MID, Intensity.HIGH)
    assert tuple(variant.intensity_multiplier(level) for level in levels) == multipliers


def test_intensity_labels_round_trip():
    assert FROSTSHRIEK.intensity_from_label("Extreme") == Intensity.HIGH
    assert DUSKWHISPER.intensity_label(Intensity.LOW) == "Whisper"
    with pytest.raises(ValueError):
        QUANTUM.intensity_from_label("Whisper")


def test_default_choices_are_first_members():
    assert FROSTSHRIEK.default_protocol == CryoProtocol.GLACIAL
    assert FROSTSHRIEK.default_material == FrostMatrix.ICE


def test_bounds():
    bounds = Bounds(0.1, 10.0, 0.1)
    assert bounds.contains(0.1) and bounds.contains(10.0)
    assert not bounds.contains(10.01)
    assert bounds.clamp(42.0) == 10.0
    assert bounds.describe() == "0.1-10"
    assert Bounds(1.0, 100.0).describe() == "1-100"


def test_defaults_for():
    params = ParameterSet.defaults_for(FROSTSHRIEK)
    assert params.primary_value == -50.0
    assert params.secondary_rate == 2.5
    assert params.factor_a == "" and params.factor_b == ""
    assert params.iterations == 1
    assert params.intensity == Intensity.MID
    assert params.resonance_frequency == 3.0


def test_clamp_to_applies_widget_bounds():
    params = ParameterSet.defaults_for(QUANTUM).copy(
        primary_value=500.0, secondary_rate=0.0, iterations=42, resonance_frequency=0.2
    )
    params.clamp_to(QUANTUM)
    assert params.primary_value == 100.0
    assert params.secondary_rate == 0.1
    assert params.iterations == 10
    assert params.resonance_frequency == 1.0


def test_to_dict_uses_plain_values():
    data = ParameterSet.defaults_for(DUSKWHISPER).to_dict()
    assert data["protocol"] == "Dusk Protocol"
    assert data["material"] == "Lunar Matrix"
    assert data["intensity"] == "mid"
