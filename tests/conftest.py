from datetime import datetime

import pytest

from runedrakraft.model.calculator import InfusionCalculator
from runedrakraft.model.catalog import DUSKWHISPER, FROSTSHRIEK, QUANTUM
from runedrakraft.model.parameters import ParameterSet
from runedrakraft.model.variants import Intensity

FIXED_NOW = datetime(2026, 10, 19, 15, 4)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def cryo_params():
    params = ParameterSet.defaults_for(FROSTSHRIEK)
    params.factor_a = "10"
    params.factor_b = "5"
    return params


@pytest.fixture
def quantum_params():
    params = ParameterSet.defaults_for(QUANTUM)
    params.factor_a = "8"
    params.factor_b = "2"
    params.iterations = 2
    params.intensity = Intensity.HIGH
    return params


@pytest.fixture
def nocturne_params():
    params = ParameterSet.defaults_for(DUSKWHISPER)
    params.factor_a = "50"
    params.factor_b = "2"
    return params


@pytest.fixture
def cryo_calc(clock):
    return InfusionCalculator(FROSTSHRIEK, clock=clock)


@pytest.fixture
def quantum_calc(clock):
    return InfusionCalculator(QUANTUM, clock=clock)
