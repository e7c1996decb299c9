import matplotlib
matplotlib.use("Agg")

import pytest

from gravitysim.classes.attractor import Attractor
from gravitysim.classes.simulation import Simulation
from gravitysim.classes.spawner import Spawner
from gravitysim.classes.variant import VariantConfig
from gravitysim.config import BLACKHOLE, GALAXY, SANDBOX


def build_simulation(params, seed=1234, centre=(750.0, 400.0)):
    config = VariantConfig.from_dict(params)
    attractor = Attractor(mass=config.M, G=config.G, position=centre,
                          horizon_radius=config.horizon_radius)
    spawner = Spawner(config, seed=seed)
    return Simulation(config=config, attractor=attractor, spawner=spawner)


@pytest.fixture
def blackhole_config():
    return VariantConfig.from_dict(BLACKHOLE)


@pytest.fixture
def galaxy_config():
    return VariantConfig.from_dict(GALAXY)


@pytest.fixture
def sandbox_config():
    return VariantConfig.from_dict(SANDBOX)


@pytest.fixture
def blackhole_sim():
    return build_simulation(BLACKHOLE)


@pytest.fixture
def galaxy_sim():
    return build_simulation(GALAXY)


@pytest.fixture
def sandbox_sim():
    return build_simulation(SANDBOX)


@pytest.fixture
def make_simulation():
    return build_simulation
