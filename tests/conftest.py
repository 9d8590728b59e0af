import random

import pytest

from tsp_abc.geo import Location


@pytest.fixture
def origin():
    return (19.4270, -99.1677)


@pytest.fixture
def triangle():
    return [
        Location("a", 19.50, -99.10),
        Location("b", 19.40, -99.00),
        Location("c", 19.30, -99.15),
    ]


@pytest.fixture
def warehouses():
    return [
        Location("Norte", 19.5012, -99.1405),
        Location("Sur", 19.2965, -99.1620),
        Location("Oriente", 19.3987, -99.0512),
        Location("Poniente", 19.4010, -99.2440),
        Location("Centro", 19.4326, -99.1332),
        Location("Aeropuerto", 19.4361, -99.0719),
        Location("Xochimilco", 19.2572, -99.1030),
    ]


@pytest.fixture
def rng():
    return random.Random(7)
