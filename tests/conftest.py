import pytest

from fakes import FakeOracle, make_attraction


@pytest.fixture
def attractions():
    return [
        make_attraction("Origin Park", 0.0, 0.0),
        make_attraction("North Pier", 1.0, 0.0),
        make_attraction("Far Museum", 40.0, 40.0),
    ]


@pytest.fixture
def oracle():
    return FakeOracle(points=250)
