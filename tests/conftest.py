import pytest

from mmcsim.models import SimulationParameters


@pytest.fixture
def busy_params() -> SimulationParameters:
    """Overloaded 2-server system over one shift."""
    return SimulationParameters(arrival_rate=2.0, service_rate=0.8, num_servers=2, duration=480.0)
