import logging
from typing import Optional

from .config import (
    DEFAULT_ARRIVAL_RATE,
    DEFAULT_DURATION,
    DEFAULT_SERVICE_RATE,
    SCENARIO_A_SERVERS,
    SCENARIO_B_SERVERS,
    UTILIZATION_DANGER_PERCENT,
    UTILIZATION_WARNING_PERCENT,
    WAIT_DANGER_MINUTES,
    WAIT_WARNING_MINUTES,
)
from .distributions import UniformSource
from .models import ComparisonRow, RunSummary, ScenarioComparison, SimulationParameters, Status
from .simulation import simulate, simulate_from_text

logger = logging.getLogger(__name__)


def default_scenarios() -> tuple:
    """(A, B): same demand, 2 vs 4 servers."""
    a = SimulationParameters(DEFAULT_ARRIVAL_RATE, DEFAULT_SERVICE_RATE, SCENARIO_A_SERVERS, DEFAULT_DURATION)
    b = SimulationParameters(DEFAULT_ARRIVAL_RATE, DEFAULT_SERVICE_RATE, SCENARIO_B_SERVERS, DEFAULT_DURATION)
    return a, b

def run_scenario(params: SimulationParameters,
                 dataset_text: Optional[str] = None,
                 rng: Optional[UniformSource] = None,
                 seed: Optional[int] = None) -> RunSummary:
    # a supplied dataset wins; only the server count is taken from params
    if dataset_text is not None:
        logger.debug("scenario with dataset, c=%d", params.num_servers)
        return simulate_from_text(dataset_text, params.num_servers)
    return simulate(params, rng=rng, seed=seed)

def _classify(value: float, warning: float, danger: float) -> Status:
    if value > danger:
        return "danger"
    if value > warning:
        return "warning"
    return "good"

def classify_wait(minutes: float) -> Status:
    return _classify(minutes, WAIT_WARNING_MINUTES, WAIT_DANGER_MINUTES)

def classify_utilization(percent: float) -> Status:
    return _classify(percent, UTILIZATION_WARNING_PERCENT, UTILIZATION_DANGER_PERCENT)

def _row(metric: str, a: float, b: float) -> ComparisonRow:
    a2, b2 = round(a, 2), round(b, 2)
    return ComparisonRow(metric=metric, scenario_a=a2, scenario_b=b2, difference=round(b2 - a2, 2))

def compare_scenarios(a: RunSummary, b: RunSummary) -> ScenarioComparison:
    rows = [
        _row("avg_wait_time", a.avg_wait_time, b.avg_wait_time),
        _row("max_wait_time", a.max_wait_time, b.max_wait_time),
        _row("avg_queue_length", a.avg_queue_length, b.avg_queue_length),
        _row("server_utilization", a.server_utilization, b.server_utilization),
    ]
    return ScenarioComparison(
        rows=rows,
        wait_status_a=classify_wait(a.avg_wait_time),
        wait_status_b=classify_wait(b.avg_wait_time),
        utilization_status_a=classify_utilization(a.server_utilization),
        utilization_status_b=classify_utilization(b.server_utilization)
    )
