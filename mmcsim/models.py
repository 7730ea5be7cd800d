from dataclasses import dataclass, field
from typing import List, Literal, Optional

Status = Literal["good", "warning", "danger"]

@dataclass(frozen=True)
class SimulationParameters:
    arrival_rate: float   # lambda, per minute
    service_rate: float   # mu, per minute per server
    num_servers: int      # c
    duration: float       # horizon in minutes

@dataclass(frozen=True)
class TimedPair:
    inter_arrival_time: float
    service_time: float

@dataclass(frozen=True)
class EntityRecord:
    id: int
    random_iat: float     # R behind the inter-arrival draw (0 for datasets)
    random_st: float      # R behind the service draw (0 for datasets)
    inter_arrival_time: float
    arrival_time: float
    service_time: float
    wait_time: float
    start_service_time: float
    end_service_time: float
    server_assigned: int  # 1-based

@dataclass
class RunSummary:
    entities: List[EntityRecord] = field(default_factory=list)
    total_entities: int = 0
    served_entities: int = 0
    avg_wait_time: float = 0.0
    max_wait_time: float = 0.0
    avg_queue_length: float = 0.0
    server_utilization: float = 0.0
    dropped_rows: int = 0

@dataclass
class DatasetParseResult:
    pairs: List[TimedPair]
    dropped_rows: int
    iat_column: Optional[int] = None
    service_column: Optional[int] = None

@dataclass
class ComparisonRow:
    metric: str
    scenario_a: float
    scenario_b: float
    difference: float  # b - a

@dataclass
class ScenarioComparison:
    rows: List[ComparisonRow]
    wait_status_a: Status
    wait_status_b: Status
    utilization_status_a: Status
    utilization_status_b: Status
