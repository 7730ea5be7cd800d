from typing import List, Literal, Optional
from pydantic import BaseModel, Field

Status = Literal["good", "warning", "danger"]

# ---------- Simulation ----------
class SimulationRequest(BaseModel):
    arrival_rate: float = Field(2.0, gt=0, allow_inf_nan=False, examples=[2.0])
    service_rate: float = Field(0.8, gt=0, allow_inf_nan=False, examples=[0.8])
    num_servers: int = Field(2, ge=1)
    duration: float = Field(480.0, gt=0, allow_inf_nan=False)
    seed: Optional[int] = None

class DatasetRequest(BaseModel):
    csv: str = Field(..., examples=["iat,service\n2,3\n4,1"])
    num_servers: int = Field(1, ge=1)

class EntityRow(BaseModel):
    id: int
    random_iat: float
    random_st: float
    inter_arrival_time: float
    arrival_time: float
    service_time: float
    wait_time: float
    start_service_time: float
    end_service_time: float
    server_assigned: int

class SimulationResponse(BaseModel):
    entities: List[EntityRow]
    total_entities: int
    served_entities: int
    avg_wait_time: float
    max_wait_time: float
    avg_queue_length: float
    server_utilization: float
    dropped_rows: int = 0

# ---------- Comparison ----------
class ScenarioRequest(SimulationRequest):
    # when present, the dataset drives the run and only num_servers is used
    csv: Optional[str] = None

class CompareRequest(BaseModel):
    scenario_a: ScenarioRequest
    scenario_b: ScenarioRequest

class ComparisonRow(BaseModel):
    metric: str
    scenario_a: float
    scenario_b: float
    difference: float

class CompareResponse(BaseModel):
    scenario_a: SimulationResponse
    scenario_b: SimulationResponse
    rows: List[ComparisonRow]
    wait_status_a: Status
    wait_status_b: Status
    utilization_status_a: Status
    utilization_status_b: Status

# ---------- Analytical ----------
class AnalyticalRequest(BaseModel):
    arrival_rate: float = Field(..., gt=0, allow_inf_nan=False)
    service_rate: float = Field(..., gt=0, allow_inf_nan=False)
    num_servers: int = Field(1, ge=1)

class AnalyticalResponse(BaseModel):
    arrival_rate: float
    service_rate: float
    servers: int
    utilization: float
    prob_wait: float
    # None when the system is unstable (infinite queue)
    Lq: Optional[float]
    Wq: Optional[float]
    W: Optional[float]
    L: Optional[float]
    note: Optional[str] = None
