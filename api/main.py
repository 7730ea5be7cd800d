import logging
import math
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.schemas import (
    AnalyticalRequest, AnalyticalResponse,
    CompareRequest, CompareResponse,
    DatasetRequest, SimulationRequest, SimulationResponse,
)

from mmcsim.analytical import mmc
from mmcsim.models import RunSummary, SimulationParameters
from mmcsim.scenarios import compare_scenarios, run_scenario
from mmcsim.simulation import simulate, simulate_from_text
from mmcsim.validators import InvalidParameterError

logger = logging.getLogger(__name__)

app = FastAPI(title="M/M/c Queue Simulator API", version="1.0")

# the dashboard is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(InvalidParameterError)
def invalid_parameter_handler(request: Request, exc: InvalidParameterError):
    logger.info("rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc), "field": exc.field})

def _to_params(req: SimulationRequest) -> SimulationParameters:
    # convert pydantic schema -> engine dataclass
    return SimulationParameters(
        arrival_rate=req.arrival_rate,
        service_rate=req.service_rate,
        num_servers=req.num_servers,
        duration=req.duration
    )

def _to_response(summary: RunSummary) -> SimulationResponse:
    return SimulationResponse(**asdict(summary))

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/simulate", response_model=SimulationResponse)
def simulate_endpoint(req: SimulationRequest):
    return _to_response(simulate(_to_params(req), seed=req.seed))

@app.post("/simulate/dataset", response_model=SimulationResponse)
def simulate_dataset_endpoint(req: DatasetRequest):
    return _to_response(simulate_from_text(req.csv, req.num_servers))

@app.post("/compare", response_model=CompareResponse)
def compare_endpoint(req: CompareRequest):
    a = run_scenario(_to_params(req.scenario_a), dataset_text=req.scenario_a.csv, seed=req.scenario_a.seed)
    b = run_scenario(_to_params(req.scenario_b), dataset_text=req.scenario_b.csv, seed=req.scenario_b.seed)
    cmp = compare_scenarios(a, b)
    return CompareResponse(
        scenario_a=_to_response(a),
        scenario_b=_to_response(b),
        **asdict(cmp)
    )

@app.post("/analytical", response_model=AnalyticalResponse)
def analytical(req: AnalyticalRequest):
    res = asdict(mmc(req.arrival_rate, req.service_rate, req.num_servers))
    # JSON has no infinity
    for key in ("Lq", "Wq", "W", "L"):
        if math.isinf(res[key]):
            res[key] = None
    return AnalyticalResponse(**res)
