import logging
from typing import List, Optional, Sequence

from .aggregator import summarize
from .dataset import parse_dataset
from .distributions import UniformSource, make_source, sample_exponential
from .models import EntityRecord, RunSummary, SimulationParameters, TimedPair
from .stepper import new_server_state, step_entity
from .validators import require_int_at_least, validate_parameters

logger = logging.getLogger(__name__)


def generate_entities(params: SimulationParameters, rng: UniformSource) -> List[EntityRecord]:
    """
    Random-draw run: keep sampling arrivals until the clock reaches the horizon.
    The first entity arrives at t=0 although its draw is still recorded; the
    entity whose arrival lands at or past the horizon is discarded.
    """
    server_available = new_server_state(params.num_servers)
    entities: List[EntityRecord] = []

    current_time = 0.0
    entity_id = 0

    while True:
        entity_id += 1

        r_iat, iat = sample_exponential(params.arrival_rate, rng)
        if entity_id == 1:
            iat = 0.0
        current_time += iat

        if current_time >= params.duration:
            break

        r_st, service_time = sample_exponential(params.service_rate, rng)

        entities.append(step_entity(
            entity_id=entity_id,
            inter_arrival_time=iat,
            arrival_time=current_time,
            service_time=service_time,
            server_available=server_available,
            random_iat=r_iat,
            random_st=r_st
        ))

    return entities

def simulate(params: SimulationParameters,
             rng: Optional[UniformSource] = None,
             seed: Optional[int] = None) -> RunSummary:
    validate_parameters(params)
    if rng is None:
        rng = make_source(seed)

    entities = generate_entities(params, rng)
    logger.info("random-draw run: λ=%g μ=%g c=%d horizon=%g -> %d entities",
                params.arrival_rate, params.service_rate, params.num_servers,
                params.duration, len(entities))

    return summarize(entities, params.num_servers, params.duration, params.arrival_rate)

def replay_pairs(pairs: Sequence[TimedPair], num_servers: int) -> List[EntityRecord]:
    """
    Dataset run: every pair becomes one entity, in order, no horizon.
    The first inter-arrival time is forced to 0.
    """
    server_available = new_server_state(num_servers)
    entities: List[EntityRecord] = []

    current_time = 0.0
    for i, pair in enumerate(pairs, start=1):
        iat = 0.0 if i == 1 else pair.inter_arrival_time
        current_time += iat
        entities.append(step_entity(
            entity_id=i,
            inter_arrival_time=iat,
            arrival_time=current_time,
            service_time=pair.service_time,
            server_available=server_available
        ))

    return entities

def effective_arrival_rate(pairs: Sequence[TimedPair]) -> float:
    # reciprocal of the mean inter-arrival time of the data as supplied
    if not pairs:
        return 1.0
    mean_iat = sum(p.inter_arrival_time for p in pairs) / len(pairs)
    return 1.0 / mean_iat if mean_iat > 0 else 1.0

def simulate_from_pairs(pairs: Sequence[TimedPair], num_servers: int, dropped_rows: int = 0) -> RunSummary:
    require_int_at_least("num_servers", num_servers, 1)

    entities = replay_pairs(pairs, num_servers)
    duration = entities[-1].end_service_time if entities else 0.0
    logger.info("dataset run: c=%d, %d entities, effective duration %g",
                num_servers, len(entities), duration)

    return summarize(entities, num_servers, duration, effective_arrival_rate(pairs),
                     dropped_rows=dropped_rows)

def simulate_from_text(text: str, num_servers: int) -> RunSummary:
    require_int_at_least("num_servers", num_servers, 1)
    parsed = parse_dataset(text)
    return simulate_from_pairs(parsed.pairs, num_servers, dropped_rows=parsed.dropped_rows)
