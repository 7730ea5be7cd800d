import math
from typing import List

from .models import EntityRecord, RunSummary


def summarize(entities: List[EntityRecord],
              num_servers: int,
              duration: float,
              arrival_rate: float,
              dropped_rows: int = 0) -> RunSummary:
    """
    Reduce a finished run to its summary.

    utilization = sum(service) / (c * duration) * 100, capped at 100 and 0 when
    duration is 0. Queue length is Little's law, L = λ * W, using the average
    wait rather than counting simultaneous occupancy.
    """
    n = len(entities)
    if n == 0:
        return RunSummary(dropped_rows=dropped_rows)

    waits = [e.wait_time for e in entities]
    avg_wait = sum(waits) / n
    max_wait = max(waits)

    total_service = sum(e.service_time for e in entities)
    utilization = 0.0
    if duration > 0:
        ratio = total_service / (num_servers * duration)
        # overflowed runs give inf/inf; an infinite service total is a saturated run
        if not math.isfinite(ratio):
            ratio = 1.0 if math.isinf(total_service) else 0.0
        utilization = max(0.0, min(ratio * 100.0, 100.0))

    return RunSummary(
        entities=list(entities),
        total_entities=n,
        served_entities=n,
        avg_wait_time=avg_wait,
        max_wait_time=max_wait,
        avg_queue_length=arrival_rate * avg_wait,
        server_utilization=utilization,
        dropped_rows=dropped_rows
    )
