from dataclasses import dataclass
from typing import List

from .models import EntityRecord
from .validators import require_int_at_least

# next-available time per server, index 0 is server 1
ServerState = List[float]


@dataclass(frozen=True)
class Assignment:
    server: int  # 1-based
    wait_time: float
    start_service_time: float
    end_service_time: float


def new_server_state(num_servers: int) -> ServerState:
    require_int_at_least("num_servers", num_servers, 1)
    return [0.0] * num_servers

def assign_server(arrival_time: float, service_time: float, server_available: ServerState) -> Assignment:
    # earliest available server; min() keeps the first index on ties
    idx = min(range(len(server_available)), key=lambda k: server_available[k])

    start = max(arrival_time, server_available[idx])
    end = start + service_time
    server_available[idx] = end

    return Assignment(
        server=idx + 1,
        wait_time=start - arrival_time,
        start_service_time=start,
        end_service_time=end
    )

def step_entity(entity_id: int,
                inter_arrival_time: float,
                arrival_time: float,
                service_time: float,
                server_available: ServerState,
                random_iat: float = 0.0,
                random_st: float = 0.0) -> EntityRecord:
    """
    Serve one entity on the earliest free server and record its timings.
    Shared by the random-draw and dataset paths; it never looks at where the
    times came from.
    """
    a = assign_server(arrival_time, service_time, server_available)
    return EntityRecord(
        id=entity_id,
        random_iat=random_iat,
        random_st=random_st,
        inter_arrival_time=inter_arrival_time,
        arrival_time=arrival_time,
        service_time=service_time,
        wait_time=a.wait_time,
        start_service_time=a.start_service_time,
        end_service_time=a.end_service_time,
        server_assigned=a.server
    )
