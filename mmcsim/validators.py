import math
from typing import Any

from .models import SimulationParameters


class InvalidParameterError(ValueError):
    """Raised when a simulation input is out of range; ``field`` names it."""

    def __init__(self, field: str, value: Any, message: str):
        super().__init__(message)
        self.field = field
        self.value = value


def require_positive(name: str, value: float) -> None:
    if value is None or not value > 0 or not math.isfinite(value):
        raise InvalidParameterError(name, value, f"{name} must be a finite number > 0")

def require_int_at_least(name: str, value: int, minimum: int) -> None:
    # bool is an int subclass but never a server count
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidParameterError(name, value, f"{name} must be an integer >= {minimum}")

def validate_parameters(params: SimulationParameters) -> None:
    require_positive("arrival_rate", params.arrival_rate)
    require_positive("service_rate", params.service_rate)
    require_int_at_least("num_servers", params.num_servers, 1)
    require_positive("duration", params.duration)
