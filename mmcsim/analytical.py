import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .validators import require_int_at_least, require_positive


def r4(x: float) -> float:
    if x == float("inf"):
        return x
    return round(float(x), 4)


# Steady-state M/M/c figures, used as a yardstick for simulated runs
@dataclass
class AnalyticalResult:
    arrival_rate: float   # lambda
    service_rate: float   # mu
    servers: int          # c
    utilization: float    # rho = lambda / (c * mu)
    prob_wait: float      # Erlang C
    Lq: float
    Wq: float
    W: float
    L: float
    note: Optional[str] = None


def erlang_c(lambda_: float, mu: float, c: int) -> Tuple[float, float]:
    """
    Returns (Pw, rho) where:
    rho = lambda / (c*mu)
    Pw = probability that an arrival must wait
    """
    rho = lambda_ / (c * mu)
    if rho >= 1:
        return 1.0, rho

    a = lambda_ / mu  # offered load

    s = sum((a ** n) / math.factorial(n) for n in range(c))
    last = (a ** c) / math.factorial(c) * (c / (c - a))

    p0 = 1.0 / (s + last)
    return last * p0, rho

def mmc(lambda_: float, mu: float, c: int) -> AnalyticalResult:
    require_positive("arrival_rate", lambda_)
    require_positive("service_rate", mu)
    require_int_at_least("num_servers", c, 1)

    pw, rho = erlang_c(lambda_, mu, c)

    if rho >= 1:
        inf = float("inf")
        return AnalyticalResult(
            arrival_rate=r4(lambda_),
            service_rate=r4(mu),
            servers=c,
            utilization=r4(rho),
            prob_wait=1.0,
            Lq=inf,
            Wq=inf,
            W=inf,
            L=inf,
            note="Unstable system (λ ≥ cμ)"
        )

    Wq = pw / (c * mu - lambda_)
    Lq = lambda_ * Wq
    W = Wq + 1.0 / mu
    L = lambda_ * W

    return AnalyticalResult(
        arrival_rate=r4(lambda_),
        service_rate=r4(mu),
        servers=c,
        utilization=r4(rho),
        prob_wait=r4(pw),
        Lq=r4(Lq),
        Wq=r4(Wq),
        W=r4(W),
        L=r4(L)
    )
