"""
Named strategies for front and tail time.

The closed-form waveform, its direct-pole simplification and the
calculator's RC estimate give different T1/T2 for the same circuit. They
are kept side by side so the caller chooses one by name.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from impulse.components import estimate_times
from impulse.models import CircuitParameters, PoleModel, TimeEstimate
from impulse.waveform import solve_waveform


@dataclass
class Approximation:
    """A named T1/T2 strategy."""
    name: str
    description: str
    estimate: Callable  # Function(CircuitParameters) → TimeEstimate
    samples_waveform: bool = False


def _closed_form(params: CircuitParameters) -> TimeEstimate:
    metrics = solve_waveform(params, model=PoleModel.QUADRATIC).metrics
    return TimeEstimate(t1_us=metrics.front_time, t2_us=metrics.tail_time)


def _direct_pole(params: CircuitParameters) -> TimeEstimate:
    metrics = solve_waveform(params, model=PoleModel.DIRECT).metrics
    return TimeEstimate(t1_us=metrics.front_time, t2_us=metrics.tail_time)


APPROXIMATIONS: Dict[str, Approximation] = {
    'closed_form': Approximation(
        name='closed_form',
        description='Exact roots of the equivalent circuit; T1 = time to peak, T2 = 50 % crossing',
        estimate=_closed_form,
        samples_waveform=True,
    ),
    'direct_pole': Approximation(
        name='direct_pole',
        description='Independent front and tail time constants; T1 = time to peak, T2 = 50 % crossing',
        estimate=_direct_pole,
        samples_waveform=True,
    ),
    'rc_estimate': Approximation(
        name='rc_estimate',
        description='Calculator estimate: T1 = R1·C1C2/(C1+C2), T2 = 0.7·(R1+R2)·(C1+C2)',
        estimate=estimate_times,
    ),
}


def get_approximation(name: str) -> Approximation:
    """Get an approximation strategy by name."""
    if name not in APPROXIMATIONS:
        raise ValueError(f"Unknown approximation '{name}'. Available: {list(APPROXIMATIONS.keys())}")
    return APPROXIMATIONS[name]


def list_approximations() -> List[Dict]:
    return [
        {
            'name': a.name,
            'description': a.description,
            'samples_waveform': a.samples_waveform,
        }
        for a in APPROXIMATIONS.values()
    ]


def estimate_front_tail(name: str, params: CircuitParameters) -> TimeEstimate:
    """T1/T2 for the circuit using the named strategy."""
    return get_approximation(name).estimate(params)
