"""
Standard impulse shapes and their tolerances (IEC 60060-1).

    lightning   1.2 / 50 µs     T1 ±30 %, T2 ±20 %
    switching   250 / 2500 µs   Tp ±20 %, T2 ±60 %
"""

from dataclasses import dataclass
from typing import Optional

from impulse.components import solve_resistors_from_targets
from impulse.models import StandardCheck, SuggestedResistors, TargetSpec


@dataclass(frozen=True)
class StandardWaveform:
    name: str
    t1_us: float
    t2_us: float
    t1_tolerance_pct: float
    t2_tolerance_pct: float

    @property
    def label(self) -> str:
        return f"{self.t1_us:g}/{self.t2_us:g} µs"


STANDARD_WAVEFORMS = {
    'lightning': StandardWaveform('lightning', 1.2, 50.0, 30.0, 20.0),
    'switching': StandardWaveform('switching', 250.0, 2500.0, 20.0, 60.0),
}


def get_standard(name: str) -> StandardWaveform:
    if name not in STANDARD_WAVEFORMS:
        raise ValueError(f"Unknown standard waveform '{name}'. Available: {list(STANDARD_WAVEFORMS.keys())}")
    return STANDARD_WAVEFORMS[name]


def _deviation_pct(actual: float, nominal: float) -> float:
    return (actual - nominal) / nominal * 100.0


def check_waveform(t1_us: float, t2_us: float, name: str = 'lightning') -> StandardCheck:
    """
    Compare a measured or simulated T1/T2 with a standard shape.

    A zero T1 or T2 (nothing computed) is never within tolerance.
    """
    std = get_standard(name)
    d1 = _deviation_pct(t1_us, std.t1_us)
    d2 = _deviation_pct(t2_us, std.t2_us)
    ok = (
        t1_us > 0 and t2_us > 0
        and abs(d1) <= std.t1_tolerance_pct
        and abs(d2) <= std.t2_tolerance_pct
    )
    return StandardCheck(
        name=std.name,
        t1_deviation_pct=round(d1, 4),
        t2_deviation_pct=round(d2, 4),
        within_tolerance=ok,
    )


def design_for_standard(
    name: str,
    c1_nf: float,
    c2_pf: float,
    series: Optional[str] = None,
) -> SuggestedResistors:
    """Front and tail resistors for a standard shape with the given capacitances."""
    std = get_standard(name)
    spec = TargetSpec(t1_us=std.t1_us, t2_us=std.t2_us, c1_nf=c1_nf, c2_pf=c2_pf)
    return solve_resistors_from_targets(spec, series)
