"""
Component values for a target impulse shape, and the reverse estimate.

Both directions use the same two time-constant picture of the generator:

    front:  T1 ≈ R1 · C1·C2/(C1 + C2)    (C2 charged through R1)
    tail:   T2 ≈ R2 · (C1 + C2)          (both discharged through R2)

The forward calculator estimate multiplies the tail by 0.7 and counts R1
in the discharge path, so the two directions are rough inverses only.
Suggested resistors are snapped to IEC 60063 E-series values.
"""

import logging
import math
from typing import List, Optional, Tuple

from impulse import config
from impulse.models import CircuitParameters, SuggestedResistors, TargetSpec, TimeEstimate
from impulse.units import (
    all_positive,
    engineering_notation,
    nf_to_farad,
    pf_to_farad,
    seconds_to_us,
    us_to_seconds,
)

logger = logging.getLogger(__name__)

# Tail factor of the calculator's estimate (≈ ln 2 for a single RC decay)
TAIL_FACTOR = 0.7

# E-series base values per decade (IEC 60063)

E12_BASE = [1.0, 1.2, 1.5, 1.8, 2.2, 2.7, 3.3, 3.9, 4.7, 5.6, 6.8, 8.2]

E24_BASE = [
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
]

E48_BASE = [
    1.00, 1.05, 1.10, 1.15, 1.21, 1.27, 1.33, 1.40, 1.47, 1.54, 1.62, 1.69,
    1.78, 1.87, 1.96, 2.05, 2.15, 2.26, 2.37, 2.49, 2.61, 2.74, 2.87, 3.01,
    3.16, 3.32, 3.48, 3.65, 3.83, 4.02, 4.22, 4.42, 4.64, 4.87, 5.11, 5.36,
    5.62, 5.90, 6.19, 6.49, 6.81, 7.15, 7.50, 7.87, 8.25, 8.66, 9.09, 9.53,
]

E96_BASE = [
    1.00, 1.02, 1.05, 1.07, 1.10, 1.13, 1.15, 1.18, 1.21, 1.24, 1.27, 1.30,
    1.33, 1.37, 1.40, 1.43, 1.47, 1.50, 1.54, 1.58, 1.62, 1.65, 1.69, 1.74,
    1.78, 1.82, 1.87, 1.91, 1.96, 2.00, 2.05, 2.10, 2.15, 2.21, 2.26, 2.32,
    2.37, 2.43, 2.49, 2.55, 2.61, 2.67, 2.74, 2.80, 2.87, 2.94, 3.01, 3.09,
    3.16, 3.24, 3.32, 3.40, 3.48, 3.57, 3.65, 3.74, 3.83, 3.92, 4.02, 4.12,
    4.22, 4.32, 4.42, 4.53, 4.64, 4.75, 4.87, 4.99, 5.11, 5.23, 5.36, 5.49,
    5.62, 5.76, 5.90, 6.04, 6.19, 6.34, 6.49, 6.65, 6.81, 6.98, 7.15, 7.32,
    7.50, 7.68, 7.87, 8.06, 8.25, 8.45, 8.66, 8.87, 9.09, 9.31, 9.53, 9.76,
]

E_SERIES = {
    'E12': E12_BASE,
    'E24': E24_BASE,
    'E48': E48_BASE,
    'E96': E96_BASE,
}


def snap_to_e_series(value: float, series: str = 'E24') -> Tuple[float, float]:
    """
    Snap a value to the nearest standard E-series value.

    Distance is measured on a log scale, so the choice between two
    neighbours is made at their geometric mean.

    Returns:
        Tuple of (snapped_value, error_percentage); the error is signed,
        positive when the snapped value is higher.
    """
    if not value > 0 or not math.isfinite(value):
        raise ValueError(f"Value must be positive, got {value}")
    if series not in E_SERIES:
        raise ValueError(f"Unknown series '{series}'. Must be one of: {list(E_SERIES.keys())}")

    decade = math.floor(math.log10(value))
    # Last value of the decade below and first of the decade above
    candidates = [E_SERIES[series][-1] / 10] + E_SERIES[series] + [10.0]
    mantissa = value / 10 ** decade
    best = min(candidates, key=lambda bv: abs(math.log10(mantissa / bv)))

    snapped = float(f"{best * 10 ** decade:.6g}")
    error_pct = (snapped - value) / value * 100
    return snapped, round(error_pct, 4)


def snap_resistor(value_ohm: float, series: str = 'E24') -> Tuple[float, float]:
    """Snap a resistor value (in Ohms) to nearest E-series standard value."""
    return snap_to_e_series(value_ohm, series)


def _range_warnings(r1: float, r2: float) -> List[str]:
    warnings = []
    for name, label, value in (('r1', 'Front resistor R1', r1), ('r2', 'Tail resistor R2', r2)):
        if not config.in_typical_range(name, value):
            low, high = config.PARAMETER_RANGES[name]
            warnings.append(
                f"{label} = {engineering_notation(value, 'Ω')} is outside the typical "
                f"{engineering_notation(low, 'Ω')}–{engineering_notation(high, 'Ω')} range; "
                f"check the target times and capacitance units"
            )
    return warnings


def solve_resistors_from_targets(spec: TargetSpec, series: Optional[str] = None) -> SuggestedResistors:
    """
    Front and tail resistors for a target T1/T2 with known C1, C2.

        R2 = T2 / (C1 + C2)
        R1 = T1 · (C1 + C2) / (C1·C2)

    Args:
        spec: Target times (µs), C1 (nF) and C2 (pF)
        series: E-series for the buildable suggestion (default from config)

    Returns:
        SuggestedResistors in Ohms. All zero when any input is non-positive.
    """
    series = series or config.E_SERIES
    if not all_positive(spec.t1_us, spec.t2_us, spec.c1_nf, spec.c2_pf):
        logger.debug("Non-positive target spec: %s", spec)
        return SuggestedResistors(series=series)

    T1 = us_to_seconds(spec.t1_us)
    T2 = us_to_seconds(spec.t2_us)
    C1 = nf_to_farad(spec.c1_nf)
    C2 = pf_to_farad(spec.c2_pf)

    if not all_positive(C1 + C2, C1 * C2):
        logger.debug("Capacitance products out of floating point range: %s", spec)
        return SuggestedResistors(series=series)

    R2 = T2 / (C1 + C2)
    R1 = T1 * (C1 + C2) / (C1 * C2)
    if not all_positive(R1, R2):
        logger.debug("Resistors out of floating point range (R1=%g, R2=%g): %s", R1, R2, spec)
        return SuggestedResistors(series=series)

    r1_std, _ = snap_resistor(R1, series)
    r2_std, _ = snap_resistor(R2, series)

    warnings = _range_warnings(R1, R2)
    for w in warnings:
        logger.info(w)

    return SuggestedResistors(
        r1=R1,
        r2=R2,
        r1_standard=r1_std,
        r2_standard=r2_std,
        series=series,
        warnings=warnings,
    )


def estimate_times(params: CircuitParameters) -> TimeEstimate:
    """
    Quick T1/T2 estimate straight from the component values.

        T1 ≈ R1 · C1·C2/(C1 + C2)
        T2 ≈ 0.7 · (R1 + R2) · (C1 + C2)

    Cruder than the waveform's closed-form time to peak; zeros for
    invalid parameters.
    """
    if not params.is_valid():
        logger.debug("Non-positive circuit parameters: %s", params)
        return TimeEstimate()

    R1, R2, C1, C2 = params.r1, params.r2, params.c1, params.c2
    if not all_positive(C1 + C2, C1 * C2):
        logger.debug("Capacitance products out of floating point range: %s", params)
        return TimeEstimate()

    t1 = R1 * ((C1 * C2) / (C1 + C2))
    t2 = TAIL_FACTOR * (R1 + R2) * (C1 + C2)
    if not all_positive(t1, t2):
        logger.debug("Estimated times out of floating point range (t1=%g, t2=%g)", t1, t2)
        return TimeEstimate()
    return TimeEstimate(t1_us=seconds_to_us(t1), t2_us=seconds_to_us(t2))
