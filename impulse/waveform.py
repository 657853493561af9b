"""
Double-exponential impulse waveform from the generator's equivalent circuit.

The single-stage equivalent of a Marx generator is a charged generator
capacitance C1 discharging through the front resistor R1 into the load
capacitance C2, with the tail resistor R2 across C1. Its output is

    V(t) = K · (e^(-αt) - e^(-βt))

where α (tail) and β (front) are the magnitudes of the roots of

    s² + a·s + b = 0
    a = 1/(R1·C2) + 1/(R2·C1) + 1/(R2·C2)
    b = 1/(R1·R2·C1·C2)

and K = V0 / (R1·C2·(β - α)) · C1/(C1 + C2).

References:
- Kuffel, Zaengl & Kuffel, "High Voltage Engineering Fundamentals" (2nd ed.), ch. 2.3
- IEC 60060-1, "High-voltage test techniques"
"""

import logging
import math
from typing import Optional, Sequence, Tuple

import numpy as np

from impulse import config
from impulse.models import (
    CircuitParameters,
    PoleModel,
    SpanMode,
    TimeSpanPolicy,
    WaveformMetrics,
    WaveformResult,
    WaveformSample,
)
from impulse.units import all_positive, seconds_to_us, us_to_seconds

logger = logging.getLogger(__name__)

# Front time per IEC 60060-1 is 1/(0.9 - 0.3) times the 30 %-90 % rise
FRONT_TIME_FACTOR = 1.67


def characteristic_coefficients(params: CircuitParameters) -> Tuple[float, float]:
    """Return (a, b) of s² + a·s + b for the equivalent circuit."""
    R1, R2, C1, C2 = params.r1, params.r2, params.c1, params.c2
    a = 1.0 / (R1 * C2) + 1.0 / (R2 * C1) + 1.0 / (R2 * C2)
    b = 1.0 / (R1 * R2 * C1 * C2)
    return a, b


def characteristic_roots(a: float, b: float) -> Optional[Tuple[float, float]]:
    """
    Solve s² + a·s + b = 0 for an overdamped system.

    Returns:
        (alpha, beta), the root magnitudes with alpha the smaller one,
        or None when the discriminant is negative (underdamped).
    """
    discriminant = a * a - 4.0 * b
    if discriminant < 0:
        return None

    root = math.sqrt(discriminant)
    s1 = (-a + root) / 2.0
    s2 = (-a - root) / 2.0
    return -s1, -s2


def direct_poles(params: CircuitParameters) -> Tuple[float, float]:
    """
    Simplified two-pole model: each time constant taken on its own.

        α = 1 / (R2·(C1 + C2))        tail: C1 and C2 discharging through R2
        β = (C1 + C2) / (R1·C1·C2)    front: C2 charging through R1 from C1
    """
    R1, R2, C1, C2 = params.r1, params.r2, params.c1, params.c2
    alpha = 1.0 / (R2 * (C1 + C2))
    beta = (C1 + C2) / (R1 * C1 * C2)
    return alpha, beta


def time_to_peak(alpha: float, beta: float) -> float:
    """Closed-form maximum of e^(-αt) - e^(-βt), in seconds."""
    return math.log(beta / alpha) / (beta - alpha)


def standard_front_time(alpha: float, beta: float, t_peak: float, points: int = 2001) -> float:
    """
    Front time per IEC 60060-1: 1.67 × (t90 - t30), in seconds.

    The front is monotonic up to the peak, so the crossings are found by
    interpolating a dense sampling of [0, t_peak].
    """
    t = np.linspace(0.0, t_peak, points)
    shape = np.exp(-alpha * t) - np.exp(-beta * t)
    peak = shape[-1]
    if peak <= 0:
        return 0.0
    t30 = np.interp(0.3 * peak, shape, t)
    t90 = np.interp(0.9 * peak, shape, t)
    return float(FRONT_TIME_FACTOR * (t90 - t30))


def find_tail_time(
    times: Sequence[float],
    voltages: Sequence[float],
    peak_voltage: float,
    start_index: int = 0,
) -> float:
    """
    Time of the first sample at or after start_index below half the peak.

    Returns 0.0 when the waveform never drops below 50 % within the samples.
    """
    v = np.asarray(voltages, dtype=float)[start_index:]
    below = np.flatnonzero(v < 0.5 * peak_voltage)
    if below.size == 0:
        return 0.0
    return float(times[start_index + below[0]])


def efficiency(peak_voltage: float, source_voltage: float, stages: int = 1) -> float:
    """Peak output as a percentage of the summed stage charging voltages."""
    if stages < 1 or not all_positive(source_voltage):
        return 0.0
    return 100.0 * peak_voltage / (stages * source_voltage)


def _representable(params: CircuitParameters) -> bool:
    """
    Every product divided by in the pole formulas is a normal float.

    Positive inputs can still underflow to zero or overflow to inf once
    converted to SI and multiplied together.
    """
    R1, R2, C1, C2 = params.r1, params.r2, params.c1, params.c2
    return all_positive(
        R1 * C2, R2 * C1, R2 * C2, R1 * R2 * C1 * C2,
        C1 + C2, R2 * (C1 + C2), R1 * C1 * C2,
    )


def _time_span(policy: TimeSpanPolicy, t_peak: float, t_bound: float) -> float:
    """Sampled span in seconds."""
    if policy.mode == SpanMode.FIXED:
        return us_to_seconds(policy.fixed_span_us)
    if policy.mode == SpanMode.PEAK_MULTIPLE:
        return policy.multiplier * t_peak
    return max(policy.multiplier * t_peak, 1.5 * t_bound)


def solve_waveform(
    params: CircuitParameters,
    source_voltage: Optional[float] = None,
    sample_count: Optional[int] = None,
    time_span: Optional[TimeSpanPolicy] = None,
    model: PoleModel = PoleModel.QUADRATIC,
    stages: int = 1,
) -> WaveformResult:
    """
    Sample the impulse waveform and derive its metrics.

    Args:
        params: R1, R2 (Ohms) and C1, C2 (nF) of the equivalent circuit
        source_voltage: Per-stage charging voltage (any unit, default from config)
        sample_count: Number of intervals; sample_count + 1 points are returned
        time_span: Span policy (default: auto, peak and 50 % crossing in view)
        model: QUADRATIC (exact roots) or DIRECT (simplified poles)
        stages: Number of Marx stages in series

    Returns:
        WaveformResult with samples in µs / % of the charging voltage.
        Invalid or degenerate inputs give WaveformResult.empty().
    """
    if source_voltage is None:
        source_voltage = config.SOURCE_VOLTAGE
    if sample_count is None:
        sample_count = config.SAMPLE_COUNT
    if time_span is None:
        time_span = config.default_time_span()

    if not params.is_valid():
        logger.debug("Non-positive circuit parameters: %s", params)
        return WaveformResult.empty(model)
    if not all_positive(source_voltage) or stages < 1 or sample_count < 1:
        logger.debug(
            "Invalid drive: source_voltage=%s stages=%s sample_count=%s",
            source_voltage, stages, sample_count,
        )
        return WaveformResult.empty(model)

    if not _representable(params):
        logger.debug("Component products out of floating point range: %s", params)
        return WaveformResult.empty(model)

    R1, C1, C2 = params.r1, params.c1, params.c2

    if model == PoleModel.DIRECT:
        alpha, beta = direct_poles(params)
    else:
        a, b = characteristic_coefficients(params)
        if not all_positive(a, b):
            logger.debug("Non-finite coefficients (a=%g, b=%g): %s", a, b, params)
            return WaveformResult.empty(model)
        roots = characteristic_roots(a, b)
        if roots is None:
            logger.debug("Underdamped network, no impulse shape: %s", params)
            return WaveformResult.empty(model)
        alpha, beta = roots

    if not (all_positive(alpha, beta) and alpha < beta):
        logger.debug("Pole ordering invalid (alpha=%g, beta=%g): %s", alpha, beta, params)
        return WaveformResult.empty(model)

    V0 = stages * source_voltage
    denominator = R1 * C2 * (beta - alpha)
    if not all_positive(V0, denominator):
        logger.debug("Amplitude out of range (V0=%g, R1·C2·(β-α)=%g)", V0, denominator)
        return WaveformResult.empty(model)
    k = (V0 / denominator) * (C1 / (C1 + C2))
    t_peak = time_to_peak(alpha, beta)
    v_peak = k * (math.exp(-alpha * t_peak) - math.exp(-beta * t_peak))

    if not (math.isfinite(k) and math.isfinite(t_peak) and v_peak > 0):
        logger.debug("Non-finite waveform constants (k=%g, t_peak=%g)", k, t_peak)
        return WaveformResult.empty(model)

    # K·e^(-αt) bounds V(t) from above, so the half-value crossing is before t_bound
    t_bound = math.log(2.0 * k / v_peak) / alpha
    t_end = _time_span(time_span, t_peak, t_bound)
    if not all_positive(t_end):
        logger.debug("Non-positive time span: %s", time_span)
        return WaveformResult.empty(model)

    t = np.linspace(0.0, t_end, sample_count + 1)
    v = k * (np.exp(-alpha * t) - np.exp(-beta * t))
    times_us = seconds_to_us(t)
    voltages_pct = v / V0 * 100.0

    peak_pct = v_peak / V0 * 100.0
    # The sampled maximum is the grid point on either side of t_peak
    start = int(np.argmax(voltages_pct))
    tail_us = find_tail_time(times_us, voltages_pct, peak_pct, start)

    metrics = WaveformMetrics(
        peak_voltage=peak_pct,
        front_time=seconds_to_us(t_peak),
        tail_time=tail_us,
        efficiency=efficiency(v_peak, source_voltage, stages),
        front_time_standard=seconds_to_us(standard_front_time(alpha, beta, t_peak)),
        peak_voltage_abs=v_peak,
    )

    return WaveformResult(
        samples=[
            WaveformSample(time=float(ts), voltage=float(vs))
            for ts, vs in zip(times_us, voltages_pct)
        ],
        metrics=metrics,
        alpha=alpha,
        beta=beta,
        time_span=seconds_to_us(t_end),
        model=model,
    )
