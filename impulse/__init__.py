"""
Impulse Engine

Computation library for high-voltage impulse generators at the
equivalent-circuit level: double-exponential waveform, front and tail
times, and resistor selection for a target impulse shape.

All functions are pure; invalid inputs give an empty result, not an error.
"""

from impulse.models import (
    CircuitParameters,
    PoleModel,
    SpanMode,
    SuggestedResistors,
    TargetSpec,
    TimeEstimate,
    TimeSpanPolicy,
    WaveformMetrics,
    WaveformResult,
    WaveformSample,
)
from impulse.waveform import solve_waveform, time_to_peak, characteristic_roots
from impulse.components import solve_resistors_from_targets, estimate_times, snap_resistor
from impulse.approximations import get_approximation, list_approximations, estimate_front_tail
from impulse.standards import STANDARD_WAVEFORMS, check_waveform, design_for_standard
from impulse.export import export_csv, export_json

__version__ = "0.1.0"
