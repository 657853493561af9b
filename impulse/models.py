"""Pydantic value types for impulse waveform calculations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from impulse.units import nf_to_farad, farad_to_nf, all_positive


# --- Enums ---

class PoleModel(str, Enum):
    QUADRATIC = "quadratic"
    DIRECT = "direct"


class SpanMode(str, Enum):
    AUTO = "auto"
    PEAK_MULTIPLE = "peak_multiple"
    FIXED = "fixed"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Circuit ---

class CircuitParameters(_Frozen):
    """
    Equivalent RC network of an impulse generator.

    Values are not validated on construction; the solvers turn
    non-positive or non-finite values into an empty result.
    """
    r1: float = Field(..., description="Front resistor (Ohms)")
    r2: float = Field(..., description="Tail resistor (Ohms)")
    c1_nf: float = Field(..., description="Generator capacitance (nF)")
    c2_nf: float = Field(..., description="Load capacitance (nF)")

    @classmethod
    def from_si(cls, r1: float, r2: float, c1: float, c2: float) -> CircuitParameters:
        return cls(r1=r1, r2=r2, c1_nf=farad_to_nf(c1), c2_nf=farad_to_nf(c2))

    @property
    def c1(self) -> float:
        """Generator capacitance in Farads."""
        return nf_to_farad(self.c1_nf)

    @property
    def c2(self) -> float:
        """Load capacitance in Farads."""
        return nf_to_farad(self.c2_nf)

    def is_valid(self) -> bool:
        # SI values too: tiny nF inputs underflow to 0 F
        return all_positive(self.r1, self.r2, self.c1_nf, self.c2_nf, self.c1, self.c2)


class TimeSpanPolicy(_Frozen):
    """How far in time the waveform is sampled."""
    mode: SpanMode = SpanMode.AUTO
    multiplier: float = Field(20.0, description="Span as a multiple of the time to peak")
    fixed_span_us: float = Field(200.0, description="Span for fixed mode (µs)")


# --- Waveform ---

class WaveformSample(_Frozen):
    time: float = Field(..., description="Time (µs)")
    voltage: float = Field(..., description="Voltage (% of charging voltage)")


class WaveformMetrics(_Frozen):
    peak_voltage: float = Field(0.0, description="Peak voltage (% of charging voltage)")
    front_time: float = Field(0.0, description="Time to peak, T1 (µs)")
    tail_time: float = Field(0.0, description="Time to half value, T2 (µs)")
    efficiency: float = Field(0.0, description="Peak over summed charging voltage (%)")
    front_time_standard: float = Field(0.0, description="1.67 x (t90 - t30) on the front (µs)")
    peak_voltage_abs: float = Field(0.0, description="Peak voltage in source units")


class WaveformResult(_Frozen):
    """Sampled waveform together with the metrics derived from it."""
    samples: list[WaveformSample] = []
    metrics: WaveformMetrics = WaveformMetrics()
    alpha: float = Field(0.0, description="Tail decay rate (1/s)")
    beta: float = Field(0.0, description="Front rise rate (1/s)")
    time_span: float = Field(0.0, description="Sampled span (µs)")
    model: PoleModel = PoleModel.QUADRATIC

    @classmethod
    def empty(cls, model: PoleModel = PoleModel.QUADRATIC) -> WaveformResult:
        return cls(model=model)

    @property
    def is_empty(self) -> bool:
        return not self.samples

    @property
    def times(self) -> list[float]:
        return [s.time for s in self.samples]

    @property
    def voltages(self) -> list[float]:
        return [s.voltage for s in self.samples]


# --- Inverse problem ---

class TargetSpec(_Frozen):
    """Target impulse shape plus the capacitances already chosen."""
    t1_us: float = Field(..., description="Target front time (µs)")
    t2_us: float = Field(..., description="Target tail time (µs)")
    c1_nf: float = Field(..., description="Generator capacitance (nF)")
    c2_pf: float = Field(..., description="Load capacitance (pF)")


class SuggestedResistors(_Frozen):
    r1: float = Field(0.0, description="Front resistor (Ohms)")
    r2: float = Field(0.0, description="Tail resistor (Ohms)")
    r1_standard: float = Field(0.0, description="Front resistor snapped to the E-series (Ohms)")
    r2_standard: float = Field(0.0, description="Tail resistor snapped to the E-series (Ohms)")
    series: str = "E24"
    warnings: list[str] = []

    @property
    def is_degenerate(self) -> bool:
        return self.r1 == 0 and self.r2 == 0


class TimeEstimate(_Frozen):
    t1_us: float = Field(0.0, description="Front time (µs)")
    t2_us: float = Field(0.0, description="Tail time (µs)")


class StandardCheck(_Frozen):
    name: str
    t1_deviation_pct: float
    t2_deviation_pct: float
    within_tolerance: bool
