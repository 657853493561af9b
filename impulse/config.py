"""
Engine defaults.

Values can be overridden through environment variables or a .env file
in the working directory.
"""

import os

from dotenv import load_dotenv

from impulse.models import SpanMode, TimeSpanPolicy

# Series with tables in impulse.components
E_SERIES_NAMES = ("E12", "E24", "E48", "E96")


def validate_e_series(name: str) -> str:
    """Return name if it is a supported E-series, else raise ValueError."""
    if name not in E_SERIES_NAMES:
        raise ValueError(f"Unknown series '{name}'. Must be one of: {list(E_SERIES_NAMES)}")
    return name


load_dotenv()

SAMPLE_COUNT = int(os.getenv("IMPULSE_SAMPLE_COUNT", "500"))
SPAN_MULTIPLIER = float(os.getenv("IMPULSE_SPAN_MULTIPLIER", "20"))
FIXED_SPAN_US = float(os.getenv("IMPULSE_FIXED_SPAN_US", "200"))
SPAN_MODE = SpanMode(os.getenv("IMPULSE_SPAN_MODE", SpanMode.AUTO.value))
SOURCE_VOLTAGE = float(os.getenv("IMPULSE_SOURCE_VOLTAGE", "100"))  # kV, results are in %
E_SERIES = validate_e_series(os.getenv("IMPULSE_E_SERIES", "E24"))

# Bench defaults for the simulator: a 1.2/50-class lightning impulse
DEFAULT_CIRCUIT = {
    'r1': 400.0,    # Ω
    'r2': 4000.0,   # Ω
    'c1_nf': 50.0,  # nF
    'c2_nf': 0.5,   # nF
}

# Typical component ranges (min, max) for laboratory impulse generators
PARAMETER_RANGES = {
    'r1': (10.0, 2000.0),      # Ω
    'r2': (500.0, 10000.0),    # Ω
    'c1_nf': (10.0, 200.0),    # nF
    'c2_nf': (0.1, 5.0),       # nF
}


def default_time_span() -> TimeSpanPolicy:
    return TimeSpanPolicy(
        mode=SPAN_MODE,
        multiplier=SPAN_MULTIPLIER,
        fixed_span_us=FIXED_SPAN_US,
    )


def in_typical_range(name: str, value: float) -> bool:
    """Check a value against PARAMETER_RANGES."""
    low, high = PARAMETER_RANGES[name]
    return low <= value <= high
