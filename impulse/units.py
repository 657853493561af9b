"""
Unit conversion and small numeric helpers.

Inputs and outputs use the units printed on a test bay's component
labels (Ω, nF, pF, µs); everything in between is SI.
"""

import math

NANO = 1e-9
PICO = 1e-12
MICRO = 1e-6

# SI prefix table
_SI_PREFIXES = [
    (1e-12, 'p'),
    (1e-9,  'n'),
    (1e-6,  'µ'),
    (1e-3,  'm'),
    (1e0,   ''),
    (1e3,   'k'),
    (1e6,   'M'),
    (1e9,   'G'),
]


def nf_to_farad(value_nf: float) -> float:
    return value_nf * NANO


def pf_to_farad(value_pf: float) -> float:
    return value_pf * PICO


def farad_to_nf(value_f: float) -> float:
    return value_f / NANO


def us_to_seconds(value_us: float) -> float:
    return value_us * MICRO


def seconds_to_us(value_s: float) -> float:
    return value_s / MICRO


def all_positive(*values: float) -> bool:
    """True when every value is a finite number greater than zero."""
    return all(math.isfinite(v) and v > 0 for v in values)


def engineering_notation(value: float, unit: str = '', precision: int = 3) -> str:
    """
    Format a value with an SI prefix.

    Examples:
        engineering_notation(4545.45, 'Ω') → '4.55kΩ'
        engineering_notation(5e-10, 'F')   → '500pF'
        engineering_notation(1.2e-6, 's')  → '1.2µs'
    """
    if value == 0 or not math.isfinite(value):
        return f"{value:g}{unit}"

    sign = '-' if value < 0 else ''
    magnitude = abs(value)

    for scale, prefix in reversed(_SI_PREFIXES):
        # Round first so 999.9996 prints as 1k rather than 1e+03
        scaled = float(f"{magnitude / scale:.{precision}g}")
        if scaled >= 1 or scale == _SI_PREFIXES[0][0]:
            if scaled >= 1000 and scale != _SI_PREFIXES[-1][0]:
                continue
            text = f"{scaled:.{precision}g}"
            return f"{sign}{text}{prefix}{unit}"

    return f"{value:.{precision}g}{unit}"
