"""
Tests for standard impulse shapes and tolerance checks.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from impulse.components import solve_resistors_from_targets
from impulse.models import TargetSpec
from impulse.standards import (
    STANDARD_WAVEFORMS,
    check_waveform,
    design_for_standard,
    get_standard,
)


class TestStandardWaveforms:

    def test_lightning(self):
        std = get_standard('lightning')
        assert (std.t1_us, std.t2_us) == (1.2, 50.0)
        assert std.label == '1.2/50 µs'

    def test_switching(self):
        std = get_standard('switching')
        assert (std.t1_us, std.t2_us) == (250.0, 2500.0)
        assert std.label == '250/2500 µs'

    def test_unknown_raises(self):
        with pytest.raises(ValueError):
            get_standard('chopped')

    def test_registry(self):
        assert set(STANDARD_WAVEFORMS) == {'lightning', 'switching'}


class TestCheckWaveform:

    def test_nominal_within_tolerance(self):
        check = check_waveform(1.2, 50.0)
        assert check.within_tolerance
        assert check.t1_deviation_pct == pytest.approx(0.0)
        assert check.t2_deviation_pct == pytest.approx(0.0)

    def test_front_tolerance(self):
        """T1 tolerance is ±30 %: 1.5 µs passes, 1.6 µs fails."""
        assert check_waveform(1.5, 50.0).within_tolerance
        assert not check_waveform(1.6, 50.0).within_tolerance

    def test_tail_out_of_tolerance(self):
        check = check_waveform(1.2, 65.0)
        assert check.t2_deviation_pct == pytest.approx(30.0)
        assert not check.within_tolerance

    def test_degenerate_never_passes(self):
        assert not check_waveform(0.0, 0.0).within_tolerance
        assert not check_waveform(1.2, 0.0, 'lightning').within_tolerance

    def test_switching(self):
        assert check_waveform(260.0, 2000.0, 'switching').within_tolerance


class TestDesignForStandard:

    def test_lightning_design(self):
        result = design_for_standard('lightning', c1_nf=10.0, c2_pf=1000.0)
        expected = solve_resistors_from_targets(
            TargetSpec(t1_us=1.2, t2_us=50.0, c1_nf=10.0, c2_pf=1000.0)
        )
        assert result == expected
        assert result.r1 == pytest.approx(1320.0)

    def test_series_override(self):
        result = design_for_standard('lightning', c1_nf=10.0, c2_pf=1000.0, series='E96')
        assert result.series == 'E96'

    def test_invalid_capacitance(self):
        result = design_for_standard('switching', c1_nf=0.0, c2_pf=1000.0)
        assert result.is_degenerate
