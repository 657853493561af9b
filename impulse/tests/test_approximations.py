"""
Tests for the named T1/T2 strategies.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from impulse.approximations import (
    APPROXIMATIONS,
    estimate_front_tail,
    get_approximation,
    list_approximations,
)
from impulse.components import estimate_times
from impulse.models import CircuitParameters, PoleModel, TimeEstimate
from impulse.waveform import solve_waveform


BENCH = CircuitParameters(r1=400.0, r2=4000.0, c1_nf=50.0, c2_nf=0.5)


class TestRegistry:

    def test_names(self):
        assert set(APPROXIMATIONS) == {'closed_form', 'direct_pole', 'rc_estimate'}

    def test_list(self):
        listed = list_approximations()
        assert [a['name'] for a in listed] == list(APPROXIMATIONS)
        assert all(a['description'] for a in listed)

    def test_unknown_raises(self):
        with pytest.raises(ValueError):
            get_approximation('spice')

    def test_only_rc_estimate_skips_sampling(self):
        assert not get_approximation('rc_estimate').samples_waveform
        assert get_approximation('closed_form').samples_waveform


class TestEstimates:

    def test_closed_form_matches_solver(self):
        metrics = solve_waveform(BENCH).metrics
        est = estimate_front_tail('closed_form', BENCH)
        assert est.t1_us == pytest.approx(metrics.front_time)
        assert est.t2_us == pytest.approx(metrics.tail_time)

    def test_direct_pole_matches_solver(self):
        metrics = solve_waveform(BENCH, model=PoleModel.DIRECT).metrics
        est = estimate_front_tail('direct_pole', BENCH)
        assert est.t1_us == pytest.approx(metrics.front_time)

    def test_rc_estimate_matches_calculator(self):
        assert estimate_front_tail('rc_estimate', BENCH) == estimate_times(BENCH)

    def test_strategies_disagree_on_front_time(self):
        """Time to peak and the RC front estimate are different quantities."""
        closed = estimate_front_tail('closed_form', BENCH)
        rc = estimate_front_tail('rc_estimate', BENCH)
        assert closed.t1_us > 5 * rc.t1_us

    def test_all_degenerate_on_invalid(self):
        bad = CircuitParameters(r1=-400.0, r2=4000.0, c1_nf=50.0, c2_nf=0.5)
        for name in APPROXIMATIONS:
            assert estimate_front_tail(name, bad) == TimeEstimate()
