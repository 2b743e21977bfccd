"""
Tests for the overlap estimator and the fixed-angle statistical protocols.

Run with: pytest tests/
"""

import warnings

import numpy as np
import pytest


class TestOverlap:
    """Tests for overlap module."""

    def test_extract_overlap_from_counts(self):
        """Test overlap extraction from counts."""
        from unitary_discrimination.overlap import extract_overlap_from_counts

        # 75% |0⟩ outcomes
        counts = {"0": 7500, "1": 2500}
        overlap, std = extract_overlap_from_counts(counts, 10000)

        # |⟨a|b⟩|² = 2*0.75 - 1 = 0.5
        assert abs(overlap - 0.5) < 1e-10
        assert std > 0

    def test_extract_overlap_is_clipped(self):
        """Statistical fluctuations below 1/2 do not give negative overlaps."""
        from unitary_discrimination.overlap import extract_overlap_from_counts

        overlap, _ = extract_overlap_from_counts({"0": 480, "1": 520}, 1000)
        assert overlap == 0.0

    def test_extract_overlap_shot_mismatch(self):
        from unitary_discrimination.overlap import extract_overlap_from_counts

        with pytest.raises(ValueError):
            extract_overlap_from_counts({"0": 10}, 20)

    def test_clopper_pearson_all_zero(self):
        """All trials 0: the interval reaches overlap 1."""
        from unitary_discrimination.overlap import clopper_pearson_interval

        ci_low, ci_high = clopper_pearson_interval(1000, 1000, 0.99)

        assert ci_high == 1.0
        assert 0.98 < ci_low < 1.0

    def test_identical_states(self):
        """Identical states: every trial reads 0, score is 1."""
        from unitary_discrimination.overlap import estimate_overlap

        def prepare(qc, qubits):
            qc.ry(0.7, qubits[0])
            qc.cx(qubits[0], qubits[1])

        estimate = estimate_overlap(prepare, prepare, 2, trials=2000)

        assert estimate.overlap == 1.0
        assert estimate.score == 1
        assert estimate.n0 == 2000

    def test_partial_overlap(self):
        """|0⟩ vs |+⟩: overlap 1/2."""
        from unitary_discrimination.overlap import estimate_overlap

        def prepare_zero(qc, qubits):
            pass

        def prepare_plus(qc, qubits):
            qc.h(qubits[0])

        estimate = estimate_overlap(prepare_zero, prepare_plus, 1, trials=10000)

        assert abs(estimate.overlap - 0.5) < 0.05
        assert estimate.score == 0
        assert estimate.ci_low <= estimate.overlap <= estimate.ci_high

    def test_orthogonal_states(self):
        """|0⟩ vs |1⟩: overlap 0."""
        from unitary_discrimination.overlap import estimate_overlap

        def prepare_zero(qc, qubits):
            pass

        def prepare_one(qc, qubits):
            qc.x(qubits[0])

        estimate = estimate_overlap(prepare_zero, prepare_one, 1, trials=4000)

        assert estimate.overlap < 0.1
        assert sum(estimate.counts.values()) == 4000

    def test_verbose_output(self, capsys):
        from unitary_discrimination.overlap import estimate_overlap

        def prepare(qc, qubits):
            qc.h(qubits[0])

        estimate_overlap(prepare, prepare, 1, trials=100, verbose=True)

        assert "Overlap" in capsys.readouterr().out

    def test_hex_keyed_counts(self, monkeypatch):
        """Counts keyed as hex strings feed both the overlap and the interval."""
        from unitary_discrimination import overlap as overlap_module
        from unitary_discrimination.overlap import (
            estimate_overlap,
            split_outcome_counts,
        )

        assert split_outcome_counts({"0x0": 7, "0x1": 3}) == (7, 3)

        monkeypatch.setattr(
            overlap_module, "get_counts", lambda qc, shots, backend=None: {"0x0": shots}
        )

        def prepare(qc, qubits):
            pass

        estimate = estimate_overlap(prepare, prepare, 1, trials=500)

        assert estimate.n0 == 500
        assert estimate.overlap == 1.0
        assert estimate.ci_high == 1.0
        assert estimate.ci_low > 0.9

    def test_rejects_non_positive_trials(self):
        from unitary_discrimination.overlap import estimate_overlap

        def prepare(qc, qubits):
            pass

        with pytest.raises(ValueError):
            estimate_overlap(prepare, prepare, 1, trials=0)


class TestStatistical:
    """Tests for statistical module."""

    def test_theoretical_overlaps(self):
        """Test closed-form overlaps at θ = π/2."""
        from unitary_discrimination.statistical import (
            theoretical_overlaps_rz_vs_r1,
            theoretical_overlaps_rz_vs_ry,
        )

        ry = theoretical_overlaps_rz_vs_ry(np.pi / 2)
        r1 = theoretical_overlaps_rz_vs_r1(np.pi / 2)

        assert abs(ry["Rz"] - 1.0) < 1e-10
        assert abs(ry["Ry"] - 0.5) < 1e-10
        assert abs(r1["Rz"] - 1.0) < 1e-10
        assert abs(r1["R1"] - np.cos(np.pi / 8) ** 2) < 1e-10

    def test_default_budget_covers_recommended_range(self):
        """At the edge of the angle range the default trial count misses with negligible odds."""
        from unitary_discrimination.config import ANGLE_MIN, DEFAULT_OVERLAP_TRIALS
        from unitary_discrimination.statistical import (
            miss_probability,
            theoretical_overlaps_rz_vs_r1,
            theoretical_overlaps_rz_vs_ry,
        )

        ry_overlap = theoretical_overlaps_rz_vs_ry(ANGLE_MIN)["Ry"]
        r1_overlap = theoretical_overlaps_rz_vs_r1(ANGLE_MIN)["R1"]

        assert miss_probability(ry_overlap, DEFAULT_OVERLAP_TRIALS) < 1e-40
        assert miss_probability(r1_overlap, DEFAULT_OVERLAP_TRIALS) < 1e-10

    def test_rz_vs_ry_half_pi(self):
        """θ = π/2: Rz → 0 and Ry → 1 over repeated runs."""
        from unitary_discrimination.hypotheses import create_oracle
        from unitary_discrimination.statistical import distinguish_rz_vs_ry

        for _ in range(5):
            assert distinguish_rz_vs_ry(create_oracle("Rz"), np.pi / 2, trials=2000) == 0
            assert distinguish_rz_vs_ry(create_oracle("Ry"), np.pi / 2, trials=2000) == 1

    def test_rz_vs_r1_fixed_half_pi(self):
        """θ = π/2: Rz → 0 and R1 → 1 over repeated runs."""
        from unitary_discrimination.hypotheses import create_oracle
        from unitary_discrimination.statistical import distinguish_rz_vs_r1_fixed

        for _ in range(5):
            assert distinguish_rz_vs_r1_fixed(create_oracle("Rz"), np.pi / 2, trials=2000) == 0
            assert distinguish_rz_vs_r1_fixed(create_oracle("R1"), np.pi / 2, trials=2000) == 1

    @pytest.mark.parametrize("protocol_name,other", [
        ("distinguish_rz_vs_ry", "Ry"),
        ("distinguish_rz_vs_r1_fixed", "R1"),
    ])
    def test_more_trials_fewer_errors(self, protocol_name, other):
        """Misclassification rate drops when the trial budget grows."""
        from unitary_discrimination import statistical
        from unitary_discrimination.hypotheses import create_oracle

        distinguish = getattr(statistical, protocol_name)
        theta = 0.05 * np.pi
        runs = 10

        def error_count(trials):
            errors = 0
            for _ in range(runs):
                errors += distinguish(create_oracle("Rz"), theta, trials=trials) != 0
                errors += distinguish(create_oracle(other), theta, trials=trials) != 1
            return errors

        few = error_count(10)
        many = error_count(10_000)

        assert many < few
        assert many == 0

    @pytest.mark.slow
    @pytest.mark.parametrize("protocol_name,other", [
        ("distinguish_rz_vs_ry", "Ry"),
        ("distinguish_rz_vs_r1_fixed", "R1"),
    ])
    def test_default_trial_count(self, protocol_name, other):
        """The default trial count separates the hypotheses across the angle range."""
        from unitary_discrimination import statistical
        from unitary_discrimination.config import ANGLE_MAX, ANGLE_MIN
        from unitary_discrimination.hypotheses import create_oracle

        distinguish = getattr(statistical, protocol_name)

        for theta in (ANGLE_MIN, np.pi / 2, ANGLE_MAX):
            assert distinguish(create_oracle("Rz"), theta) == 0
            assert distinguish(create_oracle(other), theta) == 1

    def test_one_call_per_trial(self):
        from unitary_discrimination.hypotheses import create_oracle
        from unitary_discrimination.statistical import distinguish_rz_vs_r1_fixed

        oracle = create_oracle("R1")
        distinguish_rz_vs_r1_fixed(oracle, np.pi / 3, trials=100)

        assert oracle.calls == 1

    def test_angle_out_of_bounds(self):
        from unitary_discrimination.statistical import check_angle

        for theta in (0.0, np.pi, -0.5, 4.0):
            with pytest.raises(ValueError):
                check_angle(theta)

    def test_angle_outside_recommended_range_warns(self):
        from unitary_discrimination.statistical import check_angle

        with pytest.warns(UserWarning):
            check_angle(0.005 * np.pi)
        with pytest.warns(UserWarning):
            check_angle(0.995 * np.pi)

    def test_angle_in_recommended_range_is_silent(self):
        from unitary_discrimination.statistical import check_angle

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            check_angle(np.pi / 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
