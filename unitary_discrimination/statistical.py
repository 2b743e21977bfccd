"""
Statistical threshold discrimination of fixed-angle rotation gates.

For a fixed angle θ ∈ (0, π) the candidate gates are not perfectly
distinguishable with a bounded number of calls. Instead, the state produced
with the unknown gate is compared with the state produced by the known
reference Rz(θ) in many independent SWAP-test trials:

    overlap estimate = 1   → no trial saw a difference → Rz      (label 0)
    overlap estimate < 1   → at least one trial did   → other    (label 1)

The reference always matches itself exactly, so an Rz oracle is never
misclassified. The other hypothesis escapes detection with probability
((1 + overlap) / 2)^trials.

Tasks:
    Rz(θ) vs Ry(θ):  U(θ)|0⟩                       overlap cos²(θ/2)
    Rz(θ) vs R1(θ):  ancilla |+⟩ controlling U(θ)   overlap cos²(θ/4)
"""

import warnings
from typing import Dict

import numpy as np
from numpy import cos, sin

from .common.oracle import ParameterizedOracle
from .config import ANGLE_MAX, ANGLE_MIN, DEFAULT_OVERLAP_TRIALS
from .overlap import estimate_overlap, exact_overlap


def check_angle(theta: float) -> None:
    """
    Validate a fixed discrimination angle.

    Raises:
        ValueError: If θ is not strictly between 0 and π
    """
    if not 0.0 < theta < np.pi:
        raise ValueError(f"theta must lie strictly between 0 and π, got {theta}")
    if not ANGLE_MIN <= theta <= ANGLE_MAX:
        warnings.warn(
            f"theta = {theta:.6f} is outside the recommended range "
            f"[{ANGLE_MIN:.6f}, {ANGLE_MAX:.6f}]; the overlap gap is small "
            "and more trials may be needed."
        )


def miss_probability(overlap: float, trials: int) -> float:
    """Probability that `trials` SWAP tests all read 0 for states with this overlap."""
    return ((1.0 + overlap) / 2.0) ** trials


# =============================================================================
# Rz(θ) vs Ry(θ)
# =============================================================================

def theoretical_overlaps_rz_vs_ry(theta: float) -> Dict[str, float]:
    """Overlap of each hypothesis' output state with Rz(θ)|0⟩."""
    rz_state = np.array([np.exp(-1j * theta / 2), 0])
    ry_state = np.array([cos(theta / 2), sin(theta / 2)])
    return {
        "Rz": exact_overlap(rz_state, rz_state),
        "Ry": exact_overlap(ry_state, rz_state),
    }


def distinguish_rz_vs_ry(
    oracle: ParameterizedOracle,
    theta: float,
    trials: int = DEFAULT_OVERLAP_TRIALS,
    backend=None,
) -> int:
    """
    Distinguish Rz(θ) from Ry(θ).

    Args:
        oracle: Unknown gate family, applied once per trial at angle θ
        theta: Fixed angle, 0 < θ < π
        trials: Number of SWAP-test trials
        backend: Qiskit backend (default: ideal AerSimulator)

    Returns:
        0 if the oracle is Rz, 1 if it is Ry
    """
    check_angle(theta)

    def prepare_unknown(qc, qubits):
        oracle.apply(qc, theta, [qubits[0]])

    def prepare_reference(qc, qubits):
        qc.rz(theta, qubits[0])

    estimate = estimate_overlap(
        prepare_unknown, prepare_reference, 1, trials=trials, backend=backend
    )
    return 1 - estimate.score


# =============================================================================
# Rz(θ) vs R1(θ)
# =============================================================================

def theoretical_overlaps_rz_vs_r1(theta: float) -> Dict[str, float]:
    """
    Overlap of each hypothesis' controlled output state with the Rz reference.

    R1(θ) = e^{iθ/2}·Rz(θ), so on |0⟩ the controlled forms kick back phases
    e^{-iθ/2} (Rz) and 1 (R1) onto the ancilla.
    """
    rz_state = np.array([1, 0, np.exp(-1j * theta / 2), 0]) / np.sqrt(2)
    r1_state = np.array([1, 0, 1, 0]) / np.sqrt(2)
    return {
        "Rz": exact_overlap(rz_state, rz_state),
        "R1": exact_overlap(r1_state, rz_state),
    }


def distinguish_rz_vs_r1_fixed(
    oracle: ParameterizedOracle,
    theta: float,
    trials: int = DEFAULT_OVERLAP_TRIALS,
    backend=None,
) -> int:
    """
    Distinguish Rz(θ) from R1(θ) at a fixed angle.

    The two gates differ only by the global phase e^{iθ/2}; the controlled
    form makes it a relative phase on the ancilla.

    Layout of each compared state:
        q0: Ancilla in |+⟩ (control)
        q1: Target, |0⟩

    Returns:
        0 if the oracle is Rz, 1 if it is R1
    """
    check_angle(theta)

    def prepare_unknown(qc, qubits):
        qc.h(qubits[0])
        oracle.apply_controlled(qc, theta, [qubits[0]], [qubits[1]])

    def prepare_reference(qc, qubits):
        qc.h(qubits[0])
        qc.crz(theta, qubits[0], qubits[1])

    estimate = estimate_overlap(
        prepare_unknown, prepare_reference, 2, trials=trials, backend=backend
    )
    return 1 - estimate.score
