"""
Statistical overlap estimation with the SWAP test.

For two pure states |a⟩ and |b⟩ prepared on separate registers, the SWAP test
ancilla reads 0 with probability

    P(0) = (1 + |⟨a|b⟩|²) / 2

so the overlap is estimated as |⟨a|b⟩|² = 2P(0) - 1. Identical states give
P(0) = 1 exactly: a single "1" outcome proves the states differ.

Circuit structure:
- Ancilla qubit in |+⟩
- Register A prepared by the first procedure
- Register B prepared by the second procedure
- Controlled-SWAP (Fredkin) between matching qubits of A and B
- X-basis measurement of the ancilla

References:
    - Buhrman et al. Phys. Rev. Lett. 87, 167902 (2001)
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

import numpy as np
from qiskit import QuantumCircuit
from scipy.stats import beta

from .common.circuit_utils import (
    add_classical_register,
    allocate_qubits,
    get_counts,
    measure_in_basis,
)
from .config import DEFAULT_CONFIDENCE, DEFAULT_OVERLAP_TRIALS

StatePreparation = Callable[[QuantumCircuit, List], None]


@dataclass
class OverlapEstimate:
    """Container for a SWAP-test overlap estimate."""
    overlap: float
    std: float
    trials: int
    n0: int
    ci_low: float
    ci_high: float
    counts: Dict[str, int] = field(default_factory=dict)

    @property
    def score(self) -> int:
        """Overlap rounded down: 1 only if no trial ever reported a difference."""
        return int(np.floor(self.overlap))


def create_swap_test_circuit(
    prepare_a: StatePreparation,
    prepare_b: StatePreparation,
    num_qubits: int,
    name: str = "swap_test",
) -> QuantumCircuit:
    """
    Create SWAP test circuit comparing two prepared states.

    Layout:
        anc: Ancilla (SWAP test)
        a:   num_qubits qubits prepared by prepare_a
        b:   num_qubits qubits prepared by prepare_b

    Measurement outcome: |⟨a|b⟩|² = 2P(0) - 1

    Args:
        prepare_a: Function applying the first preparation to (qc, qubits)
        prepare_b: Function applying the second preparation to (qc, qubits)
        num_qubits: Size of each prepared state
        name: Circuit name

    Returns:
        QuantumCircuit with one classical bit (ancilla outcome)
    """
    qc = QuantumCircuit(name=name)
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 1, "anc") as anc, \
            allocate_qubits(qc, num_qubits, "a") as reg_a, \
            allocate_qubits(qc, num_qubits, "b") as reg_b:
        prepare_a(qc, list(reg_a))
        prepare_b(qc, list(reg_b))

        qc.h(anc[0])
        for qa, qb in zip(reg_a, reg_b):
            qc.cswap(anc[0], qa, qb)
        measure_in_basis(qc, anc[0], creg[0], "X")

    return qc


def split_outcome_counts(counts: dict) -> Tuple[int, int]:
    """Return (n0, n1) from counts keyed by bitstring or hex ("0x0")."""
    n0 = counts.get("0", counts.get("0x0", 0))
    n1 = counts.get("1", counts.get("0x1", 0))
    return n0, n1


def extract_overlap_from_counts(
    counts: dict,
    shots: int,
) -> Tuple[float, float]:
    """
    Extract overlap value from SWAP test counts.

    Args:
        counts: Dictionary of measurement outcomes {"0": n0, "1": n1}
        shots: Total number of shots

    Returns:
        Tuple of (overlap, standard_deviation), overlap clipped to [0, 1]
    """
    n0, n1 = split_outcome_counts(counts)
    if n0 + n1 != shots:
        raise ValueError(f"Counts sum to {n0 + n1}, expected {shots} shots")

    p0 = n0 / shots
    overlap = float(np.clip(2 * p0 - 1, 0.0, 1.0))

    # Standard deviation (binomial)
    p0_std = (p0 * (1 - p0) / shots) ** 0.5
    overlap_std = 2 * p0_std

    return overlap, overlap_std


def clopper_pearson_interval(
    n0: int,
    shots: int,
    confidence: float = DEFAULT_CONFIDENCE,
) -> Tuple[float, float]:
    """Exact binomial confidence interval for P(0), mapped onto the overlap."""
    alpha = 1.0 - confidence
    p_low = beta.ppf(alpha / 2, n0, shots - n0 + 1) if n0 > 0 else 0.0
    p_high = beta.ppf(1 - alpha / 2, n0 + 1, shots - n0) if n0 < shots else 1.0

    ci_low = float(np.clip(2 * p_low - 1, 0.0, 1.0))
    ci_high = float(np.clip(2 * p_high - 1, 0.0, 1.0))
    return ci_low, ci_high


def estimate_overlap(
    prepare_a: StatePreparation,
    prepare_b: StatePreparation,
    num_qubits: int,
    trials: int = DEFAULT_OVERLAP_TRIALS,
    backend=None,
    confidence: float = DEFAULT_CONFIDENCE,
    verbose: bool = False,
) -> OverlapEstimate:
    """
    Estimate |⟨a|b⟩|² from repeated independent SWAP tests.

    Every trial prepares both states afresh; only the outcome count is kept,
    so the estimate does not depend on trial order.

    Args:
        prepare_a: First state preparation (qc, qubits) -> None
        prepare_b: Second state preparation (qc, qubits) -> None
        num_qubits: Size of each prepared state
        trials: Number of SWAP test repetitions
        backend: Qiskit backend (default: ideal AerSimulator)
        confidence: Confidence level of the reported interval
        verbose: Print the estimate

    Returns:
        OverlapEstimate with value, standard error and confidence interval
    """
    if trials < 1:
        raise ValueError(f"trials must be positive, got {trials}")

    qc = create_swap_test_circuit(prepare_a, prepare_b, num_qubits)
    counts = get_counts(qc, trials, backend)

    overlap, std = extract_overlap_from_counts(counts, trials)
    n0, _ = split_outcome_counts(counts)
    ci_low, ci_high = clopper_pearson_interval(n0, trials, confidence)

    if verbose:
        print(f"  Overlap: {overlap:.6f} ± {std:.6f} ({trials} trials)")
        print(f"  {confidence:.0%} CI: [{ci_low:.6f}, {ci_high:.6f}]")

    return OverlapEstimate(
        overlap=overlap,
        std=std,
        trials=trials,
        n0=n0,
        ci_low=ci_low,
        ci_high=ci_high,
        counts=dict(counts),
    )


def exact_overlap(state_a: np.ndarray, state_b: np.ndarray) -> float:
    """Theoretical |⟨a|b⟩|² for two state vectors."""
    return float(abs(np.vdot(state_a, state_b)) ** 2)
