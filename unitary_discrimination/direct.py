"""
Direct projective discrimination (no ancilla).

The unknown gate is applied once to a basis state and the outcome of a
single projective measurement is the label.

Hypotheses:
    0: I
    1: X
"""

from typing import Sequence

from qiskit import QuantumCircuit

from .common.circuit_utils import (
    add_classical_register,
    allocate_qubits,
    measure_in_basis,
    run_single_shot,
)
from .common.oracle import Oracle


def create_i_vs_x_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit distinguishing I from X.

    Both gates act on |0⟩ as basis permutations: I|0⟩ = |0⟩, X|0⟩ = |1⟩,
    so a Z-basis measurement separates them with certainty.

    Layout:
        q0: Target, starts in |0⟩

    Args:
        oracle: Unknown single-qubit gate (1 application)

    Returns:
        QuantumCircuit with one classical bit
    """
    qc = QuantumCircuit(name="i_vs_x")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 1) as q:
        oracle.apply(qc, [q[0]])
        measure_in_basis(qc, q[0], creg[0], "Z")

    return qc


def decode_i_vs_x(bits: Sequence[int]) -> int:
    """Outcome 1 means the gate mapped |0⟩ to |1⟩: X."""
    return bits[0]


def distinguish_i_vs_x(oracle: Oracle, backend=None) -> int:
    """Return 0 if the oracle is I, 1 if it is X."""
    return decode_i_vs_x(run_single_shot(create_i_vs_x_circuit(oracle), backend))
