"""
Discrimination of two-qubit permutation gates.

All hypotheses here (I⊗X, CNOT₁₂, CNOT₂₁, SWAP, I) permute computational
basis states, so a single application to a well-chosen basis state followed
by Z-basis measurement separates each pair with certainty.

Qubit order: operand 0 is the first qubit. CNOT₁₂ is controlled by the first
qubit; CNOT₂₁ by the second.
"""

from typing import Sequence

from qiskit import QuantumCircuit

from .common.circuit_utils import (
    add_classical_register,
    allocate_qubits,
    bits_to_int,
    run_single_shot,
)
from .common.oracle import Oracle


def create_ix_vs_cnot_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit distinguishing I⊗X from CNOT₁₂.

    On |00⟩ the CNOT does nothing (control is 0) while I⊗X flips the
    second qubit.

    Layout:
        q0, q1: Operands, |00⟩; only q1 is measured

    Hypotheses:
        0: I⊗X
        1: CNOT₁₂
    """
    qc = QuantumCircuit(name="ix_vs_cnot")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 2) as q:
        oracle.apply(qc, [q[0], q[1]])
        qc.measure(q[1], creg[0])

    return qc


def decode_ix_vs_cnot(bits: Sequence[int]) -> int:
    return 1 - bits[0]


def distinguish_ix_vs_cnot(oracle: Oracle, backend=None) -> int:
    """Return 0 if the oracle is I⊗X, 1 if it is CNOT₁₂."""
    return decode_ix_vs_cnot(run_single_shot(create_ix_vs_cnot_circuit(oracle), backend))


def create_cnot_direction_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit determining the direction of a CNOT.

    Prepare |10⟩ (first qubit set). CNOT₁₂ sees an active control and flips
    the second qubit; CNOT₂₁ sees an inactive control and does nothing.

    Layout:
        q0: Preset to |1⟩, restored on release
        q1: Measured

    Hypotheses:
        0: CNOT₁₂
        1: CNOT₂₁
    """
    qc = QuantumCircuit(name="cnot_direction")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 2) as q:
        qc.x(q[0])
        oracle.apply(qc, [q[0], q[1]])
        qc.measure(q[1], creg[0])

    return qc


def decode_cnot_direction(bits: Sequence[int]) -> int:
    return 1 - bits[0]


def distinguish_cnot_direction(oracle: Oracle, backend=None) -> int:
    """Return 0 if the oracle is CNOT₁₂, 1 if it is CNOT₂₁."""
    return decode_cnot_direction(
        run_single_shot(create_cnot_direction_circuit(oracle), backend)
    )


def create_cnot_vs_swap_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit distinguishing CNOT₁₂ from SWAP.

    Prepare |01⟩ (second qubit set):
        CNOT₁₂: control is 0          → |01⟩ (value 1)
        SWAP:   qubits exchanged      → |10⟩ (value 2)
    with value = 2·q0 + q1 (first outcome most significant).

    Hypotheses:
        0: CNOT₁₂
        1: SWAP
    """
    qc = QuantumCircuit(name="cnot_vs_swap")
    creg = add_classical_register(qc, 2)

    with allocate_qubits(qc, 2) as q:
        qc.x(q[1])
        oracle.apply(qc, [q[0], q[1]])
        qc.measure(q[0], creg[0])
        qc.measure(q[1], creg[1])

    return qc


def decode_cnot_vs_swap(bits: Sequence[int]) -> int:
    return bits_to_int(bits) - 1


def distinguish_cnot_vs_swap(oracle: Oracle, backend=None) -> int:
    """Return 0 if the oracle is CNOT₁₂, 1 if it is SWAP."""
    return decode_cnot_vs_swap(
        run_single_shot(create_cnot_vs_swap_circuit(oracle), backend)
    )
