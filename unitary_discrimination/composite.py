"""
Four-way discrimination built from two sequential decision stages.

Each protocol runs a first circuit, turns its outcome into an enumerated
classical value, and lets that value select the preparation of the second
circuit. Measured qubits collapse to a classically known basis state, so the
second stage re-prepares that state on fresh qubits instead of carrying the
first circuit's qubits over.

Protocols:
- Y, −XZ, −Y, XZ:        Y-vs-XZ (2 calls) + sign check against a known reference (1 call)
- I, CNOT₁₂, CNOT₂₁, SWAP: |11⟩ probe (1 call) + CNOT direction or SWAP check (1 call)
"""

from enum import IntEnum
from typing import Dict, Sequence, Tuple

from qiskit import QuantumCircuit

from .common.circuit_utils import (
    add_classical_register,
    allocate_qubits,
    bits_to_int,
    measure_in_basis,
    run_single_shot,
)
from .common.oracle import Oracle
from .hypotheses import create_gate
from .kickback import distinguish_y_vs_xz
from .two_qubit import distinguish_cnot_direction


# =============================================================================
# Y, −XZ, −Y, XZ
# =============================================================================

class PauliFamily(IntEnum):
    """Outcome of the Y-vs-XZ stage (global sign not yet known)."""
    Y = 0
    XZ = 1


# Label k means U = iᵏ·Y:  Y, i·Y = −XZ, −Y, −i·Y = XZ
_PHASE_LABELS: Dict[Tuple[PauliFamily, int], int] = {
    (PauliFamily.Y, 0): 0,    # Y
    (PauliFamily.XZ, 1): 1,   # −XZ
    (PauliFamily.Y, 1): 2,    # −Y
    (PauliFamily.XZ, 0): 3,   # XZ
}


def create_sign_circuit(oracle: Oracle, family: PauliFamily) -> QuantumCircuit:
    """
    Create circuit comparing the oracle with a known reference gate.

    The reference R is Y or XZ according to the first stage, so R†·U = ±I.
    Controlled U followed by controlled R† kicks the sign onto the ancilla.

    Layout:
        q0: Ancilla (kickback), measured in the X basis
        q1: Target, |0⟩
    """
    reference = create_gate(family.name)

    qc = QuantumCircuit(name=f"sign_{family.name}")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 1, "anc") as anc, allocate_qubits(qc, 1, "tgt") as tgt:
        qc.h(anc[0])
        oracle.apply_controlled(qc, [anc[0]], [tgt[0]])
        qc.append(reference.inverse().control(1), [anc[0], tgt[0]])
        measure_in_basis(qc, anc[0], creg[0], "X")

    return qc


def distinguish_y_xz_with_phase(oracle: Oracle, backend=None) -> int:
    """
    Distinguish Y, −XZ, −Y and XZ with three oracle calls.

    Returns:
        0 for Y, 1 for −XZ, 2 for −Y, 3 for XZ
    """
    family = PauliFamily(distinguish_y_vs_xz(oracle, backend))
    sign_bit = run_single_shot(create_sign_circuit(oracle, family), backend)[0]
    return _PHASE_LABELS[(family, sign_bit)]


# =============================================================================
# I, CNOT₁₂, CNOT₂₁, SWAP
# =============================================================================

class ProbeOutcome(IntEnum):
    """
    Outcome of applying the gate to |11⟩, value = 2·q0 + q1.

    A zero value cannot arise from these permutation gates; decoding it
    raises ValueError.
    """
    FIRST_FLIPPED = 1    # |01⟩: CNOT₂₁
    SECOND_FLIPPED = 2   # |10⟩: CNOT₁₂
    UNCHANGED = 3        # |11⟩: I or SWAP


IDENTITY_LABEL = 0
SWAP_LABEL = 3


def create_both_ones_circuit(oracle: Oracle) -> QuantumCircuit:
    """Create the first-stage circuit: apply the gate to |11⟩ and measure both qubits."""
    qc = QuantumCircuit(name="both_ones_probe")
    creg = add_classical_register(qc, 2)

    with allocate_qubits(qc, 2) as q:
        qc.x(q[0])
        qc.x(q[1])
        oracle.apply(qc, [q[0], q[1]])
        qc.measure(q[0], creg[0])
        qc.measure(q[1], creg[1])

    return qc


def decode_both_ones(bits: Sequence[int]) -> ProbeOutcome:
    return ProbeOutcome(bits_to_int(bits))


def create_swap_check_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create the second-stage circuit for the UNCHANGED branch.

    Starts from the collapsed |11⟩ with the first qubit flipped back, i.e. |01⟩.
    SWAP moves the excitation to the first qubit; I leaves it where it is.
    """
    qc = QuantumCircuit(name="swap_check")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 2) as q:
        qc.x(q[1])
        oracle.apply(qc, [q[0], q[1]])
        qc.measure(q[0], creg[0])

    return qc


def distinguish_two_qubit_gates(oracle: Oracle, backend=None) -> int:
    """
    Distinguish I, CNOT₁₂, CNOT₂₁ and SWAP with at most two oracle calls.

    Returns:
        0 for I, 1 for CNOT₁₂, 2 for CNOT₂₁, 3 for SWAP
    """
    probe = decode_both_ones(run_single_shot(create_both_ones_circuit(oracle), backend))

    if probe != ProbeOutcome.UNCHANGED:
        return distinguish_cnot_direction(oracle, backend) + 1

    swapped = run_single_shot(create_swap_check_circuit(oracle), backend)[0]
    return SWAP_LABEL if swapped else IDENTITY_LABEL
