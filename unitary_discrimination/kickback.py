"""
Single-qubit discrimination by basis-change wrapping and phase kickback.

Two techniques are used:

1. Basis-change wrap: H · U · H turns a relative phase of U into a bit flip.

2. Phase kickback: an ancilla in |+⟩ controls U on a target. If U acts on
   the target as a scalar c (U|ψ⟩ = c|ψ⟩), the ancilla picks up the relative
   phase c:
       (|0⟩ + |1⟩)|ψ⟩ / √2  →  (|0⟩ + c|1⟩)|ψ⟩ / √2
   A global phase of U, invisible on its own, becomes observable on the
   ancilla. For c = ±1 an X-basis measurement of the ancilla decides the
   sign with certainty.

Circuit structure (kickback):
- Ancilla qubit in |+⟩
- Target qubit in |0⟩ (an eigenstate of every hypothesis used here)
- Controlled applications of the oracle
- X-basis measurement of the ancilla

References:
    - Cleve et al. Proc. R. Soc. Lond. A 454, 339 (1998)
"""

from typing import Sequence

from qiskit import QuantumCircuit

from .common.circuit_utils import (
    add_classical_register,
    allocate_qubits,
    measure_in_basis,
    run_single_shot,
)
from .common.oracle import Oracle, ParameterizedOracle
from .config import KICKBACK_ANGLE


# =============================================================================
# BASIS-CHANGE WRAP
# =============================================================================

def create_i_vs_z_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit distinguishing I from Z.

    H·I·H = I leaves |0⟩ alone, H·Z·H = X flips it.

    Layout:
        q0: Target, |0⟩ → |+⟩ → U → X-basis measurement

    Hypotheses:
        0: I
        1: Z
    """
    qc = QuantumCircuit(name="i_vs_z")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 1) as q:
        qc.h(q[0])
        oracle.apply(qc, [q[0]])
        measure_in_basis(qc, q[0], creg[0], "X")

    return qc


def decode_i_vs_z(bits: Sequence[int]) -> int:
    return bits[0]


def distinguish_i_vs_z(oracle: Oracle, backend=None) -> int:
    """Return 0 if the oracle is I, 1 if it is Z."""
    return decode_i_vs_z(run_single_shot(create_i_vs_z_circuit(oracle), backend))


def create_z_vs_s_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit distinguishing Z from S.

    A single application only gives a relative phase of -1 versus i, which
    no measurement separates perfectly. Two applications do:
    Z² = I and S² = Z, so the I-vs-Z wrap applies.

    Layout:
        q0: Target, |0⟩ → |+⟩ → U → U → X-basis measurement

    Hypotheses:
        0: Z
        1: S
    """
    qc = QuantumCircuit(name="z_vs_s")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 1) as q:
        qc.h(q[0])
        oracle.apply(qc, [q[0]])
        oracle.apply(qc, [q[0]])
        measure_in_basis(qc, q[0], creg[0], "X")

    return qc


def decode_z_vs_s(bits: Sequence[int]) -> int:
    return bits[0]


def distinguish_z_vs_s(oracle: Oracle, backend=None) -> int:
    """Return 0 if the oracle is Z, 1 if it is S."""
    return decode_z_vs_s(run_single_shot(create_z_vs_s_circuit(oracle), backend))


def create_h_vs_x_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit distinguishing H from X.

    Sandwich a fixed X between two applications: H·X·H = Z keeps |0⟩,
    X·X·X = X flips it.

    Hypotheses:
        0: H
        1: X
    """
    qc = QuantumCircuit(name="h_vs_x")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 1) as q:
        oracle.apply(qc, [q[0]])
        qc.x(q[0])
        oracle.apply(qc, [q[0]])
        measure_in_basis(qc, q[0], creg[0], "Z")

    return qc


def decode_h_vs_x(bits: Sequence[int]) -> int:
    return bits[0]


def distinguish_h_vs_x(oracle: Oracle, backend=None) -> int:
    """Return 0 if the oracle is H, 1 if it is X."""
    return decode_h_vs_x(run_single_shot(create_h_vs_x_circuit(oracle), backend))


# =============================================================================
# PHASE KICKBACK
# =============================================================================

def create_z_vs_minus_z_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit distinguishing Z from −Z.

    The two gates differ only by a global phase. On the target |0⟩,
    Z acts as +1 and −Z as −1; the controlled form kicks the sign back
    onto the ancilla.

    Layout:
        q0: Ancilla (kickback), measured in the X basis
        q1: Target, |0⟩

    Hypotheses:
        0: Z
        1: −Z

    Args:
        oracle: Unknown single-qubit gate (1 controlled application)

    Returns:
        QuantumCircuit with one classical bit (ancilla outcome)
    """
    qc = QuantumCircuit(name="z_vs_minus_z")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 1, "anc") as anc, allocate_qubits(qc, 1, "tgt") as tgt:
        qc.h(anc[0])
        oracle.apply_controlled(qc, [anc[0]], [tgt[0]])
        measure_in_basis(qc, anc[0], creg[0], "X")

    return qc


def decode_z_vs_minus_z(bits: Sequence[int]) -> int:
    return bits[0]


def distinguish_z_vs_minus_z(oracle: Oracle, backend=None) -> int:
    """Return 0 if the oracle is Z, 1 if it is −Z."""
    return decode_z_vs_minus_z(
        run_single_shot(create_z_vs_minus_z_circuit(oracle), backend)
    )


def create_rz_vs_r1_circuit(oracle: ParameterizedOracle) -> QuantumCircuit:
    """
    Create circuit distinguishing the Rz family from the R1 family.

    The protocol chooses the angle. Applying controlled U(π) followed by
    controlled U(−π)† amounts to a controlled U(2π), where
        Rz(2π) = −I    and    R1(2π) = I,
    so the ancilla ends in |−⟩ for Rz and |+⟩ for R1.

    Layout:
        q0: Ancilla (kickback), measured in the X basis
        q1: Target, |0⟩

    Hypotheses:
        0: Rz
        1: R1

    Args:
        oracle: Unknown gate family θ -> U(θ) (2 controlled applications)

    Returns:
        QuantumCircuit with one classical bit (ancilla outcome)
    """
    qc = QuantumCircuit(name="rz_vs_r1")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 1, "anc") as anc, allocate_qubits(qc, 1, "tgt") as tgt:
        qc.h(anc[0])
        oracle.apply_controlled(qc, KICKBACK_ANGLE, [anc[0]], [tgt[0]])
        oracle.apply_controlled_adjoint(qc, -KICKBACK_ANGLE, [anc[0]], [tgt[0]])
        measure_in_basis(qc, anc[0], creg[0], "X")

    return qc


def decode_rz_vs_r1(bits: Sequence[int]) -> int:
    """Ancilla |−⟩ (outcome 1) means a −1 phase was kicked back: Rz."""
    return 1 - bits[0]


def distinguish_rz_vs_r1(oracle: ParameterizedOracle, backend=None) -> int:
    """Return 0 if the oracle is Rz, 1 if it is R1."""
    return decode_rz_vs_r1(run_single_shot(create_rz_vs_r1_circuit(oracle), backend))


def create_y_vs_xz_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit distinguishing Y from XZ.

    Y = i·XZ, a global phase apart. The phase i cannot be read out exactly in
    one shot, but its square can: Y² = I while (XZ)² = −I. Two controlled
    applications kick back +1 or −1.

    Layout:
        q0: Ancilla (kickback), measured in the X basis
        q1: Target, |0⟩

    Hypotheses:
        0: Y (or −Y)
        1: XZ (or −XZ)
    """
    qc = QuantumCircuit(name="y_vs_xz")
    creg = add_classical_register(qc, 1)

    with allocate_qubits(qc, 1, "anc") as anc, allocate_qubits(qc, 1, "tgt") as tgt:
        qc.h(anc[0])
        oracle.apply_controlled(qc, [anc[0]], [tgt[0]])
        oracle.apply_controlled(qc, [anc[0]], [tgt[0]])
        measure_in_basis(qc, anc[0], creg[0], "X")

    return qc


def decode_y_vs_xz(bits: Sequence[int]) -> int:
    return bits[0]


def distinguish_y_vs_xz(oracle: Oracle, backend=None) -> int:
    """Return 0 if the oracle is Y, 1 if it is XZ (signs are ignored)."""
    return decode_y_vs_xz(run_single_shot(create_y_vs_xz_circuit(oracle), backend))


# =============================================================================
# BELL-BASIS DISCRIMINATION
# =============================================================================

def create_four_paulis_circuit(oracle: Oracle) -> QuantumCircuit:
    """
    Create circuit distinguishing I, X, Y and Z.

    U on one half of |Φ⁺⟩ produces four mutually orthogonal Bell states:
        I → |Φ⁺⟩,  X → |Ψ⁺⟩,  Y → i|Ψ⁻⟩,  Z → |Φ⁻⟩
    CNOT followed by H on the first qubit maps them to
        |Φ⁺⟩ → 00,  |Ψ⁺⟩ → 01,  |Ψ⁻⟩ → 11,  |Φ⁻⟩ → 10   (q0 q1)

    Layout:
        q0, q1: Bell pair, U applied to q0

    Hypotheses:
        0: I
        1: X
        2: Y
        3: Z
    """
    qc = QuantumCircuit(name="four_paulis")
    creg = add_classical_register(qc, 2)

    with allocate_qubits(qc, 2) as q:
        qc.h(q[0])
        qc.cx(q[0], q[1])
        oracle.apply(qc, [q[0]])
        qc.cx(q[0], q[1])
        qc.h(q[0])
        qc.measure(q[0], creg[0])
        qc.measure(q[1], creg[1])

    return qc


def decode_four_paulis(bits: Sequence[int]) -> int:
    """Gray-code decode: 00 → 0, 01 → 1, 11 → 2, 10 → 3."""
    b0, b1 = bits[0], bits[1]
    return 2 * b0 + (b0 ^ b1)


def distinguish_four_paulis(oracle: Oracle, backend=None) -> int:
    """Return 0 for I, 1 for X, 2 for Y, 3 for Z."""
    return decode_four_paulis(
        run_single_shot(create_four_paulis_circuit(oracle), backend)
    )
