"""
Hypothesis unitaries for the discrimination tasks.

Implements gate constructors for:
- Single-qubit gates: I, X, Y, Z, S, H and the phase variants −Z, XZ, −Y, −XZ
- Two-qubit gates: I⊗I, I⊗X, CNOT₁₂, CNOT₂₁, SWAP
- Angle-parameterized gate families: Rz(θ), Ry(θ), R1(θ)

Qubit order for two-qubit gates: operand 0 is the "first" qubit.
CNOT₁₂ is controlled by the first qubit, CNOT₂₁ by the second,
and I⊗X flips the second qubit.
"""

from typing import Callable, Dict, List

import numpy as np
from qiskit import QuantumCircuit
from qiskit.circuit import Gate
from qiskit.circuit.library import PhaseGate, RYGate, RZGate, UnitaryGate

from .common.oracle import Oracle, ParameterizedOracle


# Single-qubit matrices (global phases matter for controlled forms)
_I = np.eye(2, dtype=complex)
_X = np.array([[0, 1], [1, 0]], dtype=complex)
_Y = np.array([[0, -1j], [1j, 0]], dtype=complex)
_Z = np.array([[1, 0], [0, -1]], dtype=complex)
_S = np.array([[1, 0], [0, 1j]], dtype=complex)
_H = np.array([[1, 1], [1, -1]], dtype=complex) / np.sqrt(2)

SINGLE_QUBIT_MATRICES: Dict[str, np.ndarray] = {
    "I": _I,
    "X": _X,
    "Y": _Y,
    "Z": _Z,
    "S": _S,
    "H": _H,
    "-Z": -_Z,
    "XZ": _X @ _Z,   # = -iY
    "-Y": -_Y,
    "-XZ": -(_X @ _Z),
}


def _build_ii(qc: QuantumCircuit) -> None:
    """I⊗I - nothing to do."""
    pass


def _build_ix(qc: QuantumCircuit) -> None:
    qc.x(1)


def _build_cnot12(qc: QuantumCircuit) -> None:
    qc.cx(0, 1)


def _build_cnot21(qc: QuantumCircuit) -> None:
    qc.cx(1, 0)


def _build_swap(qc: QuantumCircuit) -> None:
    qc.swap(0, 1)


TWO_QUBIT_BUILDERS: Dict[str, Callable[[QuantumCircuit], None]] = {
    "II": _build_ii,
    "IX": _build_ix,
    "CNOT12": _build_cnot12,
    "CNOT21": _build_cnot21,
    "SWAP": _build_swap,
}

# Gate families θ -> Gate
PARAMETERIZED_GATES: Dict[str, Callable[[float], Gate]] = {
    "Rz": RZGate,
    "Ry": RYGate,
    "R1": PhaseGate,
}

SUPPORTED_HYPOTHESES: List[str] = (
    list(SINGLE_QUBIT_MATRICES)
    + list(TWO_QUBIT_BUILDERS)
    + list(PARAMETERIZED_GATES)
)


def create_gate(name: str) -> Gate:
    """
    Create the gate for a fixed-arity hypothesis.

    Args:
        name: Hypothesis name, e.g. "Z", "-XZ", "CNOT21"

    Returns:
        Qiskit Gate supporting inverse() and control()
    """
    if name in SINGLE_QUBIT_MATRICES:
        return UnitaryGate(SINGLE_QUBIT_MATRICES[name], label=name)

    if name in TWO_QUBIT_BUILDERS:
        qc = QuantumCircuit(2, name=name)
        TWO_QUBIT_BUILDERS[name](qc)
        return qc.to_gate(label=name)

    if name in PARAMETERIZED_GATES:
        raise ValueError(
            f"Hypothesis '{name}' is angle-parameterized; "
            "use create_gate_family() or create_oracle()"
        )
    raise ValueError(
        f"Unknown hypothesis: {name}. "
        f"Supported hypotheses: {SUPPORTED_HYPOTHESES}"
    )


def create_gate_family(name: str) -> Callable[[float], Gate]:
    """Return the gate family θ -> Gate for an angle-parameterized hypothesis."""
    if name not in PARAMETERIZED_GATES:
        raise ValueError(
            f"Unknown parameterized hypothesis: {name}. "
            f"Supported: {list(PARAMETERIZED_GATES)}"
        )
    return PARAMETERIZED_GATES[name]


def create_oracle(name: str):
    """
    Wrap a hypothesis as an opaque oracle, as a driver would hand it to a protocol.

    Args:
        name: Hypothesis name (see SUPPORTED_HYPOTHESES)

    Returns:
        ParameterizedOracle for "Rz", "Ry", "R1"; Oracle otherwise
    """
    if name in PARAMETERIZED_GATES:
        return ParameterizedOracle(PARAMETERIZED_GATES[name], name=name)
    return Oracle(create_gate(name), name=name)
