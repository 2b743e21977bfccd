"""
Opaque handles for the unknown unitary of a discrimination task.

An oracle wraps a Qiskit gate (or a gate family indexed by an angle) and only
exposes the capabilities a protocol is allowed to use:

- apply the operation
- apply its adjoint
- apply it controlled on one or more control qubits
- apply its adjoint controlled on one or more control qubits

Protocols never look at the wrapped gate. Every application is counted in
``calls`` so that call budgets can be checked after a protocol has run.
"""

from typing import Callable, Optional, Sequence

from qiskit import QuantumCircuit
from qiskit.circuit import Gate


class _CountingOracle:
    """Shared bookkeeping for oracle handles."""

    def __init__(self, name: Optional[str] = None):
        self._name = name
        self.calls = 0

    def __repr__(self) -> str:
        # Never expose the wrapped gate: only the (optional) handle name
        name = self._name if self._name is not None else "?"
        return f"{type(self).__name__}({name!r}, calls={self.calls})"

    def reset_calls(self) -> None:
        """Reset the invocation counter."""
        self.calls = 0

    def _append(
        self,
        qc: QuantumCircuit,
        gate: Gate,
        qubits: Sequence,
        controls: Sequence = (),
    ) -> None:
        num_targets = gate.num_qubits
        if len(qubits) != num_targets:
            raise ValueError(
                f"Oracle acts on {num_targets} qubit(s), "
                f"got {len(qubits)} target qubit(s)"
            )
        if controls:
            gate = gate.control(len(controls))
        qc.append(gate, list(controls) + list(qubits))
        self.calls += 1


class Oracle(_CountingOracle):
    """
    Fixed-arity unknown unitary.

    Example usage:
        oracle = Oracle(XGate())
        qc = QuantumCircuit(2)
        oracle.apply(qc, [1])
        oracle.apply_controlled(qc, [0], [1])
        assert oracle.calls == 2

    Attributes:
        calls: Number of applications (any form) appended so far
    """

    def __init__(self, gate: Gate, name: Optional[str] = None):
        super().__init__(name)
        self._gate = gate

    @property
    def num_qubits(self) -> int:
        return self._gate.num_qubits

    def apply(self, qc: QuantumCircuit, qubits: Sequence) -> None:
        self._append(qc, self._gate, qubits)

    def apply_adjoint(self, qc: QuantumCircuit, qubits: Sequence) -> None:
        self._append(qc, self._gate.inverse(), qubits)

    def apply_controlled(
        self,
        qc: QuantumCircuit,
        controls: Sequence,
        qubits: Sequence,
    ) -> None:
        self._append(qc, self._gate, qubits, controls)

    def apply_controlled_adjoint(
        self,
        qc: QuantumCircuit,
        controls: Sequence,
        qubits: Sequence,
    ) -> None:
        self._append(qc, self._gate.inverse(), qubits, controls)


class ParameterizedOracle(_CountingOracle):
    """
    Unknown unitary that takes a continuous angle plus its qubit operands.

    Wraps a gate family such as ``RZGate`` or ``PhaseGate``: any callable
    mapping an angle to a gate.

    Example usage:
        oracle = ParameterizedOracle(RZGate)
        oracle.apply(qc, np.pi / 2, [0])
    """

    def __init__(
        self,
        gate_family: Callable[[float], Gate],
        name: Optional[str] = None,
    ):
        super().__init__(name)
        self._gate_family = gate_family

    @property
    def num_qubits(self) -> int:
        return self._gate_family(0.0).num_qubits

    def apply(self, qc: QuantumCircuit, angle: float, qubits: Sequence) -> None:
        self._append(qc, self._gate_family(angle), qubits)

    def apply_adjoint(
        self,
        qc: QuantumCircuit,
        angle: float,
        qubits: Sequence,
    ) -> None:
        self._append(qc, self._gate_family(angle).inverse(), qubits)

    def apply_controlled(
        self,
        qc: QuantumCircuit,
        angle: float,
        controls: Sequence,
        qubits: Sequence,
    ) -> None:
        self._append(qc, self._gate_family(angle), qubits, controls)

    def apply_controlled_adjoint(
        self,
        qc: QuantumCircuit,
        angle: float,
        controls: Sequence,
        qubits: Sequence,
    ) -> None:
        self._append(qc, self._gate_family(angle).inverse(), qubits, controls)
