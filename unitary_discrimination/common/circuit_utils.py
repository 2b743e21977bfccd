"""
Qubit allocation, measurement and circuit execution utilities.
"""

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, List, Sequence

from qiskit import ClassicalRegister, QuantumCircuit, QuantumRegister, transpile
from qiskit_aer import AerSimulator

from ..config import DEFAULT_OPTIMIZATION_LEVEL, DEFAULT_SHOTS, SEED_SIMULATOR


@contextmanager
def allocate_qubits(
    qc: QuantumCircuit,
    num_qubits: int,
    name: str = "q",
) -> Iterator[QuantumRegister]:
    """
    Allocate fresh qubits on a circuit for the duration of a block.

    The register is added to the circuit in |0...0⟩. When the block exits,
    every qubit of the register is reset, so the qubits are released in
    their default state whatever the protocol did with them.

    Example usage:
        with allocate_qubits(qc, 1, "anc") as anc, allocate_qubits(qc, 1, "tgt") as tgt:
            qc.h(anc[0])
            oracle.apply_controlled(qc, [anc[0]], [tgt[0]])

    Args:
        qc: Circuit the qubits belong to
        num_qubits: Number of qubits to allocate
        name: Register name (must be unique within the circuit)

    Yields:
        The allocated QuantumRegister
    """
    qreg = QuantumRegister(num_qubits, name)
    qc.add_register(qreg)
    try:
        yield qreg
    finally:
        qc.reset(qreg)


def add_classical_register(qc: QuantumCircuit, num_bits: int, name: str = "c") -> ClassicalRegister:
    """Add a classical register for measurement outcomes."""
    creg = ClassicalRegister(num_bits, name)
    qc.add_register(creg)
    return creg


def measure_in_basis(qc: QuantumCircuit, qubit, clbit, basis: str = "Z") -> None:
    """
    Measure a qubit in the Z (computational) or X (|+⟩/|−⟩) basis.

    Outcome 0 corresponds to |0⟩ or |+⟩, outcome 1 to |1⟩ or |−⟩.
    The qubit is left collapsed in the computational basis.
    """
    if basis == "X":
        qc.h(qubit)
    elif basis != "Z":
        raise ValueError(f"Unknown measurement basis: {basis}. Supported: 'Z', 'X'")
    qc.measure(qubit, clbit)


def bits_to_int(bits: Sequence[int], little_endian: bool = False) -> int:
    """
    Interpret measurement outcomes as a binary-encoded integer.

    Args:
        bits: Outcomes in measurement (clbit) order
        little_endian: If True, the first outcome is the least significant bit.
            By default the first outcome is the most significant bit.

    Returns:
        Encoded integer
    """
    ordered = list(bits)
    if little_endian:
        ordered.reverse()
    value = 0
    for bit in ordered:
        value = 2 * value + int(bit)
    return value


@lru_cache(maxsize=None)
def _default_backend() -> AerSimulator:
    return AerSimulator()


def get_backend(backend=None):
    """Return the given backend, or the shared ideal AerSimulator."""
    if backend is None:
        return _default_backend()
    return backend


def _execute(qc: QuantumCircuit, shots: int, backend, memory: bool):
    if shots < 1:
        raise ValueError(f"shots must be positive, got {shots}")

    backend = get_backend(backend)
    compiled = transpile(qc, backend, optimization_level=DEFAULT_OPTIMIZATION_LEVEL)

    run_options = {"shots": shots, "memory": memory}
    if SEED_SIMULATOR is not None:
        run_options["seed_simulator"] = SEED_SIMULATOR
    return backend.run(compiled, **run_options).result()


def run_circuit(
    qc: QuantumCircuit,
    shots: int = DEFAULT_SHOTS,
    backend=None,
) -> List[List[int]]:
    """
    Run a circuit and return the outcomes of every shot.

    Args:
        qc: QuantumCircuit with a single classical register
        shots: Number of independent executions
        backend: Qiskit backend (default: ideal AerSimulator)

    Returns:
        One list of bits per shot, indexed by clbit index
    """
    memory = _execute(qc, shots, backend, memory=True).get_memory()

    # Qiskit bitstrings put clbit 0 rightmost
    return [[int(b) for b in reversed(shot)] for shot in memory]


def run_single_shot(qc: QuantumCircuit, backend=None) -> List[int]:
    """Run a circuit once and return its measured bits (clbit order)."""
    return run_circuit(qc, shots=1, backend=backend)[0]


def get_counts(qc: QuantumCircuit, shots: int, backend=None) -> dict:
    """Run a circuit and return aggregated counts, e.g. {"0": n0, "1": n1}."""
    return _execute(qc, shots, backend, memory=False).get_counts()
