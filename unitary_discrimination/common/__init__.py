"""
Common utilities shared by all discrimination protocols.

Provides:
- Opaque oracle handles with invocation counting
- Scoped qubit allocation and basis measurement
- Circuit execution and classical-register decoding
"""

from .oracle import (
    Oracle,
    ParameterizedOracle,
)
from .circuit_utils import (
    allocate_qubits,
    add_classical_register,
    measure_in_basis,
    bits_to_int,
    get_backend,
    run_circuit,
    run_single_shot,
    get_counts,
)

__all__ = [
    "Oracle",
    "ParameterizedOracle",
    "allocate_qubits",
    "add_classical_register",
    "measure_in_basis",
    "bits_to_int",
    "get_backend",
    "run_circuit",
    "run_single_shot",
    "get_counts",
]
