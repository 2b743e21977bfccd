"""
Unitary Discrimination Protocols
================================

Quantum circuits that identify an unknown gate drawn from a small, known
set of hypotheses, using a bounded number of applications of the gate, its
adjoint and its controlled form.

Package Structure:
==================
- direct.py          Direct projective discrimination (I vs X)
- kickback.py        Basis-change wrap and phase kickback (single-qubit gates)
- two_qubit.py       Two-qubit permutation gates (I⊗X, CNOT direction, SWAP)
- composite.py       Four-way tasks built from two decision stages
- statistical.py     Fixed-angle Rz vs Ry / Rz vs R1 by overlap thresholding
- overlap.py         SWAP-test overlap estimator
- hypotheses.py      Hypothesis gates and oracle factory
- tasks.py           Task registry (hypotheses, call budgets, protocols)

- common/            Shared utilities
  - oracle.py        Opaque oracle handles with invocation counting
  - circuit_utils.py Qubit allocation, measurement, execution

Key Features:
- Exact protocols: zero error on an ideal simulator
- Every protocol releases its qubits in |0⟩
- Call budgets checkable through Oracle.calls

Quick Start:
    import numpy as np
    from unitary_discrimination import create_oracle, distinguish_z_vs_minus_z
    label = distinguish_z_vs_minus_z(create_oracle("-Z"))   # -> 1

    from unitary_discrimination import distinguish_rz_vs_ry
    label = distinguish_rz_vs_ry(create_oracle("Ry"), theta=np.pi / 2)  # -> 1
"""

__version__ = "1.0.0"

# Common utilities
from .common import (
    Oracle,
    ParameterizedOracle,
    allocate_qubits,
    bits_to_int,
    run_circuit,
    run_single_shot,
)

from .hypotheses import (
    create_gate,
    create_gate_family,
    create_oracle,
    SUPPORTED_HYPOTHESES,
)
from .overlap import (
    OverlapEstimate,
    create_swap_test_circuit,
    estimate_overlap,
)

# Family A
from .direct import create_i_vs_x_circuit, distinguish_i_vs_x

# Family B
from .kickback import (
    create_i_vs_z_circuit,
    create_z_vs_s_circuit,
    create_h_vs_x_circuit,
    create_z_vs_minus_z_circuit,
    create_rz_vs_r1_circuit,
    create_y_vs_xz_circuit,
    create_four_paulis_circuit,
    distinguish_i_vs_z,
    distinguish_z_vs_s,
    distinguish_h_vs_x,
    distinguish_z_vs_minus_z,
    distinguish_rz_vs_r1,
    distinguish_y_vs_xz,
    distinguish_four_paulis,
)
from .two_qubit import (
    create_ix_vs_cnot_circuit,
    create_cnot_direction_circuit,
    create_cnot_vs_swap_circuit,
    distinguish_ix_vs_cnot,
    distinguish_cnot_direction,
    distinguish_cnot_vs_swap,
)

# Composite
from .composite import (
    distinguish_y_xz_with_phase,
    distinguish_two_qubit_gates,
)

# Family C
from .statistical import (
    distinguish_rz_vs_ry,
    distinguish_rz_vs_r1_fixed,
)

from .tasks import DiscriminationTask, TASKS, get_task

__all__ = [
    # Common
    "Oracle",
    "ParameterizedOracle",
    "allocate_qubits",
    "bits_to_int",
    "run_circuit",
    "run_single_shot",

    # Hypotheses
    "create_gate",
    "create_gate_family",
    "create_oracle",
    "SUPPORTED_HYPOTHESES",

    # Overlap estimator
    "OverlapEstimate",
    "create_swap_test_circuit",
    "estimate_overlap",

    # Family A
    "create_i_vs_x_circuit",
    "distinguish_i_vs_x",

    # Family B
    "create_i_vs_z_circuit",
    "create_z_vs_s_circuit",
    "create_h_vs_x_circuit",
    "create_z_vs_minus_z_circuit",
    "create_rz_vs_r1_circuit",
    "create_y_vs_xz_circuit",
    "create_four_paulis_circuit",
    "distinguish_i_vs_z",
    "distinguish_z_vs_s",
    "distinguish_h_vs_x",
    "distinguish_z_vs_minus_z",
    "distinguish_rz_vs_r1",
    "distinguish_y_vs_xz",
    "distinguish_four_paulis",
    "create_ix_vs_cnot_circuit",
    "create_cnot_direction_circuit",
    "create_cnot_vs_swap_circuit",
    "distinguish_ix_vs_cnot",
    "distinguish_cnot_direction",
    "distinguish_cnot_vs_swap",

    # Composite
    "distinguish_y_xz_with_phase",
    "distinguish_two_qubit_gates",

    # Family C
    "distinguish_rz_vs_ry",
    "distinguish_rz_vs_r1_fixed",

    # Tasks
    "DiscriminationTask",
    "TASKS",
    "get_task",
]
