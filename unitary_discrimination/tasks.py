"""
Registry of discrimination tasks.

Each task records its hypothesis set (index = returned label), the maximum
number of oracle invocations its protocol performs (per SWAP-test trial for
statistical tasks), and the protocol itself.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .composite import distinguish_two_qubit_gates, distinguish_y_xz_with_phase
from .direct import distinguish_i_vs_x
from .kickback import (
    distinguish_four_paulis,
    distinguish_h_vs_x,
    distinguish_i_vs_z,
    distinguish_rz_vs_r1,
    distinguish_y_vs_xz,
    distinguish_z_vs_minus_z,
    distinguish_z_vs_s,
)
from .statistical import distinguish_rz_vs_r1_fixed, distinguish_rz_vs_ry
from .two_qubit import (
    distinguish_cnot_direction,
    distinguish_cnot_vs_swap,
    distinguish_ix_vs_cnot,
)

# Protocol families
DIRECT = "direct"
KICKBACK = "kickback"
COMPOSITE = "composite"
STATISTICAL = "statistical"


@dataclass(frozen=True)
class DiscriminationTask:
    """Container for one discrimination task."""
    name: str
    hypotheses: Tuple[str, ...]
    max_calls: int
    family: str
    distinguish: Callable[..., int]
    fixed_angle: bool = False

    def label_of(self, hypothesis: str) -> int:
        """Return the label the protocol must output for a hypothesis."""
        if hypothesis not in self.hypotheses:
            raise ValueError(
                f"'{hypothesis}' is not a hypothesis of task '{self.name}'. "
                f"Hypotheses: {list(self.hypotheses)}"
            )
        return self.hypotheses.index(hypothesis)


_TASK_LIST = [
    DiscriminationTask("i_vs_x", ("I", "X"), 1, DIRECT, distinguish_i_vs_x),
    DiscriminationTask("i_vs_z", ("I", "Z"), 1, KICKBACK, distinguish_i_vs_z),
    DiscriminationTask("z_vs_s", ("Z", "S"), 2, KICKBACK, distinguish_z_vs_s),
    DiscriminationTask("h_vs_x", ("H", "X"), 2, KICKBACK, distinguish_h_vs_x),
    DiscriminationTask("z_vs_minus_z", ("Z", "-Z"), 1, KICKBACK, distinguish_z_vs_minus_z),
    DiscriminationTask("rz_vs_r1", ("Rz", "R1"), 2, KICKBACK, distinguish_rz_vs_r1),
    DiscriminationTask("y_vs_xz", ("Y", "XZ"), 2, KICKBACK, distinguish_y_vs_xz),
    DiscriminationTask(
        "y_xz_with_phase", ("Y", "-XZ", "-Y", "XZ"), 3, COMPOSITE,
        distinguish_y_xz_with_phase,
    ),
    DiscriminationTask(
        "four_paulis", ("I", "X", "Y", "Z"), 1, KICKBACK, distinguish_four_paulis,
    ),
    DiscriminationTask("ix_vs_cnot", ("IX", "CNOT12"), 1, KICKBACK, distinguish_ix_vs_cnot),
    DiscriminationTask(
        "cnot_direction", ("CNOT12", "CNOT21"), 1, KICKBACK, distinguish_cnot_direction,
    ),
    DiscriminationTask(
        "cnot_vs_swap", ("CNOT12", "SWAP"), 1, KICKBACK, distinguish_cnot_vs_swap,
    ),
    DiscriminationTask(
        "two_qubit_gates", ("II", "CNOT12", "CNOT21", "SWAP"), 2, COMPOSITE,
        distinguish_two_qubit_gates,
    ),
    DiscriminationTask(
        "rz_vs_ry", ("Rz", "Ry"), 1, STATISTICAL, distinguish_rz_vs_ry,
        fixed_angle=True,
    ),
    DiscriminationTask(
        "rz_vs_r1_fixed", ("Rz", "R1"), 1, STATISTICAL, distinguish_rz_vs_r1_fixed,
        fixed_angle=True,
    ),
]

TASKS: Dict[str, DiscriminationTask] = {task.name: task for task in _TASK_LIST}


def get_task(name: str) -> DiscriminationTask:
    """Look up a task by name."""
    if name not in TASKS:
        raise ValueError(f"Unknown task: {name}. Supported tasks: {list(TASKS)}")
    return TASKS[name]
