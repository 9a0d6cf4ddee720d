"""Step definitions and the session holding the sequence state."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from dc_sequence.commands import load_step_catalog
from dc_sequence.common import SequenceError
from dc_sequence.constants import ACTION_TYPES, HUB_STEP_DESCRIPTION


@dataclass(frozen=True)
class HubCheck:
    """List hubs and let the user confirm or switch the active one."""

    description: str = HUB_STEP_DESCRIPTION


@dataclass(frozen=True)
class RunTemplate:
    """Run one catalog command for the chosen action type."""

    category: str
    action_type: str
    description: str


Step = Union[HubCheck, RunTemplate]


def build_steps(action_type) -> List[RunTemplate]:
    """Create the generated steps for an action type, in catalog order.

    Step numbering continues after the hub check (Step 2 onwards).
    """
    if action_type not in ACTION_TYPES:
        raise SequenceError(f"Invalid action type: {action_type}")

    return [
        RunTemplate(
            category=definition["category"],
            action_type=action_type,
            description=f"Step {number}: {action_type} all {definition['label']}",
        )
        for number, definition in enumerate(load_step_catalog(), start=2)
    ]


class SequenceState(Enum):
    SELECTING = "selecting"
    PROMPTING = "prompting"
    COMPLETED = "completed"
    EXITED = "exited"
    FAILED = "failed"


TERMINAL_STATES = (SequenceState.COMPLETED, SequenceState.EXITED, SequenceState.FAILED)


@dataclass
class Session:
    """Mutable state of one sequence run.

    The step list is append-only and always starts with the hub check.
    """

    steps: List[Step] = field(default_factory=lambda: [HubCheck()])
    position: int = 0
    state: SequenceState = SequenceState.SELECTING
    _action_type: Optional[str] = None

    @property
    def action_type(self):
        return self._action_type

    @action_type.setter
    def action_type(self, value):
        if self._action_type is not None:
            raise SequenceError(
                f"Action type is already set to '{self._action_type}'"
            )
        if value not in ACTION_TYPES:
            raise SequenceError(f"Invalid action type: {value}")
        self._action_type = value

    def choose_action_type(self, action_type):
        """Record the action type and append its generated steps."""
        self.action_type = action_type
        self.steps.extend(build_steps(action_type))
        self.state = SequenceState.PROMPTING

    @property
    def current_step(self) -> Optional[Step]:
        if self.position < len(self.steps):
            return self.steps[self.position]
        return None

    def advance(self):
        """Move past the current step and return it."""
        if self.position >= len(self.steps):
            raise SequenceError("Cannot advance past the last step")
        step = self.steps[self.position]
        self.position += 1
        return step

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES
