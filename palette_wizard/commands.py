"""Input commands and the coalescing command queue.

Defines the human readable :class:`Command` (string enum) consumed by
:func:`palette_wizard.step.step`, a stable integer :class:`GymCommand`
mapping for Gymnasium, and :class:`CommandQueue`, the hand-off point between
an input producer (UI event thread, key listener, CLI script reader) and the
single consumer that advances the wizard.

``COMMAND_ORDER`` is the canonical order in which pending commands are
applied within one tick.
"""

import threading
from enum import IntEnum, StrEnum, auto

from pyrsistent import pset
from pyrsistent.typing import PSet


class Command(StrEnum):
    """String enum of wizard commands.

    Members:
        INCREASE, DECREASE: Step the active selection (or tint channel).
        CYCLE_NEXT, CYCLE_PREV: Shift the hue offset (or rotate the tint channel).
        CONFIRM: Capture the selection and advance to the next stage.
    """

    INCREASE = auto()
    DECREASE = auto()
    CYCLE_NEXT = auto()
    CYCLE_PREV = auto()
    CONFIRM = auto()


COMMAND_ORDER = [
    Command.INCREASE,
    Command.DECREASE,
    Command.CYCLE_NEXT,
    Command.CYCLE_PREV,
    Command.CONFIRM,
]


class GymCommand(IntEnum):
    """Stable integer mapping for Gymnasium ``Discrete`` spaces."""

    INCREASE = 0
    DECREASE = auto()
    CYCLE_NEXT = auto()
    CYCLE_PREV = auto()
    CONFIRM = auto()



class CommandQueue:
    """Coalescing set of pending commands.

    At most one instance of each :class:`Command` is pending between ticks;
    pushing a command that is already pending has no effect. Producers call
    :meth:`push` (or :meth:`request_terminate`) from any thread, the consumer
    calls :meth:`drain` once per tick which returns and clears the pending set
    atomically.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: PSet[Command] = pset()
        self._terminate = False

    def push(self, command: Command) -> None:
        with self._lock:
            self._pending = self._pending.add(Command(command))

    def drain(self) -> PSet[Command]:
        """Return the pending commands and reset the queue."""
        with self._lock:
            pending, self._pending = self._pending, pset()
        return pending

    def request_terminate(self) -> None:
        """Flag an immediate exit; the consumer checks :attr:`terminate_requested`."""
        with self._lock:
            self._terminate = True

    @property
    def terminate_requested(self) -> bool:
        with self._lock:
            return self._terminate

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)

    def __contains__(self, command: object) -> bool:
        with self._lock:
            return command in self._pending
