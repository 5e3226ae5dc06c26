"""State reducer and tick orchestration.

This module wires the systems together into a single *tick* transition given
the coalesced commands gathered since the previous tick. The exported
:func:`step` is the only public entry point for advancing a wizard run and is
pure: it returns a *new* :class:`palette_wizard.state.State`.

Ordering:

1. Pending commands are applied in ``COMMAND_ORDER`` (INCREASE, DECREASE,
    CYCLE_NEXT, CYCLE_PREV, CONFIRM), each at most once no matter how many
    times it was pressed.
2. ``hue_reevaluation_system`` re-derives the hue set if the hue count
    selection changed.
3. The tick counter is bumped.
"""

from dataclasses import replace
from typing import Iterable

from pyrsistent import pset

from palette_wizard.commands import COMMAND_ORDER, Command
from palette_wizard.state import State
from palette_wizard.systems.hue import hue_reevaluation_system
from palette_wizard.systems.selection import adjust_system, cycle_system
from palette_wizard.systems.transition import confirm_system


def step(state: State, commands: Iterable[Command]) -> State:
    """Advance the wizard by one tick.

    Args:
        state (State): Previous immutable wizard state.
        commands (Iterable[Command]): Commands pending for this tick. Duplicates
            collapse into a single application.

    Returns:
        State: Next state. A finished state is returned unchanged.

    Raises:
        ValueError: If a command is not a recognized ``Command``.
    """
    if state.finished:
        return state

    pending = pset(Command(command) for command in commands)

    for command in COMMAND_ORDER:
        if command not in pending:
            continue
        state = _apply(state, command)
        if state.finished:
            return replace(state, tick=state.tick + 1)

    state = hue_reevaluation_system(state)
    return replace(state, tick=state.tick + 1)


def _apply(state: State, command: Command) -> State:
    if command == Command.INCREASE:
        return adjust_system(state, +1)
    elif command == Command.DECREASE:
        return adjust_system(state, -1)
    elif command == Command.CYCLE_NEXT:
        return cycle_system(state, +1)
    elif command == Command.CYCLE_PREV:
        return cycle_system(state, -1)
    elif command == Command.CONFIRM:
        return confirm_system(state)
    raise ValueError("Command is not valid")
