"""Stateful wizard shell.

:class:`PaletteWizard` is the object front-ends hold on to. Input handlers
call :meth:`~PaletteWizard.press` (possibly from another thread); the frame
loop calls :meth:`~PaletteWizard.update` once per tick and then
:meth:`~PaletteWizard.snapshot` to draw. Only :meth:`update` replaces the
underlying :class:`~palette_wizard.state.State`.
"""

from typing import Iterable, Optional

from PIL import Image

from palette_wizard.commands import Command, CommandQueue
from palette_wizard.export import EXPORT_RESOLUTION, palette_image
from palette_wizard.snapshot import Snapshot, snapshot
from palette_wizard.state import State
from palette_wizard.step import step


class PaletteWizard:
    state: State
    queue: CommandQueue

    def __init__(self, state: Optional[State] = None):
        self.state = state if state is not None else State()
        self.queue = CommandQueue()

    def press(self, command: Command) -> None:
        """Queue ``command`` for the next tick."""
        self.queue.push(command)

    def terminate(self) -> None:
        """Request an immediate exit without exporting."""
        self.queue.request_terminate()

    @property
    def terminated(self) -> bool:
        return self.queue.terminate_requested

    @property
    def finished(self) -> bool:
        return self.state.finished

    def update(self, commands: Optional[Iterable[Command]] = None) -> State:
        """Run one tick.

        Args:
            commands: Commands for this tick. ``None`` drains the queue.

        Returns:
            State: The new state.
        """
        if commands is None:
            commands = self.queue.drain()
        self.state = step(self.state, commands)
        return self.state

    def snapshot(self) -> Snapshot:
        return snapshot(self.state)

    def export_image(self, resolution: int = EXPORT_RESOLUTION) -> Image.Image:
        """Build the palette image of a finished run.

        Raises:
            ValueError: If the palette has not been finalized yet.
        """
        if not self.state.finished or self.state.final_colors is None:
            raise ValueError("Palette is not finalized yet")
        return palette_image(self.state.final_colors, resolution)
