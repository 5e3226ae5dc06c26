"""Command-line runner.

Replays a command script through the wizard and exports the palette.

A script is a whitespace-separated list of ticks. Each tick is a run of
command characters pressed before that tick is processed:

    +  INCREASE      -  DECREASE
    >  CYCLE_NEXT    <  CYCLE_PREV
    .  CONFIRM       q  terminate immediately (no output)

Repeating a character within one tick presses the key again before the tick,
which the queue collapses. Example, Linear hues, 3 hues, 3 values, no
adjustments, Basic finalization::

    palette-wizard ". + + . . . . . ." -o out/

Exit status: 0 after export or terminate; 0 when writing fails unless
``--strict-export`` is given (then 1); 1 when the script ends before the
palette is finalized; 2 for malformed scripts.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from palette_wizard.commands import Command
from palette_wizard.config import ExportConfig, WizardConfig
from palette_wizard.export import save_palette
from palette_wizard.prompts import prompt_text, selection_text
from palette_wizard.wizard import PaletteWizard

logger = logging.getLogger(__name__)

TOKEN_COMMANDS: Dict[str, Command] = {
    "+": Command.INCREASE,
    "-": Command.DECREASE,
    ">": Command.CYCLE_NEXT,
    "<": Command.CYCLE_PREV,
    ".": Command.CONFIRM,
}
TERMINATE_TOKEN = "q"


def parse_script(script: str) -> List[str]:
    """Split a script into ticks, validating every character.

    Raises:
        ValueError: On characters that are not command tokens.
    """
    ticks = script.split()
    for tick in ticks:
        for token in tick:
            if token not in TOKEN_COMMANDS and token != TERMINATE_TOKEN:
                raise ValueError(f"Unknown command token {token!r} in tick {tick!r}")
    return ticks


def run_script(script: str, config: WizardConfig = WizardConfig()) -> int:
    """Drive a wizard with ``script`` and export the result.

    Returns:
        int: Process exit status.
    """
    wizard = PaletteWizard()
    for tick in parse_script(script):
        for token in tick:
            if token == TERMINATE_TOKEN:
                wizard.terminate()
            else:
                wizard.press(TOKEN_COMMANDS[token])
        if wizard.terminated:
            logger.info("Terminated at tick %d, nothing exported", wizard.state.tick)
            return 0
        wizard.update()
        view = wizard.snapshot()
        logger.debug("%s %s", prompt_text(view), selection_text(view))
        if wizard.finished:
            break

    if not wizard.finished:
        logger.warning(
            "Script ended at stage %s before the palette was finalized",
            wizard.state.stage,
        )
        return 1

    image = wizard.export_image(config.export_resolution)
    path = config.export.resolve_path()
    if not save_palette(image, path) and config.strict_export:
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette-wizard",
        description="Replay a palette wizard command script and export the palette.",
    )
    parser.add_argument(
        "script",
        help="Command script (ticks separated by spaces); '-' reads it from stdin",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory to write into (default: ~/Desktop/palettes or ~/Desktop)",
    )
    parser.add_argument("--filename", default=ExportConfig.filename)
    parser.add_argument(
        "--resolution",
        type=int,
        default=WizardConfig.export_resolution,
        help="Pixel size of one swatch in the exported image",
    )
    parser.add_argument(
        "--strict-export",
        action="store_true",
        help="Exit with status 1 if the palette cannot be written",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    script = sys.stdin.read() if args.script == "-" else args.script
    config = WizardConfig(
        export_resolution=args.resolution,
        export=ExportConfig(directory=args.output_dir, filename=args.filename),
        strict_export=args.strict_export,
    )
    try:
        return run_script(script, config)
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
