"""Interactive command that asks about a new module and scaffolds it."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.padding import Padding
from rich.prompt import Confirm, Prompt
from rich.text import Text

from .gradient import PRIMARY_COLOR, make_gradient
from .loader import Loader
from .metadata import (
    ModuleMetadata,
    RenderMode,
    Tab,
    validate_render_modes,
    validate_title,
)
from .scaffold import ScaffoldError

WELCOME = "Welcome to the Bookera Module TUI"

RENDER_MODE_OPTIONS = (
    (RenderMode.SIDE_PANEL, "Side Panel - Add a tab to your module so it can be viewed in side panel"),
    (RenderMode.MODULE_DAEMON, "Module Daemon - for event listeners & what not"),
    (RenderMode.PANEL, "Panel - classic"),
    (RenderMode.SETTINGS, "Settings - Put the settings in your module here"),
)

_console = Console()


def _question(text: str) -> Text:
    return Text(text, style=PRIMARY_COLOR)


def _report(err: Exception) -> None:
    _console.print(Text(str(err), style="red"), soft_wrap=True)


def _ask_title() -> str:
    while True:
        title = _console.input(_question("What’s the title of your module? "))
        try:
            validate_title(title)
        except ValueError as err:
            _report(err)
            continue
        return title


def _parse_selection(answer: str) -> list[RenderMode]:
    picked = set()
    for part in answer.replace(",", " ").split():
        try:
            index = int(part)
        except ValueError:
            raise ValueError(f"unknown option: {part}") from None
        if not 1 <= index <= len(RENDER_MODE_OPTIONS):
            raise ValueError(f"unknown option: {part}")
        picked.add(index - 1)
    modes = [RENDER_MODE_OPTIONS[i][0] for i in sorted(picked)]
    validate_render_modes(modes)
    return modes


def _ask_render_modes() -> list[RenderMode]:
    _console.print(_question("Render Modes (Where would you like your module rendered?)"))
    for number, (_, label) in enumerate(RENDER_MODE_OPTIONS, start=1):
        _console.print(f"  {number}. {label}", markup=False, soft_wrap=True)
    while True:
        answer = _console.input(_question("Choose one or more numbers, separated by commas: "))
        try:
            return _parse_selection(answer)
        except ValueError as err:
            _report(err)


def run_first_step() -> ModuleMetadata:
    """Ask for the module's title, description and render modes."""
    metadata = ModuleMetadata()
    _console.print(Padding(make_gradient(WELCOME), (2, 2, 4, 2)))

    metadata.title = _ask_title()
    metadata.description = _console.input(
        _question("Please provide a description for your module! ")
    )
    metadata.render_modes = _ask_render_modes()

    metadata.make_title_human_readable()
    return metadata


def run_side_panel_step() -> Tab:
    """Ask how the module's side-panel tab should look."""
    _console.print(Padding(Text("Tabs", style=f"on {PRIMARY_COLOR}"), (1, 1, 3, 1)))
    icon = Prompt.ask(
        _question(
            "What icon would you like to use? Icons found here https://shoelace.style/components/icon/"
        ),
        console=_console,
        default="",
        show_default=False,
    )
    show_by_default = Confirm.ask(
        _question("Would you like to show the tab on default?"),
        console=_console,
        default=False,
    )
    side = Prompt.ask(
        _question("Would you like to place this tab on the left or right side"),
        console=_console,
        choices=["left", "right"],
        default="right",
    )
    return Tab(icon=icon, show_by_default=show_by_default, show_on_left_side=side == "left")


def run_form(debug: bool = False) -> None:
    """Ask every question, then clone and template the module."""
    metadata = run_first_step()
    if metadata.has_side_panel():
        metadata.tab = run_side_panel_step()
    Loader(metadata, debug, console=_console).run()


def main(argv: list[str] | None = None) -> int:
    """Run the command; more than one argument turns on debug mode."""
    args = sys.argv[1:] if argv is None else argv
    debug = len(args) > 1
    try:
        run_form(debug)
    except ScaffoldError as err:
        print(err, file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("aborted", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())