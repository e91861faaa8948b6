"""Animated progress display while the module is cloned and templated."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field
from enum import IntEnum

from rich.console import Console
from rich.live import Live
from rich.padding import Padding
from rich.text import Text

from .debuglog import debug_print
from .gradient import create_blend, make_gradient, rotate_blend
from .metadata import ModuleMetadata
from .scaffold import clone_repo, template_repo

CREATE_MODULE = "Cloning repo"
CREATE_TEMPLATE = "Creating template"
IS_DONE_MESSAGE = "Enjoy 🎉\nRun:\n\nbun i\nbun run dev"

DIVISOR = 9
TOTAL = DIVISOR * 3
TICK_INTERVAL = 0.05


class Step(IntEnum):
    """Stages of scaffolding."""

    IS_CLONING = 0
    IS_TEMPLATING = 1
    IS_DONE = 2


_LOADING_BASES = {Step.IS_CLONING: CREATE_MODULE, Step.IS_TEMPLATING: CREATE_TEMPLATE}
_STEP_MESSAGES = {
    Step.IS_CLONING: CREATE_MODULE + ".",
    Step.IS_TEMPLATING: CREATE_TEMPLATE,
    Step.IS_DONE: IS_DONE_MESSAGE,
}


def loading_message(step: Step, tick: int) -> str:
    """Return the message shown at ``tick`` during ``step``, with animated dots."""
    base = _LOADING_BASES.get(step)
    if base is None:
        return IS_DONE_MESSAGE
    phase = tick % TOTAL
    if phase < DIVISOR:
        dots = ".  "
    elif phase < DIVISOR * 2:
        dots = ".. "
    else:
        dots = "..."
    return base + dots


@dataclass
class MessageGradient:
    """A message together with the colour blend it is drawn with."""

    message: str
    blend: list[str] | None = field(default=None)

    def __post_init__(self) -> None:
        if self.blend is None:
            self.blend = create_blend(self.message)

    def update_message(self, message: str) -> None:
        """Change the text while keeping the current blend."""
        self.message = message

    def rotate(self) -> None:
        """Shift the blend one place so the colours appear to move."""
        self.blend = rotate_blend(self.blend)


class Loader:
    """Runs cloning and templating in the background while animating progress."""

    def __init__(
        self,
        metadata: ModuleMetadata,
        debug: bool = False,
        *,
        console: Console | None = None,
        interval: float = TICK_INTERVAL,
    ) -> None:
        self.metadata = metadata
        self.debug = debug
        self.interval = interval
        self.step = Step.IS_CLONING
        self.ticks = 0
        self.gradient = MessageGradient(_STEP_MESSAGES[Step.IS_CLONING])
        self._console = console or Console()

    def tick(self) -> None:
        """Advance the animation by one frame."""
        debug_print("tick")
        self.ticks += 1
        if self.step in _LOADING_BASES:
            self.gradient.update_message(loading_message(self.step, self.ticks))
        self.gradient.rotate()

    def advance(self, step: Step) -> None:
        """Move to ``step`` and show its message."""
        self.gradient = MessageGradient(_STEP_MESSAGES[step])
        self.step = step
        debug_print(f"received message: {int(step)}")

    def view(self) -> Text:
        """Return the current frame."""
        return make_gradient(self.gradient.message, self.gradient.blend)

    def _frame(self) -> Padding:
        return Padding(self.view(), (0, 0, 2, 0))

    def _work(self, events: queue.Queue) -> None:
        try:
            clone_repo(self.metadata, self.debug)
            events.put(Step.IS_TEMPLATING)
            template_repo(self.metadata, self.debug)
            events.put(Step.IS_DONE)
        except Exception as err:  # handed to the display thread to re-raise
            events.put(err)

    def run(self) -> None:
        """Clone and template the module, animating until done; re-raise worker errors."""
        events: queue.Queue = queue.Queue()
        worker = threading.Thread(target=self._work, args=(events,), daemon=True)
        with Live(self._frame(), console=self._console, auto_refresh=False) as live:
            worker.start()
            while self.step is not Step.IS_DONE:
                try:
                    event = events.get(timeout=self.interval)
                except queue.Empty:
                    self.tick()
                    live.update(self._frame(), refresh=True)
                    continue
                if isinstance(event, BaseException):
                    raise event
                self.advance(event)
                live.update(self._frame(), refresh=True)
        worker.join()