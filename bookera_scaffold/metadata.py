"""Module metadata gathered from the user, and the names derived from it."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

MAX_TITLE_LENGTH = 25
MAX_DESCRIPTION_LENGTH = 400


class RenderMode(str, Enum):
    """Places where a module can be rendered."""

    SIDE_PANEL = "renderInSidePanel"
    MODULE_DAEMON = "renderInDaemon"
    PANEL = "renderInPanel"
    SETTINGS = "renderInSettings"


def _mode_value(mode: RenderMode | str) -> str:
    return mode.value if isinstance(mode, RenderMode) else mode


def _title_case(text: str) -> str:
    return re.sub(r"\S+", lambda match: match.group().capitalize(), text)


def validate_title(title: str) -> None:
    """Raise ValueError unless the title holds only ASCII letters and spaces and is short enough."""
    for char in title:
        if not (("a" <= char <= "z") or ("A" <= char <= "Z") or char == " "):
            raise ValueError(
                "please make a name with that contains only letters in the alphabet or a space"
            )
    if len(title) > MAX_TITLE_LENGTH:
        raise ValueError(
            f"sorry, name is too long, max is {MAX_TITLE_LENGTH} and yours is {len(title)}"
        )


def validate_render_modes(modes) -> None:
    """Raise ValueError when no render mode was chosen."""
    if not modes:
        raise ValueError("you must select one, lol")


@dataclass
class Tab:
    """Settings for the side-panel tab of a module."""

    icon: str = ""
    show_by_default: bool = False
    show_on_left_side: bool = False


@dataclass
class ModuleMetadata:
    """Everything needed to template a new module."""

    title: str = ""
    description: str = ""
    render_modes: list[RenderMode | str] = field(default_factory=list)
    tab: Tab | None = field(default_factory=Tab)

    def make_title_human_readable(self) -> None:
        """Turn ``module_title`` into ``Module Title``."""
        self.title = _title_case(self.title.replace("_", " "))

    def kebab_case(self) -> str:
        return self.title.replace(" ", "-").lower()

    def element_kebab_case(self) -> str:
        return self.kebab_case() + "-element"

    def class_name(self) -> str:
        """Turn ``Module Title`` into ``ModuleTitleElement``."""
        return _title_case(self.title).replace(" ", "") + "Element"

    def variable_name(self) -> str:
        """Turn ``Module Title`` into ``moduleTitle``."""
        if not self.title:
            raise ValueError("module title is empty")
        return (self.title[0].lower() + self.title[1:]).replace(" ", "")

    def render_render_modes(self) -> str:
        """Render the modes as a comma separated list of quoted strings."""
        return ", ".join(f'"{_mode_value(mode)}"' for mode in self.render_modes)

    def package_name(self) -> str:
        return "bookera-" + self.kebab_case()

    def has_side_panel(self) -> bool:
        """Tell whether the side panel was chosen; resets the tab settings."""
        found = any(
            _mode_value(mode) == RenderMode.SIDE_PANEL.value for mode in self.render_modes
        )
        self.tab = Tab()
        return found