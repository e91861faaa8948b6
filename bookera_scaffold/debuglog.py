"""Append-only debug log used while scaffolding."""

from __future__ import annotations

import os
import sys

DEBUG_LOG = "debug.txt"


def debug_print(text: str, path: str | os.PathLike = DEBUG_LOG) -> None:
    """Append a line to the debug log; report failures on stderr instead of raising."""
    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as err:
        print("Error opening file:", err, file=sys.stderr)
        return
    with handle:
        try:
            handle.write(text + "\n")
        except OSError as err:
            print("Error writing to file:", err, file=sys.stderr)