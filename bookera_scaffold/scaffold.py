"""Clone the module template and fill in its placeholders."""

from __future__ import annotations

import contextlib
import os
import shutil
import subprocess
from pathlib import Path

from .debuglog import debug_print
from .metadata import ModuleMetadata

TEMPLATE_REPO_ENV = "BOOKERA_TEMPLATE_REPO"
DEBUG_ROOT = "test"


class ScaffoldError(RuntimeError):
    """Raised when the module cannot be cloned or templated."""


def _template_repo_url() -> str:
    url = os.environ.get(TEMPLATE_REPO_ENV, "").strip()
    if not url:
        raise ScaffoldError(
            f"no template repository configured; set {TEMPLATE_REPO_ENV} to its git URL"
        )
    return url


def create_dir_name(dir_name: str, debug: bool = False) -> Path:
    """Create the target directory (under ``test/`` in debug mode) and return its path."""
    if debug:
        with contextlib.suppress(OSError):
            os.mkdir(DEBUG_ROOT, 0o755)
        return Path(DEBUG_ROOT) / dir_name
    with contextlib.suppress(OSError):
        os.mkdir(dir_name, 0o755)
    return Path(dir_name)


def clone_repo(metadata: ModuleMetadata, debug: bool = False) -> Path:
    """Clone the template into the module directory and strip its git data."""
    url = _template_repo_url()
    target = create_dir_name(metadata.kebab_case(), debug)
    try:
        subprocess.run(["git", "clone", url, str(target)], check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as err:
        raise ScaffoldError(f"Failed to clone repository: {err}, please retry again") from err

    try:
        shutil.rmtree(target / ".git")
    except FileNotFoundError:
        pass
    except OSError as err:
        raise ScaffoldError(f"Failed to remove .git directory: {err}") from err

    try:
        (target / ".gitignore").unlink()
    except FileNotFoundError:
        pass
    except OSError as err:
        raise ScaffoldError(f"Failed to remove .gitignore file: {err}") from err

    return target


def rename_file(file_path: str | os.PathLike, search: str, new_string: str) -> Path:
    """Rename the file when its path contains ``search``; return the resulting path."""
    path_text = os.fspath(file_path)
    if search not in path_text:
        return Path(path_text)
    new_path = path_text.replace(search, new_string)
    try:
        os.rename(path_text, new_path)
    except OSError as err:
        raise ScaffoldError(f"Failed to rename file: {err}") from err
    return Path(new_path)


def apply_template_to_file(metadata: ModuleMetadata, file_path: str | os.PathLike) -> Path:
    """Fill the placeholders of one file, renaming it if its name holds one."""
    try:
        contents = Path(file_path).read_bytes().decode("utf-8", "surrogateescape")
    except OSError as err:
        raise ScaffoldError(f"Failed to read file {err}") from err

    element_name = metadata.element_kebab_case()
    path = rename_file(file_path, "{module_name_kc}", element_name)
    path = rename_file(path, "{module_element_kc}", element_name)

    replacements = [
        ("{package_name}", metadata.package_name()),
        ("{module_name_kc}", metadata.kebab_case()),
        ("{module_element_kc}", element_name),
        ("$ModuleElementName", metadata.class_name()),
        ("$moduleElementName", metadata.variable_name()),
        ("{module_name_hr}", metadata.title),
        ("{description}", metadata.description),
        ("`{renderModes}`", metadata.render_render_modes()),
    ]
    tab = metadata.tab
    if tab is not None:
        replacements.append(("{tab.icon}", tab.icon))
        if tab.show_by_default:
            replacements.append((".removeTab()", ""))
        replacements.append(
            ("{shouldShowLeftSide}", "left" if tab.show_on_left_side else "right")
        )

    for placeholder, value in replacements:
        contents = contents.replace(placeholder, value)

    debug_print(f"file: {path}\n{contents}")

    try:
        path.write_bytes(contents.encode("utf-8", "surrogateescape"))
    except OSError as err:
        raise ScaffoldError(f"Failed to write file {err}") from err
    return path


def template_repo(metadata: ModuleMetadata, debug: bool = False) -> list[Path]:
    """Template every file in the module directory; return the paths written."""
    root = create_dir_name(metadata.kebab_case(), debug)
    debug_print("Templating repo")

    def _fail(err: OSError) -> None:
        raise ScaffoldError(f"Error walking through directory: {err}") from err

    written = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_fail):
        dirnames.sort()
        for name in sorted(filenames):
            written.append(apply_template_to_file(metadata, Path(dirpath) / name))

    debug_print("Finished templating repo")
    return written