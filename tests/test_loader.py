import io
import subprocess
from pathlib import Path

import pytest
from rich.console import Console

from bookera_scaffold.loader import (
    CREATE_MODULE,
    CREATE_TEMPLATE,
    IS_DONE_MESSAGE,
    Loader,
    MessageGradient,
    Step,
    loading_message,
)
from bookera_scaffold.metadata import ModuleMetadata, RenderMode
from bookera_scaffold.scaffold import TEMPLATE_REPO_ENV, ScaffoldError


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make_loader(debug=False):
    meta = ModuleMetadata(
        title="Module Title", description="d", render_modes=[RenderMode.PANEL]
    )
    return Loader(meta, debug, console=Console(file=io.StringIO()), interval=0.001)


def fake_git(cmd, **kwargs):
    target = Path(cmd[-1])
    target.mkdir(parents=True, exist_ok=True)
    (target / ".git").mkdir()
    (target / "index.ts").write_text("{package_name}")
    return subprocess.CompletedProcess(cmd, 0)


@pytest.mark.parametrize(
    "tick, dots", [(0, ".  "), (8, ".  "), (9, ".. "), (17, ".. "), (18, "..."), (26, "..."), (27, ".  ")]
)
def test_loading_message_dots(tick, dots):
    assert loading_message(Step.IS_CLONING, tick) == CREATE_MODULE + dots
    assert loading_message(Step.IS_TEMPLATING, tick) == CREATE_TEMPLATE + dots


def test_loading_message_done():
    assert loading_message(Step.IS_DONE, 5) == IS_DONE_MESSAGE


def test_message_gradient_blend_matches_message():
    gradient = MessageGradient("Cloning repo.")
    assert len(gradient.blend) == len("Cloning repo.")


def test_message_gradient_update_keeps_blend():
    gradient = MessageGradient("abc")
    blend = list(gradient.blend)
    gradient.update_message("abcdef")
    assert gradient.message == "abcdef"
    assert gradient.blend == blend


def test_message_gradient_rotate():
    gradient = MessageGradient("abcd")
    before = list(gradient.blend)
    gradient.rotate()
    assert gradient.blend == [before[-1], *before[:-1]]
    for _ in range(len(before) - 1):
        gradient.rotate()
    assert gradient.blend == before


def test_loader_starts_cloning():
    loader = make_loader()
    assert loader.step is Step.IS_CLONING
    assert loader.view().plain == CREATE_MODULE + "."


def test_loader_tick_animates(workdir):
    loader = make_loader()
    before = list(loader.gradient.blend)
    loader.tick()
    assert loader.ticks == 1
    assert loader.view().plain == CREATE_MODULE + ".  "
    assert loader.gradient.blend == [before[-1], *before[:-1]]
    assert "tick" in (workdir / "debug.txt").read_text()


def test_loader_advance(workdir):
    loader = make_loader()
    loader.advance(Step.IS_TEMPLATING)
    assert loader.step is Step.IS_TEMPLATING
    assert loader.view().plain == CREATE_TEMPLATE
    assert len(loader.gradient.blend) == len(CREATE_TEMPLATE)
    assert "received message: 1" in (workdir / "debug.txt").read_text()


def test_loader_run_scaffolds(workdir, monkeypatch):
    monkeypatch.setenv(TEMPLATE_REPO_ENV, "https://example.com/template.git")
    monkeypatch.setattr(subprocess, "run", fake_git)
    loader = make_loader(debug=True)
    loader.run()
    assert loader.step is Step.IS_DONE
    assert loader.view().plain == IS_DONE_MESSAGE
    target = workdir / "test" / "module-title"
    assert (target / "index.ts").read_text() == "bookera-module-title"
    assert not (target / ".git").exists()


def test_loader_run_reraises_failure(workdir, monkeypatch):
    def failing(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setenv(TEMPLATE_REPO_ENV, "https://example.com/template.git")
    monkeypatch.setattr(subprocess, "run", failing)
    loader = make_loader()
    with pytest.raises(ScaffoldError, match="Failed to clone repository"):
        loader.run()
    assert loader.step is Step.IS_CLONING