import pytest

from bookera_scaffold.metadata import (
    MAX_TITLE_LENGTH,
    ModuleMetadata,
    RenderMode,
    Tab,
    validate_render_modes,
    validate_title,
)


def setup_metadata():
    metadata = ModuleMetadata(title="module_title")
    metadata.make_title_human_readable()
    return metadata


def test_make_title_human_readable():
    assert setup_metadata().title == "Module Title"
    metadata = ModuleMetadata(title="module")
    metadata.make_title_human_readable()
    assert metadata.title == "Module"


def test_kebab_case():
    assert setup_metadata().kebab_case() == "module-title"


def test_element_kebab_case():
    assert setup_metadata().element_kebab_case() == "module-title-element"


def test_class_name():
    assert setup_metadata().class_name() == "ModuleTitleElement"


def test_variable_name():
    assert setup_metadata().variable_name() == "moduleTitle"


def test_package_name():
    assert setup_metadata().package_name() == "bookera-module-title"


def test_variable_name_empty_title_raises():
    with pytest.raises(ValueError):
        ModuleMetadata().variable_name()


def test_render_render_modes():
    metadata = ModuleMetadata(
        render_modes=[RenderMode.SIDE_PANEL, "renderInPanel"]
    )
    assert metadata.render_render_modes() == '"renderInSidePanel", "renderInPanel"'


def test_render_render_modes_empty():
    assert ModuleMetadata().render_render_modes() == ""


def test_has_side_panel_true_and_resets_tab():
    metadata = ModuleMetadata(
        render_modes=[RenderMode.PANEL, RenderMode.SIDE_PANEL],
        tab=Tab(icon="gear", show_by_default=True, show_on_left_side=True),
    )
    assert metadata.has_side_panel() is True
    assert metadata.tab == Tab()


def test_has_side_panel_false():
    metadata = ModuleMetadata(render_modes=["renderInDaemon", "renderInSettings"])
    assert metadata.has_side_panel() is False


def test_validate_title_rejects_non_letters():
    with pytest.raises(ValueError, match="only letters"):
        validate_title("module_1")


def test_validate_title_rejects_too_long():
    with pytest.raises(ValueError, match="too long"):
        validate_title("a" * (MAX_TITLE_LENGTH + 1))


def test_validate_title_accepts_letters_and_spaces():
    title = "My Module"
    validate_title(title)
    metadata = ModuleMetadata(title=title)
    assert metadata.kebab_case() == "my-module"


def test_validate_render_modes_empty():
    with pytest.raises(ValueError, match="must select"):
        validate_render_modes([])


def test_render_mode_values():
    assert RenderMode.MODULE_DAEMON.value == "renderInDaemon"
    assert RenderMode("renderInSettings") is RenderMode.SETTINGS