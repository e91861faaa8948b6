# bookera-scaffold

An interactive terminal tool for starting a new Bookera module. It asks a few
questions about the module, clones a module template with `git`, and fills in
the template's placeholders with names derived from the module's title.

## Installation

```
pip install bookera-scaffold
```

`git` must be on your `PATH`, because the template is cloned with it.

## Configuration

The tool does not ship a template of its own. Set `BOOKERA_TEMPLATE_REPO` to
the git URL (or local path) of the template repository before running it:

```
export BOOKERA_TEMPLATE_REPO=/path/to/module-template
```

If it is unset or empty, the tool stops with an error and exit status 1.

## Usage

Run the tool from the directory where the new module should be created:

```
bookera-scaffold
```

You will be asked for:

- **Title**: ASCII letters and spaces only, at most 25 characters. The answer
  is asked again until it passes. Each word is then capitalised, so
  `module title` becomes `Module Title`.
- **Description**: free text for the module.
- **Render modes**: one or more of the numbered options (side panel, module
  daemon, panel, settings), given as numbers separated by commas or spaces.
  At least one must be chosen.

If you choose the side panel, you are also asked for the tab's icon name,
whether the tab is shown by default, and whether it sits on the `left` or the
`right` side (default `right`).

The tool then clones the template into a directory named after the title in
kebab case (for example `module-title`), removes the clone's `.git` directory
and `.gitignore` file, and fills in every file. While this runs, an animated
gradient message shows the current stage. `Ctrl+C` stops the tool; it then
prints `aborted` and exits with status 1.

When it finishes, change into the new directory and run:

```
bun i
bun run dev
```

### Placeholders

For a title of `Module Title`, described as `A module`, with the side panel
and panel render modes:

| Placeholder              | Replaced with                          |
|--------------------------|----------------------------------------|
| `{package_name}`         | `bookera-module-title`                 |
| `{module_name_kc}`       | `module-title`                         |
| `{module_element_kc}`    | `module-title-element`                 |
| `$ModuleElementName`     | `ModuleTitleElement`                   |
| `$moduleElementName`     | `moduleTitle`                          |
| `{module_name_hr}`       | `Module Title`                         |
| `{description}`          | `A module`                             |
| `` `{renderModes}` ``    | `"renderInSidePanel", "renderInPanel"` |
| `{tab.icon}`             | the tab's icon name                    |
| `{shouldShowLeftSide}`   | `left` or `right`                      |

When the tab is shown by default, every `.removeTab()` is removed. File names
containing `{module_name_kc}` or `{module_element_kc}` are renamed with the
element kebab case (`module-title-element`).

### Debug log and debug mode

Progress messages, and the contents of every templated file, are always
appended to `debug.txt` in the current directory.

Passing two or more extra arguments turns on debug mode, in which the module
is created under a `test/` directory instead of the current one:

```
bookera-scaffold debug on
```

## Using it from Python

The naming rules are in `bookera_scaffold.metadata`:

```python
from bookera_scaffold.metadata import ModuleMetadata, RenderMode

metadata = ModuleMetadata(
    title="module_title",
    render_modes=[RenderMode.SIDE_PANEL, RenderMode.PANEL],
)
metadata.make_title_human_readable()   # title becomes "Module Title"
metadata.kebab_case()                  # "module-title"
metadata.element_kebab_case()          # "module-title-element"
metadata.class_name()                  # "ModuleTitleElement"
metadata.variable_name()               # "moduleTitle"
metadata.package_name()                # "bookera-module-title"
metadata.render_render_modes()         # '"renderInSidePanel", "renderInPanel"'
```

`validate_title` and `validate_render_modes` raise `ValueError` for answers the
command would reject.

`bookera_scaffold.scaffold` holds `clone_repo`, `template_repo`,
`apply_template_to_file` and `rename_file`; they raise `ScaffoldError` when a
step fails. `bookera_scaffold.gradient` provides `blend_colors`,
`create_blend`, `rotate_blend`, `rainbow` and `make_gradient` for gradient text
as `rich` `Text` objects.

## What it does not do

It does not include a module template, does not install the new module's
dependencies, and does not start it; it only clones and fills in the template
you point it at.