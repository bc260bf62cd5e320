"""rat CLI.

Main command-line interface for creating projects from boilerplates.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from boilerplate import BoilerplateError, ProjectGenerator, list_boilerplates
from cli.rat.output import (
    console,
    print_config,
    print_fatal,
    print_info,
    print_names,
    print_success,
    print_warning,
    printable,
)
from settings import ConfigError, TemplatesConfig, expand_path, get_config, setup_logging

app = typer.Typer(
    name="rat",
    help="rat - Boilerplate manager",
    no_args_is_help=True,
)

# Config sub-app
config_app = typer.Typer(
    name="config",
    help="Manage configuration settings.",
)
app.add_typer(config_app, name="config")


def _fail(message: str) -> typer.Exit:
    print_fatal(message)
    return typer.Exit(1)


def _templates_config(root: Optional[str], select_cmd: Optional[str]) -> TemplatesConfig:
    """Merge command-line overrides into the configured template settings."""
    config = get_config()
    overrides = {}
    if root is not None:
        overrides["root"] = root
    if select_cmd is not None:
        overrides["select_cmd"] = select_cmd
    config = replace(config, templates=replace(config.templates, **overrides))
    config.validate()
    return config.templates


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level: DEBUG|INFO|WARNING|ERROR (default: from config)",
    ),
) -> None:
    """rat - create projects from boilerplate directories."""
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(e.message)
    setup_logging(log_level or config.logging.level)


@app.command()
def new(
    args: list[str] = typer.Argument(
        ...,
        metavar="[BOILERPLATE] PROJECT",
        help="Boilerplate name (optional, picked interactively if omitted) and project path",
    ),
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        help="Boilerplates root directory (default: $RAT_ROOT or ~/.rat)",
    ),
    select_cmd: Optional[str] = typer.Option(
        None,
        "--filter",
        "-f",
        help="Interactive filter command, e.g. peco or fzf (default: $RAT_SELECT_CMD)",
    ),
) -> None:
    """Create a new project from a boilerplate.

    Examples:
        rat new my-project                 # pick the boilerplate with the filter
        rat new python-cli my-project
        rat new go-api ~/src/api --root ~/boilerplates
    """
    if len(args) > 2:
        raise _fail("Too many arguments")
    boilerplate_name = args[0] if len(args) == 2 else None
    project_path = expand_path(args[-1])

    try:
        templates = _templates_config(root, select_cmd)
        generator = ProjectGenerator(templates.root_path, templates.select_cmd)
        result = generator.generate(project_path, boilerplate_name)
    except (BoilerplateError, ConfigError) as e:
        raise _fail(e.message)
    except KeyboardInterrupt:
        print_warning("Interrupted")
        raise typer.Exit(130)

    print_success(
        f"Created [bold]{escape(printable(str(result.project_dir)))}[/bold] from boilerplate "
        f"[cyan]{escape(printable(result.boilerplate))}[/cyan] ({len(result.copy.files)} files)"
    )


@app.command("list")
def list_command(
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        help="Boilerplates root directory (default: $RAT_ROOT or ~/.rat)",
    ),
) -> None:
    """Show boilerplate list, one name per line."""
    try:
        templates = _templates_config(root, None)
        names = list_boilerplates(templates.root_path)
    except (BoilerplateError, ConfigError) as e:
        raise _fail(e.message)

    print_names(names)


@app.command()
def version() -> None:
    """Show rat version."""
    from cli.rat import __version__

    console.print(f"rat version {__version__}", highlight=False)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    config = get_config()

    if config.source:
        print_info(f"Config file: {config.source}")
    else:
        print_warning("No config file found (using defaults and environment)")

    print_config(
        {
            "templates.root": config.templates.root,
            "templates.root (expanded)": config.templates.root_path,
            "templates.select_cmd": config.templates.select_cmd,
            "logging.level": config.logging.level,
        }
    )


DEFAULT_CONFIG = """# rat configuration
# Auto-generated by 'rat config init'
# Environment variables RAT_ROOT, RAT_SELECT_CMD and RAT_LOG_LEVEL override these values.

[templates]
# Directory holding one subdirectory per boilerplate (~ and $VARS are expanded)
root = "~/.rat"

# Interactive filter used when no boilerplate name is given.
# It reads boilerplate names on stdin and prints the chosen one.
select_cmd = "peco"

[logging]
level = "WARNING"
"""


@config_app.command("init")
def config_init(
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite existing rat.toml",
    ),
) -> None:
    """Create a default rat.toml file in the current directory.

    Example:
        rat config init
        rat config init --force
    """
    config_path = Path.cwd() / "rat.toml"

    if config_path.exists() and not force:
        print_warning(f"Config file already exists: {config_path}")
        print_info("Use --force to overwrite")
        raise typer.Exit(1)

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    print_success(f"Created config file: {config_path}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
