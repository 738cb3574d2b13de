"""Thin CLI wrapper — Typer commands that delegate to the Container.

All wiring is done in bootstrap.py; the commands only translate options
and print results.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from bibrender.domain.errors import BibRenderError
from bibrender.presentation.cli.formatters import (
    backends_table,
    error_message,
    json_panel,
    success_panel,
)

app = typer.Typer(
    name="bibrender",
    help="Render formatted bibliographies as HTML, LaTeX, Markdown or plain text.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="Inspect the bibrender configuration.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to a JSON configuration file"),
]


# ---------------------------------------------------------------------------
# bibrender render
# ---------------------------------------------------------------------------


@app.command()
def render(
    entries_file: Annotated[Path, typer.Argument(help="JSON file with formatted entries")],
    backend: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output backend (html, latex, markdown, text)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file (stdout when omitted)"),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Render a bibliography file with the selected backend."""
    from bibrender.bootstrap import Container

    try:
        container = Container(config_path=config)
        entries = container.repository.load(entries_file)
        uc = container.write_bibliography(backend)
        if output is None:
            typer.echo(uc.execute(entries), nl=False)
            return
        if not output.suffix:
            output = output.with_suffix(uc.backend.default_suffix)
        output_path = uc.execute(entries, output)
    except (BibRenderError, ValidationError) as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)

    success_panel(f"Wrote {len(entries)} entries to [bold green]{output_path}[/]")


# ---------------------------------------------------------------------------
# bibrender backends
# ---------------------------------------------------------------------------


@app.command()
def backends() -> None:
    """List the registered output backends."""
    from bibrender.application.registry import available_backends, find_backend

    rows = []
    for name in available_backends():
        backend_cls = find_backend(name)
        rows.append(
            (
                name,
                backend_cls.__name__,
                backend_cls.default_suffix,
                ", ".join(sorted(backend_cls.default_symbols)),
            )
        )
    backends_table(rows)


# ---------------------------------------------------------------------------
# bibrender config show
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active configuration as JSON."""
    from bibrender.bootstrap import Container

    try:
        container = Container(config_path=config)
    except (BibRenderError, ValidationError) as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)

    json_panel(container.config.model_dump_json(indent=2))


if __name__ == "__main__":  # pragma: no cover
    app()
