"""CLI command for inspecting runtime configs."""

from pathlib import Path
from typing import Optional

import typer

from oci_gen.cli.utils import console, err_console, fail
from oci_gen.utils.errors import OciGenError


def show_cmd(
    path: Path = typer.Argument(..., help="Runtime config (config.json) to show"),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (terminal, json)",
    ),
    seccomp_only: bool = typer.Option(
        False,
        "--seccomp-only",
        help="Show only the seccomp configuration (json format)",
    ),
) -> None:
    """
    Show a runtime config.

    Loads the config, checks that it decodes, and prints either a
    summary table or the normalized JSON.

    Example:
        oci-gen show config.json --format terminal
    """
    from oci_gen.core.generator import Generator
    from oci_gen.renderers import OutputFormat, get_renderer
    from oci_gen.renderers.base import ExportOptions, RenderContext
    from oci_gen.renderers.terminal import TerminalRenderer
    from oci_gen.utils.config import get_config

    config = get_config()
    try:
        output_format = OutputFormat(format or config.output.default_format)
    except ValueError:
        err_console.print(f"[red]Error:[/red] Unsupported format: {format}")
        raise typer.Exit(1)

    try:
        g = Generator.from_file(path)
        context = RenderContext(
            format=output_format,
            color=config.output.color,
            indent=config.output.indent,
            export=ExportOptions(seccomp=seccomp_only),
        )
        if output_format == OutputFormat.TERMINAL:
            TerminalRenderer(console).render(g.spec, context)
        else:
            typer.echo(get_renderer(output_format).render(g.spec, context))
    except OciGenError as e:
        fail(e)
