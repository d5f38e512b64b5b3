"""Main CLI entry point for oci-gen."""

import typer

from oci_gen.cli import generate, show
from oci_gen.cli.utils import console, fail
from oci_gen.utils.errors import OciGenError

app = typer.Typer(
    name="oci-gen",
    help="Assemble and validate OCI runtime configurations.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register subcommands
app.command(name="generate")(generate.generate_cmd)
app.command(name="show")(show.show_cmd)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
) -> None:
    """
    oci-gen: Assemble and validate OCI runtime configurations.

    - [bold]generate[/bold]: Build a config.json from defaults or a template
    - [bold]show[/bold]: Summarize an existing config.json
    """
    from oci_gen.utils.config import get_config
    from oci_gen.utils.logging import configure_logging

    logging_config = get_config().logging
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = logging_config.level

    try:
        configure_logging(level=level, structured=logging_config.structured)
    except OciGenError as e:
        fail(e)


@app.command()
def version() -> None:
    """Show the oci-gen version."""
    from oci_gen import __version__

    console.print(f"oci-gen version {__version__}")


if __name__ == "__main__":
    app()
