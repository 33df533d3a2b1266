from typing import Annotated

import typer

from copy_as_markdown.cli.common import configure_logging
from copy_as_markdown.cli.files import files
from copy_as_markdown.cli.selection import selection

app = typer.Typer(
    name="copy-as-markdown",
    help="Copy code as Markdown code blocks, with file names and ellipsis markers.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("selection")(selection)
app.command("files")(files)


@app.callback()
def _root(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    configure_logging(verbose)


def main() -> None:
    app()
