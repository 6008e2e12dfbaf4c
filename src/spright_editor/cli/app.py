from typing import Annotated

import typer

from spright_editor.cli.check import check, describe
from spright_editor.cli.serve import serve
from spright_editor.cli.watch import watch
from spright_editor.logging_setup import configure_logging

app = typer.Typer(
    name="spright-editor",
    help="Spright configuration editor: check, watch and preview sprite sheet configs.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    configure_logging(verbose)


app.command("check")(check)
app.command("describe")(describe)
app.command("watch")(watch)
app.command("serve")(serve)


def main() -> None:
    app()
