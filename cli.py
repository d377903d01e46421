from typing import Tuple

import click

from context_state import ContextState
from dispatcher import dispatch
from error_style import ERROR_STYLE, ErrorStyle
from logging_utils import configure_logging, get_logger

__version__ = "1.0.0"

PROG_NAME = "yaml2json"

USAGE_EXAMPLES = """\b
Examples:
  yaml2json file1.yaml file2.yaml
  cat file1.yaml | yaml2json
  yaml2json --error=json file1.yaml | jq
"""

logger = get_logger(__name__)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=USAGE_EXAMPLES,
)
@click.version_option(__version__, "-V", "--version", prog_name=PROG_NAME)
@click.option("-p", "--pretty", is_flag=True, help="Indent the JSON output and JSON error messages")
@click.option(
    "-e",
    "--error",
    "error_style",
    type=ERROR_STYLE,
    default=str(ErrorStyle.JSON),
    show_default=True,
    metavar="<" + "|".join(ErrorStyle.names()) + ">",
    help="How conversion errors are reported",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging output")
@click.argument("files", nargs=-1)
@click.pass_context
def cli(
    ctx: click.Context,
    pretty: bool,
    error_style: ErrorStyle,
    verbose: bool,
    files: Tuple[str, ...],
) -> None:
    """Convert YAML documents to JSON, one JSON value per document.

    FILES are read in order; standard input is used when none are given.
    """

    configure_logging(verbose=verbose)

    state = ContextState(error_style=error_style, pretty=pretty, verbose=verbose)
    ctx.obj = state
    logger.debug("Error style %s, %s output", state.error_style, state.style.value)

    dispatch(list(files), state.build_converter(), state.build_error_printer())


def main() -> None:
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
