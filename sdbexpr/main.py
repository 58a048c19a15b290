import logging
import sys
from typing import TextIO

import click

from sdbexpr.config import EvaluatorConfig
from sdbexpr.errors import ExpressionError
from sdbexpr.expr import expr


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--width", type=click.Choice(["8", "16", "32", "64"]), default="32")
@click.option("--signed/--unsigned", default=False)
@click.option("-v", "--verbose", is_flag=True)
def main(filename: TextIO, output: TextIO, width: str, signed: bool, verbose: bool):
    """Evaluate one expression per line of FILENAME."""
    config = EvaluatorConfig(
        width=int(width), signed=signed, log_level="DEBUG" if verbose else "WARNING"
    )
    logging.basicConfig(level=config.log_level, format="%(name)s: %(message)s")
    failed = False
    for line in filename:
        expression = line.rstrip("\n")
        if not expression.strip():
            continue
        try:
            output.write(f"{expression} = {expr(expression, config)}\n")
        except ExpressionError as exc:
            failed = True
            click.echo(exc.diagnostic(), err=True, nl=False)
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
