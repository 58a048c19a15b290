import logging
from typing import NoReturn, Optional

import typer

from sdbexpr.config import EvaluatorConfig
from sdbexpr.errors import ExpressionError
from sdbexpr.expr import expr
from sdbexpr.tokenize import tokenize

app = typer.Typer(add_completion=False, no_args_is_help=True)

state: dict[str, EvaluatorConfig] = {}


def current_config() -> EvaluatorConfig:
    return state["config"]


def format_value(value: int, config: EvaluatorConfig) -> str:
    return f"{value} ({value & config.mask:#x})"


def fail(exc: ExpressionError) -> NoReturn:
    typer.echo(exc.diagnostic(), err=True, nl=False)
    raise typer.Exit(code=1)


@app.callback()
def configure(
    width: Optional[int] = typer.Option(None, help="Word width in bits"),
    signed: Optional[bool] = typer.Option(None, "--signed/--unsigned"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    try:
        overrides = EvaluatorConfig.from_env().model_dump()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if width is not None:
        overrides["width"] = width
    if signed is not None:
        overrides["signed"] = signed
    if verbose:
        overrides["log_level"] = "DEBUG"
    try:
        config = EvaluatorConfig(**overrides)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    logging.basicConfig(level=config.log_level, format="%(name)s: %(message)s")
    state["config"] = config


@app.command("eval")
def eval_command(expression: str):
    config = current_config()
    try:
        value = expr(expression, config)
    except ExpressionError as exc:
        fail(exc)
    typer.echo(format_value(value, config))


@app.command("tokens")
def tokens_command(expression: str):
    try:
        tokens = tokenize(expression, current_config())
    except ExpressionError as exc:
        fail(exc)
    for index, token in enumerate(tokens):
        typer.echo(f"{index}\t{token.kind.name}\t{token.text}\t{token.location}")


@app.command("repl")
def repl_command():
    config = current_config()
    while True:
        try:
            line = typer.prompt("(sdb)", prompt_suffix=" ", default="", show_default=False)
        except (EOFError, typer.Abort):
            break
        line = line.strip()
        if line in ("q", "quit"):
            break
        if not line:
            continue
        try:
            typer.echo(format_value(expr(line, config), config))
        except ExpressionError as exc:
            typer.echo(exc.diagnostic(), err=True, nl=False)


if __name__ == "__main__":
    app()
