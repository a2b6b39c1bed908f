import json
from contextlib import contextmanager

import click
from jsonschema import ValidationError

from advcalc.calculator import AdvancedCalculator
from advcalc.core.errors import CalculationError
from advcalc.core.logger import configure_logging
from advcalc.core.math.matrix import Matrix
from advcalc.demo import ASYNC_DELAY_SEC, build_report, run_demo


# Negative numbers are positional values, not options.
NUMERIC_ARGUMENTS = {"ignore_unknown_options": True}


@contextmanager
def _reported_errors():
    """Turn calculation failures into a clean CLI error (exit code 1)."""
    try:
        yield
    except ValidationError as e:
        raise click.ClickException(f"Contract violation: {e.message}") from e
    except (CalculationError, ValueError, ZeroDivisionError, OverflowError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Verbosity of the calculator log on stderr.",
)
@click.option("--no-color", is_flag=True, help="Disable coloured log output.")
@click.pass_context
def cli(ctx: click.Context, log_level: str, no_color: bool) -> None:
    configure_logging(log_level, color=not no_color)
    ctx.obj = AdvancedCalculator()


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print a JSON report instead of text.")
@click.option(
    "--async-delay",
    type=click.FloatRange(min=0.0),
    default=ASYNC_DELAY_SEC,
    show_default=True,
    help="Seconds the offloaded calculation sleeps.",
)
@click.pass_obj
def demo(calculator: AdvancedCalculator, as_json: bool, async_delay: float) -> None:
    """Run the full console demonstration."""
    with _reported_errors():
        if as_json:
            click.echo(json.dumps(build_report(calculator, async_delay), indent=2))
        else:
            run_demo(calculator, click.echo, async_delay)


@cli.command(context_settings=NUMERIC_ARGUMENTS)
@click.argument("a", type=float)
@click.argument("symbol")
@click.argument("b", type=float)
@click.pass_obj
def calc(calculator: AdvancedCalculator, a: float, symbol: str, b: float) -> None:
    """Apply a binary operation: + - * / ^ log."""
    with _reported_errors():
        click.echo(f"{calculator.calculate(a, symbol, b):g}")


@cli.command(context_settings=NUMERIC_ARGUMENTS)
@click.argument("coefficients", nargs=-1, type=float, required=True)
@click.pass_obj
def roots(calculator: AdvancedCalculator, coefficients: tuple[float, ...]) -> None:
    """Roots of a polynomial, coefficients from the highest degree down."""
    with _reported_errors():
        for root in calculator.find_polynomial_roots(list(coefficients)):
            click.echo(f"({root.real:g}, {root.imag:g})")


@cli.command(context_settings=NUMERIC_ARGUMENTS)
@click.argument("values", nargs=-1, type=float, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the statistics as JSON.")
@click.pass_obj
def stats(calculator: AdvancedCalculator, values: tuple[float, ...], as_json: bool) -> None:
    """Descriptive statistics of VALUES (at least two)."""
    with _reported_errors():
        result = calculator.calculate_descriptive_statistics(values)
        if as_json:
            click.echo(result.model_dump_json(indent=2))
        else:
            for line in calculator.format_statistics(result):
                click.echo(line)


@cli.command()
@click.argument("count", type=int)
@click.pass_obj
def fib(calculator: AdvancedCalculator, count: int) -> None:
    """First COUNT Fibonacci numbers."""
    with _reported_errors():
        click.echo(", ".join(str(n) for n in calculator.fibonacci_sequence(count)))


@cli.command()
@click.argument("n", type=int)
@click.pass_obj
def factorial(calculator: AdvancedCalculator, n: int) -> None:
    """N! with arbitrary precision."""
    with _reported_errors():
        click.echo(str(calculator.factorial(n)))


@cli.command()
@click.argument("left", type=click.File("r"))
@click.argument("right", type=click.File("r"))
@click.option("--json", "as_json", is_flag=True, help="Print the product as a matrix payload.")
@click.pass_obj
def matmul(calculator: AdvancedCalculator, left, right, as_json: bool) -> None:
    """Multiply two matrices stored as JSON payloads."""
    with _reported_errors():
        a = Matrix.from_payload(json.load(left))
        b = Matrix.from_payload(json.load(right))
        product = calculator.multiply_matrices(a, b)
        if as_json:
            click.echo(json.dumps(product.to_payload()))
        else:
            click.echo(calculator.format_matrix(product))
