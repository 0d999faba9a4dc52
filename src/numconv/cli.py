import logging
import typer
from click.core import ParameterSource
from pathlib import Path
from typing import Optional

from .config import Settings, load_settings
from .core.japanese import to_japanese
from .core.roman import to_arabic, to_roman
from .errors import NumeralError
from .utils.patterns import parse_arabic

app = typer.Typer(add_completion=False)


def _use_unicode(ctx: typer.Context, unicode: bool) -> bool:
    # NUMCONV_UNICODE applies only when neither --unicode nor --ascii is given
    if ctx.get_parameter_source("unicode") == ParameterSource.DEFAULT:
        settings: Settings = ctx.find_object(Settings) or load_settings()
        return settings.use_unicode
    return unicode


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, help="Logging level (DEBUG, INFO, WARNING, ...) [default: NUMCONV_LOG_LEVEL or WARNING]")
):
    """
    Convert between Arabic numbers, Roman numerals and Japanese numerals.
    """
    settings = load_settings()
    ctx.obj = settings

    log_level = log_level or settings.log_level
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Invalid log level: {log_level}")
    logging.basicConfig(level=level)


@app.command()
def convert(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Arabic number or Roman numeral"),
    unicode: bool = typer.Option(False, "--unicode/--ascii", "-u", help="Output Unicode or ASCII Roman glyphs [default: NUMCONV_UNICODE]")
):
    """
    Arabic number -> Roman numeral, or Roman numeral -> Arabic number.
    """
    unicode = _use_unicode(ctx, unicode)
    number = parse_arabic(value)
    try:
        if number is not None:
            result = to_roman(number, unicode)
        else:
            result = str(to_arabic(value))
    except NumeralError as e:
        result = str(e)
    typer.echo(result)


@app.command()
def japanese(
    value: int = typer.Argument(..., help="Unsigned 64-bit integer")
):
    """
    Arabic number -> Japanese (kanji) numeral.
    """
    try:
        result = to_japanese(value)
    except NumeralError as e:
        result = str(e)
    typer.echo(result)


@app.command()
def batch(
    ctx: typer.Context,
    input: Path = typer.Option(..., help="YAML file with an 'inputs' list"),
    output: Optional[Path] = typer.Option(None, help="Write results to this YAML file instead of stdout"),
    mode: str = typer.Option("roman", help="Conversion mode: roman or japanese"),
    unicode: bool = typer.Option(False, "--unicode/--ascii", "-u", help="Output Unicode or ASCII Roman glyphs [default: NUMCONV_UNICODE]")
):
    """
    Convert every entry of a YAML file.
    """
    from .core.batch import BatchConverter, MODES

    if mode not in MODES:
        raise typer.BadParameter(f"Invalid mode: {mode}. Must be 'roman' or 'japanese'.")

    converter = BatchConverter(input, mode=mode, use_unicode=_use_unicode(ctx, unicode))
    try:
        results = converter.convert()
    except (FileNotFoundError, ValueError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    if output:
        converter.write(results, output)
        typer.echo(f"Wrote {len(results)} results to {output}")
    else:
        typer.echo(converter.dump(results), nl=False)


if __name__ == "__main__":
    app()
