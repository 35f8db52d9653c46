"""
Command-line interface for calibrating a pH meter and correcting readings.

Usage:
  caliph 3.97 10.2                  # calibrate at 25 C
  caliph 3.97 10.2 -t 22.3 --store  # calibrate at 22.3 C and save calibration.ph
  conph 3.5                         # correct a reading with calibration.ph
  conph 3.5 -c -s 1.1 -o 0.02       # correct with an explicit slope/offset
  caliph-tool calibrate 3.97 10.2   # both commands under one group
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from caliph.calibration.record import load_record, save_record
from caliph.calibration.routines import ph_calibration, ph_convert
from caliph.config import get_settings
from caliph.core.exceptions import CaliphError
from caliph.core.logging import LogContext, get_logger
from caliph.core.models import CalibrationModel
from caliph.curves.reference import get_reference_curves

logger = get_logger(__name__)

app = typer.Typer(help="Two-point pH meter calibration tools.", no_args_is_help=True)
calibrate_app = typer.Typer(help="Calculates corrections from 2 point pH calibration.")
convert_app = typer.Typer(help="Corrects pH measurement with calibration.")


def _console(stderr: bool = False) -> Console:
    colored = get_settings().display.colored
    return Console(stderr=stderr, no_color=not colored, highlight=False)


def _banner(console: Console, title: str, width: int) -> None:
    console.print()
    console.print("-" * width)
    console.print(f"  {title}", style="bold")
    console.print("-" * width)


def _warn_if_outside_tables(temperature: float) -> None:
    curves = get_reference_curves()
    for curve in (curves.ph4, curves.ph10):
        if not curve.covers(temperature):
            _console(stderr=True).print(
                f"[yellow]Warning:[/yellow] {temperature} C is outside the {curve.buffer.value} "
                f"buffer table ({curve.min_temperature}-{curve.max_temperature} C); "
                f"using nominal pH {curve.nominal_ph}"
            )


def _fail(message: str) -> None:
    _console(stderr=True).print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=1)


def calibrate(
    ph4: float = typer.Argument(..., help="pH measured for pH 4.01 buffer solution"),
    ph10: float = typer.Argument(..., help="pH measured for pH 10.01 buffer solution"),
    temperature: Optional[float] = typer.Option(
        None, "--temperature", "-t", help="Temperature of measurement in degrees C [default: 25.0]"
    ),
    store: bool = typer.Option(False, "--store", "-s", help="Store calibration to the record file"),
    record: Optional[Path] = typer.Option(
        None, "--record", "-r", help="Calibration record path [default: calibration.ph]"
    ),
) -> None:
    """Calculate slope and offset from readings in the pH 4 and pH 10 buffers."""
    settings = get_settings()
    if temperature is None:
        temperature = settings.calibration.default_temperature
    decimals = settings.display.coefficient_decimals

    with LogContext(command="calibrate", temperature=temperature):
        _warn_if_outside_tables(temperature)
        model = ph_calibration([ph4, ph10], temperature)
        if not model.is_finite:
            _fail("both buffer readings are identical; the calibration is undefined")

        console = _console()
        _banner(console, "Calibrating", 17)
        console.print(f"Slope\t{model.slope:.{decimals}f}", style="bold")
        console.print(f"Offset\t{model.offset:.{decimals}f}", style="bold")
        if model.rms is not None:
            console.print(f"RMS\t{model.rms:.{decimals}f}", style="dim")
        if model.r_squared is not None:
            console.print(f"R2\t{model.r_squared:.{decimals}f}", style="dim")
        console.print("-" * 17)

        if store:
            path = save_record(model, record)
            console.print(f"\nSaved to {path}\n")


def convert(
    ph: float = typer.Argument(..., help="pH measured"),
    custom: bool = typer.Option(
        False, "--custom", "-c", help="Use --slope/--offset instead of the record file"
    ),
    slope: Optional[float] = typer.Option(None, "--slope", "-s", help="Slope"),
    offset: Optional[float] = typer.Option(None, "--offset", "-o", help="Offset"),
    record: Optional[Path] = typer.Option(
        None, "--record", "-r", help="Calibration record path [default: calibration.ph]"
    ),
) -> None:
    """Correct a raw pH reading with a stored or explicit calibration."""
    settings = get_settings()

    if (slope is not None or offset is not None) and not custom:
        raise typer.BadParameter("--slope and --offset require --custom")

    with LogContext(command="convert"):
        if custom:
            if slope is None or offset is None:
                raise typer.BadParameter("--custom requires both --slope and --offset")
            model = CalibrationModel(slope=slope, offset=offset)
        else:
            try:
                model = load_record(record)
            except CaliphError as e:
                logger.error(str(e), extra={"error_code": e.error_code, "details": e.details})
                _fail(e.message)

        corrected = ph_convert(ph, model)

        console = _console()
        _banner(console, "Converting", 15)
        console.print(f"Input\t{ph}", style="bold")
        console.print(f"Output\t{corrected:.{settings.display.ph_decimals}f}", style="bold")
        console.print("-" * 15 + "\n")


calibrate_app.command()(calibrate)
convert_app.command()(convert)
app.command("calibrate")(calibrate)
app.command("convert")(convert)


if __name__ == "__main__":
    app()
