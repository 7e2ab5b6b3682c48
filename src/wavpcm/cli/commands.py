import json
import logging
import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from wavpcm.cli.validators import validate_pcm_output
from wavpcm.decoder import decode_wav
from wavpcm.format import DecodeResult

app = App(name="wavpcm", help="A utility for validating WAV files and extracting their PCM data")
console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(message, style="bold red")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(message, style="bold green")


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command
def info(file: Path, verbose: bool = False) -> int:
    """
    Display format information about a PCM WAV file.

    Parameters
    ----------
    file: Path
        The path to the .wav file
    verbose: bool
        Enable debug logging
    """
    configure_logging(verbose)

    result, audio = decode_wav(file)
    if audio is None:
        print_error(f"[FAIL] {file}: {result.label}")
        console.print(f"  {result.description}")
        return 1

    console.print(f"WAV file: {file}")
    console.print(f"  Sample rate: {audio.sample_rate} Hz")
    console.print(f"  Channels: {audio.channels}")
    console.print(f"  Bits per sample: {audio.bits_per_sample}")
    console.print(f"  PCM bytes: {len(audio.pcm_data)}")
    console.print(f"  Frames: {audio.num_frames}")
    console.print(f"  Duration: {audio.duration_seconds:.3f} s")

    return 0


@app.command
def check(
    *files: Path,
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
    verbose: bool = False,
) -> int:
    """
    Check whether WAV files pass decoding.

    Parameters
    ----------
    files: Path
        One or more .wav files to check
    output_json: bool
        Output results as JSON (default: False)
    verbose: bool
        Enable debug logging
    """
    configure_logging(verbose)

    results: list[dict[str, object]] = []
    for file in files:
        result, audio = decode_wav(file)
        entry: dict[str, object] = {
            "file": str(file),
            "valid": result is DecodeResult.SUCCESS,
            "result": result.label,
            "code": int(result),
        }
        if audio is not None:
            entry["sample_rate"] = audio.sample_rate
            entry["channels"] = audio.channels
            entry["bits_per_sample"] = audio.bits_per_sample
            entry["pcm_bytes"] = len(audio.pcm_data)
        results.append(entry)

    all_valid = all(entry["valid"] for entry in results)

    if output_json:
        console.print(json.dumps(results, indent=2), soft_wrap=True, markup=False)
        return 0 if all_valid else 1

    table = Table(show_header=True, header_style="bold")
    table.add_column("File", justify="left")
    table.add_column("Status", justify="center")
    table.add_column("Result", justify="left")
    table.add_column("Format", justify="left")

    for entry in results:
        status = "[green]PASS[/green]" if entry["valid"] else "[red]FAIL[/red]"
        if entry["valid"]:
            fmt = f"{entry['sample_rate']} Hz / {entry['channels']} ch / {entry['bits_per_sample']}-bit"
        else:
            fmt = ""
        table.add_row(str(entry["file"]), status, str(entry["result"]), fmt)

    console.print(table)

    passed = sum(1 for entry in results if entry["valid"])
    message = f"{passed}/{len(results)} files passed"
    if all_valid:
        print_success(message)
    else:
        print_error(message)

    return 0 if all_valid else 1


@app.command
def extract(
    file: Path,
    output: Annotated[Path | None, Parameter(validator=validate_pcm_output)] = None,
    verbose: bool = False,
) -> int:
    """
    Write the raw PCM payload of a WAV file to disk.

    The output is headerless little-endian PCM exactly as stored in the
    data chunk.

    Parameters
    ----------
    file: Path
        The path to the .wav file
    output: Path | None
        Destination for the PCM bytes (default: input path with a .pcm suffix)
    verbose: bool
        Enable debug logging
    """
    configure_logging(verbose)

    result, audio = decode_wav(file)
    if audio is None:
        print_error(f"[FAIL] {file}: {result.label}")
        console.print(f"  {result.description}")
        return 1

    if output is None:
        output = file.with_suffix(".pcm")

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(audio.pcm_data)
    except OSError as e:
        print_error(f"Error writing output: {e}")
        return 1

    print_success(f"Wrote {len(audio.pcm_data)} bytes of PCM to {output}")
    console.print(
        f"  {audio.sample_rate} Hz, {audio.channels} ch, {audio.bits_per_sample}-bit little-endian"
    )
    return 0


if __name__ == "__main__":
    sys.exit(app())
