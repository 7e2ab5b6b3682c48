from pathlib import Path


def validate_pcm_output(type_: object, output: Path | None) -> None:
    """Validate that an extract destination is not named like a WAV file."""
    if output is None:
        return

    if output.suffix.lower() == ".wav":
        raise ValueError("Extracted PCM is headerless; choose a suffix other than '.wav'")
