"""Terminal message helpers for the JSONCLEAN CLI.

Small helpers for rendering user-visible status lines with emoji→ASCII
fallbacks. Everything goes to stderr: stdout carries the sanitized batch and
must stay byte-for-byte machine-readable.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call; Click may swap it (e.g. under
    CliRunner) between invocations.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, else "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅" when stderr can encode it, else "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, else "[X]"."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Input is empty; writing an empty batch.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Sanitized 3 item(s), 2 changed.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Malformed batch at index 2: expected a string or null, got int``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
