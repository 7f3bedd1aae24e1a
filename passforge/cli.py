"""
PassForge CLI
==============

Click-based command-line interface for PassForge. Provides subcommands
for password generation (random, keyword, pattern, pronounceable,
passphrase, personalized), strength analysis, breach lookup and batch
export.

Usage::

    python -m passforge generate --length 20 --symbols
    python -m passforge generate -k coffee,river --no-mix
    python -m passforge pattern "Cvccvc99!"
    python -m passforge passphrase --words 5 --separator _
    python -m passforge personal -k john,london,1990
    python -m passforge analyze "MyP@ssw0rd!"
    python -m passforge breach "password123"
    python -m passforge batch 50 --kind passphrase --format csv -f out.csv

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import asyncio
import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional

import click
from click.core import ParameterSource

from shared.config import ForgeConfig
from shared.console import ForgeConsole
from shared.logger import ForgeLogger

from passforge import __version__
from passforge.core.engine import ForgeEngine
from passforge.core.exceptions import ForgeError
from passforge.core.models import BreachStatus
from passforge.generators.batch import BATCH_KINDS
from passforge.output.console import ForgeConsoleOutput
from passforge.output.report import EXPORT_FORMATS, BatchReportGenerator


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _run_async(coro):
    """Run an async coroutine from synchronous Click handlers."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop and loop.is_running():
        import concurrent.futures
        with concurrent.futures.ThreadPoolExecutor() as pool:
            return pool.submit(asyncio.run, coro).result()
    return asyncio.run(coro)


@contextmanager
def _forge_errors() -> Iterator[None]:
    """Surface configuration and input errors as click usage errors."""
    try:
        yield
    except ForgeError as exc:
        raise click.UsageError(str(exc)) from exc


def _explicit(ctx: click.Context, **fields: str) -> dict[str, Any]:
    """Map the flags the user actually passed onto option field names.

    Flags left at their default are dropped so config values apply.
    """
    return {
        field: ctx.params[param]
        for param, field in fields.items()
        if ctx.get_parameter_source(param) is not ParameterSource.DEFAULT
    }


def _emit_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def _split_keywords(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [k.strip() for k in value.split(",") if k.strip()]


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to PassForge configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (default from config).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner, decoration and log output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    quiet: bool,
) -> None:
    """PassForge -- password generation and strength analysis."""
    ctx.ensure_object(dict)

    try:
        forge_config = ForgeConfig.load(config)
    except FileNotFoundError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    output_format = output or forge_config.global_settings.output_format
    if output_format not in ("console", "json"):
        output_format = "console"

    console = ForgeConsole(quiet=quiet)
    logger = ForgeLogger.from_config("cli", forge_config.global_settings, quiet=quiet)

    logger.debug("Configuration loaded", path=config or "default", output=output_format)

    ctx.obj["config"] = forge_config
    ctx.obj["output_format"] = output_format
    ctx.obj["console"] = console
    ctx.obj["logger"] = logger
    ctx.obj["engine"] = ForgeEngine(
        forge_config,
        logger=ForgeLogger.from_config(
            "engine", forge_config.global_settings, quiet=quiet
        ),
    )
    ctx.obj["display"] = ForgeConsoleOutput(console)
    ctx.obj["reporter"] = BatchReportGenerator()

    if output_format == "console" and ctx.invoked_subcommand != "version":
        console.banner(version=__version__)


def _show_password(ctx: click.Context, password: str, title: str, **extra: Any) -> None:
    if ctx.obj["output_format"] == "json":
        _emit_json({"password": password, **extra})
        return
    subtitle = None
    if "entropy_bits" in extra:
        subtitle = f"{extra['entropy_bits']:.1f} bits, cracked in {extra['crack_time']}"
    ctx.obj["display"].display_password(password, title=title, subtitle=subtitle)


# ===================================================================== #
#  Generation Subcommands
# ===================================================================== #

@cli.command()
@click.option("--length", "-l", type=int, default=None, help="Password length.")
@click.option("--upper/--no-upper", default=True, help="Include uppercase letters.")
@click.option("--lower/--no-lower", default=True, help="Include lowercase letters.")
@click.option("--digits/--no-digits", default=True, help="Include digits.")
@click.option("--symbols/--no-symbols", default=False, help="Include symbols.")
@click.option("--keywords", "-k", default=None, help="Comma-separated keywords.")
@click.option(
    "--mix/--no-mix",
    default=True,
    help="Blend one keyword into random filler (--no-mix tiles keywords).",
)
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    upper: bool,
    lower: bool,
    digits: bool,
    symbols: bool,
    keywords: Optional[str],
    mix: bool,
) -> None:
    """Generate a random or keyword-based password.

    Character class defaults come from the [generator] config section;
    flags given on the command line override them.
    """
    engine: ForgeEngine = ctx.obj["engine"]
    overrides = _explicit(
        ctx,
        upper="use_upper",
        lower="use_lower",
        digits="use_digits",
        symbols="use_symbols",
        mix="mix",
    )
    with _forge_errors():
        password = engine.generate(
            length=length, keywords=_split_keywords(keywords), **overrides
        )
    _show_password(ctx, password, "Generated Password")


@cli.command()
@click.argument("template", required=False)
@click.pass_context
def pattern(ctx: click.Context, template: Optional[str]) -> None:
    """Generate a password from a template.

    \b
    C  uppercase letter      c  lowercase letter
    V  uppercase vowel       v  lowercase vowel
    9  digit                 !  symbol
    Any other character is copied literally.
    """
    engine: ForgeEngine = ctx.obj["engine"]
    with _forge_errors():
        password = engine.generate_from_pattern(template)
    _show_password(ctx, password, "Pattern Password")


@cli.command()
@click.option("--length", "-l", type=int, default=None, help="Total length (min 4).")
@click.option("--digits/--no-digits", default=True, help="Append two digits.")
@click.option("--symbols/--no-symbols", default=False, help="Append one symbol.")
@click.option("--capitalize/--no-capitalize", default=True, help="Uppercase first letter.")
@click.pass_context
def pronounceable(
    ctx: click.Context,
    length: Optional[int],
    digits: bool,
    symbols: bool,
    capitalize: bool,
) -> None:
    """Generate a pronounceable consonant/vowel password."""
    engine: ForgeEngine = ctx.obj["engine"]
    overrides = _explicit(
        ctx, digits="use_digits", symbols="use_symbols", capitalize="capitalize"
    )
    with _forge_errors():
        password = engine.generate_pronounceable(length=length, **overrides)
    _show_password(ctx, password, "Pronounceable Password")


@cli.command()
@click.option("--words", "-w", type=int, default=None, help="Word count (2-10).")
@click.option("--separator", "-s", default=None, help="Word separator.")
@click.option("--capitalize/--no-capitalize", default=True, help="Capitalize each word.")
@click.option("--number/--no-number", default=False, help="Append a number (10-99).")
@click.pass_context
def passphrase(
    ctx: click.Context,
    words: Optional[int],
    separator: Optional[str],
    capitalize: bool,
    number: bool,
) -> None:
    """Generate a passphrase from the bundled word list."""
    engine: ForgeEngine = ctx.obj["engine"]
    overrides = _explicit(ctx, capitalize="capitalize", number="append_number")
    with _forge_errors():
        phrase = engine.generate_passphrase(
            word_count=words, separator=separator, **overrides
        )
        entropy, crack_time = engine.passphrase_estimate(words)
    _show_password(
        ctx, phrase, "Passphrase", entropy_bits=entropy, crack_time=crack_time
    )


@cli.command()
@click.option("--keywords", "-k", required=True, help="Comma-separated keywords.")
@click.option("--leet/--no-leet", default=True, help="Apply leetspeak substitution.")
@click.option("--capitalize/--no-capitalize", default=True, help="Capitalize each keyword.")
@click.option("--shuffle/--no-shuffle", default=False, help="Shuffle keyword order.")
@click.option("--separator", "-s", default="", help="Keyword separator.")
@click.option("--salt/--no-salt", default=True, help="Append a symbol and a number.")
@click.pass_context
def personal(
    ctx: click.Context,
    keywords: str,
    leet: bool,
    capitalize: bool,
    shuffle: bool,
    separator: str,
    salt: bool,
) -> None:
    """Turn memorable keywords into a password."""
    engine: ForgeEngine = ctx.obj["engine"]
    with _forge_errors():
        password = engine.personalize(
            _split_keywords(keywords),
            leetspeak=leet,
            capitalize=capitalize,
            shuffle=shuffle,
            separator=separator,
            salt=salt,
        )
    _show_password(ctx, password, "Personalized Password")


# ===================================================================== #
#  Analysis Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password")
@click.pass_context
def analyze(ctx: click.Context, password: str) -> None:
    """Analyse password strength, entropy and crack time."""
    engine: ForgeEngine = ctx.obj["engine"]
    with _forge_errors():
        result = engine.analyze(password)

    if ctx.obj["output_format"] == "json":
        _emit_json(result.to_summary())
    else:
        ctx.obj["display"].display_analysis(result)


@cli.command()
@click.argument("password")
@click.pass_context
def breach(ctx: click.Context, password: str) -> None:
    """Check a password against the Pwned Passwords range API.

    Only the first five characters of the SHA-1 hash are sent.
    """
    config: ForgeConfig = ctx.obj["config"]
    if not config.breach.enabled:
        raise click.UsageError("breach lookups are disabled in the configuration")

    engine: ForgeEngine = ctx.obj["engine"]
    with _forge_errors():
        result = _run_async(engine.check_breach(password))

    if ctx.obj["output_format"] == "json":
        _emit_json(result.model_dump(mode="json"))
    else:
        ctx.obj["display"].display_breach(result)

    if result.status is BreachStatus.FOUND:
        ctx.exit(1)


# ===================================================================== #
#  Batch Export
# ===================================================================== #

@cli.command()
@click.argument("count", type=int)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in BATCH_KINDS]),
    default="random",
    help="Kind of password to generate.",
)
@click.option("--length", "-l", type=int, default=None, help="Length (random/pronounceable).")
@click.option("--words", "-w", type=int, default=None, help="Word count (passphrase).")
@click.option("--pattern", "template", default=None, help="Template (pattern).")
@click.option(
    "--format", "fmt",
    type=click.Choice(list(EXPORT_FORMATS)),
    default=None,
    help="Export format; without it passwords are displayed.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the export to this file instead of stdout.",
)
@click.pass_context
def batch(
    ctx: click.Context,
    count: int,
    kind: str,
    length: Optional[int],
    words: Optional[int],
    template: Optional[str],
    fmt: Optional[str],
    output_file: Optional[str],
) -> None:
    """Generate COUNT passwords at once and optionally export them."""
    engine: ForgeEngine = ctx.obj["engine"]
    reporter: BatchReportGenerator = ctx.obj["reporter"]
    console: ForgeConsole = ctx.obj["console"]

    options: dict[str, Any] = {}
    if length is not None:
        options["length"] = length
    if words is not None:
        options["word_count"] = words
    if template is not None:
        options["pattern"] = template

    with _forge_errors():
        result = engine.batch(count, kind, **options)

    if fmt is None and ctx.obj["output_format"] == "json":
        fmt = "json"

    if fmt is None:
        ctx.obj["display"].display_passwords(
            result.passwords, title=f"{result.count} {result.kind.value} passwords"
        )
    elif output_file:
        path = reporter.write(result, Path(output_file), fmt)
        console.success(f"{fmt.upper()} export saved to: {path}")
    else:
        click.echo(reporter.render(result, fmt), nl=False)


@cli.command()
def version() -> None:
    """Show the PassForge version."""
    click.echo(f"passforge {__version__}")


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the PassForge CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
