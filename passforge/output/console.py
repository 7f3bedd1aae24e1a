"""
PassForge Console Output
=========================

Rich-based formatters for generated passwords, strength analyses and
breach verdicts. Built on the shared :class:`ForgeConsole` so every
command renders with the same theme.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ForgeConsole
from passforge.core.models import AnalysisResult, BreachResult, BreachStatus


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_STRENGTH_COLOURS: dict[str, str] = {
    "very_weak": "bold white on red",
    "weak": "bold red",
    "fair": "bold yellow",
    "strong": "bold green",
    "very_strong": "bold bright_green",
}

_BREACH_COLOURS: dict[str, str] = {
    "found": "bold white on red",
    "not_found": "bold green",
    "unreachable": "bold yellow",
}

_METER_WIDTH = 40


def mask_password(password: str) -> str:
    """Keep the first and last character, mask the rest.

    >>> mask_password("hunter22")
    'h******2'
    """
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class ForgeConsoleOutput:
    """Console output formatters for PassForge results.

    Usage::

        output = ForgeConsoleOutput(ForgeConsole())
        output.display_password(engine.generate(), title="Random")
        output.display_analysis(engine.analyze("MyP@ssw0rd"))
    """

    def __init__(self, console: Optional[ForgeConsole] = None) -> None:
        self.console = console or ForgeConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Generated passwords
    # ------------------------------------------------------------------ #

    def display_password(
        self,
        password: str,
        *,
        title: str = "Generated Password",
        subtitle: Optional[str] = None,
    ) -> None:
        """Show one generated password in a panel.

        In quiet mode only the bare password is printed, so output can be
        piped into other tools.
        """
        if self.console.quiet:
            self._rich.print(password, markup=False, highlight=False, emoji=False)
            return
        body = Text(password, style="forge.secret")
        self._rich.print(
            Panel(body, title=title, subtitle=subtitle, border_style="cyan", expand=False)
        )

    def display_passwords(self, passwords: Sequence[str], *, title: str = "Passwords") -> None:
        if self.console.quiet:
            for password in passwords:
                self._rich.print(password, markup=False, highlight=False, emoji=False)
            return
        tbl = Table(
            title=title,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("#", justify="right", style="dim")
        tbl.add_column("Password", style="forge.secret")
        for idx, password in enumerate(passwords, start=1):
            tbl.add_row(str(idx), Text(password))
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Strength analysis
    # ------------------------------------------------------------------ #

    def display_analysis(self, result: AnalysisResult) -> None:
        """Display a strength analysis with a visual 0-100 meter."""
        self.console.section("Password Analysis")

        strength_colour = _STRENGTH_COLOURS.get(result.strength.value, "white")
        strength_label = result.strength.value.replace("_", " ").upper()

        filled = max(0, min(_METER_WIDTH, int((result.score / 100) * _METER_WIDTH)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/100  ")
        meter.append("[", style="dim")
        for i in range(_METER_WIDTH):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < _METER_WIDTH * 0.25:
                meter.append("█", style="red")
            elif i < _METER_WIDTH * 0.50:
                meter.append("█", style="yellow")
            elif i < _METER_WIDTH * 0.75:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]  ", style="dim")
        meter.append(strength_label, style=strength_colour)

        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        tbl.add_row("Password", Text(mask_password(result.password)))
        tbl.add_row("Length", str(len(result.password)))
        tbl.add_row("Entropy", f"{result.entropy_bits:.2f} bits")
        tbl.add_row("Crack Time", result.crack_time)
        tbl.add_row("Strength", Text(strength_label, style=strength_colour))
        self._rich.print(tbl)

        if result.suggestions:
            self._rich.print()
            self._rich.print("[bold]Suggestions:[/bold]")
            for suggestion in result.suggestions:
                self._rich.print(f"  [bright_cyan]•[/bright_cyan] {suggestion}")

    # ------------------------------------------------------------------ #
    #  Breach verdict
    # ------------------------------------------------------------------ #

    def display_breach(self, result: BreachResult) -> None:
        self.console.section("Breach Check")
        colour = _BREACH_COLOURS.get(result.status.value, "white")

        if result.status is BreachStatus.FOUND:
            verdict = f"Found in breaches {result.count:,} times. Do not use this password."
        elif result.status is BreachStatus.NOT_FOUND:
            verdict = "Not found in known breaches."
        else:
            verdict = "Breach service unreachable; result unknown."

        text = Text(verdict, style=colour)
        if result.error:
            text.append(f"\n{result.error}", style="dim")
        self._rich.print(Panel(text, title="Breach Verdict", border_style="cyan", expand=False))
