"""
PassForge Console Interface
============================

Rich-powered console abstraction providing the presentation layer used by
the CLI: banner, section rules and the success line, all with one
consistent theme.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

_FORGE_THEME = Theme(
    {
        "forge.banner": "bold bright_cyan",
        "forge.section": "bold bright_magenta",
        "forge.success": "bold green",
        "forge.dim": "dim white",
        "forge.secret": "bold bright_white",
    }
)

_BANNER_ART = r"""[bright_cyan]
  ___              ___
 | _ \__ _ ______ | __|__ _ _ __ _ ___
 |  _/ _` (_-<_-< | _/ _ \ '_/ _` / -_)
 |_| \__,_/__/__/ |_|\___/_| \__, \___|
                             |___/
[/bright_cyan]"""

_TAGLINE = "Password generation & strength analysis"


class ForgeConsole:
    """Unified console interface for PassForge output.

    Usage::

        con = ForgeConsole()
        con.banner()
        con.section("Generated")
        con.success("Done")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress decorative output (banner and sections).
            record: Enable Rich recording for later export.
        """
        self._quiet = quiet
        self._console = Console(
            theme=_FORGE_THEME,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    @property
    def quiet(self) -> bool:
        return self._quiet

    def banner(self, version: str = "1.0.0") -> None:
        """Display the PassForge banner."""
        if self._quiet:
            return
        subtitle = (
            f"[forge.section]{_TAGLINE}[/forge.section]\n"
            f"[forge.dim]Version: {version}[/forge.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a section rule."""
        if self._quiet:
            return
        self._console.rule(f"  {title}  ", style="forge.section", characters="─")

    # ------------------------------------------------------------------ #
    #  Status-coloured messages
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[forge.success][✔] SUCCESS:[/forge.success] {message}")

