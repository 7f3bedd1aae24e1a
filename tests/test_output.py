"""
Tests for Console Output
========================
Tests for passforge/output/console.py rendered through a recording console.
"""

import pytest

from shared.console import ForgeConsole

from passforge.analyzers import analyze
from passforge.core.models import BreachResult, BreachStatus
from passforge.output import ForgeConsoleOutput, mask_password


def _render(quiet=False):
    console = ForgeConsole(quiet=quiet, record=True)
    return console, ForgeConsoleOutput(console)


class TestMaskPassword:
    """Tests for mask_password."""

    @pytest.mark.parametrize("password,masked", [
        ("a", "*"),
        ("ab", "**"),
        ("abc", "a*c"),
        ("hunter22", "h******2"),
    ])
    def test_mask(self, password, masked):
        assert mask_password(password) == masked


class TestForgeConsoleOutput:
    """Rendering checks."""

    def test_analysis_masks_password(self):
        console, output = _render()
        output.display_analysis(analyze("Sup3rS3cret!"))
        text = console.rich.export_text()
        assert "Sup3rS3cret!" not in text
        assert "S**********!" in text
        assert "Strength Meter" in text
        assert "Crack Time" in text

    def test_analysis_lists_suggestions(self):
        console, output = _render()
        output.display_analysis(analyze("abc"))
        text = console.rich.export_text()
        assert "Suggestions:" in text
        assert "Add numbers" in text

    def test_quiet_password_is_bare(self):
        console, output = _render(quiet=True)
        output.display_password("[bold]x[/bold]")
        assert console.rich.export_text() == "[bold]x[/bold]\n"

    def test_password_list(self):
        console, output = _render()
        output.display_passwords(["alpha1", "bravo2"], title="Batch")
        text = console.rich.export_text()
        assert "alpha1" in text and "bravo2" in text

    @pytest.mark.parametrize("result,phrase", [
        (BreachResult(status=BreachStatus.FOUND, count=1234), "1,234 times"),
        (BreachResult(status=BreachStatus.NOT_FOUND), "Not found"),
        (BreachResult(status=BreachStatus.UNREACHABLE, error="timeout"), "unreachable"),
    ])
    def test_breach_verdicts(self, result, phrase):
        console, output = _render()
        output.display_breach(result)
        assert phrase in console.rich.export_text()
