"""
Tests for Batch Generation and Export
=====================================
Tests for passforge/generators/batch.py and passforge/output/report.py.
"""

import csv
import io
import json
import re

import pytest

from passforge.core.exceptions import InvalidConfiguration
from passforge.core.models import BatchResult, Strategy
from passforge.generators import generate_batch
from passforge.generators.batch import MAX_BATCH
from passforge.output import BatchReportGenerator


class TestGenerateBatch:
    """Tests for generate_batch."""

    def test_random_batch(self, rng, small_registry):
        result = generate_batch(5, registry=small_registry, rng=rng, length=10)
        assert result.kind is Strategy.RANDOM
        assert result.count == 5
        assert all(len(pw) == 10 for pw in result.passwords)

    def test_passphrase_batch(self, rng, small_registry):
        result = generate_batch(
            3, "passphrase", registry=small_registry, rng=rng, word_count=2, separator=" "
        )
        assert result.kind is Strategy.PASSPHRASE
        assert all(len(p.split(" ")) == 2 for p in result.passwords)

    def test_pronounceable_batch(self, rng, small_registry):
        result = generate_batch(
            4, Strategy.PRONOUNCEABLE, registry=small_registry, rng=rng, length=8
        )
        assert all(len(pw) == 8 for pw in result.passwords)

    def test_pattern_batch_default_template(self, rng, small_registry):
        result = generate_batch(3, "pattern", registry=small_registry, rng=rng)
        shape = re.compile(r"[A-Z][aeiou][a-z][a-z][aeiou][a-z][0-9]{2}.")
        assert all(shape.fullmatch(pw) for pw in result.passwords)

    def test_pattern_batch_custom_template(self, rng, small_registry):
        result = generate_batch(2, "pattern", registry=small_registry, rng=rng, pattern="99")
        assert all(pw.isdigit() and len(pw) == 2 for pw in result.passwords)

    @pytest.mark.parametrize("count", [0, -1, MAX_BATCH + 1])
    def test_count_bounds(self, rng, count):
        with pytest.raises(InvalidConfiguration):
            generate_batch(count, rng=rng)

    def test_upper_bound_accepted(self, rng, small_registry):
        result = generate_batch(MAX_BATCH, registry=small_registry, rng=rng, length=4)
        assert result.count == MAX_BATCH

    @pytest.mark.parametrize("kind", ["emoji", "keyword_mixed"])
    def test_unknown_kind(self, rng, kind):
        with pytest.raises(InvalidConfiguration):
            generate_batch(1, kind, rng=rng)

    def test_options_rejected_by_kind(self, rng, small_registry):
        """Options the kind does not understand fail as configuration errors."""
        with pytest.raises(InvalidConfiguration):
            generate_batch(1, "passphrase", registry=small_registry, rng=rng, length=8)


class TestBatchReportGenerator:
    """Tests for CSV and JSON export."""

    @pytest.fixture
    def batch(self):
        return BatchResult(kind=Strategy.RANDOM, passwords=("abc", 'q"x,y', "Zz9!"))

    @pytest.fixture
    def reporter(self):
        return BatchReportGenerator()

    def test_csv_header_and_rows(self, reporter, batch):
        text = reporter.to_csv(batch.passwords)
        rows = list(csv.reader(io.StringIO(text)))
        assert rows[0] == ["Password"]
        assert [r[0] for r in rows[1:]] == list(batch.passwords)

    def test_csv_quotes_special_characters(self, reporter):
        text = reporter.to_csv(['a,b'])
        assert text.splitlines()[1] == '"a,b"'

    def test_json_shape(self, reporter, batch):
        data = json.loads(reporter.to_json(batch))
        assert data["passwords"] == list(batch.passwords)
        assert data["count"] == 3
        assert data["generated_at"] == batch.generated_at.isoformat()

    def test_write_creates_file(self, reporter, batch, tmp_path):
        path = reporter.write(batch, tmp_path / "out" / "pw.json", "json")
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8"))["count"] == 3

    def test_write_csv(self, reporter, batch, tmp_path):
        path = reporter.write(batch, tmp_path / "pw.csv", "CSV")
        assert path.read_text(encoding="utf-8").startswith("Password\n")

    def test_unknown_format(self, reporter, batch, tmp_path):
        with pytest.raises(InvalidConfiguration):
            reporter.write(batch, tmp_path / "pw.xml", "xml")
