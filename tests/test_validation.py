"""Tests for the self-check suite."""

import logging

from schouten.validation import (
    CheckResult,
    REFERENCE_PRIMES,
    check_gap_law,
    check_primorial,
    cross_validate_with_references,
    run_all_checks,
    summarize,
)


class TestRunAllChecks:
    """Tests for run_all_checks function."""

    def test_categories(self, engine):
        """Test every category is reported."""
        results = run_all_checks(engine)
        assert set(results) == {
            "next_prime", "gap_law", "prime_counting",
            "primorial", "spiral", "performance",
        }

    def test_all_pass(self, engine):
        """Test a correct engine passes every check."""
        results = run_all_checks(engine)
        failed = [r.name for checks in results.values() for r in checks if not r.passed]
        assert failed == []

    def test_logs_summary(self, engine, caplog):
        """Test the summary is logged."""
        with caplog.at_level(logging.INFO, logger="schouten.validation"):
            run_all_checks(engine)
        assert "Overall: 30/30 (100.0%) checks passed" in caplog.text

    def test_custom_logger(self, engine, caplog):
        """Test progress and summary go to a caller-supplied logger."""
        custom = logging.getLogger("custom_checks")
        with caplog.at_level(logging.INFO, logger="custom_checks"):
            run_all_checks(engine, logger=custom)
        messages = [r.getMessage() for r in caplog.records if r.name == "custom_checks"]
        assert "Testing next prime function..." in messages
        assert "Overall: 30/30 (100.0%) checks passed" in messages
        assert not [r for r in caplog.records if r.name == "schouten.validation"]

    def test_gap_law_records(self, engine):
        """Test gap checks carry full records."""
        results = check_gap_law(engine)
        assert all(r.actual.gap == 1 + r.actual.composites_between for r in results)

    def test_primorial_values(self, engine):
        """Test primorial checks record actual values."""
        assert [r.actual for r in check_primorial(engine)] == [2, 6, 30, 210, 2310]


class TestCrossValidate:
    """Tests for cross_validate_with_references function."""

    def test_references(self, engine):
        """Test the first 25 primes match."""
        assert len(REFERENCE_PRIMES) == 25
        assert cross_validate_with_references(engine)

    def test_detects_mismatch(self, engine, monkeypatch):
        """Test a wrong nth_prime is caught."""
        monkeypatch.setattr(engine, "nth_prime", lambda n: 4)
        assert not cross_validate_with_references(engine)

    def test_custom_logger(self, engine, caplog):
        """Test the reference result is logged to a caller-supplied logger."""
        custom = logging.getLogger("custom_checks")
        with caplog.at_level(logging.INFO, logger="custom_checks"):
            assert cross_validate_with_references(engine, logger=custom)
        assert [r.getMessage() for r in caplog.records if r.name == "custom_checks"] == [
            "All first 25 primes match references"
        ]


class TestSummarize:
    """Tests for summarize function."""

    def test_counts(self):
        """Test pass counts and percentage."""
        results = {
            "a": [CheckResult("a", "x", passed=True), CheckResult("a", "y", passed=False)],
            "b": [CheckResult("b", "z", passed=True)],
        }
        summary = summarize(results)
        assert summary["categories"] == {"a": (1, 2), "b": (1, 1)}
        assert summary["passed"] == 2
        assert summary["total"] == 3
        assert abs(summary["percentage"] - 200 / 3) < 1e-9

    def test_empty(self):
        """Test no results."""
        assert summarize({})["percentage"] == 0.0
