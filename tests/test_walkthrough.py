"""
Tests for the narrated 2x2 walkthrough and its command-line entry point.
"""

import io
import logging

import numpy as np
import pytest

from pymatrices import Matrix2D, Vector2D, config, transpose
from pymatrices.core.tolerances import ToleranceTier, allclose
from pymatrices.logging_config import setup_logging
from pymatrices.walkthrough import WalkthroughReport, main, rand_float, rand_int_f, run


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so handlers never outlive the captured streams."""
    yield
    logger = logging.getLogger("pymatrices")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def report_and_text(rng):
    out = io.StringIO()
    report = run(rng, out)
    return report, out.getvalue()


# ═══════════════════════════════════════════════════════════════════════
# Random helpers
# ═══════════════════════════════════════════════════════════════════════


class TestRandomHelpers:

    def test_rand_int_f_is_integer_valued_float(self, rng):
        for _ in range(200):
            value = rand_int_f(rng, -10, 10)
            assert isinstance(value, float)
            assert value.is_integer()
            assert -10 <= value <= 10

    def test_rand_int_f_reaches_both_ends(self, rng):
        values = {rand_int_f(rng, -2, 2) for _ in range(500)}
        assert values == {-2.0, -1.0, 0.0, 1.0, 2.0}

    def test_rand_float_range(self, rng):
        for _ in range(200):
            value = rand_float(rng, -10.0, 10.0)
            assert isinstance(value, float)
            assert -10.0 <= value < 10.0


# ═══════════════════════════════════════════════════════════════════════
# run()
# ═══════════════════════════════════════════════════════════════════════


class TestRun:

    def test_returns_report(self, report_and_text):
        report, _ = report_and_text
        assert isinstance(report, WalkthroughReport)

    def test_scaling_map(self, report_and_text):
        report, _ = report_and_text
        assert report.m == Matrix2D(2, 0, 0, 1)
        assert report.m_x == Vector2D(2 * report.x.x, report.x.y)

    def test_linearity_holds(self, report_and_text):
        report, _ = report_and_text
        tier = ToleranceTier(rtol=1e-9, atol=1e-9, name='walkthrough', description='test')
        assert allclose(report.a_of_combination, report.combination_of_images, tier)

    def test_formulations_equivalent(self, report_and_text):
        report, text = report_and_text
        assert report.formulations_equivalent
        assert "The formulations are equivalent!" in text

    def test_row_column_products(self, report_and_text):
        report, _ = report_and_text
        assert report.a_x == report.a * report.x
        assert report.x_a == report.x * report.a
        assert report.x_a_transpose == report.x * transpose(report.a)
        assert report.x_a_transpose == report.a_x

    def test_samples_are_integer_valued(self, report_and_text):
        report, _ = report_and_text
        assert all(c.is_integer() for c in report.x)
        assert all(c.is_integer() for c in report.u)
        assert all(float(v).is_integer() for v in report.a.to_array().flat)

    def test_narration(self, report_and_text):
        report, text = report_and_text
        assert text.startswith(f"x = {report.x}\nm =\n[ 2 0 ]\n[ 0 1 ]\nm * x = {report.m_x}\n")
        assert f"A*x = {report.a_x}\n" in text
        assert f"x*A = {report.x_a}\n" in text
        assert text.endswith(
            f"A*x (as a column vector) = x*A^T (as a row vector) = {report.x_a_transpose}\n"
        )

    def test_same_seed_same_output(self):
        first = io.StringIO()
        second = io.StringIO()
        run(np.random.default_rng(7), first)
        run(np.random.default_rng(7), second)
        assert first.getvalue() == second.getvalue()


# ═══════════════════════════════════════════════════════════════════════
# main() and logging
# ═══════════════════════════════════════════════════════════════════════


class TestMain:

    def test_exit_code_zero(self):
        out = io.StringIO()
        assert main(["--seed", "3", "--log-level", "warning"], out=out) == 0
        assert "m * x = " in out.getvalue()

    def test_seed_is_deterministic(self):
        first = io.StringIO()
        second = io.StringIO()
        main(["--seed", "11"], out=first)
        main(["--seed", "11"], out=second)
        assert first.getvalue() == second.getvalue()

    def test_seed_logged_at_info(self, capsys):
        main(["--seed", "5", "--log-level", "INFO"], out=io.StringIO())
        assert "Walkthrough seed: 5" in capsys.readouterr().out

    def test_rejects_unknown_level(self):
        with pytest.raises(SystemExit):
            main(["--log-level", "LOUD"], out=io.StringIO())

    def test_bad_environment_level_falls_back(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", config.resolve_log_level("verbose"))
        assert main(["--seed", "1"], out=io.StringIO()) == 0


class TestResolveLogLevel:

    @pytest.mark.parametrize("value, expected", [
        ("info", "INFO"),
        (" Debug ", "DEBUG"),
        ("CRITICAL", "CRITICAL"),
        ("verbose", "WARNING"),
        ("", "WARNING"),
        (None, "WARNING"),
    ])
    def test_resolve(self, value, expected):
        assert config.resolve_log_level(value) == expected

    def test_default_is_a_valid_choice(self):
        assert config.LOG_LEVEL in config.LOG_LEVELS


class TestSetupLogging:

    def test_single_console_handler_after_repeat_calls(self):
        setup_logging(logging.INFO)
        logger = setup_logging("DEBUG")
        assert logger.name == "pymatrices"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "pymatrices.log"
        logger = setup_logging(logging.INFO, log_file=str(log_file))
        logger.info("hello file")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "INFO     pymatrices: hello file" in text
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_unknown_level_string(self):
        with pytest.raises(ValueError, match="Unknown logging level"):
            setup_logging("LOUD")
