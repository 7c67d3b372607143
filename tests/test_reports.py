import numpy as np

from portopt.reports import (
    ASSET_NAMES,
    PERFORMANCE_TABLE,
    format_matrix,
    report_avg_performance,
    report_covariance,
    report_returns,
    report_sanitize,
    report_weight_matrix,
)


def test_format_matrix_layout():
    assert format_matrix([[1.0, 2.5]], 6, 2) == "  1.00  2.50\n\n"


def test_format_matrix_defaults_and_rows():
    text = format_matrix(np.zeros((3, 2)))
    lines = text.split("\n")
    assert lines[:3] == ["    0.00    0.00"] * 3
    assert text.endswith("\n\n")


def test_report_sanitize_removes_negative_zero():
    text = report_sanitize()
    before, after = text.split("Sanitized matrix:")
    assert "-0" in before
    assert "-0" not in after
    assert "(3,4)" in after


def test_report_avg_performance_values():
    text = report_avg_performance()
    for expected in ("5.05%", "12.35%", "9.26%", "9.63%"):
        assert expected in text
    assert "Average performance of the portfolio =" in text


def test_report_avg_performance_names_every_asset():
    text = report_avg_performance()
    for name in ASSET_NAMES:
        assert name in text


def test_report_returns_line_counts():
    text = report_returns()
    simple, log = text.split("Logarithm of relative returns per stock:")
    steps = PERFORMANCE_TABLE.shape[1] - 1
    for section in (simple, log):
        rows = [line for line in section.splitlines() if line.endswith("%")]
        assert len(rows) == len(ASSET_NAMES)
        for row in rows:
            assert len(row.split(":", 1)[1].rstrip("%").split()) == steps


def test_report_covariance_correlation_diagonal():
    text = report_covariance()
    corr_text = text.split("Correlation matrix:\n")[1]
    rows = [line.split() for line in corr_text.splitlines() if line.strip()]
    assert len(rows) == 4
    for i, row in enumerate(rows):
        assert row[i] == "1.00000"


def test_report_weight_matrix_reproducible_and_normalised():
    text = report_weight_matrix(42)
    assert text == report_weight_matrix(42)
    sums = text.split("Column Sums:\n")[1].split()
    assert sums == ["1.00000"] * 3


def test_report_weight_matrix_without_seed():
    text = report_weight_matrix(None)
    assert "without seed" in text
    matrix_rows = text.split("Column Sums:")[0].splitlines()[1:]
    assert len([row for row in matrix_rows if row.strip()]) == 5