import math

import pytest

from introcs.gaussian import (
    cdf,
    main,
    pdf,
    sat_table,
    standard_cdf,
    standard_pdf,
    table_main,
)


def _erf_cdf(z):
    return 0.5 * (1.0 + math.erf(z / math.sqrt(2.0)))


def test_cdf_worked_example():
    assert f"{cdf(820, 1019, 209):.6f}" == "0.170510"


def test_main_prints_worked_example(capsys):
    assert main(["820", "1019", "209"]) == 0
    assert capsys.readouterr().out == "0.170510\n"


@pytest.mark.parametrize("z", [-7.5, -3.0, -1.2, -0.1, 0.4, 1.0, 2.5, 6.0])
def test_standard_cdf_matches_erf(z):
    assert standard_cdf(z) == pytest.approx(_erf_cdf(z), abs=1e-12)


def test_standard_cdf_at_zero_is_half():
    assert standard_cdf(0.0) == 0.5


def test_standard_cdf_saturates_outside_cutoff():
    assert standard_cdf(8.5) == 1.0
    assert standard_cdf(-8.5) == 0.0
    assert cdf(100.0, 0.0, 1.0) == 1.0
    assert cdf(-100.0, 0.0, 1.0) == 0.0


@pytest.mark.parametrize("z", [0.3, 1.7, 3.3])
def test_standard_cdf_symmetry(z):
    assert standard_cdf(z) + standard_cdf(-z) == pytest.approx(1.0, abs=1e-12)


def test_standard_cdf_is_monotonic():
    values = [standard_cdf(z / 10.0) for z in range(-90, 91)]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_standard_pdf_peak():
    assert standard_pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))
    assert standard_pdf(1.3) == pytest.approx(standard_pdf(-1.3))
    assert standard_pdf(1.0) < standard_pdf(0.0)


def test_pdf_scales_with_sigma():
    assert pdf(5.0, 5.0, 2.0) == pytest.approx(standard_pdf(0.0) / 2.0)
    assert pdf(7.0, 5.0, 2.0) == pytest.approx(standard_pdf(1.0) / 2.0)


def test_pdf_zero_sigma_raises():
    with pytest.raises(ZeroDivisionError):
        pdf(1.0, 0.0, 0.0)


def test_sat_table_scores_and_order():
    rows = sat_table(1019, 209)
    assert [score for score, _ in rows] == list(range(400, 1601, 100))
    fractions = [fraction for _, fraction in rows]
    assert fractions == sorted(fractions)


def test_table_main_matches_documented_output(capsys):
    assert table_main(["1019", "209"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 13
    assert lines[0] == " 400  0.0015"
    assert lines[4] == " 800  0.1474"
    assert lines[6] == "1000  0.4638"
    assert lines[-1] == "1600  0.9973"


def test_main_usage(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().out.startswith("Usage:")


def test_main_rejects_non_numbers(capsys):
    assert main(["a", "b", "c"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_table_main_usage(capsys):
    assert table_main(["1019"]) == 1
    assert capsys.readouterr().out.startswith("Usage:")