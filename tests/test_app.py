import pytest

from fractview.app import UsageError, main, parse_args, usage
from fractview.fractals import DEFAULT_JULIA_C, FractalType


def test_parse_mandelbrot():
    assert parse_args(["mandelbrot"]) == (FractalType.MANDELBROT, DEFAULT_JULIA_C)


def test_parse_burning_ship():
    kind, _ = parse_args(["burning_ship"])
    assert kind is FractalType.BURNING_SHIP


def test_parse_julia_constant():
    kind, julia_c = parse_args(["julia", "-0.33", "0.67"])
    assert kind is FractalType.JULIA
    assert julia_c.real == pytest.approx(-0.33)
    assert julia_c.imag == pytest.approx(0.67)


def test_extra_arguments_ignored_for_mandelbrot():
    assert parse_args(["mandelbrot", "1", "2"])[0] is FractalType.MANDELBROT


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["nope"],
        ["Mandelbrot"],
        ["julia"],
        ["julia", "1"],
        ["julia", "a", "b"],
        ["julia", "1.2.3", "0"],
        ["mandelbrot", "1", "2", "3"],
    ],
)
def test_bad_arguments(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_usage_mentions_every_fractal():
    text = usage()
    for name in ("mandelbrot", "julia", "burning_ship"):
        assert name in text


def test_main_prints_usage_on_error(capsys):
    assert main(["bad"]) == 1
    assert capsys.readouterr().out == usage()


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out