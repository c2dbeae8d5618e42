# tests/test_cli.py

import pytest

from fxtrig import cli

def test_sine_command(capsys):
    assert cli.main(["sine", "0.25"]) == 0
    assert capsys.readouterr().out == "sine(2*PI*0.25) = +0.999992\n"

def test_cosine_command(capsys):
    assert cli.main(["cosine", "0.5"]) == 0
    assert capsys.readouterr().out == "cosine(2*PI*0.5) = -1.000000\n"

def test_cosine_at_zero(capsys):
    assert cli.main(["cosine", "0"]) == 0
    assert capsys.readouterr().out == "cosine(2*PI*0) = +0.999992\n"

def test_sine_rejects_non_number():
    with pytest.raises(SystemExit) as e:
        cli.main(["sine", "abc"])
    assert e.value.code == 2

@pytest.mark.parametrize("cmd", ["sine", "cosine"])
@pytest.mark.parametrize("angle", ["inf", "nan"])
def test_angle_must_be_finite(cmd, angle, capsys):
    with pytest.raises(SystemExit) as e:
        cli.main([cmd, angle])
    assert e.value.code == 2
    assert "finite" in capsys.readouterr().err

def test_sine_requires_angle():
    with pytest.raises(SystemExit):
        cli.main(["sine"])

def test_demo_quarter_samples(capsys):
    assert cli.main(["demo", "--samples", "4"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "sine       cosine  ",
        "+0.000000, +0.999992",
        "+0.999992, +0.000000",
        "+0.000000, -1.000000",
        "-1.000000, +0.000000",
    ]

def test_demo_default_sample_count(capsys):
    assert cli.main(["demo"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 4097

def test_demo_rejects_zero_samples(capsys):
    assert cli.main(["demo", "--samples", "0"]) == 1
    assert "Error" in capsys.readouterr().err

def test_stats_command(capsys, tmp_path):
    out_file = tmp_path / "stats.txt"
    assert cli.main(["stats", "--bits", "8", "--out-txt", str(out_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("sine\n\tavg:   ")
    assert "\ncosine\n" in out
    assert out_file.read_text(encoding="utf-8").startswith("sine\n")

def test_stats_rejects_bad_bits(capsys):
    assert cli.main(["stats", "--bits", "30"]) == 1
    assert "--bits" in capsys.readouterr().err

def test_coeffs_command(capsys):
    assert cli.main(["coeffs", "--step", "256"]) == 0
    out = capsys.readouterr().out
    assert "sin(2*pi*x)" in out
    assert "cos(2*pi*x)" in out
    assert "150000" in out
    assert "adjusted" in out

def test_coeffs_rejects_too_narrow_multiplier(capsys):
    assert cli.main(["coeffs", "--mult-bits", "2"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "does not fit in 2 bits" in captured.err

def test_unknown_command():
    with pytest.raises(SystemExit):
        cli.main(["tan", "0.1"])
