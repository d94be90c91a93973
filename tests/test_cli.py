from __future__ import annotations

from geofuncs.cli import main


def test_cli_dec_to_gms(capsys):
    assert main(["dec-to-gms", "40.7128", "--axis", "lat"]) == 0
    assert capsys.readouterr().out.strip() == "40° 42' 46.08\" N"


def test_cli_dec_to_gms_negative_without_axis(capsys):
    assert main(["dec-to-gms", "-74.006"]) == 0
    assert capsys.readouterr().out.strip() == "74° 0' 21.60\" (-)"


def test_cli_geo_distance_km(capsys):
    assert main(["geo-distance", "40.7128", "-74.0060", "34.0522", "-118.2437", "--unit", "km"]) == 0
    distance = float(capsys.readouterr().out.strip())
    assert abs(distance - 3935) < 50


def test_cli_reports_eval_errors_on_stderr(capsys):
    # Evaluation errors are values; the CLI turns them into stderr output plus exit code 1.
    assert main(["dec-to-gms", "91", "--axis", "lat"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "RangeError: Latitude must be between -90 and 90 degrees" in captured.err


def test_cli_invalid_unit(capsys):
    assert main(["geo-distance", "0", "0", "0", "90", "--unit", "furlong"]) == 1
    assert "ValueError" in capsys.readouterr().err


def test_cli_describe_json(capsys):
    import json

    assert main(["describe", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [f["name"] for f in payload] == ["decToGMS", "geoDistance"]


def test_cli_log_level_flag_enables_debug_output(capsys):
    # With DEBUG on the package logger, the returned error is also logged to stderr.
    try:
        assert main(["--log-level", "DEBUG", "dec-to-gms", "91", "--axis", "lat"]) == 1
        err = capsys.readouterr().err
        assert "decToGMS() returned RangeError" in err
    finally:
        main(["describe"])
        capsys.readouterr()
