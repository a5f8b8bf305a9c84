# tests/test_cli.py

from datetime import datetime, timedelta, timezone

import pytest

from daylight import cli

CET = timezone(timedelta(hours=1))
LAT = 48.0 + 21.0 / 60.0 + 19.1 / 3600.0
LON = 9.0 + 54.0 / 60.0 + 21.9 / 3600.0


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin the sampled day to a JDN instead of the host clock."""
    def pin(jdn):
        monkeypatch.setattr("daylight.core.time.now_jdn", lambda now=None: jdn)
    return pin


def test_run_reference_day():
    lines = cli.run(LAT, LON, now=datetime(2024, 3, 20, 9, 0, tzinfo=timezone.utc), tz=CET)
    assert lines == [
        "Sunrise: Wed, 20 Mar 2024 06:20:47 +0100",
        "Sunset: Wed, 20 Mar 2024 18:34:08 +0100",
        "Sun length: 12h, 13m, 21s",
    ]


def test_format_report_utc():
    rise = datetime(2024, 6, 21, 3, 19, 22, tzinfo=timezone.utc)
    sunset = datetime(2024, 6, 21, 19, 25, 22, tzinfo=timezone.utc)
    assert cli.format_report(rise, sunset) == [
        "Sunrise: Fri, 21 Jun 2024 03:19:22 +0000",
        "Sunset: Fri, 21 Jun 2024 19:25:22 +0000",
        "Sun length: 16h, 6m, 0s",
    ]


def test_main_prints_three_lines(capsys):
    assert cli.main(["--lat", "48.3553", "--lon", "9.9061"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert out[0].startswith("Sunrise: ")
    assert out[1].startswith("Sunset: ")
    assert out[2].startswith("Sun length: ")


def test_main_without_arguments_uses_config(capsys, fixed_today):
    fixed_today(2460390)
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "Sun length: 12h, 13m, 21s" in out


def test_main_polar_day(capsys, fixed_today):
    fixed_today(2460483)
    assert cli.main(["--lat", "70", "--lon", "0"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("No sunrise/sunset today: polar day")
    assert "Sunrise:" not in captured.out


def test_main_invalid_latitude(capsys):
    assert cli.main(["--lat", "95"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: latitude 95.0")


def test_main_verbose_logs_to_stderr(capsys, fixed_today):
    fixed_today(2460390)
    assert cli.main(["-v"]) == 0
    captured = capsys.readouterr()
    assert "Hour angle: " in captured.err
    assert "Jtransit: " in captured.err
    assert "Hour angle" not in captured.out
    assert len(captured.out.splitlines()) == 3


def test_main_quiet_by_default(capsys, fixed_today):
    fixed_today(2460390)
    assert cli.main([]) == 0
    captured = capsys.readouterr()
    assert captured.err == ""
