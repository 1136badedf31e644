"""CLI 子命令测试"""

import json

from schengen_calc.cli import main


def _write_visits(tmp_path, visits, wrap=False):
    path = tmp_path / "visits.json"
    payload = {"visits": visits} if wrap else visits
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_status_json(tmp_path, capsys):
    path = _write_visits(tmp_path, [{"country": "FR", "entry_date": "2024-05-23", "exit_date": "2024-06-01"}])
    assert main(["status", "--visits", path, "--date", "2024-06-01"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["used_days"] == 10
    assert data["remaining_days"] == 80
    assert data["next_reset_date"] == "2024-11-19"


def test_report_text(tmp_path, capsys):
    path = _write_visits(
        tmp_path,
        [{"country": "Spain", "entryDate": "2024-03-04", "exitDate": "2024-06-01"}],
        wrap=True,
    )
    assert main(["report", "--visits", path, "--date", "2024-06-01", "--text"]) == 0
    out = capsys.readouterr().out
    assert "Days used      : 90 / 90" in out
    assert "Next allowed entry: 2024-08-31" in out


def test_validate_trip(tmp_path, capsys):
    path = _write_visits(tmp_path, [])
    code = main(["validate", "--visits", path, "--entry", "2024-07-01", "--exit", "2024-07-10", "--country", "DE"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["can_travel"] is True
    assert data["max_stay_days"] == 90


def test_member(capsys):
    assert main(["member", "Switzerland"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {"country": "Switzerland", "code": "CH", "is_member": True}


def test_domain_error_exit_code(tmp_path, capsys):
    path = _write_visits(tmp_path, [])
    assert main(["safe-window", "--visits", path, "--days", "91"]) == 2
    err = json.loads(capsys.readouterr().err)
    assert err["code"] == "INVALID_DURATION"
