import json

import run_fetch
from job_feed.aggregator import derive_facets
from job_feed.models import Listing

CATALOG = [
    Listing(id="remotive-1", title="Nurse", company="Clinic", tags=["Healthcare"], source="Remotive"),
    Listing(id="muse-1", title="Baker", company="Bakery", location="Paris", source="The Muse"),
    Listing(id="remoteok-1", title="Data Analyst", company="Acme", tags=["sql"], source="Remote OK"),
]


def _fake_aggregate(sources=None, settings=None):
    return list(CATALOG), derive_facets(CATALOG)


def test_parse_args_defaults():
    args = run_fetch.parse_args([])
    assert args.out is None
    assert args.search == ""
    assert args.recent is False
    assert args.limit == 20


def test_main_filters_and_writes_json(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(run_fetch, "aggregate_sync", _fake_aggregate)
    out = tmp_path / "jobs.json"

    run_fetch.main(["--search", "DATA", "--facets", "--out", str(out)])

    printed = capsys.readouterr().out
    assert "Find your next opportunity." in printed
    assert "Categories: Healthcare, sql" in printed
    assert "1 jobs matched to your profile" in printed
    assert "Data Analyst @ Acme" in printed
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [d["id"] for d in data] == ["remoteok-1"]
    assert data[0]["salary"] == "N/A"


def test_main_reports_no_results(monkeypatch, capsys):
    monkeypatch.setattr(run_fetch, "aggregate_sync", _fake_aggregate)

    run_fetch.main(["--category", "food"])

    printed = capsys.readouterr().out
    assert "0 jobs matched to your profile" in printed
    assert "No jobs found." in printed


def test_main_detail_prints_one_listing(monkeypatch, capsys):
    monkeypatch.setattr(run_fetch, "aggregate_sync", _fake_aggregate)

    run_fetch.main(["--detail", "muse-1"])

    printed = capsys.readouterr().out
    assert printed.startswith("Baker\nBakery\nParis | N/A | The Muse\n")
    assert "jobs matched" not in printed


def test_main_detail_unknown_id(monkeypatch, capsys):
    monkeypatch.setattr(run_fetch, "aggregate_sync", _fake_aggregate)

    run_fetch.main(["--detail", "muse-404"])

    assert capsys.readouterr().out == "No job with id muse-404.\n"
