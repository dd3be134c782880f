"""Tests for the /check route, the SEOChecker orchestrator and the CLI."""

import csv
import json

import pytest
import requests

import app as app_module
from app import DEFAULT_CONFIG, SEOChecker, build_config, build_parser, load_config, merge_config, run_cli


def test_check_without_url_is_rejected_before_fetch(client, fake_get):
    resp = client.get("/check")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "URL required"}
    assert fake_get.calls == []


def test_check_with_blank_url_is_rejected(client, fake_get):
    resp = client.get("/check?url=%20%20")
    assert resp.status_code == 400
    assert fake_get.calls == []


def test_check_with_invalid_url(client, fake_get):
    resp = client.get("/check", query_string={"url": "http://"})
    assert resp.status_code == 400
    assert "Invalid URL" in resp.get_json()["error"]
    assert fake_get.calls == []


def test_check_returns_report(client, fake_get):
    resp = client.get("/check", query_string={"url": "https://example.com/widgets"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["url"] == "https://example.com/widgets"
    assert data["score"] == 100
    assert data["images"] == {"total": 2, "missingAlt": 0}
    assert len(data["checks"]) == 13
    assert fake_get.calls[0]["timeout"] == 10


def test_check_normalizes_scheme(client, fake_get):
    resp = client.get("/api/check", query_string={"url": "example.com"})
    assert resp.status_code == 200
    assert fake_get.calls[0]["url"] == "http://example.com"


def test_check_post_json(client, fake_get):
    resp = client.post("/check", json={"url": "https://example.com"})
    assert resp.status_code == 200
    assert resp.get_json()["title"] == "Blue Widgets for Every Workshop | The Widget Company Shop"


def test_check_post_invalid_json(client, fake_get):
    resp = client.post("/check", data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert fake_get.calls == []


def test_check_timeout_is_server_error(client, fake_get):
    fake_get.error = requests.exceptions.ConnectTimeout("Connection to slow.example.com timed out.")
    resp = client.get("/check", query_string={"url": "https://slow.example.com"})
    assert resp.status_code == 500
    assert "timed out" in resp.get_json()["error"].lower()
    assert len(fake_get.calls) == 1


def test_check_unexpected_error_is_server_error(client, monkeypatch):
    def boom(self, url, **kwargs):
        raise RuntimeError("socket exploded")

    monkeypatch.setattr(requests.Session, "get", boom)
    resp = client.get("/check", query_string={"url": "https://example.com"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "socket exploded"}


def test_health(client):
    resp = client.get("/health")
    assert resp.get_json() == {"status": "ok"}


def test_seo_checker_rejects_empty_url():
    with pytest.raises(ValueError):
        SEOChecker("")


def test_analyze_markup_does_not_fetch(fake_get, optimized_page):
    report = SEOChecker("https://example.com").analyze_markup(optimized_page)
    assert report.score == 100
    assert fake_get.calls == []


def test_save_report_to_file(tmp_path, monkeypatch, optimized_page):
    monkeypatch.chdir(tmp_path)
    checker = SEOChecker("https://example.com", output_format="json")
    checker.analyze_markup(optimized_page)
    filename = checker.save_report_to_file()
    assert filename.startswith("reports/seo_report_example_com_")
    with open(tmp_path / filename) as f:
        assert json.load(f)["score"] == 100


def test_merge_config_updates_sections():
    merged = merge_config(DEFAULT_CONFIG, {"Global": {"request_timeout": 5}, "Extra": 1})
    assert merged["Global"]["request_timeout"] == 5
    assert merged["Global"]["user_agent"] == "SEO-Checker/1.0"
    assert merged["Extra"] == 1
    assert DEFAULT_CONFIG["Global"]["request_timeout"] == 10


def test_load_config_missing_file_keeps_defaults(tmp_path):
    assert load_config(str(tmp_path / "nope.json")) == DEFAULT_CONFIG


def test_load_config_bad_json_keeps_defaults(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{")
    assert load_config(str(path)) == DEFAULT_CONFIG


@pytest.fixture
def cli(monkeypatch):
    """Runs the CLI in-process; the route config it replaces is restored afterwards."""
    monkeypatch.setattr(app_module, "flask_app_config", load_config())

    def run(argv):
        args = build_parser().parse_args(argv)
        return run_cli(args, build_config(args))

    return run


def test_cli_markup_file(tmp_path, capsys, cli, fake_get, optimized_page):
    page = tmp_path / "page.html"
    page.write_text(optimized_page, encoding="utf-8")
    out_dir = tmp_path / "csv"

    code = cli(["https://example.com/widgets", "--markup-file", str(page), "--no-save",
                "--export-csv", str(out_dir)])

    assert code == 0
    assert fake_get.calls == []
    printed = capsys.readouterr().out
    assert "SEO Score: 100%" in printed
    assert "[PASS] Single H1" in printed
    with open(out_dir / "checks.csv", newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["label"] for r in rows][0] == "Title tag"
    assert len(rows) == 13


def test_cli_markup_file_without_url(tmp_path, monkeypatch, cli, fake_get, optimized_page):
    monkeypatch.chdir(tmp_path)
    page = tmp_path / "page.html"
    page.write_text(optimized_page, encoding="utf-8")

    assert cli(["--markup-file", str(page)]) == 0

    assert fake_get.calls == []
    saved = list((tmp_path / "reports").glob("seo_report_page_html_*.json"))
    assert len(saved) == 1
    report = json.loads(saved[0].read_text())
    assert report["url"] == ""
    assert report["score"] == 100


def test_cli_fetch_failure_exit_code(capsys, cli, fake_get):
    fake_get.error = requests.exceptions.ConnectionError("refused")
    code = cli(["https://example.com", "--no-save", "--timeout", "2"])
    assert code == 1
    assert "refused" in capsys.readouterr().out
    assert fake_get.calls[0]["timeout"] == 2


def test_cli_sets_route_config(cli, fake_get):
    cli(["https://example.com", "--no-save", "--user-agent", "Custom/3.0"])
    assert app_module.flask_app_config["Global"]["user_agent"] == "Custom/3.0"


def test_route_config_restored_after_cli():
    assert app_module.flask_app_config["Global"]["user_agent"] == "SEO-Checker/1.0"


def test_modules_receive_only_global_settings(fake_get):
    assert set(DEFAULT_CONFIG) == {"Global"}
    config = merge_config(DEFAULT_CONFIG, {"Global": {"request_timeout": 4}})
    SEOChecker("https://example.com", config=config).run_analysis()
    assert fake_get.calls[0]["timeout"] == 4
