import pytest
from typer.testing import CliRunner

from robolens.cli import app, load_robots
from robolens.config import Settings
from robolens.errors import FetchError

runner = CliRunner()

ROBOTS = """\
User-agent: *
Disallow: /private
Crawl-delay: 2

User-agent: badbot
Disallow: /

Sitemap: https://example.com/sitemap.xml
"""


@pytest.fixture()
def robots_file(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	path = tmp_path / "robots.txt"
	path.write_text(ROBOTS, encoding="utf-8")
	return path


def test_check_reports_each_path(robots_file, tmp_path):
	result = runner.invoke(
		app,
		["check", str(robots_file), "/public", "https://example.com/private/x", "--agent", "goodbot", "--log-dir", str(tmp_path / "logs")],
	)
	assert result.exit_code == 1
	assert "/public: allowed" in result.output
	assert "https://example.com/private/x: disallowed" in result.output
	assert "Crawl-delay: 2.0" in result.output


def test_check_all_allowed_exits_zero(robots_file, tmp_path):
	result = runner.invoke(app, ["check", str(robots_file), "/public", "--agent", "goodbot", "--log-dir", str(tmp_path / "logs")])
	assert result.exit_code == 0
	assert "Group: *" in result.output


def test_check_missing_file(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	result = runner.invoke(app, ["check", str(tmp_path / "missing.txt"), "/", "--log-dir", str(tmp_path / "logs")])
	assert result.exit_code == 2
	assert "error" in result.output


def test_sitemaps_command(robots_file, tmp_path):
	result = runner.invoke(app, ["sitemaps", str(robots_file), "--log-dir", str(tmp_path / "logs")])
	assert result.exit_code == 0
	assert "https://example.com/sitemap.xml" in result.output
	assert (tmp_path / "logs" / "robolens.log").exists()


def test_print_config(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	result = runner.invoke(app, ["print-config"])
	assert result.exit_code == 0
	assert "user_agent" in result.output


def test_load_robots_from_file(robots_file):
	r = load_robots(str(robots_file), "badbot", Settings())
	assert not r.is_allowed("/")
	with pytest.raises(FetchError):
		load_robots(str(robots_file) + ".nope", "badbot", Settings())
