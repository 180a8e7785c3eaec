# RoboLens — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import List, Optional

import typer
from rich import print
from rich.markup import escape

from .config import Settings
from .core.fetch import fetch_robots_for
from .core.robots import Robots
from .errors import FetchError
from .logging_config import configure_logging
from .utils.net import build_session
from .utils.urls import relative_path

app = typer.Typer(add_completion=False, no_args_is_help=True)

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
	return source.lower().startswith(("http://", "https://"))


def load_robots(source: str, user_agent: str, cfg: Settings, timeout: Optional[float] = None) -> Robots:
	"""Build a Robots object from a URL (fetched) or a local file.

	Raises FetchError when a local file cannot be read.
	"""
	if is_remote(source):
		session = build_session(
			user_agent=user_agent, retries=cfg.retries, backoff=cfg.backoff, max_redirects=cfg.max_redirects
		)
		return fetch_robots_for(session, source, user_agent, timeout=timeout or cfg.timeout)
	try:
		with open(source, "rb") as f:
			return Robots.from_reader(f, user_agent)
	except OSError as exc:
		raise FetchError(f"cannot read {source}: {exc.strerror or exc}") from exc


def _load_or_exit(source: str, user_agent: str, cfg: Settings, timeout: Optional[float] = None) -> Robots:
	try:
		return load_robots(source, user_agent, cfg, timeout=timeout)
	except FetchError as exc:
		logger.error("%s", exc)
		print(f"[red]error:[/red] {escape(str(exc))}")
		raise typer.Exit(code=2)


@app.command()
def check(
	source: str = typer.Argument(..., help="robots.txt file path, or site URL to fetch it from"),
	paths: List[str] = typer.Argument(..., help="Relative paths or absolute URLs to check"),
	agent: Optional[str] = typer.Option(None, help="Crawler user-agent (overrides env)"),
	timeout: Optional[float] = typer.Option(None, help="Fetch timeout in seconds"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
	log_dir: Optional[str] = typer.Option(None, help="Log directory"),
):
	"""Check whether paths may be crawled. Exits with 1 if any path is disallowed."""
	cfg = Settings()
	ua = agent or cfg.user_agent
	configure_logging(level=log_level or cfg.log_level, log_dir=log_dir or cfg.log_dir)
	robots = _load_or_exit(source, ua, cfg, timeout=timeout)

	delay = robots.crawl_delay()
	print(f"[bold]Group:[/bold] {escape(robots.user_agent())}")
	if robots.is_always() is not None:
		verdict = "allow all" if robots.is_always() else "disallow all"
		print(f"[bold]Mode:[/bold] {verdict}")
	print(f"[bold]Crawl-delay:[/bold] {delay.total_seconds() if delay is not None else 'none'}")

	denied = 0
	for p in paths:
		if robots.is_allowed(relative_path(p)):
			print(f"{escape(p)}: [green]allowed[/green]")
		else:
			denied += 1
			print(f"{escape(p)}: [red]disallowed[/red]")
	if denied:
		raise typer.Exit(code=1)


@app.command()
def sitemaps(
	source: str = typer.Argument(..., help="robots.txt file path, or site URL to fetch it from"),
	timeout: Optional[float] = typer.Option(None, help="Fetch timeout in seconds"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
	log_dir: Optional[str] = typer.Option(None, help="Log directory"),
):
	"""List the sitemap URLs declared in a robots.txt file."""
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=log_dir or cfg.log_dir)
	robots = _load_or_exit(source, cfg.user_agent, cfg, timeout=timeout)
	for url in robots.sitemaps():
		print(escape(url))


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
