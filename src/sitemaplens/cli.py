# SitemapLens — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import typer
from typing import Optional
from rich import print
from rich.markup import escape
from pydantic import ValidationError

from .config import Settings
from .core.errors import SitemapError
from .core.resolver import SitemapResolver
from .logging_config import configure_logging
from .utils.io import EXPORT_FORMATS, export_entries

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def resolve(
	source: str = typer.Argument(..., help="Sitemap URL or local .xml path"),
	timeout: Optional[float] = typer.Option(None, help="HTTP timeout in seconds (overrides env)"),
	workers: Optional[int] = typer.Option(None, help="Concurrent child sitemap fetches"),
	max_depth: Optional[int] = typer.Option(None, help="Maximum sitemap index nesting to follow"),
	partial: Optional[bool] = typer.Option(None, "--partial/--strict", help="Collect failed child sitemaps instead of aborting"),
	user_agent: Optional[str] = typer.Option(None, help="Override User-Agent"),
	output: Optional[str] = typer.Option(None, help="Write entries to a .jsonl or .csv file"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
	log_dir: Optional[str] = typer.Option(None, help="Directory for the rotating log file"),
):
	"""Resolve a sitemap (index or urlset) into page entries."""
	if output and not output.lower().endswith(EXPORT_FORMATS):
		raise typer.BadParameter(f"expected one of {', '.join(EXPORT_FORMATS)}", param_hint="--output")
	overrides = {
		"timeout": timeout,
		"max_workers": workers,
		"max_depth": max_depth,
		"on_error": None if partial is None else ("collect" if partial else "raise"),
		"user_agent": user_agent,
		"log_level": log_level,
		"log_dir": log_dir,
	}
	try:
		cfg = Settings(**{k: v for k, v in overrides.items() if v is not None})
	except ValidationError as e:
		raise typer.BadParameter(str(e))
	configure_logging(level=cfg.log_level, log_dir=cfg.log_dir)
	resolver = SitemapResolver.from_settings(cfg)
	try:
		report = resolver.resolve_report(source)
	except SitemapError as e:
		print(f"[bold red]Failed:[/bold red] {escape(e.describe())}")
		raise typer.Exit(code=1)

	for entry in report.entries:
		print(escape(f"{entry.location}\t{entry.last_modified}"))
	for failure in report.failures:
		print(f"[yellow]Failed child:[/yellow] {escape(failure.error.describe())}")
	if output:
		written = export_entries(output, report.entries)
		print(f"[bold]Wrote[/bold] {written} entries to {escape(output)}")
	print({
		"entries": len(report.entries),
		"sitemaps": len(report.visited),
		"failed": len(report.failures),
		"skipped": len(report.skipped),
	})


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
