"""CLI entry point for svnreview.

Fetches the svn log for a directory once, then writes one review record per
reviewer listing the commits tagged for that reviewer.
"""

from __future__ import annotations

import logging
from datetime import datetime

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from svnreview_core.errors import SvnReviewError
from svnreview_core.parser import load_commits
from svnreview_core.render import render_report
from svnreview_core.reports import build_reports, report_file_name
from svnreview_store.files import FileStore
from svnreview_store.pdf import ConversionError, PdfConverter

console = Console()
err_console = Console(stderr=True)

_MANDATORY = ("directory", "reviewers")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _split_reviewers(ctx, param, value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [name.strip() for name in value.split(",") if name.strip()]


@click.command("svnreview")
@click.version_option(package_name="svnreview", prog_name="svnreview")
@click.option("--rev", "revision", metavar="FROM:TO", default=None, help="Valid revision range.")
@click.option("-d", "--directory", default=None, help="svn directory (path or URL) of the source code.")
@click.option(
    "-r",
    "--reviewers",
    metavar="NAME1,NAME2,...",
    default=None,
    callback=_split_reviewers,
    help="Comma-separated list of reviewer names; one report per name.",
)
@click.option(
    "-p",
    "--project",
    default=None,
    help="Project id without the pj prefix (e.g. 117 selects [pj117] commits); also used in the file name.",
)
@click.option(
    "-k",
    "--package",
    "work_package",
    default=None,
    help="Work package id without the wp prefix (e.g. 3 selects [wp3] commits).",
)
@click.option("--pdf", is_flag=True, help="Convert each report to PDF as well.")
@click.option("-o", "--output-dir", default=None, help="Directory reports are written to. Overrides config file.")
@click.option(
    "--config",
    "config_path",
    default=".svnreview.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="SVNREVIEW_CONFIG",
)
@click.option("--dry-run", is_flag=True, help="Print reports to the console instead of writing files.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    revision: str | None,
    directory: str | None,
    reviewers: list[str] | None,
    project: str | None,
    work_package: str | None,
    pdf: bool,
    output_dir: str | None,
    config_path: str,
    dry_run: bool,
    verbose: bool,
):
    """Generate code review records from svn commit messages.

    Commits are assigned to a reviewer by a <name> tag in the commit message.
    [pjNN] and [wpNN] tags narrow the records to a project and work package;
    --project and --package take the NN part only.
    """
    from svnreview_core.config import load_config, load_template

    _configure_logging(verbose)

    options = {"directory": directory, "reviewers": reviewers}
    missing = [name for name in _MANDATORY if not options[name]]
    if missing:
        click.echo(f"Missing options: {', '.join(missing)}")
        click.echo(ctx.get_help())
        ctx.exit(0)

    config = load_config(config_path, cli_overrides={"output_dir": output_dir, "pdf": pdf or None})
    try:
        template = load_template(config)
    except FileNotFoundError as e:
        raise click.UsageError(str(e)) from e

    try:
        commits = load_commits(directory, revision, svn_command=config["svn_command"])
    except SvnReviewError as e:
        raise click.ClickException(str(e)) from e

    reports = build_reports(commits, reviewers, project, work_package)
    store = FileStore(config["output_dir"])
    converter = PdfConverter() if config["pdf"] and not dry_run else None
    ctx.call_on_close(store.close)

    summary = Table(title="Review records", show_header=True, header_style="bold cyan")
    summary.add_column("Reviewer", style="bold")
    summary.add_column("Commits", justify="right")
    summary.add_column("File")

    for report in reports:
        generated_at = datetime.now().astimezone()
        text = render_report(report, directory, generated_at, template=template)
        file_name = report_file_name(report, generated_at)

        if dry_run:
            click.echo(text)
            summary.add_row(escape(report.reviewer), str(len(report.commits)), "[dim](dry run)[/dim]")
            continue

        try:
            path = store.save(file_name, text)
        except OSError as e:
            raise click.ClickException(f"could not write report {file_name}: {e}") from e
        console.print(f"Generated report {escape(str(path))}", soft_wrap=True)
        summary.add_row(escape(report.reviewer), str(len(report.commits)), escape(str(path)))

        if converter is not None:
            try:
                pdf_path = converter.convert(path)
                console.print(f"Converted to {escape(str(pdf_path))}", soft_wrap=True)
            except ConversionError as e:
                console.print(
                    f"[yellow]PDF conversion failed, text report kept: {escape(str(e))}[/yellow]", soft_wrap=True
                )

    console.print(summary)
