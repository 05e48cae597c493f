# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run one analyzer on a local export (or one downloaded from the
#   conference system) and print the infoData JSON. Stands in for
#   the upload endpoint when working locally.
#
# COMMANDS:
# ---------
# 1. Author statistics:
#    python -m confstats.cli author exports/author.csv
#
# 2. Review statistics:
#    python -m confstats.cli review exports/review.csv --indent 2
#
# 3. Submission statistics, written to a file:
#    python -m confstats.cli submission https://example.org/submission.csv -o out.json
#
# IMPLEMENTATION:
# ---------------
# - Typer for argument parsing
# - requests for http(s) sources
# - ConferenceInfo does the actual work
#
# ==============================================

import json
from pathlib import Path
from typing import Optional

import requests
import typer

from confstats.conference_info import ConferenceInfo, CsvUpload
from confstats.config import get_config

app = typer.Typer(help="Aggregate statistics from conference-management CSV exports.")


def read_source(source: str, timeout: float) -> CsvUpload:
    """
    Load an export from a local path or an http(s) URL.

    Raises:
        typer.BadParameter: if the file is missing or the download fails
    """
    if source.startswith(("http://", "https://")):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise typer.BadParameter(f"Could not download {source}: {e}") from e
        return CsvUpload(buffer=response.content, filename=source.rsplit("/", 1)[-1])

    path = Path(source)
    if not path.is_file():
        raise typer.BadParameter(f"File {source} not found")
    return CsvUpload(buffer=path.read_bytes(), filename=path.name)


def _run(info_type: str, source: str, output: Optional[Path], indent: Optional[int]) -> None:
    config = get_config()
    upload = read_source(source, config.http_timeout_seconds)
    result = ConferenceInfo(config).get_info(info_type, upload)
    payload = json.dumps(result["infoData"], indent=indent, ensure_ascii=False)

    if output is None:
        typer.echo(payload)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    typer.echo(f"✓ Wrote {info_type} statistics to {output}", err=True)


SOURCE_HELP = "Path or http(s) URL of the CSV export."
OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout.")
INDENT_OPTION = typer.Option(None, "--indent", help="Pretty-print with this indent.")


@app.command()
def author(
    source: str = typer.Argument(..., help=SOURCE_HELP),
    output: Optional[Path] = OUTPUT_OPTION,
    indent: Optional[int] = INDENT_OPTION,
) -> None:
    """Top authors, countries and affiliations from author.csv."""
    _run("author", source, output, indent)


@app.command()
def review(
    source: str = typer.Argument(..., help=SOURCE_HELP),
    output: Optional[Path] = OUTPUT_OPTION,
    indent: Optional[int] = INDENT_OPTION,
) -> None:
    """Confidence-weighted scores and distributions from review.csv."""
    _run("review", source, output, indent)


@app.command()
def submission(
    source: str = typer.Argument(..., help=SOURCE_HELP),
    output: Optional[Path] = OUTPUT_OPTION,
    indent: Optional[int] = INDENT_OPTION,
) -> None:
    """Acceptance rates, keywords, authors and timelines from submission.csv."""
    _run("submission", source, output, indent)


if __name__ == "__main__":
    app()
