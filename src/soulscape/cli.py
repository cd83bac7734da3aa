"""
Soulscape command line analyzer

Usage:
    soulscape-analyze "I feel happy and grateful today"
    echo "no point, I can't go on" | soulscape-analyze --compact
    soulscape-analyze --tables my_tables.yaml "feeling calm"
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from soulscape.config.settings import get_config
from soulscape.config.tables import TablesConfigError, load_tables
from soulscape.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)


@click.command()
@click.argument("text", required=False)
@click.option(
    "--tables",
    "tables_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML file overriding the built-in emotion tables",
)
@click.option("--pretty/--compact", default=True, help="Indent the JSON output")
def main(text: Optional[str], tables_path: Optional[Path], pretty: bool) -> None:
    """Analyze TEXT (or stdin) and print the result as JSON."""
    config = get_config()
    config.configure_logging()

    if text is None:
        text = sys.stdin.read()

    try:
        tables = load_tables(tables_path or config.tables_path)
    except TablesConfigError as e:
        raise click.ClickException(str(e))

    service = AnalysisService(tables)
    try:
        response = service.analyze(text)
    except ValueError as e:
        raise click.UsageError(str(e))

    payload = response.model_dump(mode="json", by_alias=True, exclude_none=True)
    click.echo(json.dumps(payload, indent=2 if pretty else None, ensure_ascii=False))


if __name__ == "__main__":
    main()
