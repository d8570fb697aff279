"""Command-line entry point to clean the layoffs dataset."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from src.data.errors import CleaningError
from src.pipelines.cleaning_pipeline import run_cleaning_pipeline


@click.command()
@click.option(
    "--input",
    "input_path",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    default=None,
    help="Raw layoffs CSV. Defaults to data/raw/layoffs.csv.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Where to write the cleaned CSV. Defaults to data/processed/layoffs_cleaned.csv.",
)
@click.option("--experiment-name", default="layoffs_cleaning", help="MLflow experiment name.")
@click.option("--track/--no-track", default=True, help="Log the run to MLflow.")
@click.option("--coerce-dates", is_flag=True, help="Set malformed dates to null instead of aborting.")
@click.option("--strict-backfill", is_flag=True, help="Abort when a company has conflicting industries.")
def main(
    input_path: Optional[Path],
    output_path: Optional[Path],
    experiment_name: str,
    track: bool,
    coerce_dates: bool,
    strict_backfill: bool,
) -> None:
    try:
        _, metrics = run_cleaning_pipeline(
            input_path=input_path,
            output_path=output_path,
            experiment_name=experiment_name,
            track=track,
            date_errors="coerce" if coerce_dates else "raise",
            strict_backfill=strict_backfill,
        )
    except CleaningError as exc:
        raise click.ClickException(str(exc)) from exc
    for name, value in metrics.items():
        click.echo(f"{name}: {value}")


if __name__ == "__main__":
    main()
