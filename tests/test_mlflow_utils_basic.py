import pandas as pd
from mlflow.tracking import MlflowClient

from src.utils import mlflow_utils
from tests.conftest import make_frame


def test_log_cleaning_run_records_metrics_and_artifacts(tmp_path):
    tracking_uri = (tmp_path / "mlruns").as_uri()
    output = tmp_path / "layoffs_cleaned.csv"
    output.write_text("company\nA\n", encoding="utf-8")
    cleaned = make_frame(
        [
            ("A", "X", None, 1, None, None, "Seed", "USA", 1),
            ("B", "X", "Retail", 1, None, None, "Seed", "USA", 1),
        ]
    )

    run_id = mlflow_utils.log_cleaning_run(
        cleaned,
        {"final_row_count": 2, "duplicates_removed": 0},
        {"strict_backfill": False},
        output_path=output,
        experiment_name="unit",
        tracking_uri=tracking_uri,
    )

    client = MlflowClient(tracking_uri=tracking_uri)
    run = client.get_run(run_id)
    assert run.info.status == "FINISHED"
    assert client.get_experiment(run.info.experiment_id).name == "unit"
    assert run.data.params == {"strict_backfill": "False"}
    assert run.data.metrics == {"final_row_count": 2.0, "duplicates_removed": 0.0}

    artifacts = sorted(item.path for item in client.list_artifacts(run_id))
    assert artifacts == ["blank_industries.csv", "layoffs_cleaned.csv"]
    blank_path = client.download_artifacts(run_id, "blank_industries.csv", str(tmp_path))
    blank = pd.read_csv(blank_path)
    assert blank["company"].tolist() == ["A"]
