from pathlib import Path

import pandas as pd
import pytest

from workforce_pipeline.config import apply_overrides, get_env_config, load_analytics_config, resolve_config
from workforce_pipeline.domains.workforce.ingest import TABLE_FILES, ingest_workforce_tables
from workforce_pipeline.utils.io import output_suffix, read_table, write_output
from workforce_pipeline.utils.transforms import merge_datasets


def write_tables(directory: Path, tables) -> None:
    for name, filename in TABLE_FILES.items():
        getattr(tables, name).to_csv(directory / filename, index=False)


def test_ingest_reads_every_table(tmp_path, workforce_tables):
    write_tables(tmp_path, workforce_tables)

    tables = ingest_workforce_tables(tmp_path)
    assert tables.row_counts() == {
        "employees": 6,
        "departments": 3,
        "projects": 3,
        "performance_reviews": 9,
        "salaries": 6,
    }
    assert tables.project_memberships is None
    assert pd.api.types.is_datetime64_any_dtype(tables.employees["hire_date"])
    assert tables.employees["termination_date"].isna().sum() == 4


def test_ingest_picks_up_memberships(tmp_path, workforce_tables):
    write_tables(tmp_path, workforce_tables)
    pd.DataFrame({"employee_id": [1], "project_id": [2]}).to_csv(
        tmp_path / "project_memberships.csv", index=False
    )
    assert len(ingest_workforce_tables(tmp_path).project_memberships) == 1


def test_ingest_reports_missing_exports(tmp_path):
    with pytest.raises(FileNotFoundError, match="employees"):
        ingest_workforce_tables(tmp_path)
    with pytest.raises(FileNotFoundError, match="directory missing"):
        ingest_workforce_tables(tmp_path / "nope")


def test_read_table_normalizes_headers(tmp_path):
    path = tmp_path / "departments.csv"
    path.write_text("Department ID,Department-Name\n1,Engineering\n")
    df = read_table(path)
    assert df.columns.tolist() == ["department_id", "department_name"]


def test_read_table_names_an_empty_export(tmp_path):
    path = tmp_path / "salaries.csv"
    path.write_text("")
    with pytest.raises(ValueError, match="unreadable: salaries.csv"):
        read_table(path)


def test_ingest_rejects_empty_export(tmp_path, workforce_tables):
    write_tables(tmp_path, workforce_tables)
    (tmp_path / "salaries.csv").write_text("")
    with pytest.raises(ValueError, match="salaries.csv"):
        ingest_workforce_tables(tmp_path)


@pytest.mark.parametrize("fmt", ["csv", "json"])
def test_write_output_round_trip(tmp_path, fmt):
    df = pd.DataFrame({"department_name": ["Sales"], "turnover_rate": [0.25]})
    path = write_output(df, tmp_path / "out" / f"report{output_suffix(fmt)}", fmt=fmt)
    assert path.exists()


def test_write_output_rejects_unknown_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported output format"):
        write_output(pd.DataFrame(), tmp_path / "x.bin", fmt="bin")


def test_environment_configs():
    assert load_analytics_config("production").strict_validation
    assert load_analytics_config("development").storage.output_format == "csv"
    with pytest.raises(ValueError, match="Unknown environment"):
        load_analytics_config("qa")


def test_overrides_from_pyproject(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.workforce]\nreport_join = "left"\ndata_dir = "exports"\npreview_rows = 5\n'
    )
    config = resolve_config("development", root=tmp_path)
    assert config.report_join == "left"
    assert config.storage.data_dir == Path("exports")
    assert config.preview_rows == 5


def test_yaml_overrides_take_precedence(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.workforce]\nreport_join = "left"\n')
    (tmp_path / "workforce.yaml").write_text("output_format: json\n")
    assert get_env_config(tmp_path) == {"output_format": "json"}


def test_invalid_join_override_raises():
    with pytest.raises(ValueError, match="Unsupported report join"):
        apply_overrides(load_analytics_config("test"), {"report_join": "cross"})


def test_merge_datasets_only_accepts_pipeline_joins():
    left = pd.DataFrame({"department_id": [1]})
    right = pd.DataFrame({"department_id": [1]})
    assert len(merge_datasets(left, right, on="department_id", how="inner")) == 1
    with pytest.raises(ValueError, match="Unsupported merge type"):
        merge_datasets(left, right, how="cross")
