"""Pipeline configuration and environment setup."""

import logging
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

type ConfigDict = dict[str, str | int | bool | list[str]]

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


@dataclass(frozen=True)
class StorageConfig:
    data_dir: Path
    output_dir: Path
    output_format: str


@dataclass(frozen=True)
class AnalyticsConfig:
    storage: StorageConfig
    report_join: str
    validate_inputs: bool
    strict_validation: bool
    preview_rows: int
    domains: list[str]


def load_analytics_config(env: str = "production") -> AnalyticsConfig:
    match env:
        case "production":
            storage = StorageConfig(
                data_dir=Path("data/raw/workforce"),
                output_dir=Path("output/workforce"),
                output_format="parquet",
            )
            strict = True
        case "staging":
            storage = StorageConfig(
                data_dir=Path("data/staging/workforce"),
                output_dir=Path("output/staging/workforce"),
                output_format="parquet",
            )
            strict = True
        case "development" | "test":
            storage = StorageConfig(
                data_dir=Path("data/sample/workforce"),
                output_dir=Path("output/dev/workforce"),
                output_format="csv",
            )
            strict = False
        case other:
            raise ValueError(f"Unknown environment: {other}")

    return AnalyticsConfig(
        storage=storage,
        report_join="inner",
        validate_inputs=True,
        strict_validation=strict,
        preview_rows=20,
        domains=["workforce"],
    )


def get_env_config(root: Path = PROJECT_ROOT) -> ConfigDict:
    """Read overrides from ``workforce.yaml`` or ``[tool.workforce]`` in pyproject.toml."""
    yaml_path = root / "workforce.yaml"
    if yaml_path.exists():
        with open(yaml_path) as f:
            return yaml.safe_load(f) or {}

    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return {}
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("workforce", {})


def apply_overrides(config: AnalyticsConfig, overrides: ConfigDict) -> AnalyticsConfig:
    """Layer flat key/value overrides on top of an environment config."""
    storage = config.storage
    top_level = {}

    for key, value in overrides.items():
        match key:
            case "data_dir" | "output_dir":
                storage = replace(storage, **{key: Path(str(value))})
            case "output_format":
                storage = replace(storage, output_format=str(value))
            case "report_join":
                if value not in ("inner", "left"):
                    raise ValueError(f"Unsupported report join: {value}")
                top_level[key] = value
            case "validate_inputs" | "strict_validation":
                top_level[key] = bool(value)
            case "preview_rows":
                top_level[key] = int(value)
            case unknown:
                logger.warning("Ignoring unknown config key: %s", unknown)

    return replace(config, storage=storage, **top_level)


def resolve_config(env: str = "production", root: Path = PROJECT_ROOT) -> AnalyticsConfig:
    return apply_overrides(load_analytics_config(env), get_env_config(root))
