from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader for the task-submission TSV generator.

Responsibilities:
- Load YAML config (config/mtd.yml by default, optional)
- Validate against config_schema.json (additionalProperties: false)
- Apply built-in defaults for every missing key
- Apply MTD_* environment overrides (.env is loaded by the CLI beforehand)
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/mtd.yml")

DEFAULT_BASE_TASK_DETAIL_ID = 3909817
DEFAULT_FILE_PREFIX = "cistate-test-series-code"
DEFAULT_REFERENCE_URL_TEMPLATE = "https://jp.misumi-ec.com/vona2/detail/{series_code}/"

# 環境変数 -> 設定キー
ENV_OVERRIDES = {
    "MTD_BASE_TASK_DETAIL_ID": "base_task_detail_id",
    "MTD_FILE_PREFIX": "file_prefix",
    "MTD_WARNING_LOG": "warning_log",
}


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class OutputSettings:
    """Constants written into every generated document.

    The metadata row is written in the order of the control header:
    anken_id, duplication_manage_id, department_code, <category_code>,
    <brand_code>, from_subsidiary_code, from_language_code,
    to_subsidiary_code, to_language_code, translate_status.
    """
    anken_id: str = "ECSI01202509173395"
    duplication_manage_id: str = "DUP1000000215574"
    department_code: str = "el"
    from_subsidiary_code: str = "MJP"
    from_language_code: str = "JPN"
    to_subsidiary_code: str = "COM"
    to_language_code: str = "ENG"
    translate_status: str = "1"
    reference_url_template: str = DEFAULT_REFERENCE_URL_TEMPLATE

    def reference_url(self, series_code: str) -> str:
        return self.reference_url_template.format(series_code=series_code)


@dataclass(frozen=True)
class ExportConfig:
    base_task_detail_id: int = DEFAULT_BASE_TASK_DETAIL_ID
    file_prefix: str = DEFAULT_FILE_PREFIX
    output_directory: str = "output/mtd"
    warning_log: str = "logs/warning.log"
    default_brand_code: str = "MSM1"
    default_category_code: str = "M1803060000"
    output: OutputSettings = field(default_factory=OutputSettings)


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing / not valid JSON, or the data violates it
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _check_reference_url_template(template: str) -> None:
    # {series_code} 以外のプレースホルダや不正な波括弧は format 時に落ちる
    try:
        template.format(series_code="X")
    except (AttributeError, IndexError, KeyError, ValueError) as e:
        raise ConfigError(f"invalid reference_url_template {template!r}: {e!r}") from e


def _apply_env_overrides(cfg: ExportConfig, environ: dict[str, str] | None = None) -> ExportConfig:
    env = os.environ if environ is None else environ
    changes: dict[str, Any] = {}
    for var, key in ENV_OVERRIDES.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        if key == "base_task_detail_id":
            try:
                changes[key] = int(raw)
            except ValueError as e:
                raise ConfigError(f"{var} must be an integer: {raw!r}") from e
            if changes[key] < 0:
                raise ConfigError(f"{var} must be >= 0: {raw!r}")
        else:
            changes[key] = raw
    return replace(cfg, **changes) if changes else cfg


def load_config(path: Path | None = None, environ: dict[str, str] | None = None) -> ExportConfig:
    """Load the export config.

    path=None means "use config/mtd.yml if present, otherwise built-in defaults".
    An explicitly given path that does not exist is an error.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return _apply_env_overrides(ExportConfig(), environ)
    elif not path.exists():
        raise ConfigError(f"config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)
    if "reference_url_template" in data:
        _check_reference_url_template(data["reference_url_template"])

    meta = data.get("metadata", {})
    output = OutputSettings(
        reference_url_template=data.get("reference_url_template", DEFAULT_REFERENCE_URL_TEMPLATE),
        **meta,
    )
    defaults = ExportConfig()
    cfg = ExportConfig(
        base_task_detail_id=data.get("base_task_detail_id", defaults.base_task_detail_id),
        file_prefix=data.get("file_prefix", defaults.file_prefix),
        output_directory=data.get("output_directory", defaults.output_directory),
        warning_log=data.get("warning_log", defaults.warning_log),
        default_brand_code=data.get("default_brand_code", defaults.default_brand_code),
        default_category_code=data.get("default_category_code", defaults.default_category_code),
        output=output,
    )
    return _apply_env_overrides(cfg, environ)
