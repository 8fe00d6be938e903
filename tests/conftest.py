# Shared pytest fixtures
from __future__ import annotations
import logging
import tempfile
from pathlib import Path
import pytest

from mtd_export.logging.init import reset_logging


def write_tsv(path: Path, rows: list[list[str]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join("\t".join(r) for r in rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        # .env / MTD_* が実行環境から混入しないようにする
        for var in ("MTD_BASE_TASK_DETAIL_ID", "MTD_FILE_PREFIX", "MTD_WARNING_LOG"):
            monkeypatch.delenv(var, raising=False)
        yield p


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    # capsys の stream を掴んだ handler を次のテストへ残さない
    logger = logging.getLogger("mtd_export")
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    reset_logging()


@pytest.fixture()
def language_tsv(temp_workdir: Path) -> Path:
    return write_tsv(
        temp_workdir / "data" / "extracted_m_series_language.tsv",
        [
            ["series_code", "series_name", "catchcopy", "series_notice_top_1", "series_notice_top_2",
             "series_notice_top_3", "series_notice_top_4", "series_notice_top_5"],
            ["S1", "Name1", "Catch1", "Notice1", "", "", "", ""],
            ["S2", "Name2", "", "", "", "", "", "Notice5"],
            ["S3", "", "Catch3", "", "", "", "", ""],  # series_name 空 -> 対象外
        ],
    )


@pytest.fixture()
def wysiwyg_tsv(temp_workdir: Path) -> Path:
    return write_tsv(
        temp_workdir / "data" / "extracted_m_series_wysiwyg_language.tsv",
        [
            ["series_code", "html"],
            ["S1", "<p>A</p>"],
            ["S2", "<p>X</p>"],
            ["S1", "<p>B</p>"],
        ],
    )


@pytest.fixture()
def brand_tsv(temp_workdir: Path) -> Path:
    return write_tsv(
        temp_workdir / "data" / "m_series.tsv",
        [
            ["series_code", "brand_code", "series_name"],
            ["S1", "B1", "Name1"],
        ],
    )


@pytest.fixture()
def category_tsv(temp_workdir: Path) -> Path:
    return write_tsv(
        temp_workdir / "data" / "m_category_series.tsv",
        [
            ["series_code", "category_code", "delete_flag"],
            ["S1", "C_OLD", "1"],
            ["S1", "C1", "0"],
            ["S2", "C2", "0"],
        ],
    )


@pytest.fixture()
def sample_config_yaml() -> str:
    return """base_task_detail_id: 100
file_prefix: test-prefix
warning_log: logs/warning.log
metadata:
  anken_id: ANKEN1
  duplication_manage_id: DUP1
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "mtd.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def tsv_writer():
    return write_tsv
