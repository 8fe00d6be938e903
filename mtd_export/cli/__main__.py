from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from mtd_export.config.loader import ConfigError, load_config
from mtd_export.logging.init import log_summary, set_debug, setup_logging
from mtd_export.logging.warning_log import WarningLog
from mtd_export.services.filter_scanner import extract_series
from mtd_export.services.orchestrator import generate_all
from mtd_export.services.summary import render_generation_summary, render_scan_summary
from mtd_export.tsv.reader import ExportError, read_tsv_file, to_frame

"""CLI entrypoint.

    mtd-export extract  <input.tsv> <output.tsv> <series_codes.txt>
    mtd-export generate <language.tsv> <wysiwyg.tsv> <brand.tsv> <category.tsv> [output_dir]
    mtd-export inspect  <file.tsv> [--rows N]

Exit codes: 0 success, 1 fatal (missing input / empty whitelist / schema / config).
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env so that MTD_* variables override the config file."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="mtd-export",
        description="Series TSV filter and task-submission TSV generator",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", type=Path, default=None, help="YAML config (default: config/mtd.yml if present)")
    sub = p.add_subparsers(dest="command", required=True)

    ex = sub.add_parser("extract", help="Copy rows whose series_code is whitelisted")
    ex.add_argument("input", type=Path, help="Input TSV (e.g. data/JP/m_series_language_jp.tsv)")
    ex.add_argument("output", type=Path, help="Output TSV")
    ex.add_argument("series_codes", type=Path, help="Whitelist file, one series code per line")

    gen = sub.add_parser("generate", help="Generate one task-submission TSV per series")
    gen.add_argument("language", type=Path, help="extracted m_series_language TSV")
    gen.add_argument("wysiwyg", type=Path, help="extracted m_series_wysiwyg_language TSV")
    gen.add_argument("brand", type=Path, help="m_series TSV (series_code, brand_code)")
    gen.add_argument("category", type=Path, help="m_category_series TSV (series_code, category_code)")
    gen.add_argument("output_dir", type=Path, nargs="?", default=None, help="Output directory")

    ins = sub.add_parser("inspect", help="Print columns and first rows of a TSV then exit")
    ins.add_argument("file", type=Path)
    ins.add_argument("--rows", type=int, default=3)
    return p.parse_args(argv)


def _inspect_data(path: Path, rows: int) -> int:
    table = read_tsv_file(path)
    df = to_frame(table)
    print(f"FILE: {path.name} rows={len(df)} cols={list(df.columns)}")
    print("  sample_rows=", df.head(rows).to_dict(orient="records"))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # 空リスト [] をそのまま使う (None の時のみ sys.argv を読む)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        set_debug(logger)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        if args.command == "inspect":
            return _inspect_data(args.file, args.rows)

        if args.command == "extract":
            scan = extract_series(args.input, args.output, args.series_codes)
            log_summary(render_scan_summary(scan)[len("SUMMARY "):])
            return EXIT_SUCCESS

        output_dir = args.output_dir if args.output_dir is not None else Path(cfg.output_directory)
        result = generate_all(
            args.language,
            args.wysiwyg,
            args.brand,
            args.category,
            output_dir,
            config=cfg,
            warning_log=WarningLog(Path(cfg.warning_log)),
        )
    except ExportError as e:
        logger.error(str(e))
        return EXIT_FATAL

    logger.info("Done!")
    log_summary(render_generation_summary(result)[len("SUMMARY "):])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
