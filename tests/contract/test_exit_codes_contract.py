from __future__ import annotations

from pathlib import Path

from mtd_export.cli import main as cli_main

"""Exit code contract: 0 success, 1 fatal."""


def test_generate_success(temp_workdir: Path, language_tsv, wysiwyg_tsv, brand_tsv, category_tsv, capsys):
    code = cli_main(["generate", str(language_tsv), str(wysiwyg_tsv), str(brand_tsv), str(category_tsv), "output/mtd"])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY series=2 documents=2" in out
    assert "INFO Done!" in out


def test_generate_missing_language_file(temp_workdir: Path, wysiwyg_tsv, brand_tsv, category_tsv, capsys):
    code = cli_main(["generate", "data/none.tsv", str(wysiwyg_tsv), str(brand_tsv), str(category_tsv)])
    err = capsys.readouterr().err
    assert code == 1
    assert "ERROR Language file not found: data/none.tsv" in err
    assert not (temp_workdir / "output" / "mtd").exists()


def test_generate_missing_wysiwyg_file(temp_workdir: Path, language_tsv, brand_tsv, category_tsv, capsys):
    code = cli_main(["generate", str(language_tsv), "data/none.tsv", str(brand_tsv), str(category_tsv)])
    assert code == 1
    assert "WYSIWYG file not found" in capsys.readouterr().err


def test_generate_schema_error_writes_nothing(temp_workdir: Path, language_tsv, wysiwyg_tsv, category_tsv, tsv_writer, capsys):
    bad_brand = tsv_writer(temp_workdir / "data" / "m_series.tsv", [["col1", "col2"], ["S1", "B1"]])
    code = cli_main(["generate", str(language_tsv), str(wysiwyg_tsv), str(bad_brand), str(category_tsv), "output/mtd"])
    err = capsys.readouterr().err
    assert code == 1
    assert "ERROR Required columns (series_code, brand_code)" in err
    assert list((temp_workdir / "output" / "mtd").glob("*.tsv")) == []


def test_generate_missing_lookup_files_is_not_fatal(temp_workdir: Path, language_tsv, wysiwyg_tsv, capsys):
    code = cli_main(["generate", str(language_tsv), str(wysiwyg_tsv), "data/no_brand.tsv", "data/no_cat.tsv", "output/mtd"])
    captured = capsys.readouterr()
    assert code == 0
    assert "m_series file not found" in captured.err
    # 2 lookup ファイル欠落 + 2 series x 2 lookup 欠落
    assert "warnings=6" in captured.out


def test_extract_success(temp_workdir: Path, capsys):
    (temp_workdir / "data" / "codes.txt").write_text("A\n", encoding="utf-8")
    (temp_workdir / "data" / "in.tsv").write_text("series_code\tx\nA\t1\nB\t2\n", encoding="utf-8")
    code = cli_main(["extract", "data/in.tsv", "output/extracted.tsv", "data/codes.txt"])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY codes=1 lines=3 matched=1" in out


def test_extract_missing_codes_file(temp_workdir: Path, capsys):
    (temp_workdir / "data" / "in.tsv").write_text("h\n", encoding="utf-8")
    code = cli_main(["extract", "data/in.tsv", "out.tsv", "data/codes.txt"])
    assert code == 1
    assert "ERROR Series codes file not found" in capsys.readouterr().err


def test_extract_empty_codes_file(temp_workdir: Path, capsys):
    (temp_workdir / "data" / "codes.txt").write_text("\n\n", encoding="utf-8")
    (temp_workdir / "data" / "in.tsv").write_text("h\n", encoding="utf-8")
    code = cli_main(["extract", "data/in.tsv", "out.tsv", "data/codes.txt"])
    assert code == 1
    assert "No series codes found in file" in capsys.readouterr().err


def test_config_error_is_fatal(temp_workdir: Path, capsys):
    code = cli_main(["--config", "config/missing.yml", "inspect", "data/x.tsv"])
    assert code == 1
    assert "ERROR config: config file not found" in capsys.readouterr().err


def test_unknown_url_placeholder_is_config_error(temp_workdir: Path, language_tsv, wysiwyg_tsv, brand_tsv, category_tsv, capsys):
    (temp_workdir / "config" / "mtd.yml").write_text(
        'reference_url_template: "https://x/{series_code}/?q={lang}"\n', encoding="utf-8"
    )
    code = cli_main(["generate", str(language_tsv), str(wysiwyg_tsv), str(brand_tsv), str(category_tsv), "output/mtd"])
    assert code == 1
    assert "ERROR config: invalid reference_url_template" in capsys.readouterr().err
    assert not (temp_workdir / "output" / "mtd").exists()
