import pytest
from s3_list_sorter.main import main

def _report_lines(out):
    return [l for l in out.splitlines() if l.startswith("S3 Modification Time:")]

def test_cli_sort_by_s3_desc(listing_file, tmp_path, capsys):
    out_dir = tmp_path / "out"
    main([
        "-file", str(listing_file),
        "-sort", "s3",
        "-order", "desc",
        "--output-dir", str(out_dir),
        "--no-progress",
    ])

    out = capsys.readouterr().out
    lines = _report_lines(out)
    assert len(lines) == 3
    assert "2023-03-01 10:00:00" in lines[0]
    assert "2023-02-01 09:00:00" in lines[1]
    assert "2023-01-15 08:30:00" in lines[2]
    assert (out_dir / "results.json").exists()

def test_cli_long_flags_and_bucket(listing_file, tmp_path, capsys):
    out_dir = tmp_path / "out"
    main([
        "--file", str(listing_file),
        "--output-dir", str(out_dir),
        "--bucket", "archive",
        "--sync-dest", "/data/restore",
        "--no-progress",
    ])

    sync = (out_dir / "sync.sh").read_text(encoding="utf-8")
    assert "aws s3 sync 's3://archive' /data/restore --exclude='*'" in sync
    assert "'s3://archive/no timestamp here.mov'" in (out_dir / "rm.sh").read_text(encoding="utf-8")

def test_cli_unknown_sort_exits_before_output(listing_file, tmp_path, capsys):
    out_dir = tmp_path / "out"
    with pytest.raises(SystemExit) as exc:
        main(["-file", str(listing_file), "-sort", "size", "--output-dir", str(out_dir), "--no-progress"])

    assert exc.value.code == 1
    assert capsys.readouterr().out == ""
    assert not out_dir.exists()

def test_cli_missing_input_is_fatal(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-file", str(tmp_path / "nope.txt"), "--output-dir", str(tmp_path), "--no-progress"])

    assert exc.value.code == 1
    assert capsys.readouterr().out == ""
    assert not (tmp_path / "results.json").exists()

def test_cli_report_only(listing_file, tmp_path, capsys):
    main(["-file", str(listing_file), "--output-dir", str(tmp_path / "out"), "--report-only", "--no-progress"])

    out = capsys.readouterr().out
    assert out.startswith("Sorted Files:\n")
    assert len(_report_lines(out)) == 3
    assert not (tmp_path / "out").exists()
