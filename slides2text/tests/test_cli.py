from pdf_samples import build_pdf, flate_stream

import slides2text
from slides2text.cli import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, main
from slides2text.report import format_report


def test_cli_writes_report(tmp_path, capsys) -> None:
    input_path = tmp_path / "deck.pdf"
    input_path.write_bytes(build_pdf(flate_stream(b"BT (Hello) Tj ET")))
    output_path = tmp_path / "deck.extracted.txt"

    exit_code = main([str(input_path), str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == f"Wrote: {output_path}\n"
    expected = format_report(next(slides2text.read_file(input_path)), str(input_path))
    assert output_path.read_text(encoding="utf-8") == expected
    assert "source=" + str(input_path) + "\n" in expected
    assert "- Hello\n" in expected


def test_cli_is_idempotent(tmp_path) -> None:
    input_path = tmp_path / "deck.pdf"
    input_path.write_bytes(
        build_pdf(flate_stream(b"BT (Welcome) Tj ET"), flate_stream(b"BT (Thanks) Tj ET"))
    )
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"

    assert main([str(input_path), str(first)]) == 0
    assert main([str(input_path), str(second)]) == 0
    assert first.read_bytes() == second.read_bytes()


def test_cli_uses_default_paths(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "docs").mkdir()
    (tmp_path / DEFAULT_INPUT_PATH).write_bytes(
        build_pdf(flate_stream(b"BT (Default deck) Tj ET"))
    )

    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == f"Wrote: {DEFAULT_OUTPUT_PATH}\n"
    report = (tmp_path / DEFAULT_OUTPUT_PATH).read_text(encoding="utf-8")
    assert f"source={DEFAULT_INPUT_PATH}\n" in report
    assert "- Default deck\n" in report


def test_cli_unreadable_input_writes_nothing(tmp_path, capsys) -> None:
    output_path = tmp_path / "out.txt"

    exit_code = main([str(tmp_path / "missing.pdf"), str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "slides2text: Unable to read input file" in captured.err
    assert captured.out == ""
    assert not output_path.exists()


def test_cli_report_without_text(tmp_path) -> None:
    input_path = tmp_path / "blank.pdf"
    input_path.write_bytes(build_pdf(flate_stream(b"BT (Hi) Tj ET")))
    output_path = tmp_path / "blank.txt"

    assert main([str(input_path), str(output_path)]) == 0
    assert output_path.read_text(encoding="utf-8").endswith("streams_with_text=0\n\n")


def test_cli_warns_on_unsupported_argument(tmp_path, capsys) -> None:
    exit_code = main(["--json", str(tmp_path / "deck.pdf")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "warning: unsupported arguments" in captured.err


def test_cli_rejects_extra_positional_argument(tmp_path, capsys) -> None:
    exit_code = main(["a.pdf", "b.txt", "c.txt"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "warning: unsupported arguments: c.txt" in captured.err
