from xuan.cli import main
from xuan.loader import UnihanFile, load


def _write_all(directory, contents=None):
    contents = contents or {}
    for kind in UnihanFile:
        (directory / kind.filename).write_text(
            contents.get(kind, ""), encoding="utf-8"
        )


def test_main_prints_count_and_records(tmp_path, capsys):
    _write_all(
        tmp_path,
        {
            UnihanFile.READINGS: (
                "U+6211\tkMandarin\twǒ\n"
                "U+9EC3\tkMandarin\thuáng\n"
                "U+5988\tkMandarin\tmā\n"
            )
        },
    )
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    first = out.splitlines()[0]
    assert first == "Load unihan database success. Total character : 3"
    db = load(tmp_path)
    expected = "\n".join(
        [
            first,
            db.get_by_value("我").dump(),
            db.get_by_code_point(40643).dump(),
            db.get_by_unicode("U+5988").dump(),
        ]
    )
    assert out == expected + "\n"


def test_main_prints_null_for_missing(tmp_path, capsys):
    _write_all(tmp_path, {UnihanFile.READINGS: "U+6211\tkMandarin\twǒ\n"})
    assert main([str(tmp_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(": 1")
    assert lines[-2:] == ["null", "null"]


def test_main_fails_on_missing_directory(tmp_path, capsys):
    assert main([str(tmp_path / "absent")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unihan_DictionaryIndices.txt" in captured.err