import pytest

from phronima.cli import main, read_program, record_for_test, write_program
from phronima.compiler import compile_file
from phronima.lang import load_program


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "prog.phron"
    path.write_text("72 chout 105 chout\n")
    return path


def test_read_program_matches_load_program(source_file):
    assert read_program(source_file) == load_program(str(source_file), source_file.read_text())


def test_write_program_round_trip(tmp_path):
    target = tmp_path / "out.bf"
    write_program(target, ">+[-]<")
    assert target.read_text() == ">+[-]<"


def test_record_for_test(tmp_path, capsys):
    (tmp_path / "a.phron").write_text("1 2 +")
    (tmp_path / "b.phron").write_text("3 dup")
    (tmp_path / "notes.txt").write_text("ignored")
    written = record_for_test(tmp_path)
    assert [p.name for p in written] == ["a.bf", "b.bf"]
    assert (tmp_path / "a.bf").read_text() == compile_file(tmp_path / "a.phron")
    assert (tmp_path / "b.bf").read_text() == compile_file(tmp_path / "b.phron")
    assert not (tmp_path / "notes.bf").exists()


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Must state whether to compile 'com' or simulate 'sim'" in capsys.readouterr().err


def test_main_unknown_mode(capsys):
    assert main(["run"]) == 1
    assert "Must state whether" in capsys.readouterr().err


@pytest.mark.parametrize("mode", ["sim", "com"])
def test_main_missing_filepath(mode, capsys):
    assert main([mode]) == 1
    assert "Must provide 2 arguments" in capsys.readouterr().err


def test_main_sim(source_file, capsys):
    assert main(["sim", str(source_file)]) == 0
    assert capsys.readouterr().out == chr(72) + chr(105)


def test_main_sim_missing_file(tmp_path, capsys):
    assert main(["sim", str(tmp_path / "missing.phron")]) == 1
    assert "Application error" in capsys.readouterr().err


def test_main_sim_syntax_error(tmp_path, capsys):
    path = tmp_path / "bad.phron"
    path.write_text("1 bogus")
    assert main(["sim", str(path)]) == 1
    assert "could not parse token: 'bogus'" in capsys.readouterr().err


def test_main_sim_runtime_error(tmp_path, capsys):
    path = tmp_path / "under.phron"
    path.write_text("pop")
    assert main(["sim", str(path)]) == 1
    assert "Application error" in capsys.readouterr().err


def test_main_com_writes_compiled_code(source_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["com", str(source_file)]) == 0
    assert (tmp_path / "compiled_code.txt").read_text() == compile_file(source_file)


def test_main_com_unsupported(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "num.phron"
    path.write_text("1 numout")
    assert main(["com", str(path)]) == 1
    assert "Application error" in capsys.readouterr().err
    assert not (tmp_path / "compiled_code.txt").exists()


def test_main_rec(tmp_path, monkeypatch, capsys):
    tests_dir = tmp_path / "tests"
    tests_dir.mkdir()
    (tests_dir / "push.phron").write_text("3")
    monkeypatch.chdir(tmp_path)
    assert main(["rec"]) == 0
    assert (tests_dir / "push.bf").read_text() == compile_file(tests_dir / "push.phron")
    assert "complete." in capsys.readouterr().out