import pytest

from skybox_slicer.main import EXIT_FAILED, EXIT_INVALID, EXIT_OK, build_parser, main


def test_non_interactive_success(skybox, tmp_path, make_console):
    console, stream = make_console([])
    code = main([str(skybox), "-s", "32", "-o", str(tmp_path / "out"), "-l", "right", "-y"], console=console)
    assert code == EXIT_OK
    assert len(list((tmp_path / "out").iterdir())) == 6


def test_decline_returns_failure(skybox, tmp_path, make_console):
    console, _ = make_console(["n"])
    code = main([str(skybox), "-s", "32", "-o", str(tmp_path / "out"), "-l", "front"], console=console)
    assert code == EXIT_FAILED
    assert not (tmp_path / "out").exists()


def test_invalid_face_size_exit_code(skybox, tmp_path, make_console):
    console, stream = make_console([])
    code = main([str(skybox), "-s", "0", "-o", str(tmp_path), "-l", "front", "-y"], console=console)
    assert code == EXIT_INVALID
    assert "Ошибка" in stream.getvalue()


def test_unreadable_source_exit_code(tmp_path, make_console):
    console, _ = make_console([])
    code = main([str(tmp_path / "missing.png"), "-y"], console=console)
    assert code == EXIT_INVALID


def test_end_of_input_aborts(skybox, make_console):
    console, _ = make_console([str(skybox)])
    assert main([], console=console) == EXIT_FAILED


def test_parser_rejects_unknown_layout():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["sky.png", "-l", "diagonal"])


def test_log_file(skybox, tmp_path, make_console):
    log_file = tmp_path / "run.log"
    console, _ = make_console([])
    code = main(
        [str(skybox), "-s", "32", "-o", str(tmp_path / "out"), "-l", "front", "-y", "-v", "--log-file", str(log_file)],
        console=console,
    )
    assert code == EXIT_OK
    assert "Extracted 6/6 faces" in log_file.read_text(encoding="utf-8")


def test_huge_face_size_exit_code(skybox, tmp_path, make_console):
    console, stream = make_console([])
    code = main(
        [str(skybox), "-s", str(2 ** 62), "-o", str(tmp_path / "out"), "-l", "front", "-y"], console=console
    )
    assert code == EXIT_INVALID
    assert not (tmp_path / "out").exists()


def test_too_many_pixels_exit_code(skybox, tmp_path, make_console, monkeypatch):
    from PIL import Image

    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
    console, stream = make_console([])
    code = main([str(skybox), "-s", "32", "-o", str(tmp_path / "out"), "-l", "front", "-y"], console=console)
    assert code == EXIT_INVALID
    assert "Ошибка" in stream.getvalue()
