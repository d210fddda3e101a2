import pytest

from skybox_slicer.config import FACE_NAMES
from skybox_slicer.controllers.app_controller import AppController, RunState
from skybox_slicer.models.errors import InvalidFaceSize, RegionOutOfBounds, SourceUnreadable
from skybox_slicer.models.layout_model import Layout


def test_interactive_run_completes(skybox, tmp_path, make_console):
    out = tmp_path / "faces"
    console, stream = make_console([str(skybox), "32", str(out), "2", "y"])

    outcome = AppController(console=console).run()

    assert outcome.state is RunState.COMPLETED
    assert outcome.ok
    assert outcome.job.layout is Layout.TOP_BOTTOM_RIGHT
    assert sorted(p.stem for p in out.iterdir()) == sorted(FACE_NAMES)
    text = stream.getvalue()
    assert "Размер грани: 32" in text
    assert "Готово за" in text


def test_empty_face_size_accepts_suggestion(skybox, tmp_path, make_console):
    console, stream = make_console([str(skybox), "", str(tmp_path), "1", ""])

    outcome = AppController(console=console).run()

    assert outcome.ok
    assert outcome.job.face_size == 32
    assert "[32]" in stream.getvalue()


def test_declined_confirmation_aborts_without_writing(skybox, tmp_path, make_console):
    out = tmp_path / "faces"
    console, stream = make_console([str(skybox), "32", str(out), "1", "n"])
    controller = AppController(console=console)

    outcome = controller.run()

    assert outcome.state is RunState.ABORTED
    assert controller.state is RunState.ABORTED
    assert outcome.batch is None
    assert not out.exists()
    assert "Отмена" in stream.getvalue()


def test_invalid_layout_choice_is_asked_again(skybox, tmp_path, make_console):
    console, stream = make_console([str(skybox), "32", str(tmp_path), "7", "x", "1", "y"])

    outcome = AppController(console=console).run()

    assert outcome.job.layout is Layout.TOP_BOTTOM_FRONT
    assert stream.getvalue().count("Введите номер из списка.") == 2


def test_arguments_skip_prompts(skybox, tmp_path, make_console):
    console, stream = make_console([])

    outcome = AppController(console=console).run(
        source=skybox, face_size=32, output_dir=tmp_path / "out", layout="front", assume_yes=True
    )

    assert outcome.ok
    assert len(outcome.batch.written) == 6


def test_face_size_not_a_number(skybox, tmp_path, make_console):
    console, _ = make_console([str(skybox), "big"])
    with pytest.raises(InvalidFaceSize):
        AppController(console=console).run()


def test_oversized_face_is_rejected_before_extraction(skybox, tmp_path, make_console):
    out = tmp_path / "out"
    console, _ = make_console([])
    with pytest.raises(RegionOutOfBounds):
        AppController(console=console).run(
            source=skybox, face_size=64, output_dir=out, layout="front", assume_yes=True
        )
    assert not out.exists()


def test_missing_source_is_rejected(tmp_path, make_console):
    console, _ = make_console([str(tmp_path / "nope.png")])
    with pytest.raises(SourceUnreadable):
        AppController(console=console).run()


def test_failed_face_marks_run_failed(skybox, tmp_path, make_console, monkeypatch):
    from PIL import Image

    original_save = Image.Image.save

    def failing_save(self, fp, *args, **kwargs):
        if str(fp).endswith("Back.png"):
            raise OSError("disk full")
        return original_save(self, fp, *args, **kwargs)

    monkeypatch.setattr(Image.Image, "save", failing_save)
    console, stream = make_console([])

    outcome = AppController(console=console).run(
        source=skybox, face_size=32, output_dir=tmp_path, layout="front", assume_yes=True
    )

    assert outcome.state is RunState.FAILED
    assert len(outcome.batch.written) == 5
    assert "• Back:" in stream.getvalue()
