from find_face_landmarks.config.settings import ExportConfig
from find_face_landmarks.processing.pipeline import LandmarkPipeline
from find_face_landmarks.utils.exceptions import EngineConstructionError, ErrorKind

from conftest import LARGE_FACE, SMALL_FACE, FakeEngine, fake_factory, make_face


def test_success_writes_main_face(tmp_path, image_file, model_file):
    output = tmp_path / "out.csv"
    pipeline = LandmarkPipeline(engine_factory=fake_factory([[SMALL_FACE, LARGE_FACE]], main_face=1))

    result = pipeline.run(str(image_file), str(output), str(model_file))

    assert result.success
    assert result.error_kind is None
    assert result.face_id == 1
    assert result.num_landmarks == len(LARGE_FACE)
    assert output.read_text() == "x,y\n100,120\n300,340\n205,7\n0,0\n"

    engine = FakeEngine.instances[0]
    assert engine.model_path == str(model_file)
    assert engine.cleared == 1
    assert engine.closed


def test_no_face(tmp_path, image_file, model_file):
    output = tmp_path / "out.csv"
    pipeline = LandmarkPipeline(engine_factory=fake_factory([[]]))

    result = pipeline.run(str(image_file), str(output), str(model_file))

    assert not result.success
    assert result.error_kind is ErrorKind.NO_FACE
    assert str(image_file) in result.message
    assert not output.exists()
    assert FakeEngine.instances[0].policy_calls == []
    assert FakeEngine.instances[0].closed


def test_engine_construction_failure(tmp_path, image_file, model_file):
    def factory(model_path, config):
        raise EngineConstructionError(f"Failed to load landmarks model {model_path}: bad zip")

    result = LandmarkPipeline(engine_factory=factory).run(
        str(image_file), str(tmp_path / "out.csv"), str(model_file))

    assert result.error_kind is ErrorKind.ENGINE_CONSTRUCTION
    assert "bad zip" in result.message


def test_unclassified_engine_failure(tmp_path, image_file, model_file):
    def factory(model_path, config):
        raise RuntimeError("boom")

    result = LandmarkPipeline(engine_factory=factory).run(
        str(image_file), str(tmp_path / "out.csv"), str(model_file))

    assert result.error_kind is ErrorKind.UNCLASSIFIED
    assert result.message == "boom"


def test_image_decode_failure(tmp_path, model_file):
    output = tmp_path / "out.csv"
    pipeline = LandmarkPipeline(engine_factory=fake_factory([[SMALL_FACE]]))

    result = pipeline.run(str(tmp_path / "missing.png"), str(output), str(model_file))

    assert result.error_kind is ErrorKind.IMAGE_DECODE
    assert not output.exists()
    assert FakeEngine.instances[0].closed


def test_output_not_writable(tmp_path, image_file, model_file):
    output = tmp_path / "no_such_dir" / "out.csv"
    pipeline = LandmarkPipeline(engine_factory=fake_factory([[SMALL_FACE]]))

    result = pipeline.run(str(image_file), str(output), str(model_file))

    assert result.error_kind is ErrorKind.IO
    assert "unable to open" in result.message


def test_dlib68_layout_needs_mesh(tmp_path, image_file, model_file):
    pipeline = LandmarkPipeline(export_config=ExportConfig(layout="dlib68"),
                                engine_factory=fake_factory([[SMALL_FACE]]))

    result = pipeline.run(str(image_file), str(tmp_path / "out.csv"), str(model_file))

    assert result.error_kind is ErrorKind.UNCLASSIFIED
    assert "dlib68" in result.message


def test_dlib68_layout(tmp_path, image_file, model_file):
    mesh = make_face(0, [(i, 2 * i) for i in range(478)])
    output = tmp_path / "out.csv"
    pipeline = LandmarkPipeline(export_config=ExportConfig(layout="dlib68"),
                                engine_factory=fake_factory([[mesh]]))

    result = pipeline.run(str(image_file), str(output), str(model_file))

    assert result.success
    lines = output.read_text().splitlines()
    assert len(lines) == 69
    assert lines[9] == "152,304"
