"""공통 fixture 및 테스트용 가짜 엔진"""

import logging

import cv2
import numpy as np
import pytest

from find_face_landmarks.models import Face, Frame, Point, Sequence
from find_face_landmarks.utils.config_loader import CONFIG_ENV_VAR, reset_config
from find_face_landmarks.utils.logging_config import ROOT_LOGGER_NAME


def make_face(face_id, points):
    return Face(face_id, tuple(Point(x, y) for x, y in points))


class FakeEngine:
    """
    LandmarkEngine과 같은 인터페이스의 가짜 엔진

    add_frame 호출마다 frames_faces 의 다음 항목(face 목록)을 프레임으로 반환한다.
    """

    instances = []

    def __init__(self, model_path, config, frames_faces, main_face=None):
        self.model_path = model_path
        self.config = config
        self._frames_faces = list(frames_faces)
        self._main_face = main_face
        self._sequence = Sequence()
        self.cleared = 0
        self.closed = False
        self.policy_calls = []
        FakeEngine.instances.append(self)

    def clear(self):
        self.cleared += 1
        self._sequence.clear()

    def add_frame(self, image):
        faces = self._frames_faces.pop(0) if self._frames_faces else []
        height, width = image.shape[:2]
        frame = Frame(index=len(self._sequence), width=width, height=height,
                      faces={face.face_id: face for face in faces})
        self._sequence.append(frame)
        return frame

    def get_sequence(self):
        return self._sequence

    def main_face_id(self, sequence=None):
        self.policy_calls.append(sequence)
        if self._main_face is not None:
            return self._main_face
        frame = list(sequence or self._sequence)[-1]
        return min(frame.faces)

    def close(self):
        self.closed = True


def fake_factory(frames_faces, main_face=None):
    def factory(model_path, config):
        return FakeEngine(model_path, config, [list(f) for f in frames_faces], main_face)
    return factory


SMALL_FACE = make_face(0, [(10, 12), (20, 22), (30, 8)])
LARGE_FACE = make_face(1, [(100, 120), (300, 340), (205, 7), (0, 0)])


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config()
    FakeEngine.instances.clear()
    yield
    reset_config()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture
def model_file(tmp_path):
    path = tmp_path / "face_landmarker.task"
    path.write_bytes(b"not a real model")
    return path


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "face.png"
    image = np.full((64, 48, 3), 200, dtype=np.uint8)
    cv2.circle(image, (24, 30), 15, (80, 120, 160), -1)
    assert cv2.imwrite(str(path), image)
    return path
