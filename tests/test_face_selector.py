from unittest import mock

import pytest

from find_face_landmarks.core.face_selector import select_main_face
from find_face_landmarks.models import Frame, Sequence
from find_face_landmarks.utils.exceptions import FaceNotFoundError

from conftest import LARGE_FACE, SMALL_FACE


def _frame(*faces):
    return Frame(index=0, width=400, height=400, faces={f.face_id: f for f in faces})


def test_empty_frame_returns_none_without_consulting_policy():
    policy = mock.Mock()

    assert select_main_face(_frame(), Sequence(), policy) is None
    policy.assert_not_called()


def test_policy_decides_the_face():
    sequence = Sequence()
    frame = _frame(SMALL_FACE, LARGE_FACE)
    sequence.append(frame)
    policy = mock.Mock(return_value=SMALL_FACE.face_id)

    face = select_main_face(frame, sequence, policy)

    assert face is SMALL_FACE
    policy.assert_called_once_with(sequence)


def test_policy_returning_unknown_id():
    with pytest.raises(FaceNotFoundError):
        select_main_face(_frame(SMALL_FACE), Sequence(), lambda sequence: 42)
