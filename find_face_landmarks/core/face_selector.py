"""대표 얼굴 선택"""

from typing import Callable, Optional

from ..models import Face, Frame, Sequence
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

MainFacePolicy = Callable[[Sequence], int]


def select_main_face(frame: Frame, sequence: Sequence, policy: MainFacePolicy) -> Optional[Face]:
    """
    프레임에서 보고할 얼굴 하나를 선택

    선택 규칙은 엔진이 소유한다 (policy). 얼굴이 없는 프레임은 예외가 아니라
    None 으로 알린다.

    Args:
        frame: 방금 처리한 프레임
        sequence: 프레임이 속한 엔진 시퀀스
        policy: Sequence → face id (보통 LandmarkEngine.main_face_id)

    Returns:
        선택된 Face, 얼굴이 없으면 None

    Raises:
        FaceNotFoundError: policy가 프레임에 없는 id를 반환한 경우
    """
    if frame.empty:
        return None

    face = frame.get_face(policy(sequence))

    if len(frame.faces) > 1:
        logger.debug(f"{len(frame.faces)} faces detected; using face {face.face_id}")
    return face
