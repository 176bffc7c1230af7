"""
MediaPipe mesh to dlib 68-point landmark mapping.

The face mesh returned by FaceLandmarker (468 points, 478 with irises)
can be exported in the 68-point iBUG order used by dlib shape
predictors.
"""

from typing import Sequence, Tuple

from ..config.constants import LAYOUT_DLIB68, LAYOUT_NATIVE, LAYOUTS
from ..models import Point
from ..utils.exceptions import LandmarkLayoutError

# dlib 68점 인덱스 → MediaPipe mesh 인덱스
MEDIAPIPE_TO_DLIB_68: Tuple[int, ...] = (
    # 얼굴 윤곽 (Jaw line) 0-16, 오른쪽 귀 → 턱 → 왼쪽 귀
    162, 234, 93, 58, 172, 136, 149, 148, 152, 377, 378, 365, 397, 288, 323, 454, 389,
    # 눈썹 17-26
    70, 63, 105, 66, 107,
    336, 296, 334, 293, 300,
    # 코 다리 27-30
    168, 6, 197, 195,
    # 콧방울 31-35
    98, 97, 2, 326, 327,
    # 오른쪽 눈 36-41
    33, 160, 158, 133, 153, 144,
    # 왼쪽 눈 42-47
    362, 385, 387, 263, 373, 380,
    # 입 외곽 48-59
    61, 39, 37, 0, 267, 269, 291, 405, 314, 17, 84, 181,
    # 입 내부 60-67
    78, 82, 13, 312, 308, 317, 14, 87,
)

REQUIRED_MESH_POINTS = max(MEDIAPIPE_TO_DLIB_68) + 1


def convert_mediapipe_to_dlib68(points: Sequence[Point]) -> Tuple[Point, ...]:
    """
    MediaPipe mesh 랜드마크를 dlib 68점 순서로 변환

    Args:
        points: 픽셀 좌표 mesh 랜드마크 (468 또는 478개)

    Returns:
        68개 Point

    Raises:
        LandmarkLayoutError: mesh 포인트 수가 부족한 경우
    """
    if len(points) < REQUIRED_MESH_POINTS:
        raise LandmarkLayoutError(
            f"dlib68 layout needs a face mesh of at least {REQUIRED_MESH_POINTS} points, "
            f"got {len(points)}"
        )
    return tuple(points[idx] for idx in MEDIAPIPE_TO_DLIB_68)


def to_layout(points: Sequence[Point], layout: str) -> Tuple[Point, ...]:
    """랜드마크를 지정한 레이아웃 순서로 반환"""
    if layout == LAYOUT_NATIVE:
        return tuple(points)
    if layout == LAYOUT_DLIB68:
        return convert_mediapipe_to_dlib68(points)
    raise ValueError(f"Unknown layout '{layout}'. Available: {', '.join(LAYOUTS)}")
