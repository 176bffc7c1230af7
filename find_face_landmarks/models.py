"""
Data models for landmark detection results.

Point / Face / Frame / Sequence mirror the engine's per-frame output:
a frame owns zero or more faces keyed by id, each face an ordered
tuple of pixel landmarks.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from .utils.exceptions import FaceNotFoundError


@dataclass(frozen=True)
class Point:
    """픽셀 좌표 랜드마크"""
    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Face:
    """
    검출된 얼굴 하나

    Attributes:
        face_id: 프레임(시퀀스) 내 얼굴 식별자
        landmarks: 엔진이 정의한 순서의 랜드마크 (순서 자체가 부위 의미를 가짐)
    """
    face_id: int
    landmarks: Tuple[Point, ...]

    def bounding_box(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom)"""
        if not self.landmarks:
            return (0, 0, 0, 0)
        xs = [p.x for p in self.landmarks]
        ys = [p.y for p in self.landmarks]
        return (min(xs), min(ys), max(xs), max(ys))

    def area(self) -> int:
        left, top, right, bottom = self.bounding_box()
        return (right - left) * (bottom - top)

    def __len__(self) -> int:
        return len(self.landmarks)


@dataclass
class Frame:
    """이미지 한 장의 처리 결과"""
    index: int
    width: int
    height: int
    faces: Dict[int, Face] = field(default_factory=dict)

    def get_face(self, face_id: int) -> Face:
        try:
            return self.faces[face_id]
        except KeyError:
            raise FaceNotFoundError(f"face {face_id} not found in frame {self.index}")

    @property
    def empty(self) -> bool:
        return not self.faces


class Sequence:
    """엔진이 처리한 프레임 목록 (이 도구에서는 항상 길이 1)"""

    def __init__(self):
        self._frames: List[Frame] = []

    @property
    def frames(self) -> List[Frame]:
        return list(self._frames)

    def append(self, frame: Frame):
        self._frames.append(frame)

    def clear(self):
        self._frames.clear()

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __repr__(self):
        return f"Sequence(num_frames={len(self._frames)})"
