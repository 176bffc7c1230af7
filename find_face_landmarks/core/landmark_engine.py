"""MediaPipe FaceLandmarker 기반 랜드마크 엔진"""

import time
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional

import cv2
import numpy as np
import mediapipe as mp
from mediapipe.tasks import python as mp_tasks
from mediapipe.tasks.python import vision

from ..config.settings import EngineConfig
from ..models import Face, Frame, Point, Sequence
from ..utils.exceptions import EngineConstructionError, InvalidImageError, NoFaceDetectedError
from ..utils.logging_config import get_logger
from ..utils.validators import validate_image

logger = get_logger(__name__)


def main_face_id(sequence: Sequence) -> int:
    """
    시퀀스의 대표 얼굴 id 선택

    가장 많은 프레임에 등장한 얼굴을 고르고, 동률이면 평균 바운딩 박스
    면적이 큰 얼굴, 그래도 같으면 id가 작은 얼굴을 고른다.

    Raises:
        NoFaceDetectedError: 시퀀스에 얼굴이 하나도 없는 경우
    """
    areas: Dict[int, List[int]] = defaultdict(list)
    for frame in sequence:
        for face_id, face in frame.faces.items():
            areas[face_id].append(face.area())

    if not areas:
        raise NoFaceDetectedError("no faces in sequence")

    return min(
        areas,
        key=lambda fid: (-len(areas[fid]), -float(np.mean(areas[fid])), fid)
    )


class LandmarkEngine:
    """
    MediaPipe FaceLandmarker (VIDEO 모드) 래퍼

    한 번의 실행 동안만 사용하는 단독 소유 핸들이다. with 문으로 사용하면
    종료 시 landmarker를 해제한다.
    """

    def __init__(self, model_path: str, config: Optional[EngineConfig] = None):
        """
        초기화

        Args:
            model_path: FaceLandmarker 모델 번들(.task) 경로
            config: 엔진 설정

        Raises:
            EngineConstructionError: 모델을 로드할 수 없는 경우
        """
        self.model_path = Path(model_path)
        self.config = config or EngineConfig()
        self._sequence = Sequence()
        self._next_timestamp_ms = 0
        self._landmarker = None
        self._landmarker = self._build_landmarker()

    @classmethod
    def create(cls, model_path: str, config: Optional[EngineConfig] = None) -> "LandmarkEngine":
        return cls(model_path, config)

    def _build_landmarker(self):
        if not self.model_path.is_file():
            raise EngineConstructionError(f"landmarks model not found: {self.model_path}")

        options = vision.FaceLandmarkerOptions(
            base_options=mp_tasks.BaseOptions(model_asset_path=str(self.model_path)),
            running_mode=vision.RunningMode.VIDEO,
            num_faces=self.config.num_faces,
            min_face_detection_confidence=self.config.min_face_detection_confidence,
            min_face_presence_confidence=self.config.min_face_presence_confidence,
            min_tracking_confidence=self.config.min_tracking_confidence,
        )
        try:
            landmarker = vision.FaceLandmarker.create_from_options(options)
        except Exception as e:
            raise EngineConstructionError(
                f"Failed to load landmarks model {self.model_path}: {e}"
            ) from e

        logger.info(f"FaceLandmarker initialized (model={self.model_path.name}, "
                    f"num_faces={self.config.num_faces})")
        return landmarker

    def clear(self):
        """처리된 프레임을 모두 버리고 빈 추적 상태로 되돌림"""
        if self._next_timestamp_ms > 0:
            # VIDEO 모드 타임스탬프는 단조 증가해야 하므로 landmarker를 새로 만든다
            self._release_landmarker()
            self._landmarker = self._build_landmarker()
        self._sequence.clear()
        self._next_timestamp_ms = 0

    def add_frame(self, image: np.ndarray) -> Frame:
        """
        이미지를 시퀀스의 다음 프레임으로 처리

        Args:
            image: (H, W, 3) BGR 이미지 (load_image 결과)

        Raises:
            InvalidImageError: 3채널 BGR 이미지가 아닌 경우

        Returns:
            Frame: 검출된 얼굴과 픽셀 좌표 랜드마크
        """
        validate_image(image)
        if image.ndim != 3 or image.shape[2] != 3:
            raise InvalidImageError(f"Expected a 3-channel BGR image, got shape {image.shape}")
        if self._landmarker is None:
            raise RuntimeError("LandmarkEngine is closed")

        # BGR → RGB 변환 (MediaPipe 요구사항)
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=image_rgb)
        timestamp_ms = self._next_timestamp_ms
        self._next_timestamp_ms += self.config.frame_interval_ms

        start_time = time.time()
        result = self._landmarker.detect_for_video(mp_image, timestamp_ms)
        processing_time = (time.time() - start_time) * 1000  # ms

        height, width = image.shape[:2]
        faces = {}
        for face_id, face_landmarks in enumerate(result.face_landmarks or []):
            faces[face_id] = Face(face_id, tuple(
                Point(_to_pixel(lm.x, width), _to_pixel(lm.y, height))
                for lm in face_landmarks
            ))

        frame = Frame(index=len(self._sequence), width=width, height=height, faces=faces)
        self._sequence.append(frame)
        logger.debug(f"Frame {frame.index}: {len(faces)} face(s) in {processing_time:.1f}ms")
        return frame

    def get_sequence(self) -> Sequence:
        return self._sequence

    def main_face_id(self, sequence: Optional[Sequence] = None) -> int:
        """대표 얼굴 id (기본값: 이 엔진의 시퀀스)"""
        return main_face_id(self._sequence if sequence is None else sequence)

    def _release_landmarker(self):
        if self._landmarker is not None:
            self._landmarker.close()
            self._landmarker = None

    def close(self):
        """리소스 해제"""
        self._release_landmarker()
        self._sequence.clear()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def _to_pixel(normalized: float, size: int) -> int:
    """정규화 좌표 → 이미지 범위로 제한된 픽셀 좌표"""
    return min(max(int(normalized * size), 0), size - 1)
