"""단일 이미지 랜드마크 추출 → CSV 저장 파이프라인"""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..config.settings import EngineConfig, ExportConfig
from ..core.face_selector import select_main_face
from ..core.landmark_mapping import to_layout
from ..utils.exceptions import ErrorKind, FaceLandmarksException
from ..utils.logging_config import get_logger
from .csv_exporter import write_landmarks_csv
from .image_loader import load_image

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    """파이프라인 실행 결과"""
    success: bool
    error_kind: Optional[ErrorKind] = None
    message: str = ""
    face_id: Optional[int] = None
    num_landmarks: int = 0
    processing_time: float = 0.0  # ms

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "PipelineResult":
        return cls(success=False, error_kind=kind, message=message)


def default_engine_factory(model_path: str, config: EngineConfig):
    # mediapipe는 실제 엔진을 만들 때만 import
    from ..core.landmark_engine import LandmarkEngine
    return LandmarkEngine.create(model_path, config)


EngineFactory = Callable[[str, EngineConfig], object]


class LandmarkPipeline:
    """
    이미지 한 장을 처리해 대표 얼굴의 랜드마크를 CSV로 저장

    각 단계는 실패 시 PipelineResult.failure(...)로 즉시 반환한다.
    """

    def __init__(self,
                 engine_config: Optional[EngineConfig] = None,
                 export_config: Optional[ExportConfig] = None,
                 engine_factory: EngineFactory = default_engine_factory):
        self.engine_config = engine_config or EngineConfig()
        self.export_config = export_config or ExportConfig()
        self.engine_factory = engine_factory

    def run(self, input_path: str, output_path: str, model_path: str) -> PipelineResult:
        """
        파이프라인 실행

        Args:
            input_path: 입력 이미지 경로
            output_path: 출력 CSV 경로
            model_path: 랜드마크 모델 파일 경로

        Returns:
            PipelineResult
        """
        start_time = time.time()

        try:
            engine = self.engine_factory(model_path, self.engine_config)
        except FaceLandmarksException as e:
            return PipelineResult.failure(e.kind, str(e))
        except Exception as e:
            return PipelineResult.failure(ErrorKind.UNCLASSIFIED, str(e))

        try:
            result = self._run_with_engine(engine, input_path, output_path)
        finally:
            engine.close()

        result.processing_time = (time.time() - start_time) * 1000
        return result

    def _run_with_engine(self, engine, input_path: str, output_path: str) -> PipelineResult:
        try:
            engine.clear()
            image = load_image(input_path)
            frame = engine.add_frame(image)
            face = select_main_face(frame, engine.get_sequence(), engine.main_face_id)
        except FaceLandmarksException as e:
            return PipelineResult.failure(e.kind, str(e))
        except Exception as e:
            logger.debug("Landmark detection failed", exc_info=True)
            return PipelineResult.failure(ErrorKind.UNCLASSIFIED, str(e))

        if face is None:
            return PipelineResult.failure(
                ErrorKind.NO_FACE, f"unable to detect face in: {input_path}"
            )
        logger.info(f"Main face {face.face_id}: {len(face)} landmarks")

        try:
            points = to_layout(face.landmarks, self.export_config.layout)
            num_rows = write_landmarks_csv(points, output_path)
        except FaceLandmarksException as e:
            return PipelineResult.failure(e.kind, str(e))
        except Exception as e:
            logger.debug("Export failed", exc_info=True)
            return PipelineResult.failure(ErrorKind.UNCLASSIFIED, str(e))

        return PipelineResult(success=True, face_id=face.face_id, num_landmarks=num_rows)
