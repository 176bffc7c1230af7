"""랜드마크 좌표 CSV 출력"""

import csv
from pathlib import Path
from typing import Iterable, List

from ..config.constants import CSV_HEADER, CSV_LINE_TERMINATOR
from ..models import Point
from ..utils.exceptions import ExportError
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def format_landmark_rows(points: Iterable[Point]) -> List[List[int]]:
    """Point 목록을 [x, y] 정수 행으로 변환 (입력 순서 유지)"""
    return [[int(p.x), int(p.y)] for p in points]


def write_landmarks_csv(points: Iterable[Point], output_path: str) -> int:
    """
    랜드마크를 "x,y" CSV 파일로 저장

    파일은 쓰기 직전에 열고(생성/덮어쓰기), 모든 경로에서 닫힌다.

    Args:
        points: 랜드마크 (엔진 순서)
        output_path: 출력 CSV 경로

    Returns:
        기록한 데이터 행 수

    Raises:
        ExportError: 파일을 쓰기용으로 열 수 없는 경우
    """
    rows = format_landmark_rows(points)

    try:
        out_file = open(Path(output_path), 'w', newline='', encoding='ascii')
    except OSError as e:
        raise ExportError(f"unable to open: {output_path} for writing. ({e.strerror})") from e

    with out_file:
        writer = csv.writer(out_file, lineterminator=CSV_LINE_TERMINATOR)
        try:
            writer.writerow(CSV_HEADER)
            writer.writerows(rows)
        except OSError as e:
            raise ExportError(f"failed writing {output_path}: {e}") from e

    logger.info(f"Wrote {len(rows)} landmarks to {output_path}")
    return len(rows)
