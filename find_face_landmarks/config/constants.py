"""CSV 형식 및 시스템 상수 정의"""

from typing import Tuple

# CSV 출력 형식
CSV_HEADER: Tuple[str, str] = ('x', 'y')
CSV_LINE_TERMINATOR = '\n'

# 랜드마크 레이아웃
LAYOUT_NATIVE = 'native'   # 엔진이 반환한 순서 그대로 (MediaPipe 468/478점)
LAYOUT_DLIB68 = 'dlib68'   # 68점 iBUG(dlib) 순서
LAYOUTS: Tuple[str, ...] = (LAYOUT_NATIVE, LAYOUT_DLIB68)

# 종료 코드
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
