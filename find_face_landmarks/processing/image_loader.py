"""입력 이미지 로드"""

import cv2
import numpy as np

from ..utils.exceptions import ImageDecodeError
from ..utils.validators import validate_image


def load_image(image_path: str) -> np.ndarray:
    """
    이미지 파일을 BGR 배열로 로드

    Args:
        image_path: 이미지 파일 경로

    Returns:
        (H, W, 3) BGR uint8 배열

    Raises:
        ImageDecodeError: 파일이 없거나 디코딩할 수 없는 경우
    """
    image = cv2.imread(str(image_path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise ImageDecodeError(f"unable to read image: {image_path}")

    # Grayscale / BGRA → BGR 변환
    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    elif image.shape[2] == 4:
        image = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)

    # 16bit PNG/TIFF
    if image.dtype == np.uint16:
        image = (image // 257).astype(np.uint8)

    validate_image(image)
    return image
