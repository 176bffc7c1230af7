"""Landmark engine, face selection and layout conversion"""

from .face_selector import select_main_face
from .landmark_mapping import MEDIAPIPE_TO_DLIB_68, convert_mediapipe_to_dlib68, to_layout

# LandmarkEngine imports mediapipe; import it from .landmark_engine directly

__all__ = [
    'select_main_face',
    'MEDIAPIPE_TO_DLIB_68',
    'convert_mediapipe_to_dlib68',
    'to_layout',
]
