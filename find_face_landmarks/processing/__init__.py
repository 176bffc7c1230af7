"""Processing layer components"""

from .csv_exporter import format_landmark_rows, write_landmarks_csv
from .image_loader import load_image
from .pipeline import LandmarkPipeline, PipelineResult

__all__ = [
    'format_landmark_rows',
    'write_landmarks_csv',
    'load_image',
    'LandmarkPipeline',
    'PipelineResult',
]
