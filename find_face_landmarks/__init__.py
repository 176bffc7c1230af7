"""
Find Face Landmarks
MediaPipe 기반 단일 이미지 얼굴 랜드마크 CSV 추출 도구
"""

__version__ = "0.1.0"
