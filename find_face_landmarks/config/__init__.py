"""Configuration layer components"""

from .settings import EngineConfig, ExportConfig

__all__ = [
    'EngineConfig',
    'ExportConfig',
]
