"""
Pipeline Configuration

Declarative pipeline definitions and their YAML/JSON loader.
"""

from .config_loader import ConfigLoader, load_config
from .models import PipelineConfig, StageConfig

__all__ = [
    "ConfigLoader",
    "PipelineConfig",
    "StageConfig",
    "load_config",
]
