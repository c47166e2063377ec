"""
Configuration data models for declarative pipelines.

A pipeline definition lists stages by registered type name, each with its own
configuration dictionary, and can be stored as YAML or JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class StageConfig:
    """Configuration for a single pipeline stage."""

    name: str
    type: str
    config: Dict[str, Any] = field(default_factory=dict)
    enabled: bool = True
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the stage configuration."""
        if not self.name:
            raise ValueError("Stage name cannot be empty")
        if not self.type:
            raise ValueError("Stage type cannot be empty")
        if not isinstance(self.config, dict):
            raise ValueError(f"Stage '{self.name}' config must be a mapping")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "config": self.config,
            "enabled": self.enabled,
            "description": self.description,
        }


@dataclass
class PipelineConfig:
    """Declarative pipeline definition."""

    pipeline_name: str
    stages: List[StageConfig] = field(default_factory=list)
    description: Optional[str] = None
    version: str = "1.0"
    enabled: bool = True

    def __post_init__(self) -> None:
        """Validate the pipeline configuration."""
        if not self.pipeline_name:
            raise ValueError("Pipeline name cannot be empty")

        stage_names = [stage.name for stage in self.stages]
        if len(stage_names) != len(set(stage_names)):
            raise ValueError("Stage names must be unique")

    def get_stage_by_name(self, name: str) -> Optional[StageConfig]:
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def get_enabled_stages(self) -> List[StageConfig]:
        return [stage for stage in self.stages if stage.enabled]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pipeline_name": self.pipeline_name,
            "description": self.description,
            "version": self.version,
            "enabled": self.enabled,
            "stages": [stage.to_dict() for stage in self.stages],
        }
