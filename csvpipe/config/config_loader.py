"""
Configuration loader for declarative pipelines.

Loads pipeline definitions from YAML and JSON files and converts them into
validated PipelineConfig objects.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from csvpipe.exceptions import ConfigurationError, NotFoundError

from .models import PipelineConfig, StageConfig


class ConfigLoader:
    """
    Configuration loader for pipeline definitions.

    The file format is chosen by suffix (``.yaml``, ``.yml`` or ``.json``);
    other suffixes are parsed as YAML, which also accepts JSON documents.
    """

    @staticmethod
    def load_from_file(file_path: Union[str, Path]) -> PipelineConfig:
        """
        Load a pipeline definition from a file.

        Args:
            file_path: Path to the configuration file (YAML or JSON)

        Returns:
            PipelineConfig: Parsed and validated configuration object

        Raises:
            NotFoundError: If the configuration file does not exist
            ConfigurationError: If parsing or validation fails
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise NotFoundError(file_path)

        try:
            content = file_path.read_text(encoding="utf-8")
            if file_path.suffix.lower() == ".json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (yaml.YAMLError, json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {file_path}: {e}") from e

        return ConfigLoader.load_from_dict(data)

    @staticmethod
    def load_from_dict(data: Dict[str, Any]) -> PipelineConfig:
        """
        Load a pipeline definition from a dictionary.

        Raises:
            ConfigurationError: If the data is malformed or fails validation
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(data).__name__}")
        if "pipeline_name" not in data:
            raise ConfigurationError("Missing required field: pipeline_name")

        try:
            stages = []
            for stage_data in data.get("stages") or []:
                if not isinstance(stage_data, dict):
                    raise ConfigurationError(f"Invalid stage configuration: {stage_data}")

                stages.append(
                    StageConfig(
                        name=stage_data.get("name", ""),
                        type=stage_data.get("type", ""),
                        config=stage_data.get("config") or {},
                        enabled=stage_data.get("enabled", True),
                        description=stage_data.get("description"),
                    )
                )

            return PipelineConfig(
                pipeline_name=data["pipeline_name"],
                stages=stages,
                description=data.get("description"),
                version=str(data.get("version", "1.0")),
                enabled=data.get("enabled", True),
            )
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation error: {e}") from e

    @staticmethod
    def save_to_file(config: PipelineConfig, file_path: Union[str, Path], format: str = "yaml") -> None:
        """
        Save a pipeline definition to a file.

        Args:
            config: Configuration object to save
            file_path: Path where to save the configuration
            format: Output format ('yaml' or 'json')

        Raises:
            ValueError: If format is not supported
            ConfigurationError: If saving fails
        """
        if format.lower() not in ["yaml", "yml", "json"]:
            raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")

        file_path = Path(file_path)
        data = config.to_dict()

        try:
            with open(file_path, "w", encoding="utf-8") as file:
                if format.lower() in ["yaml", "yml"]:
                    yaml.dump(data, file, default_flow_style=False, indent=2, sort_keys=False)
                else:
                    json.dump(data, file, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration to {file_path}: {e}") from e


def load_config(file_path: Union[str, Path]) -> PipelineConfig:
    return ConfigLoader.load_from_file(file_path)
