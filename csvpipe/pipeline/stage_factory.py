"""
Stage factory for creating stages and pipelines from configuration.

Stage types are registered under a string name together with a builder that
receives the stage name and its configuration dictionary.
"""

from __future__ import annotations

from logging import Logger
from typing import Any, Callable, Dict, List

from csvpipe.config.models import PipelineConfig, StageConfig
from csvpipe.exceptions import StageError
from csvpipe.logger import get_logger

from .builders import build_associate, build_filter, build_map, build_select, field_equals, not_empty, stringify_values
from .pipeline import Pipeline
from .stages import Stage

StageBuilder = Callable[[str, Dict[str, Any]], Stage]


class StageRegistry:
    """Mapping of stage type names to their builders."""

    def __init__(self) -> None:
        self._stage_types: Dict[str, StageBuilder] = {}

    def register(self, stage_type: str, builder: StageBuilder) -> None:
        """
        Register a stage type.

        Args:
            stage_type: String identifier for the stage type
            builder: Callable taking ``(name, config)`` and returning a Stage

        Raises:
            StageError: If the type is already registered or the builder is not callable
        """
        if stage_type in self._stage_types:
            raise StageError(stage_type, "stage type is already registered")
        if not callable(builder):
            raise StageError(stage_type, "builder must be callable")

        self._stage_types[stage_type] = builder

    def unregister(self, stage_type: str) -> bool:
        if stage_type in self._stage_types:
            del self._stage_types[stage_type]
            return True
        return False

    def get_stage_builder(self, stage_type: str) -> StageBuilder:
        if stage_type not in self._stage_types:
            raise StageError(stage_type, "unknown stage type")
        return self._stage_types[stage_type]

    def get_registered_types(self) -> List[str]:
        return list(self._stage_types.keys())

    def is_registered(self, stage_type: str) -> bool:
        return stage_type in self._stage_types


class StageFactory:
    """
    Factory for creating stages and pipelines from configuration.
    """

    def __init__(self, registry: StageRegistry | None = None, logger: Logger | None = None) -> None:
        """
        Initialize the stage factory.

        Args:
            registry: Stage registry to use (the global registry if not provided)
            logger: Optional logger instance (creates default if not provided)
        """
        self.registry = registry or get_global_registry()
        self.logger = logger or get_logger()

    def create_stage(self, config: StageConfig) -> Stage:
        """
        Create a stage from configuration.

        Raises:
            StageError: If the type is unknown or the builder rejects the configuration
        """
        self.logger.info(f"Creating stage '{config.name}' of type '{config.type}'")
        builder = self.registry.get_stage_builder(config.type)
        try:
            stage = builder(config.name, config.config)
        except (KeyError, TypeError, ValueError) as e:
            self.logger.error(f"Failed to create stage '{config.name}' of type '{config.type}': {e}")
            raise StageError(config.name, f"invalid configuration for type '{config.type}': {e}", e) from e
        return stage

    def create_pipeline(self, config: PipelineConfig) -> Pipeline:
        """
        Create a pipeline from a pipeline definition, skipping disabled stages.

        A disabled pipeline builds no stages and copies records through unchanged.
        """
        if not config.enabled:
            self.logger.info(f"Pipeline '{config.pipeline_name}' is disabled, copying records through")
            return Pipeline(config.pipeline_name, [], self.logger)

        self.logger.info(f"Creating pipeline '{config.pipeline_name}' with {len(config.stages)} stages")

        stages = []
        for stage_config in config.stages:
            if stage_config.enabled:
                stages.append(self.create_stage(stage_config))
            else:
                self.logger.info(f"Skipping disabled stage '{stage_config.name}'")

        return Pipeline(config.pipeline_name, stages, self.logger)


def _select_builder(name: str, config: Dict[str, Any]) -> Stage:
    fields = config["fields"]
    if isinstance(fields, str) or not isinstance(fields, list):
        raise ValueError("'fields' must be a list of field names")
    return build_select(fields, name)


def _field_equals_builder(name: str, config: Dict[str, Any]) -> Stage:
    return build_filter(field_equals(config["field"], config["value"]), name)


_global_registry = StageRegistry()
_global_registry.register("associate", lambda name, config: build_associate(name))
_global_registry.register("select", _select_builder)
_global_registry.register("drop_empty", lambda name, config: build_filter(not_empty, name))
_global_registry.register("field_equals", _field_equals_builder)
_global_registry.register("stringify", lambda name, config: build_map(stringify_values, name))


def get_global_registry() -> StageRegistry:
    return _global_registry


def register_stage(stage_type: str, builder: StageBuilder) -> None:
    _global_registry.register(stage_type, builder)
