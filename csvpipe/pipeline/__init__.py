"""
Lazy record pipelines

Stage primitives, stage classes and builders, and the composer that turns an
ordered list of stages into a single stage.
"""

from .builders import build_associate, build_filter, build_map, build_select, field_equals, not_empty, stringify_values
from .pipeline import Pipeline, combine_stages
from .primitives import do_filter, do_map, do_select, pass_through, to_assoc
from .stage_factory import StageFactory, StageRegistry, get_global_registry, register_stage
from .stages import AssociateStage, CallableStage, FilterStage, IdentityStage, MapStage, SelectStage, Stage

__all__ = [
    # Primitives
    "do_filter",
    "do_map",
    "do_select",
    "pass_through",
    "to_assoc",
    # Stages
    "Stage",
    "AssociateStage",
    "CallableStage",
    "FilterStage",
    "IdentityStage",
    "MapStage",
    "SelectStage",
    # Builders
    "build_associate",
    "build_filter",
    "build_map",
    "build_select",
    "field_equals",
    "not_empty",
    "stringify_values",
    # Composition
    "Pipeline",
    "combine_stages",
    # Configuration-driven construction
    "StageFactory",
    "StageRegistry",
    "get_global_registry",
    "register_stage",
]
