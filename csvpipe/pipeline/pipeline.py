"""
Pipeline for composing stages into a single stage.

A Pipeline holds an ordered list of stages and applies them left to right,
so applying ``[s1, s2, s3]`` to ``records`` is ``s3(s2(s1(records)))``. A
pipeline is itself a Stage and can be nested inside another pipeline; nesting
and flattening produce the same records.
"""

from __future__ import annotations

from functools import reduce
from logging import Logger
from typing import List, Sequence, Union

from csvpipe.logger import get_logger
from csvpipe.models import RecordSequence, RecordSource, StageFunction

from .stages import CallableStage, IdentityStage, Stage

StageLike = Union[Stage, StageFunction]


def as_stage(stage: StageLike) -> Stage:
    if isinstance(stage, Stage):
        return stage
    if callable(stage):
        return CallableStage(stage)
    raise TypeError(f"Expected a Stage or a callable, got {type(stage).__name__}")


class Pipeline(Stage):
    """
    Ordered composition of stages exposed as one stage.

    Applying a pipeline only builds a chain of generators. Records are pulled
    through every stage one at a time when the caller iterates the result, and
    progress is logged from inside that iteration.
    """

    def __init__(self, name: str, stages: Sequence[StageLike] | None = None, logger: Logger | None = None) -> None:
        """
        Initialize the pipeline.

        Args:
            name: Name for this pipeline
            stages: Stages (or plain stage functions) to apply in order
            logger: Optional logger instance (creates default if not provided)
        """
        super().__init__(name)
        self.stages: List[Stage] = [as_stage(s) for s in stages or []]
        self.logger = logger or get_logger()

    def add_stage(self, stage: StageLike) -> None:
        self.stages.append(as_stage(stage))

    def insert_stage(self, index: int, stage: StageLike) -> None:
        self.stages.insert(index, as_stage(stage))

    def remove_stage(self, stage_name: str) -> bool:
        """
        Remove the first stage with the given name.

        Returns:
            True if a stage was removed, False if none matched
        """
        for i, stage in enumerate(self.stages):
            if stage.get_name() == stage_name:
                del self.stages[i]
                return True
        return False

    def get_stage_names(self) -> List[str]:
        return [stage.get_name() for stage in self.stages]

    def apply(self, records: RecordSource) -> RecordSequence:
        """
        Chain every stage over ``records``.

        The stage list is captured now, so editing the pipeline afterwards does
        not affect sequences that were already produced.

        Args:
            records: Any iterable of records

        Returns:
            A fresh generator over the output of the last stage
        """
        stages = list(self.stages) or [IdentityStage()]
        return self._run(records, stages)

    def _run(self, records: RecordSource, stages: List[Stage]) -> RecordSequence:
        self.logger.debug(
            f"Pipeline '{self.name}': Pulling records through {len(stages)} stages "
            f"({', '.join(stage.get_name() for stage in stages)})"
        )
        data = reduce(lambda seq, stage: stage.apply(seq), stages, records)
        emitted = 0
        try:
            for row in data:
                emitted += 1
                yield row
        except Exception as e:
            self.logger.error(f"Pipeline '{self.name}': Failed after {emitted} records: {e}")
            raise

        self.logger.info(f"Pipeline '{self.name}': Completed - {emitted} records emitted")

    def clear(self) -> None:
        self.stages.clear()

    def __len__(self) -> int:
        return len(self.stages)

    def __str__(self) -> str:
        return f"Pipeline(name='{self.name}', stages={len(self.stages)})"

    def __repr__(self) -> str:
        return f"Pipeline(name='{self.name}', stages={self.get_stage_names()})"


def combine_stages(*stages: StageLike, name: str = "pipeline", logger: Logger | None = None) -> Pipeline:
    """
    Combine stages into a single stage applied left to right.

    With no stages the result copies records through unchanged, still
    returning a fresh generator rather than the input object.

    Args:
        stages: Stages or plain stage functions, in application order
        name: Name for the resulting pipeline
        logger: Optional logger instance

    Returns:
        A Pipeline usable wherever a Stage is expected
    """
    return Pipeline(name, stages, logger)
