"""
Stage classes for lazy record pipelines.

A stage binds its configuration (a predicate, a mapper, a field list) and
exposes a single ``apply`` operation turning one record sequence into another.
Applying a stage performs no work: it returns a new generator whose records
are computed as the caller pulls them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List

from csvpipe.models import Mapper, Predicate, RecordSequence, RecordSource, StageFunction

from .primitives import do_filter, do_map, do_select, pass_through, to_assoc


class Stage(ABC):
    """
    Abstract base class for pipeline stages.

    Stages own only their configuration and never cache the records flowing
    through them, so one instance can be applied to any number of sequences.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize the stage with a name.

        Args:
            name: Identifier used in logs and when editing a pipeline
        """
        self.name = name

    @abstractmethod
    def apply(self, records: RecordSource) -> RecordSequence:
        """
        Transform a record sequence lazily.

        Args:
            records: Any iterable of records

        Returns:
            A fresh generator over the transformed records
        """
        pass

    def get_name(self) -> str:
        return self.name

    def __call__(self, records: RecordSource) -> RecordSequence:
        return self.apply(records)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


class IdentityStage(Stage):
    """Copies every record through unchanged."""

    def __init__(self, name: str = "identity") -> None:
        super().__init__(name)

    def apply(self, records: RecordSource) -> RecordSequence:
        return pass_through(records)


class CallableStage(Stage):
    """
    Adapts a plain function ``Iterable -> Iterator`` to the Stage interface.

    The result is wrapped in a copy-through generator, so the wrapped function
    is not called until the first record is pulled.
    """

    def __init__(self, function: StageFunction, name: str | None = None) -> None:
        super().__init__(name or getattr(function, "__name__", "callable"))
        self.function = function

    def apply(self, records: RecordSource) -> RecordSequence:
        yield from self.function(records)


class FilterStage(Stage):
    def __init__(self, predicate: Predicate, name: str = "filter") -> None:
        super().__init__(name)
        self.predicate = predicate

    def apply(self, records: RecordSource) -> RecordSequence:
        return do_filter(records, self.predicate)


class MapStage(Stage):
    def __init__(self, mapper: Mapper, name: str = "map") -> None:
        super().__init__(name)
        self.mapper = mapper

    def apply(self, records: RecordSource) -> RecordSequence:
        return do_map(records, self.mapper)


class SelectStage(Stage):
    def __init__(self, fields: Iterable[str], name: str = "select") -> None:
        super().__init__(name)
        self.fields: List[str] = list(fields)

    def apply(self, records: RecordSource) -> RecordSequence:
        return do_select(records, self.fields)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', fields={self.fields})"


class AssociateStage(Stage):
    """Binds the header row to every following row."""

    def __init__(self, name: str = "associate") -> None:
        super().__init__(name)

    def apply(self, records: RecordSource) -> RecordSequence:
        return to_assoc(records)
