from pathlib import Path
from typing import Any, Optional, Sequence, Union


class BaseError(Exception):
    pass


class NotFoundError(BaseError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super(NotFoundError, self).__init__(f"File not found: path={path}")


class InvalidSourceError(BaseError):
    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.cause = cause
        super(InvalidSourceError, self).__init__(f"Invalid source: {message}")


class ShapeMismatchError(BaseError):
    """
    Raised when a record does not have the shape a stage expects.

    ``row_number`` is 1-based and counts the records pulled from the
    underlying sequence, header included.
    """

    def __init__(self, message: str, record: Any = None, row_number: Optional[int] = None):
        self.record = record
        self.row_number = row_number
        location = f" at row {row_number}" if row_number is not None else ""
        super(ShapeMismatchError, self).__init__(f"Shape mismatch{location}: {message}")

    @classmethod
    def length_mismatch(cls, header: Sequence[Any], record: Sequence[Any], row_number: int) -> "ShapeMismatchError":
        return cls(
            f"header has {len(header)} fields but record has {len(record)}",
            record=record,
            row_number=row_number,
        )


class WriteError(BaseError):
    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.cause = cause
        super(WriteError, self).__init__(f"Write failed: {message}")


class AlreadyExistsError(BaseError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super(AlreadyExistsError, self).__init__(f"Destination already exists: path={path}")


class StageError(BaseError):
    """Raised when a stage cannot be registered or built from configuration."""

    def __init__(self, stage_name: str, message: str, cause: Optional[Exception] = None):
        self.stage_name = stage_name
        self.cause = cause
        super(StageError, self).__init__(f"Stage '{stage_name}' error: {message}")


class ConfigurationError(BaseError):
    """Raised when a pipeline definition cannot be loaded or validated."""
