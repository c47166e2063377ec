from pathlib import Path

from csvpipe.exceptions import (
    AlreadyExistsError,
    BaseError,
    ConfigurationError,
    InvalidSourceError,
    NotFoundError,
    ShapeMismatchError,
    StageError,
    WriteError,
)


def test_all_errors_share_base() -> None:
    for error_class in [
        AlreadyExistsError,
        ConfigurationError,
        InvalidSourceError,
        NotFoundError,
        ShapeMismatchError,
        StageError,
        WriteError,
    ]:
        assert issubclass(error_class, BaseError)


def test_not_found_error() -> None:
    error = NotFoundError("data/in.csv")
    assert error.path == Path("data/in.csv")
    assert str(error) == "File not found: path=data/in.csv"


def test_shape_mismatch_length_message() -> None:
    error = ShapeMismatchError.length_mismatch(["a", "b", "c"], [1, 2], 3)
    assert error.row_number == 3
    assert error.record == [1, 2]
    assert str(error) == "Shape mismatch at row 3: header has 3 fields but record has 2"


def test_stage_error_keeps_cause() -> None:
    cause = KeyError("fields")
    error = StageError("cols", "bad config", cause)
    assert error.cause is cause
    assert str(error) == "Stage 'cols' error: bad config"
