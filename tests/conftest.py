from pathlib import Path
from typing import IO, Any, Iterable, Iterator, List

from pytest import fixture
from pytest_mock import MockerFixture


class PullRecorder:
    """Iterable that remembers how many records were pulled from it."""

    def __init__(self, records: Iterable[Any]) -> None:
        self.records = list(records)
        self.pulled = 0

    def __iter__(self) -> Iterator[Any]:
        for record in self.records:
            self.pulled += 1
            yield record


@fixture
def raw_rows() -> List[List[Any]]:
    return [["a", "b", "c"], [1, 2, 3], [11, 22, 33]]


@fixture
def assoc_rows() -> List[dict[str, Any]]:
    return [{"a": 1, "b": 2, "c": 3}, {"a": 11, "b": 22, "c": 33}]


@fixture
def pull_recorder() -> type[PullRecorder]:
    return PullRecorder


@fixture
def people_csv(tmp_path: Path) -> Path:
    path = tmp_path / "people.csv"
    path.write_text(
        "id,name,country\n1,Alice,JP\n\n2,Bob,US\n3,\"Chiba, Taro\",JP\n",
        encoding="utf-8",
    )
    return path


@fixture
def tracked_open(mocker: MockerFixture) -> List[IO[Any]]:
    """Record every file opened by the file-backed source."""
    opened: List[IO[Any]] = []

    def tracking_open(*args: Any, **kwargs: Any) -> IO[Any]:
        f = open(*args, **kwargs)
        opened.append(f)
        return f

    mocker.patch("csvpipe.adapters.sources.open", tracking_open, create=True)
    return opened
