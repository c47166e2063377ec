import os
from pathlib import Path

import pytest
import yaml
from pytest_mock import MockerFixture

from csvpipe.main import gen_parser, gen_pipeline, main


@pytest.fixture(autouse=True)
def clean_env(mocker: MockerFixture) -> None:
    mocker.patch.dict(os.environ, {}, clear=True)
    mocker.patch("csvpipe.main.load_dotenv")


@pytest.fixture
def pipeline_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "japan.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "pipeline_name": "japan",
                "stages": [
                    {"name": "header", "type": "associate"},
                    {"name": "only_jp", "type": "field_equals", "config": {"field": "country", "value": "JP"}},
                    {"name": "cols", "type": "select", "config": {"fields": ["id", "name"]}},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


def test_parser_defaults() -> None:
    args = gen_parser().parse_args(["in.csv"])
    assert args.input_file == "in.csv"
    assert args.config is None
    assert args.overwrite is None
    assert args.count is False


def test_gen_pipeline_without_config_is_identity() -> None:
    pipeline = gen_pipeline(None)
    assert len(pipeline) == 0
    assert list(pipeline([["a"]])) == [["a"]]


def test_main_writes_output(people_csv: Path, pipeline_yaml: Path, tmp_path: Path) -> None:
    output = tmp_path / "japan.csv"
    assert main([str(people_csv), "--config", str(pipeline_yaml), "--output", str(output)]) == 0
    assert output.read_text(encoding="utf-8") == '1,Alice\n3,"Chiba, Taro"\n'


def test_main_counts(people_csv: Path, pipeline_yaml: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(people_csv), "--config", str(pipeline_yaml), "--count"]) == 0
    assert capsys.readouterr().out.strip() == "2"


def test_main_prints_records(people_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(people_csv)]) == 0
    assert "['2', 'Bob', 'US']" in capsys.readouterr().out


def test_main_refuses_existing_output(people_csv: Path, tmp_path: Path) -> None:
    output = tmp_path / "out.csv"
    output.write_text("keep\n", encoding="utf-8")
    assert main([str(people_csv), "--output", str(output)]) == 1
    assert output.read_text(encoding="utf-8") == "keep\n"
    assert main([str(people_csv), "--output", str(output), "--overwrite"]) == 0
    assert output.read_text(encoding="utf-8").startswith("id,name,country\n")


def test_main_overwrite_from_settings(mocker: MockerFixture, people_csv: Path, tmp_path: Path) -> None:
    mocker.patch.dict(os.environ, {"CSVPIPE_WRITER_SETTINGS__OVERWRITE": "true"})
    output = tmp_path / "out.csv"
    output.write_text("old\n", encoding="utf-8")
    assert main([str(people_csv), "--output", str(output)]) == 0


def test_main_missing_input(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.csv"), "--count"]) == 1


def test_main_uses_delimiter_from_settings(mocker: MockerFixture, tmp_path: Path, capsys) -> None:
    mocker.patch.dict(os.environ, {"CSVPIPE_CSV_SETTINGS__DELIMITER": ";"})
    source = tmp_path / "semi.csv"
    source.write_text("a;b\n1;2\n", encoding="utf-8")
    assert main([str(source)]) == 0
    assert "['1', '2']" in capsys.readouterr().out


def test_main_rejects_output_equal_to_input(people_csv: Path) -> None:
    original = people_csv.read_text(encoding="utf-8")
    same_file = people_csv.parent / "." / people_csv.name
    assert main([str(people_csv), "--output", str(same_file), "--overwrite"]) == 1
    assert people_csv.read_text(encoding="utf-8") == original


def test_main_missing_input_leaves_no_output(tmp_path: Path, people_csv: Path) -> None:
    output = tmp_path / "out.csv"
    assert main([str(tmp_path / "missing.csv"), "--output", str(output)]) == 1
    assert not output.exists()
    assert main([str(people_csv), "--output", str(output)]) == 0
    assert output.exists()
