import re

import csvpipe


def test_csvpipe_has_version() -> None:
    assert hasattr(csvpipe, "__version__")
    assert isinstance(csvpipe.__version__, str)
    assert re.match(r"^\d+\.\d+\.\d+$", csvpipe.__version__)


def test_public_api_is_exported() -> None:
    for name in csvpipe.__all__:
        assert hasattr(csvpipe, name)
