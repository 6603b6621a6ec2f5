import pytest


@pytest.fixture
def write_config(tmp_path):
    """Write text to a config file under tmp_path and return its path."""

    def _write(text: str, name: str = "player.cfg"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
