import pytest

from coast_map.config import DEFAULT_SETTINGS, Configuration, load
from coast_map.errors import ConfigError


def test_load_basic(write_config):
    cfg = load(write_config("image_path=a.jpg\nx=12\ny=6\n"))
    assert cfg == Configuration(image_path="a.jpg", x=12, y=6)


def test_comments_blank_lines_and_whitespace_are_handled(write_config):
    text = (
        "# shoreline reference\n"
        "\n"
        "  image_path =  assets/shore line.jpg \t\n"
        "x= 3\n"
        "#y=100\n"
        "y =4\n"
    )
    cfg = load(write_config(text))
    assert cfg.image_path == "assets/shore line.jpg"
    assert (cfg.x, cfg.y) == (3, 4)


def test_duplicate_keys_last_one_wins(write_config):
    cfg = load(write_config("x=1\nimage_path=first.jpg\ny=2\nx=7\nimage_path=second.jpg\n"))
    assert cfg.image_path == "second.jpg"
    assert (cfg.x, cfg.y) == (7, 2)


def test_value_split_on_first_equals_only(write_config):
    cfg = load(write_config("image_path=maps/a=b.jpg\nx=0\ny=0\n"))
    assert cfg.image_path == "maps/a=b.jpg"


def test_crlf_line_endings(write_config):
    cfg = load(write_config("image_path=a.jpg\r\nx=5\r\ny=9\r\n"))
    assert (cfg.image_path, cfg.x, cfg.y) == ("a.jpg", 5, 9)


def test_negative_coordinates_parse(write_config):
    cfg = load(write_config("image_path=a.jpg\nx=-1\ny=+2\n"))
    assert (cfg.x, cfg.y) == (-1, 2)


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.cfg"
    with pytest.raises(ConfigError, match="nope.cfg"):
        load(missing)


def test_line_without_separator_reports_line_number(write_config):
    with pytest.raises(ConfigError, match="line 3"):
        load(write_config("image_path=a.jpg\nx=1\nfoo\ny=2\n"))


def test_whitespace_only_line_is_not_skipped(write_config):
    with pytest.raises(ConfigError, match="line 2"):
        load(write_config("image_path=a.jpg\n   \nx=1\ny=2\n"))


def test_indented_comment_is_not_a_comment(write_config):
    with pytest.raises(ConfigError, match="line 1"):
        load(write_config("  # note\nimage_path=a.jpg\nx=1\ny=2\n"))


@pytest.mark.parametrize(
    "text, message",
    [
        ("x=1\ny=2\n", "image_path"),
        ("image_path=a.jpg\ny=2\n", "x or y"),
        ("image_path=a.jpg\nx=1\n", "x or y"),
        ("", "image_path"),
    ],
)
def test_missing_required_keys(write_config, text, message):
    with pytest.raises(ConfigError, match=message):
        load(write_config(text))


@pytest.mark.parametrize("value", ["abc", "12abc", "", "1.5"])
def test_non_integer_coordinate_chains_value_error(write_config, value):
    with pytest.raises(ConfigError) as excinfo:
        load(write_config(f"image_path=a.jpg\nx={value}\ny=2\n"))
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_optional_settings_defaults(write_config):
    cfg = load(write_config("image_path=a.jpg\nx=1\ny=2\n"))
    assert cfg.log_level == DEFAULT_SETTINGS["logging"]["level"]
    assert cfg.log_file is None
    assert cfg.theme == "auto"


def test_optional_settings_are_coerced(write_config):
    text = "image_path=a.jpg\nx=1\ny=2\nlog_level=debug\ntheme=LIGHT\nlog_file=run.log\n"
    cfg = load(write_config(text))
    assert cfg.log_level == "DEBUG"
    assert cfg.theme == "light"
    assert cfg.log_file == "run.log"


def test_bad_optional_settings_fall_back(write_config):
    cfg = load(write_config("image_path=a.jpg\nx=1\ny=2\nlog_level=chatty\ntheme=neon\n"))
    assert cfg.log_level == "WARNING"
    assert cfg.theme == "auto"


def test_configuration_is_immutable(write_config):
    cfg = load(write_config("image_path=a.jpg\nx=1\ny=2\n"))
    with pytest.raises(AttributeError):
        cfg.x = 5
