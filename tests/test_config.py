import pytest

from fontconv.config import Settings, load_settings
from fontconv.errors import ConfigError


def test_defaults():
    assert load_settings({}) == Settings(line_width=120, output_suffix=".h", threshold=128)


def test_overrides():
    settings = load_settings(
        {"FONTCONV_LINE_WIDTH": "76", "FONTCONV_OUTPUT_SUFFIX": ".inc", "FONTCONV_THRESHOLD": "1"}
    )
    assert settings == Settings(line_width=76, output_suffix=".inc", threshold=1)


@pytest.mark.parametrize(
    "env",
    [
        {"FONTCONV_LINE_WIDTH": "wide"},
        {"FONTCONV_LINE_WIDTH": "0"},
        {"FONTCONV_THRESHOLD": "300"},
    ],
)
def test_invalid_values(env):
    with pytest.raises(ConfigError):
        load_settings(env)
