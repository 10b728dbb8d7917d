# tests/unit/test_config.py

import pytest

from identicon_generator.config import DEFAULT_CONFIG, IdenticonConfig, parse_color


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#ffffff", (255, 255, 255, 255)),
        ("000000", (0, 0, 0, 255)),
        ("#11223344", (17, 34, 51, 68)),
        ("  #AbCdEf ", (171, 205, 239, 255)),
    ],
)
def test_parse_color(text: str, expected: tuple[int, int, int, int]) -> None:
    assert parse_color(text) == expected


@pytest.mark.parametrize("text", ["", "#fff", "#1234567", "#gggggg", "red"])
def test_parse_color_rejects_invalid(text: str) -> None:
    with pytest.raises(ValueError):
        parse_color(text)


def test_default_config() -> None:
    assert DEFAULT_CONFIG.background == (0, 0, 0, 0)
    assert DEFAULT_CONFIG.image_format == "png"
    assert DEFAULT_CONFIG.extension == "png"
    assert IdenticonConfig(image_format="WEBP").extension == "webp"
