from lifesim.utils.consts import (
    DEFAULT_ROW_SIZE,
    DEFAULT_ROWS,
    HOST_BOARD_SIZE,
    HOST_ROW_SIZE,
    HOST_ROWS,
    HTML_ROW_SEPARATOR,
)


def test_default_board_dimensions():
    assert (DEFAULT_ROW_SIZE, DEFAULT_ROWS) == (4, 4)


def test_host_board_dimensions():
    assert HOST_ROW_SIZE == 36
    assert HOST_ROWS == 36
    assert HOST_BOARD_SIZE == 1296


def test_html_separator():
    assert HTML_ROW_SEPARATOR == "<br/>"
