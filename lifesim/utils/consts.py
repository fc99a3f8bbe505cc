"""Constants and default values for lifesim."""

DEFAULT_ROW_SIZE = 4
"""Columns of the default seeded board."""

DEFAULT_ROWS = 4
"""Rows of the default seeded board."""

HOST_ROW_SIZE = 36
"""Columns of the board a host creates with GameBackend.new()."""

HOST_ROWS = 36
"""Rows of the board a host creates with GameBackend.new()."""

HOST_BOARD_SIZE = HOST_ROW_SIZE * HOST_ROWS

DEFAULT_FREQUENCY = 10
"""Generations per second for host-driven ticking."""

HTML_ROW_SEPARATOR = "<br/>"
