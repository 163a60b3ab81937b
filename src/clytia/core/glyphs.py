"""Glyph and color constants shared by the renderers."""

from __future__ import annotations

SPINNER_FRAMES = ("⠹", "⢸", "⣰", "⣤", "⣆", "⡇", "⠏", "⠛")

CHECK = "✔️"
CROSS = "❌"

HIGHLIGHT_PREFIX = "=> "
PLAIN_PREFIX = "   "
CHECKED = "[X]"
UNCHECKED = "[ ]"

# Columns taken by "[", ">", "| ", "NNN", "%]" around a progress bar.
BAR_GUTTER = 9
# The cross glyph renders two columns wide.
FAILED_BAR_GUTTER = 10

ACTIVE = "blue"
SUCCESS = "green"
FAILURE = "red"
HINT = "magenta"
REJECTED = "white"
