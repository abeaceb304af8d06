"""``python -m wren`` — same as the ``wren`` command."""

from wren.cli import main

main()
