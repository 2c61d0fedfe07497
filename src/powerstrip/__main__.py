"""Allow running PowerStrip with `python -m powerstrip`."""

from powerstrip.cli.main import main

main()
