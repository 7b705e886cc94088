"""Allow `python -m classic_snake`."""

from .app import main

main()
