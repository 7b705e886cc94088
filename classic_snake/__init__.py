# Classic Snake Source Package
"""
Classic Snake - single-player Snake on a fixed-tick pygame loop.

Modules:
- core: Abstract interfaces for games and renderers
- games: Game implementations (Snake)
- visualization: Window shell that hosts a game panel
- utils: Configuration and logging setup
"""

__version__ = "1.0.0"
