"""Console script entry point with production wiring.

Lives at package level, outside ``adapters``, so the composition root can be
imported without the adapters layer depending on it.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``selkit`` console script with production services."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
