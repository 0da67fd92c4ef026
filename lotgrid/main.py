"""Entry point for lotgrid application."""

import logging
import os
import sys
from pathlib import Path

from castella import App
from castella.frame import Frame

from .config.loader import load_config
from .i18n import init_i18n
from .ui import LotgridApp


def configure_logging(level: str) -> None:
    """Configure root logging once; LOTGRID_LOG_LEVEL overrides the config."""
    level_name = os.getenv("LOTGRID_LOG_LEVEL", level).strip().upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main():
    """Run lotgrid application."""
    # Project directory from command line, or the current directory
    project_path = Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else Path.cwd()

    config = load_config(project_path)
    configure_logging(config.settings.log_level)
    init_i18n(config.settings.locale)

    app = App(
        Frame("lotgrid - Vehicle Listings", width=1200, height=760),
        LotgridApp(config),
    )
    app.run()


if __name__ == "__main__":
    main()
