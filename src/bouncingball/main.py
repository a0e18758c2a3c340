"""
Application Initialization
==========================
This module constructs the Model / View / Controller pieces and starts the Qt
Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the shared data model (World).
2. Instantiates the Main Window (View), which owns the simulation worker.
3. Passes the Model into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
from typing import Optional

from bouncingball.application import create_app
from bouncingball.config import AppConfig
from bouncingball.logging_config import setup_logging
from bouncingball.model.state import World
from bouncingball.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main(config: Optional[AppConfig] = None, log_level: int = logging.INFO,
         log_file: Optional[str] = None) -> int:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=log_level, log_file=log_file)

    config = config or AppConfig()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    world = World.create(config.width, config.height, seed=config.seed)

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(world, config)
    window.show()
    window.start()

    # 5. Start Event Loop
    logger.info(f"Window {config.width}x{config.height} open, {config.update_rate} steps per second.")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
