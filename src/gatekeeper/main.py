"""Entry points for the two Gatekeeper services."""

from gatekeeper.app import App
from gatekeeper.config import Config
from gatekeeper.logging import setup_logging
from gatekeeper.web.runner import run_server
from gatekeeper.web.server import create_basic_app, create_session_app


def main_basic() -> None:
    config = Config()
    setup_logging(config.debug, "basic")
    run_server(create_basic_app(config), config, "basic")


def main_session() -> None:
    config = Config()
    setup_logging(config.debug, "session")
    app = App(config)
    run_server(create_session_app(app, config), config, "session")


if __name__ == "__main__":
    main_session()
