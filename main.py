"""Entry point for the multiplication tables quiz."""

import logging

from timestables.app import App
from timestables.config import AppConfig


def main() -> None:
    config = AppConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = App(config)
    app.run()


if __name__ == "__main__":
    main()
