import logging

import click

from pos.infrastructure.bootstrap import build_app
from pos.infrastructure.cli.console import WARNING, ClickConsole
from pos.infrastructure.cli.menu import build_menu
from pos.infrastructure.config import Settings
from pos.infrastructure.logging_config import configure_logging

logger = logging.getLogger(__name__)


@click.command()
def cli() -> None:
    """POS Console: products, customers and receipts at the terminal.

    Data files live in $POS_DATA_DIR (default: current directory).
    """
    settings = Settings.from_env()
    configure_logging(settings.log_dir, settings.log_level)
    console = ClickConsole()

    errors: list[str] = []

    def report(message: str) -> None:
        errors.append(message)
        console.echo(message, WARNING)

    app = build_app(settings, on_error=report)
    logger.info(
        "POS console started", extra={"extra": {"data_dir": str(settings.data_dir)}}
    )
    if errors:
        # Load problems would otherwise vanish behind the first menu redraw
        console.pause()

    try:
        build_menu(app, console).run()
    except (KeyboardInterrupt, EOFError, click.Abort):
        console.echo()
        console.echo("Interrupted by user. Exiting.")
    logger.info("POS console stopped")
