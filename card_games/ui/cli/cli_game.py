"""Console entry point.

Loads the user registry, runs the game selector and saves the registry
again when the session ends.
"""

import logging
from typing import Optional

import click

from card_games.controller import GameSelector, UserManager
from card_games.core import GameConfig, LoggingConfig, setup_logging
from card_games.variants import VariantFactory
from .input_handler import CLIInputHandler
from .render import CLIRenderer, ConsoleOutput

DEFAULT_REGISTRY = "users.json"


class CardGamesCLI:
    """Console session.

    Wires the click input handler and console output into a GameSelector.
    """

    def __init__(self, registry_path: str = DEFAULT_REGISTRY, config: Optional[GameConfig] = None,
                 stall_seconds: float = 0.0):
        self.registry_path = registry_path
        self.config = config or GameConfig()
        self.logger = logging.getLogger(__name__)

        self.user_manager = UserManager.import_users(registry_path)
        self.input_handler = CLIInputHandler(stall_seconds=stall_seconds)
        self.output = ConsoleOutput()
        self.selector = GameSelector(
            self.input_handler,
            self.output,
            VariantFactory.available_variants(),
            self.user_manager,
            self.input_handler,
            self.output,
            config=self.config,
        )

    def run(self) -> None:
        """Run the menu loop, saving the registry however it ends."""
        click.echo(CLIRenderer.render_banner())
        try:
            results = self.selector.run()
            for result in results:
                self.output.send_output(result)
            self.logger.info(f"Session finished, {len(results)} game(s) played")
        except click.Abort:
            click.echo("\nGoodbye.")
        finally:
            saved_to = self.user_manager.export_users(self.registry_path)
            click.echo(CLIRenderer.render_standings(self.user_manager.snapshot().users))
            click.echo(f"Registry saved to {saved_to}")


@click.command()
@click.option('--seed', type=int, default=None, help='Shuffle seed (default 12345).')
@click.option('--registry', 'registry_path', type=click.Path(dir_okay=False), default=DEFAULT_REGISTRY,
              show_default=True, help='User registry JSON file.')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default='WARNING', show_default=True, help='Logging level.')
@click.option('--log-file', type=click.Path(dir_okay=False), default=None, help='Write logs to this file.')
@click.option('--stall', type=float, default=0.0, show_default=True, help='Seconds to pause between War rounds.')
def main(seed, registry_path, log_level, log_file, stall):
    """Play Crazy Eights, War or Go Fish at the console."""
    setup_logging(LoggingConfig(log_level=log_level, log_file=log_file))
    config = GameConfig() if seed is None else GameConfig(random_seed=seed)
    CardGamesCLI(registry_path=registry_path, config=config, stall_seconds=stall).run()


if __name__ == "__main__":
    main()
