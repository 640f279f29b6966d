# build_ref_tool/cli/main.py
"""Main CLI entry point for build-ref-tool"""

import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..constants import APP_NAME, LOG_FORMAT
from ..models.config import ToolConfig
from ..services import ConfigService

# Import all commands
from .commands import (
    manage,
    show,
)

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class Context:
    """CLI context object with lazy configuration loading"""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize CLI context

        Args:
            config_path: Optional YAML configuration file
        """
        self.config_path = config_path
        self._config: Optional[ToolConfig] = None
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False

    @property
    def config(self) -> ToolConfig:
        """Get tool configuration (lazy loading)

        Raises:
            ConfigError: If the configuration file is missing or invalid
        """
        if self._config is None:
            self._config = ConfigService(self.config_path).load_config()
            if self.debug:
                console.print(f"[dim]Configuration: {self._config.to_dict()}[/dim]")
        return self._config


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='YAML configuration file (default: $BUILD_REF_TOOL_CONFIG)')
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Build Ref Tool - Manage build references of deployment units

    Records which commit and tag each deployment unit was last built from,
    and in which image formats, and checks those builds before they are
    promoted or deployed.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    ctx.obj.quiet = quiet


# Register commands
cli.add_command(manage.manage)
cli.add_command(show.show)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Auto-help for incomplete commands
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        # Handle help for incomplete commands
        if len(sys.argv) == 2 and sys.argv[1] not in [
            '-h', '--help', '-v', '--verbose', '-d', '--debug', '-q', '--quiet'
        ]:
            # If only command name provided, show its help
            sys.argv.append('--help')

        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
