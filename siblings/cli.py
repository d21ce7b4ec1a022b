"""`siblings` command-line interface.

Load sibling endpoints into Redis and resolve them.

```bash
$ siblings load siblings.json --env prod
$ siblings resolve august --region IN --env prod
```
"""
from __future__ import annotations

import logging
import sys
from typing import Any
from typing import Callable
from typing import ClassVar
from typing import TypeVar

import click
import redis

import siblings
from siblings.connectors.redis import RedisConnector
from siblings.environment import Environment
from siblings.exceptions import EndpointDecodeError
from siblings.exceptions import InvalidEnvironmentError
from siblings.exceptions import UnsupportedRegionError
from siblings.resolver import Resolver
from siblings.seed import default_seed_file
from siblings.seed import load_endpoints_file
from siblings.store import EndpointStore

logger = logging.getLogger(__name__)

FuncT = TypeVar('FuncT', bound=Callable[..., Any])


class _CLIFormatter(logging.Formatter):
    """Custom format for CLI printing."""

    red = '\x1b[0;31m'
    green = '\x1b[0;32m'
    yellow = '\x1b[0;33m'
    cyan = '\x1b[0;36m'
    bold_red = '\x1b[1;31m'
    reset = '\x1b[0m'

    FORMATS: ClassVar[dict[int, str]] = {
        logging.DEBUG: f'{cyan}DEBUG:{reset} %(message)s',
        logging.INFO: f'{green}INFO:{reset} %(message)s',
        logging.WARNING: f'{yellow}WARNING:{reset} %(message)s',
        logging.ERROR: f'{red}ERROR:{reset} %(message)s',
        logging.CRITICAL: f'{bold_red}CRITICAL:{reset} %(message)s',
    }

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover
        formatter = logging.Formatter(self.FORMATS[record.levelno])
        return formatter.format(record)


def _store_options(function: FuncT) -> FuncT:
    function = click.option(
        '--env',
        'env',
        default=None,
        type=click.Choice(['prod', 'dev'], case_sensitive=False),
        help='Key namespace environment. Defaults to $X_ENV.',
    )(function)
    function = click.option(
        '--port',
        default=6379,
        type=int,
        metavar='PORT',
        help='Redis server port.',
    )(function)
    function = click.option(
        '--hostname',
        default='localhost',
        metavar='ADDR',
        help='Redis server hostname.',
    )(function)
    return function


def _environment(env: str | None) -> Environment:
    try:
        if env is None:
            return Environment.from_env()
        return Environment.parse(env)
    except InvalidEnvironmentError as e:
        logger.error(e)
        sys.exit(1)


@click.group()
@click.option(
    '--log-level',
    default='INFO',
    type=click.Choice(
        ['ERROR', 'WARNING', 'INFO', 'DEBUG'],
        case_sensitive=False,
    ),
    help='Minimum logging level.',
)
def cli(log_level: str) -> None:
    """Manage and resolve sibling service endpoints."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_CLIFormatter())
    logging.basicConfig(level=log_level.upper(), handlers=[handler])


@cli.command(name='help')
def show_help() -> None:
    """Show available commands and options."""
    with click.Context(cli) as ctx:
        click.echo(cli.get_help(ctx))


@cli.command()
def version() -> None:
    """Show the siblings version."""
    click.echo(f'siblings v{siblings.__version__}')


@cli.command()
@click.argument('filepath', metavar='FILE', required=False)
@_store_options
def load(
    filepath: str | None,
    hostname: str,
    port: int,
    env: str | None,
) -> None:
    """Load sibling endpoints from a JSON file into Redis.

    FILE defaults to siblings.json in prod and siblings-dev.json in dev.
    """
    environment = _environment(env)
    if filepath is None:
        filepath = default_seed_file(environment)
    logger.info(
        f'Loading sibling endpoints from {filepath} into '
        f'{environment.value}',
    )

    try:
        with RedisConnector(hostname, port) as connector:
            keys = load_endpoints_file(
                EndpointStore(connector, environment),
                filepath,
            )
    except OSError as e:
        logger.error(f'Unable to read {filepath}: {e}')
        sys.exit(1)
    except (EndpointDecodeError, ValueError) as e:
        logger.error(e)
        sys.exit(1)
    except redis.exceptions.RedisError as e:
        logger.error(f'Unable to write to Redis at {hostname}:{port}.')
        logger.debug(e)
        sys.exit(1)

    logger.info(f'Loaded {len(keys)} sibling endpoint(s)')


@cli.command()
@click.argument('name', metavar='NAME', required=True)
@click.option('--region', default=None, metavar='REGION', help='Region.')
@_store_options
def resolve(
    name: str,
    region: str | None,
    hostname: str,
    port: int,
    env: str | None,
) -> None:
    """Resolve the address of a sibling."""
    environment = _environment(env)
    with Resolver(
        RedisConnector(hostname, port),
        environment=environment,
        local=False,
    ) as resolver:
        try:
            address = resolver.resolve(name, region)
        except UnsupportedRegionError as e:
            logger.error(e)
            sys.exit(1)

    if address is None:
        logger.error(f'Unable to resolve an endpoint for {name}.')
        sys.exit(1)
    click.echo(address)
