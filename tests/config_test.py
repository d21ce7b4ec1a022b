from __future__ import annotations

import pathlib

import pydantic
import pytest

from siblings.config import ConnectorConfig
from siblings.config import ResolverConfig
from siblings.connectors.local import LocalConnector
from siblings.connectors.redis import RedisConnector


@pytest.mark.parametrize(
    ('kind', 'expected'),
    (
        ('local', LocalConnector),
        ('LOCAL', LocalConnector),
        ('LocalConnector', LocalConnector),
        ('siblings.connectors.local.LocalConnector', LocalConnector),
        ('redis', RedisConnector),
        ('RedisConnector', RedisConnector),
    ),
)
def test_get_connector_type(kind: str, expected: type) -> None:
    config = ConnectorConfig(kind=kind)
    assert config.get_connector_type() == expected


def test_local_connector_config() -> None:
    config = ConnectorConfig(kind='local')

    connector = config.get_connector()
    assert isinstance(connector, LocalConnector)
    connector.close()


def test_redis_connector_config(redis_connector: RedisConnector) -> None:
    config = ConnectorConfig(
        kind='redis',
        options={'hostname': 'localhost', 'port': 1234},
    )

    connector = config.get_connector()
    assert isinstance(connector, RedisConnector)
    assert connector.port == 1234
    connector.close()


def test_connector_config_bad_kind() -> None:
    config = ConnectorConfig(kind='fake')

    with pytest.raises(ValueError, match='fake'):
        config.get_connector()


def test_connector_config_bad_options() -> None:
    config = ConnectorConfig(kind='local', options={'wrong_arg': True})

    with pytest.raises(TypeError, match='wrong_arg'):
        config.get_connector()


def test_resolver_config_defaults() -> None:
    config = ResolverConfig(connector=ConnectorConfig(kind='local'))
    assert config.me is None
    assert config.environment is None
    assert config.local is None
    assert config.local_file == 'svc.env'


def test_resolver_config_rejects_unknown_fields() -> None:
    with pytest.raises(pydantic.ValidationError):
        ResolverConfig(
            connector=ConnectorConfig(kind='local'),
            region='IN',  # type: ignore[call-arg]
        )


def test_resolver_config_rejects_bad_environment() -> None:
    with pytest.raises(pydantic.ValidationError):
        ResolverConfig(
            connector=ConnectorConfig(kind='local'),
            environment='staging',  # type: ignore[arg-type]
        )


def test_resolver_config_toml(tmp_path: pathlib.Path) -> None:
    config = ResolverConfig(
        connector=ConnectorConfig(
            kind='redis',
            options={'hostname': 'localhost', 'port': 6379},
        ),
        me='credit',
        environment='prod',
    )

    filepath = tmp_path / 'config' / 'siblings.toml'
    config.write_toml(filepath)
    assert filepath.exists()

    assert ResolverConfig.from_toml(filepath) == config


def test_resolver_config_from_toml_text(tmp_path: pathlib.Path) -> None:
    filepath = tmp_path / 'siblings.toml'
    filepath.write_text(
        'me = "credit"\n'
        'local = true\n'
        'local_file = "dev.env"\n'
        '\n'
        '[connector]\n'
        'kind = "local"\n',
    )

    config = ResolverConfig.from_toml(filepath)
    assert config.me == 'credit'
    assert config.local is True
    assert config.local_file == 'dev.env'
    assert config.connector.kind == 'local'
    assert config.connector.options == {}
