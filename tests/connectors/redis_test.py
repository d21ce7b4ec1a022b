from __future__ import annotations

from unittest import mock

from siblings.connectors.protocols import Connector
from siblings.connectors.redis import RedisConnector


# Use redis_connector because it mocks StrictRedis client to act
# like there is a single shared Redis server.
def test_get_set(redis_connector: RedisConnector) -> None:
    assert redis_connector.get('ep-august') is None
    redis_connector.set('ep-august', b'{"default": "https://a"}')
    assert redis_connector.get('ep-august') == b'{"default": "https://a"}'
    assert redis_connector.exists('ep-august')

    redis_connector.evict('ep-august')
    assert not redis_connector.exists('ep-august')
    redis_connector.evict('ep-august')


def test_is_connector(redis_connector: RedisConnector) -> None:
    assert isinstance(redis_connector, Connector)


def test_close_persists_keys_by_default(redis_connector) -> None:
    connector = RedisConnector('localhost', 0)
    connector.set('ep-august', b'value')

    connector.close()
    # This only works with the mocked connector because otherwise
    # the connection pool used by Redis would have been closed
    assert connector.exists('ep-august')


def test_close_override_default(redis_connector) -> None:
    connector = RedisConnector('localhost', 0, clear=False)
    connector.set('ep-august', b'value')

    connector.close(clear=True)
    assert not connector.exists('ep-august')


def test_connectors_share_server(redis_connector) -> None:
    connector1 = RedisConnector('localhost', 0)
    connector2 = RedisConnector('localhost', 0)
    connector1.set('ep-august', b'value')

    assert connector2.get('ep-august') == b'value'


def test_config_round_trip(redis_connector) -> None:
    connector = RedisConnector('localhost', 1234, socket_timeout=2.0)
    config = connector.config()
    assert config == {
        'hostname': 'localhost',
        'port': 1234,
        'clear': False,
        'socket_timeout': 2.0,
    }

    new = RedisConnector.from_config(config)
    assert new.kwargs == {'socket_timeout': 2.0}
    assert repr(new) == 'RedisConnector(hostname=localhost, port=1234)'


def test_client_kwargs_forwarded() -> None:
    with mock.patch('redis.StrictRedis') as mock_redis:
        RedisConnector('redis.internal', 6380, socket_timeout=0.5)
    mock_redis.assert_called_once_with(
        host='redis.internal',
        port=6380,
        socket_timeout=0.5,
    )
