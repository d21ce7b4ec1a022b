from __future__ import annotations

import json
import pathlib

import pytest

from siblings.endpoint import EndpointRecord
from siblings.environment import Environment
from siblings.exceptions import EndpointDecodeError
from siblings.resolver import Resolver
from siblings.seed import default_seed_file
from siblings.seed import load_endpoints
from siblings.seed import load_endpoints_file
from siblings.store import EndpointStore
from testing.connectors import CountingConnector

SIBLINGS = {
    'august': {'default': 'https://a', 'in': 'https://a-in'},
    'bank-statement': {'default': 'https://bs', 'us': 'https://bs-us'},
    'credit': {'default': 'https://c'},
}


def test_default_seed_file() -> None:
    assert default_seed_file(Environment.PROD) == 'siblings.json'
    assert default_seed_file(Environment.DEV) == 'siblings-dev.json'


@pytest.mark.parametrize(
    ('environment', 'prefix'),
    ((Environment.PROD, 'ep-'), (Environment.DEV, 'dev-ep-')),
)
def test_load_endpoints(
    local_connector: CountingConnector,
    environment: Environment,
    prefix: str,
) -> None:
    store = EndpointStore(local_connector, environment)

    keys = load_endpoints(store, SIBLINGS)

    assert keys == [f'{prefix}{name}' for name in SIBLINGS]
    for name, entry in SIBLINGS.items():
        stored = local_connector.get(f'{prefix}{name}')
        assert stored is not None
        assert json.loads(stored) == entry


def test_load_endpoints_invalid_entry_writes_nothing(
    local_connector: CountingConnector,
) -> None:
    store = EndpointStore(local_connector, Environment.PROD)
    data = {**SIBLINGS, 'broken': {'in': 'https://b-in'}}

    with pytest.raises(EndpointDecodeError) as e:
        load_endpoints(store, data)

    assert e.value.key == 'ep-broken'
    for name in SIBLINGS:
        assert not local_connector.exists(f'ep-{name}')


def test_load_endpoints_overwrites(local_connector: CountingConnector) -> None:
    store = EndpointStore(local_connector, Environment.PROD)
    load_endpoints(store, {'credit': {'default': 'https://old'}})
    load_endpoints(store, {'credit': {'default': 'https://new'}})

    assert store.fetch('credit') == EndpointRecord(default='https://new')


def test_load_endpoints_file(
    local_connector: CountingConnector,
    tmp_path: pathlib.Path,
) -> None:
    filepath = tmp_path / 'siblings.json'
    filepath.write_text(json.dumps(SIBLINGS))
    store = EndpointStore(local_connector, Environment.PROD)

    keys = load_endpoints_file(store, filepath)
    assert len(keys) == len(SIBLINGS)

    resolver = Resolver(local_connector, environment=Environment.PROD)
    assert resolver.resolve('august', 'IN') == 'https://a-in'
    assert resolver.resolve('bank-statement', 'US') == 'https://bs-us'
    assert resolver.resolve('credit', 'IN') == 'https://c'


def test_load_endpoints_file_not_object(
    local_connector: CountingConnector,
    tmp_path: pathlib.Path,
) -> None:
    filepath = tmp_path / 'siblings.json'
    filepath.write_text(json.dumps(['august']))
    store = EndpointStore(local_connector, Environment.PROD)

    with pytest.raises(ValueError, match='JSON object'):
        load_endpoints_file(store, filepath)


def test_load_endpoints_ignores_field_names(
    local_connector: CountingConnector,
) -> None:
    store = EndpointStore(local_connector, Environment.PROD)
    load_endpoints(store, {'august': {'default': 'https://a', 'usa': 'x'}})

    stored = local_connector.get('ep-august')
    assert stored is not None
    assert json.loads(stored) == {'default': 'https://a'}
