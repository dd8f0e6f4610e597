"""Shared fixtures for service client tests."""

import pytest

from tests.fakes import (
    STATIC_CREDENTIALS,
    RecordingEndpointProvider,
    RecordingTelemetry,
    RecordingTransport,
    make_config,
)


@pytest.fixture
def client_config():
    """Client configuration pinned to us-west-2"""
    return make_config()


@pytest.fixture
def endpoint_provider():
    return RecordingEndpointProvider()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def telemetry():
    return RecordingTelemetry()


@pytest.fixture
def make_client(client_config, endpoint_provider, transport, telemetry):
    """Factory building any service client wired to the recording fakes"""
    created = []

    def factory(client_cls, **overrides):
        kwargs = dict(
            config=client_config,
            credentials=STATIC_CREDENTIALS,
            endpoint_provider=endpoint_provider,
            telemetry_provider=telemetry.provider,
            transport=transport,
        )
        kwargs.update(overrides)
        client = client_cls(**kwargs)
        created.append(client)
        return client

    yield factory

    for client in created:
        client.shutdown()
