"""Transport configuration tests."""

import pytest

from graphql_transport import TransportConfig, TransportConfigurationError


def test_defaults_from_empty_environment():
    config = TransportConfig.from_env({})

    assert config.timeout is None
    assert config.max_workers == 4
    assert config.log_bodies is False


def test_values_read_from_environment():
    config = TransportConfig.from_env(
        {
            "GRAPHQL_TRANSPORT_TIMEOUT": "2.5",
            "GRAPHQL_TRANSPORT_MAX_WORKERS": "8",
            "GRAPHQL_TRANSPORT_LOG_BODIES": "TRUE",
        }
    )

    assert config.timeout == 2.5
    assert config.max_workers == 8
    assert config.log_bodies is True


def test_blank_timeout_means_no_timeout():
    assert TransportConfig.from_env({"GRAPHQL_TRANSPORT_TIMEOUT": "  "}).timeout is None


@pytest.mark.parametrize(
    "env",
    [
        {"GRAPHQL_TRANSPORT_TIMEOUT": "soon"},
        {"GRAPHQL_TRANSPORT_TIMEOUT": "-1"},
        {"GRAPHQL_TRANSPORT_MAX_WORKERS": "many"},
        {"GRAPHQL_TRANSPORT_MAX_WORKERS": "0"},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(TransportConfigurationError):
        TransportConfig.from_env(env)
