import os

import pytest

_INTEGRATION_RPC_ENV_KEY = "SET_PROTOCOL_TEST_RPC"


def pytest_configure(config):
    config.addinivalue_line("markers", "smoke: mark test as a smoke test")
    config.addinivalue_line(
        "markers",
        f"integration: needs a development chain at ${_INTEGRATION_RPC_ENV_KEY}",
    )


def pytest_collection_modifyitems(config, items):
    skip_integration = pytest.mark.skip(
        reason=f"{_INTEGRATION_RPC_ENV_KEY} and SET_PROTOCOL_ARTIFACTS_DIR not set"
    )
    has_chain = bool(
        os.getenv(_INTEGRATION_RPC_ENV_KEY) and os.getenv("SET_PROTOCOL_ARTIFACTS_DIR")
    )
    for item in items:
        if "smoke" in item.nodeid:
            item.add_marker(pytest.mark.smoke)
        if "integration" in item.keywords and not has_chain:
            item.add_marker(skip_integration)
