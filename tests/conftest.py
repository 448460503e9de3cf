from typing import Any

import pytest

from tests.mocks.rocketapi_mocks import StubTransport, make_envelope


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def ok_envelope() -> dict[str, Any]:
    return make_envelope(body={"a": 1})


@pytest.fixture
def not_found_envelope() -> dict[str, Any]:
    return make_envelope(status_code=404)
