from __future__ import annotations

import pytest

from xerrors.marshallers import default_marshaller, registry


@pytest.fixture(autouse=True)
def restore_marshaller():
    saved = registry.get()
    registry.setup(default_marshaller)
    yield
    registry.setup(saved)
