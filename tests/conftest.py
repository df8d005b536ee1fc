import pytest

from markupbuilder import resetdefaults


@pytest.fixture(autouse=True)
def restore_defaults():
    yield
    resetdefaults()
