import pytest

from src.utils.trace import reset_tracer


@pytest.fixture(autouse=True)
def fresh_tracer():
    # The solver records into the global tracer; start every test from an empty one.
    reset_tracer()
    yield
    reset_tracer()
