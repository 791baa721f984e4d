import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration a test (or the CLI it invokes) applied."""
    yield
    structlog.reset_defaults()
