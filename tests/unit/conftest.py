import pytest
import sys
from pathlib import Path

# Add the project root to the Python path
root_path = str(Path(__file__).parent.parent.parent)
if root_path not in sys.path:
    sys.path.append(root_path)


@pytest.fixture
def logger():
    """Capturing logger."""
    from tests.utils.test_logger import create_test_logger
    return create_test_logger()
