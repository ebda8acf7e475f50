import pytest
from grade_tracker import Registry


@pytest.fixture
def registry() -> Registry:
    """A registry holding the four example students."""
    reg = Registry()
    reg.add("Alice", "85, 92, 78")
    reg.add("Bob", "70, 66, 77")
    reg.add("Charlie", "95, 90, 93")
    reg.add("Dana", "58, 64, 70")
    return reg
