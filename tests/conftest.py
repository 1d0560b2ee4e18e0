import pytest

from factories import make_class


@pytest.fixture
def students():
    return [
        {"index": 1, "mark": 85, "name": "Alice"},
        {"index": 2, "mark": 92, "name": "Bob"},
        {"index": 3, "mark": 78, "name": "Charlie"},
        {"index": 4, "mark": 95, "name": "Diana"},
        {"index": 5, "mark": 67, "name": "Eve"},
        {"index": 6, "mark": 88, "name": "Frank"},
    ]


@pytest.fixture
def students_with_missing_marks():
    return make_class([85, None, 78, None, 67])
