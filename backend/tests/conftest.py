"""
Pytest configuration and shared fixtures for testing.
"""
import sys
from pathlib import Path

# Add backend/ to path so gradebook is importable without installation
backend_root = Path(__file__).parent.parent
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))

from contextlib import asynccontextmanager  # noqa: E402
from typing import Dict, Generator, List  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from gradebook.core.ctt import Student  # noqa: E402
from gradebook.main import app  # noqa: E402


@asynccontextmanager
async def _test_lifespan(app):
    """No-op lifespan for tests.

    Skips Sentry initialization.
    """
    yield


app.router.lifespan_context = _test_lifespan


def create_test_application():
    """Create a fresh app instance with the lifespan disabled."""
    from gradebook.main import create_application

    test_app = create_application()
    test_app.router.lifespan_context = _test_lifespan
    return test_app


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """
    Create a test client for the application.
    """
    with TestClient(app) as test_client:
        yield test_client


def make_students(count: int) -> List[Student]:
    """Create a roster of students s1..sN."""
    return [Student(id=f"s{i}", name=f"Student {i}") for i in range(1, count + 1)]


def make_answers(
    students: List[Student], item_keys: List[str], rows: List[List[object]]
) -> Dict[str, Dict[str, object]]:
    """
    Build a raw answer grid from row lists.

    rows[i][j] is student i's raw value for item_keys[j]; None leaves the
    cell out of the grid entirely.
    """
    answers: Dict[str, Dict[str, object]] = {}
    for student, row in zip(students, rows):
        answers[student.id] = {
            key: value for key, value in zip(item_keys, row) if value is not None
        }
    return answers
