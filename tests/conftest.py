import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from models import TaskStore
from storage import TaskStorage


@pytest.fixture
def store(qapp):
    return TaskStore()


@pytest.fixture
def storage(tmp_path):
    return TaskStorage(tmp_path / "tasks.txt")
