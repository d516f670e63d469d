import pytest

from models import Task, FilterMode, project, project_indexed


@pytest.fixture
def tasks():
    return [
        Task("a", False, 1),
        Task("b", True, 2),
        Task("c", False, 3),
        Task("d", True, 4),
    ]


def test_all_keeps_everything_in_order(tasks):
    assert [t.text for t in project(tasks, FilterMode.ALL)] == ["a", "b", "c", "d"]


def test_pending_and_completed(tasks):
    assert [t.text for t in project(tasks, FilterMode.PENDING)] == ["a", "c"]
    assert [t.text for t in project(tasks, FilterMode.COMPLETED)] == ["b", "d"]


@pytest.mark.parametrize("flags", [[], [True], [False], [True, True, False], [False, True, False, True, True]])
def test_pending_plus_completed_is_all(flags):
    tasks = [Task(str(i), done, i) for i, done in enumerate(flags)]
    pending = project(tasks, FilterMode.PENDING)
    completed = project(tasks, FilterMode.COMPLETED)
    everything = project(tasks, FilterMode.ALL)
    assert {t.id for t in pending} | {t.id for t in completed} == {t.id for t in everything}
    assert not {t.id for t in pending} & {t.id for t in completed}


def test_projection_does_not_mutate(tasks):
    before = list(tasks)
    result = project(tasks, FilterMode.COMPLETED)
    assert isinstance(result, tuple)
    assert tasks == before


def test_project_indexed_maps_back_to_store(tasks):
    rows = project_indexed(tasks, FilterMode.COMPLETED)
    assert [i for i, _ in rows] == [1, 3]
    assert all(tasks[i] is t for i, t in rows)


def test_from_label():
    assert FilterMode.from_label("All") is FilterMode.ALL
    assert FilterMode.from_label("Pending") is FilterMode.PENDING
    assert FilterMode.from_label("Completed") is FilterMode.COMPLETED
    with pytest.raises(ValueError):
        FilterMode.from_label("Done")


def test_works_on_store(store):
    store.add("x")
    store.add("y")
    store.toggle_complete(0)
    assert [t.text for t in project(store, FilterMode.PENDING)] == ["y"]
