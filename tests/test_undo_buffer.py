from models.task import Task
from models.undo_buffer import UndoBuffer


def test_empty_buffer():
    buf = UndoBuffer()
    assert len(buf) == 0
    assert not buf
    assert buf.pop() is None
    assert buf.peek() is None


def test_lifo_order():
    buf = UndoBuffer()
    a, b = Task("a"), Task("b")
    buf.push(a)
    buf.push(b)
    assert buf.peek().text == "b"
    assert buf.pop().text == "b"
    assert buf.pop().text == "a"
    assert buf.pop() is None


def test_push_stores_a_copy():
    buf = UndoBuffer()
    t = Task("original")
    buf.push(t)
    t.update(text="changed")
    restored = buf.pop()
    assert restored.text == "original"
    assert restored.id == t.id


def test_clear():
    buf = UndoBuffer()
    buf.push(Task("a"))
    buf.clear()
    assert len(buf) == 0
