from threading import Thread
import pytest

from promathx.memory import Memory


def test_memory_empty():
    memory = Memory()
    assert memory.recall() is None


@pytest.mark.parametrize('test,res', [
    (42, 42.0),
    (0, 0.0),
    (-1.5, -1.5),
    ('2.5', 2.5)
])
def test_memory_store(test, res):
    memory = Memory()
    memory.store(test)
    assert memory.recall() == res
    assert memory.recall() is not None


def test_memory_store_invalid():
    memory = Memory(1.0)
    with pytest.raises(ValueError):
        memory.store('abc')
    assert memory.recall() == 1.0


def test_memory_clear():
    memory = Memory()
    memory.clear()
    assert memory.recall() is None
    memory.store(0)
    memory.clear()
    assert memory.recall() is None
    memory.clear()
    assert memory.recall() is None


def test_memory_instances():
    x, y = Memory(), Memory()
    x.store(1)
    assert y.recall() is None


def test_memory_threads():
    memory = Memory()
    values = set(float(i) for i in range(8))
    errors = []

    def worker(value):
        for _ in range(1000):
            memory.store(value)
            res = memory.recall()
            if res not in values:
                errors.append(res)

    threads = [Thread(target=worker, args=(value,)) for value in values]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert errors == []
    assert memory.recall() in values
