"""Tests for the PriorityQueue max-heap."""

import random

import pytest

from adjgraph import EmptyQueueError, PriorityQueue


def _drain(queue: PriorityQueue) -> list[int]:
    priorities = []
    while queue:
        priorities.append(queue.pop().priority)
    return priorities


class TestPushPop:
    def test_pops_highest_priority_first(self) -> None:
        queue = PriorityQueue()
        for vertex, priority in [(0, 3), (1, 10), (2, -4), (3, 7)]:
            queue.push(vertex, priority)
        assert [queue.pop().vertex for _ in range(4)] == [1, 3, 0, 2]

    @pytest.mark.parametrize("seed", range(5))
    def test_random_priorities_pop_in_order(self, seed: int) -> None:
        rng = random.Random(seed)
        queue = PriorityQueue()
        priorities = [rng.randint(-50, 50) for _ in range(200)]
        for vertex, priority in enumerate(priorities):
            queue.push(vertex, priority)
        assert len(queue) == 200
        assert _drain(queue) == sorted(priorities, reverse=True)

    def test_pop_empty_raises(self) -> None:
        with pytest.raises(EmptyQueueError, match="empty"):
            PriorityQueue().pop()

    def test_empty_queue_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            PriorityQueue().peek()

    def test_popped_item_is_detached(self) -> None:
        queue = PriorityQueue()
        queue.push(0, 1)
        item = queue.pop()
        assert item.index == -1
        assert not queue

    def test_peek_does_not_remove(self) -> None:
        queue = PriorityQueue()
        queue.push(5, 2)
        queue.push(6, 9)
        assert queue.peek().vertex == 6
        assert len(queue) == 2


class TestUpdate:
    def test_raise_priority_moves_item_up(self) -> None:
        queue = PriorityQueue()
        low = queue.push(0, 1)
        queue.push(1, 5)
        queue.push(2, 3)
        queue.update(low, 10)
        assert queue.pop() is low
        assert low.priority == 10

    def test_lower_priority_moves_item_down(self) -> None:
        queue = PriorityQueue()
        high = queue.push(0, 10)
        queue.push(1, 5)
        queue.push(2, 3)
        queue.update(high, 0)
        assert [queue.pop().vertex for _ in range(3)] == [1, 2, 0]

    def test_item_indices_track_heap_positions(self) -> None:
        rng = random.Random(7)
        queue = PriorityQueue()
        items = [queue.push(v, rng.randint(0, 100)) for v in range(50)]
        for item in items[::3]:
            queue.update(item, rng.randint(0, 100))
        expected = sorted((item.priority for item in items), reverse=True)
        assert _drain(queue) == expected

    def test_update_popped_item_raises(self) -> None:
        queue = PriorityQueue()
        item = queue.push(0, 1)
        queue.pop()
        with pytest.raises(ValueError, match="not in the queue"):
            queue.update(item, 2)

    def test_update_item_from_other_queue_raises(self) -> None:
        first = PriorityQueue()
        second = PriorityQueue()
        item = first.push(0, 1)
        second.push(0, 1)
        with pytest.raises(ValueError, match="not in the queue"):
            second.update(item, 3)
