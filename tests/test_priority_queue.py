"""Tests for the FIFO tie-breaking priority queue."""

import pytest

from fairqueue import EmptyQueueError, PriorityItem, PriorityQueue


class TestPriorityQueue:
    """Tests for PriorityQueue ordering."""

    def test_dequeue_returns_highest_priority(self, priority_queue):
        """Test that the highest priority value comes out first regardless of position."""
        priority_queue.enqueue("low", 1)
        priority_queue.enqueue("high", 10)
        priority_queue.enqueue("mid", 5)

        assert priority_queue.dequeue() == "high"
        assert priority_queue.dequeue() == "mid"
        assert priority_queue.dequeue() == "low"

    def test_ties_leave_in_insertion_order(self, priority_queue):
        """Test that equal priorities are dequeued first-in first-out."""
        priority_queue.enqueue("first", 3)
        priority_queue.enqueue("second", 3)
        priority_queue.enqueue("third", 3)

        assert [priority_queue.dequeue() for _ in range(3)] == ["first", "second", "third"]

    def test_drain_mixed_priorities(self, priority_queue):
        """Test draining gives non-increasing priorities with FIFO among equals."""
        for value, pri in [("a", 2), ("b", 5), ("c", 2), ("d", 5), ("e", 1), ("f", 2)]:
            priority_queue.enqueue(value, pri)

        drained = [priority_queue.dequeue() for _ in range(len(priority_queue))]

        assert drained == ["b", "d", "a", "c", "f", "e"]
        assert priority_queue.is_empty()

    def test_tie_break_among_survivors(self, priority_queue):
        """Test that a later equal-priority entry wins once the earlier one is gone."""
        priority_queue.enqueue("x", 4)
        priority_queue.enqueue("top", 9)
        priority_queue.enqueue("y", 4)

        assert priority_queue.dequeue() == "top"
        priority_queue.enqueue("z", 4)

        assert priority_queue.dequeue() == "x"
        assert priority_queue.dequeue() == "y"
        assert priority_queue.dequeue() == "z"

    def test_negative_and_zero_priorities(self, priority_queue):
        """Test that the full integer range is accepted."""
        priority_queue.enqueue("neg", -5)
        priority_queue.enqueue("zero", 0)
        priority_queue.enqueue("more_neg", -50)

        assert priority_queue.dequeue() == "zero"
        assert priority_queue.dequeue() == "neg"
        assert priority_queue.dequeue() == "more_neg"

    def test_remaining_order_preserved(self, priority_queue):
        """Test that removing from the middle keeps the rest in insertion order."""
        priority_queue.enqueue("a", 1)
        priority_queue.enqueue("b", 7)
        priority_queue.enqueue("c", 2)

        priority_queue.dequeue()

        assert priority_queue.items() == (PriorityItem("a", 1), PriorityItem("c", 2))

    def test_peek_does_not_remove(self, priority_queue):
        """Test that peek returns the next value without dequeuing it."""
        priority_queue.enqueue("a", 1)
        priority_queue.enqueue("b", 3)
        priority_queue.enqueue("c", 3)

        assert priority_queue.peek() == "b"
        assert len(priority_queue) == 3
        assert priority_queue.dequeue() == "b"


class TestPriorityQueueEmpty:
    """Tests for empty queue behavior."""

    def test_dequeue_empty_raises(self, priority_queue):
        """Test that dequeuing from an empty queue raises."""
        with pytest.raises(EmptyQueueError, match="The queue is empty."):
            priority_queue.dequeue()

    def test_peek_empty_raises(self, priority_queue):
        """Test that peeking at an empty queue raises."""
        with pytest.raises(EmptyQueueError):
            priority_queue.peek()

    def test_recovers_after_empty_error(self, priority_queue):
        """Test that the queue works normally after an empty error."""
        with pytest.raises(EmptyQueueError):
            priority_queue.dequeue()

        priority_queue.enqueue("back", 1)

        assert priority_queue.dequeue() == "back"

    def test_drained_queue_raises(self, priority_queue):
        """Test that a queue emptied by dequeues raises again."""
        priority_queue.enqueue("only", 1)
        priority_queue.dequeue()

        with pytest.raises(EmptyQueueError):
            priority_queue.dequeue()


class TestPriorityQueueString:
    """Tests for the diagnostic string format."""

    def test_empty(self):
        """Test rendering an empty queue."""
        assert str(PriorityQueue()) == "[]"

    def test_format_in_insertion_order(self, priority_queue):
        """Test that items render in stored order with their priorities."""
        priority_queue.enqueue("apple", 2)
        priority_queue.enqueue("banana", 5)
        priority_queue.enqueue("cherry", -1)

        assert str(priority_queue) == "[apple (Pri:2), banana (Pri:5), cherry (Pri:-1)]"

    def test_format_after_dequeue(self, priority_queue):
        """Test that the rendering drops removed items."""
        priority_queue.enqueue("apple", 2)
        priority_queue.enqueue("banana", 5)
        priority_queue.dequeue()

        assert str(priority_queue) == "[apple (Pri:2)]"

    def test_item_str(self):
        """Test rendering a single item."""
        assert str(PriorityItem("x", 0)) == "x (Pri:0)"
