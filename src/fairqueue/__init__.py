"""Priority and turn-taking queues."""

from fairqueue.errors import EmptyQueueError, ScenarioError
from fairqueue.priority import PriorityItem, PriorityQueue
from fairqueue.turns import Person, TakingTurnsQueue, TurnQueue

__all__ = [
    "EmptyQueueError",
    "ScenarioError",
    "PriorityItem",
    "PriorityQueue",
    "Person",
    "TakingTurnsQueue",
    "TurnQueue",
]
