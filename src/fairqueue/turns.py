"""Circular queue of people taking turns.

Each retrieval uses up one of the person's turns. People go back to
the end of the line until their turns run out. A turn count of zero
or less at creation means the person never runs out.
"""

import logging
from collections import deque
from dataclasses import dataclass, field

from fairqueue.errors import EmptyQueueError

logger = logging.getLogger(__name__)


@dataclass
class Person:
    """A person waiting for a turn."""

    name: str
    turns: int
    # Fixed at creation; finite turns only ever count down to 0
    has_infinite_turns: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.has_infinite_turns = self.turns <= 0


class TakingTurnsQueue:
    """FIFO rotation of people with a limited (or unlimited) number of turns.

    Rules:
    - Finite turns are decremented on every retrieval.
    - A person whose turns reach 0 is dropped from the rotation.
    - Turns <= 0 are infinite: the person is always put back unchanged.
    """

    def __init__(self) -> None:
        self._queue: deque[Person] = deque()

    @property
    def length(self) -> int:
        """Number of people currently in the rotation."""
        return len(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        return not self._queue

    def people(self) -> tuple[Person, ...]:
        """Snapshot of the rotation, front first."""
        return tuple(self._queue)

    def add_person(self, name: str, turns: int) -> None:
        """Add a person to the back of the rotation.

        Args:
            name: The person's name. Duplicates are separate entries.
            turns: Number of turns. 0 or less means infinite.
        """
        self._queue.append(Person(name, turns))
        logger.debug(f"Added {name} with {turns} turns (size={len(self._queue)})")

    def get_next_person(self) -> Person:
        """Take the next person's turn and return them.

        The returned person reflects their remaining turns after this one.

        Raises:
            EmptyQueueError: If nobody is in the queue.
        """
        if not self._queue:
            raise EmptyQueueError("No one in the queue.")

        person = self._queue.popleft()

        if person.has_infinite_turns:
            self._queue.append(person)
        else:
            person.turns -= 1
            if person.turns > 0:
                self._queue.append(person)
            else:
                logger.debug(f"{person.name} has no turns left, leaving the rotation")

        logger.debug(f"{person.name} took a turn (turns={person.turns})")
        return person


# Shorter alias used by callers that think of this as a turn queue
TurnQueue = TakingTurnsQueue

__all__ = ["Person", "TakingTurnsQueue", "TurnQueue"]
