"""Scenario files describing a run of the queues.

A scenario lists values to push through a priority queue and people to
rotate through a turn queue. Both sections are optional.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from fairqueue.errors import ScenarioError
from fairqueue.priority import PriorityQueue
from fairqueue.turns import TakingTurnsQueue

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 20


class PriorityEntrySpec(BaseModel):
    """A value to enqueue with its priority."""

    value: str
    priority: int


class PersonSpec(BaseModel):
    """A person to add to the rotation. Turns <= 0 means infinite."""

    name: str
    turns: int


class Scenario(BaseModel):
    """A complete scenario for both queues."""

    priority: list[PriorityEntrySpec] = Field(default_factory=list)
    people: list[PersonSpec] = Field(default_factory=list)
    rounds: int = Field(default=DEFAULT_ROUNDS, ge=0)


@dataclass
class DequeueResult:
    """One value removed from the priority queue."""

    position: int
    value: str


@dataclass
class TurnResult:
    """One turn taken from the rotation."""

    round: int
    name: str
    turns: int
    requeued: bool
    queue_length: int


def load_scenario(path: Path) -> Scenario:
    """Load and validate a scenario from a YAML file.

    Raises:
        ScenarioError: If the file can't be read, parsed or validated.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScenarioError(str(path), str(e)) from e

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ScenarioError(str(path), f"not valid YAML ({e})") from e

    if not isinstance(data, dict):
        raise ScenarioError(str(path), "top level must be a mapping")

    try:
        scenario = Scenario.model_validate(data)
    except ValidationError as e:
        raise ScenarioError(str(path), str(e)) from e

    logger.info(
        f"Loaded scenario {path} ({len(scenario.priority)} entries, "
        f"{len(scenario.people)} people, {scenario.rounds} rounds)"
    )
    return scenario


def run_priority(scenario: Scenario) -> list[DequeueResult]:
    """Enqueue every entry, then drain the queue."""
    queue = PriorityQueue()
    for entry in scenario.priority:
        queue.enqueue(entry.value, entry.priority)

    results = []
    while not queue.is_empty():
        results.append(DequeueResult(position=len(results) + 1, value=queue.dequeue()))
    return results


def run_turns(scenario: Scenario) -> list[TurnResult]:
    """Add every person, then take turns until rounds run out or nobody is left."""
    queue = TakingTurnsQueue()
    for person in scenario.people:
        queue.add_person(person.name, person.turns)

    results = []
    for round_number in range(1, scenario.rounds + 1):
        if queue.is_empty():
            logger.debug(f"Rotation empty after {round_number - 1} rounds")
            break

        before = queue.length
        person = queue.get_next_person()
        results.append(
            TurnResult(
                round=round_number,
                name=person.name,
                turns=person.turns,
                requeued=queue.length == before,
                queue_length=queue.length,
            )
        )
    return results


__all__ = [
    "DEFAULT_ROUNDS",
    "DequeueResult",
    "PersonSpec",
    "PriorityEntrySpec",
    "Scenario",
    "TurnResult",
    "load_scenario",
    "run_priority",
    "run_turns",
]
