"""Factory Method: map a case-insensitive animal name to a concrete Animal."""

from typing import Dict, Type

from patterns.animal import Animal, Cat, Dog
from patterns.errors import InvalidArgumentError
from patterns.observability import get_logger

_ANIMALS: Dict[str, Type[Animal]] = {
    "dog": Dog,
    "cat": Cat,
}

_logger = get_logger("patterns.animal_factory")


def create_animal(kind: str) -> Animal:
    """Return a new Dog or Cat for ``kind`` (any letter case).

    Raises InvalidArgumentError("Unknown animal type") for anything else.
    """
    cls = _ANIMALS.get(kind.lower())
    if cls is None:
        _logger.warning("unknown_animal", extra={"kind": kind})
        raise InvalidArgumentError("Unknown animal type")
    animal = cls()
    _logger.info("animal_created", extra={"kind": kind, "animal": cls.__name__})
    return animal


class AnimalFactory:
    """Class-style entry point for callers that prefer ``AnimalFactory.create_animal``."""

    @staticmethod
    def create_animal(kind: str) -> Animal:
        return create_animal(kind)
