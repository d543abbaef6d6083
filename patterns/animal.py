"""Speaker products created by the animal factory."""

from abc import ABC, abstractmethod


class Animal(ABC):
    """Abstract base class for anything that can speak."""

    @abstractmethod
    def speak(self) -> None:
        """Print this animal's sound. Must be implemented by subclasses."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Dog(Animal):
    """Animal that prints "Woof!"."""

    def speak(self) -> None:
        print("Woof!")


class Cat(Animal):
    """Animal that prints "Meow!"."""

    def speak(self) -> None:
        print("Meow!")
