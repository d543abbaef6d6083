"""Concrete Observer: a named user that prints what it receives."""

from patterns.observer import Observer


class User(Observer):
    """Observer identified by name. Two users with the same name compare equal."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def update(self, message: str) -> None:
        print(f"{self._name} отримав повідомлення: {message}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"User(name={self._name!r})"
