"""Observer pattern: observers print a subject's state in different bases."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Subject:
    """Holds a state and notifies its observers whenever the state is set."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self._state = 0

    @property
    def observers(self) -> tuple[Observer, ...]:
        """The registered observers, in registration order."""
        return tuple(self._observers)

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove every registration of the observer; unknown observers are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify_all_observers(self) -> None:
        for observer in list(self._observers):
            observer.update()

    @property
    def state(self) -> int:
        """The current state; assigning it notifies all observers."""
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        self._state = value
        self.notify_all_observers()


class Observer(ABC):
    """An observer that subscribes to its subject as soon as it is created."""

    def __init__(self, subject: Subject) -> None:
        self.subject = subject
        subject.add_observer(self)

    @abstractmethod
    def update(self) -> str:
        """React to a change of the subject's state; return the line shown."""

    def remove_from_list(self) -> None:
        """Unsubscribe from the subject."""
        self.subject.remove_observer(self)


class BinaryObserver(Observer):
    def update(self) -> str:
        line = f"Binary: {self.subject.state & 0xFFFF:016b}"
        print(line)
        return line


class OctalObserver(Observer):
    def update(self) -> str:
        line = f"Octal: {self.subject.state & 0xFFFFFFFF:o}"
        print(line)
        return line


class HexaObserver(Observer):
    def update(self) -> str:
        line = f"Hex: {self.subject.state & 0xFFFFFFFF:x}"
        print(line)
        return line


def main(argv: list[str] | None = None) -> int:
    """Subscribe three observers, drop one, and change the state twice."""
    subject = Subject()
    OctalObserver(subject)
    binary = BinaryObserver(subject)
    HexaObserver(subject)

    binary.remove_from_list()

    subject.state = 8
    print(" ")
    subject.state = 10
    return 0


if __name__ == "__main__":
    raise SystemExit(main())