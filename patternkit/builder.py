"""Builder pattern: assembling a computer from display, host, keyboard and mouse."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product(ABC):
    """A product assembled part by part."""

    @abstractmethod
    def set_display(self, display: str) -> None:
        """Add the display part."""

    @abstractmethod
    def set_host(self, host: str) -> None:
        """Add the host part."""

    @abstractmethod
    def set_keyboard(self, keyboard: str) -> None:
        """Add the keyboard part."""

    @abstractmethod
    def set_mouse(self, mouse: str) -> None:
        """Add the mouse part."""

    @abstractmethod
    def show(self) -> None:
        """Print the assembled product."""


class ComputerA(Product):
    """Computer that records its parts in the order they were added."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def set_display(self, display: str) -> None:
        self._parts.append(display)

    def set_host(self, host: str) -> None:
        self._parts.append(host)

    def set_keyboard(self, keyboard: str) -> None:
        self._parts.append(keyboard)

    def set_mouse(self, mouse: str) -> None:
        self._parts.append(mouse)

    def show(self) -> None:
        print("----------开始组装电脑A---------")
        for part in self._parts:
            print(part)
        print("----------成功组装电脑A---------")


class Builder(ABC):
    """Builds the parts of a product it owns."""

    def __init__(self) -> None:
        self.product: Product = ComputerA()

    @abstractmethod
    def build_display(self, display: str) -> None:
        """Build the display part."""

    @abstractmethod
    def build_host(self, host: str) -> None:
        """Build the host part."""

    @abstractmethod
    def build_keyboard(self, keyboard: str) -> None:
        """Build the keyboard part."""

    @abstractmethod
    def build_mouse(self, mouse: str) -> None:
        """Build the mouse part."""


class ComputerBuilder(Builder):
    """Builder that passes each part on to its computer."""

    def build_display(self, display: str) -> None:
        self.product.set_display(display)

    def build_host(self, host: str) -> None:
        self.product.set_host(host)

    def build_keyboard(self, keyboard: str) -> None:
        self.product.set_keyboard(keyboard)

    def build_mouse(self, mouse: str) -> None:
        self.product.set_mouse(mouse)


class Director:
    """Runs the steps of a builder in a fixed order."""

    def __init__(self, builder: Builder) -> None:
        self._builder = builder

    def create_computer(self, display: str, host: str, keyboard: str, mouse: str) -> Product:
        """Build all four parts and return the builder's product."""
        self._builder.build_display(display)
        self._builder.build_host(host)
        self._builder.build_keyboard(keyboard)
        self._builder.build_mouse(mouse)
        return self._builder.product


def main(argv: list[str] | None = None) -> int:
    """Assemble and show a sample computer."""
    director = Director(ComputerBuilder())
    computer = director.create_computer("联想显示器", "外星人主机", "雷蛇键盘", "罗技鼠标")
    computer.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())