"""Proxy pattern: a plain delegating proxy and a pay-to-play game proxy."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Subject(ABC):
    """Interface shared by the real subject and its proxy."""

    @abstractmethod
    def request(self) -> None:
        """Carry out the request."""


class ConcreteSubject(Subject):
    def request(self) -> None:
        print("Request:ConcreteSubject")


class Proxy(Subject):
    """Controls access to another subject by forwarding to it."""

    def __init__(self, subject: Subject) -> None:
        self._subject = subject

    def request(self) -> None:
        self._subject.request()


class Game(ABC):
    """A game that can be loaded and exited."""

    @abstractmethod
    def load(self) -> None:
        """Start the game."""

    @abstractmethod
    def exit(self) -> None:
        """Leave the game."""


class WOW(Game):
    def load(self) -> None:
        print("魔兽世界加载。")

    def exit(self) -> None:
        print("魔兽世界退出。")


class ProxyWOW(Game):
    """Lets the game load only while paid play time remains."""

    def __init__(self) -> None:
        self._game = WOW()
        self._time = 0
        self._running = False

    def recharge(self, money: int) -> None:
        """Buy play time: one hour for every 100 units of money."""
        hours = abs(money) // 100
        self._time += hours if money >= 0 else -hours
        print(f"充值：{money}")
        print(f"获得时长：{self._time}")

    def load(self) -> None:
        print("代理启动。")
        if self._time > 0:
            self._game.load()
            print("游戏时长1小时。")
            self._time -= 1
            print(f"剩余时长：{self._time}")
            self._running = True
        else:
            print("剩余游戏时长不足，请充值。")
            self._running = False

    def exit(self) -> None:
        if self._running:
            self._game.exit()
            self._running = False
        print("代理关闭。")


def main(argv: list[str] | None = None) -> int:
    """Access a concrete subject through a proxy."""
    proxy = Proxy(ConcreteSubject())
    proxy.request()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())