"""Observer pattern: weather displays fed by a weather station."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WeatherObserver(ABC):
    """Receives new weather measurements."""

    @abstractmethod
    def update(self, temp: float, humidity: float, pressure: float) -> None:
        """Take in a new set of measurements."""


class DisplayElement(ABC):
    """Something that can show itself."""

    @abstractmethod
    def display(self) -> str:
        """Show the current contents and return the text shown."""


class WeatherSubject(ABC):
    """A source of weather measurements that observers can subscribe to."""

    @abstractmethod
    def add_observer(self, observer: WeatherObserver) -> None:
        """Subscribe an observer."""

    @abstractmethod
    def remove_observer(self, observer: WeatherObserver) -> None:
        """Unsubscribe an observer."""

    @abstractmethod
    def notify_observers(self) -> None:
        """Send the current measurements to every observer."""

    @abstractmethod
    def set_measurements(self, temp: float, humidity: float, pressure: float) -> None:
        """Store new measurements."""


class WeatherData(WeatherSubject):
    """Weather station that pushes every new measurement to its observers."""

    def __init__(self) -> None:
        self._observers: list[WeatherObserver] = []
        self.temp = 0.0
        self.humidity = 0.0
        self.pressure = 0.0

    @property
    def observers(self) -> tuple[WeatherObserver, ...]:
        """The subscribed observers, in subscription order."""
        return tuple(self._observers)

    def add_observer(self, observer: WeatherObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: WeatherObserver) -> None:
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self.temp, self.humidity, self.pressure)

    def set_measurements(self, temp: float, humidity: float, pressure: float) -> None:
        self.temp = float(temp)
        self.humidity = float(humidity)
        self.pressure = float(pressure)
        self.on_measurements_changed()

    def on_measurements_changed(self) -> None:
        self.notify_observers()


class ConditionsDisplay(WeatherObserver, DisplayElement):
    """Shows the latest conditions for one address.

    Used as a context manager, it unsubscribes when the block ends.
    """

    def __init__(self, weather_data: WeatherSubject, address: str) -> None:
        self.address = address
        self.temp = 0.0
        self.humidity = 0.0
        self.pressure = 0.0
        self._weather_data = weather_data

    def __enter__(self) -> ConditionsDisplay:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unsubscribe()

    def subscribe(self) -> None:
        self._weather_data.add_observer(self)

    def unsubscribe(self) -> None:
        self._weather_data.remove_observer(self)

    def update(self, temp: float, humidity: float, pressure: float) -> None:
        self.temp = temp
        self.humidity = humidity
        self.pressure = pressure
        self.display()

    def display(self) -> str:
        text = (
            f"{self.address} Current condidions: \n"
            f"{self.temp:g}F degrees \n"
            f"{self.humidity:g}% humidity \n"
            f"{self.pressure:g}% pressure \n"
        )
        print(text)
        return text


def main(argv: list[str] | None = None) -> int:
    """Feed three city displays, then drop one and feed the rest again."""
    weather = WeatherData()
    beijing = ConditionsDisplay(weather, "Beijing")
    shanghai = ConditionsDisplay(weather, "Shanghai")
    suzhou = ConditionsDisplay(weather, "Suzhou")

    with beijing, shanghai, suzhou:
        beijing.subscribe()
        shanghai.subscribe()
        suzhou.subscribe()

        weather.set_measurements(15, 20, 50)

        shanghai.unsubscribe()

        weather.set_measurements(1, 2, 3)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())