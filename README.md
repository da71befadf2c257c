# patternkit

Small, self-contained examples of classic design patterns. Each pattern lives
in its own module, and each module has a `main()` demo that prints its steps
to standard output.

| Module | Pattern | Main names |
| --- | --- | --- |
| `patternkit.adapter` | Adapter (class and object forms) | `Camera`, `CameraAdapter`, `LeicaCameraAdapter` |
| `patternkit.builder` | Builder | `ComputerBuilder`, `Director`, `ComputerA` |
| `patternkit.factory` | Simple factory | `ShapeFactory`, `Circle`, `Rectangle` |
| `patternkit.proxy` | Proxy | `Proxy`, `ConcreteSubject`, `ProxyWOW` |
| `patternkit.singleton` | Singleton (eager, lazy, once) | `EagerSingleton`, `LazySingleton`, `OnceSingleton` |
| `patternkit.observer` | Observer | `Subject`, `BinaryObserver`, `OctalObserver`, `HexaObserver` |
| `patternkit.weather` | Observer (weather station) | `WeatherData`, `ConditionsDisplay` |
| `patternkit.producer_consumer` | Producer/consumer with threads | `ProducerConsumerDemo`, `ThrottledProducerConsumer` |

## Installation

```
pip install .
```

No third-party libraries are needed at run time. For the tests:

```
pip install ".[test]"
pytest
```

## Running the demos

Each command runs one module's `main()`. The commands take no options.

```
patternkit-adapter             # opens, configures and closes a camera through CameraAdapter
patternkit-builder             # assembles and shows a computer with Director
patternkit-factory             # draws a circle and a rectangle from ShapeFactory
patternkit-proxy               # sends a request to ConcreteSubject through Proxy
patternkit-singleton           # prints the id of EagerSingleton twice (the same value)
patternkit-observer            # prints a subject's state in octal and hex as it changes
patternkit-weather             # feeds three city displays, then drops one
patternkit-producer-consumer   # runs ProducerConsumerDemo with 50 numbers
```

## Using the classes

Build a computer with a director:

```python
from patternkit.builder import ComputerBuilder, Director

director = Director(ComputerBuilder())
computer = director.create_computer("display", "host", "keyboard", "mouse")
computer.show()
```

Ask the factory for a shape by name. Unknown names give `None`; `draw()`
prints its line and also returns it:

```python
from patternkit.factory import ShapeFactory

ShapeFactory().get_shape("Circle").draw()   # "draw a Circle"
ShapeFactory().get_shape("Triangle")        # None
```

Use a camera through the common `Camera` interface. `CameraAdapter` inherits
from `NikonCamera`; `LeicaCameraAdapter` wraps a `LeicaCamera`. Each method
prints its message and returns it:

```python
from patternkit.adapter import LeicaCameraAdapter

camera = LeicaCameraAdapter()
camera.open_camera()
camera.set_config()
camera.close_camera()
```

Play through a proxy that only loads the game while paid time remains. Every
100 units recharged buy one hour; each `load()` spends one hour:

```python
from patternkit.proxy import ProxyWOW

game = ProxyWOW()
game.load()          # refused: no time left
game.recharge(200)
game.load()
game.exit()
```

Get a singleton. None of the singleton classes can be instantiated directly;
calling them raises `TypeError`:

```python
from patternkit.singleton import LazySingleton

assert LazySingleton.get_instance() is LazySingleton.get_instance()
```

Subscribe displays to a weather station. A `ConditionsDisplay` can also be
used as a context manager, which unsubscribes it when the block ends:

```python
from patternkit.weather import ConditionsDisplay, WeatherData

station = WeatherData()
with ConditionsDisplay(station, "Beijing") as display:
    display.subscribe()
    station.set_measurements(15, 20, 50)
```

Watch a subject's state in several number bases. Observers subscribe when
they are created; assigning `state` notifies them:

```python
from patternkit.observer import BinaryObserver, HexaObserver, Subject

subject = Subject()
BinaryObserver(subject)
HexaObserver(subject)
subject.state = 10
```

Run a bounded producer/consumer exchange. `run()` starts one producer and one
consumer thread, waits for both, and returns the numbers in the order they
were consumed:

```python
from patternkit.producer_consumer import ProducerConsumerDemo, ThrottledProducerConsumer

ProducerConsumerDemo(count=20, max_size=5, delay=0.01).run()
ThrottledProducerConsumer(count=5, buffer_size=10, wait_threshold=100).run()
```

`ThrottledProducerConsumer` keeps at least `wait_threshold` milliseconds
between produced items.

## What the package does not do

These are teaching examples. The demo commands take no arguments and print
to standard output only; nothing is stored, and there is no interactive
interface.