import pytest

from patternkit.weather import (
    ConditionsDisplay,
    DisplayElement,
    WeatherData,
    WeatherObserver,
    WeatherSubject,
    main,
)


def test_subscribed_display_receives_measurements(capsys):
    weather = WeatherData()
    display = ConditionsDisplay(weather, "Beijing")
    display.subscribe()
    weather.set_measurements(15, 20, 50)
    assert (display.temp, display.humidity, display.pressure) == (15, 20, 50)


def test_unsubscribed_display_keeps_old_values(capsys):
    weather = WeatherData()
    display = ConditionsDisplay(weather, "Shanghai")
    display.subscribe()
    weather.set_measurements(15, 20, 50)
    display.unsubscribe()
    weather.set_measurements(1, 2, 3)
    assert (display.temp, display.humidity, display.pressure) == (15, 20, 50)
    assert weather.observers == ()


def test_display_output_format(capsys):
    weather = WeatherData()
    display = ConditionsDisplay(weather, "Suzhou")
    display.subscribe()
    weather.set_measurements(15, 20, 50)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Suzhou Current condidions: "
    assert lines[1] == "15F degrees "
    assert lines[2] == "20% humidity "
    assert lines[3] == "50% pressure "


def test_fractional_values_are_printed_compactly(capsys):
    display = ConditionsDisplay(WeatherData(), "Beijing")
    display.update(1.5, 2.25, 3.0)
    out = capsys.readouterr().out
    assert "1.5F degrees" in out
    assert "2.25% humidity" in out
    assert "3% pressure" in out


def test_notify_resends_current_values(capsys):
    weather = WeatherData()
    weather.set_measurements(4, 5, 6)
    display = ConditionsDisplay(weather, "Beijing")
    display.subscribe()
    weather.notify_observers()
    assert (display.temp, display.humidity, display.pressure) == (4, 5, 6)


def test_observers_keep_subscription_order():
    weather = WeatherData()
    first = ConditionsDisplay(weather, "A")
    second = ConditionsDisplay(weather, "B")
    second.subscribe()
    first.subscribe()
    assert weather.observers == (second, first)


def test_context_manager_unsubscribes(capsys):
    weather = WeatherData()
    with ConditionsDisplay(weather, "Beijing") as display:
        display.subscribe()
        assert weather.observers == (display,)
    assert weather.observers == ()


@pytest.mark.parametrize("cls", [WeatherObserver, DisplayElement, WeatherSubject])
def test_interfaces_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.count("Beijing Current") == 2
    assert out.count("Suzhou Current") == 2
    assert out.count("Shanghai Current") == 1
    assert out.index("Shanghai") < out.index("1F degrees")