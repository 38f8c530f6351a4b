"""Unit tests for core.domain.models: Person and its remote starter."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from adapters.vehicles import Car, Motorcycle
from core.domain.models import Person
from core.interfaces.remote_starter import RemoteStarterDelegate


class _Counter:
    def __init__(self) -> None:
        self.calls = 0

    def start_car(self) -> None:
        self.calls += 1


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_name_is_set(self) -> None:
        assert Person(name="Janet").name == "Janet"

    def test_delegate_defaults_to_none(self) -> None:
        person = Person(name="Janet")
        assert person.remote_starter_delegate is None
        assert person.has_remote_starter is False

    def test_empty_name_accepted(self) -> None:
        person = Person(name="")
        assert person.name == ""
        assert person.remote_starter_delegate is None

    def test_long_name_accepted(self) -> None:
        long_name = "x" * 300
        assert Person(name=long_name).name == long_name

    def test_name_is_frozen(self) -> None:
        person = Person(name="Janet")
        with pytest.raises(ValidationError):
            person.name = "Bob"  # type: ignore[misc]
        assert person.name == "Janet"

    def test_can_be_constructed_with_delegate(self) -> None:
        counter = _Counter()
        person = Person(name="Janet", remote_starter_delegate=counter)
        assert person.remote_starter_delegate is counter


# ---------------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------------


class TestBinding:
    def test_bind_keeps_identity(self) -> None:
        counter = _Counter()
        person = Person(name="Janet")
        person.bind_remote_starter(counter)
        assert person.remote_starter_delegate is counter
        assert person.has_remote_starter is True

    def test_direct_assignment_binds(self) -> None:
        counter = _Counter()
        person = Person(name="Janet")
        person.remote_starter_delegate = counter
        person.press_remote_starter()
        assert counter.calls == 1

    def test_non_conforming_object_rejected(self) -> None:
        person = Person(name="Janet")
        with pytest.raises(ValidationError):
            person.remote_starter_delegate = object()  # type: ignore[assignment]
        assert person.remote_starter_delegate is None

    def test_bind_non_conforming_rejected(self) -> None:
        person = Person(name="Janet")
        with pytest.raises(ValidationError):
            person.bind_remote_starter("not a car")  # type: ignore[arg-type]

    def test_unbind_clears(self) -> None:
        counter = _Counter()
        person = Person(name="Janet")
        person.bind_remote_starter(counter)
        person.unbind_remote_starter()
        person.press_remote_starter()
        assert person.remote_starter_delegate is None
        assert counter.calls == 0

    def test_unbind_when_unbound_is_noop(self) -> None:
        person = Person(name="Janet")
        person.unbind_remote_starter()
        assert person.remote_starter_delegate is None

    def test_duck_typed_object_conforms(self) -> None:
        assert isinstance(_Counter(), RemoteStarterDelegate)


# ---------------------------------------------------------------------------
# Pressing the remote starter
# ---------------------------------------------------------------------------


class TestPressRemoteStarter:
    def test_unbound_press_does_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        person = Person(name="Janet")
        person.press_remote_starter()
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_bound_press_calls_once(self) -> None:
        counter = _Counter()
        person = Person(name="Janet")
        person.bind_remote_starter(counter)
        person.press_remote_starter()
        assert counter.calls == 1

    def test_each_press_calls_once(self) -> None:
        counter = _Counter()
        person = Person(name="Janet")
        person.bind_remote_starter(counter)
        for _ in range(3):
            person.press_remote_starter()
        assert counter.calls == 3

    def test_rebinding_switches_target(self) -> None:
        first, second = _Counter(), _Counter()
        person = Person(name="Janet")
        person.bind_remote_starter(first)
        person.press_remote_starter()
        person.bind_remote_starter(second)
        person.press_remote_starter()
        person.press_remote_starter()
        assert first.calls == 1
        assert second.calls == 2

    def test_construction_order_is_irrelevant(self, capsys: pytest.CaptureFixture[str]) -> None:
        car = Car()
        person = Person(name="Janet")
        person.press_remote_starter()
        assert capsys.readouterr().out == ""
        person.bind_remote_starter(car)
        person.press_remote_starter()
        assert capsys.readouterr().out == "vroom vroom\n"

    def test_janet_and_her_car(self, capsys: pytest.CaptureFixture[str]) -> None:
        janet = Person(name="Janet")
        janets_car = Car()
        janet.remote_starter_delegate = janets_car
        janet.press_remote_starter()
        assert capsys.readouterr().out == "vroom vroom\n"

    def test_rebinding_to_motorcycle_prints_new_sound(self, capsys: pytest.CaptureFixture[str]) -> None:
        person = Person(name="Janet")
        person.bind_remote_starter(Car())
        person.bind_remote_starter(Motorcycle())
        person.press_remote_starter()
        assert capsys.readouterr().out == "vrrRRRM\n"

    def test_delegate_errors_propagate(self) -> None:
        class _Broken:
            def start_car(self) -> None:
                raise RuntimeError("battery is dead")

        person = Person(name="Janet")
        person.bind_remote_starter(_Broken())
        with pytest.raises(RuntimeError, match="battery is dead"):
            person.press_remote_starter()

    def test_press_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        person = Person(name="Janet")
        with caplog.at_level("DEBUG", logger="core.domain.models"):
            person.press_remote_starter()
        assert "nothing is bound" in caplog.text
