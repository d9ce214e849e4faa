from __future__ import annotations

import pytest

import conductor.core.conductor as conductor_module
from conductor import Conductor, ElementNotFound
from conductor.hierarchy.models import Point, TreeNode
from conductor.hierarchy.predicates import text_matches
from fakes import FakeClock, FakeDevice, FakeDriver, button, fast_config, root

OK_BUTTON = button("ok", "OK", (0, 0, 100, 40))
SCREEN = root(OK_BUTTON)


def _conductor(driver: FakeDriver, clock: FakeClock | None = None) -> Conductor:
    clock = clock or FakeClock()
    return Conductor(driver, fast_config(), sleep=clock.sleep, clock=clock)


def test_find_by_text_and_tap_center() -> None:
    driver = FakeDriver(SCREEN, on_tap=lambda d, p: setattr(d, "hierarchy", root()))
    c = _conductor(driver)

    element = c.find_element_by_text("OK", 5000)
    assert element.center() == Point(50, 20)

    c.tap(element)
    assert driver.taps == [Point(50, 20)]


def test_missing_text_with_zero_timeout_samples_once() -> None:
    driver = FakeDriver(SCREEN)

    with pytest.raises(ElementNotFound) as excinfo:
        _conductor(driver).find_element_by_text("Missing", 0)

    assert driver.captures == 1
    assert excinfo.value.hierarchy == SCREEN


def test_find_by_regexp_and_id_regex() -> None:
    c = _conductor(FakeDriver(SCREEN))

    assert c.find_element_by_regexp(r"O.", 0).tree_node == OK_BUTTON
    assert c.find_element_by_id_regex("o+k", 0).tree_node == OK_BUTTON
    with pytest.raises(ElementNotFound):
        c.find_element_by_id_regex("cancel", 0)


def test_find_by_size_returns_none_when_unmatched() -> None:
    c = _conductor(FakeDriver(SCREEN))

    assert c.find_element_by_size(width=100, height=40, timeout_ms=0).tree_node == OK_BUTTON
    assert c.find_element_by_size(width=500, timeout_ms=0) is None


def test_all_elements_matching() -> None:
    c = _conductor(FakeDriver(SCREEN))

    assert c.all_elements_matching(text_matches("OK")) == [OK_BUTTON]


def test_tap_dispatch() -> None:
    driver = FakeDriver(SCREEN)
    c = _conductor(driver)

    c.tap(5, 6, retry_if_no_change=False)
    c.tap(Point(7, 8), retry_if_no_change=False)
    c.tap(OK_BUTTON, retry_if_no_change=False)

    assert driver.taps == [Point(5, 6), Point(7, 8), Point(50, 20)]
    with pytest.raises(TypeError):
        c.tap(5)


def test_actions_delegate_then_settle() -> None:
    clock = FakeClock()
    driver = FakeDriver(SCREEN)
    c = _conductor(driver, clock)

    c.input_text("hello")
    c.scroll_vertical()
    c.back_press()
    c.launch_app("com.example.app")

    assert driver.calls == [
        ("input_text", "hello"),
        ("scroll_vertical",),
        ("back_press",),
        ("launch_app", "com.example.app"),
    ]
    assert driver.captures == 8
    assert clock.sleeps == [1.0] * 4


def test_view_hierarchy_does_not_wait() -> None:
    clock = FakeClock()
    driver = FakeDriver(SCREEN)

    assert _conductor(driver, clock).view_hierarchy() == SCREEN
    assert driver.captures == 1
    assert clock.sleeps == []


def test_passthrough_and_close() -> None:
    driver = FakeDriver(SCREEN)

    with _conductor(driver) as c:
        assert c.device_name() == "Fake Device"
        assert c.device_info().serial == "FAKE"
        c.close()

    assert driver.closed == 1


def test_invalid_config_rejected() -> None:
    with pytest.raises(ValueError):
        Conductor(FakeDriver(SCREEN), fast_config(tap_attempts=0))


def test_android_factory_opens_adb_driver(monkeypatch) -> None:
    created = []

    def make_device(serial, **kwargs):
        device = FakeDevice(serial, **kwargs)
        created.append(device)
        return device

    monkeypatch.setattr(conductor_module, "Device", make_device)

    c = Conductor.android("emulator-5556", config=fast_config())

    assert c.device_name() == "Android Device (emulator-5556)"
    assert created[0].kwargs["adb_path"] == "adb"


def test_text_on_node_without_bounds_is_not_found() -> None:
    screen = TreeNode(children=(TreeNode(id="x", text="OK"),))

    with pytest.raises(ElementNotFound) as excinfo:
        _conductor(FakeDriver(screen)).find_element_by_text("OK", 0)

    assert excinfo.value.hierarchy == screen


def test_tap_accepts_coordinate_tuple() -> None:
    driver = FakeDriver(SCREEN)

    _conductor(driver).tap((50, 20), retry_if_no_change=False)

    assert driver.taps == [Point(50, 20)]
