from __future__ import annotations

from conductor.automation.settle import SettleDetector
from conductor.automation.tap_executor import TapExecutor
from conductor.hierarchy.models import Point, UiElement
from fakes import FakeClock, FakeDriver, button, root

HOME = root(button("ok", "OK", (0, 0, 100, 40)))
NEXT = root(button("title", "Next screen", (0, 0, 300, 40)))


def _executor(driver: FakeDriver, clock: FakeClock) -> TapExecutor:
    settle = SettleDetector(driver, grace_ms=1000, interval_ms=200, max_samples=10, sleep=clock.sleep)
    return TapExecutor(driver, settle, attempts=3, visibility_attempts=10, visibility_interval_ms=1000, sleep=clock.sleep)


def _navigate_on_tap(number: int):
    def on_tap(driver: FakeDriver, point: Point) -> None:
        if len(driver.taps) == number:
            driver.hierarchy = NEXT

    return on_tap


def test_unchanged_ui_gets_three_taps_plus_one_final_attempt() -> None:
    driver = FakeDriver(HOME)

    result = _executor(driver, FakeClock()).tap_point(10, 10, retry_if_no_change=True)

    assert driver.taps == [Point(10, 10)] * 4
    assert result.taps == 4
    assert result.changed is False


def test_without_retry_taps_once() -> None:
    driver = FakeDriver(HOME)

    result = _executor(driver, FakeClock()).tap_point(10, 10, retry_if_no_change=False)

    assert len(driver.taps) == 1
    assert result.changed is False


def test_change_after_first_tap_stops_immediately() -> None:
    driver = FakeDriver(HOME, on_tap=_navigate_on_tap(1))

    result = _executor(driver, FakeClock()).tap_point(50, 20)

    assert len(driver.taps) == 1
    assert result.changed is True
    assert result.taps == 1


def test_change_after_second_tap() -> None:
    driver = FakeDriver(HOME, on_tap=_navigate_on_tap(2))

    result = _executor(driver, FakeClock()).tap_point(50, 20)

    assert len(driver.taps) == 2
    assert result.changed is True


def test_final_attempt_uses_fresh_baseline() -> None:
    driver = FakeDriver(HOME, on_tap=_navigate_on_tap(4))

    result = _executor(driver, FakeClock()).tap_point(50, 20)

    assert len(driver.taps) == 4
    assert result.changed is True


def test_tap_element_taps_center_once_visible() -> None:
    ok = button("ok", "OK", (0, 0, 100, 40))
    element = UiElement.from_tree_node(ok)
    clock = FakeClock()
    driver = FakeDriver(root(ok), script=[root(), root()], on_tap=_navigate_on_tap(1))

    result = _executor(driver, clock).tap_element(element)

    assert driver.taps == [Point(50, 20)]
    assert result.changed is True
    assert clock.sleeps[:2] == [1.0, 1.0]


def test_tap_element_proceeds_when_never_visible() -> None:
    element = UiElement.from_tree_node(button("ok", "OK", (0, 0, 100, 40)))
    clock = FakeClock()
    driver = FakeDriver(root(), on_tap=_navigate_on_tap(1))
    executor = _executor(driver, clock)

    assert executor.wait_until_visible(element) is False
    assert driver.captures == 10
    assert clock.sleeps == [1.0] * 9

    executor.tap_element(element)
    assert driver.taps == [Point(50, 20)]


def test_tap_element_does_not_wait_when_only_children_changed() -> None:
    row_a = button("row", "Inbox", (0, 100, 1080, 200), button("badge", "3 unread", (900, 120, 1000, 180)))
    row_b = button("row", "Inbox", (0, 100, 1080, 200), button("badge", "4 unread", (900, 120, 1000, 180)))
    clock = FakeClock()
    driver = FakeDriver(root(row_b), on_tap=_navigate_on_tap(1))

    result = _executor(driver, clock).tap_element(UiElement.from_tree_node(row_a))

    assert driver.taps == [Point(540, 150)]
    assert result.changed is True
    assert clock.sleeps == [1.0]
