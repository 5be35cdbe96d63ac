from __future__ import annotations

import pytest

from engine.core.frame_clock import FrameClock


class _Counter:
    def __init__(self) -> None:
        self.dts: list[float] = []

    def tick(self, dt: float) -> None:
        self.dts.append(dt)


def test_fixed_step_accumulates() -> None:
    c = _Counter()
    clock = FrameClock([c], step=0.25)
    assert clock.tick(0.125) == 0
    assert clock.tick(0.125) == 1
    assert clock.tick(0.5) == 2
    assert c.dts == [0.25, 0.25, 0.25]
    assert clock.ticks == 3


def test_catchup_is_bounded() -> None:
    c = _Counter()
    clock = FrameClock([c], step=0.25, max_catchup=3)
    assert clock.tick(10.0) == 3
    # 残りの遅延は破棄される
    assert clock.tick(0.0) == 0


def test_variable_step_passes_dt_through() -> None:
    a, b = _Counter(), _Counter()
    clock = FrameClock([a, b])
    clock.tick(0.1)
    assert a.dts == [0.1] and b.dts == [0.1]


def test_order_is_fixed() -> None:
    log: list[str] = []

    class _T:
        def __init__(self, name: str) -> None:
            self.name = name

        def tick(self, dt: float) -> None:
            log.append(self.name)

    FrameClock([_T("scene"), _T("hud")], step=0.5).tick(1.0)
    assert log == ["scene", "hud", "scene", "hud"]


def test_invalid_step() -> None:
    with pytest.raises(ValueError):
        FrameClock([], step=0.0)
