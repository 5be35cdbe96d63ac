import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from scene.cloud import Cloud
from scene.context import SimulationContext
from scene.windmill import Windmill

_speeds = st.floats(0.5, 15.0, allow_nan=False)


@given(x=st.floats(-450.0, 460.0), y=st.floats(150.0, 280.0), speed=st.floats(0.0, 5.0))
def test_cloud_step(x, y, speed):
    ctx = SimulationContext.seeded(0)
    c = Cloud(x, y, speed=speed)
    c.update(ctx)
    if x + speed > 450.0:
        assert c.x == -450.0
        assert 150.0 <= c.y <= 280.0
    else:
        assert c.x == x + speed
        assert c.y == y


@given(angle=st.floats(0.0, 359.999), speed=_speeds)
def test_windmill_angle_wraps(angle, speed):
    w = Windmill(0.0, 0.0, id=1)
    w.blade_angle = angle
    w.rotation_speed = speed
    w.update(SimulationContext.seeded(0))
    assert 0.0 <= w.blade_angle < 360.0
    assert w.blade_angle == pytest.approx((angle + speed) % 360.0)


@given(ops=st.lists(st.booleans(), max_size=60))
def test_speed_always_within_bounds(ops):
    w = Windmill(0.0, 0.0, id=1)
    for up in ops:
        w.increase_speed() if up else w.decrease_speed()
        assert 0.5 <= w.rotation_speed <= 15.0
