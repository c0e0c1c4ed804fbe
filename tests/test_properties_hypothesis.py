import math

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from common.wave import sine_offset
from engine.core.node import CanvasNode
from motion.config import AnimationConfig
from motion.idle import IdleMotion

finite = st.floats(-1e3, 1e3, allow_nan=False, allow_infinity=False)
deltas = st.lists(st.floats(0.0, 0.5, allow_nan=False), min_size=1, max_size=20)


def _motion(px, py, rot):
    n = CanvasNode((10, 10), position=(px, py), rotation_degrees=rot, scale=(1.0, 1.0))
    cfg = AnimationConfig(
        animate_rotation=True,
        animate_scale=True,
        position_amplitude=(7.0, -3.0),
        rotation_amplitude=4.0,
        scale_amplitude=(0.2, 0.1),
        position_frequency=0.9,
        rotation_frequency=0.3,
        scale_frequency=1.7,
    )
    m = IdleMotion(n, cfg)
    m.on_ready()
    return n, m


@given(amp=finite, freq=finite)
def test_offset_zero_at_origin(amp, freq):
    assert sine_offset(amp, freq, 0.0) == 0.0


@given(amp=st.floats(-100, 100), freq=st.floats(-10, 10), t=st.floats(0, 100))
def test_offset_bounded_by_amplitude(amp, freq, t):
    assert abs(sine_offset(amp, freq, t)) <= abs(amp) + 1e-9


@given(px=finite, py=finite, rot=st.floats(-360, 360), dts=deltas)
def test_reset_is_pure_overwrite(px, py, rot, dts):
    n, m = _motion(px, py, rot)
    for dt in dts:
        m.tick(dt)
    t = m.time_elapsed
    m.reset()
    assert n.position == (float(px), float(py))
    assert n.rotation_degrees == float(rot)
    assert n.scale == (1.0, 1.0)
    assert m.time_elapsed == t


@given(dts=deltas, paused_dts=deltas)
def test_paused_ticks_change_nothing(dts, paused_dts):
    n, m = _motion(10.0, 20.0, 0.0)
    for dt in dts:
        m.tick(dt)
    before = (n.position, n.rotation_degrees, n.scale, m.time_elapsed)
    m.pause()
    for dt in paused_dts:
        m.tick(dt)
    assert (n.position, n.rotation_degrees, n.scale, m.time_elapsed) == before


@given(dts=deltas)
def test_position_follows_formula(dts):
    n, m = _motion(10.0, 20.0, 0.0)
    for dt in dts:
        m.tick(dt)
    s = math.sin(m.time_elapsed * 0.9 * 2 * math.pi)
    assert math.isclose(n.position[0], 10.0 + 7.0 * s, abs_tol=1e-9)
    assert math.isclose(n.position[1], 20.0 - 3.0 * s, abs_tol=1e-9)
