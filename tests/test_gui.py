from types import SimpleNamespace

import pytest

from jotpad.gui import _ctrl_held, _cursor_position, _event_delta


@pytest.mark.parametrize("num, sign", [(4, 1), (5, -1)])
def test_button_wheel_delta_sign(num, sign):
    delta = _event_delta(SimpleNamespace(num=num, delta=0))
    assert delta * sign > 0


def test_mousewheel_delta_passes_through():
    assert _event_delta(SimpleNamespace(num="??", delta=-240)) == -240


def test_missing_delta_is_zero():
    assert _event_delta(SimpleNamespace(num=1, delta=0)) == 0


def test_ctrl_alone_is_held():
    assert _ctrl_held(SimpleNamespace(state=0x4)) is True


@pytest.mark.parametrize("state", [0, 0x1, 0x5, 0xC])
def test_other_modifier_states_not_ctrl(state):
    assert _ctrl_held(SimpleNamespace(state=state)) is False


def test_non_int_state_not_ctrl():
    assert _ctrl_held(SimpleNamespace(state="??")) is False


def test_cursor_position_is_zero_based():
    assert _cursor_position("1.0") == (0, 0)
    assert _cursor_position("3.4") == (2, 4)