import pytest

from winget_types.installer.switches.silent import SilentSwitch, SilentWithProgressSwitch
from winget_types.installer.switches.switch import EmptySwitchError, SwitchTooLongError


@pytest.mark.parametrize("cls", [SilentSwitch, SilentWithProgressSwitch])
def test_round_trip(cls):
    parsed = cls.parse("/S /quiet")
    assert cls.parse(str(parsed)) == parsed
    assert list(parsed) == ["/S", "/quiet"]


@pytest.mark.parametrize("cls", [SilentSwitch, SilentWithProgressSwitch])
def test_limits(cls):
    assert len(cls.parse("a" * 512)) == 1
    with pytest.raises(SwitchTooLongError):
        cls.parse("a" * 513)
    with pytest.raises(EmptySwitchError):
        cls.parse("")


def test_different_switch_kinds_are_not_equal():
    assert (SilentSwitch.parse("/S") == SilentWithProgressSwitch.parse("/S")) is False


def test_push_and_contains():
    switch = SilentSwitch.parse("/S")
    switch.push("/norestart")
    assert switch.contains("/NORESTART")
    assert str(switch) == "/S /norestart"