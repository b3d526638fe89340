import pytest

from winget_types.installer.switches.custom import CustomSwitch
from winget_types.installer.switches.installer_switches import InstallerSwitches
from winget_types.installer.switches.silent import SilentSwitch
from winget_types.installer.switches.switch import LogSwitch, SwitchTooLongError


def test_default_is_empty():
    assert InstallerSwitches().is_empty()
    assert InstallerSwitches().to_dict() == {}


def test_with_silent_is_not_empty():
    switches = InstallerSwitches(silent=SilentSwitch.parse("--silent"))
    assert not switches.is_empty()
    assert switches.to_dict() == {"Silent": "--silent"}


def test_round_trip():
    switches = InstallerSwitches(
        silent=SilentSwitch.parse("/S"),
        log=LogSwitch.parse("/LOG=<LOGPATH>"),
        custom=CustomSwitch.parse("/ALLUSERS, /NoRestart"),
    )
    assert InstallerSwitches.from_dict(switches.to_dict()) == switches


def test_from_dict_builds_typed_switches():
    switches = InstallerSwitches.from_dict({"Custom": "/ALLUSERS", "Unknown": "x"})
    assert switches.custom == CustomSwitch.all_users()
    assert switches.silent is None


def test_from_dict_rejects_non_string():
    with pytest.raises(ValueError):
        InstallerSwitches.from_dict({"Silent": 5})


def test_from_dict_rejects_too_long():
    with pytest.raises(SwitchTooLongError):
        InstallerSwitches.from_dict({"Silent": "a" * 513})


def test_absent_sorts_before_present():
    empty = InstallerSwitches()
    silent = InstallerSwitches(silent=SilentSwitch.parse("--silent"))
    assert empty < silent
    assert sorted([silent, empty]) == [empty, silent]
    assert empty != silent