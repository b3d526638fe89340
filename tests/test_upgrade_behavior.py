import pytest

from winget_types.installer.upgrade_behavior import (
    UpgradeBehavior,
    UpgradeBehaviorParseError,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Install", UpgradeBehavior.INSTALL),
        ("UninstallPrevious", UpgradeBehavior.UNINSTALL_PREVIOUS),
        ("Deny", UpgradeBehavior.DENY),
    ],
)
def test_display(text, expected):
    parsed = UpgradeBehavior.parse(text)
    assert parsed is expected
    assert str(parsed) == text


@pytest.mark.parametrize("member", list(UpgradeBehavior))
def test_parse_display_round_trip(member):
    assert UpgradeBehavior.parse(str(member)) is member


@pytest.mark.parametrize("member", list(UpgradeBehavior))
def test_manifest_value_round_trip(member):
    assert UpgradeBehavior(member.value) is member
    assert member.value[0].upper() + member.value[1:] == str(member)


def test_parse_rejects_unknown():
    with pytest.raises(UpgradeBehaviorParseError):
        UpgradeBehavior.parse("install")