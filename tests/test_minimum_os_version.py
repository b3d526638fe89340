import pytest

from winget_types.installer.minimum_os_version import (
    MinimumOSVersion,
    MinimumOSVersionError,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10.0.17763.0", MinimumOSVersion(10, 0, 17763, 0)),
        ("11", MinimumOSVersion(11, 0, 0, 0)),
        ("10.1", MinimumOSVersion(10, 1, 0, 0)),
        ("0", MinimumOSVersion(0, 0, 0, 0)),
        ("65535.65535.65535.65535", MinimumOSVersion(65535, 65535, 65535, 65535)),
    ],
)
def test_valid_minimum_os_version(text, expected):
    assert MinimumOSVersion.parse(text) == expected


def test_minimum_os_version_display():
    version = "1.2.3.4"
    assert str(MinimumOSVersion(1, 2, 3, 4)) == version
    assert str(MinimumOSVersion.parse(version)) == version


def test_accessors():
    version = MinimumOSVersion(10, 0, 17763, 5)
    assert (version.major, version.minor, version.patch, version.build) == (
        10,
        0,
        17763,
        5,
    )


def test_default_is_zero():
    assert MinimumOSVersion() == MinimumOSVersion(0, 0, 0, 0)
    assert str(MinimumOSVersion()) == "0.0.0.0"


@pytest.mark.parametrize(
    "text",
    ["", "a", "65536", "1.2.3.4.5", "1..2", "-1", "1. 2", "10.0.x"],
)
def test_invalid_minimum_os_version(text):
    with pytest.raises(MinimumOSVersionError):
        MinimumOSVersion.parse(text)


def test_ordering():
    assert MinimumOSVersion(10, 0, 0, 0) < MinimumOSVersion(10, 0, 1, 0)
    assert MinimumOSVersion(11, 0, 0, 0) > MinimumOSVersion(10, 9, 9, 9)


def test_out_of_range_construction():
    with pytest.raises(MinimumOSVersionError):
        MinimumOSVersion(70000, 0, 0, 0)