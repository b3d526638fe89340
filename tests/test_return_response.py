import pytest

from winget_types.installer.return_response import ReturnResponse


def test_descriptions():
    assert ReturnResponse.PACKAGE_IN_USE.as_str() == "Package in use"
    assert ReturnResponse.REBOOT_REQUIRED_FOR_INSTALL.as_str() == "Reboot required to install"
    assert ReturnResponse.CUSTOM.as_str() == "Custom"


@pytest.mark.parametrize("member", list(ReturnResponse))
def test_display_matches_description(member):
    parsed = ReturnResponse(member.value)
    assert str(parsed) == parsed.as_str()


@pytest.mark.parametrize("member", list(ReturnResponse))
def test_manifest_value_round_trip(member):
    assert ReturnResponse(member.value) is member


def test_descriptions_are_unique():
    descriptions = {ReturnResponse(member.value).as_str() for member in ReturnResponse}
    assert len(descriptions) == 19


def test_unknown_value():
    with pytest.raises(ValueError):
        ReturnResponse("Package in use")