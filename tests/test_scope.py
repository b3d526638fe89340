import pytest

from winget_types.installer.scope import Scope, ScopeParseError


def test_parse_and_display_round_trip():
    for scope in Scope:
        assert Scope.parse(str(scope)) is scope
    assert str(Scope.USER) == "user"
    assert str(Scope.MACHINE) == "machine"


def test_parse_is_case_sensitive():
    with pytest.raises(ScopeParseError):
        Scope.parse("User")


def test_parse_unknown():
    with pytest.raises(ScopeParseError):
        Scope.parse("global")


def test_predicates():
    assert Scope.USER.is_user()
    assert not Scope.USER.is_machine()
    assert Scope.MACHINE.is_machine()
    assert not Scope.MACHINE.is_user()


def test_find_in_ignores_case():
    assert Scope.find_in("/ALLUSERS") is Scope.USER
    assert Scope.find_in("--Machine") is Scope.MACHINE


def test_find_in_bytes():
    assert Scope.find_in(b"perMachine=1") is Scope.MACHINE


def test_find_in_prefers_user():
    assert Scope.find_in("machine or user") is Scope.USER


def test_find_in_nothing():
    assert Scope.find_in("/quiet") is None
    assert Scope.find_in("") is None