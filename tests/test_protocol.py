import pytest
import yaml

from winget_types.installer.protocol import (
    EmptyProtocolError,
    Protocol,
    ProtocolError,
    ProtocolTooLongError,
)


def test_protocol_as_text():
    assert str(Protocol("ftp")) == "ftp"
    assert Protocol("ftp").value == "ftp"


def test_serialize_protocol():
    assert yaml.safe_dump(str(Protocol("ftp"))).startswith("ftp\n")


def test_deserialize_protocol():
    assert Protocol(yaml.safe_load("ftp\n")) == Protocol("ftp")


def test_empty_protocol():
    with pytest.raises(EmptyProtocolError):
        Protocol("")


def test_max_length_is_allowed():
    value = "a" * Protocol.MAX_CHAR_LENGTH
    assert str(Protocol(value)) == value


def test_unicode_counted_by_character():
    value = "🦀" * Protocol.MAX_CHAR_LENGTH
    assert len(value.encode("utf-8")) > Protocol.MAX_CHAR_LENGTH
    assert str(Protocol(value)) == value


def test_too_long_protocol():
    with pytest.raises(ProtocolTooLongError) as info:
        Protocol("a" * (Protocol.MAX_CHAR_LENGTH + 1))
    assert info.value.length == Protocol.MAX_CHAR_LENGTH + 1
    assert isinstance(info.value, ProtocolError)


def test_ordering_and_hashing():
    protocols = sorted([Protocol("ldap"), Protocol("ftp")])
    assert [str(p) for p in protocols] == ["ftp", "ldap"]
    assert len({Protocol("ftp"), Protocol("ftp")}) == 1