import pytest

from reflexkit.errors import (
    CodedError,
    ErrorCode,
    ErrorCodes,
    ErrorValue,
    make_error_code,
    raise_error,
)


class NetErrors(ErrorCodes):
    category = "net"
    timeout = ErrorCode("timed out")
    refused = ErrorCode("connection refused")


class DiskErrors(ErrorCodes):
    category = "disk"
    full = ErrorCode("timed out")


def test_values_follow_declaration_order():
    assert NetErrors.value_of(NetErrors.timeout) == 0
    assert NetErrors.value_of(NetErrors.refused) == 1
    category = make_error_code(NetErrors.refused).category
    assert category.message(0) == "timed out"
    assert category.message(1) == "connection refused"


def test_message_round_trip():
    for code in (NetErrors.timeout, NetErrors.refused):
        assert NetErrors.message_of(NetErrors.value_of(code)) == code.message
        assert make_error_code(code).message == code.message


def test_unknown_message():
    assert NetErrors.message_of(99) == "<unknown>"
    assert NetErrors.message_of(-1) == "<unknown>"
    assert make_error_code(NetErrors.timeout).category.message(99) == "<unknown>"


def test_foreign_code_has_no_value():
    assert NetErrors.value_of(DiskErrors.full) == -1
    with pytest.raises(ValueError):
        NetErrors.make(DiskErrors.full)
    assert not (make_error_code(DiskErrors.full) == NetErrors.timeout)


def test_make_compares_with_code():
    err = make_error_code(NetErrors.refused)
    assert err == NetErrors.make(NetErrors.refused)
    assert err == NetErrors.refused
    assert not (err == NetErrors.timeout)
    assert err.message == "connection refused"
    assert err.category.name() == "net"
    assert err.category.message(NetErrors.value_of(NetErrors.timeout)) == "timed out"


def test_categories_distinguish_same_message():
    assert not (make_error_code(DiskErrors.full) == NetErrors.timeout)
    assert make_error_code(DiskErrors.full).category is not make_error_code(NetErrors.timeout).category


def test_make_error_code_matches_class_make():
    assert make_error_code(NetErrors.timeout) == NetErrors.make(NetErrors.timeout)
    assert isinstance(make_error_code(NetErrors.timeout), ErrorValue)


def test_raise_carries_code():
    with pytest.raises(CodedError) as info:
        NetErrors.raise_(NetErrors.timeout)
    assert info.value.code == NetErrors.timeout
    assert info.value.code == make_error_code(NetErrors.timeout)
    assert str(info.value) == "timed out"


def test_raise_error_function():
    with pytest.raises(CodedError) as info:
        raise_error(NetErrors.refused)
    assert info.value.code == NetErrors.refused


def test_missing_category_rejected():
    with pytest.raises(TypeError):

        class Broken(ErrorCodes):
            oops = ErrorCode("oops")


def test_unowned_code_rejected():
    with pytest.raises(TypeError):
        make_error_code(ErrorCode("loose"))