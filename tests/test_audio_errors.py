import pytest

from asciiviz.audio_errors import (
    UNKNOWN_ERROR,
    AudioError,
    AudioResult,
    check,
    error_string,
)


def test_ok_message():
    assert error_string(AudioResult.OK) == "No errors."


def test_file_not_found_message():
    assert error_string(AudioResult.FILE_NOTFOUND) == "File not found."


def test_last_code_message():
    assert (
        error_string(AudioResult.TOOMANYSAMPLES)
        == "The length provided exceeds the allowable limit."
    )


def test_unknown_code_gives_generic_message():
    assert error_string(9999) == "Unknown error."
    assert error_string(-1) == UNKNOWN_ERROR


def test_plain_int_matches_enum_member():
    code = AudioResult.INVALID_PARAM
    assert error_string(int(code)) == error_string(code)


def test_every_member_has_its_own_message():
    messages = [error_string(member) for member in AudioResult]
    assert UNKNOWN_ERROR not in messages
    assert len(set(messages)) == len(messages)


def test_ok_is_zero_and_codes_are_consecutive():
    values = [int(member) for member in AudioResult]
    assert values[0] == 0
    assert values == list(range(len(values)))
    assert check(values[0]) is AudioResult.OK
    assert error_string(len(values)) == UNKNOWN_ERROR


def test_check_returns_ok():
    assert check(AudioResult.OK) is AudioResult.OK
    assert check(0) is AudioResult.OK


def test_check_raises_for_error():
    with pytest.raises(AudioError) as info:
        check(AudioResult.MEMORY)
    assert info.value.result is AudioResult.MEMORY
    assert info.value.message == "Not enough memory or resources."
    assert "MEMORY" in str(info.value)


def test_check_raises_for_unknown_code():
    with pytest.raises(AudioError) as info:
        check(12345)
    assert info.value.result == 12345
    assert info.value.message == UNKNOWN_ERROR


@pytest.mark.parametrize(
    "member", [m for m in AudioResult if m is not AudioResult.OK]
)
def test_check_raises_for_every_error_member(member):
    with pytest.raises(AudioError) as info:
        check(member)
    assert info.value.message == error_string(member)