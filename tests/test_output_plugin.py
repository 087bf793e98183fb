import pytest

from asciiviz.audio_errors import AudioError, AudioResult
from asciiviz.output_plugin import (
    OUTPUT_PLUGIN_VERSION,
    Object3DInfo,
    OutputDescription,
    OutputState,
)


def _noop(*args):
    return AudioResult.OK


def _required():
    return dict(
        get_num_drivers=_noop,
        get_driver_info=_noop,
        init=_noop,
        close=_noop,
    )


def test_plugin_version_accepted_by_description():
    desc = OutputDescription(name="null", api_version=3, **_required())
    assert desc.api_version == 3
    assert OUTPUT_PLUGIN_VERSION == 3


def test_description_defaults_to_current_api_version():
    desc = OutputDescription(name="null", **_required())
    assert desc.api_version == OUTPUT_PLUGIN_VERSION
    assert desc.polling is False


def test_description_missing_required_callback():
    callbacks = _required()
    del callbacks["init"]
    with pytest.raises(ValueError, match="init"):
        OutputDescription(name="broken", **callbacks)


def test_polling_description_needs_position_and_lock():
    with pytest.raises(ValueError, match="get_position"):
        OutputDescription(name="poll", polling=True, **_required())
    desc = OutputDescription(
        name="poll", polling=True, get_position=_noop, lock=_noop, **_required()
    )
    assert desc.lock is _noop


def test_description_wrong_api_version():
    with pytest.raises(AudioError) as info:
        OutputDescription(name="old", api_version=OUTPUT_PLUGIN_VERSION - 1, **_required())
    assert info.value.result == AudioResult.PLUGIN_VERSION


def test_read_from_mixer_passes_state_and_arguments():
    calls = []

    def mix(state, buffer, length):
        calls.append((state, length))
        buffer[:length] = [1.0] * length
        return AudioResult.OK

    state = OutputState(readfrommixer=mix)
    buf = [0.0] * 4
    assert state.read_from_mixer(buf, 2) == AudioResult.OK
    assert calls == [(state, 2)]
    assert buf == [1.0, 1.0, 0.0, 0.0]


def test_read_from_mixer_error_raises():
    state = OutputState(readfrommixer=lambda s, b, n: AudioResult.OUTPUT_INIT)
    with pytest.raises(AudioError) as info:
        state.read_from_mixer([], 0)
    assert info.value.result == AudioResult.OUTPUT_INIT


def test_missing_hooks_are_unsupported():
    state = OutputState()
    with pytest.raises(AudioError) as info:
        state.request_reset()
    assert info.value.result == AudioResult.UNSUPPORTED
    with pytest.raises(AudioError):
        state.copy_port(0, [], 0)


def test_alloc_reports_call_site():
    seen = []

    def allocator(size, align, file, line):
        seen.append((size, align, file, line))
        return bytearray(size)

    state = OutputState(allocator=allocator)
    block = state.alloc(16, 8)
    assert len(block) == 16
    size, align, file, line = seen[0]
    assert (size, align) == (16, 8)
    assert file == __file__
    assert line > 0


def test_alloc_failure_raises_memory_error():
    state = OutputState(allocator=lambda size, align, file, line: None)
    with pytest.raises(MemoryError):
        state.alloc(4, 4)


def test_alloc_rejects_bad_arguments():
    state = OutputState()
    with pytest.raises(ValueError):
        state.alloc(-1, 4)
    with pytest.raises(ValueError):
        state.alloc(4, 0)


def test_free_receives_block():
    freed = []
    state = OutputState(deallocator=lambda block, file, line: freed.append(block))
    block = state.alloc(3, 1)
    state.free(block)
    assert freed == [block]


def test_log_formats_message():
    records = []
    state = OutputState(logger=lambda *rec: records.append(rec))
    state.log(2, "MyOutput::init", "rate %d channels %d", 48000, 2)
    level, file, line, function, message = records[0]
    assert level == 2
    assert function == "MyOutput::init"
    assert message == "rate 48000 channels 2"
    assert file == __file__


def test_copy_port_and_request_reset_forward_state():
    calls = []
    state = OutputState(
        copyport=lambda s, pid, buf, n: calls.append(("copy", s, pid, n)),
        requestreset=lambda s: calls.append(("reset", s)),
    )
    assert state.copy_port(5, [], 10) == AudioResult.OK
    assert state.request_reset() == AudioResult.OK
    assert calls == [("copy", state, 5, 10), ("reset", state)]


def test_plugin_data_round_trip():
    state = OutputState(plugin_data={"device": "null"})
    assert state.plugin_data["device"] == "null"


def test_attenuated_full_gain_is_identity():
    info = Object3DInfo(buffer=[0.5, -0.25, 1.0])
    assert info.buffer_length == 3
    assert info.attenuated() == [0.5, -0.25, 1.0]


def test_attenuated_zero_gain_is_silent():
    info = Object3DInfo(buffer=[0.5, -0.25, 1.0], gain=0.0)
    assert all(sample == 0 for sample in info.attenuated())


def test_attenuated_respects_buffer_length():
    info = Object3DInfo(buffer=[1.0, 1.0, 1.0, 1.0], buffer_length=2, gain=0.5)
    assert info.attenuated() == [0.5, 0.5]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"gain": 1.5},
        {"gain": -0.1},
        {"spread": 361.0},
        {"priority": 2.0},
        {"buffer_length": 9},
    ],
)
def test_object3d_rejects_out_of_range(kwargs):
    with pytest.raises(ValueError):
        Object3DInfo(buffer=[0.0, 0.0], **kwargs)