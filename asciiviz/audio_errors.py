"""Result codes reported by the audio engine and their English explanations."""

from __future__ import annotations

from enum import IntEnum, auto


class AudioResult(IntEnum):
    """Outcome of an audio engine call; anything but OK is an error."""

    OK = 0
    BADCOMMAND = auto()
    CHANNEL_ALLOC = auto()
    CHANNEL_STOLEN = auto()
    DMA = auto()
    DSP_CONNECTION = auto()
    DSP_DONTPROCESS = auto()
    DSP_FORMAT = auto()
    DSP_INUSE = auto()
    DSP_NOTFOUND = auto()
    DSP_RESERVED = auto()
    DSP_SILENCE = auto()
    DSP_TYPE = auto()
    FILE_BAD = auto()
    FILE_COULDNOTSEEK = auto()
    FILE_DISKEJECTED = auto()
    FILE_EOF = auto()
    FILE_ENDOFDATA = auto()
    FILE_NOTFOUND = auto()
    FORMAT = auto()
    HEADER_MISMATCH = auto()
    HTTP = auto()
    HTTP_ACCESS = auto()
    HTTP_PROXY_AUTH = auto()
    HTTP_SERVER_ERROR = auto()
    HTTP_TIMEOUT = auto()
    INITIALIZATION = auto()
    INITIALIZED = auto()
    INTERNAL = auto()
    INVALID_FLOAT = auto()
    INVALID_HANDLE = auto()
    INVALID_PARAM = auto()
    INVALID_POSITION = auto()
    INVALID_SPEAKER = auto()
    INVALID_SYNCPOINT = auto()
    INVALID_THREAD = auto()
    INVALID_VECTOR = auto()
    MAXAUDIBLE = auto()
    MEMORY = auto()
    MEMORY_CANTPOINT = auto()
    NEEDS3D = auto()
    NEEDSHARDWARE = auto()
    NET_CONNECT = auto()
    NET_SOCKET_ERROR = auto()
    NET_URL = auto()
    NET_WOULD_BLOCK = auto()
    NOTREADY = auto()
    OUTPUT_ALLOCATED = auto()
    OUTPUT_CREATEBUFFER = auto()
    OUTPUT_DRIVERCALL = auto()
    OUTPUT_FORMAT = auto()
    OUTPUT_INIT = auto()
    OUTPUT_NODRIVERS = auto()
    PLUGIN = auto()
    PLUGIN_MISSING = auto()
    PLUGIN_RESOURCE = auto()
    PLUGIN_VERSION = auto()
    RECORD = auto()
    REVERB_CHANNELGROUP = auto()
    REVERB_INSTANCE = auto()
    SUBSOUNDS = auto()
    SUBSOUND_ALLOCATED = auto()
    SUBSOUND_CANTMOVE = auto()
    TAGNOTFOUND = auto()
    TOOMANYCHANNELS = auto()
    TRUNCATED = auto()
    UNIMPLEMENTED = auto()
    UNINITIALIZED = auto()
    UNSUPPORTED = auto()
    VERSION = auto()
    EVENT_ALREADY_LOADED = auto()
    EVENT_LIVEUPDATE_BUSY = auto()
    EVENT_LIVEUPDATE_MISMATCH = auto()
    EVENT_LIVEUPDATE_TIMEOUT = auto()
    EVENT_NOTFOUND = auto()
    STUDIO_UNINITIALIZED = auto()
    STUDIO_NOT_LOADED = auto()
    INVALID_STRING = auto()
    ALREADY_LOCKED = auto()
    NOT_LOCKED = auto()
    RECORD_DISCONNECTED = auto()
    TOOMANYSAMPLES = auto()


UNKNOWN_ERROR = "Unknown error."

_R = AudioResult

_MESSAGES: dict[AudioResult, str] = {
    _R.OK: "No errors.",
    _R.BADCOMMAND: "Tried to call a function on a data type that does not allow this type of functionality (ie calling Sound::lock on a streaming sound).",
    _R.CHANNEL_ALLOC: "Error trying to allocate a channel.",
    _R.CHANNEL_STOLEN: "The specified channel has been reused to play another sound.",
    _R.DMA: "DMA Failure.  See debug output for more information.",
    _R.DSP_CONNECTION: "DSP connection error.  Connection possibly caused a cyclic dependency or connected dsps with incompatible buffer counts.",
    _R.DSP_DONTPROCESS: "DSP return code from a DSP process query callback.  Tells mixer not to call the process callback and therefore not consume CPU.  Use this to optimize the DSP graph.",
    _R.DSP_FORMAT: "DSP Format error.  A DSP unit may have attempted to connect to this network with the wrong format, or a matrix may have been set with the wrong size if the target unit has a specified channel map.",
    _R.DSP_INUSE: "DSP is already in the mixer's DSP network. It must be removed before being reinserted or released.",
    _R.DSP_NOTFOUND: "DSP connection error.  Couldn't find the DSP unit specified.",
    _R.DSP_RESERVED: "DSP operation error.  Cannot perform operation on this DSP as it is reserved by the system.",
    _R.DSP_SILENCE: "DSP return code from a DSP process query callback.  Tells mixer silence would be produced from read, so go idle and not consume CPU.  Use this to optimize the DSP graph.",
    _R.DSP_TYPE: "DSP operation cannot be performed on a DSP of this type.",
    _R.FILE_BAD: "Error loading file.",
    _R.FILE_COULDNOTSEEK: "Couldn't perform seek operation.  This is a limitation of the medium (ie netstreams) or the file format.",
    _R.FILE_DISKEJECTED: "Media was ejected while reading.",
    _R.FILE_EOF: "End of file unexpectedly reached while trying to read essential data (truncated?).",
    _R.FILE_ENDOFDATA: "End of current chunk reached while trying to read data.",
    _R.FILE_NOTFOUND: "File not found.",
    _R.FORMAT: "Unsupported file or audio format.",
    _R.HEADER_MISMATCH: "There is a version mismatch between the FMOD header and either the FMOD Studio library or the FMOD Low Level library.",
    _R.HTTP: "A HTTP error occurred. This is a catch-all for HTTP errors not listed elsewhere.",
    _R.HTTP_ACCESS: "The specified resource requires authentication or is forbidden.",
    _R.HTTP_PROXY_AUTH: "Proxy authentication is required to access the specified resource.",
    _R.HTTP_SERVER_ERROR: "A HTTP server error occurred.",
    _R.HTTP_TIMEOUT: "The HTTP request timed out.",
    _R.INITIALIZATION: "FMOD was not initialized correctly to support this function.",
    _R.INITIALIZED: "Cannot call this command after System::init.",
    _R.INTERNAL: "An error occurred that wasn't supposed to.  Contact support.",
    _R.INVALID_FLOAT: "Value passed in was a NaN, Inf or denormalized float.",
    _R.INVALID_HANDLE: "An invalid object handle was used.",
    _R.INVALID_PARAM: "An invalid parameter was passed to this function.",
    _R.INVALID_POSITION: "An invalid seek position was passed to this function.",
    _R.INVALID_SPEAKER: "An invalid speaker was passed to this function based on the current speaker mode.",
    _R.INVALID_SYNCPOINT: "The syncpoint did not come from this sound handle.",
    _R.INVALID_THREAD: "Tried to call a function on a thread that is not supported.",
    _R.INVALID_VECTOR: "The vectors passed in are not unit length, or perpendicular.",
    _R.MAXAUDIBLE: "Reached maximum audible playback count for this sound's soundgroup.",
    _R.MEMORY: "Not enough memory or resources.",
    _R.MEMORY_CANTPOINT: "Can't use FMOD_OPENMEMORY_POINT on non PCM source data, or non mp3/xma/adpcm data if FMOD_CREATECOMPRESSEDSAMPLE was used.",
    _R.NEEDS3D: "Tried to call a command on a 2d sound when the command was meant for 3d sound.",
    _R.NEEDSHARDWARE: "Tried to use a feature that requires hardware support.",
    _R.NET_CONNECT: "Couldn't connect to the specified host.",
    _R.NET_SOCKET_ERROR: "A socket error occurred.  This is a catch-all for socket-related errors not listed elsewhere.",
    _R.NET_URL: "The specified URL couldn't be resolved.",
    _R.NET_WOULD_BLOCK: "Operation on a non-blocking socket could not complete immediately.",
    _R.NOTREADY: "Operation could not be performed because specified sound/DSP connection is not ready.",
    _R.OUTPUT_ALLOCATED: "Error initializing output device, but more specifically, the output device is already in use and cannot be reused.",
    _R.OUTPUT_CREATEBUFFER: "Error creating hardware sound buffer.",
    _R.OUTPUT_DRIVERCALL: "A call to a standard soundcard driver failed, which could possibly mean a bug in the driver or resources were missing or exhausted.",
    _R.OUTPUT_FORMAT: "Soundcard does not support the specified format.",
    _R.OUTPUT_INIT: "Error initializing output device.",
    _R.OUTPUT_NODRIVERS: "The output device has no drivers installed.  If pre-init, FMOD_OUTPUT_NOSOUND is selected as the output mode.  If post-init, the function just fails.",
    _R.PLUGIN: "An unspecified error has been returned from a plugin.",
    _R.PLUGIN_MISSING: "A requested output, dsp unit type or codec was not available.",
    _R.PLUGIN_RESOURCE: "A resource that the plugin requires cannot be found. (ie the DLS file for MIDI playback)",
    _R.PLUGIN_VERSION: "A plugin was built with an unsupported SDK version.",
    _R.RECORD: "An error occurred trying to initialize the recording device.",
    _R.REVERB_CHANNELGROUP: "Reverb properties cannot be set on this channel because a parent channelgroup owns the reverb connection.",
    _R.REVERB_INSTANCE: "Specified instance in FMOD_REVERB_PROPERTIES couldn't be set. Most likely because it is an invalid instance number or the reverb doesn't exist.",
    _R.SUBSOUNDS: "The error occurred because the sound referenced contains subsounds when it shouldn't have, or it doesn't contain subsounds when it should have.  The operation may also not be able to be performed on a parent sound.",
    _R.SUBSOUND_ALLOCATED: "This subsound is already being used by another sound, you cannot have more than one parent to a sound.  Null out the other parent's entry first.",
    _R.SUBSOUND_CANTMOVE: "Shared subsounds cannot be replaced or moved from their parent stream, such as when the parent stream is an FSB file.",
    _R.TAGNOTFOUND: "The specified tag could not be found or there are no tags.",
    _R.TOOMANYCHANNELS: "The sound created exceeds the allowable input channel count.  This can be increased using the 'maxinputchannels' parameter in System::setSoftwareFormat.",
    _R.TRUNCATED: "The retrieved string is too long to fit in the supplied buffer and has been truncated.",
    _R.UNIMPLEMENTED: "Something in FMOD hasn't been implemented when it should be! contact support!",
    _R.UNINITIALIZED: "This command failed because System::init or System::setDriver was not called.",
    _R.UNSUPPORTED: "A command issued was not supported by this object.  Possibly a plugin without certain callbacks specified.",
    _R.VERSION: "The version number of this file format is not supported.",
    _R.EVENT_ALREADY_LOADED: "The specified bank has already been loaded.",
    _R.EVENT_LIVEUPDATE_BUSY: "The live update connection failed due to the game already being connected.",
    _R.EVENT_LIVEUPDATE_MISMATCH: "The live update connection failed due to the game data being out of sync with the tool.",
    _R.EVENT_LIVEUPDATE_TIMEOUT: "The live update connection timed out.",
    _R.EVENT_NOTFOUND: "The requested event, bus or vca could not be found.",
    _R.STUDIO_UNINITIALIZED: "The Studio::System object is not yet initialized.",
    _R.STUDIO_NOT_LOADED: "The specified resource is not loaded, so it can't be unloaded.",
    _R.INVALID_STRING: "An invalid string was passed to this function.",
    _R.ALREADY_LOCKED: "The specified resource is already locked.",
    _R.NOT_LOCKED: "The specified resource is not locked, so it can't be unlocked.",
    _R.RECORD_DISCONNECTED: "The specified recording driver has been disconnected.",
    _R.TOOMANYSAMPLES: "The length provided exceeds the allowable limit.",
}


def _as_result(result: int) -> AudioResult | int:
    try:
        return AudioResult(result)
    except ValueError:
        return result


def error_string(result: int) -> str:
    """English explanation of a result code; unknown codes get a generic text."""
    code = _as_result(result)
    if isinstance(code, AudioResult):
        return _MESSAGES.get(code, UNKNOWN_ERROR)
    return UNKNOWN_ERROR


class AudioError(Exception):
    """Raised when an audio engine call reports anything other than OK."""

    def __init__(self, result: int) -> None:
        self.result = _as_result(result)
        self.message = error_string(result)
        super().__init__(self.message)

    def __str__(self) -> str:
        name = self.result.name if isinstance(self.result, AudioResult) else str(self.result)
        return f"{name}: {self.message}"


def check(result: int) -> AudioResult:
    """Return OK unchanged, raise AudioError for every other code."""
    code = _as_result(result)
    if code != AudioResult.OK:
        raise AudioError(result)
    return AudioResult.OK