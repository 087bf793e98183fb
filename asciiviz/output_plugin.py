"""Interface between the mixer and a custom audio output plugin.

An output plugin describes itself with an :class:`OutputDescription` holding
the callbacks the mixer drives. Every callback receives an
:class:`OutputState`. Through that state the plugin keeps its own data and
reaches back into the system to mix, allocate, log, copy ports or ask for a
reset.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from asciiviz.audio_errors import AudioError, AudioResult, check

OUTPUT_PLUGIN_VERSION = 3

_log = logging.getLogger(__name__)

Callback = Optional[Callable[..., Any]]

_REQUIRED = ("get_num_drivers", "get_driver_info", "init", "close")
_REQUIRED_WHEN_POLLING = ("get_position", "lock")


@dataclass(kw_only=True)
class OutputDescription:
    """Name, version and callbacks of an output plugin.

    ``get_num_drivers``, ``get_driver_info``, ``init`` and ``close`` are
    always required. ``get_position`` and ``lock`` are also required when
    ``polling`` is true, because the mixer thread then calls them itself.
    """

    name: str
    version: int = 0
    polling: bool = False
    api_version: int = OUTPUT_PLUGIN_VERSION
    get_num_drivers: Callback = None
    get_driver_info: Callback = None
    init: Callback = None
    start: Callback = None
    stop: Callback = None
    close: Callback = None
    update: Callback = None
    get_handle: Callback = None
    get_position: Callback = None
    lock: Callback = None
    unlock: Callback = None
    mixer: Callback = None
    object3d_get_info: Callback = None
    object3d_alloc: Callback = None
    object3d_free: Callback = None
    object3d_update: Callback = None
    open_port: Callback = None
    close_port: Callback = None

    def __post_init__(self) -> None:
        if self.api_version != OUTPUT_PLUGIN_VERSION:
            raise AudioError(AudioResult.PLUGIN_VERSION)
        required = _REQUIRED + (_REQUIRED_WHEN_POLLING if self.polling else ())
        missing = [name for name in required if getattr(self, name) is None]
        if missing:
            raise ValueError(
                f"output plugin {self.name!r} is missing required callbacks: "
                + ", ".join(missing)
            )


def _call_site() -> tuple[str, int]:
    """File and line of the code that called the OutputState method."""
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "<unknown>", 0
        return caller.f_code.co_filename, caller.f_lineno
    finally:
        del frame


def _default_alloc(size: int, align: int, file: str, line: int) -> bytearray:
    return bytearray(size)


def _default_free(block: Any, file: str, line: int) -> None:
    return None


def _default_log(level: int, file: str, line: int, function: str, message: str) -> None:
    _log.debug("[%s] %s:%d %s: %s", level, file, line, function, message)


def _result(value: Any) -> AudioResult:
    return check(AudioResult.OK if value is None else value)


@dataclass
class OutputState:
    """Per-plugin state handed to every callback.

    ``plugin_data`` belongs to the plugin. The hooks belong to the system.
    A hook that returns a result code makes its method raise
    :class:`AudioError` when that code is not OK. A missing mixer, port or
    reset hook raises ``AudioError(UNSUPPORTED)``.
    """

    plugin_data: Any = None
    readfrommixer: Callback = None
    allocator: Callable[[int, int, str, int], Any] = _default_alloc
    deallocator: Callable[[Any, str, int], None] = _default_free
    logger: Callable[[int, str, int, str, str], None] = _default_log
    copyport: Callback = None
    requestreset: Callback = None
    _unused: dict = field(default_factory=dict, repr=False, compare=False)

    def _hook(self, hook: Callback) -> Callable[..., Any]:
        if hook is None:
            raise AudioError(AudioResult.UNSUPPORTED)
        return hook

    def read_from_mixer(self, buffer: Any, length: int) -> AudioResult:
        """Run the mixer and fill ``buffer`` with ``length`` samples."""
        return _result(self._hook(self.readfrommixer)(self, buffer, length))

    def alloc(self, size: int, align: int) -> Any:
        """Allocate a block through the system allocator."""
        if size < 0:
            raise ValueError(f"cannot allocate a negative size: {size}")
        if align <= 0:
            raise ValueError(f"alignment must be positive, got {align}")
        file, line = _call_site()
        block = self.allocator(size, align, file, line)
        if block is None:
            raise MemoryError(f"could not allocate {size} bytes")
        return block

    def free(self, block: Any) -> None:
        """Release a block obtained from :meth:`alloc`."""
        file, line = _call_site()
        self.deallocator(block, file, line)

    def log(self, level: int, location: str, fmt: str, *args: Any) -> None:
        """Write a printf-style message to the system log."""
        file, line = _call_site()
        message = fmt % args if args else fmt
        self.logger(level, file, line, location, message)

    def copy_port(self, port_id: int, buffer: Any, length: int) -> AudioResult:
        """Copy the mixer output of an auxiliary port into ``buffer``."""
        return _result(self._hook(self.copyport)(self, port_id, buffer, length))

    def request_reset(self) -> AudioResult:
        """Ask for the plugin to be shut down and restarted on the next update."""
        return _result(self._hook(self.requestreset)(self))


@dataclass
class Object3DInfo:
    """Mono buffer and placement of one 3D object for object-based panning.

    The buffer is not attenuated. ``gain`` (0 to 1) is the distance
    attenuation still to be applied. ``spread`` is in degrees (0 to 360).
    ``priority`` runs from 0, most important, to 1, least important.
    """

    buffer: Sequence[float]
    buffer_length: Optional[int] = None
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    gain: float = 1.0
    spread: float = 0.0
    priority: float = 0.0

    def __post_init__(self) -> None:
        if self.buffer_length is None:
            self.buffer_length = len(self.buffer)
        if not 0 <= self.buffer_length <= len(self.buffer):
            raise ValueError(
                f"buffer length {self.buffer_length} does not fit a buffer "
                f"of {len(self.buffer)} samples"
            )
        if not 0.0 <= self.gain <= 1.0:
            raise ValueError(f"gain must be within 0 and 1, got {self.gain}")
        if not 0.0 <= self.spread <= 360.0:
            raise ValueError(f"spread must be within 0 and 360, got {self.spread}")
        if not 0.0 <= self.priority <= 1.0:
            raise ValueError(f"priority must be within 0 and 1, got {self.priority}")

    def attenuated(self) -> list[float]:
        """The buffer's samples scaled by ``gain``."""
        return [sample * self.gain for sample in self.buffer[: self.buffer_length]]