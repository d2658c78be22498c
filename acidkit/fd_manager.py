"""Per-descriptor bookkeeping: socket detection, non-blocking flags and timeouts."""

from __future__ import annotations

import enum
import os
import stat
import threading


class TimeoutKind(enum.Enum):
    """Which direction a descriptor timeout applies to."""

    RECV = "recv"
    SEND = "send"


class FdCtx:
    """State tracked for one file descriptor.

    Sockets are switched to non-blocking mode at the system level as soon as
    they are registered; ``user_nonblock`` records what the user asked for.
    Timeouts are in milliseconds, None meaning no timeout.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self.is_init = False
        self.is_socket = False
        self.sys_nonblock = False
        self.user_nonblock = False
        self.is_closed = False
        self.recv_timeout: int | None = None
        self.send_timeout: int | None = None
        self.init()

    def init(self) -> bool:
        """Inspect the descriptor; return whether it refers to an open file."""
        if self.is_init:
            return True
        self.recv_timeout = None
        self.send_timeout = None
        try:
            mode = os.fstat(self.fd).st_mode
        except OSError:
            self.is_init = False
            self.is_socket = False
        else:
            self.is_init = True
            self.is_socket = stat.S_ISSOCK(mode)
        if self.is_socket:
            if os.get_blocking(self.fd):
                os.set_blocking(self.fd, False)
            self.sys_nonblock = True
        else:
            self.sys_nonblock = False
        self.user_nonblock = False
        self.is_closed = False
        return self.is_init

    def set_timeout(self, kind: TimeoutKind, timeout: int | None) -> None:
        """Set the receive or send timeout in milliseconds."""
        if kind is TimeoutKind.RECV:
            self.recv_timeout = timeout
        else:
            self.send_timeout = timeout

    def get_timeout(self, kind: TimeoutKind) -> int | None:
        """Return the receive or send timeout in milliseconds."""
        if kind is TimeoutKind.RECV:
            return self.recv_timeout
        return self.send_timeout

    def __repr__(self) -> str:
        return f"FdCtx(fd={self.fd}, socket={self.is_socket}, init={self.is_init})"


class FdManager:
    """Table of FdCtx objects indexed by descriptor number."""

    def __init__(self) -> None:
        self._fds: list[FdCtx | None] = [None] * 64
        self._lock = threading.RLock()

    def get(self, fd: int, auto_create: bool = False) -> FdCtx | None:
        """Return the context for ``fd``, creating it if ``auto_create`` is set."""
        if fd < 0:
            return None
        with self._lock:
            if fd < len(self._fds):
                ctx = self._fds[fd]
                if ctx is not None or not auto_create:
                    return ctx
            elif not auto_create:
                return None
            if fd >= len(self._fds):
                new_len = max(int(fd * 1.5), fd + 1)
                self._fds.extend([None] * (new_len - len(self._fds)))
            ctx = FdCtx(fd)
            self._fds[fd] = ctx
            return ctx

    def delete(self, fd: int) -> None:
        """Forget the context for ``fd`` if there is one."""
        with self._lock:
            if 0 <= fd < len(self._fds):
                self._fds[fd] = None