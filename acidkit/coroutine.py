"""Lazily started, manually resumed task wrapping a generator."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any


class Task:
    """A suspended computation driven step by step with ``resume``.

    The generator does not run until the first ``resume``. Each yielded value,
    and finally the returned value, becomes the result of ``get``.
    Exceptions raised by the generator propagate out of ``resume``.
    """

    def __init__(self, generator: Generator[Any, None, Any] | None = None) -> None:
        self._gen = generator
        self._finished = generator is None
        self._value: Any = None

    def resume(self) -> None:
        """Run the task until its next yield or its end."""
        if self._gen is None:
            raise RuntimeError("task has no coroutine")
        if self._finished:
            raise RuntimeError("task already finished")
        try:
            self._value = next(self._gen)
        except StopIteration as stop:
            self._finished = True
            self._value = stop.value
        except BaseException:
            self._finished = True
            raise

    def done(self) -> bool:
        """Whether the task has finished or holds no coroutine."""
        return self._gen is None or self._finished

    def get(self) -> Any:
        """The last yielded or returned value (None before any)."""
        return self._value

    def destroy(self) -> None:
        """Close the coroutine and release it."""
        if self._gen is not None:
            self._gen.close()
            self._gen = None
        self._finished = True

    def __enter__(self) -> Task:
        return self

    def __exit__(self, *args: object) -> None:
        self.destroy()

    def __del__(self) -> None:
        gen = getattr(self, "_gen", None)
        if gen is not None:
            gen.close()