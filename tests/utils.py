import io

import pytest

from cgobind.utils import load_default_config


class FailingSink:
    """Byte sink that accepts ``fail_after`` writes and then raises."""

    def __init__(self, fail_after=0, error=None):
        self.fail_after = fail_after
        self.error = error if error is not None else OSError("disk full")
        self.buffer = io.BytesIO()
        self.calls = 0

    def write(self, data):
        self.calls += 1
        if self.calls > self.fail_after:
            raise self.error
        return self.buffer.write(data)


class ShortWriteSink:
    """Raw-style sink taking at most ``limit`` bytes per call.

    After ``stall_after`` calls it stops accepting anything and returns 0.
    """

    def __init__(self, limit=2, stall_after=None):
        self.limit = limit
        self.stall_after = stall_after
        self.data = b""
        self.calls = 0

    def write(self, data):
        self.calls += 1
        if self.stall_after is not None and self.calls > self.stall_after:
            return 0
        taken = bytes(data[:self.limit])
        self.data += taken
        return len(taken)


@pytest.fixture
def config():
    return load_default_config()
