"""
Snowflake IDs for cheese rows

64-bit layout, high to low: 41 bits of milliseconds since EPOCH_MS,
10 bits of machine id, 12 bits of per-millisecond sequence.
"""
import threading
import time

EPOCH_MS = 1640995200000  # 2022-01-01 00:00:00 UTC
MACHINE_BITS = 10
SEQUENCE_BITS = 12
MAX_MACHINE_ID = (1 << MACHINE_BITS) - 1
SEQUENCE_MASK = (1 << SEQUENCE_BITS) - 1


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class SnowflakeIDGenerator:
    """Time-ordered, process-unique integer ids."""

    def __init__(self, machine_id: int = 0):
        if not 0 <= machine_id <= MAX_MACHINE_ID:
            raise ValueError(f"machine_id must be between 0 and {MAX_MACHINE_ID}")
        self.machine_id = machine_id
        self.sequence = 0
        self.last_timestamp = -1
        self._lock = threading.Lock()

    def _current_timestamp(self) -> int:
        return _now_ms()

    def generate_id(self) -> int:
        """
        Raises:
            RuntimeError: the clock went backwards since the last id
        """
        with self._lock:
            now = self._current_timestamp()
            if now < self.last_timestamp:
                raise RuntimeError(f"Clock moved backwards by {self.last_timestamp - now} ms")

            if now == self.last_timestamp:
                self.sequence = (self.sequence + 1) & SEQUENCE_MASK
                if self.sequence == 0:
                    # 4096 ids already issued this millisecond
                    while now <= self.last_timestamp:
                        now = self._current_timestamp()
            else:
                self.sequence = 0

            self.last_timestamp = now
            return ((now - EPOCH_MS) << (MACHINE_BITS + SEQUENCE_BITS)) | (self.machine_id << SEQUENCE_BITS) | self.sequence


_generator = SnowflakeIDGenerator()


def generate_snowflake_string_id() -> str:
    return str(_generator.generate_id())
