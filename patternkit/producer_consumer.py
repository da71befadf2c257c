"""Producer-consumer: a bounded buffer shared by a producer and a consumer thread."""

from __future__ import annotations

import threading
import time
from collections import deque


class ProducerConsumerDemo:
    """Producer fills a bounded queue, consumer drains it, with a pause per item."""

    def __init__(self, count: int = 50, max_size: int = 5, delay: float = 0.01) -> None:
        self.count = count
        self.max_size = max_size
        self.delay = delay
        self._queue: deque[int] = deque()
        self._lock = threading.Lock()
        self._can_read = threading.Condition(self._lock)
        self._can_write = threading.Condition(self._lock)
        self.consumed: list[int] = []
        self.peak_size = 0

    def produce(self) -> None:
        """Put the numbers 0..count-1 into the queue, blocking while it is full."""
        for number in range(self.count):
            with self._can_write:
                self._can_write.wait_for(lambda: len(self._queue) < self.max_size)
                self._queue.append(number)
                self.peak_size = max(self.peak_size, len(self._queue))
                print(f"Producer---produce mNumber: {number}, mQueueMaxSize:{len(self._queue)}")
                self._can_read.notify()
            time.sleep(self.delay)

    def consume(self) -> None:
        """Take count numbers from the queue, blocking while it is empty."""
        for _ in range(self.count):
            with self._can_read:
                self._can_read.wait_for(lambda: bool(self._queue))
                number = self._queue.popleft()
                self.consumed.append(number)
                print(f"Consumer---consume mNumber: {number}, mQueueMaxSize:{len(self._queue)}")
                self._can_write.notify()

    def run(self) -> list[int]:
        """Run producer and consumer in two threads; return the consumed numbers."""
        return _run_pair(self.produce, self.consume, self.consumed)


class ThrottledProducerConsumer:
    """Producer that keeps at least wait_threshold milliseconds between items."""

    def __init__(self, count: int = 50, buffer_size: int = 10, wait_threshold: int = 100) -> None:
        self.count = count
        self.buffer_size = buffer_size
        self.wait_threshold = wait_threshold
        self._buffer: deque[int] = deque()
        self._lock = threading.Lock()
        self._can_read = threading.Condition(self._lock)
        self._can_write = threading.Condition(self._lock)
        self.consumed: list[int] = []
        self.peak_size = 0

    def produce(self) -> None:
        """Produce 0..count-1, sleeping off whatever remains of the threshold."""
        threshold = self.wait_threshold / 1000
        last_time = time.perf_counter()
        for number in range(self.count):
            now = time.perf_counter()
            elapsed = now - last_time
            if elapsed < threshold:
                time.sleep(threshold - elapsed)
            with self._can_write:
                self._can_write.wait_for(lambda: len(self._buffer) < self.buffer_size)
                self._buffer.append(number)
                self.peak_size = max(self.peak_size, len(self._buffer))
                print(f"Producer---produce number: {number}, bufferSize:{len(self._buffer)}")
                self._can_read.notify()
            last_time = now

    def consume(self) -> None:
        """Take count numbers from the buffer, waking the producer when room frees up."""
        for _ in range(self.count):
            with self._can_read:
                self._can_read.wait_for(lambda: bool(self._buffer))
                number = self._buffer.popleft()
                self.consumed.append(number)
                print(f"Consumer---consume number: {number}, bufferSize:{len(self._buffer)}")
                if len(self._buffer) < self.buffer_size:
                    self._can_write.notify()

    def run(self) -> list[int]:
        """Run producer and consumer in two threads; return the consumed numbers."""
        return _run_pair(self.produce, self.consume, self.consumed)


def _run_pair(produce, consume, consumed: list[int]) -> list[int]:
    threads = [threading.Thread(target=consume), threading.Thread(target=produce)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return list(consumed)


def main(argv: list[str] | None = None) -> int:
    """Run the basic producer-consumer demo."""
    ProducerConsumerDemo().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())