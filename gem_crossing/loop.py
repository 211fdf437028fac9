"""Frame scheduler that feeds wall-clock deltas into the game."""

from __future__ import annotations

import time
from typing import Callable, Optional


class FrameLoop:
    """Invoke ``callback(dt)`` once per frame until stopped.

    The loop integrates directly with the elapsed wall-clock time between
    frames, there is no fixed timestep.  ``start()`` captures the baseline so
    that the very first frame already receives a defined delta.  Stopping the
    loop simply means the next frame is never scheduled.
    """

    def __init__(
        self,
        callback: Callable[[float], None],
        *,
        clock: Callable[[], float] = time.perf_counter,
        pacer: Optional[Callable[[], object]] = None,
    ) -> None:
        self.callback = callback
        self.clock = clock
        self.pacer = pacer
        self.last_time: Optional[float] = None
        self.frames = 0
        self.running = False

    def start(self) -> None:
        self.last_time = self.clock()
        self.running = True

    def stop(self) -> None:
        self.running = False

    def tick(self) -> float:
        if self.last_time is None:
            self.start()
        now = self.clock()
        delta = now - self.last_time
        self.last_time = now
        self.frames += 1
        self.callback(delta)
        return delta

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run frames until :meth:`stop` is called or ``max_frames`` is hit.

        Returns the number of frames executed during this call.
        """

        if not self.running:
            self.start()
        executed = 0
        while self.running:
            if max_frames is not None and executed >= max_frames:
                break
            self.tick()
            executed += 1
            if self.running and self.pacer is not None:
                self.pacer()
        return executed
