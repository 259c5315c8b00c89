from dataclasses import dataclass
from mt.common.logger import log
from mt.util import format_countdown

# Everything the UI needs to repaint, captured from a single clock read.
@dataclass(frozen=True)
class StopwatchReading:
    running: bool
    elapsed: float
    remaining: float
    progress: float
    display: str

# Countdown stopwatch over an injected clock. Effective elapsed time is never cached; every read goes back to the
# clock, so the passage of time alone never mutates anything here.
class Stopwatch:

    def __init__(self, clock, total):
        self.clock = clock
        self.total = float(total)
        self._start = None
        self._elapsed = 0.0
        log.debug(f"Initialized new stopwatch with total of {self.total} seconds")

    # Effective elapsed time as of `now`, covering both the running and stopped states.
    def _elapsed_at(self, now):
        if self._start is not None:
            return self._elapsed + (now - self._start)
        return self._elapsed

    # Maps an effective elapsed time onto [0.0, 1.0]. A negative total counts as already expired.
    def _progress_for(self, elapsed):
        if self.total < 0 or elapsed >= self.total:
            return 1.0
        if elapsed <= 0:
            return 0.0
        return elapsed / self.total

    @property
    def running(self):
        return self._start is not None

    @property
    def elapsed(self):
        return self._elapsed_at(self.clock.now())

    @property
    def remaining(self):
        return self.total - self.elapsed

    @property
    def progress(self):
        return self._progress_for(self.elapsed)

    # Start and stop methods for the stopwatch. Both are no-ops when already in the target state.
    def start(self):
        if self._start is None:
            self._start = self.clock.now()
            log.debug(f"Started stopwatch at {self._start}")
    def stop(self):
        if self._start is not None:
            now = self.clock.now()
            self._elapsed += now - self._start
            self._start = None
            log.debug(f"Stopped stopwatch at {now}, elapsed is now {self._elapsed}")
    def toggle(self):
        if self._start is not None:
            self.stop()
        else:
            self.start()

    # Returns the effective elapsed time and zeroes the accumulator. A running stopwatch keeps running, with a new
    # interval opened at the same instant the lap was measured at.
    def lap(self):
        now = self.clock.now()
        lapped = self._elapsed_at(now)
        self._elapsed = 0.0
        if self._start is not None:
            self._start = now
        log.debug(f"Lapped stopwatch at {now} with segment of {lapped} seconds")
        return lapped

    # Zeroes the accumulator and stops.
    def reset(self):
        self._start = None
        self._elapsed = 0.0
        log.debug("Reset stopwatch to 0.0")

    # Shifts the target duration. Negative deltas remove time; remaining and progress follow on the next read.
    def add_time(self, delta):
        self.total += delta
        log.debug(f"Adjusted stopwatch total by {delta}, total is now {self.total}")

    # Manually shifts the accumulated elapsed time. May push effective elapsed below zero.
    def advance(self, delta):
        self._elapsed += delta
        log.debug(f"Advanced stopwatch elapsed by {delta}")

    def reading(self):
        elapsed = self._elapsed_at(self.clock.now())
        remaining = self.total - elapsed
        return StopwatchReading(
            running=self._start is not None,
            elapsed=elapsed,
            remaining=remaining,
            progress=self._progress_for(elapsed),
            display=format_countdown(remaining, signed=True),
        )

    def __repr__(self):
        state = "running" if self.running else "stopped"
        return f"Stopwatch({state}, elapsed={self.elapsed}, total={self.total})"
