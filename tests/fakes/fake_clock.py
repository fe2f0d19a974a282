from datetime import datetime, timedelta, timezone


class FakeClock:
    """Clock that starts at a fixed instant and advances by a fixed step per call."""

    def __init__(
        self,
        start: datetime = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now
