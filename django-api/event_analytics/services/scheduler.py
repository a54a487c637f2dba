"""Debounced, single-flight recomputation of the aggregate statistics.

The scheduler is an explicit state machine::

    IDLE --inputs_changed--> SCHEDULED --quiet period--> RUNNING --> IDLE
                  ^                |
                  +--(re)arm timer-+

The aggregate is computed once on activation, then only when the tracked
inputs (actor identity, number of loaded events) change or when a refresh
is requested. There is no periodic polling.

Timers are armed on the running asyncio loop, so ``inputs_changed`` must be
called from within it.
"""

import asyncio
import logging
from enum import Enum

from event_analytics.domain import Actor, RealTimeStats, ScopedStats
from event_analytics.services.event_stats import EventStatsCalculator

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 2.0


class SchedulerState(Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    RUNNING = "running"


class StatsUpdateScheduler:
    """Keeps a RealTimeStats snapshot current for one actor."""

    def __init__(
        self,
        calculator: EventStatsCalculator,
        actor: Actor | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._calculator = calculator
        self._actor = actor
        self._debounce_seconds = debounce_seconds
        self._loop = loop
        self._stats = RealTimeStats.empty(is_loading=True, now=calculator.now())
        self._has_initial_load = False
        self._is_updating = False
        self._activated = False
        self._closed = False
        self._timer: asyncio.TimerHandle | None = None
        self._tracked_inputs: tuple[str | None, int] | None = None
        self.update_count = 0

    @property
    def stats(self) -> RealTimeStats:
        return self._stats

    @property
    def actor(self) -> Actor | None:
        return self._actor

    @property
    def debounce_seconds(self) -> float:
        return self._debounce_seconds

    @property
    def has_initial_load(self) -> bool:
        return self._has_initial_load

    @property
    def is_updating(self) -> bool:
        return self._is_updating

    @property
    def state(self) -> SchedulerState:
        if self._is_updating:
            return SchedulerState.RUNNING
        if self._timer is not None:
            return SchedulerState.SCHEDULED
        return SchedulerState.IDLE

    def activate(self) -> RealTimeStats:
        """Run the initial computation. Only the first call has any effect."""
        if self._activated or self._closed:
            return self._stats
        self._activated = True
        self._tracked_inputs = self._inputs_key(self._actor, None)
        self.update()
        return self._stats

    def inputs_changed(self, actor: Actor | None, event_count: int | None = None) -> None:
        """Record the current inputs, (re)arming the debounce timer if they changed.

        ``event_count`` defaults to the number of events currently in the store.
        """
        if self._closed:
            return
        self._actor = actor
        key = self._inputs_key(actor, event_count)
        if key == self._tracked_inputs:
            return
        self._tracked_inputs = key
        if not self._has_initial_load:
            return
        self._schedule()

    def update(self) -> bool:
        """Recompute the snapshot unless a recomputation is already running.

        Returns False when the call was skipped by the single-flight guard.
        """
        if self._is_updating:
            logger.debug("Stats update already running, skipping")
            return False

        self._is_updating = True
        try:
            stats = self._calculator.calculate_overall_stats(self._actor)
            self._has_initial_load = True
            self._stats = stats.with_loading(not self._has_initial_load)
            self.update_count += 1
        finally:
            self._is_updating = False
        return True

    def refresh(self) -> bool:
        """Recompute immediately, dropping any pending debounced update."""
        self._cancel_timer()
        return self.update()

    def stats_for(self, event_id: str | None = None) -> RealTimeStats | ScopedStats:
        if event_id is None:
            return self._stats
        return self._stats.for_event(event_id)

    def close(self) -> None:
        """Cancel the pending timer and stop reacting to input changes."""
        self._closed = True
        self._cancel_timer()

    def _inputs_key(self, actor: Actor | None, event_count: int | None) -> tuple[str | None, int]:
        if event_count is None:
            event_count = len(self._calculator.store.list_events())
        return (actor.id if actor is not None else None, event_count)

    def _schedule(self) -> None:
        self._cancel_timer()
        loop = self._loop or asyncio.get_running_loop()
        self._timer = loop.call_later(self._debounce_seconds, self._on_quiet_period)
        logger.debug("Stats update scheduled in %.2fs", self._debounce_seconds)

    def _on_quiet_period(self) -> None:
        self._timer = None
        self.update()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
