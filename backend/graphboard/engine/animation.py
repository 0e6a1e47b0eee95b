"""Animation scheduler: sequenced visual effects that never block a command.

Each channel (vertices, edges, overlays) owns one FIFO queue and one worker
task, so at most one animation per channel is active and entrance order is the
order commands were accepted. Channels run concurrently with each other;
cross-channel ordering (an edge must not appear before its endpoints) is
expressed with appearance gates:

    gate = scheduler.expect("A")                 # vertex A is about to fade in
    scheduler.enqueue(FadeIn(..., gate=gate))    # sets the gate when done
    scheduler.enqueue(EdgeDraw(..., waits_for=("A", "B")))

Timed callbacks (``call_later``) are independent of the queues and of each
other; nothing cancels them except ``shutdown()``.
"""

from __future__ import annotations

import asyncio
import enum
import itertools
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable, Sequence

from graphboard.surface.base import DrawingSurface
from graphboard.surface.primitives import Circle, Line, Primitive
from graphboard.utils.geometry import as_point, lerp

logger = logging.getLogger(__name__)


class Channel(enum.Enum):
    VERTEX = "vertex"
    EDGE = "edge"
    OVERLAY = "overlay"


LivenessCheck = Callable[[], bool]


class Animation(ABC):
    channel: Channel = Channel.OVERLAY
    description: str = "animation"

    @abstractmethod
    async def play(self, scheduler: "AnimationScheduler") -> None:
        """Run to completion. Must return quietly once ``is_live`` turns False."""


class FadeIn(Animation):
    """Opacity 0 → 1 over ``duration_ms`` for a group of primitives."""

    def __init__(
        self,
        primitives: Sequence[Primitive],
        duration_ms: float,
        *,
        channel: Channel,
        is_live: LivenessCheck,
        gate: asyncio.Event | None = None,
        description: str = "fade-in",
    ) -> None:
        self.primitives = list(primitives)
        self.duration_ms = duration_ms
        self.channel = channel
        self.is_live = is_live
        self.gate = gate
        self.description = description

    async def play(self, scheduler: "AnimationScheduler") -> None:
        try:
            async for t in scheduler.frames(self.duration_ms):
                if not self.is_live():
                    return
                for p in self.primitives:
                    p.set(opacity=t)
                scheduler.render()
        finally:
            if self.gate is not None:
                self.gate.set()
                scheduler.settle(self.gate)


# Pencil-tip marker that rides along the edge while it is being drawn.
CURSOR_RADIUS = 5.0
CURSOR_FILL = "#ffeb3b"


class EdgeDraw(Animation):
    """Reveal an edge line, then add its decorations (arrowhead, weight label).

    Waits until both endpoint vertices are fully visible. With ``animated``
    the line first settles for ``settle_ms`` and is then drawn from start to
    end over ``draw_ms`` with a cursor marker that is removed afterwards.
    Without it, the line and decorations appear in a single frame.
    """

    channel = Channel.EDGE

    def __init__(
        self,
        line: Line,
        start: tuple[float, float],
        end: tuple[float, float],
        *,
        decorations: Sequence[Primitive] = (),
        waits_for: Sequence[str] = (),
        is_live: LivenessCheck,
        animated: bool = True,
        settle_ms: float = 0.0,
        draw_ms: float = 0.0,
        description: str = "edge",
    ) -> None:
        self.line = line
        self.start = start
        self.end = end
        self.decorations = list(decorations)
        self.waits_for = tuple(waits_for)
        self.is_live = is_live
        self.animated = animated
        self.settle_ms = settle_ms
        self.draw_ms = draw_ms
        self.description = description

    async def play(self, scheduler: "AnimationScheduler") -> None:
        await scheduler.wait_visible(*self.waits_for)
        if not self.is_live():
            return

        if self.animated:
            if self.settle_ms > 0:
                await asyncio.sleep(self.settle_ms / 1000.0)
            if not await self._progressive_draw(scheduler):
                return

        if not self.is_live():
            return
        self.line.set(x1=self.start[0], y1=self.start[1], x2=self.end[0], y2=self.end[1], opacity=1.0)
        if self.decorations:
            scheduler.surface.add(*self.decorations)
        scheduler.render()

    async def _progressive_draw(self, scheduler: "AnimationScheduler") -> bool:
        """Grow the line toward ``end``. Returns False if the edge went stale."""
        if not self.is_live():
            return False
        surface = scheduler.surface
        p0, p1 = as_point(*self.start), as_point(*self.end)
        cursor = Circle(cx=self.start[0], cy=self.start[1], radius=CURSOR_RADIUS, fill=CURSOR_FILL)
        self.line.set(x2=self.start[0], y2=self.start[1], opacity=1.0)
        surface.add(cursor)
        try:
            async for t in scheduler.frames(self.draw_ms):
                if not self.is_live():
                    return False
                x, y = lerp(p0, p1, t)
                self.line.set(x2=x, y2=y)
                cursor.set(cx=x, cy=y)
                scheduler.render()
        finally:
            if not surface.disposed:
                surface.remove(cursor)
        return True


class AnimationScheduler:
    """Per-channel FIFO animation queues plus independent timed callbacks."""

    def __init__(self, frame_interval_ms: float = 16.0) -> None:
        self.frame_interval_ms = frame_interval_ms
        self.surface: DrawingSurface | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._queues: dict[Channel, asyncio.Queue[Animation]] = {}
        self._workers: dict[Channel, asyncio.Task[None]] = {}
        self._appearances: dict[str, asyncio.Event] = {}
        self._timers: dict[int, asyncio.TimerHandle] = {}
        self._timer_ids = itertools.count(1)

    # --- loop binding ---

    def _bind_loop(self) -> asyncio.AbstractEventLoop:
        """Queues and events belong to one event loop; start over if it changed."""
        loop = asyncio.get_running_loop()
        if self._loop is not loop:
            if self._loop is not None:
                logger.debug("Event loop changed, discarding animation state from the old loop")
            self._loop = loop
            self._queues.clear()
            self._workers.clear()
            self._appearances.clear()
            self._timers.clear()
        return loop

    # --- rendering ---

    def render(self) -> None:
        if self.surface is not None and not self.surface.disposed:
            self.surface.render()

    async def frames(self, duration_ms: float) -> AsyncIterator[float]:
        """Yield completion fractions in (0, 1] paced by the frame interval.

        Progress comes from the loop clock, not from frame counts, so slow
        frames skip ahead instead of stretching the animation.
        """
        if duration_ms <= 0:
            yield 1.0
            return
        loop = asyncio.get_running_loop()
        start = loop.time()
        duration = duration_ms / 1000.0
        interval = max(self.frame_interval_ms, 0.0) / 1000.0
        while True:
            await asyncio.sleep(interval)
            t = min(1.0, (loop.time() - start) / duration)
            yield t
            if t >= 1.0:
                return

    # --- queues ---

    def enqueue(self, animation: Animation) -> None:
        self._bind_loop()
        channel = animation.channel
        queue = self._queues.get(channel)
        if queue is None:
            queue = self._queues[channel] = asyncio.Queue()
        worker = self._workers.get(channel)
        if worker is None or worker.done():
            self._workers[channel] = asyncio.create_task(
                self._run_channel(channel, queue), name=f"animation-{channel.value}"
            )
        queue.put_nowait(animation)
        logger.debug("Queued %s on %s channel (%d waiting)", animation.description, channel.value, queue.qsize())

    async def _run_channel(self, channel: Channel, queue: asyncio.Queue[Animation]) -> None:
        while True:
            animation = await queue.get()
            try:
                await animation.play(self)
            except Exception as e:
                logger.warning("Animation %s on %s channel failed: %s", animation.description, channel.value, e)
            finally:
                queue.task_done()

    def pending(self, channel: Channel) -> int:
        queue = self._queues.get(channel)
        return queue.qsize() if queue is not None else 0

    async def drain(self) -> None:
        """Wait until every queued animation has finished."""
        self._bind_loop()
        await asyncio.gather(*(q.join() for q in list(self._queues.values())))

    # --- appearance gates ---

    def expect(self, key: str) -> asyncio.Event:
        """Register a pending appearance for ``key``; the animation sets the returned gate."""
        self._bind_loop()
        gate = asyncio.Event()
        self._appearances[key] = gate
        return gate

    def settle(self, gate: asyncio.Event) -> None:
        """Drop an appearance once its gate is set, unless a newer one replaced it."""
        for key, current in list(self._appearances.items()):
            if current is gate:
                del self._appearances[key]

    @property
    def pending_appearances(self) -> int:
        return len(self._appearances)

    async def wait_visible(self, *keys: str) -> None:
        """Wait for the latest pending appearance of each key (no-op if none)."""
        for key in keys:
            gate = self._appearances.get(key)
            if gate is not None:
                await gate.wait()

    # --- timers ---

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> int:
        """Run ``callback`` after ``delay_ms`` and render a frame. Returns a timer id."""
        loop = self._bind_loop()
        timer_id = next(self._timer_ids)
        self._timers[timer_id] = loop.call_later(max(delay_ms, 0.0) / 1000.0, self._fire, timer_id, callback)
        return timer_id

    def _fire(self, timer_id: int, callback: Callable[[], None]) -> None:
        self._timers.pop(timer_id, None)
        try:
            callback()
        except Exception as e:
            logger.warning("Timed callback %d failed: %s", timer_id, e)
        self.render()

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    # --- teardown ---

    async def shutdown(self) -> None:
        """Cancel workers and timers. Only used when the engine is torn down."""
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()

        workers = list(self._workers.values())
        self._workers.clear()
        self._queues.clear()
        for gate in self._appearances.values():
            gate.set()
        self._appearances.clear()

        try:
            current = asyncio.get_running_loop()
        except RuntimeError:
            current = None
        live = [w for w in workers if not w.done()]
        for w in live:
            w.cancel()
        if current is not None and current is self._loop and live:
            await asyncio.gather(*live, return_exceptions=True)
        logger.debug("Animation scheduler shut down (%d workers cancelled)", len(live))
