"""Export configuration and simulated render progress."""

import logging
import threading
from typing import List, Optional, Sequence, Tuple

from ..config import config as app_config
from ..models import ExportConfig, ExportProgress, ExportState, Scene
from ..services.locator import LocatorAllocator
from .events import Observable
from .ticker import CancelHandle, ThreadTicker, Ticker

logger = logging.getLogger(__name__)


class ExportPipeline(Observable):
    """Drives the export flow: Idle -> Exporting -> Complete.

    No bytes are rendered. Progress advances by a fixed step on every tick
    of the ticker until it reaches 100, at which point the ticker is
    cancelled and the size estimate becomes available. A pipeline is
    single use; reopening the export flow means building a new one.

    Example:
        pipeline = ExportPipeline(store.snapshot())
        pipeline.start(ExportConfig(resolution=Resolution.P720))
        pipeline.wait(timeout=10)
        print(pipeline.estimated_size_mb)
    """

    event_source = "export"

    def __init__(
        self,
        scenes: Sequence[Scene],
        ticker: Optional[Ticker] = None,
        locators: Optional[LocatorAllocator] = None,
        interval: Optional[float] = None,
        step: Optional[int] = None,
        mb_per_second: Optional[float] = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            scenes: Snapshot of the timeline at the time the flow opened.
            ticker: Timer used for progress ticks. Defaults to ThreadTicker.
            locators: Allocator used to spot bindings whose bytes are gone.
            interval: Seconds between ticks. Defaults to config.
            step: Percent added per tick. Defaults to config.
            mb_per_second: Simulated bitrate for the size estimate.
        """
        super().__init__()
        self._scenes: Tuple[Scene, ...] = tuple(scene.model_copy(deep=True) for scene in scenes)
        self._ticker = ticker if ticker is not None else ThreadTicker()
        self._locators = locators
        self._interval = interval if interval is not None else app_config.export_tick_interval
        self._step = step if step is not None else app_config.export_progress_step
        self._mb_per_second = (
            mb_per_second if mb_per_second is not None else app_config.export_mb_per_second
        )

        self._lock = threading.Lock()
        self._done = threading.Event()
        self._handle: Optional[CancelHandle] = None
        self._closed = False
        self._state = ExportState.IDLE
        self._percent = 0
        self._total_duration = sum(scene.duration for scene in self._scenes)
        self._estimated_size_mb: Optional[float] = None
        self.config = ExportConfig()

    @property
    def scene_count(self) -> int:
        return len(self._scenes)

    @property
    def total_duration(self) -> int:
        return self._total_duration

    @property
    def state(self) -> ExportState:
        return self._state

    @property
    def percent(self) -> int:
        return self._percent

    @property
    def progress(self) -> ExportProgress:
        return ExportProgress(state=self._state, percent=self._percent)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def estimated_size_mb(self) -> Optional[float]:
        """Estimated output size, available once the export is complete."""
        return self._estimated_size_mb

    def dangling_bindings(self) -> List[Tuple[str, str]]:
        """Find bound media/voiceover whose locator no longer resolves.

        Returns:
            (scene id, slot name) pairs. Empty when no allocator was given.
        """
        if self._locators is None:
            return []
        dangling: List[Tuple[str, str]] = []
        for scene in self._scenes:
            if scene.media is not None and scene.media.url not in self._locators:
                dangling.append((scene.id, "media"))
            if scene.voiceover is not None and scene.voiceover.url not in self._locators:
                dangling.append((scene.id, "voiceover"))
        return dangling

    def start(
        self,
        config: Optional[ExportConfig] = None,
        total_duration: Optional[int] = None,
    ) -> bool:
        """Begin the simulated export.

        Args:
            config: Render settings. Keeps the current settings if None.
            total_duration: Overrides the snapshot's total duration.

        Returns:
            False if the pipeline was not idle or was already closed.
        """
        with self._lock:
            if self._closed or self._state != ExportState.IDLE:
                logger.warning(f"Export already {self._state.value}, ignoring start")
                return False
            if config is not None:
                self.config = config
            if total_duration is not None:
                self._total_duration = total_duration
            self._state = ExportState.EXPORTING
            self._percent = 0

        for scene_id, slot in self.dangling_bindings():
            logger.warning(f"Scene {scene_id} {slot} refers to a deleted asset")

        width, height = self.config.dimensions
        logger.info(
            f"Exporting {self.scene_count} scenes ({self._total_duration}s) as "
            f"{self.config.format.value} {width}x{height}, {self.config.quality.value} quality"
        )
        params = self.config.encoding_params()
        logger.debug(f"Encoding parameters: {params}")
        self._publish("started", percent=0, encoding=params)
        handle = self._ticker.schedule(self._interval, self.tick)
        with self._lock:
            finished = self._closed or self._state != ExportState.EXPORTING
            if not finished:
                self._handle = handle
        if finished:
            # Completed or closed before the handle was stored.
            handle.cancel()
        return True

    def tick(self) -> None:
        """Advance progress by one step."""
        completed = False
        with self._lock:
            if self._closed or self._state != ExportState.EXPORTING:
                return
            if self._percent + self._step >= 100:
                self._percent = 100
                self._state = ExportState.COMPLETE
                self._estimated_size_mb = self._total_duration * self._mb_per_second
                completed = True
            else:
                self._percent += self._step
            percent = self._percent

        if completed:
            self._release_ticker()
            logger.info(f"Export complete (~{self._estimated_size_mb:.1f} MB)")
            self._publish("completed", percent=percent, estimated_size_mb=self._estimated_size_mb)
            self._done.set()
        else:
            self._publish("progress", percent=percent)

    def close(self) -> None:
        """Close the export flow; no tick changes state afterwards."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            interrupted = self._state == ExportState.EXPORTING
        self._release_ticker()
        if interrupted:
            logger.info(f"Export closed at {self._percent}%")
        self._publish("closed", state=self._state.value, percent=self._percent)
        self._done.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the export completes or the flow is closed.

        Returns:
            True if the export reached Complete.
        """
        self._done.wait(timeout)
        return self._state == ExportState.COMPLETE

    def _release_ticker(self) -> None:
        with self._lock:
            handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()
