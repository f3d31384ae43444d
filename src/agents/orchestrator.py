"""
Orchestrator
============

Owns the dashboard session state and coordinates the agents.

A location selection starts a population task which, after the simulated
delay, loads weather, soil and crop data in one atomic update. Population
tasks are cancellable: a newer location cancels the in-flight task before
starting its own, and a task only writes state while it is still the
current one.

Views never hold state; they are built from an immutable snapshot of the
session.
"""

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Tuple
from ..config import (
    DEFAULT_LANGUAGE,
    MAX_SESSIONS,
    SESSION_IDLE_TTL_SECONDS,
    SIMULATED_DELAY_SECONDS,
)
from ..utils.logger import logger
from ..utils.translations import translate, resolve_language, list_languages
from .models import CropSuitability, GeoLocation, SoilSample, WeatherSnapshot
from .location_agent import build_location_view
from .weather_agent import fetch_weather, build_weather_view
from .soil_agent import fetch_soil, build_soil_view
from .crop_planning_agent import plan_crops, build_recommendations_view
from .dashboard_agent import build_dashboard_view


TABS = ("location", "weather", "soil", "recommendations", "dashboard")


class TabUnavailableError(Exception):
    """Raised when selecting a tab that is unknown or not yet enabled."""
    def __init__(self, tab: str, reason: str):
        self.tab = tab
        self.reason = reason
        super().__init__(f"Tab '{tab}' unavailable: {reason}")


@dataclass(frozen=True)
class SessionState:
    """Immutable snapshot of a dashboard session."""
    language: str = DEFAULT_LANGUAGE
    active_tab: str = "location"
    location: Optional[GeoLocation] = None
    weather: Optional[WeatherSnapshot] = None
    soil: Optional[SoilSample] = None
    recommendations: Tuple[CropSuitability, ...] = field(default_factory=tuple)
    is_loading: bool = False


def enabled_tabs(state: SessionState) -> Dict[str, bool]:
    """Weather and soil need a location; recommendations and dashboard need crops."""
    has_location = state.location is not None
    has_crops = bool(state.recommendations)
    return {
        "location": True,
        "weather": has_location,
        "soil": has_location,
        "recommendations": has_crops,
        "dashboard": has_crops,
    }


class PopulationTask:
    """
    One-shot deferred load with an explicit cancellation handle.

    The worker waits for the delay on the cancellation event, so cancelling
    during the delay wakes it immediately and nothing is applied.
    """

    def __init__(self, generation: int, delay: float, apply: Callable[["PopulationTask"], None]):
        self.generation = generation
        self.delay = delay
        self._apply = apply
        self._cancelled = threading.Event()
        self._done = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            name=f"population-{generation}",
            daemon=True,
        )

    def start(self) -> "PopulationTask":
        self._thread.start()
        return self

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def done(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the task finished or was cancelled. Returns False on timeout."""
        return self._done.wait(timeout)

    def _run(self) -> None:
        try:
            if self._cancelled.wait(self.delay):
                logger.info(f"Population task {self.generation} cancelled")
                return
            self._apply(self)
        except Exception as e:
            logger.error(f"Population task {self.generation} failed: {e}")
        finally:
            self._done.set()


class DashboardSession:
    """
    Single state container for one dashboard session.

    All mutation goes through these methods; readers get a SessionState
    snapshot.
    """

    def __init__(self, session_id: str, language: str = DEFAULT_LANGUAGE,
                 delay: float = SIMULATED_DELAY_SECONDS):
        resolve_language(language)
        self.session_id = session_id
        self.delay = delay
        self._lock = threading.Lock()
        self._state = SessionState(language=language.strip().lower())
        self._generation = 0
        self._task: Optional[PopulationTask] = None

    def snapshot(self) -> SessionState:
        with self._lock:
            return self._state

    @property
    def pending_task(self) -> Optional[PopulationTask]:
        with self._lock:
            return self._task

    def select_location(self, location: GeoLocation) -> PopulationTask:
        """
        Make a location current and start populating its data.

        Any in-flight population task is cancelled first.
        """
        with self._lock:
            if self._task is not None and not self._task.done:
                logger.info(f"Cancelling stale population task {self._task.generation}")
                self._task.cancel()
            self._generation += 1
            self._state = replace(self._state, location=location, is_loading=True)
            task = PopulationTask(self._generation, self.delay, self._populate)
            self._task = task

        logger.info(
            f"Session {self.session_id}: location={location.address!r}, "
            f"fallback={location.is_fallback}, task={task.generation}"
        )
        return task.start()

    def _populate(self, task: PopulationTask) -> None:
        with self._lock:
            location = self._state.location
            if task.cancelled or task.generation != self._generation:
                return

        try:
            weather = fetch_weather(location)
            soil = fetch_soil(location)
            recommendations = tuple(plan_crops(location, weather, soil))
        except Exception:
            with self._lock:
                if task.generation == self._generation:
                    self._state = replace(self._state, is_loading=False)
                    self._task = None
            raise

        with self._lock:
            if task.cancelled or task.generation != self._generation:
                logger.info(f"Discarding superseded population task {task.generation}")
                return
            self._state = replace(
                self._state,
                weather=weather,
                soil=soil,
                recommendations=recommendations,
                is_loading=False,
                active_tab="weather",
            )
            self._task = None

        logger.info(f"Session {self.session_id}: population task {task.generation} applied")

    def set_language(self, language: str) -> SessionState:
        resolve_language(language)
        with self._lock:
            self._state = replace(self._state, language=language.strip().lower())
            return self._state

    def select_tab(self, tab: str) -> SessionState:
        if tab not in TABS:
            raise TabUnavailableError(tab, "unknown tab")
        with self._lock:
            if not enabled_tabs(self._state)[tab]:
                raise TabUnavailableError(tab, "data not loaded yet")
            self._state = replace(self._state, active_tab=tab)
            return self._state

    def close(self) -> None:
        """Cancel any in-flight population task."""
        with self._lock:
            if self._task is not None:
                self._task.cancel()
                self._task = None


class SessionStore:
    """
    In-process registry of dashboard sessions keyed by session id.

    Sessions idle for longer than idle_ttl are evicted, and the least
    recently used session is evicted once max_sessions is reached. Evicted
    sessions are closed, which cancels their pending population task.
    """

    def __init__(self, delay: Optional[float] = None,
                 max_sessions: int = MAX_SESSIONS,
                 idle_ttl: float = SESSION_IDLE_TTL_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self._delay = delay
        self.max_sessions = max_sessions
        self.idle_ttl = idle_ttl
        self._clock = clock
        # session id -> session, least recently used first
        self._sessions: "OrderedDict[str, DashboardSession]" = OrderedDict()
        self._last_access: Dict[str, float] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def get_or_create(self, session_id: str, language: Optional[str] = None) -> DashboardSession:
        now = self._clock()
        evicted: List[DashboardSession] = []
        try:
            with self._lock:
                evicted.extend(self._evict_idle(now))
                session = self._sessions.get(session_id)
                if session is None:
                    delay = SIMULATED_DELAY_SECONDS if self._delay is None else self._delay
                    session = DashboardSession(session_id, language or DEFAULT_LANGUAGE, delay=delay)
                    while self._sessions and len(self._sessions) >= self.max_sessions:
                        oldest_id, oldest = self._sessions.popitem(last=False)
                        del self._last_access[oldest_id]
                        evicted.append(oldest)
                    self._sessions[session_id] = session
                    logger.info(f"Created dashboard session {session_id}")
                else:
                    self._sessions.move_to_end(session_id)
                self._last_access[session_id] = now
        finally:
            for stale in evicted:
                logger.info(f"Evicting dashboard session {stale.session_id}")
                stale.close()
        return session

    def _evict_idle(self, now: float) -> List[DashboardSession]:
        evicted = []
        for session_id in list(self._sessions):
            if now - self._last_access[session_id] <= self.idle_ttl:
                # Remaining entries were used more recently
                break
            evicted.append(self._sessions.pop(session_id))
            del self._last_access[session_id]
        return evicted

    def discard(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.pop(session_id, None)
            self._last_access.pop(session_id, None)
        if session is not None:
            session.close()

    def clear(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
            self._last_access.clear()
        for session in sessions:
            session.close()


def build_header(state: SessionState) -> Dict[str, Any]:
    """Title, language selector and tab bar."""
    tabs = enabled_tabs(state)
    return {
        "title": translate("title", state.language),
        "listen": translate("listen", state.language),
        "language": state.language,
        "label_language": resolve_language(state.language),
        "languages": list_languages(),
        "tabs": [
            {
                "id": tab,
                "label": translate(tab, state.language),
                "enabled": tabs[tab],
                "active": tab == state.active_tab,
            }
            for tab in TABS
        ],
    }


def describe_state(state: SessionState) -> Dict[str, Any]:
    """JSON-friendly summary of a session snapshot."""
    return {
        "language": state.language,
        "label_language": resolve_language(state.language),
        "active_tab": state.active_tab,
        "is_loading": state.is_loading,
        "location": state.location.to_dict() if state.location else None,
        "tabs": enabled_tabs(state),
        "has_weather": state.weather is not None,
        "has_soil": state.soil is not None,
        "recommendation_count": len(state.recommendations),
    }


def build_view(state: SessionState, tab: str) -> Dict[str, Any]:
    """
    Build the localized view model for a tab.

    Raises:
        TabUnavailableError: Unknown tab, or its data is not loaded yet
    """
    if tab not in TABS:
        raise TabUnavailableError(tab, "unknown tab")

    language = state.language
    recommendations: List[CropSuitability] = list(state.recommendations)

    if tab == "location":
        body = build_location_view(state.location, language, state.is_loading)
    elif tab == "weather":
        if state.weather is None:
            raise TabUnavailableError(tab, "data not loaded yet")
        body = build_weather_view(state.weather, language)
    elif tab == "soil":
        if state.soil is None:
            raise TabUnavailableError(tab, "data not loaded yet")
        body = build_soil_view(state.soil, state.location, language)
    elif tab == "recommendations":
        if not recommendations:
            raise TabUnavailableError(tab, "data not loaded yet")
        body = build_recommendations_view(recommendations, language)
    else:
        if not recommendations or state.weather is None or state.soil is None:
            raise TabUnavailableError(tab, "data not loaded yet")
        body = build_dashboard_view(recommendations, state.weather, state.soil, state.location, language)

    return {
        "tab": tab,
        "language": language,
        "label_language": resolve_language(language),
        "header": build_header(state),
        "view": body,
    }


# Process-wide session registry used by the API handlers
session_store = SessionStore()
