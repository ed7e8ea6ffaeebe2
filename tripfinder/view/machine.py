"""
Destinations view state machine.

Sequences the two dependent service calls and owns the ViewState:

    list:   loading -> ready | error
    detail: closed -> loading -> open | error   (list is left untouched)

Every fetch takes a request token from a monotonically increasing counter.
A response is applied only while its token is still current, so a newer
selection supersedes an older in-flight one and closing the detail
discards any late response.
"""

import logging
import uuid
from typing import Any, Callable, Dict, List, Optional, Union

from tripfinder.details.client import DetailClient
from tripfinder.details.normalize import normalize_detail
from tripfinder.discovery.client import DiscoveryClient
from tripfinder.query.schemas import CanonicalQuery
from tripfinder.shared.errors import TripServiceError
from tripfinder.shared.logging.config import log_state_transition
from tripfinder.view.cards import DestinationCard, build_cards
from tripfinder.view.state import Screen, ViewState, initial_view_state


logger = logging.getLogger(__name__)

SEARCH_ROUTE = "/search"

Listener = Callable[[ViewState], None]


class DestinationsView:
    """
    State machine behind the destinations results view.

    The view has exactly one writer (this object). Readers either call
    ``state`` or subscribe to snapshots taken after each transition.
    """

    def __init__(
        self,
        discovery: DiscoveryClient,
        details: DetailClient,
        navigate: Optional[Callable[[str], None]] = None,
    ):
        self._discovery = discovery
        self._details = details
        self._navigate = navigate

        self._state: ViewState = initial_view_state()
        self._query: Optional[CanonicalQuery] = None
        self._list_token = 0
        self._detail_token = 0
        self._listeners: List[Listener] = []

        self.view_id = uuid.uuid4().hex[:8]

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        """Snapshot of the current view state."""
        snapshot = dict(self._state)
        snapshot["summaries"] = list(self._state["summaries"])
        return snapshot  # type: ignore[return-value]

    @property
    def query(self) -> Optional[CanonicalQuery]:
        return self._query

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for state snapshots. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def screen(self) -> Screen:
        """
        Which screen a renderer should show.

        - "loading": the list is loading and no detail is open
        - "error": the list failed and there is nothing to show
        - "results": otherwise, including a failure after a successful load
        """
        state = self._state
        if state["phase"] == "loading" and not state["detail_open"]:
            return "loading"
        if state["phase"] == "error" and not state["summaries"]:
            return "error"
        return "results"

    def actions(self) -> List[str]:
        """User actions available on the current screen."""
        screen = self.screen()
        if screen == "error":
            return ["retry", "new_search"]
        if screen == "loading":
            return ["new_search"]

        actions = ["new_search"]
        if self._state["summaries"]:
            actions.append("select")
        if self._state["detail_open"]:
            actions.append("close")
        return actions

    def cards(self) -> List[DestinationCard]:
        """Result cards for the current summaries."""
        if self._query is None:
            return []
        return build_cards(self._state["summaries"], self._query)

    # ------------------------------------------------------------------
    # List transitions
    # ------------------------------------------------------------------

    async def mount(self, query: CanonicalQuery) -> ViewState:
        """Enter the view with a query and load its destinations."""
        self._query = query
        return await self._load_list()

    async def on_query_changed(self, query: CanonicalQuery) -> ViewState:
        """
        Reload for a new query. An unchanged query is a no-op.

        The open detail belongs to the previous search and is closed.
        """
        if query == self._query:
            return self.state
        self._query = query
        if self._state["detail_open"] or self._state["detail_loading"]:
            self.close()
        return await self._load_list()

    async def retry(self) -> ViewState:
        """Re-run the list fetch for the current query."""
        if self._query is None:
            raise RuntimeError("DestinationsView.retry() called before mount()")
        return await self._load_list()

    def new_search(self) -> None:
        """Leave for the search form."""
        if self._navigate is None:
            raise RuntimeError("DestinationsView has no navigate callable")
        logger.info(f"[view=destinations:{self.view_id}] Navigating to {SEARCH_ROUTE}")
        self._navigate(SEARCH_ROUTE)

    async def _load_list(self) -> ViewState:
        self._list_token += 1
        token = self._list_token
        query = self._query
        _log = f"[view=destinations:{self.view_id}] [request=list:{token}] "

        self._apply({"phase": "loading"}, "list_loading", {"request": token})

        try:
            summaries = await self._discovery.fetch_summaries(query)
        except TripServiceError as e:
            if token != self._list_token:
                logger.info(f"{_log}Discarding superseded failure: {e.message}")
                return self.state
            logger.error(f"{_log}Destination list failed: {e.message}")
            self._apply(
                {"phase": "error", "error_message": e.message},
                "list_failed",
                {"request": token, "error_type": type(e).__name__},
            )
            return self.state

        if token != self._list_token:
            logger.info(f"{_log}Discarding superseded list | current={self._list_token}")
            return self.state

        self._apply(
            {"phase": "ready", "summaries": summaries, "error_message": None},
            "list_ready",
            {"request": token},
        )
        return self.state

    # ------------------------------------------------------------------
    # Detail transitions
    # ------------------------------------------------------------------

    async def select(self, destination_id: Union[int, str]) -> ViewState:
        """
        Fetch and open the detail for a destination.

        Supersedes any detail fetch still in flight. On failure the error
        is recorded and whatever is currently open stays open.
        """
        if self._query is None:
            raise RuntimeError("DestinationsView.select() called before mount()")

        self._detail_token += 1
        token = self._detail_token
        query = self._query
        _log = f"[view=destinations:{self.view_id}] [request=detail:{token}] "

        self._apply(
            {"detail_loading": True, "detail_error": None},
            "detail_loading",
            {"request": token, "destination_id": destination_id},
        )

        try:
            detail = await self._details.fetch_detail(destination_id)
        except TripServiceError as e:
            if token != self._detail_token:
                logger.info(f"{_log}Discarding stale detail failure: {e.message}")
                return self.state
            logger.error(f"{_log}Detail for {destination_id} failed: {e.message}")
            self._apply(
                {"detail_loading": False, "detail_error": e.message},
                "detail_failed",
                {"request": token, "destination_id": destination_id},
            )
            return self.state

        if token != self._detail_token:
            logger.info(
                f"{_log}Discarding stale detail for {destination_id} | "
                f"current={self._detail_token}"
            )
            return self.state

        profile = normalize_detail(detail, query, requested_id=destination_id)
        self._apply(
            {"selected_detail": profile, "detail_open": True, "detail_loading": False},
            "detail_opened",
            {"request": token, "destination_id": destination_id},
        )
        return self.state

    def close(self) -> ViewState:
        """Close the detail. Any in-flight detail response will be discarded."""
        self._detail_token += 1
        self._apply(
            {
                "selected_detail": None,
                "detail_open": False,
                "detail_loading": False,
                "detail_error": None,
            },
            "detail_closed",
        )
        return self.state

    # ------------------------------------------------------------------

    def _apply(
        self,
        updates: Dict[str, Any],
        event: str,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._state = {**self._state, **updates}  # type: ignore[assignment]
        log_state_transition(event, self._state, extra=extra, logger=logger)

        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                # A failing reader must not abort a transition already applied
                logger.exception(
                    f"[view=destinations:{self.view_id}] Listener failed on {event}"
                )
