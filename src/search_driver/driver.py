"""SearchDriver – composition root of the search state machine.

The driver owns a :class:`StateStore` and a :class:`SubscriptionHub`, and
binds them to the query builder, response mapper and request sequencer.
Collaborators (API connector, URL sync, a11y notifier) are injected.

Actions commit synchronously and notify subscribers before returning.  The
backend call they start runs as a task on the running event loop; with no
loop running it is resolved before the action returns.  Either way the
response is applied only if no newer request of the same family was issued
in the meantime.

Example::

    driver = SearchDriver(InMemoryAPIConnector(docs), track_url_state=False)
    driver.subscribe_to_state_changes(render)
    driver.set_search_term("shoes")
    driver.add_filter("brand", "Nike", "any")
"""
from __future__ import annotations

import asyncio
import inspect
import uuid
from typing import Any, Awaitable, Coroutine, Iterable, Mapping

from search_driver.adapters.a11y import LoggingA11yNotifier
from search_driver.adapters.url import QueryStringURLManager
from search_driver.application import actions
from search_driver.application.a11y import A11yMessage, merge_messages
from search_driver.application.query import AutocompleteQueryConfig, QueryBuilder, SearchQueryConfig
from search_driver.application.response import ResponseMapper
from search_driver.application.sequencing import RequestFamily, RequestSequencer, RequestToken
from search_driver.application.state import (
    DEFAULT_STATE,
    REQUEST_FIELDS,
    FilterType,
    SearchState,
    StateStore,
)
from search_driver.application.subscriptions import StateSubscriber, SubscriptionHub
from search_driver.config.settings import DriverSettings
from search_driver.kernel.errors import ExternalServiceError, NotFoundError
from search_driver.observability.logging import get_logger
from search_driver.ports import A11yNotifier, APIConnector, URLSync, URLSyncFactory

__all__ = ["SearchDriver"]


async def _resolve(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class SearchDriver:
    def __init__(
        self,
        api_connector: APIConnector,
        *,
        search_query: SearchQueryConfig | Mapping[str, Any] | None = None,
        autocomplete_query: AutocompleteQueryConfig | Mapping[str, Any] | None = None,
        initial_state: Mapping[str, Any] | None = None,
        a11y_notification_messages: Mapping[str, A11yMessage] | None = None,
        has_a11y_notifications: bool = False,
        a11y_notifier: A11yNotifier | None = None,
        track_url_state: bool = True,
        url_sync_factory: URLSyncFactory | None = None,
        always_search_on_initial_load: bool = False,
        search_debounce: float = 0.0,
    ) -> None:
        self.api_connector = api_connector
        self.track_url_state = track_url_state
        self.always_search_on_initial_load = always_search_on_initial_load
        self.has_a11y_notifications = has_a11y_notifications
        self.a11y_notification_messages = merge_messages(a11y_notification_messages)
        self.a11y_notifier: A11yNotifier = a11y_notifier or LoggingA11yNotifier()
        self.search_debounce = search_debounce

        self._log = get_logger(__name__, driver_id=uuid.uuid4().hex[:12])
        self._query_builder = QueryBuilder(search_query, autocomplete_query)
        self._mapper = ResponseMapper()
        self._sequencer = RequestSequencer()
        self._subscriptions = SubscriptionHub()
        self._debounce = actions.DebounceManager()
        self._pending: set[asyncio.Task[Any]] = set()

        self._starting_state = DEFAULT_STATE.merge(initial_state or {})
        state = self._starting_state
        self._url_sync: URLSync | None = None
        if track_url_state:
            factory = url_sync_factory or QueryStringURLManager
            self._url_sync = factory(self._on_url_change)
            state = state.merge(self._url_sync.get_state_from_url())
        self._store = StateStore(state, on_commit=self._subscriptions.notify)

        self._log.debug(
            "driver.created",
            track_url_state=track_url_state,
            always_search_on_initial_load=always_search_on_initial_load,
        )
        if state.search_term or state.filters or always_search_on_initial_load:
            self._update_search_results({}, replace_url=True)
        elif self._url_sync is not None:
            self._url_sync.push_state_to_url(state, replace_url=True)

    @classmethod
    def from_settings(
        cls,
        settings: DriverSettings,
        api_connector: APIConnector,
        **kwargs: Any,
    ) -> "SearchDriver":
        """Build a driver from :class:`DriverSettings`; *kwargs* win over settings."""
        initial_state = {"results_per_page": settings.results_per_page}
        initial_state.update(kwargs.pop("initial_state", None) or {})
        options: dict[str, Any] = {
            "track_url_state": settings.track_url_state,
            "always_search_on_initial_load": settings.always_search_on_initial_load,
            "has_a11y_notifications": settings.has_a11y_notifications,
            "search_debounce": settings.search_debounce,
        }
        options.update(kwargs)
        return cls(api_connector, initial_state=initial_state, **options)

    # ------------------------------------------------------------------
    # Public surface
    # ------------------------------------------------------------------

    def get_state(self) -> SearchState:
        return self._store.get_state()

    def get_actions(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in actions.ACTION_NAMES}

    def subscribe_to_state_changes(self, fn: StateSubscriber) -> None:
        self._subscriptions.subscribe(fn)

    def unsubscribe_to_state_changes(self, fn: StateSubscriber) -> None:
        self._subscriptions.unsubscribe(fn)

    def tear_down(self) -> None:
        """Drop every subscription, cancel debounced calls and detach URL sync."""
        self._subscriptions.clear()
        self._debounce.cancel_all()
        if self._url_sync is not None:
            self._url_sync.tear_down()
            self._url_sync = None
        self._log.debug("driver.torn_down")

    async def wait_until_idle(self) -> None:
        """Wait for every in-flight backend call, including ones started meanwhile."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add_filter(self, name: str, value: Any, type: FilterType = "all") -> None:  # noqa: A002
        filters = actions.add_filter(self._store.current.filters, name, value, type)
        self._update_search_results({"current": 1, "filters": filters})

    def remove_filter(self, name: str, value: Any = None, type: FilterType | None = None) -> None:  # noqa: A002
        filters = actions.remove_filter(self._store.current.filters, name, value, type)
        self._update_search_results({"current": 1, "filters": filters})

    def set_filter(self, name: str, value: Any, type: FilterType = "all") -> None:  # noqa: A002
        filters = actions.set_filter(self._store.current.filters, name, value, type)
        self._update_search_results({"current": 1, "filters": filters})

    def clear_filters(self, except_: Iterable[str] = ()) -> None:
        filters = actions.clear_filters(self._store.current.filters, except_)
        self._update_search_results({"current": 1, "filters": filters})

    def reset(self) -> None:
        """Restore the starting state; responses still in flight are discarded."""
        for family in RequestFamily:
            self._sequencer.issue(family)
        self._debounce.cancel_all()
        state = self._store.replace(self._starting_state)
        if self._url_sync is not None:
            self._url_sync.push_state_to_url(state)

    def set_results_per_page(self, results_per_page: int) -> None:
        actions.require_positive_int("results_per_page", results_per_page)
        self._update_search_results({"current": 1, "results_per_page": results_per_page})

    def set_search_term(
        self,
        search_term: str,
        *,
        refresh: bool = True,
        autocomplete_results: bool = False,
        autocomplete_suggestions: bool = False,
        autocomplete_minimum_characters: int = 0,
        should_clear_filters: bool = True,
        debounce: float | None = None,
    ) -> None:
        """Set the search term, then search and/or autocomplete.

        ``debounce`` (seconds) defaults to the driver's ``search_debounce``.
        """
        wait = self.search_debounce if debounce is None else debounce
        search_patch: dict[str, Any] = {"current": 1}
        if should_clear_filters:
            search_patch["filters"] = ()

        if refresh and wait <= 0:
            self._update_search_results({"search_term": search_term, **search_patch})
        else:
            self._store.commit({"search_term": search_term})
            if refresh:
                self._debounce.run_with_debounce(wait, "search", self._update_search_results, search_patch)

        if (autocomplete_results or autocomplete_suggestions) and len(search_term) >= autocomplete_minimum_characters:
            self._debounce.run_with_debounce(
                wait,
                "autocomplete",
                self._update_autocomplete,
                search_term,
                results=autocomplete_results,
                suggestions=autocomplete_suggestions,
            )

    def set_sort(self, sort_field: str, sort_direction: str | None) -> None:
        self._update_search_results(
            {"current": 1, "sort_field": sort_field or "", "sort_direction": sort_direction or ""}
        )

    def set_current(self, current: int) -> None:
        actions.require_positive_int("current", current)
        self._update_search_results({"current": current})

    def track_click_through(self, document_id: str, tags: Iterable[str] = ()) -> None:
        state = self._store.current
        self._track(
            "on_result_click",
            {
                "query": state.search_term,
                "document_id": document_id,
                "request_id": state.request_id,
                "tags": list(tags),
            },
        )

    def track_autocomplete_click_through(self, document_id: str, tags: Iterable[str] = ()) -> None:
        state = self._store.current
        self._track(
            "on_autocomplete_result_click",
            {
                "query": state.search_term,
                "document_id": document_id,
                "request_id": state.autocompleted_results_request_id,
                "tags": list(tags),
            },
        )

    def a11y_notify(self, message_name: str, message_args: Mapping[str, Any] | None = None) -> None:
        if not self.has_a11y_notifications:
            return
        renderer = self.a11y_notification_messages.get(message_name)
        if renderer is None:
            raise NotFoundError(
                "a11y notification message", message_name, known=self.a11y_notification_messages
            )
        self.a11y_notifier.announce(renderer(**dict(message_args or {})))

    # ------------------------------------------------------------------
    # Query cycles
    # ------------------------------------------------------------------

    def _update_search_results(
        self,
        patch: Mapping[str, Any],
        *,
        skip_push_to_url: bool = False,
        replace_url: bool = False,
    ) -> None:
        self._store.commit({**patch, "is_loading": True})
        request_state = self._store.get_state()
        if self._url_sync is not None and not skip_push_to_url:
            self._url_sync.push_state_to_url(request_state, replace_url=replace_url)
        query = self._query_builder.build_search(request_state)
        token = self._sequencer.issue(RequestFamily.SEARCH)
        self._log.debug("search.issued", token=token.sequence, search_term=request_state.search_term)
        self._spawn(self._run_search(token, request_state, query))

    async def _run_search(self, token: RequestToken, request_state: SearchState, query: Any) -> None:
        try:
            response = await _resolve(self.api_connector.on_search(request_state, query))
            patch = self._mapper.map_search(response, request_state)
        except Exception as exc:  # noqa: BLE001
            self._handle_failure(token, "on_search", exc)
            return
        if self._sequencer.is_stale(token):
            self._log.debug("search.discarded", token=token.sequence)
            return
        state = self._store.commit(patch)
        self._log.debug(
            "search.completed",
            token=token.sequence,
            search_term=state.result_search_term,
            total_results=state.total_results,
        )
        self.a11y_notify(
            "search_results",
            {
                "start": state.paging_start,
                "end": state.paging_end,
                "total_results": state.total_results,
                "search_term": state.search_term,
            },
        )

    def _update_autocomplete(self, search_term: str, *, results: bool, suggestions: bool) -> None:
        query = self._query_builder.build_autocomplete(search_term, results=results, suggestions=suggestions)
        token = self._sequencer.issue(RequestFamily.AUTOCOMPLETE)
        self._log.debug("autocomplete.issued", token=token.sequence, search_term=search_term)
        self._spawn(self._run_autocomplete(token, self._store.get_state(), query))

    async def _run_autocomplete(self, token: RequestToken, request_state: SearchState, query: Any) -> None:
        try:
            response = await _resolve(self.api_connector.on_autocomplete(request_state, query))
            patch = self._mapper.map_autocomplete(response)
        except Exception as exc:  # noqa: BLE001
            self._handle_failure(token, "on_autocomplete", exc)
            return
        if self._sequencer.is_stale(token):
            self._log.debug("autocomplete.discarded", token=token.sequence)
            return
        self._store.commit(patch)
        self._log.debug("autocomplete.completed", token=token.sequence)

    def _handle_failure(self, token: RequestToken, operation: str, exc: Exception) -> None:
        if isinstance(exc, ExternalServiceError):
            error = exc
        else:
            error = ExternalServiceError(
                "api_connector",
                str(exc) or type(exc).__name__,
                operation=operation,
                cause=exc,
            )
        if self._sequencer.is_stale(token):
            self._log.debug(
                f"{token.family.value}.discarded",
                family=token.family.value,
                token=token.sequence,
                error=error.message,
            )
            return
        self._log.warning(
            f"{token.family.value}.failed",
            family=token.family.value,
            token=token.sequence,
            error=error.to_dict(),
        )
        patch: dict[str, Any] = {"error": f"An unexpected error occurred: {error.message}"}
        if token.family is RequestFamily.SEARCH:
            patch["is_loading"] = False
        self._store.commit(patch)

    def _on_url_change(self, url_patch: Mapping[str, Any]) -> None:
        defaults = {name: getattr(self._starting_state, name) for name in REQUEST_FIELDS}
        self._update_search_results({**defaults, **url_patch}, skip_push_to_url=True)

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running event loop – resolve the call before returning
            asyncio.run(self._run_to_idle(coro))
            return
        task = loop.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _run_to_idle(self, coro: Awaitable[None]) -> None:
        await coro
        await self.wait_until_idle()

    def _track(self, method: str, payload: dict[str, Any]) -> None:
        try:
            result = getattr(self.api_connector, method)(payload)
        except Exception as exc:  # noqa: BLE001
            self._log.warning("tracking.failed", method=method, error=repr(exc))
            return
        if inspect.isawaitable(result):
            self._spawn(self._await_tracking(method, result))

    async def _await_tracking(self, method: str, result: Awaitable[Any]) -> None:
        try:
            await result
        except Exception as exc:  # noqa: BLE001
            self._log.warning("tracking.failed", method=method, error=repr(exc))
