"""Unit tests for SearchDriver request ordering, failures and debouncing."""

from __future__ import annotations

import asyncio
from typing import Any, Mapping

from search_driver import DEFAULT_STATE, SearchDriver, SearchState
from search_driver.kernel.errors import ExternalServiceError
from search_driver.testing.fakes import DEFAULT_SEARCH_RESPONSE, RecordingAPIConnector
from search_driver.testing.helpers import setup_driver


def _response(request_id: str, total_results: int = 10) -> dict[str, Any]:
    return {**DEFAULT_SEARCH_RESPONSE, "request_id": request_id, "total_results": total_results}


async def _settle() -> None:
    for _ in range(3):
        await asyncio.sleep(0)


# ---------------------------------------------------------------------------
# Out-of-order responses
# ---------------------------------------------------------------------------


class TestSearchOrdering:
    def test_last_issued_search_wins(self) -> None:
        async def scenario() -> SearchState:
            setup = setup_driver(track_url_state=False)
            setup.connector.gate("search")
            setup.driver.set_search_term("a")
            setup.driver.set_search_term("b")
            await _settle()
            setup.connector.release(1, _response("b"))
            await _settle()
            setup.connector.release(0, _response("a"))
            await setup.driver.wait_until_idle()
            return setup.driver.get_state()

        state = asyncio.run(scenario())
        assert state.request_id == "b"
        assert state.result_search_term == "b"
        assert state.is_loading is False

    def test_stale_response_arriving_first_is_discarded(self) -> None:
        async def scenario() -> list[str]:
            setup = setup_driver(track_url_state=False)
            seen: list[str] = []
            setup.driver.subscribe_to_state_changes(lambda s: seen.append(s.request_id))
            setup.connector.gate("search")
            setup.driver.set_search_term("a")
            setup.driver.set_search_term("b")
            await _settle()
            setup.connector.release(0, _response("a"))
            await _settle()
            setup.connector.release(1, _response("b"))
            await setup.driver.wait_until_idle()
            return seen

        assert asyncio.run(scenario()) == ["", "", "b"]

    def test_loading_until_latest_response(self) -> None:
        async def scenario() -> tuple[bool, bool]:
            setup = setup_driver(track_url_state=False)
            setup.connector.gate("search")
            setup.driver.set_search_term("a")
            setup.driver.set_search_term("b")
            await _settle()
            setup.connector.release(0, _response("a"))
            await _settle()
            loading_after_stale = setup.driver.get_state().is_loading
            setup.connector.release(1, _response("b"))
            await setup.driver.wait_until_idle()
            return loading_after_stale, setup.driver.get_state().is_loading

        assert asyncio.run(scenario()) == (True, False)

    def test_paging_uses_request_state(self) -> None:
        async def scenario() -> SearchState:
            setup = setup_driver(track_url_state=False, initial_state={"current": 2})
            setup.connector.gate("search")
            setup.driver.set_current(3)
            await _settle()
            setup.connector.release(0, _response("x", total_results=1000))
            await setup.driver.wait_until_idle()
            return setup.driver.get_state()

        state = asyncio.run(scenario())
        assert (state.paging_start, state.paging_end) == (41, 60)

    def test_autocomplete_ordering_independent_of_search(self) -> None:
        async def scenario() -> SearchState:
            setup = setup_driver(track_url_state=False)
            setup.connector.gate("search")
            setup.connector.gate("autocomplete")
            setup.driver.set_search_term("bi", autocomplete_results=True)
            setup.driver.set_search_term("bik", refresh=False, autocomplete_results=True)
            await _settle()
            setup.connector.release(0, _response("search-bi"))
            setup.connector.release(
                1,
                {"autocompleted_results": [{"id": "bik"}], "autocompleted_results_request_id": "ac-bik"},
                family="autocomplete",
            )
            setup.connector.release(
                0,
                {"autocompleted_results": [{"id": "bi"}], "autocompleted_results_request_id": "ac-bi"},
                family="autocomplete",
            )
            await setup.driver.wait_until_idle()
            return setup.driver.get_state()

        state = asyncio.run(scenario())
        assert state.request_id == "search-bi"
        assert state.autocompleted_results_request_id == "ac-bik"
        assert state.search_term == "bik"

    def test_reset_discards_in_flight_responses(self) -> None:
        async def scenario() -> SearchState:
            setup = setup_driver(track_url_state=False)
            setup.connector.gate("search")
            setup.driver.set_search_term("a")
            await _settle()
            setup.driver.reset()
            setup.connector.release(0, _response("a"))
            await setup.driver.wait_until_idle()
            return setup.driver.get_state()

        assert asyncio.run(scenario()) == DEFAULT_STATE

    def test_wait_until_idle_without_pending(self) -> None:
        async def scenario() -> None:
            driver = SearchDriver(RecordingAPIConnector(), track_url_state=False)
            await driver.wait_until_idle()

        asyncio.run(scenario())


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class _SyncConnector:
    """Connector answering synchronously, as plain functions."""

    def __init__(self, search_response: Any) -> None:
        self.search_response = search_response

    def on_search(self, state: SearchState, query: Any) -> Any:
        return self.search_response

    def on_autocomplete(self, state: SearchState, query: Any) -> Any:
        return {"autocompleted_results": [{"id": 1}], "autocompleted_results_request_id": "sync"}

    def on_result_click(self, payload: Mapping[str, Any]) -> None:
        return None

    def on_autocomplete_result_click(self, payload: Mapping[str, Any]) -> None:
        return None


class TestFailures:
    def test_search_failure_surfaces_as_error(self) -> None:
        setup = setup_driver(track_url_state=False)
        setup.connector.search_error = RuntimeError("boom")
        setup.driver.set_search_term("test")
        state = setup.driver.get_state()
        assert state.error == "An unexpected error occurred: boom"
        assert state.is_loading is False
        assert state.search_term == "test"

    def test_error_cleared_by_next_success(self) -> None:
        setup = setup_driver(track_url_state=False)
        setup.connector.search_error = RuntimeError("boom")
        setup.driver.set_search_term("test")
        setup.connector.search_error = None
        setup.driver.set_current(2)
        assert setup.driver.get_state().error == ""

    def test_external_service_error_message_kept(self) -> None:
        setup = setup_driver(track_url_state=False)
        setup.connector.search_error = ExternalServiceError("search-api", "timed out")
        setup.driver.set_search_term("test")
        assert setup.driver.get_state().error == "An unexpected error occurred: timed out"

    def test_autocomplete_failure_leaves_loading_alone(self) -> None:
        setup = setup_driver(track_url_state=False)
        setup.connector.autocomplete_error = RuntimeError("nope")
        states: list[SearchState] = []
        setup.driver.subscribe_to_state_changes(states.append)
        setup.driver.set_search_term("bi", refresh=False, autocomplete_results=True)
        assert setup.driver.get_state().error == "An unexpected error occurred: nope"
        assert all(s.is_loading is False for s in states)

    def test_malformed_response(self) -> None:
        driver = SearchDriver(_SyncConnector(None), track_url_state=False)  # type: ignore[arg-type]
        driver.set_search_term("test")
        state = driver.get_state()
        assert state.error == "An unexpected error occurred: on_search returned NoneType, expected a mapping"
        assert state.is_loading is False

    def test_stale_failure_is_discarded(self) -> None:
        async def scenario() -> SearchState:
            setup = setup_driver(track_url_state=False)
            setup.connector.gate("search")
            setup.driver.set_search_term("a")
            setup.driver.set_search_term("b")
            await _settle()
            setup.connector.release(1, _response("b"))
            setup.connector.release(0, error=RuntimeError("late"))
            await setup.driver.wait_until_idle()
            return setup.driver.get_state()

        state = asyncio.run(scenario())
        assert state.error == ""
        assert state.request_id == "b"

    def test_actions_never_raise_backend_errors(self) -> None:
        setup = setup_driver(track_url_state=False)
        setup.connector.search_error = ValueError("bad")
        setup.driver.add_filter("brand", "Nike")
        setup.driver.set_sort("title", "asc")
        assert setup.driver.get_state().error == "An unexpected error occurred: bad"


class TestSyncConnector:
    def test_plain_return_values(self) -> None:
        driver = SearchDriver(
            _SyncConnector({"results": [{"id": 1}], "total_results": 1, "request_id": "sync"}),  # type: ignore[arg-type]
            track_url_state=False,
        )
        driver.set_search_term("test", autocomplete_results=True)
        state = driver.get_state()
        assert state.request_id == "sync"
        assert state.results == ({"id": 1},)
        assert state.autocompleted_results_request_id == "sync"


# ---------------------------------------------------------------------------
# Reentrancy
# ---------------------------------------------------------------------------


class TestReentrancy:
    def test_subscriber_may_call_actions(self) -> None:
        setup = setup_driver(track_url_state=False)
        triggered: list[bool] = []

        def subscriber(state: SearchState) -> None:
            if state.was_searched and not triggered:
                triggered.append(True)
                setup.driver.set_current(2)

        setup.driver.subscribe_to_state_changes(subscriber)
        setup.driver.set_search_term("test")
        state = setup.driver.get_state()
        assert len(setup.connector.search_calls) == 2
        assert state.current == 2
        assert state.is_loading is False
        assert state.paging_start == 21

    def test_subscriber_may_unsubscribe_itself(self) -> None:
        setup = setup_driver(track_url_state=False)
        calls: list[SearchState] = []

        def once(state: SearchState) -> None:
            calls.append(state)
            setup.driver.unsubscribe_to_state_changes(once)

        setup.driver.subscribe_to_state_changes(once)
        setup.driver.set_search_term("test")
        assert len(calls) == 1


# ---------------------------------------------------------------------------
# Debounce
# ---------------------------------------------------------------------------


class TestDebounce:
    def test_rapid_terms_issue_one_search(self) -> None:
        async def scenario() -> tuple[list[str], list[Any]]:
            setup = setup_driver(track_url_state=False, search_debounce=0.01)
            terms: list[str] = []
            for term in ("b", "bi", "bik"):
                setup.driver.set_search_term(term)
                terms.append(setup.driver.get_state().search_term)
            assert setup.connector.search_calls == []
            await asyncio.sleep(0.05)
            await setup.driver.wait_until_idle()
            return terms, setup.connector.search_calls

        terms, calls = asyncio.run(scenario())
        assert terms == ["b", "bi", "bik"]
        assert len(calls) == 1
        assert calls[0][1].search_term == "bik"

    def test_per_call_debounce_overrides_default(self) -> None:
        async def scenario() -> int:
            setup = setup_driver(track_url_state=False, search_debounce=10)
            setup.driver.set_search_term("bike", debounce=0)
            await setup.driver.wait_until_idle()
            return len(setup.connector.search_calls)

        assert asyncio.run(scenario()) == 1

    def test_debounced_autocomplete(self) -> None:
        async def scenario() -> list[Any]:
            setup = setup_driver(track_url_state=False)
            for term in ("b", "bi", "bik"):
                setup.driver.set_search_term(term, refresh=False, autocomplete_results=True, debounce=0.01)
            await asyncio.sleep(0.05)
            await setup.driver.wait_until_idle()
            return setup.connector.autocomplete_calls

        calls = asyncio.run(scenario())
        assert [query.search_term for _, query in calls] == ["bik"]

    def test_debounced_search_keeps_filters_choice(self) -> None:
        async def scenario() -> SearchState:
            setup = setup_driver(
                track_url_state=False,
                initial_state={"filters": [{"field": "brand", "values": ["Nike"]}]},
            )
            await setup.driver.wait_until_idle()
            setup.driver.set_search_term("bike", debounce=0.01, should_clear_filters=False)
            await asyncio.sleep(0.05)
            await setup.driver.wait_until_idle()
            return setup.driver.get_state()

        state = asyncio.run(scenario())
        assert state.search_term == "bike"
        assert state.filters[0].values == ("Nike",)

    def test_tear_down_cancels_pending_search(self) -> None:
        async def scenario() -> int:
            setup = setup_driver(track_url_state=False, search_debounce=0.01)
            setup.driver.set_search_term("bike")
            setup.driver.tear_down()
            await asyncio.sleep(0.05)
            return len(setup.connector.search_calls)

        assert asyncio.run(scenario()) == 0

    def test_reset_cancels_pending_search(self) -> None:
        async def scenario() -> SearchState:
            setup = setup_driver(track_url_state=False, search_debounce=0.01)
            setup.driver.set_search_term("bike")
            setup.driver.reset()
            await asyncio.sleep(0.05)
            await setup.driver.wait_until_idle()
            return setup.driver.get_state()

        assert asyncio.run(scenario()) == DEFAULT_STATE

    def test_no_running_loop_searches_immediately(self) -> None:
        setup = setup_driver(track_url_state=False, search_debounce=0.5)
        setup.driver.set_search_term("bike")
        assert len(setup.connector.search_calls) == 1
        assert setup.driver.get_state().result_search_term == "bike"
