"""Unit tests for SearchDriver URL synchronisation."""

from __future__ import annotations

from urllib.parse import parse_qsl

from search_driver import SearchDriver
from search_driver.adapters.url import InMemoryLocation, QueryStringURLManager
from search_driver.application.state import Filter
from search_driver.testing.fakes import RecordingAPIConnector
from search_driver.testing.helpers import setup_driver


class TestUrlStateAtCreation:
    def test_url_state_merged_over_initial_state(self) -> None:
        setup = setup_driver(
            initial_state={"results_per_page": 40, "search_term": "initial"},
            url_state={"search_term": "park", "current": 2},
        )
        state = setup.state_after_creation
        assert (state.search_term, state.current, state.results_per_page) == ("park", 2, 40)
        assert setup.connector.search_calls[0][1].search_term == "park"

    def test_url_filters_trigger_search(self) -> None:
        setup = setup_driver(url_state={"filters": [{"field": "states", "values": ["Alaska"], "type": "any"}]})
        assert setup.state_after_creation.filters == (Filter("states", ("Alaska",), "any"),)
        assert len(setup.connector.search_calls) == 1

    def test_url_state_ignored_when_tracking_disabled(self) -> None:
        setup = setup_driver(url_state={"search_term": "park"}, track_url_state=False)
        assert setup.state_after_creation.search_term == ""
        assert setup.connector.search_calls == []


class TestPushStateToUrl:
    def test_actions_push(self) -> None:
        setup = setup_driver()
        setup.driver.set_search_term("park")
        setup.driver.set_current(2)
        pushed = setup.url_sync_factory.instances[0].pushed
        assert [(s.search_term, s.current, replace) for s, replace in pushed] == [
            ("", 1, True),
            ("park", 1, False),
            ("park", 2, False),
        ]

    def test_pushed_state_is_request_state(self) -> None:
        setup = setup_driver()
        setup.driver.set_search_term("park")
        state, _ = setup.url_sync_factory.instances[0].pushed[-1]
        assert state.is_loading is True
        assert state.was_searched is False

    def test_set_search_term_without_refresh_does_not_push(self) -> None:
        setup = setup_driver()
        setup.driver.set_search_term("park", refresh=False)
        assert len(setup.url_sync_factory.instances[0].pushed) == 1


class TestUrlChange:
    def test_url_change_searches_without_pushing(self) -> None:
        setup = setup_driver()
        url_sync = setup.url_sync_factory.instances[0]
        url_sync.simulate_url_change({"search_term": "park", "current": 2})
        state = setup.driver.get_state()
        assert (state.search_term, state.current) == ("park", 2)
        assert setup.connector.search_calls[-1][1].search_term == "park"
        assert len(url_sync.pushed) == 1

    def test_missing_url_fields_fall_back_to_starting_state(self) -> None:
        setup = setup_driver(initial_state={"results_per_page": 40})
        setup.driver.set_search_term("shoes")
        setup.driver.add_filter("brand", "Nike")
        setup.driver.set_current(3)
        setup.url_sync_factory.instances[0].simulate_url_change({"search_term": "park"})
        state = setup.driver.get_state()
        assert state.search_term == "park"
        assert state.filters == ()
        assert state.current == 1
        assert state.results_per_page == 40

    def test_url_change_after_tear_down_ignored_by_manager(self) -> None:
        location = InMemoryLocation()
        connector = RecordingAPIConnector()
        driver = SearchDriver(connector, url_sync_factory=lambda cb: QueryStringURLManager(cb, location))
        driver.tear_down()
        location.navigate("q=park")
        assert connector.search_calls == []


class TestQueryStringIntegration:
    def test_round_trip_through_location(self) -> None:
        location = InMemoryLocation("q=park&filters[0][field]=states&filters[0][values][0]=Alaska")
        connector = RecordingAPIConnector()
        driver = SearchDriver(connector, url_sync_factory=lambda cb: QueryStringURLManager(cb, location))
        state = driver.get_state()
        assert state.search_term == "park"
        assert state.filters == (Filter("states", ("Alaska",)),)
        assert len(location.entries) == 1
        assert dict(parse_qsl(location.search))["q"] == "park"

        driver.set_search_term("shoes")
        assert dict(parse_qsl(location.search))["q"] == "shoes"
        assert len(location.entries) == 2

        location.navigate("q=boots")
        assert driver.get_state().search_term == "boots"
        assert connector.search_calls[-1][1].search_term == "boots"
        assert len(location.entries) == 3

    def test_malformed_filter_in_url_at_creation(self) -> None:
        location = InMemoryLocation(
            "q=park&filters[0][field]=brand&filters[0][values][0]=x&filters[0][type]=bogus"
        )
        connector = RecordingAPIConnector()
        driver = SearchDriver(connector, url_sync_factory=lambda cb: QueryStringURLManager(cb, location))
        state = driver.get_state()
        assert state.search_term == "park"
        assert state.filters == ()
        assert connector.search_calls[-1][1].filters == ()

    def test_malformed_values_on_navigate(self) -> None:
        location = InMemoryLocation()
        connector = RecordingAPIConnector()
        driver = SearchDriver(connector, url_sync_factory=lambda cb: QueryStringURLManager(cb, location))
        location.navigate("q=n_5_n&filters[0][field]=brand&filters[0][values][0]=x&filters[0][type]=bogus")
        state = driver.get_state()
        assert state.search_term == ""
        assert state.filters == ()

    def test_default_factory_is_query_string_manager(self) -> None:
        connector = RecordingAPIConnector()
        driver = SearchDriver(connector)
        driver.set_search_term("park")
        assert driver.get_state().result_search_term == "park"
        driver.tear_down()

    def test_reset_pushes_starting_state(self) -> None:
        location = InMemoryLocation()
        driver = SearchDriver(RecordingAPIConnector(), url_sync_factory=lambda cb: QueryStringURLManager(cb, location))
        driver.set_search_term("shoes")
        driver.reset()
        assert "q" not in dict(parse_qsl(location.search))
