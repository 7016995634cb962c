"""Tests for infrastructure.i18n.translator module."""

import pytest

from infrastructure.i18n import create_translation_engine
from tests.factories.i18n import FakeConfigurationManager, FakeTransport


class TestTranslator:
    """Tests for translation resolution."""

    @pytest.fixture
    def t(self, engine):
        return engine[0]

    @pytest.fixture
    def actions(self, engine):
        return engine[1]

    def test_translate_template(self, t):
        assert t("greeting", {"name": "Tom"}) == "Hello Tom"

    def test_translate_nested_key_with_dot_path_params(self, t):
        message = t("incident.created", {"incident": {"id": "INC-1"}, "user": "alice"})
        assert message == "Incident INC-1 created by alice"

    def test_translate_without_params(self, t):
        assert t("incident.resolved") == "Incident resolved"

    def test_translate_missing_param_collapses(self, t):
        assert t("greeting") == "Hello "

    def test_translate_callable_receives_params(self, t):
        """Callables produce final text and bypass template rendering."""
        assert t("count", {"count": 3}) == "3 items"

    def test_translate_nested_dictionary_returned_raw(self, t):
        assert t("incident") == {
            "created": "Incident {{ incident.id }} created by {{ user }}",
            "resolved": "Incident resolved",
        }

    def test_translate_default_value_is_rendered(self, t):
        assert t("unknown", {"name": "Joe"}, "Hello, {{ name }}!") == "Hello, Joe!"

    def test_added_locale(self, t, actions):
        actions.add("sw", {"hello": "Hej {{ name }}"})
        actions.locale("sw")
        assert t("hello", {"name": "Lisa"}) == "Hej Lisa"

    def test_add_twice_keeps_resolution(self, t, actions):
        actions.add("sw", {"hello": "Hej {{ name }}"})
        actions.add("sw", {"hello": "Hej {{ name }}"})
        actions.locale("sw")
        assert t("hello", {"name": "Lisa"}) == "Hej Lisa"

    def test_switching_locale_falls_back_to_default(self, t, actions):
        actions.locale("unknown")
        assert t("greeting", {"name": "Joe"}, "Hello, {{ name }}!") == "Hello, Joe!"

    def test_miss_without_running_loop_returns_empty(self, t, transport):
        """Outside an event loop a miss is returned without fetching."""
        assert t("missing.key") == ""
        assert transport.calls == []


class TestTranslatorFetching:
    """Tests for background fetching on misses."""

    @pytest.mark.asyncio
    async def test_miss_fetches_preferred_locale(self, engine, transport, config):
        t, actions = engine
        actions.locale("fr")

        assert t("greeting", {"name": "Jean"}) == ""
        await t.wait_for_fetches()

        assert transport.calls == ["fr"]
        assert config.calls == ["language"]
        assert t("greeting", {"name": "Jean"}) == "Bonjour Jean"

    @pytest.mark.asyncio
    async def test_two_misses_fetch_once(self, engine, transport):
        t, _ = engine

        assert t("missing.one") == ""
        assert t("missing.two") == ""
        await t.wait_for_fetches()

        assert transport.calls == ["fr"]

    @pytest.mark.asyncio
    async def test_empty_translation_counts_as_miss(self, engine, transport):
        t, _ = engine

        assert t("empty") == ""
        await t.wait_for_fetches()

        assert transport.calls == ["fr"]

    @pytest.mark.asyncio
    async def test_hit_does_not_fetch(self, engine, transport):
        t, _ = engine

        t("greeting", {"name": "Tom"})
        await t.wait_for_fetches()

        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_no_preference_fetches_baseline(self):
        transport = FakeTransport({"en": {"late": "Arrived"}})
        t, _ = create_translation_engine(
            {"en": {}},
            transport=transport,
            config=FakeConfigurationManager(language=None),
            ambient_language="en",
        )

        assert t("late") == ""
        await t.wait_for_fetches()

        assert transport.calls == ["en"]
        assert t("late") == "Arrived"

    @pytest.mark.asyncio
    async def test_failed_fetch_is_silent_and_retried_later(self):
        transport = FakeTransport(error=RuntimeError("offline"))
        t, _ = create_translation_engine(
            {"en": {}},
            transport=transport,
            config=FakeConfigurationManager(language="en"),
            ambient_language="en",
        )

        assert t("missing") == ""
        await t.wait_for_fetches()
        assert t("missing") == ""
        await t.wait_for_fetches()

        assert transport.calls == ["en", "en"]


class TestTranslatorWatch:
    """Tests for reactive watching of a key."""

    @pytest.mark.asyncio
    async def test_watch_receives_fetched_value(self, engine):
        t, actions = engine
        actions.locale("fr")
        seen = []

        t.watch("greeting", seen.append, {"name": "Jean"})
        await t.wait_for_fetches()

        assert seen == ["", "Bonjour Jean"]

    def test_watch_follows_locale_switch(self, engine):
        t, actions = engine
        actions.add("sw", {"greeting": "Hej {{ name }}"})
        seen = []

        t.watch("greeting", seen.append, {"name": "Lisa"})
        actions.locale("sw")
        actions.locale("en")

        assert seen == ["Hello Lisa", "Hej Lisa", "Hello Lisa"]

    def test_watch_ignores_unrelated_updates(self, engine):
        t, actions = engine
        seen = []

        t.watch("greeting", seen.append, {"name": "Tom"})
        actions.add("sw", {"greeting": "Hej {{ name }}"})

        assert seen == ["Hello Tom"]

    def test_unsubscribe_stops_updates(self, engine):
        t, actions = engine
        actions.add("sw", {"greeting": "Hej {{ name }}"})
        seen = []

        unsubscribe = t.watch("greeting", seen.append, {"name": "Lisa"})
        unsubscribe()
        actions.locale("sw")

        assert seen == ["Hello Lisa"]


class TestTranslatorClose:
    """Tests for Translator.close()."""

    @pytest.mark.asyncio
    async def test_close_waits_for_pending_fetch(self, engine, transport):
        t, actions = engine
        actions.locale("fr")

        t("greeting", {"name": "Jean"})
        await t.close()

        assert transport.calls == ["fr"]
        assert t("greeting", {"name": "Jean"}) == "Bonjour Jean"

    @pytest.mark.asyncio
    async def test_close_closes_transport(self, engine, transport):
        t, _ = engine
        closed = []

        async def close():
            closed.append(True)

        transport.close = close
        await t.close()

        assert closed == [True]
