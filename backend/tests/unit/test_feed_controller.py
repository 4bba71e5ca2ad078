"""Unit tests for the FeedController scroll, resize and profile flows."""

import asyncio
import random

import httpx
import pytest

from app.application.services import (
    FeedController,
    FeedDocument,
    FeedRenderer,
    FeedState,
    LayoutMode,
)
from app.domain.entities import FeedStore
from app.domain.exceptions import NewsApiError
from app.infrastructure.http import NewsApiClient

DESKTOP = 1280
MOBILE = 375


def _controller(api, load_delay: float = 0.0, debounce: float = 0.0) -> FeedController:
    return FeedController(
        api=api,
        store=FeedStore(page_size=5, desktop_limit=9, rng=random.Random(1)),
        renderer=FeedRenderer(FeedDocument()),
        load_delay_seconds=load_delay,
        resize_debounce_seconds=debounce,
    )


# ── Startup ──


@pytest.mark.asyncio
async def test_desktop_start_shows_fixed_first_page(fake_api):
    controller = _controller(fake_api)
    await controller.start(DESKTOP)

    doc = controller.document
    assert doc.state == FeedState.POPULATED
    assert doc.layout == LayoutMode.DESKTOP
    assert doc.article_ids == list(range(1, 10))
    assert not doc.sentinel_observed
    assert controller.on_sentinel_visible() is None


@pytest.mark.asyncio
async def test_mobile_start_shows_first_batch_and_observes_sentinel(fake_api):
    controller = _controller(fake_api)
    await controller.start(MOBILE)

    doc = controller.document
    assert doc.layout == LayoutMode.MOBILE
    assert doc.article_ids == [1, 2, 3, 4, 5]
    assert doc.sentinel_observed
    assert controller.store.cursor == 5


@pytest.mark.asyncio
async def test_breakpoint_width_counts_as_mobile(fake_api):
    controller = _controller(fake_api)
    assert controller.is_mobile_view(768)
    assert not controller.is_mobile_view(769)


@pytest.mark.asyncio
async def test_unauthenticated_start_redirects_without_fetching(fake_api):
    fake_api.authenticated = False
    controller = _controller(fake_api)
    await controller.start(DESKTOP)

    assert controller.document.redirect_to == "/login"
    assert fake_api.fetch_calls == 0


@pytest.mark.asyncio
async def test_fetch_failure_renders_error_state(fake_api):
    fake_api.articles = None
    controller = _controller(fake_api)
    await controller.start(MOBILE)

    assert controller.document.state == FeedState.ERROR
    assert not controller.document.sentinel_observed


@pytest.mark.asyncio
async def test_no_articles_renders_empty_state(fake_api):
    fake_api.articles = []
    controller = _controller(fake_api)
    await controller.start(MOBILE)

    assert controller.document.state == FeedState.EMPTY
    assert not controller.document.sentinel_observed


# ── Infinite scroll ──


@pytest.mark.asyncio
async def test_only_one_load_in_flight(fake_api):
    controller = _controller(fake_api, load_delay=0.01)
    await controller.start(MOBILE)

    first = controller.on_sentinel_visible()
    second = controller.on_sentinel_visible()
    assert first is not None
    assert second is None
    assert controller.document.loading_more

    await first
    assert controller.document.article_ids == list(range(1, 11))
    assert not controller.is_loading
    assert not controller.document.loading_more


@pytest.mark.asyncio
async def test_not_intersecting_signal_is_ignored(fake_api):
    controller = _controller(fake_api)
    await controller.start(MOBILE)
    assert controller.on_sentinel_visible(is_intersecting=False) is None


@pytest.mark.asyncio
async def test_scroll_past_the_end_reshuffles_and_keeps_going(fake_api):
    controller = _controller(fake_api)
    await controller.start(MOBILE)

    sizes = []
    for _ in range(3):
        before = len(controller.document.cards)
        await controller.on_sentinel_visible()
        sizes.append(len(controller.document.cards) - before)

    assert sizes == [5, 2, 5]
    assert controller.store.has_looped
    assert controller.store.cursor == 5
    # Every article appeared exactly once before the first repeat.
    assert sorted(controller.document.article_ids[:12]) == list(range(1, 13))


@pytest.mark.asyncio
async def test_switch_to_desktop_during_pending_load_skips_it(fake_api):
    controller = _controller(fake_api, load_delay=0.05)
    await controller.start(MOBILE)

    load = controller.on_sentinel_visible()
    await controller.on_resize(DESKTOP)
    await load

    doc = controller.document
    assert doc.layout == LayoutMode.DESKTOP
    assert len(doc.cards) == 9
    assert not controller.is_loading


# ── Resize ──


@pytest.mark.asyncio
async def test_resize_across_breakpoint_rerenders(fake_api):
    controller = _controller(fake_api)
    await controller.start(DESKTOP)

    await controller.on_resize(MOBILE)
    assert controller.document.layout == LayoutMode.MOBILE
    assert controller.document.article_ids == [1, 2, 3, 4, 5]
    assert controller.document.sentinel_observed

    await controller.on_resize(DESKTOP)
    assert controller.document.layout == LayoutMode.DESKTOP
    assert len(controller.document.cards) == 9


@pytest.mark.asyncio
async def test_resize_burst_only_applies_last_width(fake_api):
    controller = _controller(fake_api, debounce=0.01)
    await controller.start(DESKTOP)

    first = controller.on_resize(MOBILE)
    controller.on_resize(DESKTOP)
    await controller.wait_idle()
    await asyncio.sleep(0)

    assert first.cancelled()
    assert controller.document.layout == LayoutMode.DESKTOP
    assert controller.last_is_mobile is False


@pytest.mark.asyncio
async def test_resize_before_start_does_nothing(fake_api):
    controller = _controller(fake_api)
    await controller.on_resize(MOBILE)
    assert controller.document.layout is None


@pytest.mark.asyncio
async def test_close_cancels_pending_load(fake_api):
    controller = _controller(fake_api, load_delay=10)
    await controller.start(MOBILE)

    load = controller.on_sentinel_visible()
    controller.close()
    await controller.wait_idle()

    assert load.cancelled()
    assert not controller.is_loading


# ── Refresh, profile, logout ──


@pytest.mark.asyncio
async def test_refresh_reloads_and_rerenders(fake_api, article_factory):
    controller = _controller(fake_api)
    await controller.start(MOBILE)
    fake_api.articles = article_factory(3)

    await controller.refresh()
    assert controller.document.article_ids == [1, 2, 3]
    assert controller.store.cursor == 3


@pytest.mark.asyncio
async def test_open_profile(fake_api):
    controller = _controller(fake_api)
    user = await controller.open_profile()
    assert user.email == "ada@campus.edu"

    fake_api.authenticated = False
    assert await controller.open_profile() is None
    assert controller.document.redirect_to == "/login"


@pytest.mark.asyncio
async def test_save_profile_requires_both_fields(fake_api):
    controller = _controller(fake_api)
    assert await controller.save_profile("", "x@campus.edu") is None
    assert controller.document.last_notice.text == "Name and email are required."


@pytest.mark.asyncio
async def test_save_profile_reports_server_message(fake_api):
    fake_api.profile_error = NewsApiError(400, "Email already taken by another user")
    controller = _controller(fake_api)
    assert await controller.save_profile("Ada", "taken@campus.edu") is None
    assert controller.document.last_notice.text == "Email already taken by another user"


@pytest.mark.asyncio
async def test_save_profile_generic_failure_message(fake_api):
    fake_api.profile_error = NewsApiError(0, "")
    controller = _controller(fake_api)
    await controller.save_profile("Ada", "ada@campus.edu")
    assert controller.document.last_notice.text == "Failed to update profile."


@pytest.mark.asyncio
async def test_save_profile_success(fake_api):
    controller = _controller(fake_api)
    user = await controller.save_profile("Ada L.", "ada@campus.edu")
    assert user.name == "Ada L."
    assert controller.current_user.name == "Ada L."
    assert controller.document.last_notice.level == "success"


@pytest.mark.asyncio
async def test_logout(fake_api):
    controller = _controller(fake_api)
    assert await controller.logout()
    assert controller.document.redirect_to == "/login"

    fake_api.logout_ok = False
    other = _controller(fake_api)
    assert not await other.logout()
    assert other.document.last_notice.text == "Failed to log out."
    assert other.document.redirect_to is None


@pytest.mark.asyncio
async def test_malformed_server_bodies_are_handled_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/auth/status":
            return httpx.Response(200, json=["not", "an", "object"])
        return httpx.Response(200, json={"success": True})

    api = NewsApiClient(
        base_url="http://news.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    controller = _controller(api)

    await controller.start(DESKTOP)
    assert controller.document.redirect_to == "/login"

    assert await controller.save_profile("Ada", "ada@campus.edu") is None
    assert controller.document.last_notice.text == "Failed to update profile."
