"""End-to-end tests of the controller: input, submit, startup and lookup scenarios."""

import asyncio

import pytest
import pytest_asyncio

from account_value_ui.controller import AppController
from account_value_ui.errors import RemoteServiceError
from account_value_ui.models.common import UiStateKind, View


@pytest_asyncio.fixture
async def controller(service) -> AppController:
    controller = AppController(service)
    await controller.start()
    service.calls.clear()
    return controller


class ViewRecorder:
    def __init__(self) -> None:
        self.views: list[View] = []

    async def __call__(self, view: View) -> None:
        self.views.append(view)


@pytest.mark.asyncio
async def test_startup_fetches_rate_then_unlocks(service):
    controller = AppController(service)
    recorder = ViewRecorder()

    assert controller.view.controls_disabled

    await controller.start(recorder)

    assert service.operations == ["exchange_rate"]
    assert controller.session.ui_state.kind is UiStateKind.IDLE
    assert recorder.views[-1].exchange_rate_text == "350 Robux per 1€"
    assert not recorder.views[-1].controls_disabled


@pytest.mark.asyncio
async def test_startup_survives_rate_failure(service):
    service.rate = RemoteServiceError("/api/exchange-rate", "HTTP 500", 500)
    controller = AppController(service)

    view = await controller.start()

    assert view.exchange_rate_text == "0 Robux per 1€"
    assert not view.controls_disabled


@pytest.mark.asyncio
async def test_startup_survives_unexpected_rate_error(service):
    service.rate = KeyError("boom")

    view = await AppController(service).start()

    assert view.exchange_rate_text == "0 Robux per 1€"
    assert not view.controls_disabled


@pytest.mark.asyncio
async def test_submit_before_startup_is_ignored(service):
    controller = AppController(service)

    assert await controller.submit("123") is False
    assert service.calls == []


@pytest.mark.asyncio
async def test_successful_lookup_scenario(controller, service):
    recorder = ViewRecorder()
    assert controller.handle_input("123") == "123"

    assert await controller.submit("123", recorder) is True

    assert service.calls == [
        ("can_view_inventory", 123),
        ("collectibles_account_value", 123),
        ("profile_info", 123),
    ]
    loading, final = recorder.views
    assert loading.controls_disabled
    assert loading.loading_visible
    assert not loading.result_visible
    assert final.result_visible
    assert not final.controls_disabled
    assert final.robux_text == "Robux: 500"
    assert final.currency_text == "Euros: 5€"
    assert final.items_placeholder == "No items found :("
    assert final.avatar_url == "u.png"
    assert controller.session.ui_state.kind is UiStateKind.RESULT


@pytest.mark.asyncio
async def test_invalid_input_scenario(controller, service):
    recorder = ViewRecorder()
    field = controller.handle_input("abc")

    assert await controller.submit(field, recorder) is True

    assert service.calls == []
    (view,) = recorder.views
    assert view.error_text == "Please insert a valid account id"
    assert not view.controls_disabled


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "abc", "12a", "-5"])
async def test_unparsable_submit_makes_no_calls(controller, service, text):
    await controller.submit(text)

    assert service.calls == []
    assert controller.view.error_text == "Please insert a valid account id"


@pytest.mark.asyncio
async def test_private_inventory_scenario(controller, service):
    service.visible = False

    await controller.submit(controller.handle_input("5"))

    assert service.calls == [("can_view_inventory", 5)]
    view = controller.view
    assert view.error_text == "Please make sure the account has inventory set as public"
    assert view.error_visible
    assert not view.controls_disabled
    assert not view.result_visible


@pytest.mark.asyncio
async def test_valuation_failure_message(controller, service):
    service.value = RemoteServiceError("/api/collectibles-account-value", "bad json")

    await controller.submit("5")

    assert controller.view.error_text == "Could not retrieve account value"
    assert "profile_info" not in service.operations


@pytest.mark.asyncio
async def test_unexpected_error_still_unlocks(controller, service):
    service.profile = ZeroDivisionError()

    await controller.submit("5")

    assert controller.session.ui_state.kind is UiStateKind.ERROR
    assert controller.view.error_text == "Something went wrong, please try again"
    assert not controller.view.controls_disabled


@pytest.mark.asyncio
async def test_second_submit_while_loading_is_ignored(controller, service):
    service.gate = asyncio.Event()

    first = asyncio.create_task(controller.submit("123"))
    # Let the first submit run up to the blocked visibility check
    while not service.calls:
        await asyncio.sleep(0)
    assert controller.session.ui_state.kind is UiStateKind.LOADING

    assert await controller.submit("456") is False
    assert await controller.submit("abc") is False

    service.gate.set()
    assert await first is True

    assert service.calls == [
        ("can_view_inventory", 123),
        ("collectibles_account_value", 123),
        ("profile_info", 123),
    ]
    assert controller.session.ui_state.result.account_id == 123


@pytest.mark.asyncio
async def test_new_lookup_after_result_replaces_it(controller, service):
    await controller.submit("1")
    service.visible = False

    await controller.submit("2")

    assert controller.session.ui_state.kind is UiStateKind.ERROR
    assert controller.session.ui_state.result is None
    assert not controller.view.result_visible


@pytest.mark.asyncio
async def test_field_edits_go_through_the_guard(controller):
    assert controller.handle_input("12") == "12"
    assert controller.handle_input("12z") == "12"
    assert controller.handle_input("") == ""
    assert controller.session.guard.last_valid_text is None


@pytest.mark.asyncio
async def test_failed_loading_push_still_unlocks(controller, service):
    async def flaky(view: View) -> None:
        if view.loading_visible:
            raise RuntimeError("state proxy unavailable")

    with pytest.raises(RuntimeError):
        await controller.submit("123", flaky)

    assert controller.session.ui_state.kind is UiStateKind.ERROR
    assert not controller.view.controls_disabled
    assert service.calls == []

    assert await controller.submit("123") is True
    assert controller.session.ui_state.kind is UiStateKind.RESULT


@pytest.mark.asyncio
async def test_cancelled_lookup_still_unlocks(controller, service):
    service.gate = asyncio.Event()

    task = asyncio.create_task(controller.submit("123"))
    while not service.calls:
        await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert controller.session.ui_state.kind is UiStateKind.ERROR
    assert controller.view.error_text == "Something went wrong, please try again"

    service.gate = None
    assert await controller.submit("5") is True
    assert controller.session.ui_state.result.account_id == 5
