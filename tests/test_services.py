"""Tests for the service factory and the demo service."""

import pytest

from account_value_ui.errors import InventoryNotPublic, RemoteServiceError
from account_value_ui.services import (
    AccountValueServiceImpl,
    DemoAccountValueService,
    get_account_value_service,
)
from account_value_ui.workflow import LookupWorkflow


@pytest.fixture(autouse=True)
def _clear_service_cache():
    get_account_value_service.cache_clear()
    yield
    get_account_value_service.cache_clear()


def test_factory_resolves_kinds():
    assert isinstance(get_account_value_service("demo"), DemoAccountValueService)
    assert isinstance(get_account_value_service("IMPL"), AccountValueServiceImpl)


def test_factory_caches_instances():
    assert get_account_value_service("demo") is get_account_value_service("demo")


def test_factory_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown account value service kind"):
        get_account_value_service("spark")


@pytest.fixture
def demo() -> DemoAccountValueService:
    return DemoAccountValueService(latency=0)


@pytest.mark.asyncio
async def test_demo_public_account(demo):
    result = await LookupWorkflow(demo).run(1)

    assert result.profile.shown_name == "Builder Man"
    assert any(item.is_serialized for item in result.items)
    assert any(not item.is_serialized for item in result.items)


@pytest.mark.asyncio
async def test_demo_empty_account(demo):
    result = await LookupWorkflow(demo).run(3)

    assert result.items == ()
    assert result.profile.shown_name == "newcomer"


@pytest.mark.asyncio
@pytest.mark.parametrize("account_id", [2, 999])
async def test_demo_private_or_unknown_account(demo, account_id):
    with pytest.raises(InventoryNotPublic):
        await LookupWorkflow(demo).run(account_id)


@pytest.mark.asyncio
async def test_demo_unknown_account_raises_remote_error(demo):
    with pytest.raises(RemoteServiceError):
        await demo.profile_info(999)


@pytest.mark.asyncio
async def test_demo_exchange_rate(demo):
    assert (await demo.exchange_rate()).robux_per_euro == 350
