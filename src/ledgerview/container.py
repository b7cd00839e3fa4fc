from dependency_injector import containers, providers

from ledgerview.config import Settings
from ledgerview.engine.controller import PageController
from ledgerview.engine.fetcher import FixtureTransactionFetcher, RpcTransactionFetcher
from ledgerview.engine.projector import RowProjector
from ledgerview.engine.state_machine import LoadStateMachine
from ledgerview.infra.fixtures.source import FixtureSource
from ledgerview.infra.http.rate_limited_client import RateLimitedClient
from ledgerview.infra.rpc.client import LedgerRPCClient


def fetcher_mode(settings: Settings) -> str:
    return "fixture" if settings.offline_mode else "rpc"


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=["ledgerview.api.deps"])

    settings = providers.Singleton(Settings)

    http_client = providers.Singleton(
        RateLimitedClient,
        rate_per_second=settings.provided.rpc_rate_per_second,
        timeout=settings.provided.rpc_timeout,
    )

    rpc_clients = providers.Dict(
        local=providers.Singleton(
            LedgerRPCClient, rpc_url=settings.provided.local_rpc_url, http_client=http_client
        ),
        devnet=providers.Singleton(
            LedgerRPCClient, rpc_url=settings.provided.devnet_rpc_url, http_client=http_client
        ),
        testnet=providers.Singleton(
            LedgerRPCClient, rpc_url=settings.provided.testnet_rpc_url, http_client=http_client
        ),
    )

    fixture_source = providers.Singleton(FixtureSource)

    fetcher = providers.Selector(
        providers.Callable(fetcher_mode, settings),
        rpc=providers.Singleton(RpcTransactionFetcher, clients=rpc_clients),
        fixture=providers.Singleton(
            FixtureTransactionFetcher,
            source=fixture_source,
            delay_seconds=settings.provided.fixture_delay_seconds,
        ),
    )

    projector = providers.Factory(
        RowProjector,
        truncate_length=settings.provided.truncate_length,
        currency_suffix=settings.provided.currency_suffix,
    )

    state_machine = providers.Factory(
        LoadStateMachine,
        fetcher=fetcher,
        network=settings.provided.network,
    )

    page_controller = providers.Factory(
        PageController,
        machine=state_machine,
        projector=projector,
        page_size=settings.provided.page_size,
    )
