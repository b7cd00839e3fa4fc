from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    network: str = "devnet"
    local_rpc_url: str = "http://127.0.0.1:9000"
    devnet_rpc_url: str = "https://fullnode.devnet.sui.io:443"
    testnet_rpc_url: str = "https://fullnode.testnet.sui.io:443"
    rpc_rate_per_second: float = 10.0
    rpc_timeout: float = 30.0
    offline_mode: bool = False  # Serve the bundled fixture set instead of the RPC
    fixture_delay_seconds: float = 0.5
    page_size: int = 20
    truncate_length: int = 10
    currency_suffix: str = "SUI"
    debug: bool = False

    @property
    def rpc_urls(self) -> dict[str, str]:
        return {
            "local": self.local_rpc_url,
            "devnet": self.devnet_rpc_url,
            "testnet": self.testnet_rpc_url,
        }

    class Config:
        env_file = ".env"
        env_prefix = "LEDGERVIEW_"


settings = Settings()
