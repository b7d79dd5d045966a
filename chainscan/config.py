from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    subscan_api_key: str = ""
    taostats_api_key: str = ""
    mintscan_api_key: str = ""
    goldrush_api_key: str = ""

    subscan_api_url: str = "https://polkadot.api.subscan.io"
    taostats_api_url: str = "https://api.taostats.io"
    mintscan_api_url: str = "https://apis.mintscan.io"
    covalent_api_url: str = "https://api.covalenthq.com"

    relay_url: str = ""

    http_timeout: float = 10.0
    ronin_page_delay: float = 0.3

    @property
    def use_relay(self) -> bool:
        return bool(self.relay_url)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
