import pytest

from pws_forwarder.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings.model_validate(
        {
            "PWS_IP": "192.168.1.50",
            "FETCH_INTERVAL": "60",
            "USERNAME": "station1",
            "PASSWORD": "secret",
        }
    )
