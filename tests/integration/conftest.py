import pytest

from junos_netconf import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        host="localhost",
        port=8830,
        username="admin",
        password="admin",
        hostkey_verify=False,
        timeout=10,
        device="default",
    )
