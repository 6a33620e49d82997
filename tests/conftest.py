import pytest

from mvxkit.config import NetworkConfig
from mvxkit.constants import Network
from mvxkit.crypto.keys import PrivateKey

from helpers import SECRET


@pytest.fixture
def devnet() -> NetworkConfig:
    return NetworkConfig(network=Network.DEVNET)


@pytest.fixture
def signer() -> PrivateKey:
    return PrivateKey(SECRET)


@pytest.fixture
def sender(signer: PrivateKey) -> str:
    return signer.public_key().address()
