"""
KeyPairConfig - EC2 key pair used for instance access.
MIT License. See Project Root for license information.
"""

from infra_sample.configurations.base_config import BaseConfig


class KeyPairConfig(BaseConfig):
    """Key pair configuration"""

    @property
    def name(self) -> str:
        return self.get("name", "keyPair")
