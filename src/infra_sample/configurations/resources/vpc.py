"""
VpcConfig - the existing VPC the stack is deployed into.
MIT License. See Project Root for license information.
"""

from typing import Optional

from infra_sample.configurations.base_config import BaseConfig


class VpcConfig(BaseConfig):
    """
    VPC Configuration - the VPC is never created here, only looked up.
    """

    @property
    def name(self) -> str:
        """Construct id of the looked-up VPC"""
        return self.get("name", "vpc")

    @property
    def vpc_id(self) -> Optional[str]:
        """VPC id override for this stack (falls back to the workload vpc_id)"""
        return self.get("vpc_id")
