"""
SecurityGroupConfig - ingress/egress settings for the instance security group.
MIT License. See Project Root for license information.
"""

from typing import List

from infra_sample.configurations.base_config import BaseConfig


class SecurityGroupConfig(BaseConfig):
    """
    Security Group Configuration.
    Each property reads from the config dict and provides a sensible default if not set.
    """

    @property
    def name(self) -> str:
        """Logical name, expanded through the stack naming convention"""
        return self.get("name", "sg")

    @property
    def description(self) -> str:
        return self.get("description", "Security Group")

    @property
    def allow_all_outbound(self) -> bool:
        return self.get("allow_all_outbound", True)

    @property
    def ingress_cidr(self) -> str:
        """Source CIDR for every ingress rule"""
        return self.get("ingress_cidr", "0.0.0.0/0")

    @property
    def ingress_ports(self) -> List[int]:
        """TCP ports opened to the ingress CIDR"""
        return self.get("ingress_ports", [22, 80, 443])
