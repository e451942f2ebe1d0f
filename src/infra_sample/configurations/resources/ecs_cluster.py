"""
ECS Cluster Configuration

Defines the configuration schema for the ECS cluster of a container service stack.
"""

from infra_sample.configurations.base_config import BaseConfig


class EcsClusterConfig(BaseConfig):
    """
    Configuration for an ECS cluster.

    The cluster name is used verbatim; the construct id follows the stack
    naming convention.
    """

    @property
    def construct_name(self) -> str:
        """Name expanded into the cluster's construct id"""
        return self.get("construct_name", "cluster")

    @property
    def name(self) -> str:
        """Physical name of the ECS cluster"""
        return self.get("name", "cluster")
