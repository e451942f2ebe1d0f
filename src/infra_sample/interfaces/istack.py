"""
IStack - base class of every buildable stack.
MIT License. See Project Root for the license information.
"""

import aws_cdk as cdk
from constructs import Construct

from infra_sample.configurations.deployment import DeploymentConfig
from infra_sample.configurations.stack import StackConfig
from infra_sample.configurations.workload import WorkloadConfig
from infra_sample.utilities.naming import build_construct_id


class IStack(cdk.Stack):
    """
    A CDK stack that is created empty and populated by build().
    """

    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

    def get_construct_id(self, name: str) -> str:
        """Construct id / physical name for a resource owned by this stack"""
        return build_construct_id(self.node.id, name)

    def build(
        self,
        stack_config: StackConfig,
        deployment: DeploymentConfig,
        workload: WorkloadConfig,
    ) -> None:
        """Build the stack's resources. Every registered stack overrides this."""
        raise NotImplementedError(f"{type(self).__name__} must implement build()")
