"""
CdkAppFactory - builds every configured stack into one CDK app.
MIT License. See Project Root for the license information.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

import aws_cdk as cdk
from aws_cdk import cx_api
from aws_lambda_powertools import Logger

from infra_sample.configurations.deployment import DeploymentConfig
from infra_sample.configurations.workload import WorkloadConfig
from infra_sample.interfaces.istack import IStack
from infra_sample.stack.stack_module_registry import StackModuleRegistry
from infra_sample.utilities.json_loading_utility import JsonLoadingUtility

# registers the stack modules
import infra_sample.stack_library  # noqa: F401

logger = Logger(service="CdkAppFactory")


DEFAULT_CONFIG_PATH = str(Path(__file__).parent / "config" / "config.json")
DEFAULT_VPC_ID = "vpc-0c92b6779493dfa0c"


class CdkAppFactory:
    """
    Loads the workload configuration and synthesizes its stacks.

    The VPC id is resolved in this order: the vpc_id argument, the "vpc_id"
    CDK context value, the VPC_ID environment variable, then DEFAULT_VPC_ID.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        vpc_id: Optional[str] = None,
        outdir: Optional[str] = None,
        app: Optional[cdk.App] = None,
    ) -> None:
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.outdir = os.path.abspath(outdir) if outdir else None

        if app is None:
            app = cdk.App(outdir=self.outdir) if self.outdir else cdk.App()
        self.app = app

        self.vpc_id = (
            vpc_id
            or self.app.node.try_get_context("vpc_id")
            or os.environ.get("VPC_ID")
            or DEFAULT_VPC_ID
        )
        self.stacks: Dict[str, IStack] = {}

    def _replacements(self) -> Dict[str, Optional[str]]:
        return {
            "{{VPC_ID}}": self.vpc_id,
            "{{AWS_ACCOUNT}}": os.environ.get("CDK_DEFAULT_ACCOUNT"),
            "{{AWS_REGION}}": os.environ.get("CDK_DEFAULT_REGION"),
        }

    def load_workload(self) -> WorkloadConfig:
        config = JsonLoadingUtility.load(self.config_path, self._replacements())
        return WorkloadConfig(config)

    def build(self) -> List[IStack]:
        """Instantiate and build every enabled stack of the workload"""
        workload = self.load_workload()
        deployment = DeploymentConfig(workload.deployment)

        logger.info(
            f"Building workload {workload.name} "
            f"(account={deployment.account}, region={deployment.region}, vpc={workload.vpc_id})"
        )

        for stack_config in workload.stacks:
            if not stack_config.enabled:
                logger.warning(f"Stack {stack_config.name} is disabled - skipping")
                continue

            stack_class = StackModuleRegistry.get(stack_config.module)
            stack = stack_class(
                self.app,
                stack_config.name,
                env=deployment.environment,
                description=stack_config.description,
            )
            stack.build(stack_config, deployment, workload)
            self.stacks[stack_config.name] = stack

        return list(self.stacks.values())

    def synth(self) -> cx_api.CloudAssembly:
        """Build the stacks and synthesize the cloud assembly"""
        if not self.stacks:
            self.build()
        return self.app.synth()


def main() -> None:
    """Run the app"""
    CdkAppFactory().synth()


if __name__ == "__main__":
    main()
