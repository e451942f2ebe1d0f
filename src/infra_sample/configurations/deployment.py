"""
DeploymentConfig - target account and region for a synthesis run.
MIT License. See Project Root for the license information.
"""

import os
from typing import Any, Dict, Optional

import aws_cdk as cdk


DEFAULT_REGION = "us-east-1"


class DeploymentConfig:
    """
    Deployment configuration.

    The account and region come from the deployment dictionary when present,
    otherwise from the CDK_DEFAULT_ACCOUNT / CDK_DEFAULT_REGION environment
    variables that the cdk CLI exports for the active profile.
    """

    def __init__(self, deployment: Optional[Dict[str, Any]] = None) -> None:
        self.__deployment = deployment or {}

    @property
    def account(self) -> Optional[str]:
        """AWS account id"""
        return self.__deployment.get("account") or os.environ.get("CDK_DEFAULT_ACCOUNT")

    @property
    def region(self) -> Optional[str]:
        """AWS region"""
        return self.__deployment.get("region") or os.environ.get("CDK_DEFAULT_REGION")

    @property
    def region_or_default(self) -> str:
        """Region used where a concrete value is required (e.g. cfn-signal)"""
        return self.region or DEFAULT_REGION

    @property
    def environment(self) -> cdk.Environment:
        """The CDK environment used for every stack in the deployment"""
        return cdk.Environment(account=self.account, region=self.region)
