"""
InstanceRoleConfig - IAM role assumed by the container instances.
MIT License. See Project Root for license information.
"""

from typing import Any, Dict, List

from infra_sample.configurations.base_config import BaseConfig


class InstanceRoleConfig(BaseConfig):
    """
    Instance role configuration.

    Inline policies are expressed as a mapping of policy name to a list of
    statements, each statement having "actions" and "resources":

    {
        "RetentionPolicy": [
            {"actions": ["logs:PutRetentionPolicy"], "resources": ["*"]}
        ]
    }
    """

    @property
    def name(self) -> str:
        return self.get("name", "role")

    @property
    def assumed_by(self) -> str:
        """Service principal allowed to assume the role"""
        return self.get("assumed_by", "ec2.amazonaws.com")

    @property
    def inline_policies(self) -> Dict[str, List[Dict[str, Any]]]:
        return self.get(
            "inline_policies",
            {
                "RetentionPolicy": [
                    {"actions": ["logs:PutRetentionPolicy"], "resources": ["*"]}
                ]
            },
        )

    @property
    def managed_policies(self) -> List[str]:
        """List of AWS managed policies to attach to the instance role"""
        return self.get(
            "managed_policies",
            [
                "AmazonSSMManagedInstanceCore",
                "CloudWatchAgentServerPolicy",
                "service-role/AWSAppRunnerServicePolicyForECRAccess",
                "service-role/AmazonEC2ContainerServiceforEC2Role",
            ],
        )
