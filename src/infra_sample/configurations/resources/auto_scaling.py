"""
AutoScalingConfig - launch template, Auto Scaling Group and capacity provider settings.
MIT License. See Project Root for license information.
"""

from typing import Any, Dict, List

from infra_sample.configurations.base_config import BaseConfig


class LaunchTemplateConfig(BaseConfig):
    """Launch template configuration"""

    @property
    def construct_name(self) -> str:
        """Name expanded into the launch template's construct id"""
        return self.get("construct_name", "instance")

    @property
    def name(self) -> str:
        """Physical launch template name"""
        return self.get("name", "launch-template")

    @property
    def instance_type(self) -> str:
        """EC2 instance type, e.g. t2.micro"""
        return self.get("instance_type", "t2.micro")

    @property
    def machine_image(self) -> str:
        """
        Machine image family. Supported values:
        - ecs-amazon-linux-2023
        - ecs-amazon-linux-2
        """
        return self.get("machine_image", "ecs-amazon-linux-2023")

    @property
    def user_data_commands(self) -> List[str]:
        """
        Bootstrap commands. The placeholders {{STACK_NAME}}, {{ASG_RESOURCE}}
        and {{AWS_REGION}} are resolved when the stack is built.
        """
        return self.get(
            "user_data_commands",
            [
                "#!/bin/bash",
                "yum update -y",
                "yum install -y aws-cfn-bootstrap",
                "/opt/aws/bin/cfn-signal --stack {{STACK_NAME}} --resource {{ASG_RESOURCE}} "
                "--region {{AWS_REGION}} --exit-code $?",
            ],
        )


class CapacityProviderConfig(BaseConfig):
    """ASG capacity provider configuration"""

    @property
    def construct_name(self) -> str:
        return self.get("construct_name", "AsgCapacityProvider")

    @property
    def enable_managed_termination_protection(self) -> bool:
        return self.get("enable_managed_termination_protection", False)


class AutoScalingConfig(BaseConfig):
    """
    Auto Scaling Group configuration.
    Each property reads from the config dict and provides a sensible default if not set.
    """

    @property
    def name(self) -> str:
        """Name expanded into the ASG's construct id and group name"""
        return self.get("name", "asg")

    @property
    def min_capacity(self) -> int:
        return self.get("min_capacity", 1)

    @property
    def max_capacity(self) -> int:
        return self.get("max_capacity", 1)

    @property
    def desired_capacity(self) -> int:
        return self.get("desired_capacity", 1)

    @property
    def health_check_grace_period(self) -> int:
        """EC2 health check grace period in seconds"""
        return self.get("health_check_grace_period", 300)

    @property
    def signals_timeout(self) -> int:
        """Seconds to wait for every instance to send cfn-signal"""
        return self.get("signals_timeout", 300)

    @property
    def termination_policies(self) -> List[str]:
        """TerminationPolicy enum names"""
        return self.get("termination_policies", ["OLDEST_INSTANCE"])

    @property
    def instance_monitoring(self) -> str:
        """BASIC or DETAILED"""
        return self.get("instance_monitoring", "BASIC")

    @property
    def init(self) -> Dict[str, Any]:
        """
        CloudFormation init settings:
        - config_sets: mapping of config set name to config names
        - include_url / include_role / print_log: init options
        """
        return self.get(
            "init",
            {
                "config_sets": {"default": ["config"]},
                "include_url": True,
                "include_role": True,
                "print_log": True,
            },
        )

    @property
    def launch_template(self) -> LaunchTemplateConfig:
        return LaunchTemplateConfig(self.get_section("launch_template"))

    @property
    def capacity_provider(self) -> CapacityProviderConfig:
        return CapacityProviderConfig(self.get_section("capacity_provider"))
