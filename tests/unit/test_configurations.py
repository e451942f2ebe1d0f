"""Unit tests for the configuration wrappers"""

import os
import unittest
from unittest.mock import patch

from infra_sample.configurations.deployment import DeploymentConfig
from infra_sample.configurations.resources.auto_scaling import AutoScalingConfig
from infra_sample.configurations.resources.ecs_cluster import EcsClusterConfig
from infra_sample.configurations.resources.ecs_service import EcsServiceConfig
from infra_sample.configurations.resources.instance_role import InstanceRoleConfig
from infra_sample.configurations.resources.security_group import SecurityGroupConfig
from infra_sample.configurations.stack import StackConfig
from infra_sample.configurations.workload import WorkloadConfig


class TestResourceConfigDefaults(unittest.TestCase):
    """Omitted sections fall back to the single-instance deployment defaults"""

    def test_security_group_defaults(self):
        config = SecurityGroupConfig({})
        self.assertEqual(config.name, "sg")
        self.assertTrue(config.allow_all_outbound)
        self.assertEqual(config.ingress_cidr, "0.0.0.0/0")
        self.assertEqual(config.ingress_ports, [22, 80, 443])

    def test_instance_role_defaults(self):
        config = InstanceRoleConfig({})
        self.assertEqual(config.assumed_by, "ec2.amazonaws.com")
        self.assertIn("RetentionPolicy", config.inline_policies)
        self.assertEqual(len(config.managed_policies), 4)

    def test_ecs_cluster(self):
        config = EcsClusterConfig({"name": "nextjs_strapi"})
        self.assertEqual(config.name, "nextjs_strapi")
        self.assertEqual(config.construct_name, "cluster")

    def test_auto_scaling_defaults(self):
        config = AutoScalingConfig({})
        self.assertEqual(
            (config.min_capacity, config.desired_capacity, config.max_capacity), (1, 1, 1)
        )
        self.assertEqual(config.health_check_grace_period, 300)
        self.assertEqual(config.signals_timeout, 300)
        self.assertEqual(config.termination_policies, ["OLDEST_INSTANCE"])
        self.assertEqual(config.launch_template.instance_type, "t2.micro")
        self.assertEqual(config.launch_template.machine_image, "ecs-amazon-linux-2023")
        self.assertIn("{{ASG_RESOURCE}}", config.launch_template.user_data_commands[-1])
        self.assertFalse(config.capacity_provider.enable_managed_termination_protection)
        self.assertEqual(config.init["config_sets"], {"default": ["config"]})

    def test_ecs_service_defaults(self):
        config = EcsServiceConfig(
            {
                "container": {
                    "name": "nextjs",
                    "repository_name": "nextjs-sample",
                    "port_mappings": [{"container_port": 3000, "host_port": 80}],
                }
            }
        )
        self.assertEqual(config.desired_count, 1)
        self.assertEqual(config.min_healthy_percent, 0)
        self.assertEqual(config.max_healthy_percent, 100)
        self.assertEqual(config.construct_name, "nextjs")
        self.assertEqual(config.output_name, "Service Name")

        container = config.container
        self.assertEqual(container.construct_name, "nextjsContainer")
        self.assertEqual(container.container_port, 3000)
        self.assertEqual(container.log_group_name, "nextjs")
        self.assertEqual(container.stream_prefix, "nextjs")
        self.assertEqual((container.cpu, container.memory_reservation_mib), (256, 256))

        health_check = container.health_check
        self.assertEqual(health_check.command, ["CMD-SHELL", "curl -f http://localhost:3000 || exit 1"])
        self.assertEqual(
            (health_check.interval, health_check.timeout, health_check.retries, health_check.start_period),
            (30, 5, 2, 60),
        )


class TestStackAndWorkloadConfig(unittest.TestCase):

    def test_stack_config(self):
        config = StackConfig({"name": "strapi", "ecs_cluster": {"name": "nextjs_strapi"}})
        self.assertEqual(config.name, "strapi")
        self.assertEqual(config.module, "container_service_stack")
        self.assertTrue(config.enabled)
        self.assertEqual(config.section("ecs_cluster"), {"name": "nextjs_strapi"})
        self.assertEqual(config.section("missing"), {})

    def test_stack_config_requires_name(self):
        with self.assertRaises(ValueError):
            _ = StackConfig({}).name

    def test_stack_config_disabled(self):
        self.assertFalse(StackConfig({"name": "x", "enabled": False}).enabled)
        self.assertFalse(StackConfig({"name": "x", "enabled": "false"}).enabled)

    def test_workload_config(self):
        workload = WorkloadConfig(
            {"workload": {"name": "infra-sample", "vpc_id": "vpc-1", "stacks": [{"name": "a"}, {"name": "b"}]}}
        )
        self.assertEqual(workload.name, "infra-sample")
        self.assertEqual(workload.vpc_id, "vpc-1")
        self.assertEqual([stack.name for stack in workload.stacks], ["a", "b"])
        self.assertEqual(workload.stacks[0].workload["name"], "infra-sample")


class TestDeploymentConfig(unittest.TestCase):

    @patch.dict(os.environ, {"CDK_DEFAULT_ACCOUNT": "111111111111", "CDK_DEFAULT_REGION": "eu-west-1"})
    def test_environment_variables(self):
        deployment = DeploymentConfig({})
        self.assertEqual(deployment.account, "111111111111")
        self.assertEqual(deployment.region, "eu-west-1")
        self.assertEqual(deployment.region_or_default, "eu-west-1")

    @patch.dict(os.environ, {"CDK_DEFAULT_ACCOUNT": "111111111111", "CDK_DEFAULT_REGION": "eu-west-1"})
    def test_explicit_values_win(self):
        deployment = DeploymentConfig({"account": "123456789012", "region": "us-west-2"})
        self.assertEqual(deployment.account, "123456789012")
        self.assertEqual(deployment.region, "us-west-2")

    @patch.dict(os.environ, {}, clear=True)
    def test_region_default(self):
        deployment = DeploymentConfig({"region": ""})
        self.assertIsNone(deployment.region)
        self.assertEqual(deployment.region_or_default, "us-east-1")
