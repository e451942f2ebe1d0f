"""
Config Validator - checks stack configuration before any construct is created.
MIT License. See Project Root for the license information.
"""

from typing import Any, List

from aws_cdk import aws_autoscaling as autoscaling
from aws_lambda_powertools import Logger

from infra_sample.configurations.resources.auto_scaling import AutoScalingConfig
from infra_sample.configurations.resources.ecs_service import EcsServiceConfig
from infra_sample.configurations.resources.security_group import SecurityGroupConfig

logger = Logger(service="ConfigValidator")


class ConfigValidator:
    """
    Validates the resource sections of a container service stack.

    Each validate_* method returns a list of error messages; an empty list
    means the section is valid. Range checks only run on values that are
    integers, so a wrongly typed value is reported instead of raising.
    """

    @staticmethod
    def _is_int(value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    @classmethod
    def _is_valid_port(cls, port: Any, allow_zero: bool = False) -> bool:
        lowest = 0 if allow_zero else 1
        return cls._is_int(port) and lowest <= port <= 65535

    def _check_ints(self, prefix: str, values: dict) -> List[str]:
        return [
            f"{prefix}.{key} must be an integer, got {value!r}"
            for key, value in values.items()
            if not self._is_int(value)
        ]

    def validate_security_group(self, config: SecurityGroupConfig) -> List[str]:
        errors = []
        for port in config.ingress_ports:
            if not self._is_valid_port(port):
                errors.append(f"security_group.ingress_ports: invalid port {port!r}")
        if not config.ingress_cidr:
            errors.append("security_group.ingress_cidr is required")
        return errors

    def validate_auto_scaling(self, config: AutoScalingConfig) -> List[str]:
        errors = []
        min_capacity = config.min_capacity
        max_capacity = config.max_capacity
        desired_capacity = config.desired_capacity

        capacity_errors = self._check_ints(
            "auto_scaling",
            {
                "min_capacity": min_capacity,
                "desired_capacity": desired_capacity,
                "max_capacity": max_capacity,
            },
        )
        errors.extend(capacity_errors)
        if not capacity_errors:
            if min_capacity < 0:
                errors.append(f"auto_scaling.min_capacity must not be negative, got {min_capacity}")
            if not min_capacity <= desired_capacity <= max_capacity:
                errors.append(
                    "auto_scaling capacity must satisfy min <= desired <= max, "
                    f"got {min_capacity}/{desired_capacity}/{max_capacity}"
                )

        grace_period = config.health_check_grace_period
        if not self._is_int(grace_period):
            errors.append(f"auto_scaling.health_check_grace_period must be an integer, got {grace_period!r}")
        elif grace_period < 0:
            errors.append("auto_scaling.health_check_grace_period must not be negative")

        signals_timeout = config.signals_timeout
        if not self._is_int(signals_timeout):
            errors.append(f"auto_scaling.signals_timeout must be an integer, got {signals_timeout!r}")
        elif signals_timeout <= 0:
            errors.append("auto_scaling.signals_timeout must be positive")

        policies = config.termination_policies
        if not isinstance(policies, list):
            errors.append(f"auto_scaling.termination_policies must be a list, got {policies!r}")
        else:
            for policy in policies:
                if policy not in autoscaling.TerminationPolicy.__members__:
                    errors.append(f"auto_scaling.termination_policies: unknown policy {policy!r}")

        if config.instance_monitoring not in ("BASIC", "DETAILED"):
            errors.append(f"auto_scaling.instance_monitoring must be BASIC or DETAILED, got {config.instance_monitoring}")
        if not config.launch_template.name:
            errors.append("auto_scaling.launch_template.name is required")
        if not config.launch_template.instance_type:
            errors.append("auto_scaling.launch_template.instance_type is required")
        return errors

    def validate_ecs_service(self, config: EcsServiceConfig) -> List[str]:
        errors = []
        container = config.container

        if not container.name:
            errors.append("ecs_service.container.name is required")
        if not container.repository_name:
            errors.append("ecs_service.container.repository_name is required")

        for key in ("cpu", "memory_reservation_mib"):
            value = getattr(container, key)
            if not self._is_int(value):
                errors.append(f"ecs_service.container.{key} must be an integer, got {value!r}")
            elif value <= 0:
                errors.append(f"ecs_service.container.{key} must be positive, got {value}")

        if not container.port_mappings:
            errors.append("ecs_service.container.port_mappings requires at least one mapping")
        for mapping in container.port_mappings:
            if "container_port" not in mapping:
                errors.append("ecs_service.container.port_mappings: container_port is required")
            elif not self._is_valid_port(mapping["container_port"]):
                errors.append(f"ecs_service.container.port_mappings: invalid container_port {mapping['container_port']!r}")
            # host port 0 asks ECS for a dynamic host port
            if "host_port" in mapping and not self._is_valid_port(mapping["host_port"], allow_zero=True):
                errors.append(f"ecs_service.container.port_mappings: invalid host_port {mapping['host_port']!r}")
            if str(mapping.get("protocol", "tcp")).lower() not in ("tcp", "udp"):
                errors.append(f"ecs_service.container.port_mappings: invalid protocol {mapping.get('protocol')}")

        health_check = container.health_check
        timings = {key: getattr(health_check, key) for key in ("interval", "timeout", "retries", "start_period")}
        timing_errors = self._check_ints("ecs_service.container.health_check", timings)
        errors.extend(timing_errors)
        if not timing_errors:
            for key, value in timings.items():
                if value <= 0:
                    errors.append(f"ecs_service.container.health_check.{key} must be positive")
            if health_check.timeout >= health_check.interval:
                errors.append("ecs_service.container.health_check.timeout must be less than interval")

        desired_count = config.desired_count
        if not self._is_int(desired_count):
            errors.append(f"ecs_service.desired_count must be an integer, got {desired_count!r}")
        elif desired_count < 0:
            errors.append("ecs_service.desired_count must not be negative")

        percent_errors = self._check_ints(
            "ecs_service",
            {
                "min_healthy_percent": config.min_healthy_percent,
                "max_healthy_percent": config.max_healthy_percent,
            },
        )
        errors.extend(percent_errors)
        if not percent_errors:
            if not 0 <= config.min_healthy_percent <= 100:
                errors.append(f"ecs_service.min_healthy_percent must be within 0..100, got {config.min_healthy_percent}")
            if not 100 <= config.max_healthy_percent <= 200:
                errors.append(f"ecs_service.max_healthy_percent must be within 100..200, got {config.max_healthy_percent}")
            if config.min_healthy_percent > config.max_healthy_percent:
                errors.append("ecs_service.min_healthy_percent must not exceed max_healthy_percent")
        return errors

    def validate(
        self,
        security_group: SecurityGroupConfig,
        auto_scaling: AutoScalingConfig,
        ecs_service: EcsServiceConfig,
    ) -> List[str]:
        """Run every check and return the combined error list"""
        errors = []
        errors.extend(self.validate_security_group(security_group))
        errors.extend(self.validate_auto_scaling(auto_scaling))
        errors.extend(self.validate_ecs_service(ecs_service))
        return errors

    def validate_or_raise(self, stack_name: str, *configs) -> None:
        """
        Raises:
            ValueError: With every error message, if any check failed
        """
        errors = self.validate(*configs)
        if errors:
            message = f"Invalid configuration for stack '{stack_name}':\n  " + "\n  ".join(errors)
            logger.error(message)
            raise ValueError(message)
