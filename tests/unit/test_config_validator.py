"""Unit tests for ConfigValidator"""

import copy

import pytest

from infra_sample.configurations.resources.auto_scaling import AutoScalingConfig
from infra_sample.configurations.resources.ecs_service import EcsServiceConfig
from infra_sample.configurations.resources.security_group import SecurityGroupConfig
from infra_sample.validation.config_validator import ConfigValidator


VALID_SERVICE = {
    "container": {
        "name": "strapi",
        "repository_name": "strapi-sample",
        "cpu": 256,
        "memory_reservation_mib": 256,
        "port_mappings": [{"container_port": 1337, "host_port": 80, "protocol": "tcp"}],
    }
}


class TestConfigValidator:

    @pytest.fixture
    def validator(self):
        return ConfigValidator()

    @pytest.fixture
    def service(self):
        return copy.deepcopy(VALID_SERVICE)

    def test_defaults_are_valid(self, validator, service):
        errors = validator.validate(
            SecurityGroupConfig({}), AutoScalingConfig({}), EcsServiceConfig(service)
        )
        assert errors == []

    @pytest.mark.parametrize("port", [0, 70000, "80", True])
    def test_invalid_ingress_port(self, validator, port):
        errors = validator.validate_security_group(SecurityGroupConfig({"ingress_ports": [22, port]}))
        assert len(errors) == 1
        assert "invalid port" in errors[0]

    @pytest.mark.parametrize(
        "capacity",
        [
            {"min_capacity": 2, "desired_capacity": 1, "max_capacity": 1},
            {"min_capacity": 1, "desired_capacity": 3, "max_capacity": 2},
        ],
    )
    def test_capacity_bounds(self, validator, capacity):
        errors = validator.validate_auto_scaling(AutoScalingConfig(capacity))
        assert any("min <= desired <= max" in error for error in errors)

    def test_instance_monitoring(self, validator):
        errors = validator.validate_auto_scaling(AutoScalingConfig({"instance_monitoring": "VERBOSE"}))
        assert any("instance_monitoring" in error for error in errors)

    def test_container_requirements(self, validator):
        errors = validator.validate_ecs_service(EcsServiceConfig({"container": {"cpu": 0}}))

        assert "ecs_service.container.name is required" in errors
        assert "ecs_service.container.repository_name is required" in errors
        assert any("cpu must be positive" in error for error in errors)
        assert any("at least one mapping" in error for error in errors)

    def test_port_mapping_protocol_and_ports(self, validator, service):
        service["container"]["port_mappings"] = [{"container_port": 99999, "host_port": 80, "protocol": "sctp"}]

        errors = validator.validate_ecs_service(EcsServiceConfig(service))

        assert any("invalid container_port" in error for error in errors)
        assert any("invalid protocol" in error for error in errors)

    def test_health_check_timings(self, validator, service):
        service["container"]["health_check"] = {"interval": 5, "timeout": 5, "retries": 0}

        errors = validator.validate_ecs_service(EcsServiceConfig(service))

        assert "ecs_service.container.health_check.retries must be positive" in errors
        assert "ecs_service.container.health_check.timeout must be less than interval" in errors

    def test_deployment_percentages(self, validator, service):
        service["min_healthy_percent"] = 150
        service["max_healthy_percent"] = 250

        errors = validator.validate_ecs_service(EcsServiceConfig(service))

        assert any("min_healthy_percent must be within" in error for error in errors)
        assert any("max_healthy_percent must be within" in error for error in errors)

    def test_validate_or_raise(self, validator):
        with pytest.raises(ValueError, match="Invalid configuration for stack 'strapi'"):
            validator.validate_or_raise(
                "strapi",
                SecurityGroupConfig({"ingress_ports": [0]}),
                AutoScalingConfig({}),
                EcsServiceConfig(copy.deepcopy(VALID_SERVICE)),
            )

    @pytest.mark.parametrize("key", ["min_capacity", "desired_capacity", "max_capacity"])
    @pytest.mark.parametrize("value", ["1", None, 1.5, True])
    def test_capacity_must_be_integer(self, validator, key, value):
        errors = validator.validate_auto_scaling(AutoScalingConfig({key: value}))
        assert f"auto_scaling.{key} must be an integer, got {value!r}" in errors

    def test_timings_must_be_integer(self, validator):
        errors = validator.validate_auto_scaling(
            AutoScalingConfig({"health_check_grace_period": "300", "signals_timeout": None})
        )
        assert "auto_scaling.health_check_grace_period must be an integer, got '300'" in errors
        assert "auto_scaling.signals_timeout must be an integer, got None" in errors

    def test_unknown_termination_policy(self, validator):
        errors = validator.validate_auto_scaling(
            AutoScalingConfig({"termination_policies": ["OLDEST_INSTANCE", "OLDEST"]})
        )
        assert errors == ["auto_scaling.termination_policies: unknown policy 'OLDEST'"]

    def test_termination_policies_must_be_list(self, validator):
        errors = validator.validate_auto_scaling(AutoScalingConfig({"termination_policies": "OLDEST_INSTANCE"}))
        assert any("termination_policies must be a list" in error for error in errors)

    def test_instance_type_required(self, validator):
        errors = validator.validate_auto_scaling(AutoScalingConfig({"launch_template": {"instance_type": ""}}))
        assert "auto_scaling.launch_template.instance_type is required" in errors

    @pytest.mark.parametrize("key", ["cpu", "memory_reservation_mib"])
    def test_container_resources_must_be_integer(self, validator, service, key):
        service["container"][key] = None

        errors = validator.validate_ecs_service(EcsServiceConfig(service))

        assert errors == [f"ecs_service.container.{key} must be an integer, got None"]

    def test_service_values_must_be_integer(self, validator, service):
        service["desired_count"] = "1"
        service["min_healthy_percent"] = None
        service["container"]["health_check"] = {"interval": "30"}

        errors = validator.validate_ecs_service(EcsServiceConfig(service))

        assert "ecs_service.desired_count must be an integer, got '1'" in errors
        assert "ecs_service.min_healthy_percent must be an integer, got None" in errors
        assert "ecs_service.container.health_check.interval must be an integer, got '30'" in errors

    def test_dynamic_host_port_allowed(self, validator, service):
        service["container"]["port_mappings"] = [{"container_port": 1337, "host_port": 0}]
        assert validator.validate_ecs_service(EcsServiceConfig(service)) == []

    def test_container_port_zero_rejected(self, validator, service):
        service["container"]["port_mappings"] = [{"container_port": 0, "host_port": 80}]

        errors = validator.validate_ecs_service(EcsServiceConfig(service))

        assert errors == ["ecs_service.container.port_mappings: invalid container_port 0"]
