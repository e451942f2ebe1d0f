"""
Container Service Stack Module

Runs a single containerized service on EC2-backed ECS capacity inside an
existing VPC: security group, key pair, instance role, cluster, launch
template, Auto Scaling Group (registered as a capacity provider), task
definition and service.
"""

from typing import List, Optional

from aws_cdk import (
    aws_autoscaling as autoscaling,
    aws_ec2 as ec2,
    aws_ecr as ecr,
    aws_ecs as ecs,
    aws_iam as iam,
    aws_logs as logs,
    CfnOutput,
    Duration,
)
from aws_lambda_powertools import Logger
from constructs import Construct

from infra_sample.configurations.deployment import DeploymentConfig
from infra_sample.configurations.resources.auto_scaling import AutoScalingConfig
from infra_sample.configurations.resources.ecs_cluster import EcsClusterConfig
from infra_sample.configurations.resources.ecs_service import EcsServiceConfig
from infra_sample.configurations.resources.instance_role import InstanceRoleConfig
from infra_sample.configurations.resources.key_pair import KeyPairConfig
from infra_sample.configurations.resources.security_group import SecurityGroupConfig
from infra_sample.configurations.resources.vpc import VpcConfig
from infra_sample.configurations.stack import StackConfig
from infra_sample.configurations.workload import WorkloadConfig
from infra_sample.interfaces.istack import IStack
from infra_sample.interfaces.vpc_provider_mixin import VPCProviderMixin
from infra_sample.stack.stack_module_registry import register_stack
from infra_sample.utilities.json_loading_utility import JsonLoadingUtility
from infra_sample.validation.config_validator import ConfigValidator

logger = Logger(service="ContainerServiceStack")


MACHINE_IMAGES = {
    "ecs-amazon-linux-2023": ecs.EcsOptimizedImage.amazon_linux2023,
    "ecs-amazon-linux-2": ecs.EcsOptimizedImage.amazon_linux2,
}


@register_stack("container_service_stack")
class ContainerServiceStack(IStack, VPCProviderMixin):
    """
    A single-service ECS stack on EC2 capacity.

    Resources are created in a fixed order, each one feeding the next:
    - VPC lookup
    - Security group (admin, HTTP, HTTPS and application ports)
    - Key pair
    - Instance role
    - ECS cluster
    - Launch template and Auto Scaling Group, added as a capacity provider
    - Task definition with one container and an EC2 service
    - Stack output with the service name
    """

    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        """
        Initialize the Container Service stack.

        Args:
            scope: The CDK construct scope
            id: The construct ID, also the prefix of every resource name
        """
        super().__init__(scope, id, **kwargs)

        self._initialize_vpc_cache()

        self.stack_config: Optional[StackConfig] = None
        self.deployment: Optional[DeploymentConfig] = None
        self.workload: Optional[WorkloadConfig] = None

        self.vpc_config: Optional[VpcConfig] = None
        self.sg_config: Optional[SecurityGroupConfig] = None
        self.key_pair_config: Optional[KeyPairConfig] = None
        self.role_config: Optional[InstanceRoleConfig] = None
        self.ecs_config: Optional[EcsClusterConfig] = None
        self.asg_config: Optional[AutoScalingConfig] = None
        self.service_config: Optional[EcsServiceConfig] = None

        self.vpc: Optional[ec2.IVpc] = None
        self.security_group: Optional[ec2.SecurityGroup] = None
        self.key_pair: Optional[ec2.KeyPair] = None
        self.instance_role: Optional[iam.Role] = None
        self.ecs_cluster: Optional[ecs.Cluster] = None
        self.user_data: Optional[ec2.UserData] = None
        self.launch_template: Optional[ec2.LaunchTemplate] = None
        self.auto_scaling_group: Optional[autoscaling.AutoScalingGroup] = None
        self.capacity_provider: Optional[ecs.AsgCapacityProvider] = None
        self.task_definition: Optional[ecs.Ec2TaskDefinition] = None
        self.container: Optional[ecs.ContainerDefinition] = None
        self.service: Optional[ecs.Ec2Service] = None

    def build(
        self,
        stack_config: StackConfig,
        deployment: DeploymentConfig,
        workload: WorkloadConfig,
    ) -> None:
        """Build the Container Service stack"""
        self._build(stack_config, deployment, workload)

    def _build(
        self,
        stack_config: StackConfig,
        deployment: DeploymentConfig,
        workload: WorkloadConfig,
    ) -> None:
        """Internal build method for the Container Service stack"""
        self.stack_config = stack_config
        self.deployment = deployment
        self.workload = workload

        self.vpc_config = VpcConfig(stack_config.section("vpc"))
        self.sg_config = SecurityGroupConfig(stack_config.section("security_group"))
        self.key_pair_config = KeyPairConfig(stack_config.section("key_pair"))
        self.role_config = InstanceRoleConfig(stack_config.section("instance_role"))
        self.ecs_config = EcsClusterConfig(stack_config.section("ecs_cluster"))
        self.asg_config = AutoScalingConfig(stack_config.section("auto_scaling"))
        self.service_config = EcsServiceConfig(stack_config.section("ecs_service"))

        ConfigValidator().validate_or_raise(
            self.node.id, self.sg_config, self.asg_config, self.service_config
        )

        logger.info(f"Creating Container Service stack: {self.node.id}")

        self.vpc = self.resolve_vpc(self.vpc_config, workload, construct_id=self.vpc_config.name)
        self._create_security_group()
        self._create_key_pair()
        self._create_instance_role()
        self._create_ecs_cluster()
        self._create_launch_template()
        self._create_auto_scaling_group()
        self._create_capacity_provider()
        self._create_task_definition()
        self._create_service()
        self._export_outputs()

        logger.info(f"Container Service stack created: {self.node.id}")

    def _create_security_group(self) -> None:
        """Security group open to the ingress CIDR on every configured TCP port"""
        sg_name = self.get_construct_id(self.sg_config.name)

        self.security_group = ec2.SecurityGroup(
            self,
            sg_name,
            vpc=self.vpc,
            description=self.sg_config.description,
            allow_all_outbound=self.sg_config.allow_all_outbound,
            security_group_name=sg_name,
        )

        peer = ec2.Peer.ipv4(self.sg_config.ingress_cidr)
        for port in self.sg_config.ingress_ports:
            self.security_group.add_ingress_rule(peer, ec2.Port.tcp(port))

        logger.info(f"Created security group {sg_name} with ingress ports {self.sg_config.ingress_ports}")

    def _create_key_pair(self) -> None:
        key_pair_name = self.get_construct_id(self.key_pair_config.name)
        self.key_pair = ec2.KeyPair(self, key_pair_name, key_pair_name=key_pair_name)
        logger.info(f"Created key pair: {key_pair_name}")

    def _create_instance_role(self) -> None:
        """Role the container instances run as"""
        role_name = self.get_construct_id(self.role_config.name)

        inline_policies = {
            policy_name: iam.PolicyDocument(
                statements=[
                    iam.PolicyStatement(
                        actions=statement.get("actions", []),
                        resources=statement.get("resources", ["*"]),
                    )
                    for statement in statements
                ]
            )
            for policy_name, statements in self.role_config.inline_policies.items()
        }

        managed_policies = [
            iam.ManagedPolicy.from_aws_managed_policy_name(policy_name)
            for policy_name in self.role_config.managed_policies
        ]

        self.instance_role = iam.Role(
            self,
            role_name,
            role_name=role_name,
            assumed_by=iam.ServicePrincipal(self.role_config.assumed_by),
            inline_policies=inline_policies,
            managed_policies=managed_policies,
        )

        logger.info(
            f"Created instance role {role_name} with {len(managed_policies)} managed "
            f"and {len(inline_policies)} inline policies"
        )

    def _create_ecs_cluster(self) -> None:
        logger.info(f"Creating ECS cluster: {self.ecs_config.name}")

        self.ecs_cluster = ecs.Cluster(
            self,
            self.get_construct_id(self.ecs_config.construct_name),
            vpc=self.vpc,
            cluster_name=self.ecs_config.name,
        )

    def _build_user_data(self) -> ec2.UserData:
        """Linux user data with the stack name, ASG id and region filled in"""
        replacements = {
            "{{STACK_NAME}}": self.stack_name,
            "{{ASG_RESOURCE}}": self.get_construct_id(self.asg_config.name),
            "{{AWS_REGION}}": self.deployment.region_or_default,
        }
        commands: List[str] = JsonLoadingUtility.recursive_replace(
            self.asg_config.launch_template.user_data_commands, replacements
        )

        user_data = ec2.UserData.for_linux()
        user_data.add_commands(*commands)
        logger.debug(f"User data commands: {commands}")
        return user_data

    def _create_launch_template(self) -> None:
        lt_config = self.asg_config.launch_template

        image_factory = MACHINE_IMAGES.get(lt_config.machine_image)
        if image_factory is None:
            raise ValueError(
                f"Unsupported machine image '{lt_config.machine_image}'. "
                f"Supported: {', '.join(sorted(MACHINE_IMAGES))}"
            )

        self.user_data = self._build_user_data()

        self.launch_template = ec2.LaunchTemplate(
            self,
            self.get_construct_id(lt_config.construct_name),
            launch_template_name=lt_config.name,
            security_group=self.security_group,
            instance_type=ec2.InstanceType(lt_config.instance_type),
            key_pair=self.key_pair,
            role=self.instance_role,
            machine_image=image_factory(),
            user_data=self.user_data,
            # the ASG rejects instance_monitoring once a launch template is set
            detailed_monitoring=self.asg_config.instance_monitoring == "DETAILED",
        )

        logger.info(f"Created launch template {lt_config.name} ({lt_config.instance_type})")

    def _create_auto_scaling_group(self) -> None:
        asg_name = self.get_construct_id(self.asg_config.name)
        init_config = self.asg_config.init

        init = ec2.CloudFormationInit.from_config_sets(
            config_sets=init_config.get("config_sets", {"default": ["config"]}),
            configs={
                config_name: ec2.InitConfig([])
                for config_names in init_config.get("config_sets", {"default": ["config"]}).values()
                for config_name in config_names
            },
        )

        self.auto_scaling_group = autoscaling.AutoScalingGroup(
            self,
            asg_name,
            auto_scaling_group_name=asg_name,
            vpc=self.vpc,
            desired_capacity=self.asg_config.desired_capacity,
            min_capacity=self.asg_config.min_capacity,
            max_capacity=self.asg_config.max_capacity,
            termination_policies=[
                autoscaling.TerminationPolicy[policy] for policy in self.asg_config.termination_policies
            ],
            init=init,
            init_options=autoscaling.ApplyCloudFormationInitOptions(
                include_url=init_config.get("include_url", True),
                include_role=init_config.get("include_role", True),
                print_log=init_config.get("print_log", True),
            ),
            launch_template=self.launch_template,
            health_check=autoscaling.HealthCheck.ec2(
                grace=Duration.seconds(self.asg_config.health_check_grace_period)
            ),
            signals=autoscaling.Signals.wait_for_all(
                timeout=Duration.seconds(self.asg_config.signals_timeout)
            ),
        )

        logger.info(
            f"Created Auto Scaling Group {asg_name} "
            f"(min={self.asg_config.min_capacity}, desired={self.asg_config.desired_capacity}, "
            f"max={self.asg_config.max_capacity})"
        )

    def _create_capacity_provider(self) -> None:
        cp_config = self.asg_config.capacity_provider

        self.capacity_provider = ecs.AsgCapacityProvider(
            self,
            self.get_construct_id(cp_config.construct_name),
            auto_scaling_group=self.auto_scaling_group,
            enable_managed_termination_protection=cp_config.enable_managed_termination_protection,
        )
        self.ecs_cluster.add_asg_capacity_provider(self.capacity_provider)

        logger.info(f"Registered ASG capacity provider with cluster {self.ecs_config.name}")

    def _create_task_definition(self) -> None:
        """Task definition with the single application container"""
        td_config = self.service_config.task_definition
        container_config = self.service_config.container
        health_check = container_config.health_check

        logging_driver = ecs.AwsLogDriver(
            stream_prefix=container_config.stream_prefix,
            log_group=logs.LogGroup.from_log_group_name(
                self, self.get_construct_id("logGroup"), container_config.log_group_name
            ),
        )

        self.task_definition = ecs.Ec2TaskDefinition(
            self,
            td_config.construct_id or container_config.name,
            family=td_config.family or container_config.name,
        )

        repository = ecr.Repository.from_repository_name(
            self, self.get_construct_id("repo"), container_config.repository_name
        )

        port_mappings = [
            ecs.PortMapping(
                container_port=mapping["container_port"],
                host_port=mapping.get("host_port"),
                protocol=ecs.Protocol.UDP if str(mapping.get("protocol", "tcp")).lower() == "udp" else ecs.Protocol.TCP,
            )
            for mapping in container_config.port_mappings
        ]

        self.container = self.task_definition.add_container(
            self.get_construct_id(container_config.construct_name),
            image=ecs.ContainerImage.from_ecr_repository(repository, container_config.image_tag),
            cpu=container_config.cpu,
            memory_reservation_mib=container_config.memory_reservation_mib,
            port_mappings=port_mappings,
            logging=logging_driver,
            container_name=container_config.name,
            health_check=ecs.HealthCheck(
                command=health_check.command,
                interval=Duration.seconds(health_check.interval),
                timeout=Duration.seconds(health_check.timeout),
                retries=health_check.retries,
                start_period=Duration.seconds(health_check.start_period),
            ),
        )

        logger.info(
            f"Created task definition {self.task_definition.family} with container "
            f"{container_config.name} from {container_config.repository_name}"
        )

    def _create_service(self) -> None:
        service_name = self.get_construct_id(self.service_config.name)

        self.service = ecs.Ec2Service(
            self,
            self.get_construct_id(self.service_config.construct_name),
            cluster=self.ecs_cluster,
            task_definition=self.task_definition,
            desired_count=self.service_config.desired_count,
            service_name=service_name,
            min_healthy_percent=self.service_config.min_healthy_percent,
            max_healthy_percent=self.service_config.max_healthy_percent,
        )

        logger.info(f"Created ECS service: {service_name}")

    def _export_outputs(self) -> None:
        CfnOutput(self, self.service_config.output_name, value=self.service.service_name)
