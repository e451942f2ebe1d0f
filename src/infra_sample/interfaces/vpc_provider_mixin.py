"""
VPC Provider Mixin - Reusable VPC resolution functionality
MIT License. See Project Root for license information.
"""

from typing import Optional, Any
from aws_lambda_powertools import Logger
from aws_cdk import aws_ec2 as ec2

logger = Logger(__name__)


class VPCProviderMixin:
    """
    Mixin class that provides VPC resolution for stacks deployed into an
    existing VPC.

    Priority order:
    1. Stack-level VPC ID (the stack's "vpc" section)
    2. Workload-level VPC ID
    3. Raise error if none found
    """

    def _initialize_vpc_cache(self) -> None:
        """Initialize the VPC cache attribute"""
        if not hasattr(self, '_vpc'):
            self._vpc: Optional[ec2.IVpc] = None

    def resolve_vpc(self, config: Any, workload: Any, construct_id: str = "vpc") -> ec2.IVpc:
        """
        Resolve the VPC by looking it up by id.

        Args:
            config: The VPC configuration of the stack
            workload: The workload configuration
            construct_id: Construct id of the looked-up VPC

        Returns:
            Resolved VPC reference

        Raises:
            ValueError: If no VPC configuration is found
        """
        self._initialize_vpc_cache()
        if self._vpc:
            return self._vpc

        vpc_id = None
        if hasattr(config, 'vpc_id') and config.vpc_id:
            vpc_id = config.vpc_id
        elif hasattr(workload, 'vpc_id') and workload.vpc_id:
            vpc_id = workload.vpc_id

        if not vpc_id:
            raise self._create_vpc_not_found_error(config, workload)

        logger.info(f"Looking up VPC: {vpc_id}")
        self._vpc = ec2.Vpc.from_lookup(self, construct_id, vpc_id=vpc_id)
        return self._vpc

    def _create_vpc_not_found_error(self, config: Any, workload: Any) -> ValueError:
        """
        Create a descriptive error message for missing VPC configuration.

        Args:
            config: The VPC configuration of the stack
            workload: The workload configuration

        Returns:
            ValueError with descriptive message
        """
        config_name = getattr(config, 'name', 'unknown')
        workload_name = getattr(workload, 'name', 'unknown')

        error = ValueError(
            f"VPC is not defined in the configuration for {config_name}. "
            f"You can provide it at the following locations:\n"
            f"  1. At the stack level: stack.vpc.vpc_id\n"
            f"  2. At the workload level: workload.vpc_id\n"
            f"Current workload: {workload_name}"
        )
        logger.error(str(error))
        return error
