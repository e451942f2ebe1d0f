"""
Container Service Stack Library

Contains the stack module for running a single containerized service
on EC2-backed ECS capacity.
"""

from .container_service_stack import ContainerServiceStack

__all__ = [
    "ContainerServiceStack",
]
