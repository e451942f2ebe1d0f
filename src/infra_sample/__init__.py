"""
infra-sample: ECS on EC2 stacks for the Strapi CMS and the Next.js front-end.
MIT License. See Project Root for the license information.
"""

__version__ = "0.1.0"
