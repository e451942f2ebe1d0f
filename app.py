#!/usr/bin/env python3
"""
CDK entry point for the Strapi and Next.js container service stacks.

The VPC id can be passed with `cdk synth -c vpc_id=vpc-...` or the VPC_ID
environment variable; account and region come from the active AWS profile.
"""

from infra_sample.app import CdkAppFactory


def main():
    """Run the app"""
    factory = CdkAppFactory()
    factory.synth()


if __name__ == "__main__":
    main()
