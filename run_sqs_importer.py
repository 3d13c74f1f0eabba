#!/usr/bin/env python3
"""
Command-line interface for running the SQS Terraform Importer from a checkout.

It requires AWS credentials to be configured (via AWS CLI, environment variables,
or IAM roles) and Terraform on the PATH. Run it from the Terraform root directory.

Usage:
    python run_sqs_importer.py
    python run_sqs_importer.py eu-west-2
    python run_sqs_importer.py eu-west-2 --dry-run --log-level DEBUG
"""

import sys

from src.main import main

if __name__ == "__main__":
    sys.exit(main())
