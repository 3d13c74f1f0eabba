"""
Command-line entry point for the SQS Terraform Importer.

Usage:
    sqs-importer
    sqs-importer eu-west-2
    sqs-importer eu-west-2 --dry-run --log-level DEBUG
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from .config import VALID_LOG_LEVELS, load_config
from .sqs_importer import NoQueuesFoundError, import_queues
from .utils import setup_logging

EXIT_OK = 0
EXIT_NO_QUEUES = 1
EXIT_CONFIG_ERROR = 2
EXIT_FILE_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate Terraform module calls for existing SQS queues and import them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sqs-importer
  sqs-importer eu-west-2 --module-calls-file sqs.tf --outputs-file sqs_outputs.tf
  sqs-importer us-east-1 --dry-run --log-level DEBUG
        """,
    )

    parser.add_argument(
        "region",
        nargs="?",
        default=None,
        help="AWS region to scan (default: $SQS_IMPORT_REGION or us-east-1)",
    )

    parser.add_argument(
        "--module-name",
        default=None,
        help="Name of the generated module directory (default: sqs)",
    )

    parser.add_argument(
        "--modules-dir",
        default=None,
        help="Directory holding Terraform modules (default: modules)",
    )

    parser.add_argument(
        "--module-calls-file",
        default=None,
        help="File receiving the generated module calls (default: main.tf)",
    )

    parser.add_argument(
        "--outputs-file",
        default=None,
        help="File receiving the generated outputs (default: output.tf)",
    )

    parser.add_argument(
        "--working-dir",
        default=None,
        help="Terraform root directory (default: current directory)",
    )

    parser.add_argument(
        "--terraform-bin",
        default=None,
        help="Terraform executable (default: terraform)",
    )

    parser.add_argument(
        "--profile",
        default=None,
        help="AWS named profile to use",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Write the Terraform files but skip terraform init and import",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )

    parser.add_argument(
        "--output-format",
        choices=["json", "pretty"],
        default="pretty",
        help="Output format for the run report (default: pretty)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line importer."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            region=args.region,
            module_name=args.module_name,
            modules_dir=args.modules_dir,
            module_calls_file=args.module_calls_file,
            outputs_file=args.outputs_file,
            working_dir=args.working_dir,
            terraform_bin=args.terraform_bin,
            profile=args.profile,
            dry_run=args.dry_run,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"ERROR: {str(e)}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger = setup_logging(config.log_level)
    logger.info(f"Using module folder: {config.module_name}")

    try:
        report = import_queues(config)
    except NoQueuesFoundError as e:
        print(f"ERROR: {str(e)}", file=sys.stderr)
        return EXIT_NO_QUEUES
    except OSError as e:
        logger.error(f"Error accessing Terraform files: {str(e)}")
        print(f"ERROR: {str(e)}", file=sys.stderr)
        return EXIT_FILE_ERROR

    if args.output_format == "json":
        print(json.dumps(report, indent=2))
    else:
        print_import_report(report)

    return EXIT_OK


def print_import_report(report: Dict[str, Any]) -> None:
    """Print a human-readable summary of the run."""
    print("\n" + "=" * 60)
    print("SQS TERRAFORM IMPORT REPORT")
    print("=" * 60)

    print(f"\nRegion: {report.get('region', 'Unknown')}")
    print(f"Queues found: {report.get('queues_found', 0)}")
    print(f"Module calls: {report.get('module_calls_file', 'Unknown')}")
    print(f"Outputs: {report.get('outputs_file', 'Unknown')}")
    if report.get("dry_run"):
        print("\nDry run: terraform init and import were skipped.")

    imports = report.get("imports", [])
    print(f"\n=== Imports ({len(imports)}) ===")
    for item in imports:
        if item.get("success"):
            print(f"✓ {item['address']}")
        else:
            print(f"✗ {item['address']} (exit code {item['exit_code']})")

    print(f"\nFailed imports: {report.get('failed_imports', 0)}")
    print("Done! Run 'terraform plan' to verify.")
    print("\n" + "=" * 60)


if __name__ == "__main__":
    sys.exit(main())
