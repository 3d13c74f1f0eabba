"""
Tests for queue descriptors and queue settings.
"""

import re
import unittest

from src.sqs_importer.queues import (
    QueueDescriptor,
    QueueSettings,
    parse_queue_settings,
    to_safe_identifier,
)

SAFE_IDENTIFIER = re.compile(r"^[a-z0-9_]+$")


class TestQueueDescriptor(unittest.TestCase):
    """Test names derived from queue URLs."""

    def test_from_url(self) -> None:
        queue = QueueDescriptor.from_url(
            "https://sqs.eu-west-2.amazonaws.com/123456789012/Order-Events.fifo"
        )
        self.assertEqual(queue.name, "Order-Events.fifo")
        self.assertEqual(queue.account_id, "123456789012")
        self.assertEqual(queue.resource_name, "order_events_fifo")
        self.assertEqual(queue.module_name, "sqs_order_events_fifo")
        self.assertEqual(
            queue.module_address, "module.sqs_order_events_fifo.aws_sqs_queue.main"
        )

    def test_import_id_uses_region_endpoint(self) -> None:
        """The import id is rebuilt from the region, account and name."""
        queue = QueueDescriptor.from_url("https://queue.amazonaws.com/123456789012/jobs")
        self.assertEqual(
            queue.import_id("us-east-1"),
            "https://sqs.us-east-1.amazonaws.com/123456789012/jobs",
        )

    def test_url_without_path_rejected(self) -> None:
        with self.assertRaises(ValueError):
            QueueDescriptor.from_url("https://sqs.us-east-1.amazonaws.com/")

    def test_safe_identifiers(self) -> None:
        """Hyphens, dots and uppercase letters never reach the identifier."""
        for name in ["My-Queue", "a.b.c", "UPPER_case-Mixed.fifo", "queue-1.fifo", "x"]:
            identifier = to_safe_identifier(name)
            self.assertRegex(identifier, SAFE_IDENTIFIER)
            self.assertEqual(identifier, identifier.lower())
        self.assertEqual(to_safe_identifier("My-Queue.fifo"), "my_queue_fifo")


class TestParseQueueSettings(unittest.TestCase):
    """Test conversion of GetQueueAttributes maps."""

    def test_all_attributes_present(self) -> None:
        settings = parse_queue_settings(
            {
                "VisibilityTimeout": "60",
                "MessageRetentionPeriod": "86400",
                "MaximumMessageSize": "1024",
                "DelaySeconds": "5",
                "ReceiveMessageWaitTimeSeconds": "20",
                "FifoQueue": "true",
                "QueueArn": "arn:aws:sqs:us-east-1:123456789012:jobs.fifo",
            }
        )
        self.assertEqual(
            settings,
            QueueSettings(
                visibility_timeout_seconds=60,
                message_retention_seconds=86400,
                max_message_size=1024,
                delay_seconds=5,
                receive_wait_time_seconds=20,
                fifo_queue=True,
            ),
        )

    def test_missing_attributes_use_defaults(self) -> None:
        settings = parse_queue_settings({})
        self.assertEqual(settings.visibility_timeout_seconds, 30)
        self.assertEqual(settings.message_retention_seconds, 345600)
        self.assertEqual(settings.max_message_size, 262144)
        self.assertEqual(settings.delay_seconds, 0)
        self.assertEqual(settings.receive_wait_time_seconds, 0)
        self.assertFalse(settings.fifo_queue)

    def test_non_numeric_values_use_defaults(self) -> None:
        settings = parse_queue_settings({"VisibilityTimeout": "soon", "DelaySeconds": ""})
        self.assertEqual(settings.visibility_timeout_seconds, 30)
        self.assertEqual(settings.delay_seconds, 0)

    def test_fifo_flag_only_true_for_true(self) -> None:
        self.assertTrue(parse_queue_settings({"FifoQueue": "TRUE"}).fifo_queue)
        self.assertFalse(parse_queue_settings({"FifoQueue": "false"}).fifo_queue)
        self.assertFalse(parse_queue_settings({"FifoQueue": "yes"}).fifo_queue)


if __name__ == "__main__":
    unittest.main()
