"""
Managed Region Handling.

Generated Terraform is written into shared files between a begin marker and an
end marker. Before new text is written, every region produced by an earlier run
is removed; content outside the regions is left alone.

Key points:
- The begin marker carries the generation timestamp, so it is matched by prefix.
- Files written before end markers were introduced only have the begin
  marker. For the module calls file everything from that marker to the end of
  the file is generated and is dropped. For the outputs file the generated
  `output "sqs_...` blocks after the marker are skipped by brace balancing and
  the first unrelated line ends the region.
- Removal is idempotent. A file without a begin marker is returned unchanged.
"""

from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ..utils import read_text_file, setup_logging, write_text_file

logger = setup_logging()

MODULE_CALLS_BEGIN = "# Imported SQS Queues -"
MODULE_CALLS_END = "# End Imported SQS Queues"
OUTPUTS_BEGIN = "# SQS Queue Outputs -"
OUTPUTS_END = "# End SQS Queue Outputs"

GENERATED_OUTPUT_PREFIX = 'output "sqs_'
GENERATED_COMMENT_PREFIX = "# SQS"

LegacyRemover = Callable[[List[str], int], int]


def _find_begin(lines: List[str], begin_prefix: str) -> Optional[int]:
    for index, line in enumerate(lines):
        if line.startswith(begin_prefix):
            return index
    return None


def _find_end(lines: List[str], start: int, end_marker: str) -> Optional[int]:
    for index in range(start + 1, len(lines)):
        if lines[index].strip() == end_marker:
            return index
    return None


def _brace_counts(line: str) -> Tuple[int, int]:
    opens = closes = 0
    in_string = False
    escaped = False
    for char in line:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            opens += 1
        elif char == "}":
            closes += 1
    return opens, closes


def skip_block(lines: List[str], start: int) -> int:
    """Return the index of the first line after the block opening at `start`."""
    depth = 0
    opened = False
    for index in range(start, len(lines)):
        opens, closes = _brace_counts(lines[index])
        opened = opened or opens > 0
        depth += opens - closes
        if opened and depth <= 0:
            return index + 1
    return len(lines)


def _legacy_to_end_of_file(lines: List[str], begin: int) -> int:
    return len(lines)


def _legacy_generated_outputs(lines: List[str], begin: int) -> int:
    index = begin + 1
    while index < len(lines):
        line = lines[index]
        if not line.strip() or line.startswith(GENERATED_COMMENT_PREFIX):
            index += 1
        elif line.startswith(GENERATED_OUTPUT_PREFIX):
            index = skip_block(lines, index)
        else:
            break
    return index


def _splice(before: List[str], after: List[str]) -> str:
    head = "".join(before).rstrip()
    tail = "".join(after).lstrip("\n")
    if head and tail:
        return f"{head}\n\n{tail}"
    if head:
        return f"{head}\n"
    return tail


def remove_regions(
    text: str, begin_prefix: str, end_marker: str, legacy_remover: LegacyRemover
) -> str:
    """
    Remove every managed region from `text`.

    Args:
        text: File content
        begin_prefix: Prefix of the begin marker line
        end_marker: Exact end marker line
        legacy_remover: Returns the end index (exclusive) of a region that has
            a begin marker but no end marker

    Returns:
        The text without managed regions (unchanged if there are none)
    """
    lines = text.splitlines(keepends=True)
    begin = _find_begin(lines, begin_prefix)
    if begin is None:
        return text

    while begin is not None:
        end = _find_end(lines, begin, end_marker)
        stop = end + 1 if end is not None else legacy_remover(lines, begin)
        text = _splice(lines[:begin], lines[stop:])
        lines = text.splitlines(keepends=True)
        begin = _find_begin(lines, begin_prefix)
    return text


def remove_module_calls(text: str) -> str:
    return remove_regions(text, MODULE_CALLS_BEGIN, MODULE_CALLS_END, _legacy_to_end_of_file)


def remove_queue_outputs(text: str) -> str:
    return remove_regions(text, OUTPUTS_BEGIN, OUTPUTS_END, _legacy_generated_outputs)


def render_region(begin_prefix: str, end_marker: str, blocks: List[str], generated_at: str) -> str:
    """Wrap rendered blocks in a begin/end marker pair."""
    header = f"{begin_prefix} {generated_at}"
    if not blocks:
        return f"{header}\n{end_marker}\n"
    body = "\n\n".join(blocks)
    return f"{header}\n\n{body}\n\n{end_marker}\n"


def append_region(text: str, region: str) -> str:
    """Append a region after existing content, separated by one blank line."""
    head = text.rstrip()
    if not head:
        return region
    return f"{head}\n\n{region}"


def strip_file(path: Path, remover: Callable[[str], str]) -> str:
    """
    Remove managed regions from a file.

    The file is only rewritten when something was removed.

    Returns:
        The file content after removal ("" for a missing file)
    """
    original = read_text_file(path, logger)
    cleaned = remover(original)
    if cleaned != original:
        logger.info(f"Removing previously generated SQS blocks from {path}...")
        write_text_file(path, cleaned, logger)
    return cleaned
