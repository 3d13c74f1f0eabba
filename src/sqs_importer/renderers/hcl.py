"""
HCL literal formatting helpers.
"""

import json
import re
from typing import Dict, List

from ..types import HCLValue

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
# Parsed as literals, not names, when used bare as object keys
RESERVED_KEYS = {"null", "true", "false"}


def to_hcl_string(value: str) -> str:
    """Quote a string for HCL, escaping template sequences."""
    quoted = json.dumps(value, ensure_ascii=False)
    return quoted.replace("${", "$${").replace("%{", "%%{")


def to_hcl_key(name: str) -> str:
    """Return a map key bare when it is a valid identifier, quoted otherwise."""
    if IDENTIFIER_PATTERN.match(name) and name not in RESERVED_KEYS:
        return name
    return to_hcl_string(name)


def to_hcl_literal(value: HCLValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, dict):
        raise TypeError("Maps are rendered with render_string_map()")
    return to_hcl_string(value)


def render_string_map(name: str, values: Dict[str, str], indent: int = 1) -> List[str]:
    """
    Render a map(string) attribute, one entry per line, sorted by key.

    An empty map renders on a single line as `name = {}`.
    """
    indent_str = "  " * indent
    if not values:
        return [f"{indent_str}{name} = {{}}"]
    lines = [f"{indent_str}{name} = {{"]
    for key in sorted(values):
        lines.append(f"{indent_str}  {to_hcl_key(key)} = {to_hcl_string(values[key])}")
    lines.append(f"{indent_str}}}")
    return lines


def render_assignments(assignments: Dict[str, HCLValue], indent: int = 1) -> List[str]:
    """Render scalar assignments with their `=` signs aligned."""
    if not assignments:
        return []
    indent_str = "  " * indent
    width = max(len(name) for name in assignments)
    return [
        f"{indent_str}{name.ljust(width)} = {to_hcl_literal(value)}"
        for name, value in assignments.items()
    ]
