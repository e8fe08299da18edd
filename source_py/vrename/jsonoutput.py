"""
JSON output functionality for vrename.
"""

import json
from typing import Any, Dict, List

from .types import RenameOperation


class JSONOutput:
    """Builds the machine-readable rename report."""

    @staticmethod
    def from_results(operations: List[RenameOperation], dry_run: bool) -> Dict[str, Any]:
        """Create the report from the applied (or planned) operations."""
        # Mapping order is kept; it is the order renames were attempted in
        return {
            "dry_run": dry_run,
            "renames": [
                {
                    "from": op.from_path,
                    "to": op.to_path,
                    "changed": op.changed,
                }
                for op in operations
            ],
        }

    @staticmethod
    def to_json(output: Dict[str, Any]) -> str:
        """Convert the report to a JSON string."""
        return json.dumps(output, indent=2, ensure_ascii=False)
