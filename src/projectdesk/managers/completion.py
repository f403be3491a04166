"""Tab-completion descriptor export for ProjectDesk."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

logger = logging.getLogger(__name__)

COMMAND_CHOICES = ["close", "list", "active", "rename", "delete", "load", "save"]


class NullExporter:
    """Exporter that does nothing, for when completion is disabled."""

    def export(self, names: Sequence[str]) -> bool:
        return False


class CompletionExporter:
    """Keeps a JSON completion descriptor in sync with the project names."""

    def __init__(self, path: Path, program: str = "projects"):
        """Initialize completion exporter.

        Args:
            path: Path to the completion descriptor
            program: Program name used as the descriptor's top-level key
        """
        self.path = Path(path)
        self.program = program

    def build_inputs(self, names: Sequence[str]) -> List[Dict[str, Any]]:
        """Build the argument descriptors for the current names."""
        return [
            {"name": "command", "choices": COMMAND_CHOICES + list(names)},
            {"name": "project", "choices": list(names)},
        ]

    def export(self, names: Sequence[str]) -> bool:
        """Write the project names into the descriptor.

        Other keys already present in the descriptor are preserved. Failures
        are logged and never raised.

        Args:
            names: Project names in registry order

        Returns:
            True if the descriptor was written
        """
        try:
            data: Dict[str, Any] = {}
            if self.path.exists():
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)

            entry = data.setdefault(self.program, {})
            entry["inputs"] = self.build_inputs(names)

            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except (OSError, json.JSONDecodeError, AttributeError, TypeError) as e:
            logger.warning(f"Tab-completion descriptor {self.path} not updated: {e}")
            return False

        logger.debug(f"Exported {len(names)} project names to {self.path}")
        return True
