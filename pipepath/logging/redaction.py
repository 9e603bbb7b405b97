"""Home-directory redaction for log output."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Pattern


class PathRedactor:
    """Mask user home directories in path strings while keeping file names."""

    def __init__(self, custom_patterns: Optional[List[Pattern[str]]] = None) -> None:
        """Initialize redactor with standard and custom patterns.

        Args:
            custom_patterns: Additional regex patterns to redact
        """
        self.patterns: List[Pattern[str]] = [
            re.compile(r"/home/[^/\s]+"),
            re.compile(r"/Users/[^/\s]+"),
            re.compile(r"[A-Za-z]:[\\/]Users[\\/][^\\/\s]+", re.IGNORECASE),
        ]
        if custom_patterns:
            self.patterns.extend(custom_patterns)

    def redact_string(self, text: str) -> str:
        """Redact home directories from a string.

        Args:
            text: Input text to redact

        Returns:
            Text with each home directory replaced by ``[REDACTED]``
        """
        if not isinstance(text, str):
            return text

        result = text
        for pattern in self.patterns:
            result = pattern.sub("[REDACTED]", result)
        return result

    def redact_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.redact_string(value)
        if isinstance(value, dict):
            return self.redact_dict(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self.redact_value(v) for v in value)
        # Path values render through their string form.
        if hasattr(value, "full_path"):
            return self.redact_string(str(value))
        return value

    def redact_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {key: self.redact_value(value) for key, value in data.items()}


__all__ = ["PathRedactor"]
