"""
Renderer output records.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteOperation:
    """
    A generated file.

    Attributes:
        path: Target file path.
        content: Text to write.
    """
    path: str
    content: str

    def execute(self) -> None:
        """Write the content, creating missing parent directories."""
        target = Path(self.path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, 'w', encoding='utf-8') as f:
            f.write(self.content)
        logger.debug(f"Wrote {len(self.content)} characters to {target}")
