"""Base entity mixin for all domain entities."""

from dataclasses import asdict
from typing import Any


class BaseEntity:
    """Mixin for dataclass entities, frozen or not."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a field-name -> value dictionary."""
        return asdict(self)
