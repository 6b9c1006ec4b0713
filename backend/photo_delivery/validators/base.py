"""Base validator — abstract class implementing the Strategy Pattern.

Each rule group is a standalone, independently testable unit.
The engine runs them in a fixed order; the order is visible in every report.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from photo_delivery.validators.models import (
    DeliveryPackage,
    ErrorCode,
    Finding,
    ValidatorConfig,
    WarningCode,
)


class BaseValidator(ABC):
    """Abstract base for all delivery package rules.

    Contract:
        - validate() is deterministic: same package → same findings
        - validate() never mutates the package
        - validate() returns a list of Finding (empty = no issues)
        - No I/O, no clock, no randomness
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, package: DeliveryPackage, config: ValidatorConfig) -> list[Finding]:
        """Run this rule group against the package.

        Args:
            package: The assembled delivery package
            config: Engine options (only a few rules read it)

        Returns:
            List of Finding, in package iteration order
        """
        ...

    # ── Helper Methods ──

    def _finding(
        self,
        code: Union[ErrorCode, WarningCode],
        message: str,
        target_file: Optional[str] = None,
        target_field: Optional[str] = None,
        details: Optional[str] = None,
    ) -> Finding:
        """Convenience method to create a Finding."""
        return Finding(
            code=code,
            message=message,
            target_file=target_file,
            target_field=target_field,
            details=details,
        )

    def _is_blank(self, value: Optional[str]) -> bool:
        """True for None, empty, or whitespace-only strings."""
        return value is None or value.strip() == ""
