"""Sequence Validator — photo numbers must form an unbroken 1..N run."""

from photo_delivery.validators.base import BaseValidator
from photo_delivery.validators.models import DeliveryPackage, ErrorCode, Finding, ValidatorConfig


class SequenceValidator(BaseValidator):
    """Validates declared photo numbers across the whole package.

    Gaps, repeats, and runs not starting at 1 all break contiguity.
    Only the first break is reported.
    """

    @property
    def name(self) -> str:
        return "SequenceValidator"

    def validate(self, package: DeliveryPackage, config: ValidatorConfig) -> list[Finding]:
        numbers = sorted(entry.photo_info.photo_number for entry in package.photo_files)

        for index, number in enumerate(numbers):
            expected = index + 1
            if number != expected:
                return [self._finding(
                    code=ErrorCode.NON_SEQUENTIAL_NUMBER,
                    message="写真番号が連続していません",
                    target_field="photo_number",
                    details=f"番号 {number} (期待値: {expected})",
                )]

        return []
