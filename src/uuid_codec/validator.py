"""UUID string validator."""

from dataclasses import dataclass

from uuid_codec.generator import RFC9562_VARIANT, UUID_V4_VERSION, UUID_V5_VERSION
from uuid_codec.parser import find_syntax_error, from_string


@dataclass
class ValidationResult:
    """UUID validation result."""

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None

    def __post_init__(self) -> None:
        """Initialize warnings list."""
        if self.warnings is None:
            self.warnings = []


class UUIDValidator:
    """Validate UUID strings without raising.

    The grammar check is the same one ``from_string`` applies. On top of it
    the validator reports input that parses but is not what this library
    would emit: uppercase digits, versions other than 4 and 5, and
    non-RFC 9562 variants.
    """

    GENERATED_VERSIONS = (UUID_V4_VERSION, UUID_V5_VERSION)

    def validate(self, uuid: str, strict: bool = True) -> ValidationResult:
        """Validate a UUID string.

        Args:
            uuid: UUID string to validate
            strict: Treat warnings as errors

        Returns:
            Validation result
        """
        error = find_syntax_error(uuid)
        if error is not None:
            return ValidationResult(valid=False, error=f"Invalid UUID format: {error}")

        value = from_string(uuid)
        warnings = []
        if uuid != uuid.lower():
            warnings.append("UUID contains uppercase hex digits")
        if value.version not in self.GENERATED_VERSIONS:
            warnings.append(f"UUID version {value.version} is not 4 or 5")
        if value.variant != RFC9562_VARIANT:
            warnings.append(f"UUID variant {value.variant:02b} is not the RFC 9562 variant (10)")

        if strict and warnings:
            return ValidationResult(valid=False, error=warnings[0], warnings=warnings)

        return ValidationResult(valid=True, warnings=warnings)
