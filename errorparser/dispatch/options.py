"""Source-format selection and dispatch configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class SourceFormat(StrEnum):
    """Which toolchain's output the dispatcher should expect."""

    AUTO = "auto"
    FLUTTER = "flutter"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @staticmethod
    def parse(name: "str | SourceFormat") -> "SourceFormat":
        """Resolve a selector such as ``"Python"``; raises ValueError when unknown."""
        if isinstance(name, SourceFormat):
            return name
        try:
            return SourceFormat(name.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in SourceFormat)
            raise ValueError(f"Unknown source format {name!r}; expected one of: {choices}") from None


@dataclass(frozen=True, slots=True)
class DispatchOptions:
    """Per-run dispatch configuration, chosen once before the first line."""

    source_format: SourceFormat = SourceFormat.AUTO
    skip_blank_lines: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.source_format, SourceFormat):
            raise ValueError(f"source_format must be a SourceFormat, got {self.source_format!r}")

    @staticmethod
    def for_format(source_format: SourceFormat) -> "DispatchOptions":
        return DispatchOptions(source_format=source_format)

    @staticmethod
    def from_name(name: "str | SourceFormat") -> "DispatchOptions":
        return DispatchOptions.for_format(SourceFormat.parse(name))
