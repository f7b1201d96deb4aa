"""Request and result records passed between the tools and the converter."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MarkdownConversionRequest(BaseModel):
    """A Markdown file to render as PDF."""

    model_config = ConfigDict(frozen=True)

    input_path: str = Field(description="Path to the input Markdown file")
    output_path: Optional[str] = Field(
        default=None,
        description="Where to write the PDF; defaults to the input path with a .pdf extension",
    )
    custom_css: Optional[str] = Field(
        default=None,
        description="Extra CSS appended after the default stylesheet",
    )

    def resolved_output_path(self) -> str:
        if self.output_path:
            return self.output_path
        return str(Path(self.input_path).with_suffix(".pdf"))


class DiagramConversionRequest(BaseModel):
    """Raw Mermaid source to render as a standalone PNG or PDF."""

    model_config = ConfigDict(frozen=True)

    mermaid_code: str = Field(description="Raw Mermaid diagram code")
    output_path: str = Field(description="Where to write the output file")


class ConversionResult(BaseModel):
    """Outcome of one conversion: exactly one of output_path / error is set."""

    model_config = ConfigDict(frozen=True)

    success: bool
    output_path: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "ConversionResult":
        if self.success and (not self.output_path or self.error is not None):
            raise ValueError("a successful result needs output_path and no error")
        if not self.success and (not self.error or self.output_path is not None):
            raise ValueError("a failed result needs error and no output_path")
        return self

    @classmethod
    def ok(cls, output_path: str) -> "ConversionResult":
        return cls(success=True, output_path=output_path)

    @classmethod
    def failed(cls, error: str) -> "ConversionResult":
        return cls(success=False, error=error)
