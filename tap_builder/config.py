"""Configuration for report output."""

from typing import Literal

from pydantic import BaseModel, Field


class ReportConfig(BaseModel):
    """Configuration for the JSON report and logging."""

    indent: int = Field(default=2, ge=0)
    include_diagnostics: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
