"""Runner configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nestspec.testing.matcher import RunFilter


class NestspecSettings(BaseSettings):
    """Run configuration.

    Loads from environment variables automatically:
        NESTSPEC_EXAMPLE, NESTSPEC_LINE, NESTSPEC_FAIL_FAST, NESTSPEC_VERBOSE,
        NESTSPEC_TRACE, NESTSPEC_TRACE_OUTPUT, NESTSPEC_SPEC_DIR

    Command line flags take precedence.
    """

    example: str | None = Field(default=None, description="Run examples whose full nested names include this")
    line: int | None = Field(default=None, ge=1, description="Run examples declared on this line")
    fail_fast: bool = Field(default=False, description="Abort the run on the first failure")
    verbose: bool = Field(default=False, description="Use the verbose reporter")
    trace: bool = Field(default=False, description="Write OpenTelemetry spans for each example")
    trace_output: Path = Field(default=Path(".nestspec/traces.jsonl"), description="Trace output file")
    spec_dir: Path = Field(default=Path("spec"), description="Directory searched when no paths are given")

    model_config = SettingsConfigDict(
        env_prefix="NESTSPEC_",
        extra="ignore",
    )

    def run_filter(self, file: str | None = None) -> RunFilter:
        return RunFilter(pattern=self.example, line=self.line, file=file)
