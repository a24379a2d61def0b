"""Run configuration."""

import json
import random
from pathlib import Path
from typing import Any, Callable, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from chell.core.models import TestOptions
from chell.core.runner import effective_timeout

ReportFormat = Literal["text", "json", "xml"]


def random_seed() -> int:
    """Pick a seed for runs that did not specify one."""
    return random.SystemRandom().randrange(2**31)


class ReportTarget(BaseModel):
    """A report file to write after the run."""

    path: str = Field(description="Destination file, replaced if it exists")
    format: ReportFormat = Field(description="Report format (text, json, xml)")

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Report path cannot be empty")
        return v


class RunConfig(BaseModel):
    """Everything the command line can tell a test run."""

    verbose: bool = Field(default=False, description="Print passed and skipped tests too")
    reports: list[ReportTarget] = Field(default_factory=list, description="Report files to write")
    seed: Optional[int] = Field(default=None, description="Seed for random test data (random if unset)")
    timeout_ms: Optional[int] = Field(default=None, description="Maximum duration of a test, in milliseconds")
    color: Literal["always", "auto", "never"] = Field(default="auto", description="Whether to color console output")
    filters: list[str] = Field(default_factory=list, description="Test or suite names to run")

    @field_validator("timeout_ms")
    @classmethod
    def validate_timeout(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("Timeout cannot be negative")
        return v

    @classmethod
    def from_file(cls, path: Path | str) -> "RunConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            data = json.load(f)

        return cls.model_validate(data)

    def merged(self, **overrides: Any) -> "RunConfig":
        """Return a copy with every override that is not None or empty applied."""
        data = self.model_dump()
        for key, value in overrides.items():
            if value is None or value == [] or value is False:
                continue
            if key == "reports":
                value = [*data["reports"], *value]
            data[key] = value
        return RunConfig.model_validate(data)

    def test_options(self, seed_factory: Callable[[], int] = random_seed) -> TestOptions:
        """Build the context passed to every test.

        A missing seed is generated; a timeout too large to wait for is
        dropped with a warning.
        """
        seed = self.seed if self.seed is not None else seed_factory()
        return TestOptions(seed=seed, timeout=effective_timeout(self.timeout_ms))
