"""Pattern descriptors and demo results."""
import re
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

_SEPARATORS = re.compile(r"[\s_]+")


def normalize_pattern_name(name: str) -> str:
    """Normalize a pattern name for lookup (``Factory_Method`` -> ``factory-method``)."""
    return _SEPARATORS.sub("-", name.strip()).lower()


class PatternCategory(str, Enum):
    """The three classic pattern categories."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternDescriptor(BaseModel):
    """Static metadata identifying a pattern example."""
    model_config = ConfigDict(frozen=True)

    name: str
    category: PatternCategory
    description: str = ""
    aliases: Tuple[str, ...] = ()

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names must be non-empty once stripped."""
        v = v.strip()
        if not v:
            raise ValueError("Pattern name must not be empty")
        return v

    @property
    def lookup_keys(self) -> List[str]:
        """All normalized names this descriptor answers to."""
        keys = [normalize_pattern_name(self.name)]
        for alias in self.aliases:
            key = normalize_pattern_name(alias)
            if key and key not in keys:
                keys.append(key)
        return keys

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
        }


class DemoResult(BaseModel):
    """Outcome of a single demo run."""

    pattern_name: str
    output_lines: List[str] = Field(default_factory=list)
    succeeded: bool
    error: Optional[str] = None
    error_type: Optional[str] = None
    duration_ms: float = 0.0

    def to_dict(self) -> dict:
        return self.model_dump()


class RunReport(BaseModel):
    """Aggregated results of a runner invocation, in execution order."""

    results: List[DemoResult] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return all(result.succeeded for result in self.results)

    @property
    def failed(self) -> List[str]:
        return [result.pattern_name for result in self.results if not result.succeeded]

    def to_dict(self) -> dict:
        return {
            "succeeded": self.succeeded,
            "total": len(self.results),
            "failed": self.failed,
            "results": [result.to_dict() for result in self.results],
        }
