#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: models.py
# Author: Wadih Khairallah
# Description: Value types passed into and returned from the engine
# Created: 2026-10-12 10:20:47
# Modified: 2026-10-19 09:42:10

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    ValidationError,
    model_validator,
)

from wordlens.errors import InvalidOptionsError

MIN_GROUP_SIZE = 1
MAX_GROUP_SIZE = 5
DEFAULT_GROUP_SIZE = 1
DEFAULT_MIN_COUNT = 2

_OPTION_ALIASES = {
    "groupSize": "group_size",
    "minCount": "min_count",
    "caseSensitive": "case_sensitive",
}

# Messages for wrong types and for out-of-range values, per field
_TYPE_MESSAGES = {
    "group_size": "Group size must be an integer",
    "min_count": "Minimum count must be an integer",
    "case_sensitive": "Case sensitivity must be a boolean",
}
_RANGE_MESSAGES = {
    "group_size": f"Group size must be between {MIN_GROUP_SIZE} and {MAX_GROUP_SIZE}",
    "min_count": "Minimum count must be greater than 0",
}


def _options_error(exc: ValidationError) -> InvalidOptionsError:
    """Turn the first pydantic error into a readable InvalidOptionsError."""
    error = exc.errors()[0]
    key = str(error["loc"][0]) if error["loc"] else ""
    if error["type"] == "extra_forbidden":
        return InvalidOptionsError(f"Unknown option: {key}")

    name = _OPTION_ALIASES.get(key, key)
    if error["type"].endswith("_type") or error["type"].endswith("_parsing"):
        message = _TYPE_MESSAGES.get(name)
    else:
        message = _RANGE_MESSAGES.get(name)
    return InvalidOptionsError(message or f"Invalid option {key}: {error['msg']}")


class AnalyzeOptions(BaseModel):
    """
    Options accepted by analyze().

    Keys may be given in snake_case or camelCase. Values are strict: "2" is
    not a group size and 1 is not a boolean.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    group_size: StrictInt = Field(
        DEFAULT_GROUP_SIZE,
        ge=MIN_GROUP_SIZE,
        le=MAX_GROUP_SIZE,
        validation_alias=AliasChoices("group_size", "groupSize"),
    )
    min_count: StrictInt = Field(
        DEFAULT_MIN_COUNT,
        gt=0,
        validation_alias=AliasChoices("min_count", "minCount"),
    )
    case_sensitive: StrictBool = Field(
        False,
        validation_alias=AliasChoices("case_sensitive", "caseSensitive"),
    )

    @classmethod
    def coerce(cls, options: Union["AnalyzeOptions", Mapping[str, Any], None]) -> "AnalyzeOptions":
        """
        Build validated options from None, a mapping or an existing instance.

        Args:
            options: Option values; missing keys keep their defaults.

        Returns:
            AnalyzeOptions: Validated options

        Raises:
            InvalidOptionsError: Unknown key, wrong type or value out of range
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            try:
                return cls.model_validate(dict(options))
            except ValidationError as exc:
                raise _options_error(exc) from exc
        raise InvalidOptionsError(f"Unsupported options type: {type(options).__name__}")


@dataclass(frozen=True)
class WordCount:
    text: str
    count: int
    density: float

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "count": self.count, "density": self.density}


@dataclass
class AnalysisResult:
    words: List[WordCount] = field(default_factory=list)
    total_words: int = 0
    unique_words: int = 0
    avg_word_length: float = 0
    reading_time: int = 0
    text_html_ratio: float = 0
    language: Optional[str] = None
    confidence: Optional[float] = None
    title: Optional[str] = None
    headings: Optional[List[str]] = None

    @classmethod
    def empty(cls, text_html_ratio: float = 0) -> "AnalysisResult":
        return cls(text_html_ratio=text_html_ratio)

    def to_dict(self) -> Dict[str, Any]:
        """Public result shape. Optional fields appear only when set."""
        data: Dict[str, Any] = {
            "words": [w.to_dict() for w in self.words],
            "totalWords": self.total_words,
            "uniqueWords": self.unique_words,
            "avgWordLength": self.avg_word_length,
            "readingTime": self.reading_time,
            "textHtmlRatio": self.text_html_ratio,
        }
        for key, value in (
            ("language", self.language),
            ("confidence", self.confidence),
            ("title", self.title),
            ("headings", self.headings),
        ):
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class DetectionResult:
    language: str
    confidence: float
    scores: Dict[str, float] = field(default_factory=dict)


class DensityRanges(BaseModel):
    """Percent limits for the under-optimized, optimal and over-optimized bands."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    under_optimized: float = Field(0.5, ge=0)
    optimal_max: float = Field(2.0, le=100)

    @model_validator(mode="after")
    def check_order(self):
        if self.under_optimized >= self.optimal_max:
            raise ValueError("under_optimized must be lower than optimal_max")
        return self
