from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class TimezoneRules(BaseModel):
    local: str = "UTC"

    @field_validator("local")
    @classmethod
    def _known_zone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value


class Rfc2822Rules(BaseModel):
    accept_legacy_forms: bool = True


class Iso8601Rules(BaseModel):
    date_only_as_utc: bool = True


class ParsingRules(BaseModel):
    rfc2822: Rfc2822Rules = Field(default_factory=Rfc2822Rules)
    iso8601: Iso8601Rules = Field(default_factory=Iso8601Rules)


class TimeSpanRules(BaseModel):
    negative_policy: Literal["error", "clamp"] = "error"
    min_hour_digits: int = Field(default=2, ge=2, le=6)


class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class Rules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    project: ProjectRules
    timezone: TimezoneRules = Field(default_factory=TimezoneRules)
    parsing: ParsingRules = Field(default_factory=ParsingRules)
    timespan: TimeSpanRules = Field(default_factory=TimeSpanRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
