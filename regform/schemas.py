from __future__ import annotations
from typing import Any, List, Literal, Mapping, Optional

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field

from .services.sanitizer import sanitize_input

FIELDS = ("firstname", "birthday", "gender", "motto")


class SubmittedForm(BaseModel):
    # Markup-typed so only sanitized values get in; build it with from_raw().
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    firstname: Markup = Field(default_factory=Markup)
    birthday: Markup = Field(default_factory=Markup)
    gender: Markup = Field(default_factory=Markup)
    motto: Markup = Field(default_factory=Markup)

    @classmethod
    def from_raw(cls, data: Optional[Mapping[str, Any]]) -> "SubmittedForm":
        data = data or {}
        return cls(**{name: sanitize_input(data.get(name)) for name in FIELDS})


class RegistrationResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    firstname: Markup
    age: int = Field(ge=0)
    gender: Markup
    motto: Markup


class Outcome(BaseModel):
    state: Literal["form", "result"] = "form"
    errors: List[str] = Field(default_factory=list)
    result: Optional[RegistrationResult] = None
