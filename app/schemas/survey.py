# app/schemas/survey.py
from dataclasses import dataclass
from typing import Any, Literal, Union

from pydantic import BaseModel, Field, StrictBool, StrictStr, ValidationError, field_validator
from pydantic.networks import validate_email

AgeGroup = Literal["u18", "18_24", "25_34", "35_49", "50_64", "65_plus"]

District = Literal["floersheim_mitte", "wicker", "weilbach", "keramag_falkenberg"]

Topic = Literal[
    "verkehr_infrastruktur",
    "oeffentlicher_nahverkehr",
    "wohnen_bau",
    "umwelt_gruen",
    "sport_freizeit",
    "kultur_veranstaltungen",
    "digitalisierung_internet",
    "sicherheit_ordnung",
    "wirtschaft_einzelhandel",
    "sonstiges",
]


class SurveySubmission(BaseModel):
    age_group: AgeGroup
    district: District
    topics: list[Topic] = Field(min_length=1)
    other_topic: StrictStr | None = None
    comment: StrictStr | None = None
    wants_updates: StrictBool = False
    # Stored exactly as submitted; only the syntax is checked
    email: StrictStr | None = None

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email_is_none(cls, v: Any) -> Any:
        # "" means the respondent left the field empty; null is not accepted
        if v is None:
            raise ValueError("email must be a string; send \"\" or omit it for no email")
        if v == "":
            return None
        return v

    @field_validator("email")
    @classmethod
    def _check_email_syntax(cls, v: str | None) -> str | None:
        if v is not None:
            validate_email(v)
        return v


@dataclass(frozen=True)
class Valid:
    submission: SurveySubmission


@dataclass(frozen=True)
class Invalid:
    reason: str


ValidationResult = Union[Valid, Invalid]


def _describe(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e["loc"]) or "body"
        parts.append(f"{loc}: {e['msg']}")
    return "; ".join(parts)


def validate_submission(payload: Any) -> ValidationResult:
    """Check an untyped JSON value against the survey schema. Never raises."""
    if not isinstance(payload, dict):
        return Invalid("body: Input should be a JSON object")
    try:
        return Valid(SurveySubmission.model_validate(payload))
    except ValidationError as e:
        return Invalid(_describe(e))
