"""Pydantic schemas and enums shared by the confirmation engine.

`ConfirmOptions` is the validated configuration record handed to the engine.
It is frozen: the prompt text and every setting stay exactly as supplied.
"""

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError
from pydantic import model_validator

MAX_ASK_COUNT = 255


class Answer(str, Enum):
    """Answer used when the user submits an empty response."""

    YES = "yes"
    NO = "no"
    RETRY = "retry"


class ShortCircuit(str, Enum):
    NONE = "none"
    YES = "yes"
    NO = "no"


class Verdict(str, Enum):
    """Meaning of a single raw response."""

    AFFIRMATIVE = "affirmative"
    NEGATIVE = "negative"
    EMPTY = "empty"
    INVALID = "invalid"


class Decision(str, Enum):
    CONFIRMED = "confirmed"
    DENIED = "denied"


class CliSchemaModel(BaseModel):
    """Pydantic base model with compact CLI-friendly error formatting."""

    model_config = ConfigDict(extra="forbid")
    cli_label: ClassVar[str] = "options"

    @classmethod
    def model_validate(  # type: ignore[override]
        cls,
        obj: Any,
        *,
        strict: bool | None = None,
        from_attributes: bool | None = None,
        context: Any | None = None,
    ):
        try:
            return super().model_validate(
                obj,
                strict=strict,
                from_attributes=from_attributes,
                context=context,
            )
        except ValidationError as exc:
            messages: list[str] = []
            for err in exc.errors():
                loc = ".".join(str(part) for part in err.get("loc", []))
                msg = err.get("msg", "invalid value")
                messages.append(f"{loc}: {msg}" if loc else msg)
            raise ValueError(f"{cls.cli_label} failed validation ({'; '.join(messages)})") from exc


class ConfirmOptions(CliSchemaModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    cli_label = "confirm options"

    prompt_text: StrictStr = "Continue?"
    ask_count: int = Field(default=3, ge=0, le=MAX_ASK_COUNT)
    default_answer: Answer = Answer.RETRY
    full_words: StrictBool = False
    raw_mode: StrictBool = False
    short_circuit: ShortCircuit = ShortCircuit.NONE

    @model_validator(mode="after")
    def _check_input_mode(self) -> "ConfirmOptions":
        if self.full_words and self.raw_mode:
            raise ValueError("full words cannot be read without waiting for enter")
        return self

    @property
    def unlimited(self) -> bool:
        return self.ask_count == 0
