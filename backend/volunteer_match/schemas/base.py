from typing import Annotated, Any

from pydantic import AllowInfNan, BaseModel, ConfigDict, Strict, model_validator
from pydantic.alias_generators import to_camel

# Numbers only ("5" is rejected), and finite
FiniteFloat = Annotated[float, Strict(), AllowInfNan(False)]


class CamelModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """
    Base for request bodies.

    Every field has an empty default, and explicit JSON nulls fall back to
    that default, so only malformed JSON, wrongly typed values or
    non-finite numbers (e.g. 1e400) fail validation. Numbers are strict:
    "5" is not a rating. Required-field checks belong to the handlers.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
