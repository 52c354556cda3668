"""Base model for wire contracts - snake_case in Python, camelCase on the wire."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Contract model whose JSON field names are camelCase.

    Accepts either spelling on input; dump with by_alias=True for the wire.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
