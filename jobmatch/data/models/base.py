"""
Base model classes for jobmatch data models.

Provides common configuration shared across all models.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmbeddedModel(BaseModel):
    """
    Base model for plain records handed to the matching engine.

    Fields accept both snake_case names and the camelCase aliases used by
    the job board's JSON payloads.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=True,
    )
