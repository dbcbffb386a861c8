# session_auth/application/dtos/base_dto.py

"""
Base class for custom DTOs.

This module defines CustomBaseModel, which extends Pydantic's BaseModel
with the behavior shared by all DTOs of the application.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomBaseModel(BaseModel):
    """
    Custom base model for all application DTOs.

    Fields are snake_case in Python and camelCase on the wire
    (``firstName``, ``emailId``); both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
