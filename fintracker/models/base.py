"""
Base model shared by API payloads and stored documents
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model serialized with camelCase field names (periodType, percentSpent...)"""
    # Enums are kept as plain strings so documents go to Firestore unchanged
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True, validate_default=True
    )
