"""Shared pydantic configuration for records and results."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StorageModel(BaseModel):
    """Base for records decoded from storage documents (immutable)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ResultModel(BaseModel):
    """Base for derived, never-persisted results handed to the view layer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
