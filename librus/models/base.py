"""Shared base models for API responses."""
from typing import Dict, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel, to_pascal

T = TypeVar('T')


class SynergiaModel(BaseModel):
    """Academic API record: PascalCase keys, unknown keys ignored."""
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class MessagesModel(BaseModel):
    """Messaging API record: camelCase keys, unknown keys ignored."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Link(SynergiaModel):
    """Reference to another resource ({"Id": ..., "Url": ...})."""
    id: Union[int, str]
    url: str


class ResourceUrl(SynergiaModel):
    url: str


# Keys look like "Grades\\Averages" or ".."
Resources = Dict[str, ResourceUrl]


class SynergiaResponse(SynergiaModel):
    """Envelope fields common to academic API responses."""
    resources: Optional[Resources] = None
    url: Optional[str] = None


class DataEnvelope(BaseModel, Generic[T]):
    """Messaging API wrapper: the payload sits under "data"."""
    data: T
