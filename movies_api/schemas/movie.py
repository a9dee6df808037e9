from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MovieBase(BaseModel):
    # camelCase on the wire, snake_case in python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    year_of_release: int


class MovieCreate(MovieBase):
    # length is checked by the database, not here
    pass


class MovieResponse(MovieBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    created_at: datetime
