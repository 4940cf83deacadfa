from typing import Any

from pydantic import BaseModel, ConfigDict


class MongoModel(BaseModel):
    """Base for documents stored in MongoDB.

    Subclasses alias their primary key field to ``_id``.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    def to_mongo(self) -> dict[str, Any]:
        """Convert the model to a dictionary for MongoDB storage with _id field."""
        return self.model_dump(by_alias=True)
