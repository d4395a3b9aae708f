"""Persisted record shapes for the JSON todo file."""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, TypeAdapter


class TodoRecord(BaseModel):
    """One element of the persisted JSON array."""

    model_config = ConfigDict(extra="ignore")

    id: StrictInt
    task: StrictStr
    done: StrictBool = False


TodoCollection = TypeAdapter(list[TodoRecord])
