import os

from pydantic import BaseModel

DEFAULT_DATABASE_NAME = "doclite"
DEFAULT_SCOPE_NAME = "_default"
DEFAULT_COLLECTION_NAME = "_default"


class Settings(BaseModel):
    database_name: str = DEFAULT_DATABASE_NAME
    scope_name: str = DEFAULT_SCOPE_NAME
    collection_name: str = DEFAULT_COLLECTION_NAME


def get_settings() -> Settings:
    return Settings(
        database_name=os.getenv("DOCLITE_DATABASE_NAME", DEFAULT_DATABASE_NAME),
        scope_name=os.getenv("DOCLITE_SCOPE_NAME", DEFAULT_SCOPE_NAME),
        collection_name=os.getenv("DOCLITE_COLLECTION_NAME", DEFAULT_COLLECTION_NAME),
    )
