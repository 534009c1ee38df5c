from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class QueryRequest(BaseModel):
    """
    Request schema for the query proxy.

    Both fields are optional at the schema level so that a missing query
    is answered with 400 by the executor rather than a 422.

    Attributes
    ----------
    sql : Any
        SQL query text
    address : Any
        Address the query is about (optional)
    """
    sql: Any = Field(default=None, description="SQL query to execute")
    address: Any = Field(default=None, description="Address context of the query")


class QueryResponse(BaseModel):
    """
    Response schema for the query proxy.

    Attributes
    ----------
    success : bool
        Always true for a successful response
    data : list[dict]
        Result rows
    """
    success: bool = True
    data: list[dict[str, Any]]

    model_config = ConfigDict(from_attributes=True)
