from fastapi import APIRouter
from dishka.integrations.fastapi import inject
from dishka import FromComponent
from typing import Annotated
from query.schemas import QueryRequest, QueryResponse
from query.executor import QueryExecutor

router = APIRouter(
    prefix="/api",
    tags=["Query"]
)


@router.post("/query", response_model=QueryResponse)
@inject
async def run_query(
    request: QueryRequest,
    executor: Annotated[
        QueryExecutor, FromComponent("query")
    ]
) -> QueryResponse:
    """
    Execute a read-only SQL query on behalf of the client.

    Parameters
    ----------
    request : QueryRequest
        Request with SQL text and optional address
    executor : QueryExecutor
        Cached query executor

    Returns
    -------
    QueryResponse
        Result rows
    """
    rows = await executor.run(request.sql, request.address)
    return QueryResponse(data=rows)
