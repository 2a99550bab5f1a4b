"""Query gateway: relay a search body to the engine with the credential attached."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from unitfinder.api.dependencies import get_search_relay_service
from unitfinder.application.services import SearchRelayService, relay_headers
from unitfinder.core.limiter import limit_search
from unitfinder.domain.enums import Collection

router = APIRouter()


@router.post(
    "/search/{collection}",
    responses={200: {"description": "Engine search response, relayed verbatim"}},
)
@limit_search
async def search_collection(
    request: Request,
    collection: Collection,
    relay: Annotated[SearchRelayService, Depends(get_search_relay_service)],
) -> Response:
    """Forward the raw JSON body to the collection's search endpoint.

    Status, body and headers come back as the engine sent them; the body is
    neither validated nor rewritten here.
    """
    body = await request.body()
    upstream = await relay.search(collection, body)
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        headers=relay_headers(upstream),
    )
