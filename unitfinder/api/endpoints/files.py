"""Document fetch gateway: serve a unit document as a downloadable file."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from unitfinder.api.dependencies import get_unit_file_service
from unitfinder.application.services import UnitFileService
from unitfinder.core.constants import HEADER_PACKAGE_NAME, HEADER_UNIT_TYPE
from unitfinder.core.limiter import limit_file
from unitfinder.domain.enums import UnitCollection

router = APIRouter()


@router.get(
    "/{collection}/{document_id}",
    response_class=PlainTextResponse,
    responses={
        404: {"description": "No such document (empty body)"},
        502: {"description": "Search engine unreachable or returned a malformed document"},
    },
)
@limit_file
async def download_unit_file(
    request: Request,
    collection: UnitCollection,
    document_id: str,
    file_svc: Annotated[UnitFileService, Depends(get_unit_file_service)],
) -> PlainTextResponse:
    """Return the unit file content as an attachment.

    404 and other upstream statuses are mapped by the exception handlers.
    """
    unit = await file_svc.get_unit_file(collection, document_id)
    return PlainTextResponse(
        content=unit.content,
        headers={
            HEADER_PACKAGE_NAME: unit.package,
            HEADER_UNIT_TYPE: collection.unit_type,
            "content-disposition": unit.content_disposition,
        },
    )
