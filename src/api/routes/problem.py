"""API routes for problem metadata, links and rendered documents."""

from urllib.parse import quote

from litestar import Controller, Response, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.problem import (
    DocumentRequest,
    ProblemDetailsResponse,
    ProblemLinkResponse,
    ProblemRequest,
)
from application.orchestrator import ScrapeOrchestrator


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback name and the UTF-8 original."""
    ascii_name = filename.encode("ascii", "replace").decode("ascii").replace('"', "_")
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"


class ProblemController(Controller):
    """Controller for problem-related endpoints."""

    path = "/api"

    @post(
        "/get-details",
        status_code=HTTP_200_OK,
        opt={"failure_message": "Failed to get details"},
    )
    async def get_details(
        self, data: ProblemRequest, orchestrator: ScrapeOrchestrator
    ) -> ProblemDetailsResponse:
        """
        Get time/space complexity, companies and topics of a problem.

        Body:
        - url: search result page linking to the problem
        - identifier: optional cache key (defaults to the URL's search query)
        """
        logger.debug(f"API request for details: url={data.url}")

        record, source = await orchestrator.get_details(data.url, data.identifier)
        return ProblemDetailsResponse.from_record(record, source)

    @post(
        "/get-button-link",
        status_code=HTTP_200_OK,
        opt={"failure_message": "Failed to get link from button click"},
    )
    async def get_button_link(
        self, data: ProblemRequest, orchestrator: ScrapeOrchestrator
    ) -> ProblemLinkResponse:
        """Get the problem page URL behind the problem button of a search result."""
        logger.debug(f"API request for link: url={data.url}")

        link = await orchestrator.resolve_link(data.url, data.identifier)
        return ProblemLinkResponse(link=link)

    @post(
        "/download-pdf",
        status_code=HTTP_200_OK,
        opt={"failure_message": "Failed to render document", "success_flag": True},
    )
    async def download_pdf(
        self, data: DocumentRequest, orchestrator: ScrapeOrchestrator
    ) -> Response[bytes]:
        """Render an article as PDF with code shown in the requested language."""
        logger.debug(f"API request for document: url={data.url}, language={data.language}")

        document = await orchestrator.render_document(data.url, data.language)
        return Response(
            content=document.content,
            media_type="application/pdf",
            status_code=HTTP_200_OK,
            headers={"Content-Disposition": content_disposition(document.filename)},
        )
