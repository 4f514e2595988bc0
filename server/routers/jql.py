"""
JQL Router - REST API endpoints
Translates free-text descriptions into JQL through Gemini
"""
import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_config_dependency, get_translator_dependency
from api.schemas import ErrorResponse, GenerateJQLRequest, GenerateJQLResponse, HealthResponse
from modules.config import AppConfig
from modules.jql import JQLProxyError, JQLTranslator, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["jql"])


def error_response(exc: JQLProxyError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


# =========================
# Endpoints
# =========================
@router.post(
    "/generate-jql",
    response_model=GenerateJQLResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_jql(
    request: GenerateJQLRequest,
    translator: JQLTranslator = Depends(get_translator_dependency),
):
    """
    Translate the request text into a single JQL expression.

    400 when text is missing or empty, 500 when the API key is not
    configured or the Gemini call fails.
    """
    try:
        jql = await translator.translate(request.text)
    except UpstreamError as e:
        logger.error(f"Gemini API error: {e.detail}", exc_info=e)
        return error_response(e)
    except JQLProxyError as e:
        logger.warning(f"Rejected JQL request: {e.detail}")
        return error_response(e)

    return GenerateJQLResponse(jql=jql)


@router.get("/health", response_model=HealthResponse)
async def health_check(config: AppConfig = Depends(get_config_dependency)):
    """Health check endpoint for JQL generation"""
    return HealthResponse(
        status="ok",
        service="jql_proxy",
        api_key_configured=config.api_key_configured,
    )
