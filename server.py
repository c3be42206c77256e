"""
HTTP server for the article registry.
Exposes list/create/update/delete of article records as JSON endpoints.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from article_registry.article_store import ArticleStore
from article_registry.article_store_factory import create_article_store
from article_registry.errors import ArticleRegistryError
from article_registry.models import Article, ArticleFields
from article_registry.record_service import RecordService, parse_article_id

# Configure server logger
logger = logging.getLogger('server')
logger.setLevel(logging.INFO)

# Add console handler if not already present
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

SERVER_ERROR_MESSAGE = "Server error"


def sanitize_log_input(value: Any) -> str:
    """
    Sanitize user input for logging to prevent log injection attacks.
    Removes newlines and other control characters that could be used for log forging.

    Args:
        value: The user input to sanitize

    Returns:
        Sanitized string safe for logging
    """
    if not isinstance(value, str):
        value = str(value)
    sanitized = value.replace('\n', '_').replace('\r', '_').replace('\t', '_')
    # Truncate to reasonable length to prevent log flooding
    return sanitized[:200]


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _success(payload: Optional[Dict[str, Any]] = None) -> JSONResponse:
    content = {"success": True}
    if payload:
        content.update(payload)
    return JSONResponse(content=content)


def create_app(store: ArticleStore = None) -> FastAPI:
    """
    Create the article registry FastAPI application.

    Args:
        store: Optional article store instance (defaults to factory-created)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(title="Article Registry")

    if store is None:
        store = create_article_store()
    service = RecordService(store)

    def handle_error(label: str, exc: Exception) -> JSONResponse:
        """Convert a failure into the JSON error response for it."""
        if isinstance(exc, ArticleRegistryError):
            if exc.status_code >= 500:
                logger.error(f"{label} - {exc.status_code} {exc.message}")
            else:
                logger.warning(f"{label} - {exc.status_code} {exc.message}")
            return _failure(exc.status_code, exc.message)
        logger.exception(f"{label} - 500 {SERVER_ERROR_MESSAGE}")
        return _failure(500, SERVER_ERROR_MESSAGE)

    # ================== ARTICLES API ==================
    @app.get("/api/data")
    async def list_articles():
        """Get the whole article document."""
        label = "GET /api/data"
        logger.info(label)
        try:
            document = service.list_articles()
        except Exception as exc:  # pylint: disable=broad-except
            return handle_error(label, exc)
        return JSONResponse(content=document.to_dict())

    @app.get("/api/data/{article_id}")
    async def get_article(article_id: int):
        """Get a single article."""
        label = f"GET /api/data/{sanitize_log_input(article_id)}"
        logger.info(label)
        try:
            article = service.get_article(article_id)
        except Exception as exc:  # pylint: disable=broad-except
            return handle_error(label, exc)
        logger.info(f"{label} - 200")
        return _success({"article": article.to_dict()})

    @app.post("/api/data")
    async def create_article(request: Request):
        """Create an article with a server-assigned id."""
        label = "POST /api/data"
        logger.info(label)
        try:
            data = await request.json()
            fields = ArticleFields.model_validate(data)
            article = service.create_article(fields)
        except Exception as exc:  # pylint: disable=broad-except
            return handle_error(label, exc)
        logger.info(f"{label} - 200 id={article.id}")
        return _success({"article": article.to_dict()})

    @app.put("/api/data")
    async def update_article(request: Request):
        """Replace an existing article."""
        label = "PUT /api/data"
        logger.info(label)
        try:
            data = await request.json()
            article = service.update_article(Article.model_validate(data))
        except Exception as exc:  # pylint: disable=broad-except
            return handle_error(label, exc)
        logger.info(f"{label} - 200 id={article.id}")
        return _success({"article": article.to_dict()})

    @app.delete("/api/data")
    async def delete_article(request: Request):
        """Delete the article named by the ``id`` query parameter."""
        raw_id = request.query_params.get("id")
        label = f"DELETE /api/data?id={sanitize_log_input(raw_id)}"
        logger.info(label)
        try:
            service.delete_article(parse_article_id(raw_id))
        except Exception as exc:  # pylint: disable=broad-except
            return handle_error(label, exc)
        logger.info(f"{label} - 200")
        return _success()

    return app
