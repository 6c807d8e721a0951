# virtual_art/api/errors.py
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def translate_errors():
    """
    Mapowanie wyjatkow serwisow na HTTP, jak w routerach koszyka:
    PermissionError -> 403, LookupError -> 404, RuntimeError -> 409, ValueError -> 400.
    """
    try:
        yield
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RuntimeError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # storefront czyta pole "message"
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = f"{field}: {first.get('msg', 'Invalid request')}" if field else first.get("msg", "Invalid request")
    logger.info(f"Validation failed on {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"success": False, "message": message})


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
