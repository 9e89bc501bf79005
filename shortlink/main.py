from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError

from shortlink import __version__
from shortlink.api import links
from shortlink.api.errors import (
    backend_error_handler,
    error_response,
    general_exception_handler,
    validation_error_handler,
)
from shortlink.api.middleware import LoggingMiddleware
from shortlink.core.errors import BackendError, BackendUnavailableError
from shortlink.services.link_store import LinkStore, get_link_store


app = FastAPI(
    title="Short Link Service",
    description="Maps long URLs to short base62 codes backed by an atomic counter.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

app.include_router(links.router)

app.add_exception_handler(BackendError, backend_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, general_exception_handler)


@app.get("/")
async def root():
    return f"short-link-service v{__version__}"


@app.get("/health")
def health_check(store: LinkStore = Depends(get_link_store)):
    try:
        store.ping()
    except BackendUnavailableError as exc:
        return error_response(503, exc.kind, str(exc))
    return {"status": "healthy"}
