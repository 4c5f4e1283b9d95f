import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_proxy.api.router import api_router
from contact_proxy.core.config import get_settings
from contact_proxy.core.errors import register_exception_handlers
from contact_proxy.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.app_debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

register_exception_handlers(app)
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "Contact proxy is running"}


def run() -> None:
    uvicorn.run(
        "contact_proxy.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
    )
