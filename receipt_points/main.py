import uvicorn
from fastapi import FastAPI

from .config import PORT, settings
from .errors import ReceiptError, receipt_error_handler
from .routes.receipts import router as receipts_router
from .store.repository import InMemoryScoreStore, ScoreStore
from .utils.logging import configure_logging, logger


def create_app(store: ScoreStore | None = None) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME,
                  description="Scores purchase receipts and serves the points by id",
        version="0.1.0",
        docs_url=None,             # only the receipts endpoints are served
        redoc_url=None,
        openapi_url=None)

    app.state.store = store if store is not None else InMemoryScoreStore()
    app.add_exception_handler(ReceiptError, receipt_error_handler)
    app.include_router(receipts_router)
    return app

app = create_app()

def run() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info("Listening on port %s...", PORT)
    # uvicorn exits non-zero if the port cannot be bound
    uvicorn.run(app, host=settings.HOST, port=PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
