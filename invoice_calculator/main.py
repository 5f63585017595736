import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoice_calculator.api import invoices
from invoice_calculator.config import settings
from invoice_calculator.container import Container

# Setup Logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = Container()
    view_model = container.create_view_model()
    view_model.start()
    app.state.view_model = view_model
    logger.info("Invoice pipeline started")
    try:
        yield
    finally:
        # Cancels any in-flight fetch before the client goes away
        await view_model.close()
        await container.close()
        app.state.view_model = None


app = FastAPI(
    title="Invoice Calculator API",
    description="Read-only view of processed invoices and their grand total",
    version="1.0.0",
    lifespan=lifespan
)

origins = [
    "http://localhost:3000",
    "http://localhost:8000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(invoices.router)

@app.get("/health")
async def health_check():
    return {"status": "ok", "environment": settings.ENVIRONMENT}

if __name__ == "__main__":
    uvicorn.run("invoice_calculator.main:app", host="0.0.0.0", port=8000, reload=True)
