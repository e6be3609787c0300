import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from doctemplates.app.api.generate import router as generate_router
from doctemplates.app.api.templates import router as templates_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(
    title="doctemplates",
    description="Typed document templates rendered to HTML and PDF",
    version="0.1.0",
)

app.include_router(generate_router, prefix="/generate")
app.include_router(templates_router, prefix="/templates")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
