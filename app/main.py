"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from app.adapters.inbound.http.routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Candidatos CRM",
    description="CRM for franchise sales leads: pipeline, tasks, communications and franchises",
    version="0.1.0",
)

app.include_router(router)
