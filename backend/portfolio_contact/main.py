# portfolio_contact/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from portfolio_contact.core.settings import settings
from portfolio_contact.routers.contact import router as contact_router
from portfolio_contact.routers.health import router as health_router

app = FastAPI(title=settings.api_title)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Presence only, never the values
for name in settings.missing_secrets():
    logging.getLogger("uvicorn.error").warning(f"[main] {name} is not set; /api/contact will fail")

# Routers
app.include_router(contact_router)
app.include_router(health_router)
