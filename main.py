from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from core.config import settings
from llm import summarizer
from api import pages
from api.v1 import taxes, policy, summarize


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not summarizer.is_configured():
        print("GEMINI_API_KEY не задано: AI-резюме буде недоступне.")
    yield


app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)

# Налаштування CORS (щоб фронтенд мав доступ)
origins = [o.strip() for o in settings.FRONTEND_ORIGIN.split(",") if o.strip()] or [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- ПІДКЛЮЧЕННЯ РОУТЕРІВ ---
app.include_router(taxes.router, prefix="/api/v1/taxes", tags=["Taxes"])
app.include_router(policy.router, prefix="/api/v1/policy", tags=["Policy"])
app.include_router(summarize.router, prefix="/api/v1/summarize", tags=["Summarize"])
app.include_router(pages.router, tags=["Pages"])


@app.get("/health")
def read_health():
    return {"status": "ok", "version": settings.APP_VERSION}
