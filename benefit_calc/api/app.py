"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from benefit_calc.api.deps import init_store
from benefit_calc.api.routes import calculators, comparison, sessions
from benefit_calc.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_store()
    yield


app = FastAPI(
    title="Benefit Calculators",
    description="HSA, FSA, commuter, life insurance and 401(k) calculators",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculators.router)
app.include_router(sessions.router)
app.include_router(comparison.router)


@app.get("/health")
async def health():
    return {"status": "ok", "plan_year": settings.plan_year}
