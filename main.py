import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from advisor import config
from advisor.commute import router as commute_router
from advisor.logic.constants import ENGINE_VERSION
from advisor.routes import router as advisor_router

logging.basicConfig(level=config.LOG_LEVEL)
logging.info(
    "App starting with programs source: %s",
    config.PROGRAMS_JSON_URL or "bundled dataset",
)

app = FastAPI(
    title="NYC HS Advisor API",
    description="Ranks NYC high school programs against a family's preferences",
    version=ENGINE_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(advisor_router)
app.include_router(commute_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
