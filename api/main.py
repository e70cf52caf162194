from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.recommendations import router, validation_exception_handler
from config import ACTIVE_CONFIG
from scraper.sources.realtor_scraper import PropertyRecommender


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ein Recommender (und damit ein Browser) pro Prozess
    app.state.recommender = PropertyRecommender()
    try:
        yield
    finally:
        await app.state.recommender.close()


app = FastAPI(
    title=ACTIVE_CONFIG.API["TITLE"],
    description=ACTIVE_CONFIG.API["DESCRIPTION"],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
    )


app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(router)


@app.get("/")
def root():
    return {"status": "EstateAI recommender API running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=ACTIVE_CONFIG.API["HOST"],
        port=ACTIVE_CONFIG.API["PORT"],
        reload=ACTIVE_CONFIG.API["RELOAD"],
    )
