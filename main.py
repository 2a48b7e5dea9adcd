from fastapi import FastAPI

from config import settings
from logging_config import setup_logging
from routers import strategy

setup_logging()

app = FastAPI(title=settings.APP_NAME)

app.include_router(strategy.router, prefix=settings.API_PREFIX, tags=["Strategy"])

@app.get("/")
def health_check():
    return {"status": "online"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
