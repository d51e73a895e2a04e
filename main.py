import logging

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from router import vacancies
from util.app_config import config


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Vacancies")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

# Create a parent router with the prefix
api_router = APIRouter(prefix=config.API_PREFIX)

api_router.include_router(vacancies.router)

app.include_router(api_router)

@app.get("/")
async def root():
    return {"message": "Vacancies service"}

@app.get(config.API_PREFIX)
async def api_root():
    return {"message": "Welcome to the API v1"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
