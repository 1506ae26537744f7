import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from nutrisnap.config import settings
from nutrisnap.routers import chat

logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Relay between the NutriSnap chat client and an OpenAI-compatible completion API",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat.router)


@app.get("/", response_class=PlainTextResponse)
def liveness():
    return "NutriSnap Backend is Live!"


def run() -> None:
    import uvicorn

    uvicorn.run("nutrisnap.main:app", host="0.0.0.0", port=5000)
