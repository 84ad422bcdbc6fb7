"""
Graphghan FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from graphghan.api.router import router

app = FastAPI(
    title="Graphghan API",
    description="Turns daily commit counts into corner-to-corner crochet patterns",
    version="0.1.0",
)

# CORS: the Vite dev server hosting the pattern UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
    expose_headers=["Content-Disposition"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "graphghan"}
