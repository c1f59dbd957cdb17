# File: src/ethscope/api/server.py
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ethscope.explorer.explorer import BlockExplorer
from .routes import explorer_router

def create_app(explorer: BlockExplorer) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await explorer.start()
        yield
        explorer.loader.cancel()

    app = FastAPI(title="ethscope API", lifespan=lifespan)
    app.state.explorer = explorer

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(explorer_router)

    return app
