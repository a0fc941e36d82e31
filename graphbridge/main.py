#!/usr/bin/env python3
"""
graphbridge - HTTP Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Builds the bridge once, at startup
3. Serves the command catalog and the graph command over HTTP

All business logic is in the modules, following black box principles.
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from graphbridge import __version__
from graphbridge.config.provider import ConfigProvider, EnvConfigProvider
from graphbridge.modules.api import CommandInfo, GraphOptions, HealthResponse
from graphbridge.modules.bridge.factory import BridgeFactory
from graphbridge.modules.command import GraphCommand

logger = logging.getLogger("graphbridge.api")


def create_app(
    command: Optional[GraphCommand] = None,
    config_provider: Optional[ConfigProvider] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        command: Pre-built command to serve; built from configuration when omitted
        config_provider: Configuration provider used when building the command

    Returns:
        FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.graph_command is None:
            provider = config_provider or EnvConfigProvider()
            app.state.graph_command = BridgeFactory.build(provider)
            logger.info("Graph command initialized via factory")
        yield
        logger.info("Shutting down graphbridge API")

    app = FastAPI(
        title="graphbridge",
        description="Runs Microsoft Graph CLI commands as native operations",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.graph_command = command

    def get_graph_command(request: Request) -> GraphCommand:
        graph_command = request.app.state.graph_command
        if graph_command is None:
            raise HTTPException(status_code=503, detail="Service not initialized")
        return graph_command

    @app.get("/health", response_model=HealthResponse)
    def health(graph_command: GraphCommand = Depends(get_graph_command)) -> HealthResponse:
        executable = graph_command.bridge.executable_path()
        return HealthResponse(
            status="healthy" if executable else "degraded",
            executable=executable,
            authenticated=graph_command.bridge.is_authenticated,
            version=__version__,
        )

    @app.get("/commands", response_model=List[CommandInfo])
    def list_commands(graph_command: GraphCommand = Depends(get_graph_command)) -> List[CommandInfo]:
        return [graph_command.describe()]

    # Sync endpoint: FastAPI runs it in the threadpool, one thread per request
    @app.post("/commands/graph")
    def execute_graph(
        options: GraphOptions,
        graph_command: GraphCommand = Depends(get_graph_command),
    ) -> JSONResponse:
        response = graph_command.execute(options)
        return JSONResponse(status_code=response.status, content=response.model_dump())

    return app
