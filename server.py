"""
SEI Mate Chat Server
====================
A text chat surface for the demo agent. Messages posted to /chat/text are
routed through the agent's actions and the reply is returned as JSON.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from pydantic import BaseModel

from config import cfg
from core.agent import Agent
from core.project import Project, build_project
from logger_config import setup_logging, get_logger

setup_logging(cfg().log_level)
logger = get_logger(__name__)

project: Optional[Project] = None
agent: Optional[Agent] = None

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Builds the project once and runs each agent's init hook."""
    global project, agent

    project = build_project(cfg().plugin_options())
    for project_agent in project.agents:
        await project_agent.init()

    agent = Agent.from_project_agent(project.agents[0])
    logger.info(f"--- {agent.name} READY ({len(agent.plugins[0].actions)} actions) ---")

    yield

    logger.info("Shutting down SEI Mate...")

app = FastAPI(lifespan=lifespan)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    logger.error(f"Validation Error: {exc.errors()}")
    logger.error(f"Request body: {await request.body()}")
    return Response(content=str(exc.errors()), status_code=422)

@app.get("/")
@app.head("/")
async def root():
    return Response(content="SEI Mate Chat Server", media_type="text/plain")

@app.get("/actions")
async def list_actions() -> List[Dict[str, Any]]:
    """Lists the registered actions in dispatch order."""
    return [
        {
            "name": action.name,
            "description": action.description,
            "similes": action.similes,
            "priority": action.priority,
        }
        for plugin in agent.plugins
        for action in plugin.actions
    ]

class TextQuery(BaseModel):
    text: str

@app.post("/chat/text")
async def chat_text_endpoint(query: TextQuery):
    """Direct text chat endpoint. Used by the CLI harness."""
    # Actions see the message without surrounding whitespace.
    text = query.text.strip()
    logger.info(f"[TEXT CHAT] Received: {text}")

    result, _ = await agent.chat(text)

    return {
        "speech": result.text,
        "action": result.action,
        "status": result.status,
        "kind": getattr(result, "kind", None),
        "content": result.content,
    }

if __name__ == "__main__":
    logger.info(f"🚀 Server starting on http://{cfg().host}:{cfg().port}")
    uvicorn.run(app, host=cfg().host, port=cfg().port)
