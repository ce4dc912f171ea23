"""
Artifact: assistant_service/exam_assistant/main.py
Purpose: Builds the FastAPI application, wires versioned routes and legacy aliases.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Wired health, assistant and exam routers plus legacy health and assistant endpoints. (Exam Planner Team)
Preconditions:
- Environment configuration is loadable (see core/config.py).
Postconditions:
- `app` exposes /health, /api/ai (legacy) and everything under /api/v1.
Errors/Exceptions:
- Request validation failures are answered with 400 and the first validation message.
"""

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.deps import get_current_user_id
from .api.v1.router import api_v1_router
from .api.v1.routes.assistant import handle_assistant_turn_request
from .api.v1.routes.health import get_health_status
from .core.config import settings
from .core.logging import configure_logging, get_logger
from .schemas.requests import AssistantTurnRequest

configure_logging()
logger = get_logger("examplanner.main")

app = FastAPI(title=settings.app_title)
app.include_router(api_v1_router, prefix="/api/v1")


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = _first_validation_message(exc)
    logger.info("Rejected request %s %s | %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


@app.get("/health")
def health_legacy():
    return get_health_status("/health")


@app.post("/api/ai")
def assistant_turn_legacy(req: AssistantTurnRequest, user_id: str = Depends(get_current_user_id)):
    return handle_assistant_turn_request(req, user_id, route_path="/api/ai")
