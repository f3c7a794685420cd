import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from unica.chat import GUIDANCE_MESSAGE
from unica.extract import extract_order_info
from unica.fixtures import SIMULATION_LIBRARY
from unica.simulate import build_simulation_narrative

from .models import (ChatRequest, ChatResponse, ErrorResponse, SimulateRequest, SimulateResponse,
                     SimilarCaseOut, ScheduleBlockOut)
from .adapters.config import settings
from .adapters.llm import make_llm
from .prompts import with_system

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)
CHAT_FAILURE = "Failed to generate response from OpenAI API"

app = FastAPI(title="AgenticAI for Unica API")
app.add_middleware(CORSMiddleware, allow_origins=settings.CORS_ORIGINS, allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

def _error(msg:str, status:int=500): return JSONResponse(status_code=status, content={"error": msg})

@app.exception_handler(RequestValidationError)
async def validation_error(request:Request, exc:RequestValidationError):
    # the chat proxy answers every failure with the same {error} body
    if request.url.path == "/api/chat":
        logger.warning("rejected chat request: %s", exc.errors())
        return _error(CHAT_FAILURE)
    return await request_validation_exception_handler(request, exc)

@app.get("/health")
def health(): return {"status":"ok"}

@app.post("/api/chat", response_model=ChatResponse, responses={500: {"model": ErrorResponse}})
def chat(req:ChatRequest):
    if not settings.OPENAI_API_KEY:
        logger.error("OPENAI_API_KEY is not set")
        return _error("OpenAI API Key not configured")
    try:
        llm = make_llm(settings.OPENAI_API_KEY, model=settings.OPENAI_MODEL, base_url=settings.OPENAI_BASE_URL)
        reply = llm.complete(with_system([m.model_dump() for m in req.messages]))
    except Exception:
        logger.exception("Error calling OpenAI API")
        return _error(CHAT_FAILURE)
    return ChatResponse(content=reply)

@app.get("/api/profiles")
def profiles(): return {"keys": list(SIMULATION_LIBRARY)}

@app.post("/api/simulate", response_model=SimulateResponse)
def simulate(req:SimulateRequest):
    order = extract_order_info(req.message)
    if not order.project_name:
        return SimulateResponse(content=GUIDANCE_MESSAGE, quantity=order.quantity)
    r = build_simulation_narrative(order.project_name, order.quantity)
    return SimulateResponse(
        content=r.narrative, projectName=r.project_name, quantity=order.quantity, matchedKey=r.matched_key,
        quantityDelta=r.quantity_delta, shipDate=r.ship_date,
        history=[SimilarCaseOut(project=c.project, quantity=c.quantity, shipDate=c.ship_date, leadTimeDays=c.lead_time_days,
                                outcome=c.outcome, note=c.note) for c in r.history],
        schedule=[ScheduleBlockOut(id=b.id, timeFrame=b.time_frame, focus=b.focus, owner=b.owner,
                                   status=b.status, note=b.note) for b in r.schedule],
    )
