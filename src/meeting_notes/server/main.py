from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pathlib import Path
import os
from .models import SummaryRequest, SummaryResponse, NoteDTO
from ..config import NotesConfig
from ..errors import InvalidArgument
from ..log import get_logger, setup_logging
from ..pipeline import NotesPipeline

CONFIG_ENV = "MEETING_NOTES_CONFIG"

_cfg_path = os.environ.get(CONFIG_ENV)
cfg = NotesConfig.load(Path(_cfg_path)) if _cfg_path else NotesConfig()
setup_logging(cfg.log_level)
logger = get_logger(__name__)

# loaded once; ResourceUnavailable here stops startup
pipeline = NotesPipeline.from_config(cfg)

app = FastAPI(title="Meeting Notes Service", version="0.1")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
def health():
    return {"ok": True, "tagger": cfg.tagger}

@app.post("/summaries", response_model=SummaryResponse)
def create_summary(req: SummaryRequest):
    try:
        ranked = pipeline.rank(req.text, req.k)
    except InvalidArgument as ex:
        raise HTTPException(status_code=400, detail=str(ex))
    logger.debug("summary for %s: %d notes", req.target or "-", len(ranked))
    return SummaryResponse(
        summary=" ".join(w for w, _ in ranked),
        notes=[NoteDTO(text=w, count=c) for w, c in ranked],
        target=req.target,
    )
