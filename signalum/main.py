from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
import logging

from signalum.core.errors import SignalumError
from signalum.params import PARAM_SCHEMA, resolve_params, to_engine_params
from signalum.params.engine_params import MAX_LENGTH
from signalum.processor import SignalProcessor
from signalum.qc import analyze, fingerprint

# Configure Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("signalum")

app = FastAPI(
    title="Signalum Engine",
    version="0.1.0",
    description="Deterministic Signal Synthesis Engine"
)

# CORS (Allow Frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], # Allow any local port
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SignalumError)
async def signalum_error_handler(request: Request, exc: SignalumError):
    logger.warning("Rejected %s: %s: %s", request.url.path, type(exc).__name__, exc)
    return JSONResponse(
        status_code=422,
        content={"status": "error", "error": type(exc).__name__, "message": str(exc)},
    )


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "signalum-engine"}


@app.get("/schema")
async def schema():
    return PARAM_SCHEMA


@app.post("/signal")
async def generate_signal(params: dict):
    """
    Synthesizes a signal.
    Returns JSON with the (x, y) points, resolved_params and a fingerprint;
    adds a QC report when "qc" is true in the body.
    """
    want_qc = bool(params.get("qc", False))

    # Resolve params (strip legacy keys, deep-merge with defaults)
    resolved = resolve_params(to_engine_params(params))

    length = resolved.get("length")
    if isinstance(length, int) and length > MAX_LENGTH:
        return JSONResponse(
            status_code=413,
            content={
                "status": "error",
                "error": "LengthLimitExceeded",
                "message": f"length {length} exceeds host limit {MAX_LENGTH}",
            },
        )

    processor = SignalProcessor.from_params(resolved)
    x, y = processor.get_signal_tensors()

    response = {
        "signal": [{"x": s.x, "y": s.y} for s in processor.get_signal()],
        "resolved_params": resolved,
        "fingerprint": fingerprint(y),
    }
    if want_qc:
        response["qc"] = analyze(x, y)
    return response


if __name__ == "__main__":
    uvicorn.run("signalum.main:app", host="0.0.0.0", port=8000, reload=True)
