"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, StreamingResponse
from pydantic import ValidationError

from config import CORS_ORIGINS, load_llm_config
from component_docs import ACETERNITY_DOCS, SHADCN_DOCS
from models import UILibrary, validate_request
from prompts import build_system_prompt
from relay import CompletionRelay, UpstreamError


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build the provider client from the environment
    print(f"[startup] Component docs: {len(SHADCN_DOCS)} shadcn, {len(ACETERNITY_DOCS)} aceternity")
    app.state.relay = CompletionRelay.from_config(load_llm_config())
    print("[startup] Ready!")
    yield
    # Shutdown: close the provider HTTP client
    await app.state.relay.aclose()
    print("[shutdown] Closed.")


app = FastAPI(
    title="UI Component Generator API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS — allow frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_relay(request: Request) -> CompletionRelay:
    return request.app.state.relay


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    return PlainTextResponse(f"Completion provider error: {exc}", status_code=502)


@app.get("/api/health")
async def health():
    return {
        "status": "ok",
        "ui_libraries": [lib.value for lib in UILibrary if lib is not UILibrary.NONE],
        "components": {
            UILibrary.SHADCN.value: len(SHADCN_DOCS),
            UILibrary.ACETERNITY.value: len(ACETERNITY_DOCS),
        },
    }


@app.post("/api/generateCode")
async def generate_code(request: Request, relay: CompletionRelay = Depends(get_relay)):
    try:
        payload = await request.json()
    except ValueError:
        return PlainTextResponse("Request body is not valid JSON", status_code=422)

    try:
        generate_request = validate_request(payload)
    except ValidationError as e:
        return PlainTextResponse(str(e), status_code=422)

    print(
        f"[generate] model={generate_request.model} "
        f"library={generate_request.ui_library} "
        f"messages={len(generate_request.messages)}"
    )
    system_prompt = build_system_prompt(generate_request.ui_library)
    fragments = await relay.start(
        generate_request.model,
        system_prompt,
        generate_request.messages,
    )
    return StreamingResponse(fragments, media_type="text/event-stream")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
