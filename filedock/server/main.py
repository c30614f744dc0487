from __future__ import annotations
import asyncio
import sys
import time
from typing import Optional, Dict, Any

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Body, HTTPException
from loguru import logger

from .metrics import router as metrics_router, COMMANDS_TOTAL, LATENCY
from .middleware.logging import JsonLoggerMiddleware
from .policy import policy
from .registry import COMMAND_REGISTRY, COMMAND_EXECUTORS, ALIASES, get_command, suggest
from .validation import normalize_args, validate_input
from ..worker.visibility import select_backend

# argument names that carry filesystem paths and must pass the sandbox guard
PATH_ARGS = ("path", "source_path", "destination_path", "directory")

app = FastAPI(title="filedock")
app.add_middleware(JsonLoggerMiddleware)
app.include_router(metrics_router)


@app.on_event("startup")
async def startup_event():
    backend = select_backend(policy.visibility_backend())
    logger.info(f"filedock ready: policy={policy.config_path} visibility={backend.name} "
                f"commands={len(COMMAND_REGISTRY)}")


@app.get("/commands")
def list_commands():
    aliases: Dict[str, list] = {name: [] for name in COMMAND_REGISTRY}
    for alias, target in ALIASES.items():
        aliases[target].append(alias)
    return {"ok": True, "commands": [{"name": n, "aliases": a} for n, a in aliases.items()]}


# ---------- Dispatcher ----------
async def _dispatch(name: str, func, args: Dict[str, Any]) -> Dict[str, Any]:
    """Run a sync command off the event loop; only unexpected exceptions are caught here."""
    loop = asyncio.get_event_loop()
    start = time.perf_counter()
    try:
        obs = await loop.run_in_executor(COMMAND_EXECUTORS.get(name), lambda: func(**args))
    except Exception as e:
        logger.exception(f"command {name} failed")
        obs = {"ok": False, "error": f"command_error: {e}"}
    LATENCY.observe((time.perf_counter() - start) * 1000)
    COMMANDS_TOTAL.labels(name, "ok" if obs.get("ok") else "error").inc()
    if not obs.get("ok"):
        logger.warning(f"command {name} -> {obs.get('error')}")
    return obs


@app.post("/invoke/{command}")
async def invoke(command: str, payload: Optional[Dict[str, Any]] = Body(None)):
    func, name = get_command(command)
    if not func:
        close = suggest(command)
        hint = f" (did you mean: {', '.join(close)}?)" if close else ""
        raise HTTPException(404, f"unknown_command: {command}{hint}")

    if policy.is_command_blocked(command) or policy.is_command_blocked(name):
        raise HTTPException(403, f"command_blocked_by_policy: {name}")

    args = normalize_args(payload)
    try:
        validate_input(name, args)
    except ValueError as e:
        raise HTTPException(400, str(e))

    for key in PATH_ARGS:
        if key in args:
            allowed, reason = policy.sandbox_guard(args[key])
            if not allowed:
                raise HTTPException(403, reason)

    logger.info(f"invoke {name}({args})")
    obs = await _dispatch(name, func, args)
    return {"command": name, **obs}


def run():
    """Console entry point: serve the command host with uvicorn."""
    import uvicorn

    defaults = policy.defaults()
    logger.remove()
    logger.add(sys.stderr, level=str(defaults.get("log_level", "INFO")).upper())
    uvicorn.run(app, host=defaults.get("host", "127.0.0.1"), port=int(defaults.get("port", 8765)))
