"""
REST API for sorting and performance comparison.

Endpoints:
    GET  /api/health      - Health check
    GET  /api/info        - Algorithm complexity information
    POST /api/sort        - Sort an array with one algorithm
    POST /api/compare     - Compare all algorithms on one array
    POST /api/benchmark   - Timings across generated array sizes
    POST /api/parse       - Parse comma-separated text into numbers

Run with:
    sortcompare-api                      # host/port from Settings
    uvicorn sortcompare.api.app:app
"""

from __future__ import annotations

import datetime as _dt
import logging
import time
from typing import Any, Callable, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from sortcompare import __version__
from sortcompare.algorithms import complexity_table, get_algorithm
from sortcompare.bench import compare_all, scaling, summarize, timed_sort
from sortcompare.bench.compare import SCALING_ALGORITHMS
from sortcompare.config import Settings, load_settings
from sortcompare.datasets import SUPPORTED_DISTS
from sortcompare.errors import InvalidInput, UnsupportedAlgorithm
from sortcompare.log import configure_logging
from sortcompare.validate import parse_number_list, validate_sequence

logger = logging.getLogger(__name__)

ENDPOINTS = [
    "GET /api/health",
    "GET /api/info",
    "POST /api/sort",
    "POST /api/compare",
    "POST /api/benchmark",
    "POST /api/parse",
]

# Accepted spellings for `/api/benchmark` "type" besides SUPPORTED_DISTS.
TYPE_ALIASES = {"reverse": "reversed"}


# Element types are checked by validate_sequence so that bad input maps to
# the same 400 payload as every other InvalidInput.
class SortRequest(BaseModel):
    array: Any = None
    algorithm: str = "recursive"


class CompareRequest(BaseModel):
    array: Any = None


class BenchmarkRequest(BaseModel):
    sizes: Optional[List[Any]] = None
    type: str = "random"


class ParseRequest(BaseModel):
    text: Any = Field(default=None, description="Comma-separated numbers")


def _error(status: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": error, "message": message})


def _guarded(route: str, fn: Callable[[], Dict[str, Any]]) -> Any:
    """Run an endpoint body, converting failures into structured error responses."""
    try:
        return {"success": True, "data": fn()}
    except InvalidInput as e:
        return _error(400, "Invalid input", str(e))
    except UnsupportedAlgorithm as e:
        return _error(400, "Invalid algorithm", str(e))
    except Exception as e:
        logger.exception("Error in %s", route)
        return _error(500, "Internal server error", str(e))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    started = time.monotonic()

    app = FastAPI(title="Sorting Comparison API", version=__version__)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    @app.get("/api/health")
    def health() -> Dict[str, Any]:
        return {
            "status": "OK",
            "timestamp": _dt.datetime.now(_dt.timezone.utc).isoformat(),
            "uptime": time.monotonic() - started,
        }

    @app.get("/api/info")
    def info() -> Dict[str, Any]:
        return {"algorithms": complexity_table(), "availableEndpoints": ENDPOINTS}

    @app.post("/api/sort")
    def sort_array(req: SortRequest) -> Any:
        def body() -> Dict[str, Any]:
            array = validate_sequence(req.array, max_size=settings.max_array_size)
            algo = get_algorithm(req.algorithm)
            result, sorted_array = timed_sort(algo.func, array, algo.name)
            return {
                "originalArray": array,
                "sortedArray": sorted_array,
                "algorithm": algo.name,
                "algorithmId": algo.id,
                "executionTime": f"{result.elapsed_ms:.4f} ms",
                "executionTimeMs": result.elapsed_ms,
                "arraySize": result.input_size,
                "isSorted": result.is_sorted,
            }
        return _guarded("/api/sort", body)

    @app.post("/api/compare")
    def compare(req: CompareRequest) -> Any:
        def body() -> Dict[str, Any]:
            array = validate_sequence(req.array, max_size=settings.max_array_size)
            if not array:
                raise InvalidInput("Array must contain at least one number")
            results = compare_all(array, quadratic_threshold=settings.quadratic_threshold)
            return {
                "arraySize": len(array),
                "results": [r.as_dict() for r in results],
                "statistics": summarize(results).as_dict(),
            }
        return _guarded("/api/compare", body)

    @app.post("/api/benchmark")
    def run_benchmark(req: BenchmarkRequest) -> Any:
        def body() -> Dict[str, Any]:
            sizes = list(settings.default_benchmark_sizes) if req.sizes is None else req.sizes
            if not sizes or any(isinstance(s, bool) or not isinstance(s, int) or s <= 0 for s in sizes):
                raise InvalidInput("Sizes must be an array of positive integers")
            if max(sizes) > settings.max_array_size:
                raise InvalidInput(f"Sizes must not exceed {settings.max_array_size}")
            kind = TYPE_ALIASES.get(req.type, req.type)
            if kind not in SUPPORTED_DISTS:
                raise InvalidInput(f"Unsupported array type {req.type!r}. Supported: {list(SUPPORTED_DISTS)}")
            table = scaling(sizes, kind=kind)
            return {
                "arrayType": kind,
                "sizes": sizes,
                "algorithms": list(SCALING_ALGORITHMS),
                "results": {str(n): row for n, row in table.items()},
            }
        return _guarded("/api/benchmark", body)

    @app.post("/api/parse")
    def parse(req: ParseRequest) -> Any:
        def body() -> Dict[str, Any]:
            numbers = parse_number_list(req.text)
            return {"array": numbers, "count": len(numbers)}
        return _guarded("/api/parse", body)

    return app


_default_app: Optional[FastAPI] = None


def __getattr__(name: str) -> Any:
    # `uvicorn sortcompare.api.app:app` builds the app on first lookup, so
    # importing this module never reads settings from the environment.
    global _default_app
    if name == "app":
        if _default_app is None:
            _default_app = create_app()
        return _default_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Sorting Comparison API on http://%s:%d (docs at /docs)", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
