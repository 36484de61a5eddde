from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from calculator.errors import invalid_input_from
from calculator.router import router as calculator_router
from utils.logging import setup_logging

setup_logging()

app = FastAPI(title="Position Sizing Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculator_router)


# bad request bodies get the same 400 shape as the calculator's own input errors
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = invalid_input_from(exc.errors())
    logger.warning(f"Rejected {request.method} {request.url.path}: {error}")
    return JSONResponse(status_code=400, content={"detail": error.to_dict()})


@app.get("/")
def root():
    return {"status": "Backend running"}
