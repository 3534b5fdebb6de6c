import dataclasses
import uuid
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config import load_settings
from src.model.PayloadModel import ReceiptPayload
from src.model.ReceiptModel import MalformedInput
from src.model.ResponseModel import PointsResponse, ProcessResponse
from src.scoring.points import count_points
from src.storage.db import PointsDB
from src.utils.logging_config import logger, setup_logging

INVALID_RECEIPT = "The receipt is invalid"
PROCESS_PATH = "/receipts/process"


class InvalidReceipt(Exception):
    """Rejected request; reported to the caller as a 400."""


async def invalid_receipt_handler(request: Request, exc: InvalidReceipt):
    return PlainTextResponse(INVALID_RECEIPT, status_code=400)


async def wrong_method_handler(request: Request, exc: StarletteHTTPException):
    # any verb other than POST on the submit path is refused outright
    if exc.status_code == 405 and request.url.path == PROCESS_PATH:
        return PlainTextResponse("Forbidden", status_code=403)
    return await http_exception_handler(request, exc)


def get_db(request: Request) -> PointsDB:
    return request.app.state.db


def create_app(db: Optional[PointsDB] = None) -> FastAPI:
    app = FastAPI(title="Receipt Processor")
    app.state.db = db if db is not None else PointsDB()
    app.add_exception_handler(InvalidReceipt, invalid_receipt_handler)
    app.add_exception_handler(StarletteHTTPException, wrong_method_handler)

    @app.post(PROCESS_PATH)
    async def process_receipt(request: Request, db: PointsDB = Depends(get_db)):
        body = await request.body()
        try:
            receipt = ReceiptPayload.model_validate_json(body).to_receipt()
            points = count_points(receipt)
        except (ValidationError, MalformedInput) as e:
            logger.warning("rejected receipt: %s", e)
            raise InvalidReceipt(str(e))

        receipt_id = str(uuid.uuid4())
        db.put(receipt_id, points)

        logger.info("processed receipt id: %s, points: %d", receipt_id, points)
        return JSONResponse(content=dataclasses.asdict(ProcessResponse(id=receipt_id)))

    @app.get("/receipts//points")
    async def get_points_without_id():
        raise InvalidReceipt("missing receipt id")

    @app.get("/receipts/{receipt_id}/points")
    async def get_points(receipt_id: str, db: PointsDB = Depends(get_db)):
        if not receipt_id:
            raise InvalidReceipt("missing receipt id")

        points = db.get(receipt_id)

        logger.info("looked up receipt id: %s, points: %d", receipt_id, points)
        return JSONResponse(content=dataclasses.asdict(PointsResponse(points=points)))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    setup_logging(level=settings.log_level)
    logger.info("serving on %s:%d", settings.host, settings.port)
    uvicorn.run("src.app:app", host=settings.host, port=settings.port)
