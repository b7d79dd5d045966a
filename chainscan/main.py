import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from chainscan.adapters import fetch_all_transactions
from chainscan.errors import ScanInputError
from chainscan.export.csv_writer import csv_filename, generate_csv
from chainscan.export.summary import summarize
from chainscan.models.chain import CHAINS
from chainscan.models.event import TransactionEvent
from chainscan.validation.input import validate_address, validate_chain, validate_format, validate_mode

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("chainscan.main")

app = FastAPI(title="ChainScan Transaction Export API", version="0.1.0")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info(
        "REQUEST: %s %s -> %s",
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


class ScanRequest(BaseModel):
    address: Optional[str] = None
    format: str = "json"
    mode: str = "strict"


def _event_json(event: TransactionEvent) -> dict:
    data = event.model_dump(mode="json")
    data["date"] = event.date
    return data


@app.get("/v1/chains")
async def list_chains():
    return {"chains": [info.model_dump(mode="json") for info in CHAINS.values()]}


@app.get("/v1/chains/{chain}/validate")
async def validate_chain_address(chain: str, address: str = Query(default="")):
    chain_id = validate_chain(chain)
    try:
        validate_address(chain_id, address)
        valid = True
    except HTTPException:
        valid = False
    return {"chain": chain_id.value, "address": address.strip(), "valid": valid}


@app.post("/v1/scan/{chain}")
async def scan_wallet(chain: str, body: ScanRequest):
    chain_id = validate_chain(chain)
    address = validate_address(chain_id, body.address or "")
    fmt = validate_format(body.format)
    mode = validate_mode(body.mode)

    logger.info("SCAN REQUEST: chain=%s address=%s... format=%s mode=%s", chain_id.value, address[:10], fmt, mode)

    def on_progress(percent: int) -> None:
        logger.debug("SCAN PROGRESS: %s %s... %d%%", chain_id.value, address[:10], percent)

    try:
        events = await fetch_all_transactions(chain_id, address, on_progress=on_progress)
    except ScanInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    if fmt == "csv":
        csv_text = generate_csv(events, mode)
        filename = csv_filename(chain_id.value, address)
        return Response(
            content=csv_text,
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    summary = summarize(events, chain_id)
    return JSONResponse(
        content={
            "chain": chain_id.value,
            "address": address,
            "count": len(events),
            "summary": summary.model_dump(mode="json"),
            "events": [_event_json(e) for e in events],
        }
    )
