import logging
from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from ..config import (
    LOCATION_NAME,
    LOCATION_POSTAL_CODE,
    LOCATION_SOURCE,
    MAX_SERIES_DAYS,
    WEATHER_EXPORT_FILENAME,
    WEATHER_SERIES_DAYS,
    WEATHER_START_DATE,
)
from ..data.records import UNITS, WeatherRecord
from ..data.synthetic import default_rng, generate_series
from ..met.par import estimate_par
from ..met.series import EmptySeriesError, period_label, recompute_vpd, summarize
from ..met.vpd import vpd_bands, vpd_kpa
from ..utils.export import serialize

app = FastAPI(title="Oberursel Weather API", version="0.1.0")
LOGGER = logging.getLogger(__name__)


class SeriesRequest(BaseModel):
    start_date: date = Field(default=WEATHER_START_DATE, description="YYYY-MM-DD")
    days: int = Field(default=WEATHER_SERIES_DAYS, ge=1, le=MAX_SERIES_DAYS)
    seed: Optional[int] = Field(
        default=None, description="Fixed seed for reproducible output; omit for fresh draws."
    )


class RecordsRequest(BaseModel):
    records: List[WeatherRecord]


class ExportRequest(BaseModel):
    records: List[WeatherRecord]
    format: str = Field("csv", pattern="^(csv|tsv)$", description="csv|tsv")


def _summary_or_422(records) -> dict:
    try:
        return summarize(records).model_dump()
    except EmptySeriesError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _records_payload(series) -> List[dict]:
    bands = list(vpd_bands([r.vpd for r in series])) if series else []
    return [{**r.model_dump(mode="json"), "vpd_band": band} for r, band in zip(series, bands)]


@app.get("/health")
async def health():
    return {"ok": True}


@app.post("/series")
async def series(req: SeriesRequest):
    data = generate_series(req.start_date, req.days, default_rng(req.seed))
    return {
        "location": {
            "name": LOCATION_NAME,
            "postal_code": LOCATION_POSTAL_CODE,
            "source": LOCATION_SOURCE,
        },
        "period": period_label(data),
        "records": _records_payload(data),
        "summary": _summary_or_422(data),
        "units": UNITS,
    }


@app.post("/series/recompute-vpd")
async def series_recompute_vpd(req: RecordsRequest):
    data = recompute_vpd(tuple(req.records))
    return {"records": _records_payload(data), "summary": _summary_or_422(data)}


@app.post("/summary")
async def summary(req: RecordsRequest):
    return _summary_or_422(tuple(req.records))


@app.post("/export")
async def export(req: ExportRequest):
    delimiter = "," if req.format == "csv" else "\t"
    text = serialize(tuple(req.records), delimiter)
    LOGGER.info("Exported %d records as %s", len(req.records), req.format)
    headers = {}
    if req.format == "csv":
        headers["Content-Disposition"] = f'attachment; filename="{WEATHER_EXPORT_FILENAME}"'
    return PlainTextResponse(text, headers=headers)


@app.get("/vpd")
async def vpd(temp_c: float, rh: float = Query(..., ge=0, le=100)):
    value = vpd_kpa(temp_c, rh)
    return {"temp_c": temp_c, "rh": rh, "vpd_kpa": value, "band": vpd_bands([value])[0]}


@app.get("/par")
async def par(solar_rad: float = Query(..., ge=0), hour: int = Query(12, ge=0, le=23)):
    return {"solar_rad": solar_rad, "hour": hour, "par": estimate_par(solar_rad, hour)}
