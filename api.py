from fastapi import FastAPI, Query, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
import logging

from config import READINGS_FILE, WEATHER_CACHE_FILE, READING_BOUNDS
from crops import DEFAULT_PROFILE, CropProfile, get_profile, list_crops
from readings import InvalidReading, SoilReading, create_reading, latest
from dashboard import recent, summarize, to_frame
from recommender import diagnose, Diagnosis
from storage import ReadingStore, StorageError, WeatherCache
from weather import fetch_current, WeatherUnavailable
from alerts import weather_alerts

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Soil Advisor")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins - for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

store = ReadingStore(READINGS_FILE)
weather_cache = WeatherCache(WEATHER_CACHE_FILE)


@app.get("/")
def root():
    return {"message": "Soil Advisor API", "endpoints": ["/crops", "/readings", "/summary", "/recommendations", "/diagnose", "/weather", "/readings/export"]}

@app.get("/health")
def health_check():
    return {"status": "healthy", "features": ["readings", "summary", "recommendations", "weather"]}

class ReadingIn(BaseModel):
    nitrogen: float = Field(ge=READING_BOUNDS["nitrogen"][0], le=READING_BOUNDS["nitrogen"][1])
    ph: float = Field(ge=READING_BOUNDS["ph"][0], le=READING_BOUNDS["ph"][1])
    moisture: float = Field(ge=READING_BOUNDS["moisture"][0], le=READING_BOUNDS["moisture"][1])
    crop: str = Field(min_length=1)

class ReadingOut(BaseModel):
    id: str
    timestamp: datetime
    nitrogen: float
    ph: float
    moisture: float
    crop: str

class RangeOut(BaseModel):
    low: float
    high: float

class CropOut(BaseModel):
    crop: str
    nitrogen: RangeOut
    ph: RangeOut
    moisture: RangeOut
    fertilizers: List[str]
    pesticides: List[str]

class SeriesPointOut(BaseModel):
    index: int
    timestamp: datetime
    nitrogen: float
    ph: float
    moisture: float

class SummaryOut(BaseModel):
    count: int
    latest: Optional[ReadingOut]
    averages: Optional[dict]
    rounded_averages: Optional[dict]
    series: List[SeriesPointOut]
    has_trend: bool

class ActionOut(BaseModel):
    title: str
    description: str
    priority: str

class DiagnosisOut(BaseModel):
    crop: str
    alerts: List[str]
    confirmations: List[str]
    actions: List[ActionOut]
    fertilizers: List[str]
    pesticides: List[str]
    tips: List[str]

class AlertOut(BaseModel):
    kind: str
    message: str
    severity: str

class WeatherOut(BaseModel):
    temperature: float
    humidity: float
    description: str
    location: str
    cached: bool
    alerts: List[AlertOut]


def _reading_out(r: SoilReading) -> ReadingOut:
    return ReadingOut(id=r.id, timestamp=r.timestamp, nitrogen=r.nitrogen, ph=r.ph, moisture=r.moisture, crop=r.crop)

def _crop_out(name: str, p: CropProfile) -> CropOut:
    return CropOut(
        crop=name,
        nitrogen=RangeOut(low=p.nitrogen.low, high=p.nitrogen.high),
        ph=RangeOut(low=p.ph.low, high=p.ph.high),
        moisture=RangeOut(low=p.moisture.low, high=p.moisture.high),
        fertilizers=list(p.fertilizers),
        pesticides=list(p.pesticides),
    )

def _diagnosis_out(d: Diagnosis) -> DiagnosisOut:
    return DiagnosisOut(
        crop=d.crop,
        alerts=d.alerts,
        confirmations=d.confirmations,
        actions=[ActionOut(title=a.title, description=a.description, priority=a.priority.value) for a in d.actions],
        fertilizers=d.fertilizers,
        pesticides=d.pesticides,
        tips=d.tips,
    )

def _load_log():
    try:
        return store.load()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/crops", response_model=List[CropOut])
def crops():
    out = [_crop_out(name, get_profile(name)) for name in list_crops()]
    out.append(_crop_out("default", DEFAULT_PROFILE))
    logger.info(f"Listed {len(out)} crop profiles")
    return out

@app.post("/readings", response_model=ReadingOut, status_code=201)
def add_reading(body: ReadingIn):
    try:
        reading = create_reading(body.nitrogen, body.ph, body.moisture, body.crop)
        store.append(reading)
        logger.info(f"Recorded reading {reading.id} for crop={reading.crop}")
        return _reading_out(reading)
    except InvalidReading as e:
        logger.warning(f"Rejected reading for crop={body.crop!r}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Error recording reading for crop={body.crop!r}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to record reading: {str(e)}")

@app.get("/readings", response_model=List[ReadingOut])
def readings(limit: Optional[int] = Query(default=None, ge=1)):
    log = _load_log()
    shown = recent(log, limit) if limit is not None else list(log)
    logger.info(f"Returning {len(shown)} of {len(log)} readings")
    return [_reading_out(r) for r in shown]

@app.get("/readings/export")
def export_readings():
    try:
        log = _load_log()
        logger.info(f"Exporting {len(log)} readings as CSV")
        csv = to_frame(log).to_csv(index=False)
        return Response(
            content=csv,
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=soil_readings.csv"},
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error exporting readings: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to export readings: {str(e)}")

@app.get("/summary", response_model=SummaryOut)
def summary():
    try:
        log = _load_log()
        s = summarize(log)
        if not s.has_data:
            logger.info("Summary requested with no readings recorded")
            return SummaryOut(count=0, latest=None, averages=None, rounded_averages=None, series=[], has_trend=False)
        logger.info(f"Summarized {len(log)} readings")
        return SummaryOut(
            count=len(log),
            latest=_reading_out(s.latest),
            averages={"nitrogen": s.average_nitrogen, "ph": s.average_ph, "moisture": s.average_moisture},
            rounded_averages=s.rounded_averages(),
            series=[SeriesPointOut(index=p.index, timestamp=p.timestamp, nitrogen=p.nitrogen, ph=p.ph, moisture=p.moisture) for p in s.series],
            has_trend=s.has_trend,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error summarizing readings: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to summarize readings: {str(e)}")

@app.get("/recommendations", response_model=Optional[DiagnosisOut])
def recommendations():
    try:
        log = _load_log()
        d = diagnose(latest(log))
        if d is None:
            logger.info("No readings recorded yet, nothing to diagnose")
            return None
        logger.info(f"Diagnosed latest reading for crop={d.crop}: {len(d.alerts)} alerts")
        return _diagnosis_out(d)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error generating recommendations: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to generate recommendations: {str(e)}")

@app.post("/diagnose", response_model=DiagnosisOut)
def diagnose_reading(body: ReadingIn):
    try:
        reading = create_reading(body.nitrogen, body.ph, body.moisture, body.crop)
    except InvalidReading as e:
        logger.warning(f"Rejected reading for crop={body.crop!r}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    d = diagnose(reading)
    logger.info(f"Diagnosed ad-hoc reading for crop={d.crop}: {len(d.alerts)} alerts")
    return _diagnosis_out(d)

@app.get("/weather", response_model=WeatherOut)
def weather(lat: float = Query(ge=-90, le=90), lon: float = Query(ge=-180, le=180)):
    cached = False
    try:
        current = fetch_current(lat, lon)
        weather_cache.save(current)
    except WeatherUnavailable as e:
        current = weather_cache.load()
        if current is None:
            raise HTTPException(status_code=503, detail=str(e))
        logger.warning(f"Serving cached weather for {current.location}: {e}")
        cached = True
    logger.info(f"Weather for lat={lat}, lon={lon}: {current.description}, cached={cached}")
    return WeatherOut(
        temperature=current.temperature,
        humidity=current.humidity,
        description=current.description,
        location=current.location,
        cached=cached,
        alerts=[AlertOut(kind=a.kind, message=a.message, severity=a.severity) for a in weather_alerts(current)],
    )
