"""FastAPI main application."""

import logging
from typing import Optional, Union
import numpy as np
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from ...application.services.calibration_service import CalibrationService
from ...domain.entities.drill_settings import DrillSettings
from ...domain.exceptions import SettingsStoreError, ValidationError
from ...domain.repositories.settings_repository import SettingsRepository
from ...domain.use_cases.validate_drill_config import validate_config
from ...infrastructure.repositories.csv_settings_repository import CSVSettingsRepository
from config.settings import (
    API_SETTINGS,
    DEFAULT_DRILL_SETTINGS,
    LOG_FORMAT,
    LOG_LEVEL,
    ROW_SPACING_LIMITS,
    SETTINGS_FILE,
    TURN_OPTIONS,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def _as_text(value: Union[str, float, int, None]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float):
        # str() would give exponent notation for tiny values
        return np.format_float_positional(value, trim="-")
    return str(value)


# Request/Response models
class SettingsRequest(BaseModel):
    """Drill settings as typed on the configuration form."""

    drill_width: Optional[Union[str, float]] = Field(None, description="Drill width (feet)")
    row_spacing: Optional[Union[str, float]] = Field(None, description="Row spacing (inches)")
    distance_per_turn: Optional[Union[str, float]] = Field(
        None, description="Distance per turn (inches)"
    )

    def validate_settings(self) -> DrillSettings:
        return validate_config(
            _as_text(self.drill_width),
            _as_text(self.row_spacing),
            _as_text(self.distance_per_turn),
            spacing_limits=ROW_SPACING_LIMITS,
        )


class SettingsResponse(BaseModel):
    """Saved drill settings."""

    drill_width: float
    row_spacing: float
    distance_per_turn: float
    total_rows: int


class RateRequest(BaseModel):
    """Request model for a rate calculation."""

    number_of_turns: Union[int, str] = Field(TURN_OPTIONS[0], description="Number of turns")
    rows_caught: Optional[Union[str, int]] = Field(None, description="Rows caught")
    seed_weight: Optional[Union[str, float]] = Field(None, description="Seed caught (lbs)")
    settings: Optional[SettingsRequest] = Field(
        None, description="Drill settings to use instead of the saved ones"
    )


class RateResponse(BaseModel):
    """Response model for a rate calculation."""

    pounds_per_acre: float
    status: str
    total_rows: int


def _settings_response(settings: DrillSettings) -> SettingsResponse:
    return SettingsResponse(
        drill_width=settings.width_feet,
        row_spacing=settings.row_spacing_inches,
        distance_per_turn=settings.distance_per_turn_inches,
        total_rows=settings.total_rows,
    )


def create_app(repository: Optional[SettingsRepository] = None) -> FastAPI:
    """
    Build the API around a settings repository.

    Args:
        repository: Settings store (defaults to the CSV file from config)
    """
    if repository is None:
        repository = CSVSettingsRepository(str(SETTINGS_FILE))

    app = FastAPI(
        title=API_SETTINGS["title"],
        description=API_SETTINGS["description"],
        version=API_SETTINGS["version"],
    )

    def new_service() -> CalibrationService:
        return CalibrationService(
            repository,
            turn_options=TURN_OPTIONS,
            spacing_limits=ROW_SPACING_LIMITS,
            form_defaults=DEFAULT_DRILL_SETTINGS,
        )

    # API endpoints
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": API_SETTINGS["title"],
            "version": API_SETTINGS["version"],
            "endpoints": {
                "settings": "/settings",
                "rate": "/rate",
                "turn_options": "/turn-options",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/turn-options")
    async def turn_options() -> dict:
        return {"turn_options": list(TURN_OPTIONS)}

    @app.get("/settings", response_model=SettingsResponse)
    async def get_settings() -> SettingsResponse:
        """Return the saved drill settings."""
        service = new_service()
        try:
            settings = service.load_settings()
        except SettingsStoreError as e:
            raise HTTPException(status_code=500, detail=e.message)
        if settings is None:
            raise HTTPException(status_code=404, detail="No drill settings saved")
        return _settings_response(settings)

    @app.put("/settings", response_model=SettingsResponse)
    async def put_settings(request: SettingsRequest) -> SettingsResponse:
        """Validate and save the drill settings."""
        service = new_service()
        try:
            settings = service.save_settings(
                _as_text(request.drill_width),
                _as_text(request.row_spacing),
                _as_text(request.distance_per_turn),
            )
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=e.message)
        except SettingsStoreError as e:
            logger.error(f"Saving settings failed: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=e.message)
        return _settings_response(settings)

    @app.post("/rate", response_model=RateResponse)
    async def rate(request: RateRequest) -> RateResponse:
        """
        Compute the seeding rate for a calibration run.

        Incomplete input is not an error: it yields 0 lbs/acre with status
        'incomplete'.
        """
        service = new_service()
        try:
            if request.settings is not None:
                service.apply_settings(request.settings.validate_settings())
            else:
                service.load_settings()
            service.set_number_of_turns(request.number_of_turns)
            service.set_rows_caught(_as_text(request.rows_caught))
            result = service.set_seed_weight(_as_text(request.seed_weight))
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=e.message)
        except SettingsStoreError as e:
            logger.error(f"Loading settings failed: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=e.message)

        return RateResponse(
            pounds_per_acre=result.pounds_per_acre,
            status=result.status.value,
            total_rows=service.total_rows,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
