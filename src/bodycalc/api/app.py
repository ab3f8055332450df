"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from bodycalc.api.models import (
    BodyFatRequest,
    FatLossRequest,
    MacroPercentagesRequest,
    MacroRequest,
    TdeeRequest,
)
from bodycalc.api.progress import router as progress_router
from bodycalc.app_logging import configure_logging
from bodycalc.containers import AppContainer
from bodycalc.services.body_composition import BODY_FAT_CATEGORIES, calculate_body_fat
from bodycalc.services.energy import ACTIVITY_LEVELS, calculate_full_tdee
from bodycalc.services.fat_loss import calculate_fat_loss_required
from bodycalc.services.lookup import UnknownKeyError
from bodycalc.services.macros import (
    GOALS,
    calculate_macros,
    calculate_macros_from_percentages,
    protein_grams_to_percentage,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(progress_router)

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        if isinstance(exc, UnknownKeyError):
            logger.info("Rejected unknown key %r", exc.key)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/reference/activity-levels")
    async def activity_levels() -> dict[str, object]:
        """Return activity multipliers with labels."""
        levels = [asdict(level) for level in ACTIVITY_LEVELS.values()]
        return {"activity_levels": levels}

    @app.get("/reference/goals")
    async def goals() -> dict[str, object]:
        """Return goal calorie adjustments with labels."""
        return {"goals": [asdict(goal) for goal in GOALS.values()]}

    @app.get("/reference/body-fat-categories")
    async def body_fat_categories() -> dict[str, object]:
        """Return the body-fat category table per sex."""
        return {
            sex.value: [asdict(category) for category in categories]
            for sex, categories in BODY_FAT_CATEGORIES.items()
        }

    @app.post("/calculators/tdee")
    async def tdee(payload: TdeeRequest, request: Request) -> dict[str, object]:
        """Compute BMR and TDEE."""
        state_container: AppContainer = request.app.state.container
        result = calculate_full_tdee(
            **payload.model_dump(), policy=state_container.lookup_policy
        )
        return asdict(result)

    @app.post("/calculators/body-fat")
    async def body_fat(payload: BodyFatRequest) -> dict[str, object]:
        """Estimate body fat with the Navy method."""
        return asdict(calculate_body_fat(**payload.model_dump()))

    @app.post("/calculators/macros")
    async def macros(payload: MacroRequest, request: Request) -> dict[str, object]:
        """Split target calories into macros."""
        state_container: AppContainer = request.app.state.container
        result = calculate_macros(
            **payload.model_dump(), policy=state_container.lookup_policy
        )
        response = asdict(result)
        response["protein_percentage_of_target"] = protein_grams_to_percentage(
            payload.protein_multiplier, payload.bodyweight_lbs, result.target_calories
        )
        return response

    @app.post("/calculators/macros/percentages")
    async def macros_from_percentages(
        payload: MacroPercentagesRequest,
    ) -> dict[str, object]:
        """Split target calories using protein and fat percentages."""
        return asdict(calculate_macros_from_percentages(**payload.model_dump()))

    @app.post("/calculators/fat-loss")
    async def fat_loss(payload: FatLossRequest) -> dict[str, object]:
        """Compute the weight to lose for a target body-fat percentage."""
        return asdict(calculate_fat_loss_required(**payload.model_dump()))

    return app
