"""
Emission Factors API router.

Read, replace and import/export the factor table in effect.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from app.core.dependencies import get_settings_store
from app.pydantic_models.emission_factor import EmissionFactorTable
from app.services.factors.factor_table import (
    get_default_factors,
    load_factors,
    save_factors,
)
from app.services.factors.factor_text import (
    parse_factors_from_text,
    serialize_factors_to_text,
)
from app.services.factors.stores import SettingsStore
from app.utils.constants import FactorCategory

router = APIRouter(
    prefix="/api/v1/factors",
    tags=["Emission Factors"],
)

logger = logging.getLogger(__name__)


@router.get("/", response_model=EmissionFactorTable)
async def get_emission_factors(
    store: SettingsStore = Depends(get_settings_store),
):
    """
    Get the emission factor table in effect.

    Falls back to the built-in defaults when no valid table has been saved.
    """
    return await load_factors(store)


@router.put("/", response_model=EmissionFactorTable)
async def replace_emission_factors(
    factors: EmissionFactorTable,
    store: SettingsStore = Depends(get_settings_store),
):
    """Replace the emission factor table."""
    await save_factors(store, factors)
    return factors


@router.get("/defaults", response_model=EmissionFactorTable)
async def get_default_emission_factors():
    """Get the built-in default emission factors."""
    return get_default_factors()


@router.post("/reset", response_model=EmissionFactorTable)
async def reset_emission_factors(
    store: SettingsStore = Depends(get_settings_store),
):
    """Restore the built-in default emission factors."""
    factors = get_default_factors()
    await save_factors(store, factors)
    logger.info("Emission factors reset to defaults")
    return factors


@router.get("/{category}/export", response_class=PlainTextResponse)
async def export_emission_factors(
    category: FactorCategory,
    store: SettingsStore = Depends(get_settings_store),
):
    """
    Export one category of the table in effect as two-column text.

    Example:
        ```
        GET /api/v1/factors/transport/export

        mode,kg_per_km
        Walk,0
        Bus,0.06
        ```
    """
    factors = await load_factors(store)
    return serialize_factors_to_text(factors, category)


@router.post("/{category}/import", response_model=EmissionFactorTable)
async def import_emission_factors(
    category: FactorCategory,
    request: Request,
    merge: bool = False,
    store: SettingsStore = Depends(get_settings_store),
):
    """
    Import one category from two-column text (request body, text/plain).

    Malformed rows are skipped. The imported rows replace the category, or
    are added on top of it when ``merge`` is true.
    """
    body = (await request.body()).decode("utf-8", errors="replace")
    imported = parse_factors_from_text(body, category)

    if not imported:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"No valid {category.value} factor rows found",
        )

    factors = await load_factors(store)
    current = getattr(factors, category.value)
    updated = {**current, **imported} if merge else imported
    factors = factors.model_copy(update={category.value: updated})

    await save_factors(store, factors)
    logger.info(f"Imported {len(imported)} {category.value} factors (merge={merge})")
    return factors
