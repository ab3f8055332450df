"""Pydantic request models for the calculator and progress endpoints."""

import datetime as dt

from pydantic import BaseModel, Field

from bodycalc.domain.progress import EntryType
from bodycalc.domain.units import LengthUnit, Sex, WeightUnit


class TdeeRequest(BaseModel):
    """Inputs for the energy expenditure calculator."""

    weight: float = Field(gt=0)
    weight_unit: WeightUnit = WeightUnit.LBS
    height: float = Field(gt=0)
    height_unit: LengthUnit = LengthUnit.INCHES
    age: float = Field(gt=0)
    sex: Sex
    activity_level: str | None = "sedentary"
    body_fat_percent: float | None = Field(default=None, lt=100)


class BodyFatRequest(BaseModel):
    """Inputs for the Navy body-fat calculator."""

    sex: Sex
    weight: float = Field(gt=0)
    weight_unit: WeightUnit = WeightUnit.LBS
    height: float = Field(gt=0)
    height_unit: LengthUnit = LengthUnit.INCHES
    neck: float = Field(gt=0)
    waist: float = Field(gt=0)
    hip: float | None = Field(default=None, gt=0)
    measurement_unit: LengthUnit = LengthUnit.INCHES


class MacroRequest(BaseModel):
    """Inputs for the goal-driven macro split."""

    tdee: float = Field(gt=0)
    bodyweight_lbs: float = Field(gt=0)
    goal: str | None = "maintain"
    custom_adjustment: float | None = None
    protein_multiplier: float = Field(default=1.0, gt=0)
    fat_fraction: float = Field(default=0.25, ge=0, le=1)


class MacroPercentagesRequest(BaseModel):
    """Inputs for the percentage-driven macro split."""

    target_calories: float = Field(gt=0)
    protein_percentage: float = Field(ge=0, le=100)
    fat_percentage: float = Field(ge=0, le=100)


class FatLossRequest(BaseModel):
    """Inputs for the fat-loss target calculator."""

    current_weight: float = Field(gt=0)
    weight_unit: WeightUnit = WeightUnit.LBS
    current_body_fat: float = Field(gt=0, lt=100)
    target_body_fat: float = Field(ge=0, lt=100)


class ProgressEntryCreate(BaseModel):
    """Payload for saving a calculator result."""

    type: EntryType
    date: dt.date
    data: dict[str, float | str]


class ProgressEntryUpdate(BaseModel):
    """Partial update for a saved entry."""

    type: EntryType | None = None
    date: dt.date | None = None
    data: dict[str, float | str] | None = None


class ProgressImportRequest(BaseModel):
    """Exported document text plus the conflict mode."""

    content: str
    merge: bool = True
