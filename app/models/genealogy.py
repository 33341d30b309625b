from pydantic import BaseModel, Field
from typing import Optional, Literal
from app.models.individual import Individual

SiblingKind = Literal["full", "half"]
RiskLevel = Literal["none", "low", "moderate", "high"]

class PedigreeOut(BaseModel):
    subjectId: int
    generations: int
    knownGenerations: int
    individuals: dict[int, Individual]

class SiblingOut(BaseModel):
    individual: Individual
    siblingType: SiblingKind

class CommonAncestorOut(BaseModel):
    individualId: int
    sireDepths: list[int]
    damDepths: list[int]
    contribution: float

class InbreedingOut(BaseModel):
    maleId: int
    femaleId: int
    coefficient: float = Field(ge=0, le=1)
    percent: float
    risk: RiskLevel
    commonAncestors: list[CommonAncestorOut] = []

class SiblingCheckOut(BaseModel):
    siblingType: Optional[SiblingKind] = None

class PairingCheckOut(BaseModel):
    maleId: int
    femaleId: int
    coefficient: float
    percent: float
    risk: RiskLevel
    siblingType: Optional[SiblingKind] = None
