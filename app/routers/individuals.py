from fastapi import APIRouter, Depends, Query
from app.core.config import settings
from app.models.genealogy import PedigreeOut, SiblingOut
from app.models.individual import Individual
from app.services.ancestry_service import ancestry_of, known_generations
from app.services.descendant_service import descendants_of
from app.services.sibling_service import siblings_of
from app.services.snapshot import load_snapshot
from app.utils.deps import get_current_owner, get_individual_store

router = APIRouter(prefix="/api/v1/individuals/{individualId}", tags=["Genealogy"])

@router.get("/pedigree", response_model=PedigreeOut)
async def get_pedigree(
    individualId: int,
    generations: int = Query(settings.PEDIGREE_GENERATIONS, ge=1, le=settings.PEDIGREE_GENERATIONS),
    owner_id: str = Depends(get_current_owner),
    store=Depends(get_individual_store),
):
    snapshot = await load_snapshot(store, owner_id)
    pedigree = ancestry_of(snapshot, individualId, generations)
    return {
        "subjectId": individualId,
        "generations": generations,
        "knownGenerations": known_generations(pedigree, individualId, generations),
        "individuals": pedigree,
    }

@router.get("/descendants", response_model=list[Individual])
async def get_descendants(individualId: int, owner_id: str = Depends(get_current_owner),
                          store=Depends(get_individual_store)):
    snapshot = await load_snapshot(store, owner_id)
    return descendants_of(snapshot, individualId)

@router.get("/siblings", response_model=list[SiblingOut])
async def get_siblings(individualId: int, owner_id: str = Depends(get_current_owner),
                       store=Depends(get_individual_store)):
    snapshot = await load_snapshot(store, owner_id)
    return [{"individual": ind, "siblingType": kind} for ind, kind in siblings_of(snapshot, individualId)]
