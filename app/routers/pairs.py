from fastapi import APIRouter, Depends
from app.models.genealogy import InbreedingOut, PairingCheckOut, SiblingCheckOut
from app.services.inbreeding_service import inbreeding_report, pairing_check
from app.services.sibling_service import sibling_kind
from app.services.snapshot import load_snapshot
from app.utils.deps import get_current_owner, get_individual_store

# Candidate pairs are checked speculatively, so unknown ids are not 404s here
router = APIRouter(prefix="/api/v1/pairs", tags=["Pairs"])

@router.get("/inbreeding", response_model=InbreedingOut)
async def get_inbreeding(maleId: int, femaleId: int, owner_id: str = Depends(get_current_owner),
                         store=Depends(get_individual_store)):
    snapshot = await load_snapshot(store, owner_id)
    report = inbreeding_report(snapshot, maleId, femaleId)
    return {
        "maleId": maleId,
        "femaleId": femaleId,
        "coefficient": report.coefficient,
        "percent": report.percent,
        "risk": report.risk,
        "commonAncestors": [
            {
                "individualId": c.individual_id,
                "sireDepths": c.sire_depths,
                "damDepths": c.dam_depths,
                "contribution": c.contribution,
            }
            for c in report.common_ancestors
        ],
    }

@router.get("/sibling-check", response_model=SiblingCheckOut)
async def get_sibling_check(maleId: int, femaleId: int, owner_id: str = Depends(get_current_owner),
                            store=Depends(get_individual_store)):
    snapshot = await load_snapshot(store, owner_id)
    return {"siblingType": sibling_kind(snapshot, maleId, femaleId)}

@router.get("/check", response_model=PairingCheckOut)
async def get_pairing_check(maleId: int, femaleId: int, owner_id: str = Depends(get_current_owner),
                            store=Depends(get_individual_store)):
    snapshot = await load_snapshot(store, owner_id)
    check = pairing_check(snapshot, maleId, femaleId)
    return {
        "maleId": maleId,
        "femaleId": femaleId,
        "coefficient": check.report.coefficient,
        "percent": check.report.percent,
        "risk": check.report.risk,
        "siblingType": check.sibling_type,
    }
