from fastapi import APIRouter, Depends, Response
from app.core.config import settings
from app.core.errors import NotFoundError
from app.services.ancestry_service import ancestry_of
from app.services.pedigree_service import render_pedigree_document
from app.services.snapshot import load_snapshot
from app.utils.deps import get_current_owner, get_individual_store, get_species_directory

router = APIRouter(prefix="/api/v1/documents", tags=["Documents"])

@router.get("/pedigree/{individualId}")
async def download_pedigree(individualId: int, owner_id: str = Depends(get_current_owner),
                            store=Depends(get_individual_store), species=Depends(get_species_directory)):
    # Confirm the anchor before pulling the whole snapshot
    if await store.get_individual(individualId, owner_id) is None:
        raise NotFoundError(f"Individual {individualId} not found")
    snapshot = await load_snapshot(store, owner_id)
    pedigree = ancestry_of(snapshot, individualId, settings.PEDIGREE_GENERATIONS)
    document = render_pedigree_document(pedigree, individualId, await species.species_names(owner_id))
    return Response(
        content=document,
        media_type="image/svg+xml",
        headers={"Content-Disposition": f'attachment; filename="pedigree-{individualId}.svg"'},
    )
