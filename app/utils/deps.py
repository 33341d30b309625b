from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from app.core.config import settings
from app.core.security import decode_token
from app.db.mongo import mongo
from app.db.neo4j import neo4j
from app.services.individual_store import IndividualStore, MongoSpeciesDirectory, Neo4jIndividualStore, SpeciesDirectory

bearer_scheme = HTTPBearer(bearerFormat="JWT", scheme_name="Authorization")

async def get_current_owner(credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme)) -> str:
    """Owner id from a verified access token. Records are always read in this owner's scope."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    if payload.get("type") != "access":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token type")
    owner_id = payload.get("sub")
    if not owner_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return owner_id

def get_individual_store() -> IndividualStore:
    return Neo4jIndividualStore(neo4j.driver)

def get_species_directory() -> SpeciesDirectory:
    return MongoSpeciesDirectory(mongo.client[settings.MONGODB_DB])
