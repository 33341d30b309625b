import logging
from typing import Protocol
from neo4j import AsyncDriver
from neo4j.exceptions import DriverError, Neo4jError
from pymongo.errors import PyMongoError
from app.core.errors import StoreUnavailableError
from app.models.individual import Individual

logger = logging.getLogger(__name__)

GENDERS = {"male", "female", "unknown"}
STATUSES = {"alive", "deceased", "sold", "unknown"}

class IndividualStore(Protocol):
    async def list_individuals(self, owner_id: str) -> list[Individual]: ...
    async def get_individual(self, individual_id: int, owner_id: str) -> Individual | None: ...

class SpeciesDirectory(Protocol):
    async def species_names(self, owner_id: str) -> dict[int, str]: ...

def _node_to_individual(node) -> Individual:
    data = dict(node)
    gender = data.get("gender")
    status = data.get("status")
    return Individual(
        id=data["individualId"],
        fatherId=data.get("fatherId"),
        motherId=data.get("motherId"),
        gender=gender if gender in GENDERS else "unknown",
        name=data.get("name"),
        ringId=data.get("ringId"),
        speciesId=data.get("speciesId"),
        colorMutation=data.get("colorMutation"),
        photoUrl=data.get("photoUrl"),
        status=status if status in STATUSES else "unknown",
    )

class Neo4jIndividualStore:
    """Reads an owner's individuals from :Individual nodes. Read-only."""

    def __init__(self, driver: AsyncDriver):
        self.driver = driver

    async def list_individuals(self, owner_id: str) -> list[Individual]:
        try:
            async with self.driver.session() as session:
                res = await session.run("""
                    MATCH (n:Individual {ownerId:$oid})
                    RETURN n
                    ORDER BY n.individualId ASC
                """, oid=owner_id)
                records = [rec async for rec in res]
        except (Neo4jError, DriverError) as exc:
            logger.warning("Snapshot fetch failed for owner %s: %s", owner_id, exc)
            raise StoreUnavailableError("Individual store unavailable") from exc
        return [_node_to_individual(rec["n"]) for rec in records]

    async def get_individual(self, individual_id: int, owner_id: str) -> Individual | None:
        try:
            async with self.driver.session() as session:
                res = await session.run("""
                    MATCH (n:Individual {individualId:$iid, ownerId:$oid})
                    RETURN n
                """, iid=individual_id, oid=owner_id)
                rec = await res.single()
        except (Neo4jError, DriverError) as exc:
            logger.warning("Lookup of individual %s failed for owner %s: %s", individual_id, owner_id, exc)
            raise StoreUnavailableError("Individual store unavailable") from exc
        if not rec:
            return None
        return _node_to_individual(rec["n"])

class MongoSpeciesDirectory:
    """System species (no ``ownerId``) plus the ones this owner added."""

    def __init__(self, db):
        self.db = db

    async def species_names(self, owner_id: str) -> dict[int, str]:
        try:
            cursor = self.db.species.find(
                {"ownerId": {"$in": [None, owner_id]}},
                {"_id": 1, "commonName": 1},
            )
            docs = await cursor.to_list(length=None)
        except PyMongoError as exc:
            logger.warning("Species lookup failed for owner %s: %s", owner_id, exc)
            raise StoreUnavailableError("Species directory unavailable") from exc
        return {d["_id"]: d["commonName"] for d in docs if d.get("commonName")}
