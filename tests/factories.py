from datetime import datetime, timedelta, timezone
from jose import jwt
from app.core.config import settings
from app.core.errors import StoreUnavailableError
from app.models.individual import Individual
from app.services.snapshot import Snapshot


def ind(id, father=None, mother=None, **kw):
    return Individual(id=id, fatherId=father, motherId=mother, **kw)


def snapshot_of(*individuals):
    return Snapshot(individuals)


def breeding_records():
    """1 and 2 unrelated founders with full siblings 3 and 4; 2 x 5 gives 6; 1 x 5 gives 7."""
    return [
        ind(1, gender="male", name="Blue Boy", ringId="AU-001", speciesId=10),
        ind(2, gender="female", name="Pearl", speciesId=10),
        ind(3, 1, 2, gender="male", name="Sky", ringId="AU-003", speciesId=10, colorMutation="Opaline"),
        ind(4, 1, 2, gender="female", name="Misty", speciesId=10),
        ind(5, gender="male", speciesId=10),
        ind(6, 2, 5, gender="female", speciesId=10),
        ind(7, 1, 5, speciesId=10),
    ]


class FakeStore:
    """In-memory stand-in for the individual store, keyed by owner id."""

    def __init__(self, by_owner, fail=False):
        self.by_owner = by_owner
        self.fail = fail
        self.list_calls = 0

    async def list_individuals(self, owner_id):
        self.list_calls += 1
        if self.fail:
            raise StoreUnavailableError("Individual store unavailable")
        return list(self.by_owner.get(owner_id, []))

    async def get_individual(self, individual_id, owner_id):
        if self.fail:
            raise StoreUnavailableError("Individual store unavailable")
        for ind in self.by_owner.get(owner_id, []):
            if ind.id == individual_id:
                return ind
        return None


class FakeSpecies:
    async def species_names(self, owner_id):
        return {10: "Budgerigar"}


def make_token(subject, token_type="access", expires_delta=timedelta(minutes=5), secret=None):
    """Sign a bearer token the way the account service does."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "type": token_type,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(payload, secret or settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
