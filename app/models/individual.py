from pydantic import BaseModel, ConfigDict
from typing import Optional, Literal

Gender = Literal["male", "female", "unknown"]
LifeStatus = Literal["alive", "deceased", "sold", "unknown"]

class Individual(BaseModel):
    """One recorded animal. Parent ids are weak references and may point nowhere."""
    model_config = ConfigDict(frozen=True)

    id: int
    fatherId: Optional[int] = None
    motherId: Optional[int] = None
    gender: Gender = "unknown"
    name: Optional[str] = None
    ringId: Optional[str] = None
    speciesId: Optional[int] = None
    colorMutation: Optional[str] = None
    photoUrl: Optional[str] = None
    status: LifeStatus = "alive"

    @property
    def display_name(self) -> str:
        return self.name or self.ringId or f"#{self.id}"
