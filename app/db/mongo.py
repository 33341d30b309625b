from motor.motor_asyncio import AsyncIOMotorClient
from app.core.config import settings

class Mongo:
    client: AsyncIOMotorClient | None = None

mongo = Mongo()

async def connect_to_mongo():
    mongo.client = AsyncIOMotorClient(settings.MONGODB_URI)
    db = mongo.client[settings.MONGODB_DB]
    # species_names filters on ownerId (null for system species)
    await db.species.create_index("ownerId")
    return mongo.client

async def close_mongo():
    if mongo.client:
        mongo.client.close()
