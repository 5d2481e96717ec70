"""Seed script for initial demo data."""

import asyncio
from typing import Optional

from skill_exchange.config import Settings, get_settings
from skill_exchange.errors import ConfigurationError
from skill_exchange.models import ConnectionCreate, ConnectionStatus, SkillCreate
from skill_exchange.repositories import build_storage

SKILLS = [
    {"name": "Alice", "can_teach": "Guitar", "wants_to_learn": "Piano"},
    {"name": "Bob", "can_teach": "Piano", "wants_to_learn": "Spanish"},
    {"name": "Carmen", "can_teach": "Spanish", "wants_to_learn": "Python"},
    {"name": "Dmitri", "can_teach": "Python", "wants_to_learn": "Guitar"},
]


async def seed_data(settings: Optional[Settings] = None) -> None:
    """Populate the configured database with demo skills and connections."""
    settings = settings or get_settings()
    if settings.storage_backend == "memory":
        raise ConfigurationError(
            "Seeding the memory backend has no lasting effect; "
            "set STORAGE_BACKEND=database and DATABASE_URL"
        )

    storage = build_storage(settings)
    await storage.connect()

    try:
        skills = [await storage.create_skill(SkillCreate(**s)) for s in SKILLS]
        print(f"🎓 Created {len(skills)} skills")

        # Each member asks the next one in line to teach them
        connections = []
        for learner, teacher in zip(skills, skills[1:] + skills[:1]):
            connections.append(
                await storage.create_connection(
                    ConnectionCreate(
                        from_skill_id=learner.id,
                        to_skill_id=teacher.id,
                        message=f"Hi {teacher.name}, I'd love to learn {teacher.can_teach}!",
                    )
                )
            )
        print(f"🤝 Created {len(connections)} connection requests")

        await storage.update_connection_status(connections[0].id, ConnectionStatus.ACCEPTED)
        await storage.update_connection_status(connections[1].id, ConnectionStatus.REJECTED)
        print("✅ Answered 2 requests")
    finally:
        await storage.disconnect()


if __name__ == "__main__":
    asyncio.run(seed_data())
