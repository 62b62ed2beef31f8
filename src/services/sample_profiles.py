"""Sample directory entries and the startup seeding routine."""

import logging

from src.models.profile import Profile, ProfileCreate
from src.services.profile_store import ProfileStore

logger = logging.getLogger(__name__)

SAMPLE_PROFILES: tuple[ProfileCreate, ...] = (
    {
        "name": "John Doe",
        "title": "Senior Software Developer",
        "company": "Acme Inc.",
        "location": "New York",
        "description": (
            "Senior Software Developer with 8+ years of experience in frontend and backend "
            "technologies. Specialized in building scalable web applications using React, "
            "Node.js, and cloud services."
        ),
        "email": "john.doe@example.com",
        "phone": "(555) 123-4567",
        "website": "johndoe.com",
        "linkedin": "linkedin.com/in/johndoe",
        "experience": "8+ years",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "image_url": "https://randomuser.me/api/portraits/men/1.jpg",
    },
    {
        "name": "Emily Johnson",
        "title": "UX/UI Designer",
        "company": "Design Studio",
        "location": "San Francisco",
        "description": (
            "UX/UI Designer passionate about creating intuitive and accessible user "
            "experiences for web and mobile applications."
        ),
        "email": "emily.j@example.com",
        "phone": "(555) 234-5678",
        "website": "emilyjdesign.com",
        "linkedin": "linkedin.com/in/emilyjohnson",
        "experience": "5 years",
        "latitude": 37.7749,
        "longitude": -122.4194,
        "image_url": "https://randomuser.me/api/portraits/women/2.jpg",
    },
    {
        "name": "Michael Chang",
        "title": "Product Manager",
        "company": "Global Finance",
        "location": "London",
        "description": (
            "Product Manager with extensive experience in fintech and e-commerce platforms. "
            "Strong focus on metrics-driven decisions and user-centered design."
        ),
        "email": "michael.c@example.com",
        "phone": "(555) 345-6789",
        "website": "michaelchang.io",
        "linkedin": "linkedin.com/in/michaelchang",
        "experience": "6 years",
        "latitude": 51.5074,
        "longitude": -0.1278,
        "image_url": "https://randomuser.me/api/portraits/men/3.jpg",
    },
    {
        "name": "Sarah Martinez",
        "title": "Data Scientist",
        "company": "Tech Solutions",
        "location": "Berlin",
        "description": (
            "Data Scientist specializing in machine learning algorithms and predictive "
            "modeling. Experienced in implementing solutions for business intelligence "
            "and analytics."
        ),
        "email": "sarah.m@example.com",
        "phone": "(555) 456-7890",
        "website": "sarahmartinez.dev",
        "linkedin": "linkedin.com/in/sarahmartinez",
        "experience": "4 years",
        "latitude": 52.5200,
        "longitude": 13.4050,
        "image_url": "https://randomuser.me/api/portraits/women/4.jpg",
    },
)


async def seed_sample_profiles(store: ProfileStore) -> list[Profile]:
    """Insert the sample profiles if the store holds none.

    Args:
        store: Store to seed.

    Returns:
        list[Profile]: The inserted profiles, empty if the store already had data.
    """
    if await store.list_profiles():
        logger.info("Profile store already populated, skipping sample profiles")
        return []

    logger.info("Inserting %d sample profiles", len(SAMPLE_PROFILES))
    return [await store.create_profile(profile) for profile in SAMPLE_PROFILES]
