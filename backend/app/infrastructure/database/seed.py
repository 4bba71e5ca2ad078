"""Startup seed data: a default admin user and the sample campus articles.

Idempotent — only inserts when the admin user or the articles are missing.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import Article, ArticleStatus, User
from app.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyUserRepository,
)

logger = logging.getLogger(__name__)

ADMIN_NAME = "Admin User"
ADMIN_EMAIL = "admin@proto.com"

SAMPLE_ARTICLES: list[dict[str, str]] = [
    {
        "title": "Campus Innovation Lab Opens New Research Wing",
        "body": "The university's new research facility promises to revolutionize student research opportunities with state-of-the-art equipment and collaborative spaces.",
        "tag": "Campus",
    },
    {
        "title": "Basketball Team Wins Championship",
        "body": "Our university basketball team secured their first championship in five years with a thrilling overtime victory. The final score was 78-75.",
        "tag": "Sports",
    },
    {
        "title": "New Computer Science Program Launched",
        "body": "The university introduces a cutting-edge AI and Machine Learning specialization track for computer science students.",
        "tag": "Campus",
    },
    {
        "title": "Spring Festival 2024: A Grand Success",
        "body": "Students and faculty came together for the annual spring festival featuring cultural performances, food stalls, and art exhibitions.",
        "tag": "Events",
    },
    {
        "title": "Student Develops Revolutionary App",
        "body": "Computer science student creates an app that helps students find study groups and collaborative learning opportunities.",
        "tag": "Opinion",
    },
    {
        "title": "Breakthrough in Renewable Energy Research",
        "body": "University researchers make significant progress in developing more efficient solar panel technology with improved efficiency rates.",
        "tag": "Campus",
    },
    {
        "title": "New Student Center Opens Doors",
        "body": "The newly constructed student center offers modern facilities including study rooms, recreational areas, and dining options.",
        "tag": "Campus",
    },
    {
        "title": "Environmental Club Launches Campus Green Initiative",
        "body": "Student-led environmental group introduces new recycling programs and sustainability workshops to promote eco-friendly practices on campus.",
        "tag": "Campus",
    },
    {
        "title": "Drama Society's Winter Performance Sold Out",
        "body": "The annual winter theater production received rave reviews with all shows completely sold out. Students showcased exceptional talent in acting and stage production.",
        "tag": "Events",
    },
    {
        "title": "Career Fair Attracts Top Tech Companies",
        "body": "Over 50 leading technology companies participated in this year's career fair, offering internships and full-time positions to graduating students.",
        "tag": "Campus",
    },
    {
        "title": "University Debate Team Takes National Title",
        "body": "Our debate team emerged victorious in the national championship, defeating teams from prestigious universities across the country.",
        "tag": "Sports",
    },
    {
        "title": "New Library Wing Features Smart Study Pods",
        "body": "The library expansion includes innovative study spaces with advanced technology, soundproof pods, and collaborative work areas for students.",
        "tag": "Campus",
    },
    {
        "title": "Medical Research Team Makes COVID-19 Breakthrough",
        "body": "University researchers contribute to significant advances in understanding virus transmission patterns and developing improved prevention strategies.",
        "tag": "Opinion",
    },
    {
        "title": "International Food Festival Celebrates Diversity",
        "body": "Students from over 40 countries showcased their cultural heritage through traditional cuisine, music, and performances at the annual diversity celebration.",
        "tag": "Events",
    },
    {
        "title": "Robotics Club Wins Regional Competition",
        "body": "The university robotics team secured first place in the regional competition with their innovative autonomous robot design and flawless performance.",
        "tag": "Opinion",
    },
]

# Sample images shipped with the deployment, cycled across the articles.
_SAMPLE_IMAGES = (
    "/uploads/samples/sample-1.png",
    "/uploads/samples/sample-2.jpg",
    "/uploads/samples/sample-3.jpg",
)


async def seed_defaults(session: AsyncSession) -> int:
    """Create the admin user and sample articles if absent.

    Returns the number of articles inserted.
    """
    users = SQLAlchemyUserRepository(session)
    articles = SQLAlchemyArticleRepository(session)

    admin = await users.get_by_email(ADMIN_EMAIL)
    if admin is None:
        admin = await users.create(User(name=ADMIN_NAME, email=ADMIN_EMAIL))
        logger.info("Default admin user created: %s", ADMIN_EMAIL)

    if await articles.count() > 0:
        logger.debug("Sample articles already present")
        return 0

    for index, sample in enumerate(SAMPLE_ARTICLES):
        await articles.create(
            Article(
                title=sample["title"],
                body=sample["body"],
                tag=sample["tag"],
                image_path=_SAMPLE_IMAGES[index % len(_SAMPLE_IMAGES)],
                author_name=admin.name,
                user_id=admin.id,
                status=ArticleStatus.APPROVED,
            )
        )
    logger.info("Sample articles created successfully (%d)", len(SAMPLE_ARTICLES))
    return len(SAMPLE_ARTICLES)
