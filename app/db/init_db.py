# app/db/init_db.py
from sqlalchemy.orm import Session

from app.core.logging import logger
from app.core.security import hash_password
from app.models.comment import Comment
from app.models.discussion import Discussion
from app.models.team import Team
from app.models.user import User, UserRole

SEED_PASSWORD = "password123"

DISCUSSION_TOPICS = [
    ("Welcome to the platform!", "This is our first discussion. Feel free to share your thoughts and ideas."),
    ("Project Planning", "Let's discuss our upcoming project milestones and deliverables."),
    ("Tech Stack Discussion", "What technologies should we use for our next project?"),
    ("Code Review Guidelines", "Establishing best practices for code reviews and collaboration."),
    ("Performance Optimization", "How can we improve our application's performance and scalability?"),
    ("Security Best Practices", "Discussion on implementing security measures and protecting user data."),
    ("API Design Standards", "Establishing consistent patterns for our REST API endpoints."),
    ("Testing Strategy", "How should we approach unit testing, integration testing, and e2e testing?"),
    ("Deployment Pipeline", "Improving our CI/CD process and deployment automation."),
    ("Documentation Standards", "Creating comprehensive documentation for our codebase."),
    ("Error Handling Strategies", "How to properly handle and log errors across the application."),
    ("Caching Strategy", "Optimizing performance through effective caching mechanisms."),
]

COMMENT_TEXTS = [
    "Great to be here! Looking forward to collaborating.",
    "I think we should prioritize this feature first.",
    "This is a really important topic for our team.",
    "I have some experience with this, happy to help.",
    "We should schedule a meeting to discuss this further.",
    "I have some concerns about this approach.",
    "I can take the lead on this initiative.",
]


def init_db(db: Session) -> None:
    """Initialize the database with seed data"""
    # Check if we already have data
    existing_user = db.query(User).first()
    if existing_user:
        logger.info("Database already contains data, skipping initialization")
        return

    logger.info("Creating initial data")
    password_hash = hash_password(SEED_PASSWORD)

    acme = Team(name="Acme Corp", description="A leading technology company")
    tech = Team(name="Tech Innovators", description="Innovation at its best")
    db.add_all([acme, tech])
    db.flush()  # Flush to get team IDs

    def make_user(email, first_name, last_name, role, team, bio):
        user = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
            role=role,
            team_id=team.id,
            bio=bio,
        )
        db.add(user)
        return user

    acme_admin = make_user("admin@acme.com", "John", "Doe", UserRole.ADMIN, acme, "System administrator")
    acme_user = make_user("jane@acme.com", "Jane", "Smith", UserRole.USER, acme, "Frontend developer")
    tech_admin = make_user("bob@tech.com", "Bob", "Johnson", UserRole.ADMIN, tech, "Backend developer")
    tech_user = make_user("alice@tech.com", "Alice", "Brown", UserRole.USER, tech, "Product designer")
    db.flush()  # Flush to get user IDs

    # Discussions alternate between the teams and are always written by that team's admin
    members = {acme.id: (acme_admin, acme_user), tech.id: (tech_admin, tech_user)}
    for i, (title, body) in enumerate(DISCUSSION_TOPICS):
        team = acme if i % 2 == 0 else tech
        admin, member = members[team.id]
        discussion = Discussion(title=title, body=body, author_id=admin.id, team_id=team.id)
        db.add(discussion)
        db.flush()

        if i < len(COMMENT_TEXTS):
            db.add(Comment(body=COMMENT_TEXTS[i], author_id=member.id, discussion_id=discussion.id))

    # Commit all changes
    db.commit()

    logger.info(f"Created teams: {acme.name}, {tech.name}")
    logger.info(f"Created {len(DISCUSSION_TOPICS)} discussions")
    logger.info(f"Sample logins (password '{SEED_PASSWORD}'): admin@acme.com, jane@acme.com, bob@tech.com, alice@tech.com")
    logger.info("Initial data created successfully")
