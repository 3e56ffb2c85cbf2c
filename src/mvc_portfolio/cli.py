"""Command line tools for MVC Portfolio.

Usage::

    mvc-portfolio setup-env
    mvc-portfolio init-db
    mvc-portfolio test-connection
    mvc-portfolio show-users --base-url http://localhost:8000
    mvc-portfolio serve --reload
"""

import logging
import shutil
from typing import Tuple

import click
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mvc_portfolio import config
from mvc_portfolio.core.database import SessionLocal, get_engine, init_db, is_database_configured
from mvc_portfolio.core.exceptions import PortfolioError
from mvc_portfolio.core.logging_config import setup_logging
from mvc_portfolio.services import PostService, UserService
from mvc_portfolio.utils.post_manager import PostManager
from mvc_portfolio.utils.sample_data import SAMPLE_POSTS, SAMPLE_USERS
from mvc_portfolio.utils.user_manager import UserManager

logger = logging.getLogger(__name__)

ENV_TEMPLATE = """# Database connection string, e.g. the Postgres URL of your hosted project
# Leave empty to serve sample data.
DATABASE_URL=
DATABASE_ECHO=false

# Server
API_HOST=0.0.0.0
API_PORT=8000
APP_ENV=development
LOG_LEVEL=INFO

# Public URL of the site (optional)
SITE_URL=

# Comma-separated list, * allows every origin
CORS_ALLOWED_ORIGINS=*
"""

NEXT_STEPS = """Next steps:
1. Create a Postgres database (any hosted provider or a local server)
2. Put its connection string in DATABASE_URL in .env
3. Run `mvc-portfolio init-db` to create the tables
4. Run `mvc-portfolio test-connection` to check access and add sample data
5. Start the development server: `mvc-portfolio serve --reload`
"""


def seed_sample_data(db: Session) -> Tuple[int, int]:
    """Insert the sample users and posts into an empty database.

    Returns:
        Number of users and posts created.
    """
    users = UserManager(db)
    posts = PostManager(db)
    for user in SAMPLE_USERS:
        users.create(
            {
                "id": user.id,
                "name": user.name,
                "email": user.email,
                "role": user.role,
                "is_active": user.is_active,
            }
        )
    for post in SAMPLE_POSTS:
        posts.create(
            {
                "id": post.id,
                "title": post.title,
                "content": post.content,
                "author_id": post.author_id,
                "published": post.published,
                "tags": list(post.tags),
            }
        )
    logger.info("Seeded %d users and %d posts", len(SAMPLE_USERS), len(SAMPLE_POSTS))
    return len(SAMPLE_USERS), len(SAMPLE_POSTS)


def _require_database() -> None:
    if not is_database_configured():
        click.secho("❌ DATABASE_URL is not set. Run `mvc-portfolio setup-env` first.", fg="red")
        raise SystemExit(1)


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL.")
def cli(log_level):
    """Manage the MVC Portfolio service."""
    setup_logging(log_level)


@cli.command("setup-env")
def setup_env():
    """Create .env from .env.example (or a template)."""
    if config.ENV_FILE.exists():
        click.secho("⚠️  .env already exists. Update it manually.", fg="yellow")
        click.echo("   Required variables:\n   - DATABASE_URL\n")
    elif config.ENV_EXAMPLE_FILE.exists():
        shutil.copyfile(config.ENV_EXAMPLE_FILE, config.ENV_FILE)
        click.secho("✅ Created .env from .env.example", fg="green")
    else:
        config.ENV_FILE.write_text(ENV_TEMPLATE, encoding="utf-8")
        click.secho("✅ Created .env template", fg="green")
    click.echo("")
    click.echo(NEXT_STEPS)


@cli.command("init-db")
def init_db_command():
    """Create the users and posts tables."""
    _require_database()
    try:
        init_db()
    except SQLAlchemyError as e:
        click.secho(f"❌ Failed to create tables: {e}", fg="red")
        raise SystemExit(1)
    click.secho("✅ Tables created", fg="green")


@cli.command("test-connection")
def test_connection():
    """Connect, list a few users and seed sample data into an empty database."""
    _require_database()
    click.echo("🔧 Testing database connection...\n")
    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
        init_db()
    except SQLAlchemyError as e:
        click.secho(f"❌ Connection failed: {e}", fg="red")
        raise SystemExit(1)

    click.secho("✅ Successfully connected!", fg="green")
    db = SessionLocal()
    try:
        page = UserManager(db).find_with_pagination(1, 5)
        click.echo(f"📊 Found {page.total} users in database:")
        for index, user in enumerate(page.data, start=1):
            click.echo(f"   {index}. {user.name} ({user.email}) - {user.role}")

        if page.total == 0:
            click.echo("\n📝 No users found. Creating sample data...")
            user_count, post_count = seed_sample_data(db)
            click.secho(f"✅ Created {user_count} users and {post_count} posts", fg="green")
    except PortfolioError as e:
        click.secho(f"❌ {e}", fg="red")
        raise SystemExit(1)
    finally:
        db.close()


@cli.command("show-users")
@click.option("--base-url", default=None, help="Server root, defaults to SITE_URL or localhost.")
@click.option("--limit", default=config.DEFAULT_PAGE_SIZE, show_default=True)
def show_users(base_url, limit):
    """List users through the REST API."""
    response = UserService(base_url).get_users(limit=limit)
    if not response.get("success"):
        click.secho(f"❌ {response.get('error')}", fg="red")
        raise SystemExit(1)
    page = response["data"]
    click.echo(f"👥 {page['total']} users")
    if response.get("message"):
        click.echo(f"   ({response['message']})")
    for user in page["data"]:
        status = "active" if user["isActive"] else "inactive"
        click.echo(f"   - {user['name']} <{user['email']}> [{user['role']}, {status}]")


@cli.command("show-posts")
@click.option("--base-url", default=None, help="Server root, defaults to SITE_URL or localhost.")
@click.option("--limit", default=config.DEFAULT_PAGE_SIZE, show_default=True)
def show_posts(base_url, limit):
    """List posts through the REST API."""
    response = PostService(base_url).get_posts(limit=limit)
    if not response.get("success"):
        click.secho(f"❌ {response.get('error')}", fg="red")
        raise SystemExit(1)
    page = response["data"]
    click.echo(f"📝 {page['total']} posts")
    if response.get("message"):
        click.echo(f"   ({response['message']})")
    for post in page["data"]:
        state = "published" if post["published"] else "draft"
        tags = ", ".join(post.get("tags") or [])
        click.echo(f"   - {post['title']} [{state}] {tags}")


@cli.command("serve")
@click.option("--host", default=config.API_HOST, show_default=True)
@click.option("--port", default=config.API_PORT, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host, port, reload):
    """Run the web server with uvicorn."""
    import uvicorn

    uvicorn.run("mvc_portfolio.app:app", host=host, port=port, reload=reload)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
