"""Static content of the portfolio page."""

from typing import Any, Dict, List

SKILLS: List[Dict[str, Any]] = [
    {"name": "FastAPI", "level": 90, "category": "Backend"},
    {"name": "Python", "level": 95, "category": "Language"},
    {"name": "SQLAlchemy", "level": 85, "category": "Database"},
    {"name": "Jinja2", "level": 80, "category": "Frontend"},
    {"name": "Pydantic", "level": 85, "category": "Backend"},
    {"name": "PostgreSQL", "level": 75, "category": "Database"},
    {"name": "Docker", "level": 70, "category": "Tools"},
    {"name": "Git", "level": 85, "category": "Tools"},
]

PROJECTS: List[Dict[str, Any]] = [
    {
        "title": "MVC Architecture Demo",
        "description": (
            "A Model-View-Controller implementation with FastAPI, SQLAlchemy "
            "and server-rendered templates"
        ),
        "technologies": ["FastAPI", "SQLAlchemy", "Jinja2", "PostgreSQL"],
        "link": "/",
        "github": "#",
        "icon": "🚀",
    },
    {
        "title": "E-Commerce Platform",
        "description": (
            "Full-stack e-commerce solution with user authentication, product "
            "management, and payment integration"
        ),
        "technologies": ["Python", "PostgreSQL", "Redis", "Stripe"],
        "link": "#",
        "github": "#",
        "icon": "🛒",
    },
    {
        "title": "Task Management App",
        "description": (
            "Collaborative task management application with real-time updates "
            "and team collaboration features"
        ),
        "technologies": ["FastAPI", "WebSockets", "PostgreSQL"],
        "link": "#",
        "github": "#",
        "icon": "✅",
    },
]

EXPERIENCES: List[Dict[str, Any]] = [
    {
        "role": "Full Stack Developer",
        "company": "Tech Company",
        "period": "2023 - Present",
        "description": (
            "Developed and maintained web applications using modern technologies. "
            "Led team of 3 developers."
        ),
        "achievements": [
            "Built scalable web applications serving 10K+ users",
            "Improved application performance by 40%",
            "Implemented CI/CD pipelines reducing deployment time by 60%",
        ],
    },
    {
        "role": "Backend Developer",
        "company": "Startup Inc",
        "period": "2021 - 2023",
        "description": "Designed and built REST APIs and data pipelines for web applications.",
        "achievements": [
            "Developed 15+ production API services",
            "Reduced average response time by 35%",
            "Collaborated with the frontend team on API contracts",
        ],
    },
]


def skills_by_category() -> Dict[str, List[Dict[str, Any]]]:
    """Group skills by category, keeping declaration order."""
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for skill in SKILLS:
        grouped.setdefault(skill["category"], []).append(skill)
    return grouped
