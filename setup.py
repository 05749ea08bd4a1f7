from setuptools import setup, find_packages

setup(
    name="team_discussions_api",
    version="0.1.0",
    description="Team-scoped discussion board REST API",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.110,<0.116",
        "uvicorn>=0.23.2",
        "pydantic>=2.5",
        "pydantic-settings>=2.0.3",
        "email-validator>=2.0.0",
        "python-jose>=3.3.0",
        "bcrypt>=4.0",
        "sqlalchemy>=2.0.20",
        "psycopg2-binary>=2.9.7",
        "slowapi>=0.1.9,<0.2",
        "loguru>=0.7.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "httpx>=0.25",
        ],
    },
)
