from setuptools import setup, find_packages

setup(
    name="profgui",
    version="0.1",
    packages=find_packages(include=["profgui", "profgui.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        # passlib 1.7.4 breaks on bcrypt 5 (72-byte check during backend probe)
        "bcrypt<5",
        "pydantic[email]>=2",
        "pydantic-settings",
        "python-dotenv",
        "alembic",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
