from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent

# ----------------------------------------------------------------------
# Core version & requirements (the library itself)
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements_lib = [
    r.strip()
    for r in (BASE_DIR / "requirements_lib.txt").read_text().splitlines()
    if r.strip()
]

# ----------------------------------------------------------------------
# API‑specific requirements
# ----------------------------------------------------------------------
requirements_api = [
    r.strip()
    for r in (BASE_DIR / "requirements.txt").read_text().splitlines()
    if r.strip()
]

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "api": requirements_api,
    "test": requirements_api + ["pytest>=7.4"],
}

# ----------------------------------------------------------------------
setup(
    name="llm-summarizer",
    version=version,
    description="LLM Summarizer – Azure OpenAI summarization library and REST API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=find_packages(
        where=".",
        include=[
            "llm_summarizer_lib*",
            "llm_summarizer_api*",
        ],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=requirements_lib + ["flask>=3.0"],
    extras_require=extras,
    entry_points={
        "console_scripts": [
            "llm-summarizer-api=llm_summarizer_api.rest_api:main",
        ]
    },
)
